import argparse
import sys
from tools import unsdg_badge, unsdg_gallery, unsdg_config
from unsdg import ui

def main():
    parser = argparse.ArgumentParser(prog="unsdg", description="UN SDG badge toolkit")
    subparsers = parser.add_subparsers(dest="command", help="unsdg commands")

    # Mapping of commands to their respective main functions
    commands = {
        "badge": unsdg_badge.main,
        "gallery": unsdg_gallery.main,
        "config": unsdg_config.main,
        "ui": ui.main
    }
    for name in commands:
        subparsers.add_parser(name, add_help=False)

    if len(sys.argv) < 2:
        parser.print_help()
        return 1

    cmd = sys.argv[1]
    if cmd in commands:
        # Patch sys.argv for the subcommand
        sys.argv = [f"unsdg {cmd}"] + sys.argv[2:]
        return commands[cmd]()

    print(f"Unknown command: {cmd}")
    parser.print_help()
    return 1

if __name__ == "__main__":
    sys.exit(main())
