import argparse
import sys
from pathlib import Path
from unsdg.config import config, UNSDGConfigError

def cmd_init(args):
    """Initializes a default unsdg.config.yaml in the current directory."""
    target = Path.cwd() / "unsdg.config.yaml"
    if target.exists() and not args.force:
        print(f"Error: {target} already exists. Use --force to overwrite.")
        return 1

    try:
        with open(target, "w", encoding="utf-8") as f:
            f.write(config.to_yaml())
    except OSError as e:
        print(f"Error writing configuration: {e}")
        return 1
    print(f"✅ Created default configuration: {target}")
    return 0

def cmd_show(args):
    """Shows the effective configuration."""
    print(config.to_yaml())
    return 0

def cmd_validate(args):
    """Validates the current configuration."""
    try:
        config.reload()
    except UNSDGConfigError as e:
        print(f"❌ Configuration error: {e}")
        return 1

    width = config.get("badge.width")
    if isinstance(width, bool) or not isinstance(width, (int, float)) or width <= 0:
        print(f"❌ Configuration error: badge.width must be a positive number, got {width!r}")
        return 1
    if not isinstance(config.get("palette"), dict):
        print("❌ Configuration error: palette must be a mapping of goal to color")
        return 1

    print("✅ Configuration is valid.")
    return 0

def main():
    parser = argparse.ArgumentParser(prog="unsdg config", description="Manage unsdg configuration")
    subparsers = parser.add_subparsers(dest="subcommand", help="Config subcommands")

    parser_init = subparsers.add_parser("init", help="Initialize a default configuration file")
    parser_init.add_argument("-f", "--force", action="store_true", help="Force overwrite existing config")

    subparsers.add_parser("show", help="Show effective configuration")
    subparsers.add_parser("validate", help="Validate configuration")

    args = parser.parse_args(sys.argv[1:])

    if args.subcommand == "init":
        return cmd_init(args)
    elif args.subcommand == "show":
        return cmd_show(args)
    elif args.subcommand == "validate":
        return cmd_validate(args)
    else:
        parser.print_help()
        return 1

if __name__ == "__main__":
    sys.exit(main())
