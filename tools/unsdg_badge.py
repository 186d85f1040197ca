#!/usr/bin/env python3
"""unsdg_badge.py — Render a single UN SDG badge.

Usage:
  python3 tools/unsdg_badge.py 7 --width 300 --format svg --out goal-7.svg
  python3 tools/unsdg_badge.py all --color-only --format json
"""

import argparse
import json
import sys

from unsdg.goals import known_goals
from unsdg.render import render_html, render_svg
from unsdg.selector import select_render
from unsdg.utils import logger, setup_logging

def render(goal, color_only=None, width=None, label="", fmt="html") -> str:
    descriptor = select_render(goal, color_only, width, label)
    if fmt == "json":
        return json.dumps(descriptor.to_dict(), indent=2)
    if fmt == "svg":
        return render_svg(descriptor)
    return render_html(descriptor)

def main():
    ap = argparse.ArgumentParser(description="Render a UN SDG badge.")
    ap.add_argument("goal", nargs="?", default=None, help=f"Goal identifier ({', '.join(known_goals())})")
    ap.add_argument("--label", default="", help="Accessible label overriding the goal title")
    ap.add_argument("--width", type=float, default=None, help="Width in pixels (default: 200)")
    ap.add_argument("--color-only", action="store_true", default=None, help="Render a flat color swatch instead of artwork (default: badge.color_only)")
    ap.add_argument("--format", choices=["html", "svg", "json"], default="html", help="Output format")
    ap.add_argument("--out", help="Output filename (default: stdout)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args()

    setup_logging("DEBUG" if args.verbose else None)
    output = render(args.goal, args.color_only, args.width, args.label, args.format)

    if not args.out:
        print(output)
        return 0

    try:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(output + "\n")
    except OSError as e:
        logger.error(f"Error writing {args.out}: {e}")
        print(f"Error writing file: {e}")
        return 1
    print(f"Successfully generated badge: {args.out}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
