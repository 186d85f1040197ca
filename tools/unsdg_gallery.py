#!/usr/bin/env python3
"""unsdg_gallery.py — Write an HTML page showing every goal badge."""

import argparse
import sys

from unsdg.goals import known_goals
from unsdg.render import render_gallery
from unsdg.selector import select_render
from unsdg.utils import logger, setup_logging

def main():
    ap = argparse.ArgumentParser(description="Render every UN SDG badge into one HTML page.")
    ap.add_argument("--width", type=float, default=None, help="Badge width in pixels")
    ap.add_argument("--color-only", action="store_true", default=None, help="Show color swatches instead of artwork (default: badge.color_only)")
    ap.add_argument("--title", default="UN Sustainable Development Goals", help="Page title")
    ap.add_argument("--out", default="sdg-gallery.html", help="Output filename")
    args = ap.parse_args()

    setup_logging()
    descriptors = [select_render(goal, args.color_only, args.width) for goal in known_goals()]
    page = render_gallery(descriptors, title=args.title)

    try:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(page)
    except OSError as e:
        logger.error(f"Error writing {args.out}: {e}")
        print(f"Error writing file: {e}")
        return 1
    print(f"Successfully generated gallery: {args.out} ({len(descriptors)} badges)")
    return 0

if __name__ == "__main__":
    sys.exit(main())
