import argparse
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.responses import HTMLResponse, JSONResponse, Response
import uvicorn

from .config import config
from .goals import known_goals
from .models import BadgeOptions
from .registry import DEFAULT_TAG, components
from .render import render_gallery, render_html, render_stylesheet, render_svg
from .selector import select_for, select_render
from .utils import as_bool, setup_logging

def render_badge(options: BadgeOptions) -> str:
    """Renderer registered for the <un-sdg> tag."""
    return render_html(select_for(options))

if not components.is_defined(DEFAULT_TAG):
    components.define(DEFAULT_TAG, render_badge)

app = FastAPI(title="UN SDG Badge Preview")

def _flag(value: Optional[str]) -> Optional[bool]:
    # absent means the configured badge.color_only
    return None if value is None else as_bool(value)

def _options(goal: Optional[str], label: str, width: Optional[float], color_only: Optional[str]) -> BadgeOptions:
    return BadgeOptions(
        goal=goal if goal is not None else config.get("badge.goal", "circle"),
        label=label,
        width=width,
        color_only=_flag(color_only)
    )

@app.get("/", response_class=HTMLResponse)
async def index(color_only: Optional[str] = Query(None, alias="colorOnly"), width: Optional[float] = None):
    descriptors = [select_render(goal, _flag(color_only), width) for goal in known_goals()]
    return render_gallery(descriptors)

@app.get("/badge", response_class=HTMLResponse)
async def badge(goal: Optional[str] = None, label: str = "", width: Optional[float] = None,
                color_only: Optional[str] = Query(None, alias="colorOnly")):
    renderer = components.get(DEFAULT_TAG)
    return renderer(_options(goal, label, width, color_only))

@app.get("/badge.json")
async def badge_json(goal: Optional[str] = None, label: str = "", width: Optional[float] = None,
                     color_only: Optional[str] = Query(None, alias="colorOnly")):
    descriptor = select_for(_options(goal, label, width, color_only))
    return JSONResponse(content=descriptor.to_dict())

@app.get("/badge.svg")
async def badge_svg(goal: Optional[str] = None, label: str = "", width: Optional[float] = None,
                    color_only: Optional[str] = Query(None, alias="colorOnly")):
    descriptor = select_for(_options(goal, label, width, color_only))
    return Response(content=render_svg(descriptor), media_type="image/svg+xml")

@app.get("/styles.css")
async def styles():
    return Response(content=render_stylesheet(), media_type="text/css")

def main():
    parser = argparse.ArgumentParser(prog="unsdg ui", description="Start the UN SDG badge preview server.")
    parser.add_argument("--host", default=config.get("server.host", "127.0.0.1"), help="Host to bind to")
    parser.add_argument("--port", type=int, default=config.get("server.port", 8080), help="Port to bind to")

    args = parser.parse_args()
    setup_logging()

    print(f"Starting UN SDG badge preview at http://{args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port)
    return 0

if __name__ == "__main__":
    main()
