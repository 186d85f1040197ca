import pytest
from unsdg.assets import asset_path_for
from unsdg.models import BadgeOptions, ColorSwatch, Image
from unsdg.selector import select_render, select_for

def test_color_only_returns_swatch():
    d = select_render("7", True, 300, "")
    assert isinstance(d, ColorSwatch)
    assert d.width == 300
    assert d.height == 300
    assert d.color_token == "--un-sdg-color-7"
    assert d.label == "Affordable and Clean Energy color only"
    assert d.label.endswith("color only")

def test_image_mode_returns_image():
    d = select_render("7", False, 300, "")
    assert isinstance(d, Image)
    assert d.src.endswith("7.svg")
    assert d.width == 300
    assert d.label == "Affordable and Clean Energy"

def test_defaults_match_logo_badge():
    assert select_render() == select_render("circle", False, 200, "")
    d = select_render()
    assert isinstance(d, Image)
    assert d.src == "lib/svg/circle.svg"
    assert d.width == 200
    assert d.label == "UN Sustainable Development Goals Logo"

def test_override_label_in_both_modes():
    assert select_render("3", False, 100, "Health").label == "Health"
    assert select_render("3", True, 100, "Health").label == "Health color only"

def test_unrecognized_goal_degrades():
    d = select_render("bogus", False, 120, "")
    assert d.label == ""
    assert d.src == "lib/svg/bogus.svg"
    swatch = select_render("bogus", True, 120, "")
    assert swatch.label == " color only"

def test_out_of_range_goal_keeps_raw_path():
    d = select_render("18", False, 200, "")
    assert d.label == ""
    assert d.src.endswith("18.svg")

@pytest.mark.parametrize("width", [0, -5, float("nan"), "wide", True])
def test_invalid_width_falls_back(width):
    assert select_render("1", False, width).width == 200

def test_color_only_accepts_strings():
    assert isinstance(select_render("1", "true"), ColorSwatch)
    assert isinstance(select_render("1", "false"), Image)

def test_configured_defaults(clean_config):
    clean_config.set("badge.goal", "all")
    clean_config.set("badge.width", 64)
    d = select_render()
    assert d.src.endswith("all.svg")
    assert d.width == 64

def test_select_for_options():
    d = select_for(BadgeOptions(goal="5", width=50, color_only=True))
    assert d == select_render("5", True, 50, "")
    assert select_for(BadgeOptions()) == select_render()

def test_asset_path_is_deterministic():
    assert asset_path_for("5") == asset_path_for("5") == "lib/svg/5.svg"
    assert asset_path_for("all", base="https://cdn.example.org/sdg/") == "https://cdn.example.org/sdg/all.svg"
    assert asset_path_for("circle", base="") == "circle.svg"

def test_asset_base_from_config(clean_config):
    clean_config.set("assets.base_url", "/static/sdg")
    assert select_render("2").src == "/static/sdg/2.svg"

def test_descriptor_to_dict():
    assert select_render("9", True, 80).to_dict() == {
        "kind": "color",
        "width": 80,
        "height": 80,
        "color_token": "--un-sdg-color-9",
        "label": "Industry, Innovation, and Infrastructure color only",
    }
    assert select_render("9", False, 80).to_dict()["kind"] == "image"

def test_configured_color_only(clean_config):
    clean_config.set("badge.color_only", True)
    assert isinstance(select_render(), ColorSwatch)
    assert isinstance(select_render("4", None, 100), ColorSwatch)
    # an explicit flag still wins
    assert isinstance(select_render("4", False, 100), Image)

def test_color_only_defaults_to_image():
    assert isinstance(select_render("4", None, 100), Image)

def test_injected_goal_cannot_escape_style():
    from unsdg.render import render_html
    html = render_html(select_render("7); background:url(//x", True, 100))
    assert "url(" not in html
    assert "var(--un-sdg-color-7backgroundurlx)" in html
