from unsdg.render import render_html, render_svg, render_stylesheet, render_gallery, color_for
from unsdg.selector import select_render

def test_swatch_html_matches_component_markup():
    html = render_html(select_render("7", True, 300))
    assert html == (
        '<div class="color wrapper" style="--width: 300px; --goal-color: var(--un-sdg-color-7)" '
        'label="Affordable and Clean Energy color only"></div>'
    )

def test_image_html():
    html = render_html(select_render("7", False, 300))
    assert '<div class="svg wrapper" style="--width: 300px; --goal-color: var(--un-sdg-color-7)">' in html
    assert 'src="lib/svg/7.svg"' in html
    assert 'alt="Affordable and Clean Energy"' in html
    assert 'loading="lazy"' in html
    assert 'fetchpriority="low"' in html
    assert 'width="300"' in html

def test_labels_are_escaped():
    html = render_html(select_render("1", False, 100, '<b>"x"</b>'))
    assert "<b>" not in html
    assert "&lt;b&gt;" in html

def test_float_widths_are_compact():
    assert "--width: 120px" in render_html(select_render("2", True, 120.0))
    assert "--width: 120.5px" in render_html(select_render("2", True, 120.5))

def test_color_for_uses_palette_and_fallback():
    assert color_for("--un-sdg-color-1") == "#E5243B"
    assert color_for("--un-sdg-color-all") == "white"
    assert color_for("--un-sdg-color-3", {3: "#000000"}) == "#000000"

def test_swatch_svg_is_square_and_colored():
    svg = render_svg(select_render("13", True, 50))
    assert svg.startswith("<svg")
    assert 'width="50" height="50"' in svg
    assert 'fill="#3F7E44"' in svg
    assert "<title>Climate Action color only</title>" in svg

def test_image_svg_references_artwork():
    svg = render_svg(select_render("all", False, 200))
    assert 'href="lib/svg/all.svg"' in svg
    assert 'aria-label="UN Sustainable Development Goals"' in svg

def test_stylesheet_defines_color_tokens():
    css = render_stylesheet()
    assert "--un-sdg-color-1: #E5243B;" in css
    assert "--un-sdg-color-17: #19486A;" in css
    assert "height: var(--width, 200px);" in css
    assert "var(--goal-color, white)" in css

def test_gallery_contains_every_badge():
    descriptors = [select_render(g, False, 100) for g in ["1", "all", "circle"]]
    page = render_gallery(descriptors, title="Goals")
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>Goals</title>" in page
    assert page.count("<un-sdg>") == 3
    assert 'src="lib/svg/circle.svg"' in page
    assert "--un-sdg-color-5: #FF3A21;" in page
