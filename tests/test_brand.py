import asyncio

import pytest

from brand_sass.brand import Brand, BrandFont, BrandTypographyOptions, ProjectContext, load_brand
from brand_sass.errors import BrandError, ColorReferenceError


def test_get_color_resolves_through_palette():
    brand = Brand.from_dict({"color": {"palette": {"blue": "#447099"}, "primary": "blue"}})
    assert brand.get_color("primary") == "#447099"
    assert brand.get_color("blue") == "#447099"


def test_get_color_unknown_name_is_returned_unchanged():
    brand = Brand.from_dict({"color": {"palette": {"blue": "#447099"}}})
    assert brand.get_color("background") == "background"
    assert brand.get_color("#123456") == "#123456"


def test_get_color_without_color_section():
    assert Brand.from_dict({}).get_color("primary") == "primary"


def test_get_color_cycle_raises():
    brand = Brand.from_dict({"color": {"primary": "secondary", "secondary": "primary"}})
    with pytest.raises(ColorReferenceError) as exc:
        brand.get_color("primary")
    assert "primary" in str(exc.value)


def test_named_colors_keep_document_order():
    brand = Brand.from_dict({"color": {"foreground": "#111", "palette": {}, "background": "#fff"}})
    assert list(brand.data.color.named()) == ["foreground", "background"]


def test_typography_roles_and_aliases():
    brand = Brand.from_dict({
        "typography": {
            "fonts": ["Arial", {"family": "Fira Code", "source": "bunny"}],
            "base": "Arial",
            "monospace-inline": {"family": "Fira Code", "background-color": "#eee", "line-height": 1.5},
        }
    })
    typography = brand.data.typography
    assert typography.role("base") == "Arial"
    inline = typography.role("monospace-inline")
    assert isinstance(inline, BrandTypographyOptions)
    assert inline.background_color == "#eee"
    assert inline.line_height == 1.5
    assert typography.role("headings") is None
    assert isinstance(brand.fonts[1], BrandFont)
    assert brand.fonts[0] == "Arial"


def test_invalid_brand_raises_brand_error():
    with pytest.raises(BrandError):
        Brand.from_dict({"color": {"palette": ["not", "a", "mapping"]}})


def test_load_brand_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_brand(tmp_path / "_brand.yml")


def test_load_brand_invalid_yaml(tmp_path):
    path = tmp_path / "_brand.yml"
    path.write_text("color: [unclosed", encoding="utf-8")
    with pytest.raises(BrandError):
        load_brand(path)


def test_load_brand_requires_mapping(tmp_path):
    path = tmp_path / "_brand.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(BrandError):
        load_brand(path)


def test_load_brand_directories(write_brand, tmp_path):
    path = write_brand({"color": {"primary": "#000"}}, subdir="brand")
    brand = load_brand(path, project_dir=tmp_path)
    assert brand.brand_dir == (tmp_path / "brand").resolve()
    assert brand.project_dir == tmp_path.resolve()


def test_resolve_brand_prefers_project_brand(write_brand, tmp_path):
    write_brand({"color": {"primary": "#111111"}})
    write_brand({"color": {"primary": "#222222"}}, subdir="docs")
    brand = asyncio.run(ProjectContext(tmp_path).resolve_brand("docs/index.qmd"))
    assert brand.get_color("primary") == "#111111"


def test_resolve_brand_next_to_document(write_brand, tmp_path):
    write_brand({"color": {"primary": "#222222"}}, subdir="docs")
    brand = asyncio.run(ProjectContext(tmp_path).resolve_brand("docs/index.qmd"))
    assert brand.get_color("primary") == "#222222"


def test_resolve_brand_absent(tmp_path):
    assert asyncio.run(ProjectContext(tmp_path).resolve_brand("index.qmd")) is None
    assert asyncio.run(ProjectContext(tmp_path).resolve_brand()) is None
