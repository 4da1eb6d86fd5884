"""
colors.py — Sass and CSS color variables from `_brand.yml` color.

  palette entry  blue: "#447099"   →  $brand-blue: #447099 !default;
                                      --brand-blue: #447099;   (inside :root)
  semantic color primary: blue     →  $primary: #447099 !default;
  format alias   body-bg → background, when background is set
                                   →  $body-bg: <background> !default;
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from .brand import Brand
from .bundles import SassBundleLayers, SassLayer, annotated, css_property, sass_variable

# Format-specific Sass variable → canonical brand color
DEFAULT_COLOR_NAME_MAP: Dict[str, str] = {
    "pre-color": "foreground",
    "body-bg": "background",
    "body-color": "foreground",
    "body-secondary-color": "secondary",
    "body-secondary": "secondary",
    "body-tertiary-color": "tertiary",
    "body-tertiary": "secondary",
}

COLOR_ORIGIN = "_brand.yml color"


def sanitize_color_name(name: str) -> str:
    return re.sub(r"[^a-zA-Z0-9_-]+", "-", name)


def brand_color_bundle(
    brand: Brand,
    key: str,
    name_map: Optional[Dict[str, str]] = None,
) -> SassBundleLayers:
    color = brand.data.color
    palette = color.palette if color else {}

    variables: List[str] = []
    css_variables: List[str] = [":root {"]

    for color_key in palette:
        var = sanitize_color_name(color_key)
        value = brand.get_color(color_key)
        variables.append(sass_variable(f"brand-{var}", value))
        css_variables.append(css_property(f"brand-{var}", value))

    for color_key in (color.named() if color else {}):
        variables.append(sass_variable(color_key, brand.get_color(color_key)))

    # An alias that resolves to its own target name has nothing to override
    for alias, target in (name_map or {}).items():
        resolved = brand.get_color(target)
        if resolved != target:
            variables.append(sass_variable(alias, resolved))

    css_variables.append("}")

    return SassBundleLayers(
        key=key,
        quarto=SassLayer(
            defaults="\n".join(annotated(variables, COLOR_ORIGIN, "/* color variables from _brand.yml */")),
            rules="\n".join(annotated(css_variables, COLOR_ORIGIN, "/* color CSS variables from _brand.yml */")),
        ),
    )
