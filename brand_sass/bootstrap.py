"""
bootstrap.py — Bootstrap variables from `_brand.yml` defaults.bootstrap.

Palette colors named after Bootstrap's own color variables are forwarded
first, then every `defaults.bootstrap` entry except `version`.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .brand import Brand
from .bundles import SassBundleLayers, SassLayer, annotated, sass_variable

# https://getbootstrap.com/docs/5.3/customize/color/#color-sass-maps
BOOTSTRAP_COLOR_VARIABLES = (
    "black",
    "white",
    "blue",
    "indigo",
    "purple",
    "pink",
    "red",
    "orange",
    "yellow",
    "green",
    "teal",
    "cyan",
)


def bootstrap_defaults(brand: Brand) -> Dict[str, Any]:
    return (brand.data.defaults or {}).get("bootstrap") or {}


def brand_bootstrap_bundle(brand: Brand, key: str) -> SassBundleLayers:
    palette = brand.data.color.palette if brand.data.color else {}

    colors: List[str] = [
        sass_variable(name, brand.get_color(name))
        for name in palette
        if name in BOOTSTRAP_COLOR_VARIABLES
    ]
    variables: List[str] = [
        sass_variable(name, value)
        for name, value in bootstrap_defaults(brand).items()
        if name != "version"
    ]

    defaults = annotated(colors, "_brand.yml color.palette", "/* Bootstrap color variables from _brand.yml */")
    defaults += annotated(variables, "_brand.yml defaults.bootstrap", "/* Bootstrap variables from _brand.yml */")
    return SassBundleLayers(key=key, quarto=SassLayer(defaults="\n".join(defaults)))
