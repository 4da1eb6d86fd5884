"""
layers.py — Assemble the brand Sass bundle layers for an output format.

Layer order matters: every declaration is `!default`, so the first layer to
set a variable wins at compile time. The order is always

  1. Bootstrap defaults   (HTML only, when defaults.bootstrap exists)
  2. colors               (when the brand declares color)
  3. typography           (when the brand declares typography)

Usage:
  layers = await brand_reveal_sass_bundle_layers("slides.qmd", ProjectContext("."))
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .bootstrap import brand_bootstrap_bundle
from .brand import Brand, ProjectContext
from .bundles import SassBundleLayers
from .colors import DEFAULT_COLOR_NAME_MAP, brand_color_bundle
from .typography import brand_typography_bundle

logger = logging.getLogger(__name__)

BOOTSTRAP_DEPENDENCY = "bootstrap"
REVEAL_THEME_KEY = "reveal-theme"
HTML_BRAND_KEY = "brand"
SASS_BUNDLES = "sass-bundles"


def build_sass_bundle_layers(
    brand: Optional[Brand],
    key: str,
    name_map: Optional[Dict[str, str]] = None,
    bootstrap: bool = False,
) -> List[SassBundleLayers]:
    """Layers for an already resolved brand; [] when there is none."""
    layers: List[SassBundleLayers] = []
    if brand is None:
        return layers

    if brand.data.color is not None:
        layers.append(brand_color_bundle(brand, key, name_map or {}))
    if brand.data.typography is not None:
        layers.append(brand_typography_bundle(brand, key))
    if bootstrap and (brand.data.defaults or {}).get("bootstrap") is not None:
        # Goes in front so its !default values are seen first
        layers.insert(0, brand_bootstrap_bundle(brand, key))

    logger.info(f"Built {len(layers)} brand layer(s) for {key}")
    return layers


async def brand_sass_bundle_layers(
    file_name: Optional[str],
    project: ProjectContext,
    key: str,
    name_map: Optional[Dict[str, str]] = None,
) -> List[SassBundleLayers]:
    brand = await project.resolve_brand(file_name)
    return build_sass_bundle_layers(brand, key, name_map)


async def brand_bootstrap_sass_bundle_layers(
    file_name: Optional[str],
    project: ProjectContext,
    key: str,
    name_map: Optional[Dict[str, str]] = None,
) -> List[SassBundleLayers]:
    brand = await project.resolve_brand(file_name)
    return build_sass_bundle_layers(brand, key, name_map, bootstrap=True)


async def brand_bootstrap_sass_bundles(
    file_name: Optional[str],
    project: ProjectContext,
    key: str,
) -> List[SassBundleLayers]:
    layers = await brand_bootstrap_sass_bundle_layers(file_name, project, key, DEFAULT_COLOR_NAME_MAP)
    return [layer.with_dependency(BOOTSTRAP_DEPENDENCY) for layer in layers]


async def brand_reveal_sass_bundle_layers(
    file_name: Optional[str],
    project: ProjectContext,
) -> List[SassBundleLayers]:
    return await brand_sass_bundle_layers(file_name, project, REVEAL_THEME_KEY, DEFAULT_COLOR_NAME_MAP)


async def brand_sass_format_extras(
    file_name: Optional[str],
    project: ProjectContext,
) -> Dict[str, Any]:
    """HTML format extras carrying the brand bundles, or {} without a brand."""
    bundles = await brand_bootstrap_sass_bundles(file_name, project, HTML_BRAND_KEY)
    if not bundles:
        return {}
    return {"html": {SASS_BUNDLES: bundles}}
