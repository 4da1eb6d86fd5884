"""
fonts.py — Font weight names, font file formats and font import strings.

  google  →  @import url('https://fonts.googleapis.com/css2?family=Open+Sans:ital,wght@0,400;...');
  bunny   →  @import url('https://fonts.bunny.net/css?family=open-sans:400i,700i,400,700&display=swap');
  file    →  @font-face { ... src: url("fonts/x.woff2") format("woff2"); ... }
"""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union

from .brand import BrandFont, BrandFontFile, FontWeight
from .errors import BrandError, FontFormatError, UnknownFontWeightError

# https://developer.mozilla.org/en-US/docs/Web/CSS/font-weight#common_weight_name_mapping
# 950 is left out on purpose
FONT_WEIGHTS: Dict[str, int] = {
    "thin": 100,
    "extra-light": 200,
    "ultra-light": 200,
    "light": 300,
    "normal": 400,
    "regular": 400,
    "medium": 500,
    "semi-bold": 600,
    "demi-bold": 600,
    "bold": 700,
    "extra-bold": 800,
    "ultra-bold": 800,
    "black": 900,
}

# https://developer.mozilla.org/en-US/docs/Web/CSS/@font-face/src#font_formats
FONT_FORMATS: Dict[str, str] = {
    "otc": "collection",
    "ttc": "collection",
    "woff": "woff",
    "woff2": "woff2",
    "ttf": "truetype",
    "otf": "opentype",
    "svg": "svg",
    "svgz": "svg",
    "eot": "embedded-opentype",
}

DEFAULT_WEIGHTS = [400, 700]
DEFAULT_STYLES = ["normal", "italic"]
DEFAULT_DISPLAY = "swap"


def font_weight_value(weight: FontWeight) -> int:
    """Numeric weight for a keyword like "semi-bold"; numbers pass through."""
    if isinstance(weight, int):
        return weight
    try:
        return FONT_WEIGHTS[weight]
    except KeyError:
        raise UnknownFontWeightError(f"Unknown font weight {weight}", context={"weight": weight}) from None


def font_file_format(file: str) -> str:
    fragments = file.split(".")
    if len(fragments) < 2:
        raise FontFormatError(f"Invalid font file {file}; expected extension.", context={"file": file})
    ext = fragments[-1]
    if ext not in FONT_FORMATS:
        raise FontFormatError(f"Unknown font format {ext} in {file}", context={"file": file})
    return FONT_FORMATS[ext]


# ── Import strings ────────────────────────────────────────────────────────────

def _styles(font: BrandFont) -> List[str]:
    if not font.style:
        return list(DEFAULT_STYLES)
    if isinstance(font.style, str):
        return [font.style]
    return list(font.style)


def _weights(font: BrandFont) -> List[int]:
    if not font.weight:
        return list(DEFAULT_WEIGHTS)
    if isinstance(font.weight, (int, str)):
        return [font_weight_value(font.weight)]
    return [font_weight_value(w) for w in font.weight]


def google_font_import(font: BrandFont) -> str:
    weights = _weights(font)
    if "italic" in _styles(font):
        axes = "ital,wght@" + ";".join(
            [f"0,{w}" for w in weights] + [f"1,{w}" for w in weights]
        )
    else:
        axes = "wght@" + ";".join(str(w) for w in weights)
    family = (font.family or "").replace(" ", "+")
    display = font.display or DEFAULT_DISPLAY
    return f"@import url('https://fonts.googleapis.com/css2?family={family}:{axes}&display={display}');"


def bunny_font_import(font: BrandFont) -> str:
    if not font.family:
        raise BrandError("Bunny font family not specified", context={"font": font.model_dump()})
    weights = _weights(font)
    if "italic" in _styles(font):
        weight_list = ",".join([f"{w}i" for w in weights] + [str(w) for w in weights])
    else:
        weight_list = ",".join(str(w) for w in weights)
    family = font.family.replace(" ", "-")
    display = font.display or DEFAULT_DISPLAY
    return f"@import url('https://fonts.bunny.net/css?family={family}:{weight_list}&display={display}');"


# ── Local font files ──────────────────────────────────────────────────────────

@dataclass
class FontPathResolver:
    """
    Rewrites font paths written relative to `_brand.yml` so they resolve
    from the project root, which is where compiled CSS paths are evaluated.
    """
    project_dir: Path
    brand_dir: Path

    @property
    def correction(self) -> str:
        rel = os.path.relpath(Path(self.brand_dir), Path(self.project_dir))
        return Path(rel).as_posix()

    def compute(self, file: str) -> str:
        if file.startswith("http://") or file.startswith("https://"):
            return file
        if file.startswith("/"):
            return file[1:]
        return posixpath.normpath(posixpath.join(self.correction, file))


def font_face_rules(font: BrandFont, resolver: FontPathResolver) -> List[str]:
    """One @font-face block per file of a `source: file` descriptor."""
    rules: List[str] = []
    display = font.display or DEFAULT_DISPLAY
    for entry in font.files:
        file: BrandFontFile = BrandFontFile(path=entry) if isinstance(entry, str) else entry
        lines = [
            "@font-face {",
            f'  font-family: "{font.family}";',
            f'  src: url("{resolver.compute(file.path)}") format("{font_file_format(file.path)}");',
        ]
        if file.weight is not None:
            lines.append(f"  font-weight: {font_weight_value(file.weight)};")
        if file.style:
            lines.append(f"  font-style: {file.style};")
        lines.append(f"  font-display: {display};")
        lines.append("}")
        rules.append("\n".join(lines))
    return rules


def font_descriptors(fonts: List[Union[str, BrandFont]], family) -> List[BrandFont]:
    """All descriptors declaring `family`; bare-string entries never match."""
    return [f for f in fonts if isinstance(f, BrandFont) and f.family == family]
