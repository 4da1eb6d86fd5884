"""
brand.py — `_brand.yml` schema, color lookup and brand resolution.

A brand file describes an organization's visual identity:

  color:
    palette:              ← raw named colors, e.g. {blue: "#447099"}
      blue: "#447099"
    primary: blue         ← semantic colors, may reference palette names
  typography:
    fonts:                ← font descriptors (google / bunny / file)
      - family: Open Sans
        source: google
    base: Open Sans       ← per-role options, or a bare family string
  defaults:
    bootstrap:            ← framework variables passed through verbatim
      version: 5

Usage:
  from .brand import ProjectContext
  brand = await ProjectContext("my_project").resolve_brand("slides.qmd")
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import settings
from .errors import BrandError, ColorReferenceError

logger = logging.getLogger(__name__)

FontWeight = Union[int, str]


# ── Schema ────────────────────────────────────────────────────────────────────

class BrandFontFile(BaseModel):
    """One local font file of a `source: file` descriptor."""
    path: str
    weight: Optional[FontWeight] = None
    style: Optional[str] = None


class BrandFont(BaseModel):
    """A font family declaration. Several may share a family name."""
    family: Optional[str] = None
    source: Optional[str] = None       # google / bunny / file / system
    weight: Optional[Union[FontWeight, List[FontWeight]]] = None
    style: Optional[Union[str, List[str]]] = None
    display: Optional[str] = None      # font-display strategy, default "swap"
    files: List[Union[str, BrandFontFile]] = Field(default_factory=list)


class BrandTypographyOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    family: Optional[str] = None
    size: Optional[Union[str, int, float]] = None
    weight: Optional[FontWeight] = None
    style: Optional[str] = None
    line_height: Optional[Union[int, float, str]] = Field(default=None, alias="line-height")
    color: Optional[str] = None
    background_color: Optional[str] = Field(default=None, alias="background-color")
    decoration: Optional[str] = None


TypographyEntry = Union[str, BrandTypographyOptions]


class BrandTypography(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fonts: List[Union[str, BrandFont]] = Field(default_factory=list)
    base: Optional[TypographyEntry] = None
    headings: Optional[TypographyEntry] = None
    link: Optional[TypographyEntry] = None
    monospace: Optional[TypographyEntry] = None
    monospace_block: Optional[TypographyEntry] = Field(default=None, alias="monospace-block")
    monospace_inline: Optional[TypographyEntry] = Field(default=None, alias="monospace-inline")

    def role(self, name: str) -> Optional[TypographyEntry]:
        """Look up a role by its `_brand.yml` name (e.g. "monospace-block")."""
        return getattr(self, name.replace("-", "_"), None)


class BrandColor(BaseModel):
    """`palette` plus any top-level semantic colors, kept in document order."""
    model_config = ConfigDict(extra="allow")

    palette: Dict[str, str] = Field(default_factory=dict)

    def named(self) -> Dict[str, str]:
        return {k: str(v) for k, v in (self.model_extra or {}).items()}


class BrandData(BaseModel):
    model_config = ConfigDict(extra="allow")

    meta: Optional[Dict[str, Any]] = None
    color: Optional[BrandColor] = None
    typography: Optional[BrandTypography] = None
    defaults: Optional[Dict[str, Dict[str, Any]]] = None


# ── Brand ─────────────────────────────────────────────────────────────────────

class Brand:
    """A validated brand document plus the directories its paths refer to."""

    def __init__(self, data: BrandData, brand_dir: Path, project_dir: Path):
        self.data = data
        self.brand_dir = Path(brand_dir)
        self.project_dir = Path(project_dir)

    @classmethod
    def from_dict(
        cls,
        raw: Dict[str, Any],
        brand_dir: Union[str, Path] = ".",
        project_dir: Union[str, Path, None] = None,
    ) -> "Brand":
        try:
            data = BrandData.model_validate(raw or {})
        except ValidationError as e:
            raise BrandError(f"Invalid brand definition: {e}", context={"brand_dir": str(brand_dir)}) from e
        return cls(data, Path(brand_dir), Path(project_dir if project_dir is not None else brand_dir))

    @property
    def fonts(self) -> List[Union[str, BrandFont]]:
        if self.data.typography is None:
            return []
        return self.data.typography.fonts

    def get_color(self, name: str) -> str:
        """
        Resolve a color name through the palette, then the semantic colors,
        until the value is no longer a known name. Unknown names come back
        unchanged.
        """
        color = self.data.color
        if color is None:
            return name
        named = color.named()
        seen: List[str] = []
        value = name
        while True:
            if value in color.palette:
                target = color.palette[value]
            elif value in named:
                target = named[value]
            else:
                return value
            if value in seen:
                chain = " -> ".join(seen + [value])
                raise ColorReferenceError(f"Circular color reference in brand: {chain}", context={"color": name})
            seen.append(value)
            value = target


# ── Loading ───────────────────────────────────────────────────────────────────

def load_brand(path: Union[str, Path], project_dir: Union[str, Path, None] = None) -> Brand:
    """Read and validate a `_brand.yml` file."""
    brand_file = Path(path)
    if not brand_file.exists():
        raise FileNotFoundError(f"Brand file not found: {brand_file}")

    try:
        raw = yaml.safe_load(brand_file.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise BrandError(f"Could not parse {brand_file}: {e}", context={"path": str(brand_file)}) from e
    if not isinstance(raw, dict):
        raise BrandError(f"Brand file {brand_file} must contain a mapping", context={"path": str(brand_file)})

    brand_dir = brand_file.resolve().parent
    root = Path(project_dir).resolve() if project_dir is not None else brand_dir
    logger.debug(f"Loaded brand {brand_file} (project {root})")
    return Brand.from_dict(raw, brand_dir=brand_dir, project_dir=root)


class ProjectContext:
    """Locates and loads the brand that applies to a document in a project."""

    def __init__(self, project_dir: Union[str, Path, None] = None):
        self.project_dir = Path(project_dir if project_dir is not None else settings.PROJECT_DIR).resolve()

    def brand_path(self, file_name: Optional[str] = None) -> Optional[Path]:
        """Project-level `_brand.yml` first, then one next to the document."""
        project_brand = self.project_dir / settings.BRAND_FILE_NAME
        if project_brand.exists():
            return project_brand
        if file_name:
            doc = Path(file_name)
            if not doc.is_absolute():
                doc = self.project_dir / doc
            local_brand = doc.parent / settings.BRAND_FILE_NAME
            if local_brand.exists():
                return local_brand
        return None

    async def resolve_brand(self, file_name: Optional[str] = None) -> Optional[Brand]:
        path = self.brand_path(file_name)
        if path is None:
            logger.debug(f"No {settings.BRAND_FILE_NAME} for {file_name or self.project_dir}")
            return None
        return await asyncio.to_thread(load_brand, path, self.project_dir)
