"""
typography.py — Sass typography variables from `_brand.yml` typography.

For each role, most specific first, the effective font family is resolved
through a chain of resolvers (Google Fonts → Bunny Fonts → local files →
the literal family name) and every attribute set on the role is forwarded
to the Bootstrap and reveal.js variables listed in VARIABLE_TRANSLATIONS.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .brand import Brand, BrandFont, BrandTypographyOptions
from .bundles import SassBundleLayers, SassLayer, annotated, sass_variable
from .errors import InconsistentFontFamilyError, UnknownTypographyRoleError
from .fonts import (
    FontPathResolver,
    bunny_font_import,
    font_descriptors,
    font_face_rules,
    google_font_import,
)

logger = logging.getLogger(__name__)

# More specific roles go first
ROLE_ORDER = (
    "link",
    "monospace-block",
    "monospace-inline",
    "monospace",
    "headings",
    "base",
)

ROLE_ATTRIBUTES = (
    "line-height",
    "size",
    "weight",
    "style",
    "color",
    "background-color",
    "decoration",
)

COLOR_ATTRIBUTES = ("color", "background-color")

VARIABLE_TRANSLATIONS: Dict[str, List[Tuple[str, str]]] = {
    "base": [
        # bootstrap
        ("family", "font-family-base"),
        ("size", "font-size-base"),
        ("line-height", "line-height-base"),
        ("weight", "font-weight-base"),
        # revealjs
        ("family", "mainFont"),
        ("size", "presentation-font-size-root"),
        ("line-height", "presentation-line-height"),
    ],
    "headings": [
        # bootstrap
        ("family", "headings-font-family"),
        ("line-height", "headings-line-height"),
        ("weight", "headings-font-weight"),
        ("weight", "h1h2h3-font-weight"),
        ("color", "headings-color"),
        ("style", "headings-font-style"),
        # revealjs
        ("family", "presentation-heading-font"),
        ("line-height", "presentation-heading-line-height"),
        ("weight", "presentation-heading-font-weight"),
        ("color", "presentation-heading-color"),
    ],
    "link": [
        # bootstrap + revealjs
        ("color", "link-color"),
        ("background-color", "link-color-bg"),
        ("weight", "link-weight"),
        ("decoration", "link-decoration"),
    ],
    "monospace": [
        # bootstrap + revealjs
        ("family", "font-family-monospace"),
        # bootstrap
        ("size", "code-font-size"),
        # forwarded to both `code` and `pre`, which interacts less with
        # the default bootstrap styles
        ("color", "code-color"),
        ("color", "pre-color"),
        ("weight", "font-weight-monospace"),
        # revealjs
        ("size", "code-block-font-size"),
        ("color", "code-block-color"),
        # monospace forwards to both block and inline
        ("background-color", "code-bg"),
        ("background-color", "code-block-bg"),
    ],
    "monospace-block": [
        # bootstrap + revealjs
        ("family", "font-family-monospace-block"),
        # bootstrap
        ("line-height", "pre-line-height"),
        ("color", "pre-color"),
        ("background-color", "pre-bg"),
        ("size", "code-block-font-size"),
        ("weight", "font-weight-monospace-block"),
        # revealjs
        ("line-height", "code-block-line-height"),
        ("color", "code-block-color"),
        ("background-color", "code-block-bg"),
    ],
    "monospace-inline": [
        # bootstrap + revealjs
        ("family", "font-family-monospace-inline"),
        ("color", "code-color"),
        ("background-color", "code-bg"),
        # bootstrap
        ("size", "code-inline-font-size"),
        ("weight", "font-weight-monospace-inline"),
    ],
}


@dataclass
class FontResources:
    """Font imports and @font-face rules collected during one translation."""
    imports: Dict[str, None] = field(default_factory=dict)   # ordered set
    font_faces: List[str] = field(default_factory=list)

    def add_imports(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.imports.setdefault(line, None)

    def add_font_faces(self, rules: Iterable[str]) -> None:
        for rule in rules:
            if rule not in self.font_faces:
                self.font_faces.append(rule)


# ── Family resolvers ──────────────────────────────────────────────────────────

def _consistent_family(fonts: List[BrandFont], source: str) -> Tuple[Optional[str], List[BrandFont]]:
    """The single family shared by `fonts`, and the descriptors that name it."""
    family: Optional[str] = None
    named: List[BrandFont] = []
    for font in fonts:
        if not font.family:
            continue
        if family is None:
            family = font.family
        elif family != font.family:
            raise InconsistentFontFamilyError(
                f"Inconsistent {source} font families found: {family} and {font.family}",
                context={"families": [family, font.family]},
            )
        named.append(font)
    return family, named


def resolve_google_family(
    fonts: List[BrandFont], resources: FontResources, brand: Brand
) -> Optional[str]:
    # A descriptor without a source does not count as a Google font
    if any(font.source != "google" for font in fonts):
        return None
    family, named = _consistent_family(fonts, "Google")
    if family is None:
        return None
    resources.add_imports(google_font_import(font) for font in named)
    return family


def resolve_bunny_family(
    fonts: List[BrandFont], resources: FontResources, brand: Brand
) -> Optional[str]:
    # Unlike Google, a missing source is accepted here
    if any(font.source and font.source != "bunny" for font in fonts):
        return None
    family, named = _consistent_family(fonts, "Bunny")
    if family is None:
        return None
    resources.add_imports(bunny_font_import(font) for font in named)
    return family


def resolve_file_family(
    fonts: List[BrandFont], resources: FontResources, brand: Brand
) -> Optional[str]:
    if any(font.source != "file" for font in fonts):
        return None
    family, named = _consistent_family(fonts, "file")
    if family is None:
        return None
    resolver = FontPathResolver(brand.project_dir, brand.brand_dir)
    for font in named:
        resources.add_font_faces(font_face_rules(font, resolver))
    return family


FamilyResolver = Callable[[List[BrandFont], FontResources, Brand], Optional[str]]

FAMILY_RESOLVERS: Tuple[FamilyResolver, ...] = (
    resolve_google_family,
    resolve_bunny_family,
    resolve_file_family,
)


def resolve_family(
    family: Optional[str], brand: Brand, resources: FontResources
) -> Optional[str]:
    fonts = font_descriptors(brand.fonts, family)
    for resolver in FAMILY_RESOLVERS:
        # resources are only committed once a resolver succeeds
        attempt = FontResources()
        resolved = resolver(fonts, attempt, brand)
        if resolved is not None:
            resources.add_imports(attempt.imports)
            resources.add_font_faces(attempt.font_faces)
            logger.debug(f"Resolved font family {family!r} via {resolver.__name__}")
            return resolved
    return family


# ── Role resolution ───────────────────────────────────────────────────────────

def resolve_font_information(
    brand: Brand, role: str, resources: FontResources
) -> Optional[Dict[str, Any]]:
    """Effective family and attributes for one role, or None if it is unset."""
    typography = brand.data.typography
    options = typography.role(role) if typography else None
    if not options:
        return None
    if isinstance(options, str):
        options = BrandTypographyOptions(family=options)

    info: Dict[str, Any] = {"family": resolve_family(options.family, brand, resources)}
    raw = options.model_dump(by_alias=True)
    for attribute in ROLE_ATTRIBUTES:
        if raw.get(attribute):
            info[attribute] = raw[attribute]
    return info


def typography_variables(
    brand: Brand,
    resources: FontResources,
    roles: Iterable[str] = ROLE_ORDER,
) -> List[str]:
    variables: List[str] = []
    for role in roles:
        translations = VARIABLE_TRANSLATIONS.get(role)
        if translations is None:
            raise UnknownTypographyRoleError(f"Unknown typography kind {role}", context={"role": role})
        info = resolve_font_information(brand, role, resources)
        if info is None:
            continue
        for attribute, variable in translations:
            value = info.get(attribute)
            if not value:
                continue
            if attribute in COLOR_ATTRIBUTES:
                value = brand.get_color(value)
            variables.append(sass_variable(variable, value))
    return variables


def brand_typography_bundle(brand: Brand, key: str) -> SassBundleLayers:
    resources = FontResources()
    variables = typography_variables(brand, resources)
    logger.debug(
        f"Typography bundle {key}: {len(variables)} variable(s), "
        f"{len(resources.imports)} import(s), {len(resources.font_faces)} @font-face rule(s)"
    )
    return SassBundleLayers(
        key=key,
        quarto=SassLayer(
            defaults="\n".join(
                annotated(variables, "_brand.yml typography", "/* typography variables from _brand.yml */")
            ),
            uses="\n".join(resources.imports),
            rules="\n".join(resources.font_faces),
        ),
    )
