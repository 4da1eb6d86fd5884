"""Structured errors raised while translating a brand into Sass."""

from __future__ import annotations

from typing import Any


class BrandError(Exception):
    """Base class for brand loading and translation issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ColorReferenceError(BrandError):
    """Raised when color names reference each other in a cycle."""


class UnknownFontWeightError(BrandError):
    """Raised for a font weight keyword outside the named weight table."""


class FontFormatError(BrandError):
    """Raised when a font file has no extension or an unknown one."""


class InconsistentFontFamilyError(BrandError):
    """Raised when descriptors resolved for one role disagree on family."""


class UnknownTypographyRoleError(BrandError):
    """Raised when a typography role has no variable translations."""
