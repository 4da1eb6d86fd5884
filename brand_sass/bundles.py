"""
bundles.py — Sass bundle layer records and the text conventions they carry.

Every generated layer holds five free-form Sass sections. Declarations use
"default if unset" semantics (`$name: value !default;`) so a more specific,
later-loaded stylesheet can still override them. Blocks are wrapped in
provenance annotations that downstream tooling uses to attribute each
declaration to the part of `_brand.yml` it came from.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Iterable, List, Optional

ANNOTATION_PREFIX = "// quarto-scss-analysis-annotation"

SECTIONS = ("defaults", "uses", "functions", "mixins", "rules")


@dataclass
class SassLayer:
    defaults: str = ""
    uses: str = ""
    functions: str = ""
    mixins: str = ""
    rules: str = ""


@dataclass
class SassBundleLayers:
    """One bundle layer, keyed by its target surface ("brand", "reveal-theme")."""
    key: str
    quarto: SassLayer = field(default_factory=SassLayer)
    dependency: Optional[str] = None

    def with_dependency(self, dependency: str) -> "SassBundleLayers":
        return replace(self, dependency=dependency)

    def to_dict(self) -> dict:
        data = asdict(self)
        if self.dependency is None:
            del data["dependency"]
        return data


# ── Text helpers ──────────────────────────────────────────────────────────────

def sass_value(value: Any) -> str:
    """Render a scalar the way Sass expects it."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def sass_variable(name: str, value: Any) -> str:
    return f"${name}: {sass_value(value)} !default;"


def css_property(name: str, value: Any) -> str:
    return f"  --{name}: {sass_value(value)};"


def push_annotation(origin: str) -> str:
    return f'{ANNOTATION_PREFIX} {{ "action": "push", "origin": {json.dumps(origin)} }}'


def pop_annotation() -> str:
    return f'{ANNOTATION_PREFIX} {{ "action": "pop" }}'


def annotated(lines: Iterable[str], origin: str, header: Optional[str] = None) -> List[str]:
    """Wrap lines in a push/pop annotation pair, optionally after a comment header."""
    block: List[str] = [header] if header else []
    block.append(push_annotation(origin))
    block.extend(lines)
    block.append(pop_annotation())
    return block


def check_balanced(text: str) -> bool:
    """True if every push annotation in `text` is matched by a later pop."""
    depth = 0
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped.startswith(ANNOTATION_PREFIX):
            continue
        payload = json.loads(stripped[len(ANNOTATION_PREFIX):])
        if payload.get("action") == "push":
            depth += 1
        elif payload.get("action") == "pop":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0
