"""
brand_sass — Command line entry point

Usage:
  python -m brand_sass.main --format html     --project my_site
  python -m brand_sass.main --format revealjs --project my_talk --input slides.qmd
  python -m brand_sass.main --format html     --output outputs/brand --json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from . import settings
from .brand import ProjectContext
from .bundles import SECTIONS, SassBundleLayers, check_balanced
from .errors import BrandError
from .layers import brand_bootstrap_sass_bundles, brand_reveal_sass_bundle_layers

console = Console()
logger = logging.getLogger(__name__)


# ── CLI ───────────────────────────────────────────────────────────────────────

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate Sass bundle layers from a _brand.yml file"
    )
    parser.add_argument(
        "--format",
        choices=["html", "revealjs"],
        default="html",
        help="html = Bootstrap variables; revealjs = reveal.js theme variables",
    )
    parser.add_argument(
        "--input",
        default=None,
        help="Document path; its directory is searched for _brand.yml when the project has none",
    )
    parser.add_argument(
        "--project",
        default=settings.PROJECT_DIR,
        help="Project directory (default: $BRAND_SASS_PROJECT_DIR or .)",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Directory to write .scss files to (default: print to console)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write / print the bundles as JSON instead of .scss sections",
    )
    return parser.parse_args(argv)


# ── Output helpers ────────────────────────────────────────────────────────────

async def collect_layers(fmt: str, input_file: Optional[str], project: ProjectContext) -> List[SassBundleLayers]:
    if fmt == "revealjs":
        return await brand_reveal_sass_bundle_layers(input_file, project)
    return await brand_bootstrap_sass_bundles(input_file, project, "brand")


def write_layers(layers: List[SassBundleLayers], output_dir: Path) -> List[Path]:
    """Write one `<key>-<n>-<section>.scss` file per non-empty section."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for n, layer in enumerate(layers, start=1):
        for section in SECTIONS:
            text = getattr(layer.quarto, section)
            if not text:
                continue
            if not check_balanced(text):
                raise BrandError(f"Unbalanced provenance annotations in {layer.key} {section}")
            path = output_dir / f"{layer.key}-{n}-{section}.scss"
            path.write_text(text + "\n", encoding="utf-8")
            logger.debug(f"Wrote {path}")
            written.append(path)
    return written


def write_json(layers: List[SassBundleLayers], output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / "bundles.json"
    json_path.write_text(json.dumps([layer.to_dict() for layer in layers], indent=2), encoding="utf-8")
    return json_path


def summary_table(layers: List[SassBundleLayers]) -> Table:
    table = Table(title="Brand Sass bundle layers")
    table.add_column("#", justify="right")
    table.add_column("Key")
    table.add_column("Dependency")
    for section in SECTIONS:
        table.add_column(section, justify="right")
    for n, layer in enumerate(layers, start=1):
        counts = [str(len(getattr(layer.quarto, s).splitlines())) for s in SECTIONS]
        table.add_row(str(n), layer.key, layer.dependency or "—", *counts)
    return table


# ── Main ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(format=settings.LOG_FORMAT, level=settings.LOG_LEVEL)

    project = ProjectContext(args.project)
    console.print(Rule("[bold magenta]brand_sass[/bold magenta]"))
    console.print(
        f"  Format: [bold]{args.format}[/bold]  |  "
        f"Project: [bold]{project.project_dir}[/bold]  |  "
        f"Input: [bold]{args.input or '—'}[/bold]"
    )

    try:
        layers = asyncio.run(collect_layers(args.format, args.input, project))
        if not layers:
            console.print("  [yellow]No brand found — nothing to apply.[/yellow]")
            return 0

        console.print(summary_table(layers))

        if args.output:
            output_dir = Path(args.output)
            if args.json:
                paths = [write_json(layers, output_dir)]
            else:
                paths = write_layers(layers, output_dir)
            for path in paths:
                console.print(f"  [green]✓[/green] {path}")
        elif args.json:
            console.print_json(json.dumps([layer.to_dict() for layer in layers]))
        else:
            for layer in layers:
                for section in SECTIONS:
                    text = getattr(layer.quarto, section)
                    if text:
                        console.print(Rule(f"{layer.key} · {section}"))
                        console.print(text, markup=False, highlight=False, emoji=False)
    except (BrandError, FileNotFoundError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
