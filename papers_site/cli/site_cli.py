from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from papers_site.config.settings import settings
from papers_site.content.pages import all_pages, registry_for
from papers_site.site.export import ExportDirError, export_site

console = Console()


def build(
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Where to write the site. Defaults to settings.OUTPUT_DIR.",
    ),
    base_path: Optional[str] = typer.Option(
        None,
        "--base-path",
        help="Path prefix the site is served under (e.g. /papers).",
    ),
    clean: bool = typer.Option(
        False,
        "--clean/--no-clean",
        help=(
            "Remove the output directory before writing. "
            "Only a directory holding a previous export is removed."
        ),
    ),
) -> None:
    """
    Export all pages as static files.

    Example:
        papers-site build -o out --base-path /papers
    """
    cfg = settings
    if base_path is not None:
        cfg = settings.model_copy(update={"BASE_PATH": base_path})

    try:
        written = export_site(output_dir=output_dir, cfg=cfg, clean=clean)
    except ExportDirError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    out = output_dir if output_dir is not None else cfg.OUTPUT_DIR
    console.print(f"[green]Exported {len(written)} files to {escape(str(out))}[/green]")
    for path in written:
        console.print(f"  • {escape(str(path))}")


def pages() -> None:
    """
    List the site's pages with their citation counts.
    """
    tbl = Table(show_header=True, header_style="bold")
    tbl.add_column("Slug", no_wrap=True)
    tbl.add_column("Title")
    tbl.add_column("Citations", justify="right")

    for page in all_pages():
        tbl.add_row(
            page.slug or "(landing)",
            escape(page.title),
            str(len(registry_for(page))),
        )

    console.print(tbl)
