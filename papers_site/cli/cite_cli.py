from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from papers_site.citations.registry import CitationNotFound, CitationRegistry
from papers_site.content.gradual_disempowerment import SLUG as ESSAY_SLUG
from papers_site.content.pages import UnknownPageError, get_page, registry_for

app = typer.Typer(
    help="Inspect the citation registry of a page."
)

console = Console()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_registry(slug: str) -> CitationRegistry:
    try:
        page = get_page(slug)
    except UnknownPageError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)
    return registry_for(page)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("list")
def list_citations(
    page: str = typer.Option(
        ESSAY_SLUG,
        "--page",
        "-p",
        help="Page slug ('' or '/' for the landing page).",
    ),
) -> None:
    """
    List the page's citations in display-number order.
    """
    registry = _load_registry(page)

    if not len(registry):
        console.print(f"[yellow]No citations on page '{escape(page)}'.[/yellow]")
        return

    tbl = Table(show_header=True, header_style="bold")
    tbl.add_column("#", justify="right")
    tbl.add_column("Key", no_wrap=True)
    tbl.add_column("Kind")
    tbl.add_column("Citation")

    for ref, cit in zip(registry.reference_entries(), registry):
        tbl.add_row(
            str(ref.number),
            escape(ref.key),
            cit.entry.kind,
            escape(ref.formatted_text),
        )

    console.print(tbl)


@app.command("show")
def show(
    key: str = typer.Argument(..., help="Citation key, e.g. russell2019human."),
    page: str = typer.Option(
        ESSAY_SLUG,
        "--page",
        "-p",
        help="Page slug ('' or '/' for the landing page).",
    ),
) -> None:
    """
    Show the marker, formatted citation and raw record for one key.
    """
    registry = _load_registry(page)

    try:
        entry, number = registry.lookup(key)
    except CitationNotFound as exc:
        console.print(
            f"[red]{escape(str(exc))}[/red] "
            f"(marker would render as {escape(registry.missing_marker)})"
        )
        raise typer.Exit(code=1)

    preview = registry.preview_block(key)

    console.print(
        f"[bold]{escape(registry.render_marker(key))}[/bold] "
        f"{escape(key)} ({entry.kind}) -> #{registry.anchor_for(key)}"
    )
    console.print(escape(preview.formatted_text))
    console.print(Panel(escape(preview.raw_entry_view), title="BibTeX", expand=False))
