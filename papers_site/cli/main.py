# papers_site/cli/main.py

from __future__ import annotations

import logging

import typer

from papers_site.cli import cite_cli, site_cli
from papers_site.config.settings import settings

app = typer.Typer(help="Build and inspect the static papers site.")


@app.callback()
def main(
    log_level: str = typer.Option(
        settings.LOG_LEVEL,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


app.command("build")(site_cli.build)
app.command("pages")(site_cli.pages)
app.add_typer(cite_cli.app, name="cite")

if __name__ == "__main__":
    app()
