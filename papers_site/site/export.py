# papers_site/site/export.py

"""
Static export: write every page as a flat HTML file plus the stylesheet.

The output layout mirrors how the site is served under its base path:

    out/
      index.html
      gradual-disempowerment/index.html
      assets/site.css
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable, List, Optional, Union

from papers_site.config.settings import Settings, settings as default_settings
from papers_site.content.pages import all_pages, registry_for
from papers_site.models.page import Page
from papers_site.site.render import page_path, render_page

logger = logging.getLogger("papers_site.site")

PathLike = Union[str, Path]

SITE_CSS = """\
body { margin: 0; background: #fff; color: #1f2937; font-family: Georgia, serif; }
main { max-width: 56rem; margin: 0 auto; padding: 3rem 1.5rem; }
h1 { font-size: 2.5rem; line-height: 1.2; text-align: center; }
h2 { font-size: 1.9rem; }
h3 { font-size: 1.5rem; }
p, li { font-size: 1.125rem; line-height: 1.7; }
.byline { text-align: center; color: #4b5563; font: 0.875rem sans-serif; }
.abstract { border-left: 4px solid #d1d5db; padding: 1rem 1.5rem; }
.abstract p { font-style: italic; color: #374151; }
.abstract .abstract-label { font-style: normal; font-weight: 600; color: #111827; }
blockquote { background: #f9fafb; border-left: 4px solid #9ca3af; margin: 0 0 2rem; padding: 1.5rem; font-style: italic; }
.table-wrap { overflow-x: auto; margin-bottom: 2rem; }
table { border-collapse: collapse; min-width: 100%; }
th, td { text-align: left; padding: 0.75rem 1rem; border-bottom: 1px solid #e5e7eb; }
.risk-high { color: #dc2626; font-weight: 500; }
.risk-medium { color: #ca8a04; font-weight: 500; }
.risk-low { color: #16a34a; font-weight: 500; }
.citation { position: relative; display: inline-block; }
.citation-marker { color: #2563eb; font: 500 0.875rem sans-serif; text-decoration: none; }
.citation-marker:hover { color: #404040; }
.citation-missing { color: #ef4444; }
.citation-preview { display: none; position: absolute; bottom: 100%; left: 50%; transform: translateX(-50%);
  width: 24rem; max-width: 80vw; z-index: 50; margin-bottom: 0.5rem; padding: 1rem; background: #fff;
  border: 1px solid #e5e7eb; border-radius: 0.5rem; box-shadow: 0 10px 15px rgba(0,0,0,.1);
  font: 0.875rem/1.6 sans-serif; color: #374151; }
.citation:hover .citation-preview, .citation:focus-within .citation-preview { display: block; }
.citation-preview-label { display: block; font-size: 0.75rem; color: #6b7280; margin-bottom: 0.5rem; }
.citation-raw summary { font-size: 0.75rem; color: #9ca3af; cursor: pointer; margin-top: 0.75rem; }
.citation-raw pre { font-size: 0.75rem; background: #f9fafb; padding: 0.5rem; border-radius: 0.25rem; overflow-x: auto; }
.references { font: 0.875rem/1.6 sans-serif; color: #4b5563; }
.page-notes { font: 0.875rem sans-serif; color: #4b5563; border-top: 1px solid #e5e7eb; margin-top: 2rem; padding-top: 1.5rem; }
.back-link { text-align: center; margin-top: 3rem; font-family: sans-serif; }
.toc { display: none; position: fixed; top: 2rem; left: 2rem; width: 16rem; max-height: 24rem; overflow-y: auto;
  border: 1px solid #e5e7eb; border-radius: 0.5rem; padding: 1rem; background: #fff; font-family: sans-serif; }
.toc ul { list-style: none; margin: 0; padding: 0; }
.toc-link { display: block; padding: 0.25rem 0.5rem; border-radius: 0.25rem; color: #4b5563; text-decoration: none; font-size: 0.875rem; }
.toc-link.active { background: #eff6ff; color: #1d4ed8; font-weight: 500; }
.toc-toggle { position: fixed; top: 1rem; left: 1rem; z-index: 50; background: #fff; border: 1px solid #d1d5db; border-radius: 0.5rem; padding: 0.5rem; }
.toc.open { display: block; top: 4rem; left: 1rem; right: 1rem; width: auto; z-index: 40; }
@media (min-width: 1024px) {
  .toc { display: block; }
  .toc-toggle { display: none; }
  main { margin-left: 20rem; }
}
.contents ul { list-style: none; padding-left: 1rem; }
"""


class ExportDirError(RuntimeError):
    """
    Raised when the output directory cannot safely be used for an export.
    """

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


def _looks_like_export(directory: Path) -> bool:
    if not any(directory.iterdir()):
        return True
    return (directory / "assets" / "site.css").is_file()


def export_page(
    page: Page,
    output_dir: PathLike,
    cfg: Optional[Settings] = None,
    overwrite: bool = True,
) -> Path:
    """
    Render one page and write it below `output_dir`.

    If `overwrite` is False and the file already exists, raises FileExistsError.
    """
    cfg = cfg or default_settings
    target = Path(output_dir) / page_path(page.slug, cfg)

    if target.exists() and not overwrite:
        raise FileExistsError(f"Page already exists and overwrite=False: {target}")

    target.parent.mkdir(parents=True, exist_ok=True)
    html = render_page(page, registry_for(page), cfg)
    target.write_text(html, encoding="utf-8")

    logger.info("Wrote %s", target)
    return target


def write_assets(output_dir: PathLike) -> Path:
    css_path = Path(output_dir) / "assets" / "site.css"
    css_path.parent.mkdir(parents=True, exist_ok=True)
    css_path.write_text(SITE_CSS, encoding="utf-8")
    logger.info("Wrote %s", css_path)
    return css_path


def export_site(
    output_dir: Optional[PathLike] = None,
    pages: Optional[Iterable[Page]] = None,
    cfg: Optional[Settings] = None,
    clean: bool = False,
    overwrite: bool = True,
) -> List[Path]:
    """
    Export the whole site as flat files.

    - `output_dir` defaults to settings.OUTPUT_DIR.
    - `clean=True` removes the output directory first, but only when it
      is empty or holds a previous export (assets/site.css present);
      otherwise ExportDirError is raised and nothing is deleted.
    - Returns the written paths (pages first, stylesheet last).
    """
    cfg = cfg or default_settings
    out = Path(output_dir) if output_dir is not None else cfg.OUTPUT_DIR

    if clean and out.exists():
        if not _looks_like_export(out):
            raise ExportDirError(
                f"Refusing to clean {out}: it does not contain a previous export",
                path=out,
            )
        logger.info("Removing previous export at %s", out)
        shutil.rmtree(out)
    out.mkdir(parents=True, exist_ok=True)

    written = [
        export_page(page, out, cfg, overwrite=overwrite)
        for page in (all_pages() if pages is None else pages)
    ]
    written.append(write_assets(out))

    logger.info("Exported %d files to %s", len(written), out)
    return written
