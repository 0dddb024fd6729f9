# tests/test_export.py

import pytest

from papers_site.config.settings import Settings
from papers_site.content.pages import get_page
from papers_site.site.export import ExportDirError, export_page, export_site


def test_export_site_writes_trailing_slash_layout(tmp_path):
    out = tmp_path / "site"

    written = export_site(output_dir=out, cfg=Settings(BASE_PATH="/papers"))

    assert [p.relative_to(out).as_posix() for p in written] == [
        "index.html",
        "gradual-disempowerment/index.html",
        "assets/site.css",
    ]
    for path in written:
        assert path.exists()

    essay = (out / "gradual-disempowerment" / "index.html").read_text(encoding="utf-8")
    assert '<li id="ref-1">Russell, Stuart (2019).' in essay
    assert "/papers/assets/site.css" in essay


def test_export_site_flat_layout(tmp_path):
    written = export_site(
        output_dir=tmp_path,
        cfg=Settings(BASE_PATH="", TRAILING_SLASH=False),
    )

    assert (tmp_path / "gradual-disempowerment.html") in written
    landing = (tmp_path / "index.html").read_text(encoding="utf-8")
    assert 'href="/gradual-disempowerment.html"' in landing


def test_export_site_clean_removes_stale_files(tmp_path):
    export_site(output_dir=tmp_path)
    stale = tmp_path / "old.html"
    stale.write_text("stale", encoding="utf-8")

    export_site(output_dir=tmp_path, clean=True)

    assert not stale.exists()
    assert (tmp_path / "index.html").exists()


def test_export_page_no_overwrite(tmp_path):
    page = get_page("gradual-disempowerment")
    export_page(page, tmp_path)

    with pytest.raises(FileExistsError):
        export_page(page, tmp_path, overwrite=False)


def test_export_site_defaults_to_settings_output_dir(tmp_path):
    cfg = Settings(OUTPUT_DIR=tmp_path / "default-out")

    written = export_site(cfg=cfg)

    assert all(p.is_relative_to(tmp_path / "default-out") for p in written)


def test_export_site_refuses_to_clean_foreign_directory(tmp_path):
    keep = tmp_path / "notes.txt"
    keep.write_text("not part of the site", encoding="utf-8")

    with pytest.raises(ExportDirError) as excinfo:
        export_site(output_dir=tmp_path, clean=True)

    assert excinfo.value.path == tmp_path
    assert keep.exists()
    assert not (tmp_path / "index.html").exists()
