from __future__ import annotations

from pathlib import Path

from sitemapwriter.storage import (
    DEFAULT_OUTPUT_ROOT,
    ensure_output_root,
    resolve_output_root,
    sitemap_dir,
)


def test_resolve_output_root() -> None:
    assert resolve_output_root() == DEFAULT_OUTPUT_ROOT
    assert resolve_output_root("public/www") == Path("public/www")


def test_ensure_output_root_creates_sitemap_directory(tmp_path: Path) -> None:
    root = ensure_output_root(tmp_path / "public")

    assert root == tmp_path / "public"
    assert sitemap_dir(root).is_dir()
    assert ensure_output_root(root) == root
