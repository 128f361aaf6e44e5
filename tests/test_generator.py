from __future__ import annotations

from pathlib import Path

from sitemapwriter.config import AppConfig, MapOptions, SitemapConfig
from sitemapwriter.models import Url
from sitemapwriter.services.generator import build_index, generate
from sitemapwriter.storage import ensure_output_root
from tests.helpers import child_text, locs, parse, records


def _config(output_dir: Path, **overrides) -> AppConfig:
    values = dict(
        website="https://example.com/",
        output_dir=output_dir,
        options=MapOptions(max_urls_per_file=2),
        index_lastmod="2024-12-01",
        sitemaps=[
            SitemapConfig(name="main", urls=[Url(loc="/"), Url(loc="/about")]),
            SitemapConfig(
                name="blog",
                urls=[
                    Url(loc="/blog/1"),
                    Url(loc="/blog/2", priority=3.0),
                    Url(loc="/blog/2"),
                    Url(loc="/blog/3"),
                ],
            ),
        ],
    )
    values.update(overrides)
    return AppConfig(**values)


def test_generate_writes_sitemaps_and_index(tmp_path: Path, sitemap_schema, index_schema) -> None:
    output_dir = ensure_output_root(tmp_path / "public")

    result = generate(_config(output_dir))

    assert [sitemap.name for sitemap in result.sitemaps] == ["main", "blog"]
    main, blog = result.sitemaps
    assert main.report.file_names == ["main.xml"]
    assert blog.report.file_names == ["blog.xml", "blog-2.xml"]
    assert blog.report.written_urls == [
        "https://example.com/blog/1",
        "https://example.com/blog/2",
        "https://example.com/blog/3",
    ]

    (error,) = result.errors
    assert error.sitemap == "blog"
    assert error.loc == "/blog/2"
    assert "priority" in error.error

    assert result.index_path == output_dir / "sitemap.xml"
    assert locs(result.index_path) == [
        "https://example.com/sitemap/main.xml",
        "https://example.com/sitemap/blog.xml",
        "https://example.com/sitemap/blog-2.xml",
    ]
    for sitemap in records(result.index_path, "sitemap"):
        assert child_text(sitemap, "lastmod") == "2024-12-01T00:00:00+00:00"

    assert index_schema.validate(parse(result.index_path))
    for path in main.report.written_file_paths + blog.report.written_file_paths:
        assert sitemap_schema.validate(parse(path))


def test_generate_without_urls_writes_no_index(tmp_path: Path) -> None:
    output_dir = ensure_output_root(tmp_path)

    result = generate(_config(output_dir, sitemaps=[SitemapConfig(name="empty")]))

    assert result.index_path is None
    assert result.sitemaps[0].report.written_file_paths == []
    assert not (output_dir / "sitemap.xml").exists()


def test_build_index_with_no_reports(tmp_path: Path) -> None:
    assert build_index(tmp_path, "https://example.com", []) is None
