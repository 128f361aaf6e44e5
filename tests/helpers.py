from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup
from lxml import etree

NS = "{http://www.sitemaps.org/schemas/sitemap/0.9}"


def parse(path: Path) -> etree._ElementTree:
    return etree.parse(str(path))


def locs(path: Path) -> list[str]:
    """Return every ``<loc>`` text found in the file at ``path``."""

    soup = BeautifulSoup(path.read_text(encoding="utf-8"), "xml")
    return [loc.text for loc in soup.find_all("loc")]


def records(path: Path, tag: str = "url") -> list[etree._Element]:
    return parse(path).getroot().findall(f"{NS}{tag}")


def child_text(record: etree._Element, name: str) -> str | None:
    child = record.find(f"{NS}{name}")
    return None if child is None else child.text
