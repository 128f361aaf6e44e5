from __future__ import annotations

from pathlib import Path

import pytest
from lxml import etree

SCHEMA_DIR = Path(__file__).resolve().parent / "schemas"


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output root with the ``sitemap`` subdirectory maps write into."""

    (tmp_path / "sitemap").mkdir()
    return tmp_path


@pytest.fixture(scope="session")
def sitemap_schema() -> etree.XMLSchema:
    return etree.XMLSchema(etree.parse(str(SCHEMA_DIR / "sitemap.xsd")))


@pytest.fixture(scope="session")
def index_schema() -> etree.XMLSchema:
    return etree.XMLSchema(etree.parse(str(SCHEMA_DIR / "siteindex.xsd")))
