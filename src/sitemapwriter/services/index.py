"""Sitemap index writer referencing the files produced by one or more maps."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Set

from sitemapwriter.models import Group
from sitemapwriter.services.stream_writer import StreamWriter, WriterState
from sitemapwriter.storage import INDEX_FILENAME

__all__ = ["Index"]

logger = logging.getLogger(__name__)


class Index:
    """Write :class:`~sitemapwriter.models.Group` entries to ``<filepath>/sitemap.xml``.

    The file is only started by the first accepted group, so an index that
    never receives a group produces no file at all. Repeated locations are
    silently ignored. Not thread-safe.
    """

    def __init__(self, filepath: Path | str, use_indent: bool = True) -> None:
        self.current_path = Path(filepath) / INDEX_FILENAME
        self.use_indent = use_indent
        self.written_urls: List[str] = []

        self._seen: Set[str] = set()
        self._writer: StreamWriter | None = None

    def add_group(self, group: Group) -> None:
        record = group.resolve()

        if record.loc in self._seen:
            logger.debug("Skipping duplicate sitemap %s", record.loc)
            return

        if self._writer is None:
            writer = StreamWriter(use_indent=self.use_indent)
            writer.open(self.current_path)
            writer.start_root("sitemapindex")
            self._writer = writer

        self._writer.write_record("sitemap", record.elements())

        self._seen.add(record.loc)
        self.written_urls.append(record.loc)

    def add_groups(self, groups: Iterable[Group]) -> None:
        for group in groups:
            self.add_group(group)

    def finalize(self) -> Path | None:
        """Close the index file, returning its path, or ``None`` when nothing was added."""

        if self._writer is None:
            return None

        if self._writer.state is WriterState.OPEN:
            self._writer.close()
            logger.info(
                "Wrote sitemap index %s with %d sitemaps", self.current_path, len(self.written_urls)
            )
        return self.current_path
