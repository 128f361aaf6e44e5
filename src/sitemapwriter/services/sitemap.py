"""Sitemap document writer splitting an unbounded URL stream over several files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Set

from sitemapwriter.config import MapOptions
from sitemapwriter.exceptions import FileNotWritableError, InvalidLocationError
from sitemapwriter.models import FinalizeReport, Url
from sitemapwriter.services.stream_writer import StreamWriter, WriterState
from sitemapwriter.storage import SITEMAP_SUBDIR
from sitemapwriter.validation import validate_location

__all__ = ["Map"]

logger = logging.getLogger(__name__)


class Map:
    """Write :class:`~sitemapwriter.models.Url` entries to ``<filepath>/sitemap/<filename>.xml``.

    Once ``options.max_urls_per_file`` entries have been written the current file
    is closed and the next one is named ``<filename>-2.xml``, ``<filename>-3.xml``
    and so on. Every ``options.buffer_size`` entries the buffered XML is flushed
    to disk. Locations already added are silently ignored.

    The ``sitemap`` subdirectory must exist before the first file is flushed.
    Instances are not thread-safe; rotation and buffering update the counters
    and the open file together, so callers need exclusive access.
    """

    def __init__(
        self,
        filepath: Path | str,
        filename: str,
        website: str,
        options: MapOptions | None = None,
    ) -> None:
        try:
            validate_location(website)
        except InvalidLocationError as exc:
            raise InvalidLocationError(
                f"The website must be a valid URL. You have specified: {website}"
            ) from exc

        self.filepath = Path(filepath)
        self.filename = filename
        self.website = website.rstrip("/")
        self.options = options or MapOptions()

        self.urls_count = 0
        self.file_count = 0
        self.current_path: Path | None = None
        self.written_file_paths: List[Path] = []
        self.written_urls: List[str] = []

        self._seen: Set[str] = set()
        self._writer: StreamWriter | None = None

    @property
    def directory(self) -> Path:
        return self.filepath / SITEMAP_SUBDIR

    def add_entry(self, url: Url) -> None:
        """Add ``url`` to the sitemap.

        Validation happens before any state changes, so a rejected entry leaves
        the map untouched. Adding a location twice is a no-op.
        """

        record = url.resolve(self.website)

        if record.loc in self._seen:
            logger.debug("Skipping duplicate location %s", record.loc)
            return

        if self.urls_count == 0:
            self._create_new_file()
        elif self.urls_count % self.options.max_urls_per_file == 0:
            # rotation closes (and so flushes) the current file
            logger.info(
                "Reached %d urls in %s, starting a new file",
                self.options.max_urls_per_file,
                self.current_path,
            )
            self._close_file()
            self._create_new_file()
        elif self.urls_count % self.options.buffer_size == 0:
            self._writer.flush()

        self._writer.write_record("url", record.elements())

        self._seen.add(record.loc)
        self.written_urls.append(record.loc)
        self.urls_count += 1

    def add_entries(self, urls: Iterable[Url]) -> None:
        for url in urls:
            self.add_entry(url)

    def finalize(self) -> FinalizeReport:
        """Close the current file and report every file and URL written.

        Nothing is written when no entry was ever added.
        """

        if self._writer is not None and self._writer.state is WriterState.OPEN:
            self._close_file()

        return FinalizeReport(
            written_file_paths=list(self.written_file_paths),
            written_urls=list(self.written_urls),
        )

    def _file_path(self, number: int) -> Path:
        if number > 1:
            return self.directory / f"{self.filename}-{number}.xml"
        return self.directory / f"{self.filename}.xml"

    def _create_new_file(self) -> None:
        path = self._file_path(self.file_count + 1)

        if path.exists():
            if not os.access(path, os.W_OK):
                raise FileNotWritableError(f"File {path} is not writable.", path)
            try:
                path.unlink()
            except OSError as exc:
                raise FileNotWritableError(f"File {path} is not writable.", path) from exc

        writer = StreamWriter(use_indent=self.options.use_indent)
        writer.open(path)
        writer.start_root("urlset")

        self._writer = writer
        self.file_count += 1
        self.current_path = path
        self.written_file_paths.append(path)
        logger.debug("Started sitemap file %s", path)

    def _close_file(self) -> None:
        self._writer.close()
        logger.info("Wrote %d urls to %s", self._writer.records_written, self.current_path)
