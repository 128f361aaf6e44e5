"""Incremental XML writer backing a single sitemap or sitemap index file."""

from __future__ import annotations

import io
import logging
from contextlib import ExitStack
from enum import Enum
from pathlib import Path
from typing import Iterable, Tuple

from lxml import etree

from sitemapwriter.exceptions import IOUnavailableError, IOWriteFailedError, WriterStateError

__all__ = ["SITEMAP_NAMESPACE", "StreamWriter", "WriterState", "XML_DECLARATION"]

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = b'<?xml version="1.0" encoding="UTF-8"?>\n'
INDENT = "  "


class WriterState(Enum):
    UNOPENED = "unopened"
    OPEN = "open"
    CLOSED = "closed"


class StreamWriter:
    """Own one output file and the XML document being written to it.

    Records are serialised into an in-memory buffer; :meth:`flush` drains that
    buffer onto the end of the target file, so the document never has to be
    held in memory as a whole. The file itself is only created by the first
    flush.

    A writer is not thread-safe: callers need exclusive access.
    """

    def __init__(self, *, use_indent: bool = True, namespace: str = SITEMAP_NAMESPACE) -> None:
        self.use_indent = use_indent
        self.namespace = namespace
        self.path: Path | None = None
        self.state = WriterState.UNOPENED
        self.records_written = 0

        self._buffer = io.BytesIO()
        self._stack = ExitStack()
        self._xf = None
        self._root_started = False
        self._file_created = False

    def _qualify(self, tag: str) -> str:
        return f"{{{self.namespace}}}{tag}"

    def _require_open(self) -> None:
        if self.state is not WriterState.OPEN:
            raise WriterStateError(f"Stream writer is {self.state.value}, expected open")

    def open(self, path: Path | str) -> None:
        """Start a new document for ``path`` without touching the filesystem."""

        if self.state is not WriterState.UNOPENED:
            raise WriterStateError(f"Stream writer is already {self.state.value}")

        self.path = Path(path)
        self._buffer.write(XML_DECLARATION)
        self._xf = self._stack.enter_context(
            etree.xmlfile(self._buffer, encoding="utf-8", buffered=False)
        )
        self.state = WriterState.OPEN
        logger.debug("Opened XML document for %s", self.path)

    def start_root(self, tag: str) -> None:
        """Open the root element and declare the sitemap namespace on it."""

        self._require_open()
        if self._root_started:
            raise WriterStateError(f"Root element already started for {self.path}")

        self._stack.enter_context(
            self._xf.element(self._qualify(tag), nsmap={None: self.namespace})
        )
        self._root_started = True

    def write_record(self, tag: str, fields: Iterable[Tuple[str, str | None]]) -> None:
        """Write one ``tag`` element holding ``fields``; ``None`` values are skipped."""

        self._require_open()
        if not self._root_started:
            raise WriterStateError(f"Root element not started for {self.path}")

        xf = self._xf
        if self.use_indent:
            xf.write("\n" + INDENT)
        with xf.element(self._qualify(tag)):
            for name, value in fields:
                if value is None:
                    continue
                if self.use_indent:
                    xf.write("\n" + INDENT * 2)
                with xf.element(self._qualify(name)):
                    xf.write(value)
            if self.use_indent:
                xf.write("\n" + INDENT)
        self.records_written += 1

    def flush(self) -> int:
        """Append everything buffered since the last flush to the target file.

        Returns the number of bytes written.
        """

        self._require_open()
        return self._drain()

    def close(self) -> None:
        """Close the root element and the document, then perform a final flush."""

        self._require_open()
        if not self._root_started:
            raise WriterStateError(f"Root element not started for {self.path}")

        if self.use_indent and self.records_written:
            self._xf.write("\n")
        self._stack.close()
        self._buffer.write(b"\n")
        self.state = WriterState.CLOSED
        self._xf = None

        self._drain()
        logger.debug("Closed %s after %d records", self.path, self.records_written)

    def _drain(self) -> int:
        content = self._buffer.getvalue()
        if not content and self._file_created:
            return 0

        mode = "ab" if self._file_created else "wb"
        try:
            with self.path.open(mode) as handle:
                handle.write(content)
        except FileNotFoundError as exc:
            if not self._file_created and not self.path.parent.is_dir():
                raise IOUnavailableError(
                    f"Unable to open file ({self.path}): directory does not exist", self.path
                ) from exc
            raise IOWriteFailedError(f"Unable to write in file ({self.path})", self.path) from exc
        except OSError as exc:
            raise IOWriteFailedError(f"Unable to write in file ({self.path})", self.path) from exc

        self._file_created = True
        self._buffer.seek(0)
        self._buffer.truncate()
        logger.debug("Flushed %d bytes to %s", len(content), self.path)
        return len(content)
