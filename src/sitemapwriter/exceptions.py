"""Error types raised while building sitemap and sitemap index files."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "SitemapError",
    "SitemapValidationError",
    "InvalidLocationError",
    "InvalidPriorityError",
    "InvalidFrequencyError",
    "InvalidLastModifiedError",
    "SitemapIOError",
    "FileNotWritableError",
    "IOWriteFailedError",
    "IOUnavailableError",
    "WriterStateError",
]


class SitemapError(Exception):
    """Base class for every error raised by :mod:`sitemapwriter`."""


class SitemapValidationError(SitemapError, ValueError):
    """An entry was rejected before anything was written.

    Validation errors never touch writer state, so callers may catch them and
    carry on with the next entry.
    """


class InvalidLocationError(SitemapValidationError):
    """The resolved location is not an absolute URL."""


class InvalidPriorityError(SitemapValidationError):
    """The priority lies outside ``0.0 - 1.0``."""


class InvalidFrequencyError(SitemapValidationError):
    """The change frequency is not one of the protocol values."""


class InvalidLastModifiedError(SitemapValidationError):
    """The last-modified value could not be turned into a timestamp."""


class SitemapIOError(SitemapError):
    """Filesystem failure while producing an output file.

    These are fatal to the owning :class:`~sitemapwriter.services.sitemap.Map`
    or :class:`~sitemapwriter.services.index.Index`.
    """

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(message)
        self.path = Path(path)


class FileNotWritableError(SitemapIOError):
    """An existing target file cannot be replaced."""


class IOWriteFailedError(SitemapIOError):
    """Flushing buffered XML to the target file failed."""


class IOUnavailableError(IOWriteFailedError):
    """The target file could not be created because its directory is missing."""


class WriterStateError(SitemapError, RuntimeError):
    """A stream writer was used outside of its open lifetime."""
