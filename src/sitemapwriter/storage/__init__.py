"""Utilities for working with the directory sitemaps are written to."""

from __future__ import annotations

from pathlib import Path
from typing import Union

#: Subdirectory of the output root holding the individual sitemap files.
SITEMAP_SUBDIR = "sitemap"

#: File name of the sitemap index, written directly under the output root.
INDEX_FILENAME = "sitemap.xml"

#: Default location, relative to the working directory, where files are written.
DEFAULT_OUTPUT_ROOT = Path("public")


_Pathish = Union[str, Path]


def resolve_output_root(output_root: _Pathish | None = None) -> Path:
    """Return a :class:`Path` pointing at the output root.

    ``output_root`` may be either a string or :class:`Path`.  When ``None`` is
    provided, :data:`DEFAULT_OUTPUT_ROOT` is returned.  The path is not created
    on disk; writers expect it to exist, so callers use
    :func:`ensure_output_root` beforehand.
    """

    if output_root is None:
        return DEFAULT_OUTPUT_ROOT
    if isinstance(output_root, Path):
        return output_root
    return Path(output_root)


def sitemap_dir(output_root: _Pathish | None = None) -> Path:
    """Return the directory individual sitemap files are written to."""

    return resolve_output_root(output_root) / SITEMAP_SUBDIR


def ensure_output_root(output_root: _Pathish | None = None) -> Path:
    """Create the output root and its sitemap subdirectory, returning the root."""

    root = resolve_output_root(output_root)
    sitemap_dir(root).mkdir(parents=True, exist_ok=True)
    return root


__all__ = [
    "DEFAULT_OUTPUT_ROOT",
    "INDEX_FILENAME",
    "SITEMAP_SUBDIR",
    "ensure_output_root",
    "resolve_output_root",
    "sitemap_dir",
]
