"""Service layer entry points for sitemap generation."""

from __future__ import annotations

from .generator import GenerationResult, build_index, generate  # noqa: F401
from .index import Index  # noqa: F401
from .sitemap import Map  # noqa: F401
from .stream_writer import StreamWriter  # noqa: F401

__all__ = ["GenerationResult", "Index", "Map", "StreamWriter", "build_index", "generate"]
