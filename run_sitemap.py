"""Convenience script for generating the configured sitemaps locally."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

# Ensure the src directory is on the Python path so the sitemapwriter package can be imported
SRC_PATH = Path(__file__).resolve().parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from sitemapwriter.config import AppConfig  # noqa: E402  (import after path setup)
from sitemapwriter.exceptions import SitemapIOError  # noqa: E402
from sitemapwriter.services.generator import generate  # noqa: E402
from sitemapwriter.storage import ensure_output_root  # noqa: E402


def main() -> None:
    """Load the sitemap configuration and write every sitemap plus the index."""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    try:
        config = AppConfig.from_file(config_path)
    except (FileNotFoundError, ValueError) as exc:
        logging.error("Could not load sitemap configuration: %s", exc)
        sys.exit(1)

    ensure_output_root(config.output_dir)

    try:
        result = generate(config)
    except SitemapIOError as exc:
        logging.error("Failed to write %s: %s", exc.path, exc)
        sys.exit(1)

    print(json.dumps(result.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    main()
