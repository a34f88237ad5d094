# Path: scripts/quick_search_demo.py
# Purpose: Simple CLI to run Flickr searches without starting the GUI.
# Layer: scripts.
# Details: Feeds each completed search into a SearchResultStore and prints the sections most recent first.

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from loguru import logger

from config import AppSettings, setup_logging
from core.errors import SearchFailed
from core.flickr.client import FlickrClient
from core.search.store import SearchResultStore


def main() -> int:
    """Execute one or more searches from the command line."""

    parser = argparse.ArgumentParser(description="Run quick Flickr photo searches")
    parser.add_argument("--text", type=str, action="append", required=True, help="Query to search for (repeatable)")
    parser.add_argument("--per-page", type=int, default=None, help="Number of photos requested per search")
    args = parser.parse_args()

    settings = AppSettings.from_env()
    if args.per_page is not None:
        settings.flickr.per_page = args.per_page
    setup_logging(settings.log_level, settings.log_dir)

    client = FlickrClient(settings.flickr)
    store = SearchResultStore(capacity=settings.grid.max_sections)

    for text in args.text:
        query = text.strip()
        if not query:
            continue
        try:
            result = client.search_photos(query)
        except SearchFailed as exc:
            logger.error("Error searching: {}", exc)
            continue
        logger.info("Found {} matching {}", len(result.photos), result.query)
        store.prepend(result)

    for section in range(store.section_count()):
        result = store.result(section)
        print(f"[{section}] {result.query}: {store.item_count(section)} photos")
        for index in range(store.item_count(section)):
            photo = store.item(section, index)
            print(f"    {photo.photo_id} {photo.image_url(settings.flickr.thumbnail_size, settings.flickr.image_host)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
