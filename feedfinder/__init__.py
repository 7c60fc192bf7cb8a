"""
Feed Finder - discovers RSS, ATOM and OPML feeds advertised by a web page.

This package provides:
- Simplified robots.txt compliance
- <link> marker extraction and feed classification
- Relative feed URL resolution
- A fail-soft HTTP fetcher
"""

from feedfinder.config import DEFAULT_USER_AGENT
from feedfinder.finder import FeedFinder, find_feeds

__version__ = "1.0.0"

__all__ = ["DEFAULT_USER_AGENT", "FeedFinder", "find_feeds"]
