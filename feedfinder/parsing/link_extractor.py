"""
Link Extractor Module

Scans raw HTML for <link> markers and yields their attributes.
"""

import logging
from typing import Dict, Iterator

from bs4 import BeautifulSoup, Tag


logger = logging.getLogger(__name__)


def extract_link_attributes(html: str, parser: str = "lxml") -> Iterator[Dict[str, str]]:
    """
    Yield the attributes of every <link> marker in document order.
    
    The document is parsed once on the first next() call; markers are then
    yielded one at a time while walking the tree, so a consumer that stops
    early skips the rest of the walk.
    
    Attribute names come back lower-cased and values as raw strings
    (rel is not split into a list). A marker without attributes
    yields an empty dict. Malformed markup yields fewer markers, never an error.
    
    Args:
        html: Raw HTML text
        parser: BeautifulSoup tree builder to use
    """
    if not html or not html.strip():
        return
    
    soup = BeautifulSoup(html, parser, multi_valued_attributes=None)
    
    count = 0
    for node in soup.descendants:
        if not isinstance(node, Tag) or node.name != "link":
            continue
        count += 1
        yield {
            str(name).lower(): value if isinstance(value, str) else " ".join(value)
            for name, value in node.attrs.items()
        }
    
    logger.debug(f"Found {count} <link> markers")
