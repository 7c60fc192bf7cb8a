"""
Feed Classifier Module

Decides whether a <link> marker points at an RSS, ATOM or OPML document.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


class FeedType(Enum):
    """Kind of feed a link marker was matched as."""
    RSS = "rss"
    RSS_LEGACY_XML = "rss-legacy-xml"
    ATOM = "atom"
    OPML = "opml"


FEED_RELS = ("alternate", "outline")

# Checked in order, first match wins
TYPE_PRIORITY = (
    ("application/rss+xml", FeedType.RSS),
    ("text/xml", FeedType.RSS_LEGACY_XML),
    ("application/atom+xml", FeedType.ATOM),
)

OPML_TYPES = ("text/x-opml", "application/xml", "text/xml")
OPML_SUFFIX = ".opml"


@dataclass(frozen=True)
class FeedCandidate:
    """A link marker identified as a feed."""
    
    href: str
    matched_type: FeedType


def _lookup(attributes: Mapping[str, str], name: str) -> str:
    """Case-insensitive attribute lookup, empty string when missing."""
    value = attributes.get(name)
    if value is None:
        for key, candidate in attributes.items():
            if key.lower() == name:
                value = candidate
                break
    return value or ""


def classify_link(attributes: Mapping[str, str]) -> Optional[FeedCandidate]:
    """
    Classify one link marker.
    
    Args:
        attributes: Attribute mapping from the link extractor
        
    Returns:
        FeedCandidate, or None if the marker is not a feed reference
    """
    rel = _lookup(attributes, "rel").strip().lower()
    if rel not in FEED_RELS:
        return None
    
    link_type = _lookup(attributes, "type").strip().lower()
    if not link_type:
        return None
    
    href = _lookup(attributes, "href").strip()
    if not href:
        return None
    
    for mime_type, feed_type in TYPE_PRIORITY:
        if link_type == mime_type:
            return FeedCandidate(href=href, matched_type=feed_type)
    
    if link_type in OPML_TYPES and href.endswith(OPML_SUFFIX):
        return FeedCandidate(href=href, matched_type=FeedType.OPML)
    
    return None
