"""Parsing module - link extraction, feed classification and URL resolution."""

from .classifier import FeedCandidate, FeedType, classify_link
from .link_extractor import extract_link_attributes
from .url_resolver import is_valid_url, resolve_feed_url

__all__ = [
    "FeedCandidate",
    "FeedType",
    "classify_link",
    "extract_link_attributes",
    "is_valid_url",
    "resolve_feed_url",
]
