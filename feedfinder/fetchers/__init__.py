"""Fetchers module - HTTP content fetching."""

from .http_fetcher import FetchResult, HTTPFetcher

__all__ = ["FetchResult", "HTTPFetcher"]
