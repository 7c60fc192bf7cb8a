"""
Feed Finder Module

The public entry point that connects all discovery components:
1. URL validation
2. Robots.txt check (optional)
3. Page fetch
4. <link> extraction, feed classification and URL resolution
5. Order-preserving deduplication
"""

import logging
from typing import Callable, List, Optional

from feedfinder.config import DEFAULT_USER_AGENT, FinderConfig, config
from feedfinder.fetchers.http_fetcher import HTTPFetcher
from feedfinder.parsing.classifier import classify_link
from feedfinder.parsing.link_extractor import extract_link_attributes
from feedfinder.parsing.url_resolver import is_valid_url, resolve_feed_url
from feedfinder.safety.robots_parser import RobotsParser


logger = logging.getLogger(__name__)


class FeedFinder:
    """
    Discovers the RSS, ATOM and OPML feeds advertised by a web page.
    
    Setters return the finder so configuration can be chained. Empty
    string arguments are ignored and the previous value is kept.
    
    The fetch callable takes a URL and must return the body as text, or
    an empty string on any failure. When omitted, an HTTPFetcher sending
    the configured user agent is used.
    
    Example:
        finder = FeedFinder().set_url("https://example.com/blog").set_obey_robots(False)
        for feed_url in finder.get_feeds():
            print(feed_url)
    """
    
    def __init__(
        self,
        url: str = "",
        user_agent: str | None = None,
        obey_robots: bool | None = None,
        fetch: Callable[[str], str] | None = None,
        settings: FinderConfig | None = None,
    ):
        """
        Initialize the feed finder.
        
        Args:
            url: Page URL to discover feeds on
            user_agent: Identity for robots.txt matching and fetching (default from config)
            obey_robots: Whether robots.txt may block discovery (default from config)
            fetch: Fail-soft fetch callable (url) -> text
            settings: Custom configuration (uses global if None)
        """
        self._settings = settings or config
        self._url = ""
        self._user_agent = DEFAULT_USER_AGENT
        self._obey_robots = True
        self._fetch = fetch
        self._http_fetcher: Optional[HTTPFetcher] = None
        
        self.set_url(url)
        self.set_user_agent(user_agent if user_agent is not None else self._settings.user_agent)
        self.set_obey_robots(obey_robots if obey_robots is not None else self._settings.obey_robots)
    
    @property
    def url(self) -> str:
        """Page URL to discover feeds on."""
        return self._url
    
    @property
    def user_agent(self) -> str:
        """Identity used for robots.txt matching and fetching."""
        return self._user_agent
    
    @property
    def obey_robots(self) -> bool:
        """Whether robots.txt is consulted before fetching the page."""
        return self._obey_robots
    
    def set_url(self, url: str) -> "FeedFinder":
        if url and url.strip():
            self._url = url.strip()
        return self
    
    def set_user_agent(self, user_agent: str) -> "FeedFinder":
        if user_agent and user_agent.strip():
            self._user_agent = user_agent.strip()
        return self
    
    def set_obey_robots(self, obey_robots: bool = True) -> "FeedFinder":
        self._obey_robots = bool(obey_robots)
        return self
    
    def _fetch_text(self, url: str) -> str:
        """Fetch through the injected callable or the default HTTP fetcher."""
        if self._fetch is not None:
            return self._fetch(url) or ""
        
        if self._http_fetcher is None:
            self._http_fetcher = HTTPFetcher(
                timeout=self._settings.request_timeout,
                max_retries=self._settings.max_retries,
                retry_backoff=self._settings.retry_backoff,
            )
        return self._http_fetcher.fetch_text(url, user_agent=self._user_agent)
    
    def robots_allowed(self) -> bool:
        """
        Check whether robots.txt lets the configured agent crawl the URL.
        
        Returns:
            False for an empty or invalid URL, True when there is no policy
        """
        return RobotsParser(fetch=self._fetch_text).can_fetch(self._url, self._user_agent)
    
    def get_feeds(self) -> List[str]:
        """
        Discover the feeds advertised by the configured page.
        
        Returns:
            Absolute feed URLs in first-seen order, without duplicates.
            Empty when the URL is invalid, robots.txt forbids the page
            or the page could not be fetched.
        """
        feeds: List[str] = []
        url = self._url
        
        if not url or not is_valid_url(url):
            logger.debug(f"No valid URL to discover feeds on: {url!r}")
            return feeds
        
        if self._obey_robots and not self.robots_allowed():
            return feeds
        
        html = self._fetch_text(url)
        if not html.strip():
            logger.info(f"No content retrieved from {url}")
            return feeds
        
        for attributes in extract_link_attributes(html):
            candidate = classify_link(attributes)
            if candidate is None:
                continue
            
            feed_url = resolve_feed_url(candidate.href, url)
            if feed_url not in feeds:
                logger.debug(f"Found {candidate.matched_type.value} feed: {feed_url}")
                feeds.append(feed_url)
        
        logger.info(f"Discovered {len(feeds)} feed(s) on {url}")
        return feeds
    
    def close(self) -> None:
        """Release the default HTTP fetcher, if one was created."""
        if self._http_fetcher is not None:
            self._http_fetcher.close()
            self._http_fetcher = None


def find_feeds(
    url: str,
    user_agent: str | None = None,
    obey_robots: bool | None = None,
    fetch: Callable[[str], str] | None = None,
) -> List[str]:
    """Discover feeds on a page in a single call."""
    finder = FeedFinder(url, user_agent=user_agent, obey_robots=obey_robots, fetch=fetch)
    try:
        return finder.get_feeds()
    finally:
        finder.close()
