"""
HTTP Fetcher Module

Synchronous HTTP client used to retrieve robots.txt files and HTML pages.
Uses httpx with a bounded timeout and a single retry on transient failures.
Failures never raise: callers get an unsuccessful FetchResult or an empty body.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Optional

import httpx

from feedfinder.config import config


logger = logging.getLogger(__name__)

# Status codes worth a second attempt
RETRYABLE_STATUS_CODES = (502, 503, 504)


@dataclass
class FetchResult:
    """Result of a fetch operation."""
    
    url: str
    status_code: int
    content: str = ""
    headers: dict = field(default_factory=dict)
    response_time: float = 0.0
    error: Optional[str] = None
    attempts: int = 1
    retryable: bool = True
    
    @property
    def success(self) -> bool:
        """Check if fetch was successful."""
        return 200 <= self.status_code < 300 and self.error is None
    
    @property
    def is_transient_failure(self) -> bool:
        """Check if the failure looks temporary (network error or gateway trouble)."""
        if self.error is not None:
            return self.retryable
        return self.status_code in RETRYABLE_STATUS_CODES


class HTTPFetcher:
    """
    Blocking HTTP fetcher for robots.txt and page content.
    
    Features:
    - Bounded request timeout
    - Retry on transient failures
    - Per-request User-Agent
    - Response time tracking
    
    Example:
        with HTTPFetcher() as fetcher:
            html = fetcher.fetch_text("https://example.com", user_agent="Googlebot")
    """
    
    def __init__(
        self,
        timeout: float | None = None,
        max_retries: int | None = None,
        retry_backoff: float | None = None,
        client: httpx.Client | None = None,
    ):
        """
        Initialize the HTTP fetcher.
        
        Args:
            timeout: Request timeout in seconds (default from config)
            max_retries: Extra attempts after a transient failure (default from config)
            retry_backoff: Seconds to sleep between attempts (default from config)
            client: Pre-built httpx client (created lazily if None)
        """
        self._timeout = timeout if timeout is not None else config.request_timeout
        self._max_retries = max_retries if max_retries is not None else config.max_retries
        self._retry_backoff = retry_backoff if retry_backoff is not None else config.retry_backoff
        self._client = client
        self._owns_client = client is None
    
    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client
    
    def _fetch_once(self, url: str, headers: dict) -> FetchResult:
        start_time = time.time()
        
        try:
            response = self._get_client().get(url, headers=headers)
            return FetchResult(
                url=url,
                status_code=response.status_code,
                content=response.text,
                headers=dict(response.headers),
                response_time=time.time() - start_time,
            )
        except httpx.TimeoutException:
            return FetchResult(
                url=url,
                status_code=0,
                error="Request timed out",
                response_time=time.time() - start_time,
            )
        except httpx.InvalidURL as e:
            # Raised while building the request, retrying cannot help
            return FetchResult(
                url=url,
                status_code=0,
                error=f"Invalid URL: {e}",
                response_time=time.time() - start_time,
                retryable=False,
            )
        except httpx.RequestError as e:
            return FetchResult(
                url=url,
                status_code=0,
                error=str(e) or e.__class__.__name__,
                response_time=time.time() - start_time,
            )
    
    def fetch(self, url: str, user_agent: str | None = None) -> FetchResult:
        """
        Fetch a URL and return the content.
        
        Args:
            url: The URL to fetch
            user_agent: User-Agent header to send
            
        Returns:
            FetchResult with content and metadata
        """
        headers = {"User-Agent": user_agent} if user_agent else {}
        
        attempt = 1
        result = self._fetch_once(url, headers)
        
        while not result.success and result.is_transient_failure and attempt <= self._max_retries:
            logger.debug(
                f"Retrying {url} after {result.error or result.status_code} "
                f"(attempt {attempt + 1})"
            )
            if self._retry_backoff:
                time.sleep(self._retry_backoff)
            attempt += 1
            result = self._fetch_once(url, headers)
        
        result.attempts = attempt
        
        if not result.success:
            logger.warning(f"Fetch failed for {url}: {result.error or result.status_code}")
        
        return result
    
    def fetch_text(self, url: str, user_agent: str | None = None) -> str:
        """
        Fetch a URL and return its body, or an empty string on any failure.
        
        This is the fail-soft contract relied on by robots checks and feed discovery.
        """
        result = self.fetch(url, user_agent=user_agent)
        return result.content if result.success else ""
    
    def close(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None
    
    def __enter__(self) -> "HTTPFetcher":
        return self
    
    def __exit__(self, *exc_info) -> None:
        self.close()
