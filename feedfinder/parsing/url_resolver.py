"""
URL Resolver Module

Turns feed references found in a page into absolute URLs.
"""

import posixpath
from urllib.parse import urlsplit


ABSOLUTE_MARKERS = ("http://", "https://")


def is_valid_url(url: str) -> bool:
    """
    Check that a string is a syntactically valid absolute URL.
    
    Requires a scheme and a host, rejects embedded whitespace and bad ports.
    """
    if not url or any(ch.isspace() for ch in url):
        return False
    
    try:
        parsed = urlsplit(url)
        # Accessing .port validates it
        parsed.port
    except ValueError:
        return False
    
    return bool(parsed.scheme) and bool(parsed.hostname)


def _origin(parsed) -> str:
    # netloc without credentials keeps host[:port] as written
    host = parsed.netloc.rpartition("@")[2]
    return f"{parsed.scheme}://{host}"


def resolve_feed_url(href: str, base_url: str) -> str:
    """
    Make a feed href absolute against the page it was found on.
    
    Any href containing "http://" or "https://" is taken as already absolute.
    Root-relative hrefs are joined to the page origin, everything else to the
    directory of the page path. A trailing slash is dropped first, so
    "/blog/" has "/" as its directory.
    
    Args:
        href: Raw href value from the link marker
        base_url: Absolute URL of the page
        
    Returns:
        Absolute feed URL
    """
    if any(marker in href for marker in ABSOLUTE_MARKERS):
        return href
    
    parsed = urlsplit(base_url)
    full_url = _origin(parsed)
    
    if not href.startswith("/"):
        directory = posixpath.dirname(parsed.path.rstrip("/"))
        if not directory.endswith("/"):
            directory += "/"
        full_url += directory
    
    return full_url + href
