"""
Robots.txt Parser Module

Fetches and interprets robots.txt rules before a page is crawled.

The evaluation is deliberately simple and sequential: a User-agent line
switches rule collection on or off, Disallow lines collected while it is on
are prefix-matched against the target path, and an applicable empty
Disallow allows everything. Allow, wildcards, crawl-delay and
most-specific-match precedence are not supported.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable
from urllib.parse import urlsplit

from feedfinder.parsing.url_resolver import is_valid_url


logger = logging.getLogger(__name__)

USER_AGENT_LINE = re.compile(r"User-agent:\s*(.*)", re.IGNORECASE)
DISALLOW_LINE = re.compile(r"Disallow:(.*)", re.IGNORECASE)


@dataclass
class RobotsRules:
    """Disallow rules from robots.txt that apply to one user agent."""
    
    user_agent: str
    disallowed_paths: list[str] = field(default_factory=list)
    allow_all: bool = False
    
    def is_allowed(self, path: str) -> bool:
        """Check a path against the collected rules."""
        if self.allow_all:
            return True
        
        path = path or "/"
        for rule in self.disallowed_paths:
            if path.startswith(rule):
                logger.debug(f"Path {path} matched Disallow: {rule}")
                return False
        return True


def _agent_matches(value: str, user_agent: str) -> bool:
    value = value.lower()
    if "*" in value:
        return True
    return bool(user_agent) and user_agent.lower() in value


def parse_robots_txt(content: str, user_agent: str) -> RobotsRules:
    """
    Collect the Disallow rules that apply to a user agent.
    
    Each User-agent line overwrites whether following rules apply; rules
    gathered earlier are kept. An applicable empty Disallow stops parsing
    and marks everything allowed.
    
    Args:
        content: Raw robots.txt text
        user_agent: Agent identity to match against User-agent lines
        
    Returns:
        RobotsRules for the agent
    """
    rules = RobotsRules(user_agent=user_agent)
    rule_applies = False
    
    for line in content.splitlines():
        line = line.strip()
        if not line:
            continue
        
        agent_match = USER_AGENT_LINE.search(line)
        if agent_match:
            rule_applies = _agent_matches(agent_match.group(1).strip(), user_agent)
        
        if not rule_applies:
            continue
        
        disallow_match = DISALLOW_LINE.search(line)
        if disallow_match:
            path = disallow_match.group(1).strip()
            if not path:
                rules.allow_all = True
                return rules
            rules.disallowed_paths.append(path)
    
    return rules


def is_path_allowed(content: str, path: str, user_agent: str) -> bool:
    """
    Decide whether robots.txt text allows a path for a user agent.
    
    Empty robots.txt content means there is no policy, so everything is allowed.
    """
    if not content or not content.strip():
        return True
    return parse_robots_txt(content, user_agent).is_allowed(path)


class RobotsParser:
    """
    Fetches robots.txt for a URL's site and checks the URL against it.
    
    The fetch callable must be fail-soft: it returns the body on success
    and an empty string on any failure, which is treated as "no policy".
    
    Example:
        parser = RobotsParser(fetch=lambda u: fetcher.fetch_text(u, "Googlebot"))
        if parser.can_fetch("https://example.com/blog", "Googlebot"):
            # Safe to crawl
            ...
    """
    
    def __init__(self, fetch: Callable[[str], str]):
        """
        Initialize the robots.txt parser.
        
        Args:
            fetch: Callable taking a URL and returning its text
        """
        self._fetch = fetch
    
    def robots_url(self, url: str) -> str:
        """Build the robots.txt URL for any URL on a site."""
        parsed = urlsplit(url)
        host = parsed.netloc.rpartition("@")[2]
        return f"{parsed.scheme}://{host}/robots.txt"
    
    def can_fetch(self, url: str, user_agent: str) -> bool:
        """
        Check if a URL is allowed to be fetched according to robots.txt.
        
        Args:
            url: The URL to check
            user_agent: Agent identity to evaluate rules for
            
        Returns:
            True if allowed, False if disallowed or the URL is invalid
        """
        if not url or not is_valid_url(url):
            logger.debug(f"Refusing robots check for invalid URL: {url!r}")
            return False
        
        robots_url = self.robots_url(url)
        content = self._fetch(robots_url)
        
        if not content or not content.strip():
            logger.debug(f"No robots.txt policy at {robots_url}")
            return True
        
        allowed = is_path_allowed(content, urlsplit(url).path, user_agent)
        if not allowed:
            logger.info(f"Blocked by robots.txt for {user_agent}: {url}")
        return allowed
