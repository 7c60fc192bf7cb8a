"""Safety module - robots.txt parsing."""

from .robots_parser import RobotsParser, RobotsRules, is_path_allowed, parse_robots_txt

__all__ = ["RobotsParser", "RobotsRules", "is_path_allowed", "parse_robots_txt"]
