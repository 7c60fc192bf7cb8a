"""
Feed Finder - CLI Entry Point

Discovers RSS, ATOM and OPML feeds advertised by a web page.
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from feedfinder.config import config
from feedfinder.finder import FeedFinder
from feedfinder.parsing.url_resolver import is_valid_url


console = Console()


def setup_logging(level: str = "INFO") -> None:
    """Configure logging with rich handler."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Feed Finder - discover RSS, ATOM and OPML feeds on a page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --url https://example.com/blog
  %(prog)s --url https://example.com/blog --user-agent MyBot --ignore-robots
  %(prog)s --url https://example.com/blog --check-robots
        """,
    )

    parser.add_argument(
        "--url", "-u",
        help="Page URL to discover feeds on",
    )
    parser.add_argument(
        "--user-agent", "-a",
        default=config.user_agent,
        help=f"User-Agent for robots.txt and fetching (default: {config.user_agent})",
    )
    parser.add_argument(
        "--ignore-robots",
        action="store_true",
        help="Do not consult robots.txt before fetching the page",
    )
    parser.add_argument(
        "--check-robots",
        action="store_true",
        help="Only report whether robots.txt allows the URL",
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=config.request_timeout,
        help=f"Request timeout in seconds (default: {config.request_timeout})",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.log_level,
        help=f"Logging level (default: {config.log_level})",
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """Run discovery for parsed arguments and return the exit code."""
    setup_logging(args.log_level)

    if not args.url:
        console.print("[red]No URL provided. Use --url[/red]")
        return 1

    if not is_valid_url(args.url.strip()):
        console.print(f"[red]Invalid URL: {args.url}[/red]")
        return 1

    settings = config.model_copy(update={"request_timeout": args.timeout})
    finder = FeedFinder(
        args.url,
        user_agent=args.user_agent,
        obey_robots=not args.ignore_robots,
        settings=settings,
    )

    try:
        if args.check_robots:
            if finder.robots_allowed():
                console.print(f"[green]Allowed[/green] for {finder.user_agent}: {finder.url}")
            else:
                console.print(f"[yellow]Disallowed[/yellow] for {finder.user_agent}: {finder.url}")
            return 0

        feeds = finder.get_feeds()
    finally:
        finder.close()

    if not feeds:
        console.print("[yellow]No feeds found[/yellow]")
        return 0

    console.print(f"\n[bold]Found {len(feeds)} feed(s):[/bold]")
    for feed_url in feeds:
        console.print(f"  {feed_url}")

    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        sys.exit(run(args))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
