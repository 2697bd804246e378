"""Main entry point for postfeed.

This is the composition root: the only place that decides which
DataService implementation the rest of the program receives.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence, Union

import structlog

from .feed import PostsViewModel
from .services import DataServiceError, MockDataService, NetworkDataService
from .utils import Settings, get_settings

logger = structlog.get_logger()


def configure_logging(level: str = "INFO") -> None:
    """Configure stdlib logging and structlog (output goes to stderr)."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    # Suppress noisy HTTP request logs
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def create_data_service(
    settings: Optional[Settings] = None,
    use_mock: bool = False,
    endpoint: Optional[str] = None,
) -> Union[NetworkDataService, MockDataService]:
    """Build the data service the application will inject.

    Args:
        settings: Application settings (uses get_settings() if None).
        use_mock: Force the in-memory service (overrides settings.use_mock_service).
        endpoint: Override for settings.posts_endpoint.

    Returns:
        A service satisfying the DataService protocol.
    """
    settings = settings or get_settings()

    if use_mock or settings.use_mock_service:
        logger.info("using_mock_data_service")
        return MockDataService()

    url = endpoint or settings.posts_endpoint
    logger.info("using_network_data_service", endpoint=url)
    return NetworkDataService(url, timeout=settings.request_timeout)


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value}")
    return number


def print_posts(posts, show_body: bool = False) -> None:
    """Print one title per line, optionally followed by the body."""
    for post in posts:
        print(post.title)
        if show_body:
            print(f"    {post.body}")


async def async_main(args: argparse.Namespace, settings: Optional[Settings] = None) -> int:
    """Async main function.

    Returns:
        Exit code.
    """
    settings = settings or get_settings()
    if getattr(args, "timeout", None) is not None:
        settings = Settings.model_validate(
            {**settings.model_dump(), "request_timeout": args.timeout}
        )

    failures: list[DataServiceError] = []

    service = create_data_service(
        settings,
        use_mock=getattr(args, "mock", False),
        endpoint=getattr(args, "endpoint", None),
    )

    async with service:
        view_model = PostsViewModel(service, on_error=failures.append)
        view_model.subscribe(
            lambda posts: print_posts(posts, show_body=getattr(args, "show_body", False))
        )
        await view_model.load_posts()

    if failures:
        error = failures[-1]
        print(f"error ({error.kind.value}): {error.message}", file=sys.stderr)
        return 1

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="postfeed - fetch and list posts from a JSON endpoint",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  postfeed                          # Fetch from POSTS_ENDPOINT
  postfeed --endpoint URL           # Fetch from another endpoint
  postfeed --mock                   # Use built-in sample posts (no network)
  postfeed --mock --show-body
        """,
    )

    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use the in-memory data service (no network access)",
    )
    parser.add_argument(
        "--endpoint",
        type=str,
        help="Posts URL (overrides POSTS_ENDPOINT env var)",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        help="HTTP timeout in seconds (overrides REQUEST_TIMEOUT env var)",
    )
    parser.add_argument(
        "--show-body",
        action="store_true",
        help="Print each post body under its title",
    )

    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        return asyncio.run(async_main(args, settings))
    except KeyboardInterrupt:
        logger.info("interrupted")
        return 130
    except Exception as e:
        logger.exception("unexpected_error", error=str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
