"""Application entry point.

Loads configuration from the environment (and ``.env``), builds a throttled
bot and runs the checks selected with ``-F/--features`` or ``TBA_FEATURES``.
Use breakpoints if you want to inspect the intermediate results.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dependency_injector import providers
from pydantic import ValidationError
from telegram.error import TelegramError

from .config import LOG_LEVELS
from .core.container import Container
from .errors import CheckError, ConfigError
from .runner import ALL, FEATURES, UnknownFeatureError, resolve_features, run_checks

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments without the program name, defaults to ``sys.argv[1:]``.

    Returns:
        Parsed arguments; ``features`` is a flat list or None.
    """
    parser = argparse.ArgumentParser(
        prog="tba-check",
        description="Manual smoke checks for Telegram Bot API methods.",
    )
    parser.add_argument(
        "-F",
        "--features",
        action="append",
        metavar="FEATURES",
        help=(
            "comma separated checks to run, repeatable: "
            f"{', '.join(FEATURES + (ALL,))} (default: $TBA_FEATURES or description)"
        ),
    )
    parser.add_argument(
        "--fixtures",
        type=Path,
        default=None,
        help="YAML file with the values the checks write",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="logging level (default: $LOG_LEVEL or INFO)",
    )
    args = parser.parse_args(argv)
    if args.features is not None:
        args.features = [name for value in args.features for name in value.split(",")]
    return args


def configure_logging(level: str | None) -> None:
    """Set up root logging once for the process.

    Args:
        level: Level name, INFO when None.
    """
    logging.basicConfig(format=LOG_FORMAT, level=(level or "INFO").upper())
    # httpx logs request URLs, which contain the bot token
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def run(container: Container, features: list[str]) -> None:
    """Run the selected checks with an initialized bot.

    Args:
        container: DI container providing config and bot.
        features: Resolved feature flags.
    """
    config = container.config()
    bot = container.bot()
    async with bot:
        await run_checks(bot, config, features)


def main(argv: list[str] | None = None) -> int:
    """Main harness entry point.

    Args:
        argv: Command line arguments without the program name.

    Returns:
        Process exit status: 0 on success, 1 on a failed check or API error,
        2 on an unknown feature flag or log level.
    """
    args = parse_args(argv)
    configure_logging(args.log_level)
    logger.info("The program started")

    container = Container()
    if args.fixtures is not None:
        container.fixtures_path.override(providers.Object(args.fixtures))

    try:
        config = container.config()
    except (ValidationError, ConfigError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    if args.log_level is None:
        logging.getLogger().setLevel(config.bot.log_level)

    requested = args.features if args.features is not None else config.bot.feature_list
    try:
        features = resolve_features(requested)
    except UnknownFeatureError as e:
        logger.error(str(e))
        return 2

    logger.info(f"Selected checks: {', '.join(features)}")
    try:
        asyncio.run(run(container, features))
    except CheckError as e:
        logger.error(f"Check failed: {e}")
        return 1
    except TelegramError as e:
        logger.error(f"Bot API error: {e}")
        return 1

    logger.info("All selected checks passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
