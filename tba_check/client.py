"""Throttled Bot API client construction."""

import logging

from telegram.ext import AIORateLimiter, ExtBot
from telegram.request import HTTPXRequest

from .config import BotConfig, ThrottleConfig

logger = logging.getLogger(__name__)


def build_rate_limiter(throttle: ThrottleConfig) -> AIORateLimiter:
    """Create the library rate limiter from configured limits.

    Args:
        throttle: Throttle limits.

    Returns:
        AIORateLimiter applying the overall and per-group limits.
    """
    return AIORateLimiter(
        overall_max_rate=throttle.overall_max_rate,
        overall_time_period=throttle.overall_time_period,
        group_max_rate=throttle.group_max_rate,
        group_time_period=throttle.group_time_period,
        max_retries=throttle.max_retries,
    )


def build_bot(bot_config: BotConfig, throttle: ThrottleConfig) -> ExtBot:
    """Create a bot whose every request goes through the rate limiter.

    The returned bot is not initialized; use it as ``async with bot:``.

    Args:
        bot_config: Bot credentials and timeout.
        throttle: Throttle limits.

    Returns:
        Configured ExtBot instance.
    """
    request = HTTPXRequest(
        connect_timeout=bot_config.timeout,
        read_timeout=bot_config.timeout,
        write_timeout=bot_config.timeout,
    )
    logger.info(
        "Bot initialized with throttle %s req/%ss overall, %s req/%ss per group",
        throttle.overall_max_rate,
        throttle.overall_time_period,
        throttle.group_max_rate,
        throttle.group_time_period,
    )
    return ExtBot(
        token=bot_config.bot_token,
        request=request,
        rate_limiter=build_rate_limiter(throttle),
    )
