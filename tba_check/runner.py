"""Check selection and sequential execution.

Feature flags select which checks run. Checks always run in the order
description, send_sticker, sticker_set regardless of the order the flags
were given in, and the first failure aborts the remaining checks.
"""

import logging
from collections.abc import Iterable

from telegram import Bot

from .checks import BaseCheck, DescriptionCheck, SendStickerCheck, StickerSetCheck
from .config import Config

logger = logging.getLogger(__name__)

DESCRIPTION = "description"
SEND_STICKER = "send_sticker"
STICKER_SET = "sticker_set"
ONLY_EDIT_STICKER_SET = "only_edit_sticker_set"
ALL = "all"

FEATURES = (DESCRIPTION, SEND_STICKER, STICKER_SET, ONLY_EDIT_STICKER_SET)
ALL_FEATURES = (DESCRIPTION, SEND_STICKER, STICKER_SET)
DEFAULT_FEATURES = (DESCRIPTION,)


class UnknownFeatureError(ValueError):
    """Raised for a feature flag that selects no check."""


def resolve_features(names: Iterable[str]) -> list[str]:
    """Normalize requested feature flags.

    ``all`` expands to every check except the edit-only variant. When both
    ``sticker_set`` and ``only_edit_sticker_set`` are requested the edit-only
    variant wins.

    Args:
        names: Requested flags, possibly empty.

    Returns:
        Selected flags in execution order, ``["description"]`` if none given.

    Raises:
        UnknownFeatureError: If a flag name is not known.
    """
    requested: set[str] = set()
    for name in names:
        name = name.strip().lower()
        if not name:
            continue
        if name == ALL:
            requested.update(ALL_FEATURES)
        elif name in FEATURES:
            requested.add(name)
        else:
            raise UnknownFeatureError(
                f"unknown feature {name!r}, expected one of: {', '.join(FEATURES + (ALL,))}"
            )

    if not requested:
        return list(DEFAULT_FEATURES)

    if ONLY_EDIT_STICKER_SET in requested:
        requested.discard(STICKER_SET)

    return [name for name in FEATURES if name in requested]


def build_checks(bot: Bot, config: Config, features: Iterable[str]) -> list[BaseCheck]:
    """Instantiate checks for already resolved feature flags.

    Args:
        bot: Initialized bot.
        config: Harness configuration.
        features: Output of ``resolve_features``.

    Returns:
        Checks in execution order.
    """
    user_id = config.bot.user_id
    fixtures = config.fixtures
    checks: list[BaseCheck] = []
    for feature in features:
        if feature == DESCRIPTION:
            checks.append(DescriptionCheck(bot, user_id, fixtures.descriptions))
        elif feature == SEND_STICKER:
            checks.append(SendStickerCheck(bot, user_id, fixtures.send_sticker))
        elif feature in (STICKER_SET, ONLY_EDIT_STICKER_SET):
            checks.append(
                StickerSetCheck(
                    bot,
                    user_id,
                    fixtures.sticker_set,
                    edit_only=feature == ONLY_EDIT_STICKER_SET,
                )
            )
    return checks


async def run_checks(bot: Bot, config: Config, features: Iterable[str]) -> None:
    """Run the selected checks one after another.

    Args:
        bot: Initialized bot.
        config: Harness configuration.
        features: Output of ``resolve_features``.

    Raises:
        CheckError: If a check fails verification.
        TelegramError: If the API rejects a call.
    """
    for check in build_checks(bot, config, features):
        logger.info(f"Running check: {check.name}")
        await check.run()
        logger.info(f"Check passed: {check.name}")
