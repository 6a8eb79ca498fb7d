"""Base class for Bot API check sequences.

A check issues a fixed sequence of Bot API calls and verifies that what it
wrote is what the API returns. Any failure propagates to the caller and ends
the run.
"""

import logging
from pathlib import Path
from typing import Any

from telegram import Bot

from ..errors import MissingAssetError, VerificationError


class BaseCheck:
    """Common functionality for all checks.

    Attributes:
        name: Feature flag that selects the check.
        bot: Initialized, throttled bot.
        user_id: Telegram user receiving stickers and owning sticker sets.
    """

    name = "base"

    def __init__(self, bot: Bot, user_id: int):
        """Initialize check.

        Args:
            bot: Initialized bot used for every call.
            user_id: Target Telegram user id.
        """
        self.bot = bot
        self.user_id = user_id
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    async def run(self) -> None:
        """Run the check sequence.

        Raises:
            VerificationError: If a value read back differs from the one written.
            TelegramError: If the API rejects a call.
        """
        raise NotImplementedError

    def verify(self, field: str, expected: Any, actual: Any) -> None:
        """Compare a written value with the value read back.

        Args:
            field: Name of the compared value, used in logs and errors.
            expected: Value written.
            actual: Value read back.

        Raises:
            VerificationError: If the values differ.
        """
        if expected != actual:
            raise VerificationError(field, expected, actual)
        self.logger.debug(f"{field} verified: {actual!r}")

    @staticmethod
    def require_asset(path: Path) -> Path:
        """Make sure a sticker image exists before it is uploaded.

        Args:
            path: Asset path.

        Returns:
            The same path.

        Raises:
            MissingAssetError: If the file does not exist.
        """
        if not Path(path).is_file():
            raise MissingAssetError(path)
        return path
