"""sendSticker check."""

from telegram import Bot

from ..errors import VerificationError
from ..models import SendStickerFixture
from .base import BaseCheck


class SendStickerCheck(BaseCheck):
    """Sends one sticker file to the configured user.

    When the fixture has an emoji it is sent as the emoji associated with
    the freshly uploaded sticker.
    """

    name = "send_sticker"

    def __init__(self, bot: Bot, user_id: int, fixture: SendStickerFixture):
        super().__init__(bot, user_id)
        self.fixture = fixture

    async def run(self) -> None:
        if self.fixture.emoji:
            self.logger.info("send_sticker with the associated emoji")
        else:
            self.logger.info("send_sticker")

        path = self.require_asset(self.fixture.path)
        message = await self.bot.send_sticker(
            chat_id=self.user_id,
            sticker=path,
            emoji=self.fixture.emoji,
        )

        if message.sticker is None:
            raise VerificationError("message.sticker", "a sticker", None)
        self.logger.info(f"Sticker sent as message {message.message_id}")
