"""Bot description round-trip check.

Covers setMyDescription/getMyDescription and
setMyShortDescription/getMyShortDescription, with and without a locale.
"""

from telegram import Bot

from ..models import DescriptionFixture
from .base import BaseCheck


class DescriptionCheck(BaseCheck):
    """Writes each description fixture and reads it back."""

    name = "description"

    def __init__(self, bot: Bot, user_id: int, descriptions: list[DescriptionFixture]):
        super().__init__(bot, user_id)
        self.descriptions = descriptions

    async def run(self) -> None:
        for fixture in self.descriptions:
            await self.check_description(fixture)

    async def check_description(self, fixture: DescriptionFixture) -> None:
        """Round-trip the full and the short description for one locale.

        Args:
            fixture: Texts and optional language code.
        """
        self.logger.info(
            "set_my_description/set_my_short_description & "
            f"get_my_description/get_my_short_description with {fixture.locale_label}"
        )
        language_code = fixture.language_code

        await self.bot.set_my_description(
            description=fixture.description, language_code=language_code
        )
        description = await self.bot.get_my_description(language_code=language_code)
        self.verify("description", fixture.description, description.description)

        short_description = fixture.effective_short_description
        await self.bot.set_my_short_description(
            short_description=short_description, language_code=language_code
        )
        result = await self.bot.get_my_short_description(language_code=language_code)
        self.verify("short_description", short_description, result.short_description)
