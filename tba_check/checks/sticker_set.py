"""Sticker set management check.

Creation half: deleteStickerSet, uploadStickerFile, createNewStickerSet.
Edit half: getStickerSet, setStickerSetTitle, setStickerEmojiList,
setStickerKeywords, uploadStickerFile, addStickerToSet.

Avoid running this too often in a row: the API may answer with errors such
as STICKERSET_INVALID for a set that was only just deleted or created.
"""

from telegram import Bot, InputSticker, MaskPosition
from telegram.constants import StickerFormat
from telegram.error import TelegramError

from ..errors import CheckError
from ..models import StickerFixture, StickerSetFixture
from .base import BaseCheck

ADD_STICKERS_URL = "https://t.me/addstickers/{name}"


class StickerSetCheck(BaseCheck):
    """Creates a sticker set owned by the configured user and edits it.

    Attributes:
        fixture: Set title, stickers and edit values.
        edit_only: Skip the creation half and edit an existing set.
    """

    name = "sticker_set"

    def __init__(
        self,
        bot: Bot,
        user_id: int,
        fixture: StickerSetFixture,
        edit_only: bool = False,
    ):
        super().__init__(bot, user_id)
        self.fixture = fixture
        self.edit_only = edit_only

    async def run(self) -> None:
        set_name = await self.resolve_set_name()
        if not self.edit_only:
            await self.create_sticker_set(set_name)
        await self.edit_sticker_set(set_name)

    async def resolve_set_name(self) -> str:
        """Derive the set name from the bot username.

        Returns:
            Sticker set name ending in ``_by_<bot username>``.

        Raises:
            CheckError: If the bot has no username.
        """
        me = await self.bot.get_me()
        if not me.username:
            raise CheckError("bot has no username, sticker set name cannot be built")
        return self.fixture.set_name(me.username)

    async def upload_sticker(self, sticker: StickerFixture) -> InputSticker:
        """Upload one sticker image and describe it for set creation.

        Args:
            sticker: Sticker fixture.

        Returns:
            InputSticker referencing the uploaded file id.
        """
        path = self.require_asset(sticker.path)
        uploaded = await self.bot.upload_sticker_file(
            user_id=self.user_id,
            sticker=path,
            sticker_format=StickerFormat.STATIC,
        )
        mask_position = None
        if sticker.mask_position is not None:
            mask_position = MaskPosition(
                point=sticker.mask_position.point,
                x_shift=sticker.mask_position.x_shift,
                y_shift=sticker.mask_position.y_shift,
                scale=sticker.mask_position.scale,
            )
        return InputSticker(
            sticker=uploaded.file_id,
            emoji_list=sticker.emoji_list,
            format=StickerFormat.STATIC,
            mask_position=mask_position,
            keywords=sticker.keywords or None,
        )

    async def create_sticker_set(self, set_name: str) -> None:
        """Recreate the sticker set from the fixture stickers.

        Args:
            set_name: Full sticker set name.
        """
        self.logger.info("create_new_sticker_set & delete_sticker_set")

        # Fails on the first run, before the set has ever been created
        try:
            await self.bot.delete_sticker_set(name=set_name)
            self.logger.info(f'sticker set "{set_name}" has been deleted')
        except TelegramError as e:
            self.logger.error(f"error when deleting the sticker set: {e}")

        self.logger.info("upload_sticker_file")
        stickers = [await self.upload_sticker(sticker) for sticker in self.fixture.stickers]

        self.logger.info("Creating the sticker set")
        await self.bot.create_new_sticker_set(
            user_id=self.user_id,
            name=set_name,
            title=self.fixture.title,
            stickers=stickers,
        )
        self.logger.info(
            "Your sticker set has been successfully created! Get it: "
            + ADD_STICKERS_URL.format(name=set_name)
        )

    async def edit_sticker_set(self, set_name: str) -> None:
        """Retitle the set, edit its first sticker and append one more.

        Args:
            set_name: Full sticker set name.

        Raises:
            VerificationError: If the title or sticker count read back is wrong.
        """
        self.logger.info("get_sticker_set")
        sticker_set = await self.bot.get_sticker_set(name=set_name)
        if not sticker_set.stickers:
            raise CheckError(f'sticker set "{set_name}" has no stickers to edit')

        self.logger.info("set_sticker_set_title")
        await self.bot.set_sticker_set_title(name=set_name, title=self.fixture.new_title)

        changing_sticker = sticker_set.stickers[0]
        self.logger.info("set_sticker_emoji_list")
        await self.bot.set_sticker_emoji_list(
            sticker=changing_sticker.file_id, emoji_list=self.fixture.edit_emoji_list
        )

        self.logger.info("set_sticker_keywords")
        await self.bot.set_sticker_keywords(
            sticker=changing_sticker.file_id, keywords=self.fixture.edit_keywords
        )

        self.logger.info("verifying the sticker changes")
        edited_set = await self.bot.get_sticker_set(name=set_name)
        self.verify("sticker_set.title", self.fixture.new_title, edited_set.title)

        # Sticker objects expose a single emoji and no keywords, the rest is manual
        self.logger.info(
            f'you can check the changes of the first sticker in the "{set_name}" sticker set'
        )

        self.logger.info("add_sticker_to_set")
        new_sticker = await self.upload_sticker(self.fixture.extra_sticker)
        await self.bot.add_sticker_to_set(
            user_id=self.user_id, name=set_name, sticker=new_sticker
        )

        extended_set = await self.bot.get_sticker_set(name=set_name)
        self.verify(
            "len(sticker_set.stickers)",
            len(edited_set.stickers) + 1,
            len(extended_set.stickers),
        )
        self.logger.info("new sticker has been successfully added to your sticker set!")
