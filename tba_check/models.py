"""Data models for the check fixtures.

Defines Pydantic models for the values the checks write to the Bot API:
bot descriptions per locale, the sticker to send, and the sticker set to
create and edit. Defaults reproduce the stock fixtures so the harness runs
without a fixtures file.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

MAX_EMOJI_PER_STICKER = 20
MAX_KEYWORDS_PER_STICKER = 20
MAX_STICKERS_ON_CREATE = 50


class DescriptionFixture(BaseModel):
    """Bot description pair written for one locale.

    Attributes:
        description: Full description text.
        short_description: Short description text, defaults to ``description``.
        language_code: Two-letter ISO 639-1 code, None for the default locale.
    """

    description: str = Field(max_length=512)
    short_description: str | None = Field(default=None, max_length=120)
    language_code: str | None = Field(default=None, pattern=r"^[a-z]{2}$")

    @property
    def effective_short_description(self) -> str:
        return self.short_description if self.short_description is not None else self.description

    @property
    def locale_label(self) -> str:
        return f'"language_code"="{self.language_code}"' if self.language_code else 'no "language_code"'


class MaskPositionFixture(BaseModel):
    """Mask placement for mask stickers."""

    point: Literal["forehead", "eyes", "mouth", "chin"]
    x_shift: float = 0.0
    y_shift: float = 0.0
    scale: float = 1.0


class StickerFixture(BaseModel):
    """One sticker to upload.

    Attributes:
        path: Image file, relative paths are resolved against the data dir.
        emoji_list: Emoji associated with the sticker, first one is primary.
        keywords: Search keywords.
        mask_position: Optional mask placement.
    """

    path: Path
    emoji_list: list[str] = Field(min_length=1, max_length=MAX_EMOJI_PER_STICKER)
    keywords: list[str] = Field(default_factory=list, max_length=MAX_KEYWORDS_PER_STICKER)
    mask_position: MaskPositionFixture | None = None


class SendStickerFixture(BaseModel):
    """Sticker sent directly to the configured user."""

    path: Path = Path("sticker-main.webp")
    emoji: str | None = "🦀"


class StickerSetFixture(BaseModel):
    """Sticker set created and then edited by the sticker set check.

    Attributes:
        name_prefix: Set name prefix, the full name is ``<prefix>_by_<bot>``.
        title: Title used on creation.
        new_title: Title written by the edit step.
        stickers: Stickers the set is created with.
        edit_emoji_list: Emoji list written to the first sticker.
        edit_keywords: Keywords written to the first sticker.
        extra_sticker: Sticker appended by the edit step.
    """

    name_prefix: str = Field(default="tbacheck", pattern=r"^[A-Za-z][A-Za-z0-9_]*$")
    title: str = Field(default="TBA check test set", max_length=64)
    new_title: str = Field(default="New sticker set title", max_length=64)
    stickers: list[StickerFixture] = Field(
        default_factory=lambda: [
            StickerFixture(
                path=Path("sticker-core.webp"),
                emoji_list=["🦀", "😄"],
                keywords=["tbacheck", "f", "core"],
            ),
            StickerFixture(
                path=Path("sticker-main.webp"),
                emoji_list=["🦀", "🥳"],
                keywords=["tbacheck", "second", "main"],
            ),
        ],
        min_length=1,
        max_length=MAX_STICKERS_ON_CREATE,
    )
    edit_emoji_list: list[str] = Field(
        default_factory=lambda: ["🤔"], min_length=1, max_length=MAX_EMOJI_PER_STICKER
    )
    edit_keywords: list[str] = Field(
        default_factory=lambda: ["core"], max_length=MAX_KEYWORDS_PER_STICKER
    )
    extra_sticker: StickerFixture = Field(
        default_factory=lambda: StickerFixture(
            path=Path("sticker-blur.webp"),
            emoji_list=["😄"],
        )
    )

    def set_name(self, bot_username: str) -> str:
        """Build the set name, which must end in ``_by_<bot username>``."""
        return f"{self.name_prefix}_by_{bot_username}"


class ScenarioFixtures(BaseModel):
    """All fixtures used by the checks."""

    descriptions: list[DescriptionFixture] = Field(
        default_factory=lambda: [
            DescriptionFixture(description="A snail walks into a bar one day.."),
            DescriptionFixture(description="Заходит как-то улитка в бар..", language_code="ru"),
        ]
    )
    send_sticker: SendStickerFixture = Field(default_factory=SendStickerFixture)
    sticker_set: StickerSetFixture = Field(default_factory=StickerSetFixture)

    def with_data_dir(self, data_dir: Path) -> "ScenarioFixtures":
        """Return a copy with every relative asset path placed under ``data_dir``."""

        def resolve(path: Path) -> Path:
            return path if path.is_absolute() else Path(data_dir) / path

        sticker_set = self.sticker_set.model_copy(
            update={
                "stickers": [
                    sticker.model_copy(update={"path": resolve(sticker.path)})
                    for sticker in self.sticker_set.stickers
                ],
                "extra_sticker": self.sticker_set.extra_sticker.model_copy(
                    update={"path": resolve(self.sticker_set.extra_sticker.path)}
                ),
            }
        )
        return self.model_copy(
            update={
                "send_sticker": self.send_sticker.model_copy(
                    update={"path": resolve(self.send_sticker.path)}
                ),
                "sticker_set": sticker_set,
            }
        )
