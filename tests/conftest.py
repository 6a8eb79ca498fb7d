"""Global test configuration and fixtures.

Provides a fake environment for every test and a mocked bot that keeps
written descriptions and sticker sets in memory, so the checks can be
exercised without talking to the Bot API.
"""

import os
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram import BotDescription, BotShortDescription
from telegram.error import BadRequest

from tba_check.models import ScenarioFixtures

# Test constants
TEST_BOT_TOKEN = "123456:test_bot_token_placeholder"
TEST_USER_ID = 12345
TEST_BOT_USERNAME = "tba_test_bot"


@pytest.fixture(autouse=True)
def test_environment():
    """Setup test environment variables for all tests."""
    test_env = {
        'BOT_TOKEN': TEST_BOT_TOKEN,
        'USER_ID': str(TEST_USER_ID),
        'LOG_LEVEL': 'DEBUG',
        'TBA_FEATURES': None,
        'TBA_DATA_DIR': None,
    }

    # Store original values
    original_env = {}
    for key, value in test_env.items():
        original_env[key] = os.environ.get(key)
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value

    yield

    # Restore original values
    for key, original_value in original_env.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
    """Directory holding placeholder sticker images."""
    for name in ("sticker-core.webp", "sticker-main.webp", "sticker-blur.webp"):
        (tmp_path / name).write_bytes(b"RIFF\x00\x00\x00\x00WEBP")
    return tmp_path


@pytest.fixture
def fixtures(asset_dir: Path) -> ScenarioFixtures:
    """Default fixtures with asset paths pointing at ``asset_dir``."""
    return ScenarioFixtures().with_data_dir(asset_dir)


class FakeBotState:
    """Remote state kept by the mocked bot."""

    def __init__(self) -> None:
        self.descriptions: dict[str | None, str] = {}
        self.short_descriptions: dict[str | None, str] = {}
        self.sticker_sets: dict[str, SimpleNamespace] = {}
        self.uploads = 0


@pytest.fixture
def bot_state() -> FakeBotState:
    return FakeBotState()


@pytest.fixture
def mock_bot(bot_state: FakeBotState) -> AsyncMock:
    """Bot mock that behaves like the Bot API for the methods the checks use."""
    bot = AsyncMock()

    async def set_my_description(description=None, language_code=None):
        bot_state.descriptions[language_code] = description or ""
        return True

    async def get_my_description(language_code=None):
        return BotDescription(bot_state.descriptions.get(language_code, ""))

    async def set_my_short_description(short_description=None, language_code=None):
        bot_state.short_descriptions[language_code] = short_description or ""
        return True

    async def get_my_short_description(language_code=None):
        return BotShortDescription(bot_state.short_descriptions.get(language_code, ""))

    async def upload_sticker_file(user_id, sticker, sticker_format):
        bot_state.uploads += 1
        return MagicMock(file_id=f"file-{bot_state.uploads}")

    def _sticker(input_sticker):
        return SimpleNamespace(
            file_id=input_sticker.sticker, emoji=input_sticker.emoji_list[0]
        )

    async def create_new_sticker_set(user_id, name, title, stickers):
        bot_state.sticker_sets[name] = SimpleNamespace(
            name=name, title=title, stickers=tuple(_sticker(s) for s in stickers)
        )
        return True

    async def delete_sticker_set(name):
        if name not in bot_state.sticker_sets:
            raise BadRequest("Stickerset_invalid")
        del bot_state.sticker_sets[name]
        return True

    async def get_sticker_set(name):
        current = bot_state.sticker_sets[name]
        return SimpleNamespace(name=name, title=current.title, stickers=current.stickers)

    async def set_sticker_set_title(name, title):
        bot_state.sticker_sets[name].title = title
        return True

    async def add_sticker_to_set(user_id, name, sticker):
        current = bot_state.sticker_sets[name]
        current.stickers = current.stickers + (_sticker(sticker),)
        return True

    bot.set_my_description.side_effect = set_my_description
    bot.get_my_description.side_effect = get_my_description
    bot.set_my_short_description.side_effect = set_my_short_description
    bot.get_my_short_description.side_effect = get_my_short_description
    bot.upload_sticker_file.side_effect = upload_sticker_file
    bot.create_new_sticker_set.side_effect = create_new_sticker_set
    bot.delete_sticker_set.side_effect = delete_sticker_set
    bot.get_sticker_set.side_effect = get_sticker_set
    bot.set_sticker_set_title.side_effect = set_sticker_set_title
    bot.add_sticker_to_set.side_effect = add_sticker_to_set
    bot.set_sticker_emoji_list.return_value = True
    bot.set_sticker_keywords.return_value = True
    bot.get_me.return_value = MagicMock(username=TEST_BOT_USERNAME)
    bot.send_sticker.return_value = MagicMock(message_id=42, sticker=MagicMock())
    return bot
