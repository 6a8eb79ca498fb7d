"""Tests for environment settings and fixtures loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tba_check.config import DEFAULT_FIXTURES_PATH, BotConfig, Config, ThrottleConfig
from tba_check.errors import ConfigError


def test_bot_config_reads_environment() -> None:
    """BOT_TOKEN and USER_ID must come from the environment."""
    bot_config = BotConfig()

    assert bot_config.bot_token == "123456:test_bot_token_placeholder"
    assert bot_config.user_id == 12345
    assert bot_config.data_dir == Path("data")


def test_bot_config_requires_user_id(monkeypatch) -> None:
    """A missing USER_ID is a configuration error."""
    monkeypatch.delenv("USER_ID")

    with pytest.raises(ValidationError):
        BotConfig()


def test_bot_config_rejects_non_numeric_user_id(monkeypatch) -> None:
    monkeypatch.setenv("USER_ID", "not-a-number")

    with pytest.raises(ValidationError):
        BotConfig()


def test_feature_list_splits_and_strips(monkeypatch) -> None:
    monkeypatch.setenv("TBA_FEATURES", " description, ,send_sticker ")

    assert BotConfig().feature_list == ["description", "send_sticker"]


def test_feature_list_empty_without_env() -> None:
    assert BotConfig().feature_list == []


def test_throttle_defaults_disable_retries() -> None:
    """Default limits: 30 req/s overall, 20 req/min per group, no retries."""
    throttle = ThrottleConfig()

    assert throttle.overall_max_rate == 30
    assert throttle.overall_time_period == 1
    assert throttle.group_max_rate == 20
    assert throttle.group_time_period == 60
    assert throttle.max_retries == 0


def test_throttle_env_override(monkeypatch) -> None:
    monkeypatch.setenv("TBA_THROTTLE_MAX_RETRIES", "3")

    assert ThrottleConfig().max_retries == 3


class TestConfig:
    def test_bundled_fixtures_are_loaded(self) -> None:
        config = Config()

        assert config.fixtures_path == DEFAULT_FIXTURES_PATH
        assert [d.language_code for d in config.fixtures.descriptions] == [None, "ru"]
        assert len(config.fixtures.sticker_set.stickers) == 2

    def test_asset_paths_resolved_against_data_dir(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("TBA_DATA_DIR", str(tmp_path))

        config = Config()

        assert config.fixtures.send_sticker.path == tmp_path / "sticker-main.webp"
        assert config.fixtures.sticker_set.extra_sticker.path == tmp_path / "sticker-blur.webp"
        assert all(
            sticker.path.parent == tmp_path for sticker in config.fixtures.sticker_set.stickers
        )

    def test_missing_bundled_fixtures_falls_back_to_defaults(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setattr("tba_check.config.DEFAULT_FIXTURES_PATH", tmp_path / "missing.yml")

        config = Config()

        assert config.fixtures.descriptions[0].description == "A snail walks into a bar one day.."
        assert config.fixtures.sticker_set.new_title == "New sticker set title"

    def test_missing_explicit_fixtures_file_raises(self, tmp_path) -> None:
        """A mistyped fixtures path must not silently run the defaults."""
        with pytest.raises(ConfigError, match="not found"):
            Config(fixtures_path=tmp_path / "typo.yml")

    def test_malformed_fixtures_yaml_raises(self, tmp_path) -> None:
        fixtures_path = tmp_path / "scenarios.yml"
        fixtures_path.write_text("descriptions: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="not valid YAML"):
            Config(fixtures_path=fixtures_path)

    def test_custom_fixtures_file(self, tmp_path) -> None:
        fixtures_path = tmp_path / "scenarios.yml"
        fixtures_path.write_text(
            "descriptions:\n"
            "  - description: Hallo\n"
            "    short_description: Kurz\n"
            "    language_code: de\n"
            "send_sticker:\n"
            "  path: /abs/sticker.webp\n"
            "  emoji: null\n",
            encoding="utf-8",
        )

        config = Config(fixtures_path=fixtures_path)

        assert len(config.fixtures.descriptions) == 1
        assert config.fixtures.descriptions[0].effective_short_description == "Kurz"
        assert config.fixtures.send_sticker.emoji is None
        assert config.fixtures.send_sticker.path == Path("/abs/sticker.webp")

    def test_invalid_fixtures_file_raises(self, tmp_path) -> None:
        fixtures_path = tmp_path / "scenarios.yml"
        fixtures_path.write_text(
            "sticker_set:\n"
            "  stickers:\n"
            "    - path: a.webp\n"
            "      emoji_list: []\n",
            encoding="utf-8",
        )

        with pytest.raises(ValidationError):
            Config(fixtures_path=fixtures_path)


def test_log_level_is_normalized(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " warning ")

    assert BotConfig().log_level == "WARNING"


def test_unknown_log_level_rejected(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        BotConfig()
