"""Configuration management for the Bot API check harness.

Handles environment variables (optionally read from a ``.env`` file), the
YAML fixtures file and default settings. Provides structured configuration
classes for the bot credentials, the request throttle and the check fixtures.
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError
from .models import ScenarioFixtures

DEFAULT_FIXTURES_PATH = Path(__file__).parent / "fixtures" / "scenarios.yml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ThrottleConfig(BaseSettings):
    """Limits handed to the client library's rate limiter.

    Attributes:
        overall_max_rate: Requests allowed per ``overall_time_period``.
        overall_time_period: Window for the overall limit, in seconds.
        group_max_rate: Requests allowed per chat group per ``group_time_period``.
        group_time_period: Window for the per-group limit, in seconds.
        max_retries: Retries on flood-control errors; 0 disables retrying.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    overall_max_rate: float = Field(default=30, validation_alias="TBA_THROTTLE_OVERALL_RATE")
    overall_time_period: float = Field(default=1, validation_alias="TBA_THROTTLE_OVERALL_PERIOD")
    group_max_rate: float = Field(default=20, validation_alias="TBA_THROTTLE_GROUP_RATE")
    group_time_period: float = Field(default=60, validation_alias="TBA_THROTTLE_GROUP_PERIOD")
    max_retries: int = Field(default=0, ge=0, validation_alias="TBA_THROTTLE_MAX_RETRIES")


class BotConfig(BaseSettings):
    """Bot credentials and harness settings.

    Attributes:
        bot_token: Telegram bot API token.
        user_id: Telegram user that receives stickers and owns sticker sets.
        log_level: Root logging level name.
        features: Comma separated check names, used when no CLI flag is given.
        data_dir: Directory that sticker asset paths are resolved against.
        timeout: HTTP read/connect timeout in seconds.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    bot_token: str = Field(..., validation_alias="BOT_TOKEN")
    user_id: int = Field(..., validation_alias="USER_ID")
    log_level: LogLevel = Field(default="INFO", validation_alias="LOG_LEVEL")
    features: str | None = Field(default=None, validation_alias="TBA_FEATURES")
    data_dir: Path = Field(default=Path("data"), validation_alias="TBA_DATA_DIR")
    timeout: float = Field(default=20, validation_alias="TBA_TIMEOUT")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def feature_list(self) -> list[str]:
        """Split the ``TBA_FEATURES`` value into names.

        Returns:
            Non-empty, stripped feature names in the given order.
        """
        if not self.features:
            return []
        return [name.strip() for name in self.features.split(",") if name.strip()]


class Config:
    """Harness configuration manager.

    Loads the environment-backed settings and the check fixtures. Fixture
    asset paths are resolved against ``bot.data_dir`` so the checks only see
    absolute or working-directory-relative paths.
    """

    def __init__(self, fixtures_path: Path | None = None):
        """Initialize configuration manager.

        Args:
            fixtures_path: YAML fixtures file, defaults to the bundled one.

        Raises:
            ValidationError: If settings or fixtures are invalid.
            ConfigError: If an explicit fixtures file is missing or any is not YAML.
        """
        self.bot = BotConfig()
        self.throttle = ThrottleConfig()
        self.explicit_fixtures = fixtures_path is not None
        self.fixtures_path = Path(fixtures_path) if fixtures_path is not None else DEFAULT_FIXTURES_PATH
        self.fixtures = self._load_fixtures().with_data_dir(self.bot.data_dir)

    def _load_fixtures(self) -> ScenarioFixtures:
        """Load check fixtures from YAML.

        Only the bundled file may be absent, built-in defaults are used then.

        Returns:
            Validated fixtures.

        Raises:
            ConfigError: If an explicit file is missing or the YAML is malformed.
        """
        if not self.fixtures_path.exists():
            if self.explicit_fixtures:
                raise ConfigError(f"fixtures file not found: {self.fixtures_path}")
            return ScenarioFixtures()

        try:
            with open(self.fixtures_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"fixtures file {self.fixtures_path} is not valid YAML: {e}") from e

        return ScenarioFixtures.model_validate(data)
