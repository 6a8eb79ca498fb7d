"""Dependency-injection container.

Wires the configuration and the throttled bot so the entry point and tests
can override either one.
"""

from dependency_injector import containers, providers

from tba_check.client import build_bot
from tba_check.config import Config


class Container(containers.DeclarativeContainer):
    """DI container for the harness."""

    fixtures_path = providers.Object(None)

    config = providers.Singleton(Config, fixtures_path=fixtures_path)
    bot = providers.Singleton(
        build_bot,
        bot_config=config.provided.bot,
        throttle=config.provided.throttle,
    )
