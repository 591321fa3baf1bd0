"""Configuration for kube-bot.

Settings are loaded from the environment (and a ``.env`` file) with
Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    SlackSettings: Slack integration settings
"""

from kube_bot.infrastructure.configuration.settings import Settings, settings
from kube_bot.infrastructure.configuration.integrations import SlackSettings

__all__ = ["Settings", "SlackSettings", "settings"]
