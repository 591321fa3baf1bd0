"""Integration settings __init__ - exports all integration settings."""

from kube_bot.infrastructure.configuration.integrations.slack import SlackSettings

__all__ = ["SlackSettings"]
