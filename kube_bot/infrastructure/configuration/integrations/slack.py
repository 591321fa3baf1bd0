"""Slack integration settings."""

from pydantic import Field

from kube_bot.infrastructure.configuration.base import IntegrationSettings


class SlackSettings(IntegrationSettings):
    """Slack API and bot configuration.

    Environment Variables:
        APP_TOKEN: Slack app-level token (xapp-*) used by Socket Mode
        SLACK_TOKEN: Slack bot token (xoxb-*)
        SLACK_LOG_UNHANDLED_EVENTS: Log message events the bot ignores

    Example:
        ```python
        from kube_bot.infrastructure.configuration import settings

        slack_token = settings.slack.SLACK_TOKEN
        ```
    """

    APP_TOKEN: str = ""
    SLACK_TOKEN: str = ""
    LOG_UNHANDLED_EVENTS: bool = Field(
        default=False, alias="SLACK_LOG_UNHANDLED_EVENTS"
    )
