"""kube-bot configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from kube_bot.infrastructure.configuration.integrations import SlackSettings


class Settings(BaseSettings):
    """kube-bot configuration settings.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA reported by the version command

    Example:
        ```python
        from kube_bot.infrastructure.configuration import settings

        if settings.is_production:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    slack: SlackSettings

    @property
    def is_production(self) -> bool:
        """True if PREFIX is empty."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "slack" not in kwargs:
            kwargs["slack"] = SlackSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
