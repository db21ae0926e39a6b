"""Configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from provider.configuration.aws import AwsSettings


class Settings(BaseSettings):
    """Main settings aggregator.

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    aws: AwsSettings

    @property
    def is_production(self) -> bool:
        """True if PREFIX is empty."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "aws" not in kwargs:
            kwargs["aws"] = AwsSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
