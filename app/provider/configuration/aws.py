"""AWS integration settings."""

from typing import Optional

from pydantic import Field

from provider.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS credential source settings.

    Environment Variables:
        AWS_PROFILE: Named profile for ambient credentials (default: "")
        AWS_REGION: AWS region for all sub-clients (default: us-east-1)
        AWS_CONFIG_FILE: Optional shared config file path
        AWS_ACCESS_KEY_ID: Static access key id
        AWS_SECRET_ACCESS_KEY: Static secret access key
        AWS_SESSION_TOKEN: Optional session token for temporary credentials

    Example:
        ```python
        from provider.configuration import settings
        from provider.aws import create_aws_client_from_settings

        client = create_aws_client_from_settings(settings.aws)
        ```
    """

    AWS_PROFILE: str = Field(default="", alias="AWS_PROFILE")
    AWS_REGION: str = Field(default="us-east-1", alias="AWS_REGION")
    AWS_CONFIG_FILE: Optional[str] = Field(default=None, alias="AWS_CONFIG_FILE")
    AWS_ACCESS_KEY_ID: str = Field(default="", alias="AWS_ACCESS_KEY_ID")
    AWS_SECRET_ACCESS_KEY: str = Field(
        default="", alias="AWS_SECRET_ACCESS_KEY", repr=False
    )
    AWS_SESSION_TOKEN: str = Field(default="", alias="AWS_SESSION_TOKEN", repr=False)

    @property
    def has_static_credentials(self) -> bool:
        """True when both an access key id and a secret key are configured."""
        return bool(self.AWS_ACCESS_KEY_ID and self.AWS_SECRET_ACCESS_KEY)
