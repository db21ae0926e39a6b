"""Configuration module - public API.

Centralized configuration using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    AwsSettings: AWS credential source settings

Example:
    ```python
    from provider.configuration import settings

    region = settings.aws.AWS_REGION
    if settings.aws.has_static_credentials:
        ...
    ```
"""

from provider.configuration.aws import AwsSettings
from provider.configuration.settings import Settings, settings

__all__ = ["Settings", "AwsSettings", "settings"]
