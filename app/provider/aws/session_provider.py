"""Session provider for AWS client construction.

Centralizes boto3 session creation and credential resolution for the
facade's sub-clients. A provider is built for one credential source:
ambient credentials (named profile, optional shared config file) or static
credentials supplied by the caller.
"""

import os
from typing import Any, Dict, Optional

import boto3  # type: ignore
import botocore.session  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError  # type: ignore

from provider.aws.errors import SessionCreationError
from provider.aws.models import AWSClientInput
from provider.logging import get_module_logger

logger = get_module_logger()


class SessionProvider:
    """Builds boto3 sessions for a single credential source.

    Use the ``from_profile`` or ``from_static_credentials`` constructors
    rather than calling ``__init__`` directly.

    Args:
        region: AWS region for the session; empty means botocore's default
        profile: Named profile for ambient credentials
        config_file: Absolute path of a shared config file, or None
        static_credentials: Explicit credentials; disables credential probing
    """

    def __init__(
        self,
        region: Optional[str] = None,
        profile: Optional[str] = None,
        config_file: Optional[str] = None,
        static_credentials: Optional[AWSClientInput] = None,
    ) -> None:
        self.region = region or None
        self.profile = profile or None
        self.config_file = config_file or None
        self._static_credentials = static_credentials
        self._logger = logger.bind(component="aws_session_provider")

    @classmethod
    def from_profile(
        cls,
        profile: Optional[str],
        region: Optional[str],
        config_file: Optional[str] = None,
    ) -> "SessionProvider":
        """Create a provider that resolves credentials from the environment.

        A non-empty config_file is resolved to an absolute path against the
        current working directory.
        """
        resolved_config_file = None
        if config_file:
            resolved_config_file = os.path.abspath(config_file)
        return cls(region=region, profile=profile, config_file=resolved_config_file)

    @classmethod
    def from_static_credentials(
        cls, client_input: AWSClientInput
    ) -> "SessionProvider":
        """Create a provider that uses explicitly supplied credentials."""
        return cls(region=client_input.region, static_credentials=client_input)

    @property
    def uses_static_credentials(self) -> bool:
        return self._static_credentials is not None

    def build_botocore_session(self) -> botocore.session.Session:
        """Build the botocore session that owns credential resolution.

        A given config file replaces both the shared config file and the
        shared credentials file, so keys in ``~/.aws/credentials`` cannot
        shadow the profile it defines. Without one, botocore falls back to
        its usual lookup.

        Static credentials are set on the session unconditionally, even when
        empty, so the ambient provider chain is never consulted.
        """
        botocore_session = botocore.session.Session()
        if self.config_file:
            botocore_session.set_config_variable("config_file", self.config_file)
            botocore_session.set_config_variable("credentials_file", self.config_file)
        if self._static_credentials is not None:
            botocore_session.set_credentials(
                self._static_credentials.access_key_id,
                self._static_credentials.secret_access_key,
                self._static_credentials.session_token or None,
            )
        return botocore_session

    def build_session_kwargs(self) -> Dict[str, Any]:
        """Build kwargs for ``boto3.Session``.

        Returns:
            Dict with the botocore_session and region_name, plus profile_name
            for ambient resolution
        """
        kwargs: Dict[str, Any] = {
            "botocore_session": self.build_botocore_session(),
            "region_name": self.region,
        }
        if self._static_credentials is None:
            kwargs["profile_name"] = self.profile
        return kwargs

    def create_session(self) -> boto3.Session:
        """Create a boto3 session for this credential source.

        Ambient sessions are probed for credentials right away, so a missing
        or invalid credential source fails here rather than on the first call.

        Raises:
            SessionCreationError: If the session cannot be built or, for
                ambient credentials, no usable credentials are resolved
        """
        log = self._logger.bind(
            profile=self.profile,
            region=self.region,
            config_file=self.config_file,
            source="static" if self.uses_static_credentials else "ambient",
        )
        log.debug("aws_session_creating")

        try:
            session = boto3.Session(**self.build_session_kwargs())
            if not self.uses_static_credentials:
                self._probe_credentials(session)
        except (BotoCoreError, ClientError) as e:
            log.error("aws_session_creation_failed", error=str(e))
            raise SessionCreationError(f"Could not create AWS session: {e}") from e

        log.info("aws_session_created")
        return session

    def create_client(self, session: boto3.Session, service_name: str) -> BaseClient:
        """Create a sub-client for the given service from a session.

        Raises:
            SessionCreationError: If botocore cannot build the client (e.g.
                no region could be resolved)
        """
        try:
            return session.client(service_name)
        except BotoCoreError as e:
            self._logger.error(
                "aws_client_creation_failed", service_name=service_name, error=str(e)
            )
            raise SessionCreationError(
                f"Could not create AWS {service_name} client: {e}"
            ) from e

    @staticmethod
    def _probe_credentials(session: boto3.Session) -> None:
        credentials = session.get_credentials()
        if credentials is None:
            raise NoCredentialsError()
        # Forces a refresh for providers that load lazily (assume-role, SSO)
        credentials.get_frozen_credentials()
