"""Constructors for the AWS client facade.

Two credential sources are supported:

- ambient credentials: a named profile, a region and an optional shared
  config file, resolved through botocore's usual provider chain and probed
  right away;
- static credentials: an ``AWSClientInput`` carrying keys and region, used
  as given without probing.

Example:
    client = create_aws_client("audit", "ca-central-1", "./aws/config")

    client = create_aws_client_with_input(
        AWSClientInput(
            access_key_id="AKIA...",
            secret_access_key="...",
            region="us-east-1",
        )
    )
"""

from typing import Optional

from provider.aws.facade import AWSClient
from provider.aws.models import AWSClientInput
from provider.aws.session_provider import SessionProvider
from provider.configuration.aws import AwsSettings
from provider.logging import get_module_logger

logger = get_module_logger()


def _build_client(session_provider: SessionProvider) -> AWSClient:
    session = session_provider.create_session()
    return AWSClient(
        iam_client=session_provider.create_client(session, "iam"),
        sts_client=session_provider.create_client(session, "sts"),
        s3_client=session_provider.create_client(session, "s3"),
    )


def create_aws_client(
    profile: Optional[str],
    region: Optional[str],
    config_file: Optional[str] = None,
) -> AWSClient:
    """Create an AWS client with credentials from the environment.

    Args:
        profile: Named profile; empty for the default credential chain
        region: AWS region for all sub-clients
        config_file: Optional shared config file path. Relative paths are
            resolved against the current working directory.

    Returns:
        AWSClient with IAM, STS and S3 sub-clients

    Raises:
        SessionCreationError: If the profile or config file cannot be loaded,
            or no usable credentials are found
    """
    session_provider = SessionProvider.from_profile(
        profile=profile, region=region, config_file=config_file
    )
    return _build_client(session_provider)


def create_aws_client_with_input(client_input: AWSClientInput) -> AWSClient:
    """Create an AWS client with explicitly supplied credentials.

    Raises:
        SessionCreationError: If botocore cannot build the session or clients
    """
    session_provider = SessionProvider.from_static_credentials(client_input)
    return _build_client(session_provider)


def create_aws_client_from_settings(aws_settings: AwsSettings) -> AWSClient:
    """Create an AWS client from ``AwsSettings``.

    Static credentials win when both an access key id and a secret key are
    configured; otherwise the profile, region and config file are used.
    """
    if aws_settings.has_static_credentials:
        logger.debug("aws_client_from_settings", source="static")
        return create_aws_client_with_input(
            AWSClientInput(
                access_key_id=aws_settings.AWS_ACCESS_KEY_ID,
                secret_access_key=aws_settings.AWS_SECRET_ACCESS_KEY,
                session_token=aws_settings.AWS_SESSION_TOKEN,
                region=aws_settings.AWS_REGION,
            )
        )

    logger.debug("aws_client_from_settings", source="ambient")
    return create_aws_client(
        profile=aws_settings.AWS_PROFILE,
        region=aws_settings.AWS_REGION,
        config_file=aws_settings.AWS_CONFIG_FILE,
    )
