"""AWS client public API.

The facade is AWSClient, which holds IAM, STS and S3 sub-clients and forwards
each operation to them unchanged:

    from provider.aws import create_aws_client

    client = create_aws_client(profile="default", region="us-east-1")
    identity = client.get_caller_identity()
    client.delete_objects(Bucket="logs", Delete={"Objects": [{"Key": "a.txt"}]})

Construction errors raise SessionCreationError; per-operation errors are the
boto3 exceptions raised by the underlying call.
"""

from provider.aws.errors import AWSClientError, SessionCreationError
from provider.aws.facade import AWSClient
from provider.aws.factory import (
    create_aws_client,
    create_aws_client_from_settings,
    create_aws_client_with_input,
)
from provider.aws.health import AWSClientHealth
from provider.aws.models import AWSClientInput
from provider.aws.protocols import AWSLowLevelClient, Client
from provider.aws.session_provider import SessionProvider

__all__ = [
    "AWSClient",
    "AWSClientError",
    "AWSClientHealth",
    "AWSClientInput",
    "AWSLowLevelClient",
    "Client",
    "SessionCreationError",
    "SessionProvider",
    "create_aws_client",
    "create_aws_client_from_settings",
    "create_aws_client_with_input",
]
