"""Exceptions raised while building AWS clients.

Per-operation failures are not wrapped: the boto3/botocore exception raised
by the underlying call reaches the caller unchanged.
"""


class AWSClientError(Exception):
    """Base exception for AWS client construction errors."""

    pass


class SessionCreationError(AWSClientError):
    """Raised when a boto3 session or its sub-clients cannot be created.

    The botocore error that caused it (unknown profile, unreadable config
    file, missing or partial credentials) is available as ``__cause__``.

    Example:
        try:
            client = create_aws_client("missing-profile", "us-east-1")
        except SessionCreationError as e:
            logger.error("aws_client_unavailable", error=str(e))
    """

    pass
