"""Error classifiers for AWS SDK exceptions.

Converts boto3/botocore exceptions into standardized OperationResult objects.

Usage:
    from provider.operations.classifiers import classify_aws_error

    try:
        response = client.get_caller_identity()
    except Exception as exc:
        return classify_aws_error(exc)
"""

from botocore.exceptions import (
    ClientError,
    NoCredentialsError,
    PartialCredentialsError,
)

from provider.operations.result import OperationResult
from provider.operations.status import OperationStatus

THROTTLING_CODES = frozenset(
    {
        "Throttling",
        "ThrottlingException",
        "RequestLimitExceeded",
        "SlowDown",
    }
)

UNAUTHORIZED_CODES = frozenset(
    {
        "AccessDenied",
        "AccessDeniedException",
        "ExpiredToken",
        "ExpiredTokenException",
        "InvalidAccessKeyId",
        "InvalidClientTokenId",
        "SignatureDoesNotMatch",
        "UnrecognizedClientException",
    }
)

NOT_FOUND_CODES = frozenset(
    {
        "NoSuchBucket",
        "NoSuchEntity",
        "NoSuchKey",
        "ResourceNotFoundException",
    }
)

VALIDATION_CODES = frozenset(
    {
        "InvalidParameterException",
        "InvalidParameterValue",
        "MalformedPolicyDocument",
        "ValidationError",
        "ValidationException",
    }
)


def classify_aws_error(exc: Exception) -> OperationResult:
    """Classify AWS SDK errors into OperationResult.

    Error Code Mapping:
    - Throttling codes: TRANSIENT_ERROR with retry_after
    - Access denied / bad or expired credentials: UNAUTHORIZED
    - NoSuchEntity, NoSuchBucket, ...: NOT_FOUND
    - Validation codes: PERMANENT_ERROR
    - Other ClientError: TRANSIENT_ERROR (AWS convention)
    - Missing or partial local credentials: UNAUTHORIZED
    - Other BotoCoreError (connection, timeout): TRANSIENT_ERROR

    Args:
        exc: Exception raised by boto3/botocore

    Returns:
        OperationResult with appropriate status, message, and error_code
    """
    if isinstance(exc, (NoCredentialsError, PartialCredentialsError)):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"AWS credentials unavailable: {exc}",
            error_code="NO_CREDENTIALS",
        )

    if not isinstance(exc, ClientError):
        return OperationResult.transient_error(
            f"AWS connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    error_code = "Unknown"
    if exc.response:
        error_code = exc.response.get("Error", {}).get("Code", "Unknown")

    if error_code in THROTTLING_CODES:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "AWS API throttled",
            error_code="RATE_LIMITED",
            retry_after=60,
        )

    if error_code in UNAUTHORIZED_CODES:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"AWS API access denied: {error_code}",
            error_code="FORBIDDEN",
        )

    if error_code in NOT_FOUND_CODES:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            f"AWS resource not found: {error_code}",
            error_code="NOT_FOUND",
        )

    if error_code in VALIDATION_CODES:
        return OperationResult.permanent_error(
            f"AWS validation error: {error_code}",
            error_code="INVALID_REQUEST",
        )

    # Unknown service errors are treated as transient
    return OperationResult.transient_error(
        f"AWS client error: {error_code}",
        error_code="AWS_CLIENT_ERROR",
    )
