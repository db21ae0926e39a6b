"""Credential health check for the AWS client facade.

Confirms that a constructed client can reach STS with its credentials and
reports the outcome as an OperationResult instead of raising.
"""

from botocore.exceptions import BotoCoreError, ClientError  # type: ignore

from provider.aws.protocols import Client
from provider.logging import get_logger
from provider.operations.classifiers import classify_aws_error
from provider.operations.result import OperationResult

logger = get_logger(__name__)


class AWSClientHealth:
    """Health check operations for an AWS client.

    Args:
        client: Any implementation of the Client interface
    """

    def __init__(self, client: Client) -> None:
        self._client = client
        self._logger = logger.bind(component="aws_client_health")

    def check_credentials(self) -> OperationResult:
        """Call ``get_caller_identity`` once and classify the outcome.

        Returns:
            OperationResult whose data holds Account, Arn and UserId on
            success, or the classified error otherwise
        """
        try:
            response = self._client.get_caller_identity()
        except (BotoCoreError, ClientError) as e:
            result = classify_aws_error(e)
            self._logger.warning(
                "aws_credentials_check_failed",
                status=result.status.value,
                error_code=result.error_code,
                error=str(e),
            )
            return result

        identity = {
            "Account": response.get("Account"),
            "Arn": response.get("Arn"),
            "UserId": response.get("UserId"),
        }
        self._logger.info("aws_credentials_check_succeeded", arn=identity["Arn"])
        return OperationResult.success(
            data=identity, message="AWS credentials are valid"
        )
