"""AWS client facade for STS, S3 and IAM operations.

Holds one boto3 client per service and forwards each operation to it
unchanged: same keyword arguments, same response dict, same exceptions.
Use the constructors in ``provider.aws.factory`` to build one from a
credential source.
"""

from typing import Any, Dict

from provider.aws.protocols import AWSLowLevelClient


class AWSClient:
    """Facade over the IAM, STS and S3 sub-clients.

    No retries, validation or response transformation happen here; errors
    raised by a sub-client propagate to the caller as-is.

    Args:
        iam_client: boto3 IAM client
        sts_client: boto3 STS client
        s3_client: boto3 S3 client

    Usage:
        client = create_aws_client("default", "us-east-1")
        identity = client.get_caller_identity()
        buckets = client.list_buckets()["Buckets"]
    """

    def __init__(
        self,
        iam_client: AWSLowLevelClient,
        sts_client: AWSLowLevelClient,
        s3_client: AWSLowLevelClient,
    ) -> None:
        self._iam = iam_client
        self._sts = sts_client
        self._s3 = s3_client

    # ======================== STS Operations ========================

    def assume_role(self, **kwargs: Any) -> Dict[str, Any]:
        """Return temporary credentials for the role in ``RoleArn``."""
        return self._sts.assume_role(**kwargs)

    def get_caller_identity(self, **kwargs: Any) -> Dict[str, Any]:
        """Return the account, ARN and user id of the calling credentials."""
        return self._sts.get_caller_identity(**kwargs)

    def get_federation_token(self, **kwargs: Any) -> Dict[str, Any]:
        return self._sts.get_federation_token(**kwargs)

    # ======================== S3 Operations ========================

    def list_buckets(self, **kwargs: Any) -> Dict[str, Any]:
        return self._s3.list_buckets(**kwargs)

    def delete_bucket(self, **kwargs: Any) -> Dict[str, Any]:
        return self._s3.delete_bucket(**kwargs)

    def list_objects(self, **kwargs: Any) -> Dict[str, Any]:
        """Return one page of objects in ``Bucket``; the caller handles paging."""
        return self._s3.list_objects(**kwargs)

    def delete_objects(self, **kwargs: Any) -> Dict[str, Any]:
        return self._s3.delete_objects(**kwargs)

    # ======================== IAM Operations ========================

    def create_access_key(self, **kwargs: Any) -> Dict[str, Any]:
        return self._iam.create_access_key(**kwargs)

    def delete_access_key(self, **kwargs: Any) -> Dict[str, Any]:
        return self._iam.delete_access_key(**kwargs)

    def list_access_keys(self, **kwargs: Any) -> Dict[str, Any]:
        return self._iam.list_access_keys(**kwargs)

    def get_user(self, **kwargs: Any) -> Dict[str, Any]:
        """Return the IAM user named in ``UserName``, or the caller if omitted."""
        return self._iam.get_user(**kwargs)

    def create_user(self, **kwargs: Any) -> Dict[str, Any]:
        return self._iam.create_user(**kwargs)

    def list_users(self, **kwargs: Any) -> Dict[str, Any]:
        return self._iam.list_users(**kwargs)

    def attach_user_policy(self, **kwargs: Any) -> Dict[str, Any]:
        return self._iam.attach_user_policy(**kwargs)
