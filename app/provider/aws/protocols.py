from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class AWSLowLevelClient(Protocol):
    """Protocol for low-level boto3-like service clients held by the facade.

    Implementations provide the service-specific methods (e.g. assume_role,
    list_buckets, create_user). This protocol is intentionally permissive and
    is used for typing and for injecting fake clients in tests.
    """

    def __getattr__(self, name: str) -> Any:  # pragma: no cover - typing helper
        ...


@runtime_checkable
class Client(Protocol):
    """Capability interface for STS, S3 and IAM operations.

    Every method accepts the keyword arguments of the boto3 method of the
    same name and returns its response dict.
    """

    # sts
    def assume_role(self, **kwargs: Any) -> Dict[str, Any]:  # pragma: no cover
        ...

    def get_caller_identity(self, **kwargs: Any) -> Dict[str, Any]:  # pragma: no cover
        ...

    def get_federation_token(
        self, **kwargs: Any
    ) -> Dict[str, Any]:  # pragma: no cover
        ...

    # s3
    def list_buckets(self, **kwargs: Any) -> Dict[str, Any]:  # pragma: no cover
        ...

    def delete_bucket(self, **kwargs: Any) -> Dict[str, Any]:  # pragma: no cover
        ...

    def list_objects(self, **kwargs: Any) -> Dict[str, Any]:  # pragma: no cover
        ...

    def delete_objects(self, **kwargs: Any) -> Dict[str, Any]:  # pragma: no cover
        ...

    # iam
    def create_access_key(self, **kwargs: Any) -> Dict[str, Any]:  # pragma: no cover
        ...

    def delete_access_key(self, **kwargs: Any) -> Dict[str, Any]:  # pragma: no cover
        ...

    def list_access_keys(self, **kwargs: Any) -> Dict[str, Any]:  # pragma: no cover
        ...

    def get_user(self, **kwargs: Any) -> Dict[str, Any]:  # pragma: no cover
        ...

    def create_user(self, **kwargs: Any) -> Dict[str, Any]:  # pragma: no cover
        ...

    def list_users(self, **kwargs: Any) -> Dict[str, Any]:  # pragma: no cover
        ...

    def attach_user_policy(
        self, **kwargs: Any
    ) -> Dict[str, Any]:  # pragma: no cover
        ...
