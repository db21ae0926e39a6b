"""Operation result types and status enums.

Standardized result types used by health checks, including the status enum,
the result dataclass, and the classifier for AWS SDK exceptions.
"""

from provider.operations.classifiers import classify_aws_error
from provider.operations.result import OperationResult
from provider.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_aws_error",
]
