"""Structlog processors that keep credentials and oversized values out of logs.

Session construction binds profile, region and config file to its log
entries, and botocore error text can embed request details; these
processors run before rendering so neither leaks key material.
"""

from typing import Any, Iterable

# Key fragments whose values must never reach the logs
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "access_key",
        "authorization",
        "credential",
        "private_key",
        "signature",
    }
)


def _is_sensitive(key: str, patterns: Iterable[str]) -> bool:
    lowered = key.lower()
    return any(pattern in lowered for pattern in patterns)


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Return a processor replacing the values of credential-like keys.

    A key is sensitive when it contains any pattern, ignoring case, so
    ``aws_secret_access_key`` and ``SessionToken`` are both caught. ``None``
    values are kept so a missing token still shows as missing.
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        return {
            key: mask_value
            if value is not None and _is_sensitive(key, patterns)
            else value
            for key, value in event_dict.items()
        }

    return processor


def truncate_large_values(max_length: int = 500):
    """Return a processor shortening string values above ``max_length``.

    The original length is appended so a truncated error message can still
    be matched against the full text elsewhere.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    f"{value[:max_length]}...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
