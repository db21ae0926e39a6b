"""Unified AWS client for IAM, STS and S3 operations."""
