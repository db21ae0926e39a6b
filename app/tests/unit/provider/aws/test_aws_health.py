"""Tests for AWSClientHealth."""

import pytest
import structlog
from botocore.exceptions import ClientError, EndpointConnectionError

from provider.aws import health
from provider.aws.health import AWSClientHealth
from provider.operations.status import OperationStatus


@pytest.mark.unit
class TestAWSClientHealth:
    def test_module_logger_named_after_module(self):
        context = structlog.get_context(health.logger)
        assert context["logger_name"] == "provider.aws.health"

    def test_check_credentials_success(self, make_aws_client):
        client = make_aws_client(
            sts={
                "get_caller_identity": {
                    "Account": "123456789012",
                    "Arn": "arn:aws:iam::123456789012:user/deployer",
                    "UserId": "AIDAEXAMPLE",
                    "ResponseMetadata": {"HTTPStatusCode": 200},
                }
            }
        )

        result = AWSClientHealth(client).check_credentials()

        assert result.is_success
        assert result.data == {
            "Account": "123456789012",
            "Arn": "arn:aws:iam::123456789012:user/deployer",
            "UserId": "AIDAEXAMPLE",
        }

    def test_check_credentials_invalid_token(self, make_aws_client):
        def _raise(**kwargs):
            raise ClientError(
                {"Error": {"Code": "InvalidClientTokenId", "Message": "bad"}},
                operation_name="GetCallerIdentity",
            )

        client = make_aws_client(sts={"get_caller_identity": _raise})

        result = AWSClientHealth(client).check_credentials()

        assert result.status == OperationStatus.UNAUTHORIZED
        assert result.error_code == "FORBIDDEN"

    def test_check_credentials_connection_error(self, make_aws_client):
        def _raise(**kwargs):
            raise EndpointConnectionError(endpoint_url="https://sts.amazonaws.com")

        client = make_aws_client(sts={"get_caller_identity": _raise})

        result = AWSClientHealth(client).check_credentials()

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "CONNECTION_ERROR"

    def test_check_credentials_calls_once(self, make_aws_client):
        calls = []

        def _throttled(**kwargs):
            calls.append(kwargs)
            raise ClientError(
                {"Error": {"Code": "Throttling", "Message": "slow down"}},
                operation_name="GetCallerIdentity",
            )

        client = make_aws_client(sts={"get_caller_identity": _throttled})

        result = AWSClientHealth(client).check_credentials()

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.retry_after == 60
        assert len(calls) == 1
