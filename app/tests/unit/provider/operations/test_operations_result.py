"""Unit tests for OperationResult and OperationStatus."""

import pytest

from provider.operations.result import OperationResult
from provider.operations.status import OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    def test_operation_status_values(self):
        assert OperationStatus.SUCCESS.value == "success"
        assert OperationStatus.TRANSIENT_ERROR.value == "transient_error"
        assert OperationStatus.PERMANENT_ERROR.value == "permanent_error"
        assert OperationStatus.UNAUTHORIZED.value == "unauthorized"
        assert OperationStatus.NOT_FOUND.value == "not_found"


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_minimal(self):
        result = OperationResult.success()
        assert result.status == OperationStatus.SUCCESS
        assert result.message == "ok"
        assert result.is_success

    def test_success_factory_with_data(self):
        data = {"Account": "123456789012"}
        result = OperationResult.success(data=data, message="Valid")
        assert result.data == data
        assert result.message == "Valid"

    def test_error_factory_with_all_fields(self):
        result = OperationResult.error(
            OperationStatus.NOT_FOUND,
            "Missing",
            error_code="NOT_FOUND",
            retry_after=5,
            data={"Key": "a"},
        )
        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "NOT_FOUND"
        assert result.retry_after == 5
        assert result.data == {"Key": "a"}
        assert not result.is_success

    def test_transient_error_factory(self):
        result = OperationResult.transient_error(
            "Timeout", error_code="TIMEOUT", retry_after=30
        )
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.retry_after == 30

    def test_permanent_error_factory(self):
        result = OperationResult.permanent_error(
            "Invalid input", error_code="VALIDATION_ERROR"
        )
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "VALIDATION_ERROR"
        assert result.retry_after is None
