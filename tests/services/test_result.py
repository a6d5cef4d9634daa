"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from gaussref.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="compute", data={"value": 15})
        assert result.ok is True
        assert result.op == "compute"
        assert result.data == {"value": 15}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_ARGUMENT", message="n must be >= 1")
        result = ServiceResult(ok=False, op="compute", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="compute", data={"value": 2147516416}, meta={"k": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["value"] == 2147516416
        assert parsed["meta"]["k"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="compute")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(code="OVERFLOW", message="boom", detail={"n": 46341})
        assert error.detail["n"] == 46341

    def test_default_detail(self) -> None:
        assert ServiceError(code="X", message="bad").detail == {}
