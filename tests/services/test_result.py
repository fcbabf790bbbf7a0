"""Tests for ServiceResult constructors."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lint_apptester.services.result import ServiceResult


class TestServiceResult:
    def test_success(self) -> None:
        result = ServiceResult.success("rules", {"count": 4})
        assert result.ok
        assert result.data == {"count": 4}
        assert result.warnings == []
        assert result.error is None

    def test_failure_keeps_partial_data_and_detail(self) -> None:
        result = ServiceResult.failure(
            "check", "SCAN_ERROR", "Could not read file: /x", data={"passed": True}, path="/x"
        )
        assert not result.ok
        assert result.data == {"passed": True}
        assert result.error is not None
        assert result.error.code == "SCAN_ERROR"
        assert result.error.detail == {"path": "/x"}

    def test_frozen(self) -> None:
        result = ServiceResult.success("rules", {})
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
