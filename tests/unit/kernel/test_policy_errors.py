"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from typhoon.kernel.errors import (
    BaseError,
    DeadlineExceededError,
    ExternalServiceError,
    InfrastructureError,
    RetryLimitExceededError,
    RetryPolicyError,
    TimeoutError,
)


# ---------------------------------------------------------------------------
# BaseError
# ---------------------------------------------------------------------------


class TestBaseError:
    def test_default_code(self) -> None:
        err = BaseError("something failed")
        assert err.code == "base_error"
        assert err.message == "something failed"
        assert err.detail == {}

    def test_custom_code_and_detail(self) -> None:
        err = BaseError("x", code="custom", detail={"k": 1})
        assert err.code == "custom"
        assert err.detail == {"k": 1}

    def test_cause_is_chained(self) -> None:
        cause = ValueError("root")
        err = BaseError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "ValueError('root')"

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("oops")))
        assert payload == {"error": "BaseError", "code": "base_error", "message": "oops", "detail": {}}

    def test_repr(self) -> None:
        assert repr(BaseError("oops")) == "BaseError(code='base_error', message='oops')"


# ---------------------------------------------------------------------------
# Retry policy errors
# ---------------------------------------------------------------------------


class TestRetryPolicyErrors:
    def test_limit_exceeded(self) -> None:
        err = RetryLimitExceededError(attempts=4)
        assert isinstance(err, RetryPolicyError)
        assert err.code == "retry_limit_exceeded"
        assert err.message == "Retry limit exceeded"
        assert err.attempts == 4
        assert err.detail == {"attempts": 4}

    def test_deadline_exceeded(self) -> None:
        err = DeadlineExceededError(attempts=2, elapsed_seconds=1.25)
        assert isinstance(err, RetryPolicyError)
        assert err.code == "deadline_exceeded"
        assert err.detail == {"attempts": 2, "elapsed_seconds": 1.25}

    def test_deadline_without_elapsed(self) -> None:
        err = DeadlineExceededError()
        assert err.elapsed_seconds is None
        assert "elapsed_seconds" not in err.detail

    def test_terminal_errors_are_distinct(self) -> None:
        assert not issubclass(DeadlineExceededError, RetryLimitExceededError)
        assert not issubclass(RetryLimitExceededError, DeadlineExceededError)

    def test_catchable_as_policy_error(self) -> None:
        with pytest.raises(RetryPolicyError):
            raise DeadlineExceededError(attempts=1)

    def test_cause(self) -> None:
        cause = ConnectionError("reset")
        err = RetryLimitExceededError(attempts=1, cause=cause)
        assert err.__cause__ is cause


# ---------------------------------------------------------------------------
# Infrastructure errors
# ---------------------------------------------------------------------------


class TestInfrastructureErrors:
    def test_external_service(self) -> None:
        err = ExternalServiceError("billing", status_code=503)
        assert isinstance(err, InfrastructureError)
        assert err.service == "billing"
        assert err.status_code == 503
        assert err.message == "External service 'billing' error"

    def test_external_service_message(self) -> None:
        assert ExternalServiceError("billing", "HTTP 500").message == "HTTP 500"

    def test_timeout_is_not_builtin(self) -> None:
        err = TimeoutError("slow")
        assert isinstance(err, InfrastructureError)
        assert err.code == "infrastructure_timeout"
