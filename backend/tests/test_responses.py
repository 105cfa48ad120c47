"""Tests for the response helpers."""

from pydantic import BaseModel, Field, ValidationError

from responses import (
    ActionResult,
    ResponseCode,
    action_failure,
    error_dict,
    format_validation_errors,
    get_http_status,
    validation_failure,
)


class _Sample(BaseModel):
    name: str = Field(..., min_length=2)
    count: int


def _errors():
    try:
        _Sample.model_validate({"name": "a"})
    except ValidationError as e:
        return e
    raise AssertionError("expected a validation error")


class TestActionResults:
    """Tests for action result helpers."""

    def test_validation_failure_joins_messages(self):
        result = validation_failure(_errors())

        assert result.data is None
        assert result.error == (
            "name: String should have at least 2 characters, count: Field required"
        )

    def test_body_prefix_is_dropped(self):
        errors = [{"loc": ("body", "jobId"), "msg": "Field required"}]
        assert format_validation_errors(errors) == "jobId: Field required"

    def test_error_without_location(self):
        assert format_validation_errors([{"loc": (), "msg": "Bad"}]) == "Bad"

    def test_action_failure_prefix(self):
        result = action_failure("Failed to create job", RuntimeError("timeout"))
        assert result.error == "Failed to create job. timeout"
        assert not result.ok

    def test_action_failure_without_message(self):
        result = action_failure("Failed to create job", RuntimeError())
        assert result.error == "Failed to create job. An unknown error occurred"

    def test_success(self):
        assert ActionResult(data={"id": "x"}).ok


class TestErrorEnvelope:
    """Tests for the HTTP error envelope."""

    def test_error_dict(self):
        body = error_dict(ResponseCode.NOT_FOUND, request_id="abc")

        assert body["code"] == "1003"
        assert body["success"] is False
        assert body["message"] == "Resource not found"
        assert body["request_id"] == "abc"

    def test_http_status(self):
        assert get_http_status(ResponseCode.UNAUTHORIZED) == 401
        assert get_http_status(ResponseCode.LLM_RATE_LIMIT) == 429
