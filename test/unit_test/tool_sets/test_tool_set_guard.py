from __future__ import annotations

import asyncio
from typing import Optional

import pytest
from pydantic import BaseModel

from opensearch_assistant.capabilities.base import is_error_result
from opensearch_assistant.search_client.errors import IndexNameRequiredError, SearchClusterError
from opensearch_assistant.tool_sets.base import describe_failure, guard_backing_call


class _Row(BaseModel):
    index: str


@pytest.mark.asyncio
async def test_success_passes_through() -> None:
    async def call(argument: Optional[str] = None) -> str:
        return f"ok {argument}"

    assert await guard_backing_call("op", call)("x") == "ok x"


@pytest.mark.asyncio
async def test_failure_is_logged_and_returned(caplog: pytest.LogCaptureFixture) -> None:
    async def call(argument: Optional[str] = None) -> str:
        raise SearchClusterError("index exists check returned HTTP 403", status_code=403)

    with caplog.at_level("WARNING", logger="opensearch_assistant.tool_sets.base"):
        result = await guard_backing_call("op", call)("x")

    assert result == "[Error] op failed: index exists check returned HTTP 403"
    assert any("op failed" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_cancellation_propagates() -> None:
    async def call(argument: Optional[str] = None) -> str:
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await guard_backing_call("op", call)()


@pytest.mark.asyncio
async def test_timeout_from_backing_is_a_failure_string() -> None:
    async def call(argument: Optional[str] = None) -> str:
        raise asyncio.TimeoutError()

    result = await guard_backing_call("op", call)()
    assert is_error_result(result)
    assert "TimeoutError" in result


def test_describe_failure_hides_validation_payload() -> None:
    with pytest.raises(ValueError) as exc_info:
        _Row.model_validate({"index": {"secret": "token-123"}})

    text = describe_failure(exc_info.value)
    assert text == "malformed response from the search cluster"
    assert "token-123" not in text


def test_describe_failure_for_own_messages() -> None:
    assert describe_failure(SearchClusterError("cat indices returned HTTP 502")) == "cat indices returned HTTP 502"
    assert describe_failure(IndexNameRequiredError()) == "an index name is required"
    assert describe_failure(KeyError("x")) == "unexpected KeyError"


def test_describe_failure_hides_foreign_value_errors() -> None:
    decode_error = UnicodeDecodeError("utf-8", b"\xffsecret-bytes", 0, 1, "invalid start byte")

    assert describe_failure(decode_error) == "unexpected UnicodeDecodeError"
    assert describe_failure(ValueError("raw detail token-123")) == "unexpected ValueError"
