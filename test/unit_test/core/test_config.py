from __future__ import annotations

import pytest

from opensearch_assistant.core.config import OpenSearchConfig, Settings
from opensearch_assistant.factory import create_default_registry


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in [
        "OPENSEARCH_URL",
        "OPENSEARCH_USERNAME",
        "OPENSEARCH_PASSWORD",
        "OPENSEARCH_VERIFY_CERTS",
        "OPENSEARCH_REQUEST_TIMEOUT",
        "ASSISTANT_TOOL_TIMEOUT",
        "ASSISTANT_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.opensearch_url == "http://localhost:9200"
    assert s.opensearch_username is None
    assert s.opensearch_verify_certs is True
    assert s.opensearch_request_timeout == 10.0
    assert s.tool_timeout == 30.0
    assert s.log_level == "INFO"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENSEARCH_URL", "https://search.internal:9200")
    monkeypatch.setenv("OPENSEARCH_USERNAME", "admin")
    monkeypatch.setenv("OPENSEARCH_PASSWORD", "pw")
    monkeypatch.setenv("OPENSEARCH_VERIFY_CERTS", "false")
    monkeypatch.setenv("OPENSEARCH_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("ASSISTANT_TOOL_TIMEOUT", "12")
    monkeypatch.setenv("ASSISTANT_LOG_LEVEL", "DEBUG")

    s = Settings(_env_file=None)

    assert s.opensearch_url == "https://search.internal:9200"
    assert s.opensearch_verify_certs is False
    assert s.tool_timeout == 12.0
    assert s.log_level == "DEBUG"


def test_grouped_opensearch_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENSEARCH_URL", "http://mock:9200")
    monkeypatch.setenv("OPENSEARCH_USERNAME", "admin")
    monkeypatch.setenv("OPENSEARCH_PASSWORD", "pw")
    monkeypatch.setenv("OPENSEARCH_REQUEST_TIMEOUT", "3")

    cfg = Settings(_env_file=None).opensearch

    assert isinstance(cfg, OpenSearchConfig)
    assert cfg.url == "http://mock:9200"
    assert cfg.username == "admin"
    assert cfg.password == "pw"
    assert cfg.request_timeout == 3.0


@pytest.mark.parametrize("value", ["", "none", "None", " NONE "])
def test_tool_timeout_can_be_disabled(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("ASSISTANT_TOOL_TIMEOUT", value)

    assert Settings(_env_file=None).tool_timeout is None


@pytest.mark.asyncio
async def test_disabled_tool_timeout_reaches_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASSISTANT_TOOL_TIMEOUT", "none")

    reg, client = create_default_registry(Settings(_env_file=None))
    try:
        assert reg.invoke_timeout is None
    finally:
        await client.aclose()
