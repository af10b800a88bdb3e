from __future__ import annotations

from pathlib import Path

import pytest

# Load dotenv files early so test fixtures can read settings via os.getenv
try:  # pragma: no cover
    from dotenv import load_dotenv

    TEST_ROOT = Path(__file__).resolve().parent
    load_dotenv(TEST_ROOT / ".env", override=False)
except Exception:
    pass

from opensearch_assistant.core.config import Settings


@pytest.fixture
def test_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings bound to a mock cluster, independent of the developer's environment."""
    monkeypatch.setenv("OPENSEARCH_URL", "http://mock-cluster:9200")
    monkeypatch.setenv("ASSISTANT_TOOL_TIMEOUT", "5")
    return Settings(_env_file=None)
