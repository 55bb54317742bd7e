import sys
from pathlib import Path

import pytest

# Ensure local source package (src/unirest) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from unirest import RequestBuilder, new  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("UNIREST_TIMEOUT", raising=False)
    monkeypatch.delenv("UNIREST_FOLLOW_REDIRECTS", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://test.unirest.local"


@pytest.fixture
def builder(base_url: str) -> RequestBuilder:
    return new().set_url(base_url)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
