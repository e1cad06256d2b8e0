# tests/conftest.py
from __future__ import annotations
import asyncio
import shutil
import tempfile
from typing import Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from ghostpen.main import app
from ghostpen.core import config

# --------------------------------------------------------------------
# Temporary GHOSTPEN_HOME so tests don't write into the real ~/.ghostpen
# --------------------------------------------------------------------
@pytest.fixture(scope="session")
def tmp_home() -> Generator[str, None, None]:
    d = tempfile.mkdtemp(prefix="test-ghostpen-")
    yield d
    shutil.rmtree(d, ignore_errors=True)

@pytest.fixture(autouse=True, scope="session")
def patch_home(tmp_home):
    config.GHOSTPEN_HOME = tmp_home
    config.GHOSTPEN_LOG_DIR = f"{tmp_home}/logs"

@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app)

# --------------------------------------------------------------------
# Stub LanguageTool: no Java during tests
# --------------------------------------------------------------------
class FakeMatch:
    def __init__(self, offset, length, msg, replacements=(), issue_type="misspelling"):
        self.offset = offset
        self.errorLength = length
        self.message = msg
        self.ruleId = "FAKE_RULE"
        self.ruleIssueType = issue_type
        self.replacements = list(replacements)

class FakeLT:
    def check(self, text: str):
        matches = []
        i = text.find("smaple")
        if i != -1:
            matches.append(FakeMatch(i, 6, "Possible spelling mistake found.", ["sample", "simple"]))
        i = text.find("the the")
        if i != -1:
            matches.append(FakeMatch(i, 7, "Word repetition.", ["the"], issue_type="duplication"))
        return matches

@pytest.fixture(autouse=True)
def stub_language_tool(monkeypatch):
    from ghostpen.services import linter as linter_mod
    monkeypatch.setattr(linter_mod, "LanguageTool", lambda *a, **k: FakeLT())
    monkeypatch.setattr(linter_mod, "_LT", None)

# --------------------------------------------------------------------
# Fake local LLM servers behind an httpx.MockTransport
# --------------------------------------------------------------------
class DripStream(httpx.AsyncByteStream):
    """Body that never ends: one byte at a time, so no single read ever times out."""

    async def __aiter__(self):
        while True:
            yield b" "
            await asyncio.sleep(0.05)

def _drip_response() -> httpx.Response:
    return httpx.Response(200, headers={"content-type": "application/json"}, stream=DripStream())

class FakeServers:
    def __init__(self):
        self.up: set[str] = set()
        self.slow: set[str] = set()
        self.slow_completion = False
        self.content = "Fixed text.\n\n**Explanation:** clearer wording"
        self.completion_error: Exception | None = None
        self.status_code = 200
        self.requests: list[httpx.Request] = []

    def _server(self, request: httpx.Request):
        url = str(request.url)
        if url.startswith(config.LMSTUDIO_URL):
            return "lmstudio"
        if url.startswith(config.OLLAMA_URL):
            return "ollama"
        return None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        server = self._server(request)
        if server not in self.up:
            raise httpx.ConnectError("Connection refused", request=request)
        if request.url.path.endswith("/chat/completions"):
            if self.slow_completion:
                return _drip_response()
            if self.completion_error is not None:
                raise self.completion_error
            return httpx.Response(
                self.status_code,
                json={"choices": [{"message": {"role": "assistant", "content": self.content}}]},
            )
        if server in self.slow:
            return _drip_response()
        if server == "ollama":
            return httpx.Response(200, text="Ollama is running")
        return httpx.Response(200, json={"object": "list", "data": [{"id": "local-model"}]})

    @property
    def chat_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/chat/completions")]

@pytest.fixture
def servers(monkeypatch) -> FakeServers:
    from ghostpen.services import providers
    fake = FakeServers()
    monkeypatch.setattr(
        providers,
        "http_client",
        lambda timeout: httpx.AsyncClient(transport=httpx.MockTransport(fake.handler), timeout=timeout),
    )
    return fake
