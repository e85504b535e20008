import pytest
from fastapi.testclient import TestClient

from deltadoc.api.deps import get_settings
from deltadoc.core.config import Settings
from deltadoc.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def test_root(client: TestClient):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"message": "deltadoc"}


def test_plain_text(client: TestClient, d2: str):
    r = client.post("/api/v1/deltas/plain-text", content=d2)
    assert r.status_code == 200
    assert r.json() == {"text": "Hello\n\nLet's write some code!\n", "ops": 4}


def test_normalize(client: TestClient, d1: str):
    r = client.post("/api/v1/deltas/normalize", content=d1)
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    assert r.text == r'''{"ops":[{"insert":"Hello\n\nLet's write some code!\n"}]}'''


def test_decode_error(client: TestClient):
    r = client.post("/api/v1/deltas/plain-text", content='{"ops":[{"foo":"bar"}]}')
    assert r.status_code == 422
    assert r.json()["detail"] == {
        "kind": "unknown_operation",
        "message": "ops[0]: unknown operation 'foo'",
        "field": "foo",
        "index": 0,
    }


def test_syntax_error(client: TestClient):
    r = client.post("/api/v1/deltas/normalize", content="not json")
    assert r.status_code == 422
    assert r.json()["detail"]["kind"] == "syntax_error"


def test_body_too_large(client: TestClient, d1: str):
    app.dependency_overrides[get_settings] = lambda: Settings(max_body_bytes=16)
    r = client.post("/api/v1/deltas/plain-text", content=d1)
    assert r.status_code == 413


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DELTADOC_MAX_BODY_BYTES", "10")
    monkeypatch.setenv("DELTADOC_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.max_body_bytes == 10
    assert settings.log_level == "debug"
    assert settings.api_prefix == "/api/v1"
