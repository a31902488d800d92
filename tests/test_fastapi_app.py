"""
Tests for the HTTP surface with a stubbed RunAgentUseCase.
"""

from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from src.application.agent.prompts import APOLOGY
from src.application.services.session_store import SessionStore
from src.infrastructure.entrypoints.fastapi_app import create_app


def _client(execute):
    use_case = MagicMock()
    use_case.execute = execute
    sessions = SessionStore()
    return TestClient(create_app(use_case, sessions)), use_case, sessions


def test_query_creates_session_and_answers():
    client, use_case, sessions = _client(AsyncMock(return_value="Apple is up."))
    response = client.post("/query", json={"prompt": "How is AAPL?"})

    assert response.status_code == 200
    body = response.json()
    assert body["answer"] == "Apple is up."
    assert body["session_id"] in sessions


def test_sessions_keep_separate_histories():
    client, use_case, sessions = _client(AsyncMock(return_value="ok"))
    client.post("/query", json={"prompt": "a", "session_id": "s1"})
    client.post("/query", json={"prompt": "b", "session_id": "s2"})

    first, second = use_case.execute.await_args_list
    assert first.args[1] is not second.args[1]
    assert first.kwargs["session_id"] == "s1"
    assert second.kwargs["session_id"] == "s2"


def test_failure_returns_apology():
    client, _, _ = _client(AsyncMock(side_effect=RuntimeError("engine down")))
    response = client.post("/query", json={"prompt": "q"})
    assert response.status_code == 502
    assert response.json() == {"detail": APOLOGY}


def test_end_session():
    client, _, sessions = _client(AsyncMock(return_value="ok"))
    client.post("/query", json={"prompt": "q", "session_id": "s1"})
    assert client.delete("/sessions/s1").status_code == 204
    assert "s1" not in sessions
    assert client.delete("/sessions/s1").status_code == 404


def test_health():
    client, _, _ = _client(AsyncMock())
    assert client.get("/health").json() == {"status": "ok"}
