"""
Tests for RunAgentUseCase: tracing config is threaded to the reasoning engine.
"""

import asyncio
from unittest.mock import MagicMock

import pytest
from langchain_core.messages import AIMessage

from src.application.agent.conversation import ConversationState
from src.application.agent.orchestrator import Orchestrator
from src.application.agent.strategies import SinglePassStrategy
from src.application.use_cases.run_agent import RunAgentUseCase
from src.infrastructure.observability.langfuse_adapter import LangfuseObservabilityHandler
from tests.fakes import FakeLanguageModel


def _use_case(llm, observability=None):
    registry = MagicMock()
    registry.tool_schemas.return_value = []
    return RunAgentUseCase(Orchestrator(SinglePassStrategy(llm, registry)), observability)


def test_callbacks_and_metadata_reach_the_model():
    handler = object()
    observability = MagicMock()
    observability.as_callback.return_value = handler
    observability.trace_metadata.return_value = {"langfuse_session_id": "s1", "langfuse_user_id": "u1"}
    llm = FakeLanguageModel([AIMessage(content="answer")])
    conversation = ConversationState()

    answer = asyncio.run(
        _use_case(llm, observability).execute("q", conversation, user_id="u1", session_id="s1")
    )

    assert answer == "answer"
    config = llm.configs[0]
    assert config["callbacks"] == [handler]
    assert config["metadata"]["langfuse_session_id"] == "s1"
    assert config["metadata"]["langfuse_user_id"] == "u1"
    observability.trace_metadata.assert_called_once_with("u1", "s1")
    assert len(conversation) == 2


def test_flush_delegates_to_observability():
    observability = MagicMock()
    _use_case(FakeLanguageModel([]), observability).flush()
    observability.flush.assert_called_once_with()


def test_without_observability():
    llm = FakeLanguageModel([AIMessage(content="answer")])
    use_case = _use_case(llm)
    asyncio.run(use_case.execute("q", ConversationState()))
    assert "callbacks" not in llm.configs[0]
    assert "metadata" not in llm.configs[0]
    use_case.flush()


class TestLangfuseObservabilityHandler:
    @pytest.fixture
    def langfuse_mocks(self, monkeypatch):
        client_cls = MagicMock()
        handler_cls = MagicMock()
        monkeypatch.setattr("langfuse.Langfuse", client_cls)
        monkeypatch.setattr("langfuse.langchain.CallbackHandler", handler_cls)
        return client_cls, handler_cls

    def test_client_is_built_from_settings_values(self, langfuse_mocks):
        client_cls, handler_cls = langfuse_mocks
        handler = LangfuseObservabilityHandler(
            secret_key="sk-lf-test", public_key="pk-lf-test", host="https://langfuse.example"
        )

        client_cls.assert_called_once_with(
            public_key="pk-lf-test", secret_key="sk-lf-test", host="https://langfuse.example"
        )
        handler_cls.assert_called_once_with(public_key="pk-lf-test")
        assert handler.as_callback() is handler_cls.return_value

    def test_flush_uses_owned_client(self, langfuse_mocks):
        client_cls, _ = langfuse_mocks
        LangfuseObservabilityHandler(secret_key="sk-lf-test").flush()
        client_cls.return_value.flush.assert_called_once_with()

    def test_trace_metadata_groups_by_user_and_session(self, langfuse_mocks):
        handler = LangfuseObservabilityHandler(secret_key="sk-lf-test", tags=["research"])

        assert handler.trace_metadata("u1", "s1") == {
            "langfuse_tags": ["research"],
            "langfuse_user_id": "u1",
            "langfuse_session_id": "s1",
        }
        assert handler.trace_metadata(None, None) == {"langfuse_tags": ["research"]}
