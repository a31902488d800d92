"""
Unit tests for ConversationState and the working-sequence builder.
"""

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from src.application.agent.conversation import (
    ConversationState,
    build_working_messages,
    message_text,
)
from src.application.services.session_store import SessionStore


def test_history_is_capped_at_four_exchanges_fifo():
    state = ConversationState()
    for i in range(6):
        state.commit(f"q{i}", f"a{i}")
        assert len(state) <= 8

    contents = [m.content for m in state.messages]
    assert contents == ["q2", "a2", "q3", "a3", "q4", "a4", "q5", "a5"]
    assert isinstance(state.messages[0], HumanMessage)
    assert isinstance(state.messages[1], AIMessage)


def test_custom_capacity():
    state = ConversationState(max_exchanges=1)
    state.commit("q0", "a0")
    state.commit("q1", "a1")
    assert [m.content for m in state.messages] == ["q1", "a1"]


def test_empty_answer_is_stored_as_empty_text():
    state = ConversationState()
    state.commit("q", None)
    assert state.messages[1].content == ""


def test_working_messages_start_with_single_system_message():
    state = ConversationState()
    state.commit("earlier question", "earlier answer")
    messages = build_working_messages("You help.", state.messages, "new question")

    assert isinstance(messages[0], SystemMessage)
    assert sum(isinstance(m, SystemMessage) for m in messages) == 1
    assert [m.content for m in messages[1:]] == [
        "earlier question", "earlier answer", "new question",
    ]


def test_working_messages_do_not_alias_history():
    state = ConversationState()
    state.commit("q", "a")
    messages = build_working_messages("sys", state.messages, "next")
    messages.append(AIMessage(content="scratch"))
    assert len(state) == 2
    assert messages[1] is not state.messages[0]


def test_message_text_handles_content_blocks():
    assert message_text(AIMessage(content="plain")) == "plain"
    blocks = AIMessage(content=[{"type": "text", "text": "Hello "}, {"type": "text", "text": "there"}])
    assert message_text(blocks) == "Hello there"


def test_session_store_isolates_sessions():
    store = SessionStore(max_exchanges=2)
    sid_a, state_a = store.get_or_create("a")
    sid_b, state_b = store.get_or_create("b")
    state_a.commit("q", "a")

    assert store.get_or_create("a")[1] is state_a
    assert len(state_b) == 0
    assert state_a.max_messages == 4

    new_id, _ = store.get_or_create(None)
    assert new_id and new_id not in {"a", "b"}
    assert store.end("a") is True
    assert store.end("a") is False
    assert "a" not in store


def test_session_store_evicts_least_recently_used_session():
    store = SessionStore(max_sessions=2)
    _, state_a = store.get_or_create("a")
    store.get_or_create("b")
    assert store.get_or_create("a")[1] is state_a

    store.get_or_create("c")

    assert len(store) == 2
    assert "b" not in store
    assert "a" in store and "c" in store


def test_session_store_rejects_non_positive_cap():
    with pytest.raises(ValueError):
        SessionStore(max_sessions=0)
