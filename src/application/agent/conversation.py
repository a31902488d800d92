"""
Bounded conversation history owned by a session.

The history is only changed by committing a finished (user, assistant) pair.
The agent loop works on its own copy built by build_working_messages(), so a
cancelled or failed query leaves the history untouched.
"""

from typing import Any, Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage


class ConversationState:
    DEFAULT_MAX_EXCHANGES: int = 4

    def __init__(self, max_exchanges: int = DEFAULT_MAX_EXCHANGES) -> None:
        if max_exchanges < 1:
            raise ValueError("max_exchanges must be at least 1")
        self._max_messages = max_exchanges * 2
        self._messages: list[BaseMessage] = []

    @property
    def messages(self) -> tuple[BaseMessage, ...]:
        return tuple(self._messages)

    @property
    def max_messages(self) -> int:
        return self._max_messages

    def commit(self, query: str, answer: str) -> None:
        """Append a completed exchange, evicting the oldest ones when over capacity."""
        self._messages.append(HumanMessage(content=query))
        self._messages.append(AIMessage(content=answer or ""))
        while len(self._messages) > self._max_messages:
            del self._messages[:2]

    def __len__(self) -> int:
        return len(self._messages)


def build_working_messages(
    system_prompt: str, history: Sequence[BaseMessage], query: str
) -> list[BaseMessage]:
    """Seed one query's scratch sequence: system, prior turns, then the new query."""
    return [
        SystemMessage(content=system_prompt),
        *(message.model_copy() for message in history),
        HumanMessage(content=query),
    ]


def message_text(message: Any) -> str:
    """Plain text of a model response, whether content is a string or content blocks."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)
