"""
Application service: per-session conversation state for multi-session surfaces.
Each session id owns its own ConversationState; nothing is shared between sessions.
The store holds at most ``max_sessions`` states and evicts the least recently
used one when a new session would exceed that cap.
"""

import logging
import uuid
from collections import OrderedDict
from typing import Optional

from src.application.agent.conversation import ConversationState

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 1000


class SessionStore:
    def __init__(
        self,
        max_exchanges: int = ConversationState.DEFAULT_MAX_EXCHANGES,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._max_exchanges = max_exchanges
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, ConversationState] = OrderedDict()

    def get_or_create(self, session_id: Optional[str] = None) -> tuple[str, ConversationState]:
        """Return ``(session_id, state)``, minting a new id when none is given."""
        session_id = session_id or uuid.uuid4().hex
        state = self._sessions.get(session_id)
        if state is not None:
            self._sessions.move_to_end(session_id)
            return session_id, state

        state = ConversationState(max_exchanges=self._max_exchanges)
        self._sessions[session_id] = state
        while len(self._sessions) > self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted idle session %s", evicted)
        return session_id, state

    def end(self, session_id: str) -> bool:
        """Discard a session. Returns False if it did not exist."""
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions
