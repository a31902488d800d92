"""
Orchestrator: answers one query for one session with a pluggable strategy.

The session's ConversationState is passed in by reference and only changed
after the strategy has produced its answer. A failure or cancellation while
the strategy runs leaves the history as it was.
"""

import logging
from typing import Optional

from langchain_core.runnables import RunnableConfig

from src.application.agent.conversation import ConversationState
from src.application.agent.strategies import OrchestrationStrategy

logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(self, strategy: OrchestrationStrategy) -> None:
        self._strategy = strategy

    async def run(
        self,
        query: str,
        conversation: ConversationState,
        config: Optional[RunnableConfig] = None,
    ) -> str:
        answer = await self._strategy.answer(query, conversation.messages, config=config)
        conversation.commit(query, answer)
        logger.debug("Committed exchange; history holds %d messages", len(conversation))
        return answer
