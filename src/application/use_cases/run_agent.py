"""
Use-case: answer a user query through the Orchestrator with tracing attached.
langchain_core is treated as framework (not infrastructure) because LangChain
messages and RunnableConfig are used throughout the application layer.
"""

from typing import Optional

from src.application.agent.conversation import ConversationState
from src.application.agent.orchestrator import Orchestrator
from src.domain.ports.observability_port import IObservabilityHandler


class RunAgentUseCase:
    def __init__(
        self,
        orchestrator: Orchestrator,
        observability: Optional[IObservabilityHandler] = None,
    ) -> None:
        """
        Args:
            orchestrator:  Orchestrator configured with a strategy.
            observability: IObservabilityHandler implementation (e.g. Langfuse adapter).
        """
        self._orchestrator = orchestrator
        self._observability = observability

    async def execute(
        self,
        query: str,
        conversation: ConversationState,
        user_id: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> str:
        """Answer *query* and record the exchange in *conversation*.

        Args:
            query:        The user's natural-language question.
            conversation: The session's history, updated on success.
            user_id:      User identifier for Langfuse tracing (optional).
            session_id:   Session id for Langfuse grouping (optional).
        """
        config: dict = {}
        if self._observability is not None:
            config["metadata"] = self._observability.trace_metadata(user_id, session_id)
            config["callbacks"] = [self._observability.as_callback()]
        return await self._orchestrator.run(query, conversation, config=config)

    def flush(self) -> None:
        if self._observability is not None:
            self._observability.flush()
