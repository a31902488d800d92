"""
Orchestration strategies: interchangeable policies for answering one query.

  - AgentLoopStrategy:  the reasoning engine chooses tools freely over several
                        rounds (LangGraph loop, bounded by a round cap).
  - SinglePassStrategy: at most one round of tool calls, then a final answer.
  - RoutedStrategy:     the query is classified into a single lane up front and
                        answered from that lane's context alone.

Every strategy reads the session history but never writes it; the
Orchestrator commits the finished exchange.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from langchain_core.messages import BaseMessage
from langchain_core.runnables import RunnableConfig

from src.application.agent.conversation import build_working_messages, message_text
from src.application.agent.dispatch import dispatch_tool_calls, serialize_payload
from src.application.agent.graph import (
    DEFAULT_MAX_ROUNDS,
    ToolFanOut,
    build_agent_graph,
    recursion_limit_for,
)
from src.application.agent.prompts import (
    DATA_LANE_CONTEXT,
    DEFINITION_LANE_CONTEXT,
    NO_INFORMATION_ANSWER,
    ROUND_LIMIT_ANSWER,
    ROUTED_SYSTEM_PROMPT,
    SYSTEM_PROMPT,
)
from src.application.agent.router import QueryRouter
from src.application.services.capability_registry import CapabilityRegistry
from src.application.use_cases.retrieve_documents import RetrievalGate
from src.domain.entities.route import DataLane
from src.domain.ports.llm_port import ILanguageModel

logger = logging.getLogger(__name__)


class OrchestrationStrategy(ABC):
    @abstractmethod
    async def answer(
        self,
        query: str,
        history: Sequence[BaseMessage],
        config: Optional[RunnableConfig] = None,
    ) -> str:
        """Produce the final answer text for *query* given prior turns."""
        ...


class AgentLoopStrategy(OrchestrationStrategy):
    def __init__(
        self,
        llm: ILanguageModel,
        registry: CapabilityRegistry,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
        fan_out: ToolFanOut = ToolFanOut.ALL,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        self._graph = build_agent_graph(llm, registry, max_rounds=max_rounds, fan_out=fan_out)
        self._recursion_limit = recursion_limit_for(max_rounds)
        self._system_prompt = system_prompt

    async def answer(self, query, history, config=None) -> str:
        messages = build_working_messages(self._system_prompt, history, query)
        run_config = {**(config or {}), "recursion_limit": self._recursion_limit}
        final_state = await self._graph.ainvoke(
            {"messages": messages, "rounds": 0}, config=run_config
        )
        return message_text(final_state["messages"][-1])


class SinglePassStrategy(OrchestrationStrategy):
    def __init__(
        self,
        llm: ILanguageModel,
        registry: CapabilityRegistry,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        self._llm_with_tools = llm.bind_tools(registry.tool_schemas())
        self._registry = registry
        self._system_prompt = system_prompt

    async def answer(self, query, history, config=None) -> str:
        messages = build_working_messages(self._system_prompt, history, query)
        response = await self._llm_with_tools.ainvoke(messages, config=config)
        if not getattr(response, "tool_calls", None):
            return message_text(response)

        messages.append(response)
        messages.extend(await dispatch_tool_calls(self._registry, response.tool_calls))
        final = await self._llm_with_tools.ainvoke(messages, config=config)
        if getattr(final, "tool_calls", None):
            logger.warning(
                "Ignoring %d tool call(s) requested after the single dispatch pass",
                len(final.tool_calls),
            )
        return message_text(final) or ROUND_LIMIT_ANSWER


class RoutedStrategy(OrchestrationStrategy):
    """Answers from exactly one lane: live market data or the glossary."""

    QUOTE_CAPABILITY = "getStockData"
    NEWS_CAPABILITY = "getStockNews"

    def __init__(
        self,
        llm: ILanguageModel,
        registry: CapabilityRegistry,
        router: QueryRouter,
        definition_gate: RetrievalGate,
        system_prompt: str = ROUTED_SYSTEM_PROMPT,
    ) -> None:
        self._llm = llm
        self._registry = registry
        self._router = router
        self._definition_gate = definition_gate
        self._system_prompt = system_prompt

    async def answer(self, query, history, config=None) -> str:
        decision = await self._router.route(query, config=config)
        logger.info("Routed %r to %s", query, decision)

        if isinstance(decision, DataLane):
            args = {"ticker": decision.ticker}
            quote, news = await asyncio.gather(
                self._registry.invoke(self.QUOTE_CAPABILITY, args),
                self._registry.invoke(self.NEWS_CAPABILITY, args),
            )
            prompt = DATA_LANE_CONTEXT.format(
                query=query,
                ticker=decision.ticker,
                quote=serialize_payload(quote),
                news=serialize_payload(news),
            )
        else:
            verdict = await self._definition_gate.gate(query)
            if not verdict.found:
                return NO_INFORMATION_ANSWER
            prompt = DEFINITION_LANE_CONTEXT.format(
                query=query,
                documents="\n\n---\n\n".join(doc.content for doc in verdict.documents),
            )

        messages = build_working_messages(self._system_prompt, history, prompt)
        response = await self._llm.ainvoke(messages, config=config)
        return message_text(response)
