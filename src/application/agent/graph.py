"""
LangGraph agent graph factory for the free multi-round tool loop.

Dependency-injection contract:
  - Receives ILanguageModel and a CapabilityRegistry.
  - Never imports ChatBedrock, langfuse, httpx, or faiss directly.
  - langchain_core and langgraph are treated as orchestration-framework imports,
    acceptable in the application layer.

One round is one reasoning-engine call. When the engine is still requesting
tools after max_rounds calls, the graph ends on ROUND_LIMIT_ANSWER instead of
dispatching them.
"""

import enum
import logging

from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableConfig
from langgraph.graph import END, START, StateGraph

from src.application.agent.dispatch import dispatch_tool_calls
from src.application.agent.prompts import ROUND_LIMIT_ANSWER
from src.application.agent.state import AgentState
from src.application.services.capability_registry import CapabilityRegistry
from src.domain.ports.llm_port import ILanguageModel

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 8


class ToolFanOut(str, enum.Enum):
    """How many of a round's tool requests are executed."""

    ALL = "all"
    FIRST = "first"


def _keep_first_tool_call(response: AIMessage) -> AIMessage:
    """Trim a multi-tool request to its first call, in tool_calls and content blocks alike.

    Providers that echo tool_use blocks back to the model (Bedrock Converse)
    reject a tool_use without a matching tool result.
    """
    kept = response.tool_calls[:1]
    content = response.content
    if isinstance(content, list):
        kept_id = kept[0].get("id")
        content = [
            block
            for block in content
            if not (
                isinstance(block, dict)
                and block.get("type") == "tool_use"
                and block.get("id") != kept_id
            )
        ]
    return response.model_copy(update={"tool_calls": kept, "content": content})


def recursion_limit_for(max_rounds: int) -> int:
    """LangGraph step budget that never trips before the round cap does."""
    return 2 * max_rounds + 2


def build_agent_graph(
    llm: ILanguageModel,
    registry: CapabilityRegistry,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    fan_out: ToolFanOut = ToolFanOut.ALL,
):
    """Build and compile the agent graph.

    Args:
        llm:        ILanguageModel implementation; tools are bound here.
        registry:   CapabilityRegistry used both for schemas and dispatch.
        max_rounds: Maximum reasoning-engine calls per query.
        fan_out:    ALL executes every tool request of a round; FIRST keeps
                    only the first one and trims the request message to match.

    Returns:
        Compiled LangGraph CompiledStateGraph ready for ainvoke() calls.
    """
    if max_rounds < 1:
        raise ValueError("max_rounds must be at least 1")
    fan_out = ToolFanOut(fan_out)
    llm_with_tools = llm.bind_tools(registry.tool_schemas())

    async def llm_node(state: AgentState, config: RunnableConfig) -> dict:
        """Reasoning step: call the model on the working sequence."""
        response = await llm_with_tools.ainvoke(state["messages"], config=config)
        tool_calls = getattr(response, "tool_calls", None) or []
        if fan_out is ToolFanOut.FIRST and len(tool_calls) > 1:
            dropped = [call["name"] for call in tool_calls[1:]]
            logger.warning("Dropping %d extra tool call(s): %s", len(dropped), dropped)
            response = _keep_first_tool_call(response)
        return {"messages": [response], "rounds": state.get("rounds", 0) + 1}

    async def tool_node(state: AgentState) -> dict:
        """Action step: run the requested tools and fold results in request order."""
        last_message = state["messages"][-1]
        return {"messages": await dispatch_tool_calls(registry, last_message.tool_calls)}

    def round_limit_node(state: AgentState) -> dict:
        logger.warning(
            "Agent loop stopped after %d rounds with tool calls still pending",
            state.get("rounds", 0),
        )
        return {"messages": [AIMessage(content=ROUND_LIMIT_ANSWER)]}

    def should_continue(state: AgentState) -> str:
        """Route: dispatch pending tool calls, stop at the round cap, or end."""
        last_message = state["messages"][-1]
        if not getattr(last_message, "tool_calls", None):
            return END
        if state.get("rounds", 0) >= max_rounds:
            return "round_limit_node"
        return "tool_node"

    workflow = StateGraph(AgentState)
    workflow.add_node("llm_node", llm_node)
    workflow.add_node("tool_node", tool_node)
    workflow.add_node("round_limit_node", round_limit_node)
    workflow.add_edge(START, "llm_node")
    workflow.add_conditional_edges(
        "llm_node", should_continue, ["tool_node", "round_limit_node", END]
    )
    workflow.add_edge("tool_node", "llm_node")
    workflow.add_edge("round_limit_node", END)
    return workflow.compile()
