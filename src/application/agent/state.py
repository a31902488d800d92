"""
LangGraph agent state definition.
langgraph is the orchestration framework and is allowed in the application layer.
"""

from typing import Annotated, TypedDict

from langgraph.graph.message import add_messages


class AgentState(TypedDict):
    """Shared state threaded through every node in the agent graph.

    messages: append-only list of LangChain BaseMessage objects managed by
              the add_messages reducer.
    rounds:   number of reasoning-engine calls made so far for this query.
    """

    messages: Annotated[list, add_messages]
    rounds: int
