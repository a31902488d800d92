"""
Folds one round of requested tool calls into tool-result messages.
"""

import asyncio
import json
from typing import Any

from langchain_core.messages import ToolMessage

from src.application.services.capability_registry import CapabilityRegistry


def serialize_payload(payload: Any) -> str:
    return json.dumps(payload, default=str)


async def dispatch_tool_calls(
    registry: CapabilityRegistry, tool_calls: list[dict]
) -> list[ToolMessage]:
    """Invoke every requested capability concurrently.

    Results are returned in request order regardless of completion order,
    each carrying the tool_call_id of the request it answers.
    """
    payloads = await asyncio.gather(
        *(registry.invoke(call["name"], call.get("args")) for call in tool_calls)
    )
    return [
        ToolMessage(
            content=serialize_payload(payload),
            name=call["name"],
            tool_call_id=call.get("id") or "",
        )
        for call, payload in zip(tool_calls, payloads)
    ]
