"""
Langfuse tracing for the research assistant.

The adapter owns one Langfuse client built from Settings, so traces go to the
configured project even when LANGFUSE_* variables are absent from the process
environment. The langfuse package is imported on construction only.
"""

from typing import Any, Optional, Sequence

from src.domain.ports.observability_port import IObservabilityHandler

TRACE_TAGS = ("financial-research-assistant",)


class LangfuseObservabilityHandler(IObservabilityHandler):
    def __init__(
        self,
        secret_key: str,
        public_key: Optional[str] = None,
        host: Optional[str] = None,
        tags: Sequence[str] = TRACE_TAGS,
    ) -> None:
        from langfuse import Langfuse
        from langfuse.langchain import CallbackHandler

        self._client = Langfuse(public_key=public_key, secret_key=secret_key, host=host)
        self._handler = CallbackHandler(public_key=public_key)
        self._tags = list(tags)

    def as_callback(self) -> Any:
        return self._handler

    def trace_metadata(self, user_id: Optional[str], session_id: Optional[str]) -> dict[str, Any]:
        metadata: dict[str, Any] = {"langfuse_tags": list(self._tags)}
        if user_id is not None:
            metadata["langfuse_user_id"] = user_id
        if session_id is not None:
            metadata["langfuse_session_id"] = session_id
        return metadata

    def flush(self) -> None:
        """Send buffered traces; called once when the process or app shuts down."""
        self._client.flush()
