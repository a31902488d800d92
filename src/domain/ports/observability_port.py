"""
Port for the tracing backend that records each answered query.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IObservabilityHandler(ABC):
    @abstractmethod
    def as_callback(self) -> Any:
        """Callback object attached to every reasoning-engine call of a query."""
        ...

    @abstractmethod
    def trace_metadata(self, user_id: Optional[str], session_id: Optional[str]) -> dict[str, Any]:
        """Run metadata that groups a query's trace by user and session."""
        ...

    @abstractmethod
    def flush(self) -> None:
        ...
