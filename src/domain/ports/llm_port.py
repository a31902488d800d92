"""
Port (interface) for language model providers.
Infrastructure adapters (e.g. BedrockChatAdapter) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ILanguageModel(ABC):
    @abstractmethod
    async def ainvoke(self, messages: list[Any], config: Optional[dict] = None) -> Any:
        """Invoke the model asynchronously and return a response message."""
        ...

    @abstractmethod
    def bind_tools(self, tools: list) -> "ILanguageModel":
        """Return a new model instance with the given tools bound for function-calling."""
        ...
