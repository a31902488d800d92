"""
Infrastructure adapter: Amazon Bedrock (ChatBedrock) → ILanguageModel.

All ChatBedrock / langchain_aws details are confined here.
bind_tools() returns a new BedrockChatAdapter wrapping the tool-bound Runnable
so the ILanguageModel contract is preserved throughout. Authentication uses
the Bedrock API key botocore reads from AWS_BEARER_TOKEN_BEDROCK.
"""

from typing import Any, Optional

from langchain_aws import ChatBedrock

from src.domain.ports.llm_port import ILanguageModel


class BedrockChatAdapter(ILanguageModel):
    """Wraps ChatBedrock and exposes the ILanguageModel interface."""

    MODEL_ID = "us.amazon.nova-pro-v1:0"
    TEMPERATURE = 0.1

    def __init__(
        self,
        model_id: str = MODEL_ID,
        region: str = "us-east-1",
        _runnable: Any = None,
    ) -> None:
        """
        Args:
            model_id:  Bedrock model or inference-profile id.
            region:    AWS region hosting the model.
            _runnable: Optional pre-configured Runnable (used internally by
                       bind_tools to wrap the tool-bound model without re-constructing
                       ChatBedrock). Pass nothing for normal instantiation.
        """
        if _runnable is not None:
            self._llm = _runnable
        else:
            self._llm = ChatBedrock(
                model=model_id,
                model_kwargs={"temperature": self.TEMPERATURE},
                region_name=region,
            )

    async def ainvoke(self, messages: list[Any], config: Optional[dict] = None) -> Any:
        return await self._llm.ainvoke(messages, config=config)

    def bind_tools(self, tools: list) -> "BedrockChatAdapter":
        """Return a new adapter that has the given tools bound for function-calling."""
        return BedrockChatAdapter(_runnable=self._llm.bind_tools(tools))
