"""
Lane selection for the routed orchestration strategy.

The reasoning engine classifies each query once against a constrained output
schema. Output that cannot be parsed, or a data lane without a ticker, falls
back to the definition lane; classification is never retried.
"""

import logging
from typing import Literal, Optional

from langchain_core.exceptions import OutputParserException
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.runnables import RunnableConfig
from pydantic import BaseModel, Field

from src.application.agent.conversation import message_text
from src.application.agent.prompts import ROUTER_PROMPT
from src.domain.entities.route import DataLane, DefinitionLane, RouteDecision
from src.domain.ports.llm_port import ILanguageModel

logger = logging.getLogger(__name__)


class RouteClassification(BaseModel):
    lane: Literal["data", "definition"] = Field(
        description="'data' for stock price or news questions, 'definition' otherwise"
    )
    ticker: Optional[str] = Field(
        default=None, description="Ticker symbol for the data lane, e.g. AAPL"
    )


class QueryRouter:
    def __init__(self, llm: ILanguageModel) -> None:
        self._llm = llm
        self._parser = PydanticOutputParser(pydantic_object=RouteClassification)

    async def route(
        self, query: str, config: Optional[RunnableConfig] = None
    ) -> RouteDecision:
        messages = [
            SystemMessage(
                content=ROUTER_PROMPT.format(
                    format_instructions=self._parser.get_format_instructions()
                )
            ),
            HumanMessage(content=query),
        ]
        response = await self._llm.ainvoke(messages, config=config)
        raw = message_text(response)
        try:
            classification = self._parser.parse(raw)
        except OutputParserException:
            logger.warning("Unparsable route classification %r; using definition lane", raw)
            return DefinitionLane()

        if classification.lane == "data":
            ticker = (classification.ticker or "").strip().upper()
            if ticker:
                return DataLane(ticker=ticker)
            logger.warning("Data lane chosen without a ticker; using definition lane")
        return DefinitionLane()
