"""
Unit tests for QueryRouter lane selection and its parse-failure fallback.
"""

import asyncio

import pytest
from langchain_core.messages import AIMessage, SystemMessage

from src.application.agent.router import QueryRouter
from src.domain.entities.route import DataLane, DefinitionLane
from tests.fakes import FakeLanguageModel


def _route(reply: str, query: str = "question"):
    llm = FakeLanguageModel([AIMessage(content=reply)])
    decision = asyncio.run(QueryRouter(llm).route(query))
    return decision, llm


def test_data_lane_with_ticker():
    decision, llm = _route('{"lane": "data", "ticker": "aapl"}', "What's Apple trading at?")
    assert decision == DataLane(ticker="AAPL")
    assert len(llm.calls) == 1
    system = llm.calls[0][0]
    assert isinstance(system, SystemMessage)
    assert "lane" in system.content


def test_definition_lane():
    decision, _ = _route('{"lane": "definition", "ticker": null}', "What is a bull market?")
    assert decision == DefinitionLane()


def test_fenced_json_is_accepted():
    decision, _ = _route('```json\n{"lane": "data", "ticker": "MSFT"}\n```')
    assert decision == DataLane(ticker="MSFT")


@pytest.mark.parametrize(
    "reply",
    [
        "I think this is about Apple stock.",
        '{"lane": "weather"}',
        '{"ticker": "AAPL"}',
        "",
    ],
)
def test_unparsable_output_falls_back_to_definition_lane(reply):
    decision, llm = _route(reply)
    assert decision == DefinitionLane()
    assert len(llm.calls) == 1


def test_data_lane_without_ticker_falls_back():
    decision, _ = _route('{"lane": "data", "ticker": "  "}')
    assert decision == DefinitionLane()
