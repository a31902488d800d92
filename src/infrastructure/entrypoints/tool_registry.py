"""
Capability wiring: binds each application use-case to a registered capability.

Handlers own the translation from provider errors to ``{"error": ...}``
payloads the reasoning engine can read; the CapabilityRegistry catches
anything that still escapes.
"""

import logging

from src.application.services.capability_registry import CapabilityRegistry
from src.application.use_cases.get_stock_news import GetStockNewsUseCase
from src.application.use_cases.get_stock_quote import GetStockQuoteUseCase
from src.application.use_cases.retrieve_documents import RetrievalGate
from src.domain.entities.capability import CapabilitySpec, ParameterSpec
from src.domain.errors import MarketDataNotFoundError
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger(__name__)

_TICKER = ParameterSpec(
    type="string",
    description="The stock ticker symbol, e.g., AAPL for Apple Inc.",
)

STOCK_DATA_SPEC = CapabilitySpec(
    name="getStockData",
    description="Get current price and other market information for a specific stock by ticker symbol",
    parameters={"ticker": _TICKER},
    required=("ticker",),
)

STOCK_NEWS_SPEC = CapabilitySpec(
    name="getStockNews",
    description="Get the latest news articles for a specific stock by ticker symbol",
    parameters={"ticker": _TICKER},
    required=("ticker",),
)

COMPANY_INFO_SPEC = CapabilitySpec(
    name="searchCompanyInfo",
    description="Search for detailed company information in the knowledge base",
    parameters={
        "query": ParameterSpec(
            type="string", description="The company name or topic to search for"
        )
    },
    required=("query",),
)

GLOSSARY_SPEC = CapabilitySpec(
    name="searchFinancialGlossary",
    description="Look up the definition of a financial term in the glossary",
    parameters={
        "query": ParameterSpec(type="string", description="The financial term to define")
    },
    required=("query",),
)


def create_capability_registry(
    stock_provider: IStockDataProvider,
    company_gate: RetrievalGate,
    glossary_gate: RetrievalGate,
) -> CapabilityRegistry:
    """Build the registry with the four reference capabilities.

    Args:
        stock_provider: IStockDataProvider implementation (e.g. AlphaVantageStockDataProvider).
        company_gate:   RetrievalGate over the company-profile corpus.
        glossary_gate:  RetrievalGate over the financial glossary.
    """
    quote_uc = GetStockQuoteUseCase(stock_provider)
    news_uc = GetStockNewsUseCase(stock_provider)

    async def get_stock_data(ticker: str) -> dict:
        try:
            quote = await quote_uc.execute(ticker)
            return quote.to_payload()
        except MarketDataNotFoundError as exc:
            return {"error": str(exc)}
        except Exception:
            logger.exception("Error fetching stock data for %s", ticker)
            return {"error": f"Failed to get stock data for {ticker}"}

    async def get_stock_news(ticker: str):
        try:
            items = await news_uc.execute(ticker)
            return [item.to_payload() for item in items]
        except MarketDataNotFoundError as exc:
            return {"error": str(exc)}
        except Exception:
            logger.exception("Error fetching news for %s", ticker)
            return {"error": f"Failed to get news for {ticker}"}

    async def search_company_info(query: str) -> dict:
        verdict = await company_gate.gate(query)
        return verdict.to_payload()

    async def search_financial_glossary(query: str) -> dict:
        verdict = await glossary_gate.gate(query)
        return verdict.to_payload()

    registry = CapabilityRegistry()
    registry.register(STOCK_DATA_SPEC, get_stock_data)
    registry.register(STOCK_NEWS_SPEC, get_stock_news)
    registry.register(COMPANY_INFO_SPEC, search_company_info)
    registry.register(GLOSSARY_SPEC, search_financial_glossary)
    return registry
