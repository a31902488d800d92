"""
Port (interface) for market-data providers.
Infrastructure adapters (e.g. AlphaVantageStockDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.stock_quote import NewsItem, StockQuote


class IStockDataProvider(ABC):
    @abstractmethod
    async def get_quote(self, symbol: str) -> StockQuote:
        """Return the latest quote for *symbol*.

        Raises:
            MarketDataNotFoundError: if the provider has no quote for *symbol*.
        """
        ...

    @abstractmethod
    async def get_news(self, symbol: str, limit: int = 3) -> list[NewsItem]:
        """Return up to *limit* recent news items for *symbol*.

        Raises:
            MarketDataNotFoundError: if the provider has no news for *symbol*.
        """
        ...
