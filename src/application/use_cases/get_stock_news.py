"""
Use-case: retrieve the latest news headlines for a given ticker symbol.
Depends only on Domain ports and entities; no infrastructure imports.
"""

from src.domain.entities.stock_quote import NewsItem
from src.domain.ports.stock_data_port import IStockDataProvider


class GetStockNewsUseCase:
    MAX_ITEMS: int = 3

    def __init__(self, provider: IStockDataProvider) -> None:
        self._provider = provider

    async def execute(self, symbol: str) -> list[NewsItem]:
        """Fetch at most MAX_ITEMS news items for *symbol*.

        Raises:
            ValueError: if *symbol* is blank.
            MarketDataNotFoundError: if the provider has no news.
        """
        if not symbol or not symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        items = await self._provider.get_news(symbol.upper().strip(), limit=self.MAX_ITEMS)
        return items[: self.MAX_ITEMS]
