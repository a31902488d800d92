"""
Use-case: retrieve the latest quote for a given ticker symbol.
Depends only on Domain ports and entities; no infrastructure imports.
"""

from src.domain.entities.stock_quote import StockQuote
from src.domain.ports.stock_data_port import IStockDataProvider


class GetStockQuoteUseCase:
    def __init__(self, provider: IStockDataProvider) -> None:
        self._provider = provider

    async def execute(self, symbol: str) -> StockQuote:
        """Fetch the current quote for *symbol* (uppercased).

        Raises:
            ValueError: if *symbol* is blank.
            MarketDataNotFoundError: if the provider has no quote.
            Any exception propagated from the IStockDataProvider on API failure.
        """
        if not symbol or not symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        return await self._provider.get_quote(symbol.upper().strip())
