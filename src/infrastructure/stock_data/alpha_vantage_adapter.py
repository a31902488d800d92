"""
Infrastructure adapter: Alpha Vantage REST API → IStockDataProvider.
All Alpha Vantage specifics (endpoint functions, numbered quote keys, the
news feed layout) are confined here; the rest of the codebase depends only
on IStockDataProvider.
"""

from typing import Optional

import httpx

from src.domain.entities.stock_quote import NewsItem, StockQuote
from src.domain.errors import MarketDataNotFoundError
from src.domain.ports.stock_data_port import IStockDataProvider


class AlphaVantageStockDataProvider(IStockDataProvider):
    """Fetches quotes and news sentiment feeds from Alpha Vantage."""

    BASE_URL = "https://www.alphavantage.co/query"

    def __init__(
        self,
        api_key: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        """
        Args:
            api_key: Alpha Vantage API key.
            client:  Optional shared AsyncClient; one is opened per request otherwise.
            timeout: Per-request timeout in seconds when no client is supplied.
        """
        self._api_key = api_key
        self._client = client
        self._timeout = timeout

    async def get_quote(self, symbol: str) -> StockQuote:
        data = await self._query({"function": "GLOBAL_QUOTE", "symbol": symbol})
        quote = data.get("Global Quote") or {}
        if not quote:
            raise MarketDataNotFoundError(f"No data found for ticker {symbol}")

        return StockQuote(
            symbol=symbol.upper(),
            price=float(quote["05. price"]),
            change=float(quote["09. change"]),
            change_percent=quote["10. change percent"],
            volume=int(quote["06. volume"]),
            latest_trading_day=quote["07. latest trading day"],
        )

    async def get_news(self, symbol: str, limit: int = 3) -> list[NewsItem]:
        data = await self._query({"function": "NEWS_SENTIMENT", "tickers": symbol})
        feed = data.get("feed") or []
        if not feed:
            raise MarketDataNotFoundError(f"No news found for ticker {symbol}")

        return [
            NewsItem(
                title=item.get("title", ""),
                summary=item.get("summary", ""),
                source=item.get("source", ""),
                url=item.get("url", ""),
                time_published=item.get("time_published", ""),
            )
            for item in feed[:limit]
        ]

    async def _query(self, params: dict) -> dict:
        params = {**params, "apikey": self._api_key}
        if self._client is not None:
            response = await self._client.get(self.BASE_URL, params=params)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self.BASE_URL, params=params)
        response.raise_for_status()
        return response.json()
