"""
Domain entities for live market data.
Zero external dependencies; pure Python dataclasses only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StockQuote:
    symbol: str
    price: float
    change: float
    change_percent: str
    volume: int
    latest_trading_day: str

    def to_payload(self) -> dict:
        """Serialize to the camelCase shape handed to the reasoning engine."""
        return {
            "symbol": self.symbol,
            "price": self.price,
            "change": self.change,
            "changePercent": self.change_percent,
            "volume": self.volume,
            "latestTradingDay": self.latest_trading_day,
        }


@dataclass(frozen=True)
class NewsItem:
    title: str
    summary: str
    source: str
    url: str
    time_published: str

    def to_payload(self) -> dict:
        return {
            "title": self.title,
            "summary": self.summary,
            "source": self.source,
            "url": self.url,
            "timePublished": self.time_published,
        }
