"""
Market summary normalizer.

Converts one market summary entry into a UnifiedTicker. The venue
publishes the previous day's close rather than an open price, which
becomes `open` and the base for change and percentage.
"""
from ..core.records import UnifiedMarket, UnifiedTicker
from .base import BaseNormalizer
from .extract import safe_float, safe_string


def price_change(last: float | None, previous: float | None) -> tuple[float | None, float | None]:
    """Absolute and percentage change from `previous` to `last`."""
    if last is None or previous is None:
        return None, None
    change = last - previous
    percentage = None
    if previous > 0:
        percentage = change / previous * 100
    return change, percentage


class TickerNormalizer(BaseNormalizer):
    """Normalizes market summary entries."""

    def normalize(self, raw: dict, market: UnifiedMarket | None = None) -> UnifiedTicker:
        fields = self.config.tickers

        symbol = None
        market_id = safe_string(raw, fields.market_id)
        if market_id is not None:
            symbol = self.symbols.from_venue_id(market_id, self.catalog.by_venue_id)
        elif market is not None:
            symbol = market.symbol

        previous = safe_float(raw, fields.previous_close)
        last = safe_float(raw, fields.last)
        change, percentage = price_change(last, previous)

        return UnifiedTicker(
            symbol=symbol,
            timestamp=self.parse_time(safe_string(raw, fields.timestamp)),
            high=safe_float(raw, fields.high),
            low=safe_float(raw, fields.low),
            bid=safe_float(raw, fields.bid),
            ask=safe_float(raw, fields.ask),
            open=previous,
            close=last,
            last=last,
            change=change,
            percentage=percentage,
            base_volume=safe_float(raw, fields.base_volume),
            quote_volume=safe_float(raw, fields.quote_volume),
            raw=raw,
        )
