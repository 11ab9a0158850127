"""
Order book normalizer.

The venue returns bids and asks as two separate arrays of level objects.
Which array is which, and which fields hold price and amount, come from
the venue config; nothing is inferred from the data.
"""
from ..core.errors import MissingResultError
from ..core.records import UnifiedOrderBook
from ..utils.logging import get_logger
from .base import BaseNormalizer
from .extract import safe_float, safe_value

logger = get_logger(__name__)


class OrderBookNormalizer(BaseNormalizer):
    """Normalizes order book results."""

    def normalize(
        self,
        raw: dict | None,
        symbol: str | None = None,
        timestamp: int | None = None,
        bids_key: str | None = None,
        asks_key: str | None = None,
        price_key: str | None = None,
        amount_key: str | None = None,
    ) -> UnifiedOrderBook:
        """
        Build a UnifiedOrderBook from the order book result container.

        Keys default to the venue's order book field table. Raises
        MissingResultError when the container is absent or empty.
        """
        if not raw:
            raise MissingResultError(
                "order book response carried no result",
                venue=self.config.venue_id,
                response=raw,
                context={"symbol": symbol},
            )

        fields = self.config.order_book
        price_key = price_key or fields.price
        amount_key = amount_key or fields.amount

        bids = self._parse_side(safe_value(raw, bids_key or fields.bids, []), price_key, amount_key)
        asks = self._parse_side(safe_value(raw, asks_key or fields.asks, []), price_key, amount_key)

        return UnifiedOrderBook(
            symbol=symbol,
            timestamp=timestamp,
            bids=sorted(bids, key=lambda level: level[0], reverse=True),
            asks=sorted(asks, key=lambda level: level[0]),
            raw=raw,
        )

    def _parse_side(self, levels, price_key: str, amount_key: str) -> list[list[float]]:
        if not isinstance(levels, list):
            logger.debug(f"Order book side is {type(levels).__name__}, expected list")
            return []
        result = []
        for level in levels:
            price = safe_float(level, price_key)
            amount = safe_float(level, amount_key)
            if price is None or amount is None:
                logger.debug(f"Skipping order book level {level!r}")
                continue
            result.append([price, amount])
        return result
