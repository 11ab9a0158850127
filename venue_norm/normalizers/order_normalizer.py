"""
Order normalizer.

Order entries carry several overlapping indicators for the same fact
(status, side, timestamps, commission). Each is resolved from a fixed,
ordered list of checks where a later applicable check overrides an
earlier one. The order matters: an order can be closed and then
canceled, and the explicit status string, when published, is the final
word.
"""
from ..core.records import Fee, OrderStatus, UnifiedMarket, UnifiedOrder
from ..utils.logging import get_logger
from .base import BaseNormalizer
from .extract import is_present, safe_float, safe_string, safe_string_n, safe_value

logger = get_logger(__name__)


class OrderNormalizer(BaseNormalizer):
    """Normalizes account order entries."""

    def normalize(self, raw: dict, market: UnifiedMarket | None = None) -> UnifiedOrder:
        fields = self.config.orders

        symbol, market = self.resolve_symbol(raw, market)
        timestamp, last_trade_timestamp = self.resolve_timestamps(raw)

        price = safe_float(raw, fields.price)
        cost = safe_float(raw, fields.cost) if fields.cost else None
        amount = safe_float(raw, fields.amount)
        remaining = safe_float(raw, fields.remaining)

        filled = None
        if amount is not None and remaining is not None:
            filled = amount - remaining
        if cost is None and price is not None and filled is not None:
            cost = price * filled
        if price is None and cost is not None and filled:
            price = cost / filled

        return UnifiedOrder(
            id=safe_string_n(raw, fields.id),
            timestamp=timestamp,
            last_trade_timestamp=last_trade_timestamp,
            symbol=symbol,
            side=self.resolve_side(raw),
            price=price,
            cost=cost,
            average=safe_float(raw, fields.average),
            amount=amount,
            filled=filled,
            remaining=remaining,
            status=self.resolve_status(raw),
            fee=self.resolve_fee(raw, symbol, market),
            raw=raw,
        )

    def resolve_status(self, raw: dict) -> str | None:
        """
        Status from the order's indicators, later rules winning:

        1. opened indicator truthy          -> open
        2. closed indicator truthy          -> closed
        3. cancel-initiated truthy          -> canceled
        4. status string (when enabled)     -> mapped, unmapped passes through
        """
        fields = self.config.orders
        status = None
        if safe_value(raw, fields.opened):
            status = OrderStatus.OPEN.value
        if safe_value(raw, fields.closed):
            status = OrderStatus.CLOSED.value
        if safe_value(raw, fields.cancel_initiated):
            status = OrderStatus.CANCELED.value
        if self.config.parse_order_status and is_present(raw, fields.status):
            raw_status = safe_string(raw, fields.status)
            status = self.config.order_status_map.get(raw_status, raw_status)
        return status

    def resolve_side(self, raw: dict) -> str | None:
        side = safe_string_n(raw, self.config.orders.side)
        if side is None:
            return None
        resolved = self.config.order_side_map.get(side)
        if resolved is None:
            logger.debug(f"Unrecognised order side {side!r}")
        return resolved

    def resolve_symbol(
        self,
        raw: dict,
        market: UnifiedMarket | None,
    ) -> tuple[str | None, UnifiedMarket | None]:
        """Symbol and (if known) market of the order."""
        market_id = safe_string(raw, self.config.orders.market_id)
        if market_id is None:
            return (market.symbol if market is not None else None), market
        known = self.catalog.by_id(market_id)
        if known is not None:
            return known.symbol, known
        return self.symbols.parse_market_id(market_id), market

    def resolve_timestamps(self, raw: dict) -> tuple[int | None, int | None]:
        """
        Creation and last-trade timestamps.

        Created overrides Opened when both are present; the venue's Created
        field is the more precise of the two. Closed overrides the generic
        timestamp for the last trade. An order with no creation time takes
        its last-trade time.
        """
        fields = self.config.orders

        timestamp = None
        if is_present(raw, fields.opened):
            timestamp = self.parse_time(safe_string(raw, fields.opened))
        if is_present(raw, fields.created):
            timestamp = self.parse_time(safe_string(raw, fields.created))

        last_trade_timestamp = None
        if is_present(raw, fields.timestamp):
            last_trade_timestamp = self.parse_time(safe_string(raw, fields.timestamp))
        if is_present(raw, fields.closed):
            last_trade_timestamp = self.parse_time(safe_string(raw, fields.closed))

        if timestamp is None:
            timestamp = last_trade_timestamp
        return timestamp, last_trade_timestamp

    def resolve_fee(
        self,
        raw: dict,
        symbol: str | None,
        market: UnifiedMarket | None,
    ) -> Fee | None:
        """Commission from the first present commission field, in the quote currency."""
        commission_key = next(
            (key for key in self.config.orders.commission if is_present(raw, key)),
            None,
        )
        if commission_key is None:
            return None

        currency = None
        if market is not None:
            currency = market.quote
        elif symbol is not None:
            parts = self.symbols.split_symbol(symbol)
            if parts is not None:
                currency = self.resolve_currency(parts[1])

        return Fee(cost=safe_float(raw, commission_key), currency=currency)
