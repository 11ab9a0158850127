"""
Trade normalizer.

Handles both public market history entries and the per-order trade
history of an account. Neither carries a market id, so the symbol comes
from the market the caller fetched for.
"""
from dataclasses import replace
from typing import Any, Mapping

from ..core.records import Fee, UnifiedMarket, UnifiedTrade
from .base import BaseNormalizer
from .extract import safe_float, safe_string, safe_string_n

# Fields a caller may inject from the context a trade was fetched in
CONTEXT_FIELDS = ("order", "fee", "taker_or_maker")


class TradeNormalizer(BaseNormalizer):
    """Normalizes market and account trade entries."""

    def normalize(
        self,
        raw: dict,
        market: UnifiedMarket | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> UnifiedTrade:
        fields = self.config.trades

        # Case-sensitive: anything else leaves the side unknown
        side = self.config.trade_side_map.get(safe_string(raw, fields.side))

        price = safe_float(raw, fields.price)
        amount = safe_float(raw, fields.amount)
        cost = None
        if price is not None and amount is not None:
            cost = price * amount

        trade = UnifiedTrade(
            id=safe_string_n(raw, fields.id),
            timestamp=self.parse_time(safe_string(raw, fields.timestamp)),
            symbol=market.symbol if market is not None else None,
            side=side,
            price=price,
            amount=amount,
            cost=cost,
            raw=raw,
        )
        if context:
            trade = self.with_context(trade, context)
        return trade

    @staticmethod
    def with_context(trade: UnifiedTrade, context: Mapping[str, Any]) -> UnifiedTrade:
        """Copy of `trade` with order, fee or taker_or_maker filled in."""
        unknown = set(context) - set(CONTEXT_FIELDS)
        if unknown:
            raise ValueError(f"Cannot inject trade fields {sorted(unknown)}")
        updates = dict(context)
        fee = updates.get("fee")
        if isinstance(fee, Mapping):
            updates["fee"] = Fee(cost=fee.get("cost"), currency=fee.get("currency"))
        return replace(trade, **updates)
