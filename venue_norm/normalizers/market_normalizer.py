"""
Market listing normalizer.

Converts one entry of the venue's market list into a UnifiedMarket.
Needs no catalog: this is what the catalog is built from.
"""
from ..core.records import UnifiedMarket
from ..utils.logging import get_logger
from .base import BaseNormalizer
from .extract import safe_float, safe_string, safe_value

logger = get_logger(__name__)


def normalize_active_flag(value) -> bool:
    """
    Resolve the venue's active indicator to a bool.

    Some venues of this API family send booleans, others strings:

        True        -> True
        False       -> False
        "true"      -> True   (any non-empty string except "false")
        "false"     -> False  (exact spelling only)
        "" / None   -> False
        other       -> truthiness of the value
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value != "" and value != "false"
    return bool(value)


class MarketNormalizer(BaseNormalizer):
    """Normalizes market listing entries."""

    def normalize(self, raw: dict) -> UnifiedMarket:
        fields = self.config.markets

        venue_id = safe_string(raw, fields.id)
        base_id = safe_string(raw, fields.base_id)
        quote_id = safe_string(raw, fields.quote_id)
        base = self.resolve_currency(base_id)
        quote = self.resolve_currency(quote_id)

        if (base is None or quote is None) and venue_id is not None:
            # Listing without currency fields: take them from the market id
            base, quote = self.symbols.split_symbol(self.symbols.parse_market_id(venue_id))

        symbol = self.symbols.join(base, quote) if base and quote else None
        price_precision = self.config.price_precision_for(quote)

        if not isinstance(safe_value(raw, fields.active), (bool, str, type(None))):
            logger.debug(f"Unexpected {fields.active} value in market {venue_id}")

        return UnifiedMarket(
            venue_id=venue_id,
            symbol=symbol,
            base=base,
            quote=quote,
            venue_base_id=base_id,
            venue_quote_id=quote_id,
            active=normalize_active_flag(safe_value(raw, fields.active)),
            price_precision=price_precision,
            amount_precision=self.config.amount_precision,
            min_amount=safe_float(raw, fields.min_amount),
            min_price=10 ** -price_precision,
            max_amount=None,
            max_price=None,
            raw=raw,
        )
