"""
Currency listing and account balance normalizers.
"""
from ..core.records import UnifiedBalance, UnifiedCurrency
from .base import BaseNormalizer
from .extract import safe_float, safe_string, safe_value
from .market_normalizer import normalize_active_flag


class CurrencyNormalizer(BaseNormalizer):
    """Normalizes currency listing entries."""

    def normalize(self, raw: dict) -> UnifiedCurrency:
        fields = self.config.currencies
        venue_id = safe_string(raw, fields.id)
        fee = safe_float(raw, fields.fee)
        return UnifiedCurrency(
            venue_id=venue_id,
            code=self.resolve_currency(venue_id),
            name=safe_string(raw, fields.name),
            active=normalize_active_flag(safe_value(raw, fields.active)),
            precision=self.config.currency_precision,
            fee=fee,
            min_withdraw=fee,
            raw=raw,
        )


class BalanceNormalizer(BaseNormalizer):
    """Normalizes account balance entries."""

    def normalize(self, raw: dict) -> UnifiedBalance:
        fields = self.config.balances
        total = safe_float(raw, fields.total)
        free = safe_float(raw, fields.free)
        used = None
        if total is not None and free is not None:
            used = total - free
        return UnifiedBalance(
            currency=self.resolve_currency(safe_string(raw, fields.currency)),
            free=free,
            used=used,
            total=total,
            raw=raw,
        )
