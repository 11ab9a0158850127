"""Normalizers for converting venue payloads to the unified schema."""

from .base import BaseNormalizer
from .currency_normalizer import BalanceNormalizer, CurrencyNormalizer
from .filters import (
    filter_by,
    filter_by_currency_since_limit,
    filter_by_since_limit,
)
from .market_normalizer import MarketNormalizer, normalize_active_flag
from .order_book_normalizer import OrderBookNormalizer
from .order_normalizer import OrderNormalizer
from .symbol_map import CurrencyResolver, MarketCatalog, SymbolResolver
from .ticker_normalizer import TickerNormalizer, price_change
from .trade_normalizer import TradeNormalizer
from .transaction_normalizer import TransactionNormalizer, decode_label

__all__ = [
    "BaseNormalizer",
    "MarketNormalizer",
    "CurrencyNormalizer",
    "BalanceNormalizer",
    "TickerNormalizer",
    "OrderBookNormalizer",
    "TradeNormalizer",
    "OrderNormalizer",
    "TransactionNormalizer",
    "CurrencyResolver",
    "SymbolResolver",
    "MarketCatalog",
    "normalize_active_flag",
    "price_change",
    "decode_label",
    "filter_by",
    "filter_by_since_limit",
    "filter_by_currency_since_limit",
]
