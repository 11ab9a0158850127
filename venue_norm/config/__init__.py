"""Venue configuration."""
from .venue_config import (
    VenueConfig,
    MarketFields,
    TickerFields,
    OrderBookFields,
    TradeFields,
    OrderFields,
    TransactionFields,
    CurrencyFields,
    BalanceFields,
    LoggingConfig,
    VENUES_DIR,
)

__all__ = [
    "VenueConfig",
    "MarketFields",
    "TickerFields",
    "OrderBookFields",
    "TradeFields",
    "OrderFields",
    "TransactionFields",
    "CurrencyFields",
    "BalanceFields",
    "LoggingConfig",
    "VENUES_DIR",
]
