"""
Core module - unified record types and errors.
"""
from .records import (
    Side,
    OrderStatus,
    TransactionType,
    TransactionStatus,
    Fee,
    UnifiedMarket,
    UnifiedCurrency,
    UnifiedBalance,
    UnifiedTicker,
    UnifiedOrderBook,
    UnifiedTrade,
    UnifiedOrder,
    UnifiedTransaction,
)
from .errors import (
    NormalizationError,
    MissingResultError,
    MalformedSymbolError,
    VenueError,
)

__all__ = [
    # Enums
    "Side",
    "OrderStatus",
    "TransactionType",
    "TransactionStatus",
    # Records
    "Fee",
    "UnifiedMarket",
    "UnifiedCurrency",
    "UnifiedBalance",
    "UnifiedTicker",
    "UnifiedOrderBook",
    "UnifiedTrade",
    "UnifiedOrder",
    "UnifiedTransaction",
    # Errors
    "NormalizationError",
    "MissingResultError",
    "MalformedSymbolError",
    "VenueError",
]
