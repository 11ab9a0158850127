"""
venue-norm: unified schema for Bittrex-family exchange REST payloads.

Converts venue-specific market and account data (markets, tickers, order
books, trades, orders, deposits and withdrawals) into stable,
venue-agnostic records.

Architecture:
    Venue REST → Gateway → NormalizationEngine → Normalizers → Unified records

Key Components:
    - core: Unified record types and errors
    - config: Per-venue field tables, mapping tables and precision
    - normalizers: One pure normalizer per record type, resolver, filters
    - gateways: Public REST client
    - utils: Logging and timestamp handling

Usage:
    from venue_norm import NormalizationEngine, VenueConfig

    engine = NormalizationEngine(VenueConfig.for_venue("txbit"))
    engine = engine.load_markets(markets_response)
    orders = engine.closed_orders(orders_response)
"""

__version__ = "0.1.0"

from .core import (
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
    NormalizationError,
    MissingResultError,
    MalformedSymbolError,
    VenueError,
)
from .config import VenueConfig
from .normalizers import MarketCatalog
from .engine import NormalizationEngine
from .utils import setup_logging, get_logger

__all__ = [
    "__version__",
    # Records
    "Side",
    "OrderStatus",
    "TransactionType",
    "TransactionStatus",
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
    # Engine
    "VenueConfig",
    "MarketCatalog",
    "NormalizationEngine",
    # Utils
    "setup_logging",
    "get_logger",
]
