"""
Venue configuration for venue-norm.

One VenueConfig describes everything venue-specific the engine needs:
field-name tables per record type, the status and side mapping tables,
the price precision table and the market id separator. Venues differ by
data, never by subclass.

Defaults describe Txbit.io. Other venues of the same API family are
expressed as YAML overrides under config/venues/.
Environment variables take precedence over file config.
"""
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Optional
import os
import yaml

from ..core.records import OrderStatus, Side
from ..utils.logging import get_logger

logger = get_logger(__name__)

VENUES_DIR = Path(__file__).parent / "venues"

MARKET_ID_ORDERS = ("base_quote", "quote_base")


@dataclass
class MarketFields:
    """Field names of a market-listing entry."""
    id: str = "MarketName"
    base_id: str = "MarketCurrency"
    quote_id: str = "BaseCurrency"     # The venue calls the quote side "base"
    active: str = "IsActive"
    min_amount: str = "MinTradeSize"


@dataclass
class TickerFields:
    """Field names of a market summary entry."""
    market_id: str = "MarketName"
    timestamp: str = "TimeStamp"
    high: str = "High"
    low: str = "Low"
    bid: str = "Bid"
    ask: str = "Ask"
    last: str = "Last"
    previous_close: str = "PrevDay"
    base_volume: str = "Volume"
    quote_volume: str = "BaseVolume"


@dataclass
class OrderBookFields:
    """Side arrays and level fields of an order book result."""
    bids: str = "buy"
    asks: str = "sell"
    price: str = "Rate"
    amount: str = "Quantity"


@dataclass
class TradeFields:
    """Field names of a market or account trade entry."""
    id: tuple[str, ...] = ("Id", "ID")
    timestamp: str = "TimeStamp"
    side: str = "OrderType"
    price: str = "Price"
    amount: str = "Quantity"


@dataclass
class OrderFields:
    """Field names of an order entry. Tuples are checked in order."""
    id: tuple[str, ...] = ("OrderUuid", "OrderId")
    side: tuple[str, ...] = ("OrderType", "Type")
    market_id: str = "Exchange"
    opened: str = "Opened"
    closed: str = "Closed"
    cancel_initiated: str = "CancelInitiated"
    status: str = "Status"
    created: str = "Created"
    timestamp: str = "TimeStamp"
    commission: tuple[str, ...] = ("Commission", "CommissionPaid")
    price: str = "Price"
    cost: Optional[str] = None         # Not published by Txbit
    amount: str = "Quantity"
    remaining: str = "QuantityRemaining"
    average: str = "PricePerUnit"


@dataclass
class TransactionFields:
    """Field names of a deposit or withdrawal history entry."""
    id: str = "Id"
    currency: str = "Coin"
    amount: str = "Amount"
    timestamp: str = "TimeStamp"
    label: str = "Label"
    txid: str = "TransactionId"


@dataclass
class CurrencyFields:
    """Field names of a currency listing entry."""
    id: str = "Currency"
    name: str = "CurrencyLong"
    active: str = "IsActive"
    fee: str = "TxFee"


@dataclass
class BalanceFields:
    """Field names of an account balance entry."""
    currency: str = "Currency"
    total: str = "Balance"
    free: str = "Available"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: Optional[str] = None
    date_format: Optional[str] = None
    file_path: Optional[str] = None
    max_file_size_mb: int = 20
    backup_count: int = 3
    json_format: bool = False


def _default_price_precision_by_code() -> dict[str, int]:
    return {"USD": 3, "BTC": 8}


def _default_order_status_map() -> dict[str, str]:
    return {
        "OK": OrderStatus.CLOSED.value,
        "OPEN": OrderStatus.OPEN.value,
        "CANCELED": OrderStatus.CANCELED.value,
    }


def _default_order_side_map() -> dict[str, str]:
    return {
        "BUY": Side.BUY.value,
        "LIMIT_BUY": Side.BUY.value,
        "SELL": Side.SELL.value,
        "LIMIT_SELL": Side.SELL.value,
    }


def _default_trade_side_map() -> dict[str, str]:
    return {"BUY": Side.BUY.value, "SELL": Side.SELL.value}


def _default_currency_aliases() -> dict[str, str]:
    return {
        "XBT": "BTC",
        "BCC": "BCH",
        "DRK": "DASH",
        "BCHABC": "BCH",
        "BCHSV": "BSV",
    }


# YAML section name -> VenueConfig attribute holding a nested dataclass
_SECTIONS = (
    "markets",
    "tickers",
    "order_book",
    "trades",
    "orders",
    "transactions",
    "currencies",
    "balances",
    "logging",
)


@dataclass
class VenueConfig:
    """Top-level venue configuration."""
    venue_id: str = "txbit"
    base_url: str = "https://api.txbit.io/api"
    request_timeout_sec: float = 10.0

    # Symbols
    symbol_separator: str = "/"            # Unified symbols: BASE/QUOTE
    market_id_separator: str = "/"         # Venue market ids, e.g. "ETH/BTC"
    market_id_order: str = "base_quote"    # or "quote_base" ("BTC-ETH" == ETH/BTC)
    currency_aliases: dict[str, str] = field(default_factory=_default_currency_aliases)

    # Precision
    amount_precision: int = 8
    default_price_precision: int = 8
    price_precision_by_code: dict[str, int] = field(default_factory=_default_price_precision_by_code)
    currency_precision: int = 8

    # Timestamps are venue-local strings without an offset
    timestamp_offset: str = "+00:00"

    # Orders
    parse_order_status: bool = True
    order_status_map: dict[str, str] = field(default_factory=_default_order_status_map)
    order_side_map: dict[str, str] = field(default_factory=_default_order_side_map)
    trade_side_map: dict[str, str] = field(default_factory=_default_trade_side_map)

    # Transactions
    canceled_txid_marker: str = "CANCELED"
    label_separator: str = ";"

    # Response envelope
    result_key: str = "result"
    success_key: str = "success"
    message_key: str = "message"

    markets: MarketFields = field(default_factory=MarketFields)
    tickers: TickerFields = field(default_factory=TickerFields)
    order_book: OrderBookFields = field(default_factory=OrderBookFields)
    trades: TradeFields = field(default_factory=TradeFields)
    orders: OrderFields = field(default_factory=OrderFields)
    transactions: TransactionFields = field(default_factory=TransactionFields)
    currencies: CurrencyFields = field(default_factory=CurrencyFields)
    balances: BalanceFields = field(default_factory=BalanceFields)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def price_precision_for(self, quote: str | None) -> int:
        """Price precision for a market quoted in `quote`."""
        return self.price_precision_by_code.get(quote, self.default_price_precision)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "VenueConfig":
        """
        Load configuration from file and environment variables.
        Environment variables override file config.
        """
        config = cls()

        if config_path is None and os.getenv("VENUE_NORM_CONFIG"):
            config_path = Path(os.environ["VENUE_NORM_CONFIG"])

        if config_path is not None:
            config_path = Path(config_path)
            with open(config_path) as f:
                file_config = yaml.safe_load(f)
            config = cls._merge_dict(config, file_config)
            logger.debug(f"Loaded venue config {config.venue_id} from {config_path}")

        config.base_url = os.getenv("VENUE_NORM_BASE_URL", config.base_url)
        config.logging.level = os.getenv("VENUE_NORM_LOG_LEVEL", config.logging.level)

        return config

    @classmethod
    def for_venue(cls, name: str) -> "VenueConfig":
        """Load one of the bundled venue files, e.g. "txbit"."""
        return cls.load(VENUES_DIR / f"{name}.yaml")

    @classmethod
    def _merge_dict(cls, config: "VenueConfig", data: dict) -> "VenueConfig":
        """Merge dictionary into config object."""
        if not data:
            return config

        for section in _SECTIONS:
            if section not in data:
                continue
            target = getattr(config, section)
            for k, v in (data[section] or {}).items():
                if hasattr(target, k):
                    setattr(target, k, _coerce(getattr(target, k), v))
                else:
                    logger.warning(f"Ignoring unknown key {section}.{k}")

        # Top-level settings
        for f in fields(config):
            if f.name in _SECTIONS or f.name not in data:
                continue
            current = getattr(config, f.name)
            if isinstance(current, dict):
                # Tables are replaced, not merged
                setattr(config, f.name, dict(data[f.name] or {}))
            else:
                setattr(config, f.name, _coerce(current, data[f.name]))

        for key in data:
            if not hasattr(config, key):
                logger.warning(f"Ignoring unknown key {key}")

        return config

    def validate(self) -> list[str]:
        """
        Validate configuration. Returns list of error messages.
        Empty list means config is valid.
        """
        errors = []

        if not self.venue_id:
            errors.append("venue_id not set")
        if not self.symbol_separator:
            errors.append("symbol_separator must not be empty")
        if not self.market_id_separator:
            errors.append("market_id_separator must not be empty")
        if self.market_id_order not in MARKET_ID_ORDERS:
            errors.append(
                f"market_id_order must be one of {MARKET_ID_ORDERS}, got {self.market_id_order!r}"
            )
        if not self.label_separator:
            errors.append("label_separator must not be empty")

        # Precision
        if self.amount_precision < 0:
            errors.append("amount_precision must not be negative")
        if self.default_price_precision < 0:
            errors.append("default_price_precision must not be negative")
        for code, precision in self.price_precision_by_code.items():
            if not isinstance(precision, int) or precision < 0:
                errors.append(f"Invalid price precision for {code}: {precision!r}")

        # Mapping tables
        for raw, status in self.order_status_map.items():
            if status not in {s.value for s in OrderStatus}:
                errors.append(f"WARNING: status {raw} maps to non-standard {status!r}")
        for name in ("order_side_map", "trade_side_map"):
            for raw, side in getattr(self, name).items():
                if side not in {s.value for s in Side}:
                    errors.append(f"{name}: {raw} maps to {side!r}, expected buy or sell")

        if not self.orders.commission:
            errors.append("orders.commission needs at least one field name")

        return errors


def _coerce(current, value):
    """Match YAML values to the type of the default they replace."""
    if isinstance(current, tuple) and isinstance(value, (list, tuple)):
        return tuple(value)
    if isinstance(current, tuple) and isinstance(value, str):
        return (value,)
    if isinstance(current, float) and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if is_dataclass(current):
        raise ValueError(f"Cannot replace section {type(current).__name__} with {value!r}")
    return value
