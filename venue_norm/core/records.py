"""
Unified record types.

Every normalizer emits one of these. Downstream code (trading logic,
portfolio tracking, reporting) depends only on these shapes, never on
venue field names.

Timestamps are Unix epoch milliseconds (UTC). None means the venue did
not supply the value. `raw` is the venue payload exactly as decoded.
"""
from dataclasses import asdict, dataclass, field
from enum import Enum

from ..utils.helpers import iso8601


class Side(str, Enum):
    BUY = "buy"
    SELL = "sell"


class OrderStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    CANCELED = "canceled"


class TransactionType(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class TransactionStatus(str, Enum):
    OK = "ok"
    CANCELED = "canceled"


class _Record:
    """Shared helpers for unified records."""

    __slots__ = ()

    @property
    def iso_datetime(self) -> str | None:
        """ISO-8601 form of `timestamp`, if the record has one."""
        return iso8601(getattr(self, "timestamp", None))

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Fee(_Record):
    cost: float | None
    currency: str | None = None


@dataclass(frozen=True, slots=True)
class UnifiedMarket(_Record):
    """Market descriptor. Built once per catalog refresh."""
    venue_id: str | None
    symbol: str | None              # Always base + "/" + quote
    base: str | None
    quote: str | None
    venue_base_id: str | None
    venue_quote_id: str | None
    active: bool
    price_precision: int            # Decimal places, looked up by quote code
    amount_precision: int
    min_amount: float | None
    min_price: float | None         # 10 ** -price_precision
    max_amount: float | None = None
    max_price: float | None = None
    raw: dict = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class UnifiedCurrency(_Record):
    venue_id: str | None
    code: str | None
    name: str | None
    active: bool
    precision: int
    fee: float | None
    min_withdraw: float | None
    raw: dict = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class UnifiedBalance(_Record):
    currency: str | None
    free: float | None
    used: float | None
    total: float | None
    raw: dict = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class UnifiedTicker(_Record):
    symbol: str | None
    timestamp: int | None
    high: float | None
    low: float | None
    bid: float | None
    ask: float | None
    open: float | None              # Previous day close
    close: float | None
    last: float | None
    change: float | None
    percentage: float | None
    base_volume: float | None
    quote_volume: float | None
    raw: dict = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class UnifiedOrderBook(_Record):
    symbol: str | None
    timestamp: int | None
    bids: list[list[float]]         # [[price, amount], ...] best first
    asks: list[list[float]]
    raw: dict = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class UnifiedTrade(_Record):
    id: str | None
    timestamp: int | None
    symbol: str | None
    side: str | None
    price: float | None
    amount: float | None
    cost: float | None              # price * amount
    order: str | None = None
    taker_or_maker: str | None = None
    fee: Fee | None = None
    type: str = "limit"
    raw: dict = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class UnifiedOrder(_Record):
    id: str | None
    timestamp: int | None
    last_trade_timestamp: int | None
    symbol: str | None
    side: str | None
    price: float | None
    cost: float | None
    average: float | None
    amount: float | None
    filled: float | None
    remaining: float | None
    status: str | None
    fee: Fee | None = None
    type: str = "limit"
    raw: dict = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class UnifiedTransaction(_Record):
    id: str | None
    timestamp: int | None
    currency: str | None
    amount: float | None
    address: str | None
    tag: str | None
    status: str
    type: str
    txid: str | None
    fee: Fee | None = None
    raw: dict = field(default_factory=dict)
