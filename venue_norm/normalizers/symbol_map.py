"""
Symbol and currency mapping between the venue and the unified schema.

Venue currency ids map to unified currency codes; venue market ids map
to unified "BASE/QUOTE" symbols, through the loaded market catalog when
possible and by splitting the composite id otherwise.
"""
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from ..config.venue_config import VenueConfig
from ..core.errors import MalformedSymbolError
from ..core.records import UnifiedCurrency, UnifiedMarket
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MarketCatalog:
    """
    Read-only view of a loaded market list.

    May be empty or stale; resolution then falls back to splitting ids.
    """
    by_symbol: Mapping[str, UnifiedMarket] = field(default_factory=dict)
    by_venue_id: Mapping[str, UnifiedMarket] = field(default_factory=dict)

    @classmethod
    def from_markets(cls, markets: Iterable[UnifiedMarket]) -> "MarketCatalog":
        by_symbol: dict[str, UnifiedMarket] = {}
        by_venue_id: dict[str, UnifiedMarket] = {}
        for market in markets:
            by_symbol[market.symbol] = market
            by_venue_id[market.venue_id] = market
        return cls(by_symbol=by_symbol, by_venue_id=by_venue_id)

    def __len__(self) -> int:
        return len(self.by_venue_id)

    def market(self, symbol: str) -> UnifiedMarket | None:
        """Lookup by unified symbol."""
        return self.by_symbol.get(symbol)

    def by_id(self, market_id: str) -> UnifiedMarket | None:
        """Lookup by venue market id."""
        return self.by_venue_id.get(market_id)


class CurrencyResolver:
    """Maps venue currency ids to unified currency codes."""

    def __init__(
        self,
        aliases: Mapping[str, str] | None = None,
        currencies_by_id: Mapping[str, UnifiedCurrency] | None = None,
    ):
        self._aliases = dict(aliases or {})
        self._by_id = dict(currencies_by_id or {})

    def resolve(self, venue_code: str | None, currency: UnifiedCurrency | None = None) -> str | None:
        """
        Convert a venue currency id to a unified code.

        Unknown ids pass through uppercased, after alias substitution.
        """
        if venue_code is None:
            return currency.code if currency is not None else None
        known = self._by_id.get(venue_code)
        if known is not None and known.code:
            return known.code
        code = venue_code.upper()
        return self._aliases.get(code, code)


class SymbolResolver:
    """Maps venue market ids to unified symbols."""

    def __init__(self, config: VenueConfig, currencies: CurrencyResolver):
        self._config = config
        self._currencies = currencies

    @property
    def currencies(self) -> CurrencyResolver:
        return self._currencies

    def join(self, base: str, quote: str) -> str:
        return f"{base}{self._config.symbol_separator}{quote}"

    def split_symbol(self, symbol: str) -> tuple[str, str] | None:
        """Split a unified symbol into (base, quote), None if it is not one."""
        parts = symbol.split(self._config.symbol_separator)
        if len(parts) != 2:
            return None
        return parts[0], parts[1]

    def parse_market_id(self, market_id: str) -> str:
        """
        Split a composite venue id into a unified symbol.

        Raises MalformedSymbolError unless the id has exactly two parts.
        """
        separator = self._config.market_id_separator
        parts = market_id.split(separator) if isinstance(market_id, str) else []
        if len(parts) != 2 or not all(parts):
            raise MalformedSymbolError(market_id, separator, self._config.venue_id)
        first, second = parts
        if self._config.market_id_order == "quote_base":
            first, second = second, first
        base = self._currencies.resolve(first)
        quote = self._currencies.resolve(second)
        return self.join(base, quote)

    def from_venue_id(
        self,
        market_id: str,
        markets_by_id: Mapping[str, UnifiedMarket],
    ) -> str:
        """Catalog symbol for `market_id`, else the split id."""
        market = markets_by_id.get(market_id)
        if market is not None:
            return market.symbol
        logger.debug(f"Market id {market_id!r} not in catalog, splitting")
        return self.parse_market_id(market_id)
