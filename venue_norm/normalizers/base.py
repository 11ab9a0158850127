"""
Abstract base class for record normalizers.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable

from ..config.venue_config import VenueConfig
from ..utils.helpers import venue_time_to_ms
from .symbol_map import MarketCatalog, SymbolResolver


class BaseNormalizer(ABC):
    """
    Normalizer interface.

    Implementations are pure: the output depends only on the raw record,
    the venue config, the catalog and any context passed in.
    """

    def __init__(
        self,
        config: VenueConfig,
        symbols: SymbolResolver,
        catalog: MarketCatalog | None = None,
    ):
        self.config = config
        self.symbols = symbols
        self.catalog = catalog if catalog is not None else MarketCatalog()

    @abstractmethod
    def normalize(self, raw: dict, *args: Any, **kwargs: Any):
        """Convert one raw venue record to its unified record."""
        pass

    def normalize_many(self, raws: Iterable[dict], *args: Any, **kwargs: Any) -> list:
        """Normalize each record in order. Output position matches input position."""
        return [self.normalize(raw, *args, **kwargs) for raw in raws]

    def parse_time(self, value) -> int | None:
        """Venue-local timestamp string to epoch milliseconds."""
        return venue_time_to_ms(value, self.config.timestamp_offset)

    def resolve_currency(self, venue_code: str | None, currency=None) -> str | None:
        return self.symbols.currencies.resolve(venue_code, currency)
