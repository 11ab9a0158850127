"""
Normalization engine.

Composes one normalizer per record type around a single venue config,
resolver and market catalog. Per-item methods take one raw record;
batch methods take a whole response envelope, unwrap its result and
normalize every entry in order.
"""
from typing import Any, Mapping

from .config.venue_config import VenueConfig
from .core.errors import MissingResultError, VenueError
from .core.records import (
    UnifiedBalance,
    UnifiedCurrency,
    UnifiedMarket,
    UnifiedOrder,
    UnifiedOrderBook,
    UnifiedTicker,
    UnifiedTrade,
    UnifiedTransaction,
)
from .normalizers import (
    BalanceNormalizer,
    CurrencyNormalizer,
    CurrencyResolver,
    MarketCatalog,
    MarketNormalizer,
    OrderBookNormalizer,
    OrderNormalizer,
    SymbolResolver,
    TickerNormalizer,
    TradeNormalizer,
    TransactionNormalizer,
    filter_by,
    filter_by_currency_since_limit,
    filter_by_since_limit,
)
from .utils.logging import get_logger

logger = get_logger(__name__)


class NormalizationEngine:
    """
    Venue-agnostic entry point for all record types.

    The engine never mutates its catalog. Use `with_catalog` or
    `with_currencies` to get an engine bound to a refreshed catalog.
    """

    def __init__(
        self,
        config: VenueConfig | None = None,
        catalog: MarketCatalog | None = None,
        currencies: Mapping[str, UnifiedCurrency] | None = None,
    ):
        self.config = config or VenueConfig()
        self.catalog = catalog if catalog is not None else MarketCatalog()
        self._currencies_by_id = dict(currencies or {})

        resolver = CurrencyResolver(self.config.currency_aliases, self._currencies_by_id)
        self.symbols = SymbolResolver(self.config, resolver)

        args = (self.config, self.symbols, self.catalog)
        self._markets = MarketNormalizer(*args)
        self._currencies = CurrencyNormalizer(*args)
        self._balances = BalanceNormalizer(*args)
        self._tickers = TickerNormalizer(*args)
        self._order_books = OrderBookNormalizer(*args)
        self._trades = TradeNormalizer(*args)
        self._orders = OrderNormalizer(*args)
        self._transactions = TransactionNormalizer(*args)

    @property
    def venue_id(self) -> str:
        return self.config.venue_id

    def with_catalog(self, catalog: MarketCatalog) -> "NormalizationEngine":
        return NormalizationEngine(self.config, catalog, self._currencies_by_id)

    def with_currencies(self, currencies: list[UnifiedCurrency]) -> "NormalizationEngine":
        by_id = {c.venue_id: c for c in currencies if c.venue_id is not None}
        return NormalizationEngine(self.config, self.catalog, by_id)

    def load_markets(self, response: Any) -> "NormalizationEngine":
        """Engine bound to the catalog built from a markets response."""
        markets = self.markets(response)
        logger.info(f"{self.venue_id}: loaded {len(markets)} markets")
        return self.with_catalog(MarketCatalog.from_markets(markets))

    # ------------------------------------------------------------------
    # Response envelope
    # ------------------------------------------------------------------

    def check_response(self, response: Any) -> None:
        """Raise VenueError if the venue flagged the response as failed."""
        if isinstance(response, dict) and response.get(self.config.success_key) is False:
            message = response.get(self.config.message_key) or "request failed"
            raise VenueError(str(message), venue=self.venue_id, context={"response": response})

    def unwrap(self, response: Any, what: str, expect_list: bool = True) -> Any:
        """Result container of a response envelope."""
        self.check_response(response)
        result = None
        if isinstance(response, dict):
            result = response.get(self.config.result_key)
        if result is None:
            raise MissingResultError(
                f"{what} response carried no result", venue=self.venue_id, response=response
            )
        if expect_list and not isinstance(result, list):
            raise MissingResultError(
                f"{what} result is {type(result).__name__}, expected a list",
                venue=self.venue_id,
                response=response,
            )
        return result

    def _normalize_all(self, normalizer, response: Any, what: str, *args: Any) -> list:
        records = normalizer.normalize_many(self.unwrap(response, what), *args)
        logger.debug(f"{self.venue_id}: normalized {len(records)} {what}")
        return records

    # ------------------------------------------------------------------
    # Markets and currencies
    # ------------------------------------------------------------------

    def market(self, raw: dict) -> UnifiedMarket:
        return self._markets.normalize(raw)

    def markets(self, response: Any) -> list[UnifiedMarket]:
        return self._normalize_all(self._markets, response, "markets")

    def currency(self, raw: dict) -> UnifiedCurrency:
        return self._currencies.normalize(raw)

    def currencies(self, response: Any) -> list[UnifiedCurrency]:
        return self._normalize_all(self._currencies, response, "currencies")

    def balance(self, raw: dict) -> UnifiedBalance:
        return self._balances.normalize(raw)

    def balances(self, response: Any) -> list[UnifiedBalance]:
        return self._normalize_all(self._balances, response, "balances")

    # ------------------------------------------------------------------
    # Market data
    # ------------------------------------------------------------------

    def ticker(self, raw: dict, market: UnifiedMarket | None = None) -> UnifiedTicker:
        return self._tickers.normalize(raw, market)

    def ticker_response(self, response: Any, market: UnifiedMarket | None = None) -> UnifiedTicker:
        """Ticker from a single-market summary response."""
        return self.ticker(self.unwrap(response, "ticker", expect_list=False), market)

    def tickers(self, response: Any, symbols: list[str] | None = None) -> list[UnifiedTicker]:
        tickers = self._normalize_all(self._tickers, response, "tickers")
        if symbols is not None:
            wanted = set(symbols)
            tickers = [t for t in tickers if t.symbol in wanted]
        return tickers

    def order_book(
        self,
        response: Any,
        symbol: str | None = None,
        market: UnifiedMarket | None = None,
    ) -> UnifiedOrderBook:
        """Order book from an order book response. A missing result raises."""
        self.check_response(response)
        if symbol is None and market is not None:
            symbol = market.symbol
        result = response.get(self.config.result_key) if isinstance(response, dict) else None
        if not result:
            raise MissingResultError(
                "order book response carried no result",
                venue=self.venue_id,
                response=response,
                context={"symbol": symbol},
            )
        return self._order_books.normalize(result, symbol=symbol)

    def trade(
        self,
        raw: dict,
        market: UnifiedMarket | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> UnifiedTrade:
        return self._trades.normalize(raw, market, context)

    def trades(
        self,
        response: Any,
        market: UnifiedMarket | None = None,
        since: int | None = None,
        limit: int | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> list[UnifiedTrade]:
        trades = self._normalize_all(self._trades, response, "trades", market, context)
        return filter_by_since_limit(trades, since, limit)

    def order_trades(
        self,
        response: Any,
        order_id: str,
        market: UnifiedMarket | None = None,
        since: int | None = None,
        limit: int | None = None,
    ) -> list[UnifiedTrade]:
        """Trades of one order, each tagged with the order id."""
        return self.trades(response, market, since, limit, context={"order": order_id})

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    def order(self, raw: dict, market: UnifiedMarket | None = None) -> UnifiedOrder:
        return self._orders.normalize(raw, market)

    def orders(
        self,
        response: Any,
        market: UnifiedMarket | None = None,
        since: int | None = None,
        limit: int | None = None,
        status: str | None = None,
    ) -> list[UnifiedOrder]:
        orders = self._normalize_all(self._orders, response, "orders", market)
        if status is not None:
            orders = filter_by(orders, "status", status)
        return filter_by_since_limit(orders, since, limit)

    def open_orders(self, response: Any, market: UnifiedMarket | None = None, **kwargs: Any) -> list[UnifiedOrder]:
        return self.orders(response, market, status="open", **kwargs)

    def closed_orders(self, response: Any, market: UnifiedMarket | None = None, **kwargs: Any) -> list[UnifiedOrder]:
        return self.orders(response, market, status="closed", **kwargs)

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def transaction(self, raw: dict, currency: UnifiedCurrency | None = None) -> UnifiedTransaction:
        return self._transactions.normalize(raw, currency)

    def transactions(
        self,
        response: Any,
        code: str | None = None,
        since: int | None = None,
        limit: int | None = None,
        currency: UnifiedCurrency | None = None,
    ) -> list[UnifiedTransaction]:
        """Deposit or withdrawal history, filtered by currency code and time window."""
        records = self._normalize_all(self._transactions, response, "transactions", currency)
        return filter_by_currency_since_limit(records, code, since, limit)
