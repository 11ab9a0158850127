"""
Tests for the normalization engine.
"""
from dataclasses import replace

import pytest

from venue_norm import (
    MarketCatalog,
    MissingResultError,
    MalformedSymbolError,
    NormalizationEngine,
    VenueConfig,
    VenueError,
)


def envelope(result, success=True, message=""):
    return {"success": success, "message": message, "result": result}


MARKETS = envelope([
    {
        "MarketCurrency": "ETH",
        "BaseCurrency": "BTC",
        "MinTradeSize": 0.001,
        "MarketName": "ETH/BTC",
        "IsActive": True,
    },
    {
        "MarketCurrency": "LTC",
        "BaseCurrency": "BTC",
        "MinTradeSize": 0.01,
        "MarketName": "LTC_BTC",
        "IsActive": "false",
    },
    {
        "MarketCurrency": "BTC",
        "BaseCurrency": "USD",
        "MinTradeSize": 0.0001,
        "MarketName": "BTC/USD",
    },
])

ORDERS = envelope([
    {
        "OrderId": "1",
        "Exchange": "LTC_BTC",
        "Type": "SELL",
        "Quantity": "2.13040000",
        "QuantityRemaining": "0.00000000",
        "Price": "0.01332672",
        "Status": "OK",
        "Created": "2018-06-30 04:55:50",
    },
    {
        "OrderId": "2",
        "Exchange": "ETH/BTC",
        "Type": "BUY",
        "Quantity": "1.0",
        "QuantityRemaining": "1.0",
        "Price": "0.02",
        "Status": "OPEN",
        "Created": "2018-07-01 10:00:00",
    },
    {
        "OrderId": "3",
        "Exchange": "ETH/BTC",
        "Type": "BUY",
        "Quantity": "3.0",
        "QuantityRemaining": "0.0",
        "Price": "0.021",
        "Status": "OK",
        "Created": "2018-07-02 10:00:00",
    },
])


class TestEngineMarkets:
    """Tests for market loading."""

    def setup_method(self):
        self.engine = NormalizationEngine()

    def test_markets_keep_order(self):
        markets = self.engine.markets(MARKETS)
        assert [m.symbol for m in markets] == ["ETH/BTC", "LTC/BTC", "BTC/USD"]
        assert [m.active for m in markets] == [True, False, False]
        assert markets[2].price_precision == 3

    def test_load_markets_returns_bound_engine(self):
        loaded = self.engine.load_markets(MARKETS)
        assert len(loaded.catalog) == 3
        assert len(self.engine.catalog) == 0
        assert loaded.catalog.by_id("LTC_BTC").symbol == "LTC/BTC"

    def test_missing_result(self):
        with pytest.raises(MissingResultError) as exc_info:
            self.engine.markets({"success": True, "message": ""})
        assert exc_info.value.venue == "txbit"
        assert exc_info.value.response == {"success": True, "message": ""}

    def test_result_not_a_list(self):
        with pytest.raises(MissingResultError):
            self.engine.markets(envelope({"MarketName": "ETH/BTC"}))

    def test_venue_error(self):
        with pytest.raises(VenueError) as exc_info:
            self.engine.markets(envelope(None, success=False, message="INVALID_MARKET"))
        assert "INVALID_MARKET" in str(exc_info.value)


class TestEngineOrders:
    """Tests for order batches."""

    def setup_method(self):
        self.engine = NormalizationEngine().load_markets(MARKETS)

    def test_orders_resolve_through_catalog(self):
        orders = self.engine.orders(ORDERS)
        assert [o.id for o in orders] == ["1", "2", "3"]
        assert orders[0].symbol == "LTC/BTC"
        assert orders[0].filled == pytest.approx(2.1304)

    def test_stale_catalog_falls_back_to_split(self):
        engine = NormalizationEngine()
        orders = engine.orders(envelope(ORDERS["result"][1:]))
        assert [o.symbol for o in orders] == ["ETH/BTC", "ETH/BTC"]

    def test_stale_catalog_malformed_id_propagates(self):
        """No partial result when an id cannot be resolved."""
        engine = NormalizationEngine()
        with pytest.raises(MalformedSymbolError):
            engine.orders(ORDERS)

    def test_status_filter(self):
        assert [o.id for o in self.engine.closed_orders(ORDERS)] == ["1", "3"]
        assert [o.id for o in self.engine.open_orders(ORDERS)] == ["2"]
        assert self.engine.orders(ORDERS, status="canceled") == []

    def test_since_and_limit(self):
        since = self.engine.order(ORDERS["result"][1]).timestamp
        orders = self.engine.orders(ORDERS, since=since)
        assert [o.id for o in orders] == ["2", "3"]
        assert [o.id for o in self.engine.orders(ORDERS, limit=2)] == ["1", "2"]

    def test_fee_currency_from_catalog_market(self):
        raw = dict(ORDERS["result"][0], Commission="0.0001")
        assert self.engine.order(raw).fee.currency == "BTC"


class TestEngineMarketData:
    """Tests for tickers, order books and trades."""

    def setup_method(self):
        self.engine = NormalizationEngine().load_markets(MARKETS)
        self.market = self.engine.catalog.market("ETH/BTC")

    def test_ticker_response(self):
        response = envelope({"MarketName": "ETH/BTC", "Last": 0.0207051, "PrevDay": 0.02082823})
        ticker = self.engine.ticker_response(response)
        assert ticker.symbol == "ETH/BTC"
        assert ticker.change == pytest.approx(-0.00012313)

    def test_tickers(self):
        response = envelope([
            {"MarketName": "ETH/BTC", "Last": 1},
            {"MarketName": "LTC_BTC", "Last": 2},
        ])
        assert [t.symbol for t in self.engine.tickers(response)] == ["ETH/BTC", "LTC/BTC"]
        assert [t.last for t in self.engine.tickers(response, symbols=["LTC/BTC"])] == [2.0]

    def test_order_book(self):
        response = envelope({
            "buy": [{"Quantity": 1, "Rate": 0.02}],
            "sell": [{"Quantity": 2, "Rate": 0.021}],
        })
        book = self.engine.order_book(response, market=self.market)
        assert book.symbol == "ETH/BTC"
        assert book.bids == [[0.02, 1.0]]
        assert book.asks == [[0.021, 2.0]]

    def test_order_book_missing_result(self):
        response = {"success": True, "message": "", "result": None}
        with pytest.raises(MissingResultError) as exc_info:
            self.engine.order_book(response, symbol="ETH/BTC")
        assert exc_info.value.response is response
        assert exc_info.value.context == {"symbol": "ETH/BTC"}

    def test_order_book_empty_result(self):
        response = envelope({})
        with pytest.raises(MissingResultError):
            self.engine.order_book(response, symbol="ETH/BTC")

    def test_trades(self):
        response = envelope([
            {"Id": 1, "TimeStamp": "2014-07-09T03:21:20.08", "Quantity": 1, "Price": 2, "OrderType": "BUY"},
            {"Id": 2, "TimeStamp": "2014-07-09T03:21:21", "Quantity": 1, "Price": 3, "OrderType": "SELL"},
        ])
        trades = self.engine.trades(response, self.market)
        assert [t.id for t in trades] == ["1", "2"]
        assert [t.side for t in trades] == ["buy", "sell"]
        assert all(t.symbol == "ETH/BTC" for t in trades)
        assert [t.id for t in self.engine.trades(response, limit=1)] == ["1"]

    def test_order_trades_carry_order_id(self):
        response = envelope([{"Id": 1, "Quantity": 1, "Price": 2, "OrderType": "BUY"}])
        trades = self.engine.order_trades(response, "abc-123", self.market)
        assert trades[0].order == "abc-123"

    def test_trades_missing_result(self):
        with pytest.raises(MissingResultError):
            self.engine.trades({"success": True, "message": "", "result": None})


class TestEngineAccount:
    """Tests for transactions, currencies and balances."""

    TRANSACTIONS = envelope([
        {
            "Id": "95820181",
            "Coin": "BTC",
            "Amount": "-0.71300000",
            "TimeStamp": "2017-07-19 17:14:24",
            "Label": "0.71200000;PER9VM2txt4BTdfyWgvv3GziECRdVEPN63;0.00100000",
            "TransactionId": "CANCELED",
        },
        {
            "Id": "96974373",
            "Coin": "DOGE",
            "Amount": "12.05752192",
            "TimeStamp": "2017-09-29 08:10:09",
            "Label": "DQqSjjhzCm3ozT4vAevMUHgv4vsi9LBkoE",
        },
        {
            "Id": "98009125",
            "Coin": "DOGE",
            "Amount": "-483858.64312050",
            "TimeStamp": "2017-11-22 22:29:05",
            "Label": "483848.64312050;DJVJZ58tJC8UeUv9Tqcdtn6uhWobouxFLT;10.00000000",
            "TransactionId": "8563105276cf798385fee7e5a563c620fea639ab132b089ea880d4d1f4309432",
        },
    ])

    def setup_method(self):
        self.engine = NormalizationEngine()

    def test_transactions(self):
        records = self.engine.transactions(self.TRANSACTIONS)
        assert [t.id for t in records] == ["95820181", "96974373", "98009125"]
        assert [t.status for t in records] == ["canceled", "ok", "ok"]
        assert [t.type for t in records] == ["withdrawal", "deposit", "withdrawal"]

    def test_transactions_by_currency(self):
        records = self.engine.transactions(self.TRANSACTIONS, code="DOGE")
        assert [t.id for t in records] == ["96974373", "98009125"]
        assert [t.id for t in self.engine.transactions(self.TRANSACTIONS, code="DOGE", limit=1)] == ["96974373"]

    def test_transactions_since(self):
        since = self.engine.transaction(self.TRANSACTIONS["result"][1]).timestamp
        records = self.engine.transactions(self.TRANSACTIONS, since=since + 1)
        assert [t.id for t in records] == ["98009125"]

    def test_currencies_feed_resolver(self):
        currencies = self.engine.currencies(envelope([
            {"Currency": "XDN", "CurrencyLong": "DigitalNote", "TxFee": 0.1, "IsActive": True},
        ]))
        renamed = [replace(c, code="DIGITALNOTE") for c in currencies]
        engine = self.engine.with_currencies(renamed)
        balance = engine.balance({"Currency": "XDN", "Balance": 10, "Available": 4})
        assert balance.currency == "DIGITALNOTE"
        assert balance.used == 6.0

    def test_balances(self):
        balances = self.engine.balances(envelope([
            {"Currency": "BTC", "Balance": 1.5, "Available": 1.0},
            {"Currency": "DOGE", "Balance": 0, "Available": 0},
        ]))
        assert [b.currency for b in balances] == ["BTC", "DOGE"]
        assert balances[0].used == 0.5


class TestEngineConfig:
    """The engine is parameterized by venue config, not subclassed."""

    def test_bittrex_config(self):
        engine = NormalizationEngine(VenueConfig.for_venue("bittrex"))
        order = engine.order({"Exchange": "BTC-ETH", "Closed": "2018-01-01 00:00:00", "Status": "OPEN"})
        assert order.symbol == "ETH/BTC"
        # Status strings are not trusted on this venue
        assert order.status == "closed"

    def test_with_catalog(self):
        engine = NormalizationEngine()
        markets = engine.markets(MARKETS)
        bound = engine.with_catalog(MarketCatalog.from_markets(markets))
        assert bound.config is engine.config
        assert bound.catalog.market("BTC/USD").price_precision == 3
