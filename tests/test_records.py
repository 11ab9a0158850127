"""
Tests for unified record types.
"""
import pytest

from venue_norm.core import (
    Fee,
    OrderStatus,
    Side,
    UnifiedOrder,
    UnifiedTrade,
)


def make_trade(**overrides) -> UnifiedTrade:
    values = dict(
        id="1",
        timestamp=1404876080080,
        symbol="ETH/BTC",
        side="buy",
        price=0.5,
        amount=2.0,
        cost=1.0,
        raw={"Id": 1},
    )
    values.update(overrides)
    return UnifiedTrade(**values)


class TestUnifiedTrade:
    """Tests for UnifiedTrade dataclass."""

    def test_defaults(self):
        """Order context and fee are unset unless supplied."""
        trade = make_trade()
        assert trade.type == "limit"
        assert trade.order is None
        assert trade.taker_or_maker is None
        assert trade.fee is None

    def test_iso_datetime(self):
        assert make_trade().iso_datetime == "2014-07-09T03:21:20.080Z"
        assert make_trade(timestamp=None).iso_datetime is None

    def test_immutability(self):
        """Records are frozen."""
        trade = make_trade()
        with pytest.raises(AttributeError):
            trade.price = 1.0

    def test_to_dict(self):
        trade = make_trade(fee=Fee(cost=0.1, currency="BTC"))
        data = trade.to_dict()
        assert data["fee"] == {"cost": 0.1, "currency": "BTC"}
        assert data["raw"] == {"Id": 1}
        assert data["symbol"] == "ETH/BTC"


class TestUnifiedOrder:
    """Tests for UnifiedOrder dataclass."""

    def test_equality_includes_raw(self):
        kwargs = dict(
            id="1", timestamp=None, last_trade_timestamp=None, symbol=None,
            side=None, price=None, cost=None, average=None, amount=None,
            filled=None, remaining=None, status=None,
        )
        assert UnifiedOrder(**kwargs, raw={"a": 1}) == UnifiedOrder(**kwargs, raw={"a": 1})
        assert UnifiedOrder(**kwargs, raw={"a": 1}) != UnifiedOrder(**kwargs, raw={"a": 2})


class TestEnums:
    """String values of the enumerations."""

    def test_values(self):
        assert Side.BUY.value == "buy"
        assert OrderStatus.CANCELED.value == "canceled"
        assert OrderStatus("closed") is OrderStatus.CLOSED
