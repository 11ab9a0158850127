"""
Tests for the normalize CLI.
"""
import json
import logging

import pytest

import run_normalize


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch):
    for name in ("VENUE_NORM_CONFIG", "VENUE_NORM_LOG_LEVEL", "VENUE_NORM_BASE_URL"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def write(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return str(path)


class TestCli:
    """Tests for run_normalize.main."""

    def test_orders_with_catalog(self, tmp_path, capsys):
        markets = write(tmp_path, "markets.json", {
            "success": True,
            "message": "",
            "result": [{"MarketName": "LTC_BTC", "MarketCurrency": "LTC", "BaseCurrency": "BTC"}],
        })
        orders = write(tmp_path, "orders.json", {
            "success": True,
            "message": "",
            "result": [{
                "OrderId": "107220258",
                "Exchange": "LTC_BTC",
                "Type": "SELL",
                "Quantity": "2.13040000",
                "QuantityRemaining": "0.00000000",
                "Price": "0.01332672",
                "Status": "OK",
                "Created": "2018-06-30 04:55:50",
            }],
        })

        code = run_normalize.main(["orders", "--input", orders, "--markets", markets])

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output[0]["symbol"] == "LTC/BTC"
        assert output[0]["status"] == "closed"
        assert output[0]["raw"]["OrderId"] == "107220258"

    def test_transactions_filter(self, tmp_path, capsys):
        path = write(tmp_path, "deposits.json", {
            "success": True,
            "message": "",
            "result": [
                {"Id": "1", "Coin": "BTC", "Amount": "1", "Label": "a"},
                {"Id": "2", "Coin": "DOGE", "Amount": "5", "Label": "b"},
            ],
        })
        code = run_normalize.main(["transactions", "--input", path, "--currency", "DOGE"])
        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert [t["id"] for t in output] == ["2"]

    def test_missing_result_exit_code(self, tmp_path, capsys):
        path = write(tmp_path, "book.json", {"success": True, "message": "", "result": None})
        code = run_normalize.main(["orderbook", "--input", path, "--venue", "bittrex"])
        assert code == 1
        assert capsys.readouterr().out == ""

    def test_live_requires_public_kind(self):
        with pytest.raises(SystemExit):
            run_normalize.main(["orders", "--live"])
