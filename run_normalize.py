#!/usr/bin/env python
"""
Normalize CLI

Usage:
    python run_normalize.py orders --input orders.json               # Saved response file
    python run_normalize.py orders --input o.json --markets m.json   # Resolve ids via catalog
    python run_normalize.py tickers --live                           # Fetch from public API
    python run_normalize.py orderbook --live --market ETH/BTC --depth 20
    python run_normalize.py markets --venue bittrex --input m.json
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from venue_norm import NormalizationEngine, NormalizationError, VenueConfig
from venue_norm.gateways import TxbitPublicClient
from venue_norm.utils import get_logger, setup_logging

logger = get_logger("venue_norm.cli")

KINDS = (
    "markets",
    "currencies",
    "balances",
    "ticker",
    "tickers",
    "orderbook",
    "trades",
    "orders",
    "transactions",
)

# Kinds that can be fetched from the public API
LIVE_KINDS = ("markets", "currencies", "ticker", "tickers", "orderbook", "trades")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Normalize venue REST responses")

    parser.add_argument("kind", choices=KINDS, help="Record type in the response")

    # Source
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Raw response JSON file (default: stdin)",
    )
    parser.add_argument(
        "--live",
        action="store_true",
        help="Fetch the response from the venue's public API instead",
    )
    parser.add_argument(
        "--market",
        type=str,
        default=None,
        help="Venue market id for ticker/orderbook/trades (e.g. ETH/BTC)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="Order book depth for --live orderbook",
    )

    # Catalog
    parser.add_argument(
        "--markets",
        type=str,
        default=None,
        help="Raw markets response used to resolve market ids",
    )

    # Filters
    parser.add_argument("--since", type=int, default=None, help="Only records at/after this epoch ms")
    parser.add_argument("--limit", type=int, default=None, help="Return at most this many records")
    parser.add_argument("--status", type=str, default=None, help="Order status filter (open/closed/canceled)")
    parser.add_argument("--currency", type=str, default=None, help="Transaction currency filter")

    # Config
    parser.add_argument(
        "--venue",
        type=str,
        default=None,
        help="Bundled venue config name (default: txbit)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Venue config YAML path (overrides --venue)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: from config)",
    )

    return parser.parse_args(argv)


def load_config(args) -> VenueConfig:
    if args.config:
        return VenueConfig.load(Path(args.config))
    if args.venue:
        return VenueConfig.for_venue(args.venue)
    return VenueConfig.load()


def read_json(path: str | None):
    if path is None:
        return json.load(sys.stdin)
    with open(path) as f:
        return json.load(f)


def check_live_args(args) -> None:
    if args.kind not in LIVE_KINDS:
        raise SystemExit(f"{args.kind} needs an authenticated endpoint; use --input")
    if args.kind in ("ticker", "orderbook", "trades") and not args.market:
        raise SystemExit(f"{args.kind} needs --market")


async def fetch_live(config: VenueConfig, args) -> dict:
    async with TxbitPublicClient(config) as client:
        if args.kind == "markets":
            return await client.fetch_markets()
        if args.kind == "currencies":
            return await client.fetch_currencies()
        if args.kind == "ticker":
            return await client.fetch_ticker(args.market)
        if args.kind == "tickers":
            return await client.fetch_tickers()
        if args.kind == "orderbook":
            return await client.fetch_order_book(args.market, args.depth)
        return await client.fetch_trades(args.market)


def normalize(engine: NormalizationEngine, kind: str, response, args) -> list[dict] | dict:
    market = None
    if args.market:
        market = engine.catalog.by_id(args.market)

    if kind == "markets":
        records = engine.markets(response)
    elif kind == "currencies":
        records = engine.currencies(response)
    elif kind == "balances":
        records = engine.balances(response)
    elif kind == "ticker":
        return engine.ticker_response(response, market).to_dict()
    elif kind == "tickers":
        records = engine.tickers(response)
    elif kind == "orderbook":
        symbol = market.symbol if market else None
        if symbol is None and args.market:
            symbol = engine.symbols.parse_market_id(args.market)
        return engine.order_book(response, symbol=symbol).to_dict()
    elif kind == "trades":
        records = engine.trades(response, market, since=args.since, limit=args.limit)
    elif kind == "orders":
        records = engine.orders(response, market, since=args.since, limit=args.limit, status=args.status)
    else:
        records = engine.transactions(response, code=args.currency, since=args.since, limit=args.limit)
    return [r.to_dict() for r in records]


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.live:
        check_live_args(args)
    load_dotenv()

    config = load_config(args)
    log = config.logging
    setup_logging(
        level=args.log_level or log.level,
        log_format=log.format,
        date_format=log.date_format,
        file_path=log.file_path,
        max_file_size_mb=log.max_file_size_mb,
        backup_count=log.backup_count,
        json_format=log.json_format,
    )

    for error in config.validate():
        if error.startswith("WARNING"):
            logger.warning(error)
        else:
            logger.error(f"Config error: {error}")
            return 2

    engine = NormalizationEngine(config)
    try:
        if args.markets:
            engine = engine.load_markets(read_json(args.markets))
        response = asyncio.run(fetch_live(config, args)) if args.live else read_json(args.input)
        output = normalize(engine, args.kind, response, args)
    except NormalizationError as e:
        logger.error(f"Normalization failed: {e}")
        return 1

    json.dump(output, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
