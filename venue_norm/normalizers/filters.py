"""
Filters over lists of unified records.

All filters keep the input order.
"""
from typing import Any, Sequence, TypeVar

T = TypeVar("T")


def filter_by(records: Sequence[T], field: str, value: Any) -> list[T]:
    """Records whose `field` equals `value`."""
    return [r for r in records if getattr(r, field, None) == value]


def filter_by_since_limit(
    records: Sequence[T],
    since: int | None = None,
    limit: int | None = None,
) -> list[T]:
    """
    Records at or after `since` (epoch ms), at most `limit` of them.

    Records without a timestamp are dropped once `since` is given.
    """
    result = list(records)
    if since is not None:
        result = [
            r for r in result
            if getattr(r, "timestamp", None) is not None and r.timestamp >= since
        ]
    if limit is not None:
        result = result[:limit]
    return result


def filter_by_currency_since_limit(
    records: Sequence[T],
    code: str | None = None,
    since: int | None = None,
    limit: int | None = None,
) -> list[T]:
    result = filter_by(records, "currency", code) if code is not None else list(records)
    return filter_by_since_limit(result, since, limit)
