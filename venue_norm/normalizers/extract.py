"""
Safe field access for loosely structured venue payloads.

None of these raise. A missing key, a record that is not a container,
or a value of the wrong shape all come back as the default.
"""
import math
from typing import Any, Iterable


def safe_value(record: Any, key: Any, default: Any = None) -> Any:
    """Value at `key` in a dict (or index in a list), else `default`."""
    if isinstance(record, dict):
        value = record.get(key)
    elif isinstance(record, (list, tuple)) and isinstance(key, int):
        value = record[key] if -len(record) <= key < len(record) else None
    else:
        return default
    return default if value is None else value


def to_float(value: Any, default: float | None = None) -> float | None:
    """Coerce numbers and numeric strings to float. Bools and NaN are rejected."""
    if value is None or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(result):
        return default
    return result


def safe_float(record: Any, key: Any, default: float | None = None) -> float | None:
    return to_float(safe_value(record, key), default)


def safe_string(record: Any, key: Any, default: str | None = None) -> str | None:
    """String form of the value at `key`. Containers are not strings."""
    value = safe_value(record, key)
    if value is None or isinstance(value, (dict, list, tuple)):
        return default
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def safe_string_n(record: Any, keys: Iterable[Any], default: str | None = None) -> str | None:
    """First present string among `keys`, checked in order."""
    for key in keys:
        value = safe_string(record, key)
        if value is not None:
            return value
    return default


def safe_float_n(record: Any, keys: Iterable[Any], default: float | None = None) -> float | None:
    """First present number among `keys`, checked in order."""
    for key in keys:
        value = safe_float(record, key)
        if value is not None:
            return value
    return default


def is_present(record: Any, key: Any) -> bool:
    """True if `key` exists in `record` with a non-None value."""
    return safe_value(record, key) is not None
