"""Helpers for values that arrive in document store extended JSON."""

from typing import Any

INTEGER_WRAPPERS = ("$numberInt", "$numberLong")
FLOAT_WRAPPERS = ("$numberDouble", "$numberDecimal")


def unwrap_object_id(value: Any) -> Any:
    """Return the hex string of an ``{"$oid": ...}`` wrapper, or the value unchanged."""
    if isinstance(value, dict) and "$oid" in value:
        return value["$oid"]
    if value is not None and not isinstance(value, (str, dict)):
        # ObjectId instances and plain integers compare by their string form
        return str(value)
    return value


def unwrap_number(value: Any) -> Any:
    """
    Return the number inside a canonical extended JSON number wrapper.

    ``$numberInt`` and ``$numberLong`` become ints, ``$numberDouble`` and
    ``$numberDecimal`` become floats ("NaN" and "Infinity" included).
    Anything else is returned unchanged.
    """
    if not isinstance(value, dict) or len(value) != 1:
        return value
    key, raw = next(iter(value.items()))
    if key in INTEGER_WRAPPERS:
        return int(raw)
    if key in FLOAT_WRAPPERS:
        return float(raw)
    return value


def unwrap_date(value: Any) -> Any:
    """
    Return the payload of a ``{"$date": ...}`` wrapper.

    Canonical extended JSON nests epoch milliseconds one level deeper
    (``{"$date": {"$numberLong": "..."}}``); both forms are accepted.
    """
    if isinstance(value, dict) and "$date" in value:
        return unwrap_number(value["$date"])
    return value
