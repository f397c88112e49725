"""
Typed accessors for loosely typed API records.

Every accessor returns ``(value, present)``. ``present`` is False both when
the key is missing and when the value cannot be read as the target type.
No accessor raises.
"""

from typing import Any

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_TRUE_STRINGS = ("1", "true")
_FALSE_STRINGS = ("0", "false", "")


def get_int64(record: dict[str, Any], key: str) -> tuple[int, bool]:
    """
    Extract a 64-bit integer (JSON numbers decode as int or float).

    NaN, infinities and values outside the int64 range are not present.
    """
    value = record.get(key)

    if isinstance(value, bool):
        return 0, False
    # Older API versions return some ids as numeric strings
    if not isinstance(value, (int, float, str)):
        return 0, False

    try:
        number = int(value)
    except (ValueError, OverflowError):
        return 0, False

    if not INT64_MIN <= number <= INT64_MAX:
        return 0, False
    return number, True


def get_string(record: dict[str, Any], key: str) -> tuple[str, bool]:
    """Extract a string value."""
    value = record.get(key)
    if isinstance(value, str):
        return value, True
    return "", False


def get_bool(record: dict[str, Any], key: str) -> tuple[bool, bool]:
    """
    Extract a boolean, tolerating numeric and string encodings.

    True for ``true``, ``1`` and ``"1"``/``"true"``; False for ``false``,
    ``0`` and ``"0"``/``"false"``/``""``.
    """
    value = record.get(key)

    if isinstance(value, bool):
        return value, True
    if isinstance(value, (int, float)):
        if value == 1:
            return True, True
        if value == 0:
            return False, True
        return False, False
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True, True
        if lowered in _FALSE_STRINGS:
            return False, True

    return False, False


def get_string_list(record: dict[str, Any], key: str) -> tuple[list[str], bool]:
    """Extract a list of strings, dropping non-string elements."""
    value = record.get(key)
    if not isinstance(value, list):
        return [], False
    return [v for v in value if isinstance(v, str)], True


def get_int64_list(record: dict[str, Any], key: str) -> tuple[list[int], bool]:
    """Extract a list of integers, dropping elements that are not numbers."""
    value = record.get(key)
    if not isinstance(value, list):
        return [], False

    result = []
    for item in value:
        number, ok = get_int64({"v": item}, "v")
        if ok:
            result.append(number)
    return result, True
