"""Parsing of user-entered numbers (pt-BR and en formats)."""

from __future__ import annotations
import math
import re
from typing import Any, Optional

_CURRENCY_RE = re.compile(r"^(r\$|\$)\s*", re.IGNORECASE)
# Digits and separators only; float() alone would take "1_000" or "1e3"
_NUMBER_RE = re.compile(r"^[0-9.,]+$")


class InvalidNumber(ValueError):
    """Raised when a non-empty value is not a usable number."""


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _normalize_separators(text: str) -> str:
    """
    Turn '1.234,56', '12,5' or '1,234.56' into a float()-friendly string.

    The last separator is decimal when both kinds appear. A single kind
    repeated more than once groups thousands. A lone dot is always decimal,
    as in "1.000" -> 1.0; write "1.000,00" for one thousand.
    """
    has_dot, has_comma = "." in text, "," in text
    if has_dot and has_comma:
        if text.rfind(",") > text.rfind("."):
            return text.replace(".", "").replace(",", ".")
        return text.replace(",", "")
    if has_comma:
        return text.replace(",", "") if text.count(",") > 1 else text.replace(",", ".")
    if has_dot and text.count(".") > 1:
        return text.replace(".", "")
    return text


def parse_decimal(value: Any) -> Optional[float]:
    """
    Parse a user-entered decimal.

    Args:
        value: str, int or float as typed by the user

    Returns:
        Parsed non-negative float, or None when the value is blank

    Raises:
        InvalidNumber: If the value is not a finite non-negative number
    """
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise InvalidNumber(f"Not a number: {value!r}")

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = _CURRENCY_RE.sub("", str(value).strip()).replace(" ", "")
        if not _NUMBER_RE.match(text.lstrip("-")):
            raise InvalidNumber(f"Not a number: {value!r}")
        try:
            number = float(_normalize_separators(text))
        except ValueError:
            raise InvalidNumber(f"Not a number: {value!r}")

    if not math.isfinite(number):
        raise InvalidNumber(f"Not a finite number: {value!r}")
    if number < 0:
        raise InvalidNumber(f"Negative number: {value!r}")
    return number


def parse_whole_number(value: Any) -> Optional[int]:
    """Parse a non-negative integer; '10', '10.0' and 10.0 are accepted."""
    number = parse_decimal(value)
    if number is None:
        return None
    if not number.is_integer():
        raise InvalidNumber(f"Not a whole number: {value!r}")
    return int(number)
