"""Live currency formatting for a single text field.

Turns whatever the user has typed so far into a canonical numeral string:

- ``"1234567"``  → ``"1 234 567"``
- ``"-0012.5"``  → ``"-12,5"``
- ``","``        → ``"0,"``
- ``"12-3"``     → ``"-123"`` (a minus anywhere makes the value negative)

Pure string manipulation; nothing here raises on malformed text.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Union

from money_mask.models.format import SIGN, FormatConfig, FormattedResult

Number = Union[int, float, Decimal]

__all__ = [
    "decimal_candidates",
    "format_currency",
    "group_integer",
    "normalize_input",
    "number_to_text",
    "pad_decimal_zeroes",
    "parse_raw_value",
    "strip_leading_zeroes",
]

_NON_DIGIT = re.compile(r"[^0-9]")
_LEADING_ZEROES = re.compile(r"^(-?)0+(?=[0-9])")
_GROUP_BOUNDARY = re.compile(r"([0-9])(?=(?:[0-9]{3})+$)")


def decimal_candidates(config: FormatConfig) -> set[str]:
    # Either key on the keypad may start the fraction, unless it is the delimiter.
    return {".", ",", config.decimal_mark} - {config.group_delimiter}


def normalize_input(raw_text: str | None, config: FormatConfig) -> str:
    """Reduce *raw_text* to ``-?digits(<decimal_mark>digits)?``.

    The first decimal candidate becomes the decimal mark, every other
    non-digit is dropped, and a minus found anywhere moves to the front
    (or disappears when ``positive_only`` is set).
    """
    text = raw_text or ""
    if text.find(SIGN) > 0:
        text = SIGN + text.replace(SIGN, "")
    negative = text.startswith(SIGN)

    marks = decimal_candidates(config)
    cut = next((i for i, ch in enumerate(text) if ch in marks), -1)
    if cut >= 0:
        body = _NON_DIGIT.sub("", text[:cut]) + config.decimal_mark + _NON_DIGIT.sub("", text[cut + 1:])
    else:
        body = _NON_DIGIT.sub("", text)

    sign = SIGN if negative and not config.positive_only else ""
    return sign + body


def strip_leading_zeroes(text: str) -> str:
    """Collapse leading zeroes that are followed by another digit, keeping the sign."""
    return _LEADING_ZEROES.sub(r"\1", text)


def group_integer(digits: str, delimiter: str) -> str:
    """Insert *delimiter* every three digits from the right."""
    return _GROUP_BOUNDARY.sub(lambda m: m.group(1) + delimiter, digits)


def parse_raw_value(text: str, config: FormatConfig) -> float | None:
    """Parse displayed text back into a number.

    Returns ``None`` for empty text, text without any digit (a lone ``"-"``),
    and integer parts too long to fit a float.
    """
    plain = text.replace(config.group_delimiter, "").replace(config.decimal_mark, ".")
    if not any(ch.isdigit() for ch in plain):
        return None
    try:
        value = float(plain)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def format_currency(raw_text: str | None, config: FormatConfig) -> FormattedResult:
    """Format *raw_text* for display and extract its numeric value."""
    text = normalize_input(raw_text, config)
    if config.strip_leading_zeroes:
        text = strip_leading_zeroes(text)

    part_sign = SIGN if text.startswith(SIGN) else ""
    text = text[len(part_sign):]

    has_mark = config.decimal_mark in text
    part_integer, _, part_decimal = text.partition(config.decimal_mark)
    part_decimal = part_decimal[:config.decimal_scale]

    if config.integer_scale > 0:
        part_integer = part_integer[:config.integer_scale]
    if not part_integer and has_mark:
        part_integer = "0"

    displayed = part_sign + group_integer(part_integer, config.group_delimiter)
    if has_mark and config.decimal_scale > 0:
        displayed += config.decimal_mark + part_decimal

    return FormattedResult(displayed_text=displayed, numeric_value=parse_raw_value(displayed, config))


def pad_decimal_zeroes(text: str, config: FormatConfig) -> str:
    """Pad the fraction of already formatted *text* to ``decimal_scale`` digits.

    ``"1 234,5"`` → ``"1 234,50"``; a lone sign becomes ``"0,00"``.
    """
    if not text or config.decimal_scale == 0:
        return text
    part_integer, _, part_decimal = text.partition(config.decimal_mark)
    if part_integer == SIGN:
        part_integer = "0"
    part_decimal = part_decimal.ljust(config.decimal_scale, "0")[:config.decimal_scale]
    return part_integer + config.decimal_mark + part_decimal


def number_to_text(value: Number | str | None) -> str:
    """Render an externally supplied value in plain positional notation.

    ``1e16`` must not turn into ``"1e+16"``, which the formatter would read
    as the digits ``116``.
    """
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return ""
        return format(Decimal(repr(value)), "f")
    if isinstance(value, Decimal):
        return format(value, "f") if value.is_finite() else ""
    return ""
