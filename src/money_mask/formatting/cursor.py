"""Caret placement after the field text has been reformatted.

The key that caused the edit already tells us what kind of edit happened, so
instead of diffing the strings we compare lengths and delimiter counts and
pick the first matching rule. Rule order matters: several rules can match the
same edit (a Delete that also collapses a leading zero, for instance).
"""
from __future__ import annotations

from money_mask.formatting.formatter import decimal_candidates, format_currency
from money_mask.models.format import SIGN, EditResult, FormatConfig, KeyInfo, RawEdit


def _consumed_leading_zero(before: str, after: str) -> bool:
    shift = 1 if after.startswith(SIGN) else 0
    return before[shift:shift + 1] == "0" and after[shift:shift + 1] != "0"


def reconcile_cursor(
    before: str,
    after: str,
    cursor_before: int,
    key: KeyInfo | None,
    config: FormatConfig,
) -> int:
    """Return the caret offset in *after*.

    *before* is the field text right after the keystroke and *cursor_before*
    the caret inside it; *after* is the formatted text that replaces it.
    """
    delimiter = config.group_delimiter
    mark = config.decimal_mark

    delimiter_delta = after.count(delimiter) - before.count(delimiter)
    length_delta = len(after) - len(before)
    at_delimiter = 0 <= cursor_before < len(after) and after[cursor_before] == delimiter

    pressed = key.key if key is not None else None
    if pressed == "Backspace" and at_delimiter:
        # the removed digit collapsed a group; do not hop over the delimiter
        cursor = cursor_before
    elif pressed in decimal_candidates(config) and mark in after:
        cursor = after.index(mark) + 1
    elif (pressed == "Delete" and delimiter_delta < 0) or _consumed_leading_zero(before, after):
        cursor = cursor_before - 1
    elif length_delta < 0:
        cursor = cursor_before + (1 if at_delimiter else delimiter_delta)
    else:
        cursor = cursor_before + length_delta

    return max(0, min(cursor, len(after)))


def apply_edit(edit: RawEdit, config: FormatConfig) -> EditResult:
    """Format the edited text and place the caret in the result."""
    result = format_currency(edit.new_raw_text, config)
    cursor = reconcile_cursor(
        edit.new_raw_text,
        result.displayed_text,
        edit.previous_cursor,
        edit.last_key,
        config,
    )
    return EditResult(
        displayed_text=result.displayed_text,
        numeric_value=result.numeric_value,
        cursor=cursor,
    )
