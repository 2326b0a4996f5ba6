"""Binds a text field to the currency formatter.

The host forwards three events:

- ``keydown`` before the field text changes: filters keys and toggles the sign
- ``input`` after the host applied the keystroke: reformats and places the caret
- ``blur``: pads decimals and reports the field as touched

The key recorded on ``keydown`` is kept in :attr:`MoneyMaskAdapter.last_key`
and consumed by the following ``input``.
"""
from __future__ import annotations

import re
from decimal import Decimal

from money_mask.binding.control import ChangeCallback, TouchCallback, ValueAccessor
from money_mask.binding.field import TextField
from money_mask.formatting.cursor import apply_edit
from money_mask.formatting.formatter import format_currency, number_to_text, pad_decimal_zeroes, parse_raw_value
from money_mask.models.format import SIGN, EditResult, FormatConfig, KeyInfo, RawEdit
from money_mask.utils.logging import get_logger

logger = get_logger(__name__)

_NUMERAL_KEY = re.compile(r"[,.0-9]")


class MoneyMaskAdapter(ValueAccessor):
    """Currency mask over a single :class:`TextField`."""

    def __init__(self, field: TextField, config: FormatConfig | None = None):
        self._field = field
        self.config = config or FormatConfig()
        self.last_key: KeyInfo | None = None
        self._displayed_text = field.get_text()
        self._on_change: ChangeCallback = lambda value: None
        self._on_touched: TouchCallback = lambda: None

    def attach(self) -> None:
        """Prepare the field: plain text input, right-aligned."""
        self._field.set_attribute("type", "text")
        self._field.add_class("text-end")

    # ── Host events ─────────────────────────────────────────────────────

    def keydown(self, key: str, ctrl: bool = False) -> bool:
        """Record *key*; return ``False`` when the host must suppress its default action."""
        self.last_key = KeyInfo(key=key, ctrl=ctrl)
        allowed = not (
            self.last_key.is_printable
            and not ctrl
            and not _NUMERAL_KEY.fullmatch(key)
            and key != self.config.decimal_mark
        )
        if not allowed:
            logger.debug("keystroke_blocked", key=key)

        if key == SIGN and not self.config.positive_only:
            self._toggle_sign()
        return allowed

    def input(self) -> EditResult:
        """Reformat the field after the host applied a keystroke."""
        text = self._field.get_text()
        start, _ = self._field.get_selection()
        edit = RawEdit(
            previous_displayed_text=self._displayed_text,
            previous_cursor=start,
            new_raw_text=text,
            last_key=self.last_key,
        )
        result = apply_edit(edit, self.config)

        self._on_change(result.numeric_value)
        self._write(result.displayed_text)
        self._set_caret(result.cursor)
        logger.debug(
            "input_formatted",
            previous=edit.previous_displayed_text,
            raw=text,
            displayed=result.displayed_text,
            cursor=result.cursor,
            key=self.last_key.key if self.last_key else None,
        )
        return result

    def blur(self) -> None:
        if self.config.pad_decimal_on_blur:
            text = self._field.get_text()
            padded = pad_decimal_zeroes(text, self.config)
            if padded != text:
                self._on_change(parse_raw_value(padded, self.config))
                self._write(padded)
                logger.debug("decimals_padded", before=text, after=padded)
        self._on_touched()

    # ── Value binding ───────────────────────────────────────────────────

    def set_value(self, value: int | float | Decimal | str | None) -> None:
        text = format_currency(number_to_text(value), self.config).displayed_text
        if self.config.pad_decimal_on_blur:
            text = pad_decimal_zeroes(text, self.config)
        self._write(text)
        logger.debug("value_written", value=str(value), displayed=text)

    def register_change_callback(self, fn: ChangeCallback) -> None:
        self._on_change = fn

    def register_touch_callback(self, fn: TouchCallback) -> None:
        self._on_touched = fn

    def set_disabled(self, disabled: bool) -> None:
        self._field.set_disabled(disabled)

    # ── Internals ───────────────────────────────────────────────────────

    def _toggle_sign(self) -> None:
        text = self._field.get_text()
        start, _ = self._field.get_selection()
        if text.startswith(SIGN):
            toggled, caret = text.replace(SIGN, "", 1), start - 1
        else:
            toggled, caret = SIGN + text, start + 1

        self._on_change(parse_raw_value(toggled, self.config))
        self._write(toggled)
        self._set_caret(caret)
        logger.debug("sign_toggled", before=text, after=toggled)

    def _write(self, text: str) -> None:
        self._field.set_text(text)
        self._displayed_text = text

    def _set_caret(self, position: int) -> None:
        position = max(0, min(position, len(self._field.get_text())))
        self._field.set_selection(position)
