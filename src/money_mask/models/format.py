"""Value models shared by the formatter, the cursor reconciler and the adapter.

Everything here is recomputed per keystroke; nothing outlives a single event
handling cycle.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

SIGN = "-"


class FormatConfig(BaseModel):
    """Options controlling how a mask formats its field."""

    model_config = ConfigDict(frozen=True)

    group_delimiter: str = " "
    decimal_mark: str = ","
    positive_only: bool = False
    strip_leading_zeroes: bool = True
    pad_decimal_on_blur: bool = True
    decimal_scale: int = Field(default=2, ge=0)
    # 0 means the integer part is unbounded
    integer_scale: int = Field(default=15, ge=0)

    @model_validator(mode="after")
    def _check_separators(self) -> FormatConfig:
        for name in ("group_delimiter", "decimal_mark"):
            value = getattr(self, name)
            if len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
            if value in "0123456789" or value == SIGN:
                raise ValueError(f"{name} cannot be a digit or the sign, got {value!r}")
        if self.group_delimiter == self.decimal_mark:
            raise ValueError("group_delimiter and decimal_mark must differ")
        return self


class KeyInfo(BaseModel):
    """The last key pressed, as reported by the host's keydown event."""

    key: str
    ctrl: bool = False

    @property
    def is_delete(self) -> bool:
        return self.key == "Delete"

    @property
    def is_backspace(self) -> bool:
        return self.key == "Backspace"

    @property
    def is_printable(self) -> bool:
        return len(self.key) == 1


class RawEdit(BaseModel):
    """A field change observed on ``input``.

    ``new_raw_text`` already contains the keystroke and ``previous_cursor`` is
    the caret inside it, before any formatting is applied.
    ``previous_displayed_text`` is what the mask last wrote to the field; it
    does not affect formatting and is carried for tracing the edit.
    """

    previous_displayed_text: str = ""
    previous_cursor: int = 0
    new_raw_text: str
    last_key: KeyInfo | None = None


class FormattedResult(BaseModel):
    """Output of the formatter."""

    displayed_text: str
    numeric_value: float | None = None


class EditResult(FormattedResult):
    """Formatted text plus the reconciled caret offset."""

    cursor: int = 0
