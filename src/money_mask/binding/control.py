"""Value-binding protocol between a mask and an external form model."""
from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Callable, Union

ChangeCallback = Callable[[Union[float, None]], None]
TouchCallback = Callable[[], None]


class ValueAccessor(ABC):
    """Abstract base class for anything that exposes a numeric value to a form."""

    @abstractmethod
    def set_value(self, value: int | float | Decimal | str | None) -> None:
        """External write: show *value* in the field without echoing it back."""
        ...

    @abstractmethod
    def register_change_callback(self, fn: ChangeCallback) -> None:
        """Call *fn* with the numeric value whenever the user changes it."""
        ...

    @abstractmethod
    def register_touch_callback(self, fn: TouchCallback) -> None:
        """Call *fn* when the field loses focus."""
        ...

    @abstractmethod
    def set_disabled(self, disabled: bool) -> None:
        ...
