"""Host text field capability."""
from __future__ import annotations

from abc import ABC, abstractmethod


class TextField(ABC):
    """What the mask needs from the host's editable field."""

    @abstractmethod
    def get_text(self) -> str:
        ...

    @abstractmethod
    def set_text(self, text: str) -> None:
        ...

    @abstractmethod
    def get_selection(self) -> tuple[int, int]:
        """Return the selection as ``(start, end)`` offsets."""
        ...

    @abstractmethod
    def set_selection(self, start: int, end: int | None = None) -> None:
        """Select ``start..end``; a missing *end* collapses to a caret."""
        ...

    @abstractmethod
    def set_disabled(self, disabled: bool) -> None:
        ...

    @abstractmethod
    def set_attribute(self, name: str, value: str) -> None:
        ...

    @abstractmethod
    def add_class(self, name: str) -> None:
        ...


class InMemoryTextField(TextField):
    """Headless field, for scripting masks outside a UI toolkit.

    :meth:`apply_key` performs the default editing action a browser would
    apply between ``keydown`` and ``input``.
    """

    def __init__(self, text: str = "", cursor: int | None = None):
        self.text = text
        end = len(text) if cursor is None else cursor
        self.selection = (end, end)
        self.disabled = False
        self.attributes: dict[str, str] = {}
        self.classes: set[str] = set()

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text
        start, end = self.selection
        self.selection = (min(start, len(text)), min(end, len(text)))

    def get_selection(self) -> tuple[int, int]:
        return self.selection

    def set_selection(self, start: int, end: int | None = None) -> None:
        end = start if end is None else end
        self.selection = (start, end)

    def set_disabled(self, disabled: bool) -> None:
        self.disabled = disabled

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def add_class(self, name: str) -> None:
        self.classes.add(name)

    @property
    def cursor(self) -> int:
        return self.selection[0]

    def apply_key(self, key: str) -> bool:
        """Apply *key*'s default edit. Returns ``False`` if the text did not change."""
        start, end = sorted(self.selection)
        if len(key) == 1:
            self.text = self.text[:start] + key + self.text[end:]
            caret = start + 1
        elif key == "Backspace":
            if start == end:
                if start == 0:
                    return False
                start -= 1
            self.text = self.text[:start] + self.text[end:]
            caret = start
        elif key == "Delete":
            if start == end:
                if end >= len(self.text):
                    return False
                end += 1
            self.text = self.text[:start] + self.text[end:]
            caret = start
        else:
            return False
        self.selection = (caret, caret)
        return True
