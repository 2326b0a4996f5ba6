"""Shared test fixtures."""
import pytest
from unittest.mock import MagicMock
from money_mask.binding.adapter import MoneyMaskAdapter
from money_mask.binding.field import InMemoryTextField
from money_mask.models.format import FormatConfig


@pytest.fixture
def config():
    """Default configuration: space delimiter, comma mark, two decimals."""
    return FormatConfig()


@pytest.fixture
def field():
    return InMemoryTextField()


@pytest.fixture
def on_change():
    return MagicMock()


@pytest.fixture
def on_touched():
    return MagicMock()


@pytest.fixture
def adapter(field, config, on_change, on_touched):
    mask = MoneyMaskAdapter(field, config)
    mask.register_change_callback(on_change)
    mask.register_touch_callback(on_touched)
    return mask


@pytest.fixture
def press(adapter, field):
    """Drive one keystroke the way a browser does: keydown, default edit, input."""
    def _press(key: str, ctrl: bool = False) -> bool:
        allowed = adapter.keydown(key, ctrl=ctrl)
        if allowed and field.apply_key(key):
            adapter.input()
        return allowed
    return _press


@pytest.fixture
def type_keys(press, field):
    def _type(*keys: str) -> InMemoryTextField:
        for key in keys:
            press(key)
        return field
    return _type
