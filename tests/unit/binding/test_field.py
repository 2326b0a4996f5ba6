"""Test the headless text field."""
from money_mask.binding.field import InMemoryTextField


class TestInMemoryTextField:
    def test_caret_defaults_to_end(self):
        field = InMemoryTextField("123")
        assert field.get_selection() == (3, 3)

    def test_insert_character(self):
        field = InMemoryTextField("13", cursor=1)
        assert field.apply_key("2") is True
        assert field.text == "123"
        assert field.cursor == 2

    def test_insert_replaces_selection(self):
        field = InMemoryTextField("12345")
        field.set_selection(1, 4)
        field.apply_key("0")
        assert field.text == "105"
        assert field.cursor == 2

    def test_backspace(self):
        field = InMemoryTextField("123", cursor=2)
        field.apply_key("Backspace")
        assert field.text == "13"
        assert field.cursor == 1

    def test_backspace_at_start(self):
        field = InMemoryTextField("123", cursor=0)
        assert field.apply_key("Backspace") is False
        assert field.text == "123"

    def test_backspace_selection(self):
        field = InMemoryTextField("12345")
        field.set_selection(4, 1)
        field.apply_key("Backspace")
        assert field.text == "15"
        assert field.cursor == 1

    def test_delete(self):
        field = InMemoryTextField("123", cursor=1)
        field.apply_key("Delete")
        assert field.text == "13"
        assert field.cursor == 1

    def test_delete_at_end(self):
        field = InMemoryTextField("123")
        assert field.apply_key("Delete") is False

    def test_other_keys_ignored(self):
        field = InMemoryTextField("123")
        assert field.apply_key("ArrowLeft") is False
        assert field.text == "123"

    def test_set_text_clamps_selection(self):
        field = InMemoryTextField("12345")
        field.set_text("12")
        assert field.get_selection() == (2, 2)
