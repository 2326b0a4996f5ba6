"""Test environment-driven settings."""
import pytest
from pydantic import ValidationError
from money_mask.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GROUP_DELIMITER", "DECIMAL_MARK", "POSITIVE_ONLY", "DECIMAL_SCALE", "INTEGER_SCALE", "LOG_LEVEL"):
        monkeypatch.delenv(f"MONEY_MASK_{name}", raising=False)


class TestSettings:
    def test_defaults(self):
        config = Settings().format_config()
        assert config.group_delimiter == " "
        assert config.decimal_mark == ","
        assert config.decimal_scale == 2

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MONEY_MASK_DECIMAL_SCALE", "3")
        monkeypatch.setenv("MONEY_MASK_DECIMAL_MARK", ".")
        monkeypatch.setenv("MONEY_MASK_POSITIVE_ONLY", "true")
        config = Settings().format_config()
        assert config.decimal_scale == 3
        assert config.decimal_mark == "."
        assert config.positive_only is True

    def test_log_level_not_passed_to_format(self, monkeypatch):
        monkeypatch.setenv("MONEY_MASK_LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert not hasattr(settings.format_config(), "log_level")

    def test_clashing_separators_rejected(self):
        with pytest.raises(ValidationError):
            Settings(group_delimiter=",").format_config()

    def test_negative_scale_rejected(self):
        with pytest.raises(ValidationError):
            Settings(decimal_scale=-2)
