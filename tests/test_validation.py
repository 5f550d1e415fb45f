import logging

import pytest

from classical_ciphers.config import LOG_LEVEL_ENV, PACKAGE_LOGGER, configure_logging, log_level_from_env
from classical_ciphers.validation import parse_caesar_key, parse_keyword_key


@pytest.mark.parametrize("raw, expected", [("3", 3), (" 25 ", 25), ("1", 1), (7, 7)])
def test_caesar_key_accepted(raw, expected):
    assert parse_caesar_key(raw) == expected


@pytest.mark.parametrize("raw", ["0", "26", "-3", "abc", "3.5", ""])
def test_caesar_key_rejected(raw):
    with pytest.raises(ValueError, match="between 1-25"):
        parse_caesar_key(raw)


def test_keyword_key():
    assert parse_keyword_key("LEMON") == "LEMON"
    assert parse_keyword_key(" playfair example ") == "playfair example"
    with pytest.raises(ValueError):
        parse_keyword_key("")
    with pytest.raises(ValueError):
        parse_keyword_key("   ")
    with pytest.raises(ValueError, match="only letters"):
        parse_keyword_key("abc1")


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert log_level_from_env() == logging.DEBUG
    monkeypatch.setenv(LOG_LEVEL_ENV, "nonsense")
    assert log_level_from_env() == logging.WARNING
    monkeypatch.delenv(LOG_LEVEL_ENV)
    assert log_level_from_env(logging.INFO) == logging.INFO


def test_caesar_key_error_has_no_chained_cause():
    with pytest.raises(ValueError) as excinfo:
        parse_caesar_key("abc")
    assert excinfo.value.__suppress_context__
    assert excinfo.value.__cause__ is None


def test_configure_logging_leaves_matplotlib_quiet(monkeypatch):
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    configure_logging(verbose=True)
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
    assert logging.getLogger().level == logging.WARNING
    assert not logging.getLogger("matplotlib.font_manager").isEnabledFor(logging.DEBUG)
