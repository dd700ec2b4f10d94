"""Tests for console logging."""

import pytest
from c8vm.logging import ConsoleLogger, get_logger, set_log_level


def test_level_filtering(capsys):
    logger = ConsoleLogger("test", log_level="INFO", use_colors=False, show_timestamps=False)

    logger.debug("hidden")
    logger.info("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "[    INFO][test] shown" in err


def test_shared_loggers_follow_global_level():
    logger = get_logger("c8vm.test")
    assert get_logger("c8vm.test") is logger
    try:
        set_log_level("debug")
        assert logger.is_enabled_for("DEBUG")
        assert get_logger("c8vm.test.late").is_enabled_for("DEBUG")
    finally:
        set_log_level("WARNING")
    assert not logger.is_enabled_for("INFO")


def test_unknown_level():
    with pytest.raises(ValueError):
        set_log_level("LOUD")
    with pytest.raises(ValueError):
        ConsoleLogger("x").set_level("LOUD")
