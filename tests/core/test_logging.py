"""Tests for noted.core.utils.logging."""

import pytest
from loguru import logger

from noted.core.utils.logging import level_for_verbosity, setup_logging


@pytest.mark.parametrize(
    "verbosity,level",
    [(0, "WARNING"), (1, "INFO"), (2, "DEBUG"), (3, "TRACE"), (7, "TRACE")],
)
def test_level_for_verbosity(verbosity, level):
    assert level_for_verbosity(verbosity) == level


class TestSetupLogging:
    def teardown_method(self):
        logger.remove()

    def test_messages_below_level_are_dropped(self, capsys):
        setup_logging(level="INFO")
        logger.debug("hidden detail")
        logger.info("visible detail")

        err = capsys.readouterr().err
        assert "[INFO] visible detail" in err
        assert "hidden detail" not in err

    def test_default_level_is_warning(self, capsys):
        setup_logging()
        logger.info("not shown")
        logger.warning("shown")

        err = capsys.readouterr().err
        assert "not shown" not in err
        assert "[WARNING] shown" in err
