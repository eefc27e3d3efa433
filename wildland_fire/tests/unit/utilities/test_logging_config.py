"""Tests for the console logging setup."""

import logging

from wildland_fire.utilities.logging_config import InfoFilter, configure_logger


class TestConfigureLogger:

    def test_split_handlers(self):
        logger = configure_logger()
        levels = sorted(h.level for h in logger.handlers)
        assert levels == [logging.INFO, logging.WARNING]

    def test_no_duplicate_handlers(self):
        configure_logger()
        logger = configure_logger(logging.DEBUG)
        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG

    def test_info_filter(self):
        f = InfoFilter()
        info = logging.LogRecord("wildland_fire", logging.INFO, __file__, 1, "msg", None, None)
        warning = logging.LogRecord("wildland_fire", logging.WARNING, __file__, 1, "msg", None, None)
        assert f.filter(info)
        assert not f.filter(warning)
