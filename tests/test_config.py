"""Tests des constantes de configuration."""

import logging

from filestamp.app import config


class TestConfig:

    def test_app_identity(self):
        assert config.APP_NAME == "FileStamp"
        assert config.APP_VERSION
        assert config.ORGANIZATION_NAME

    def test_bridge_and_window(self):
        assert config.BRIDGE_OBJECT_NAME == "backend"
        assert config.WINDOW_WIDTH > 0 and config.WINDOW_HEIGHT > 0

    def test_log_format_is_usable(self):
        record = logging.LogRecord("filestamp.test", logging.INFO, __file__, 1, "message", None, None)
        text = logging.Formatter(config.LOG_FORMAT).format(record)
        assert "filestamp.test" in text and "message" in text

