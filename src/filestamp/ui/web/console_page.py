#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from PyQt6.QtWebEngineCore import QWebEnginePage

logger = logging.getLogger("filestamp.ui.web.js")

_LEVELS = {
    QWebEnginePage.JavaScriptConsoleMessageLevel.InfoMessageLevel: logging.INFO,
    QWebEnginePage.JavaScriptConsoleMessageLevel.WarningMessageLevel: logging.WARNING,
    QWebEnginePage.JavaScriptConsoleMessageLevel.ErrorMessageLevel: logging.ERROR,
}


class ConsoleLoggingPage(QWebEnginePage):
    """Redirige les messages console JS vers le logging Python."""

    def javaScriptConsoleMessage(self, level, message, line, source_id):
        logger.log(_LEVELS.get(level, logging.INFO), f"{message} ({source_id}:{line})")
