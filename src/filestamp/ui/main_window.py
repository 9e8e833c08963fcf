#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Fenêtre principale de l'application FileStamp.
Héberge la page web et publie le bridge de commandes sur le QWebChannel.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QUrl
from PyQt6.QtWebChannel import QWebChannel
from PyQt6.QtWebEngineWidgets import QWebEngineView
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QWidget

from filestamp.app.config import APP_NAME, BRIDGE_OBJECT_NAME, WINDOW_HEIGHT, WINDOW_WIDTH

from .bridge import CommandBridge
from .theme.styles import STATUS_BAR_STYLE, STATUS_ERROR_STYLE, STATUS_OK_STYLE, WINDOW_STYLE
from .web.console_page import ConsoleLoggingPage
from .web.page_html import PageHTMLGenerator

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Fenêtre unique: une QWebEngineView + barre de statut."""

    def __init__(self, bridge: Optional[CommandBridge] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(APP_NAME)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.setStyleSheet(WINDOW_STYLE)

        self.bridge = bridge or CommandBridge(parent=self)
        self.bridge.query_finished.connect(self._on_query_finished)

        # WebView + page qui redirige la console JS
        self.web_view = QWebEngineView(self)
        self.page = ConsoleLoggingPage(self.web_view)
        self.web_view.setPage(self.page)

        # Le channel doit être posé avant le chargement du HTML
        self.channel = QWebChannel(self.page)
        self.channel.registerObject(BRIDGE_OBJECT_NAME, self.bridge)
        self.page.setWebChannel(self.channel)

        self.setCentralWidget(self.web_view)

        self.status_label = QLabel("Prêt")
        status_bar = QStatusBar(self)
        status_bar.setStyleSheet(STATUS_BAR_STYLE)
        status_bar.addWidget(self.status_label, 1)
        self.setStatusBar(status_bar)

        self.web_view.setHtml(PageHTMLGenerator.generate(BRIDGE_OBJECT_NAME), QUrl("qrc:///"))
        logger.debug(f"Bridge publié sous le nom '{BRIDGE_OBJECT_NAME}'")

    def _on_query_finished(self, file_path: str, ok: bool, text: str) -> None:
        self.status_label.setStyleSheet(STATUS_OK_STYLE if ok else STATUS_ERROR_STYLE)
        self.status_label.setText(f"{file_path}: {text}")
