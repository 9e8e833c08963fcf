from __future__ import annotations

import logging
from typing import Sequence

from PyQt6.QtCore import QCoreApplication, Qt
from PyQt6.QtWidgets import QApplication

from filestamp.app.config import APP_NAME, APP_VERSION, LOG_FORMAT, LOG_LEVEL, ORGANIZATION_NAME

logger = logging.getLogger(__name__)


def configure_logging(level: int = LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def run(argv: Sequence[str]) -> int:
    configure_logging()

    # QtWebEngine nécessite cette option AVANT la création de QCoreApplication.
    QCoreApplication.setAttribute(Qt.ApplicationAttribute.AA_ShareOpenGLContexts)

    app = QApplication(list(argv))
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setStyle("Fusion")

    from filestamp.ui.main_window import MainWindow

    window = MainWindow()
    window.show()
    logger.info(f"{APP_NAME} {APP_VERSION} démarré")
    return app.exec()
