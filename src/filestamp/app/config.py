from __future__ import annotations

import logging

APP_NAME: str = "FileStamp"
APP_VERSION: str = "1.0.0"
ORGANIZATION_NAME: str = "FileStamp"

# Affichage uniquement: l'instant renvoyé reste en UTC absolu
DEFAULT_TIMEZONE: str = "Europe/Paris"

WINDOW_WIDTH: int = 720
WINDOW_HEIGHT: int = 420

# Nom de l'objet publié sur le QWebChannel (côté JS: channel.objects.backend)
BRIDGE_OBJECT_NAME: str = "backend"

LOG_LEVEL: int = logging.INFO
LOG_FORMAT: str = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
