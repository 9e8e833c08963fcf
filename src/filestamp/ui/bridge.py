#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Bridge UI <-> backend pour FileStamp.
Objet QObject publié sur le QWebChannel: chaque slot est une commande
appelable depuis le JavaScript de la page.
"""

import json
import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from filestamp.app.config import DEFAULT_TIMEZONE
from filestamp.services.timestamp_controller import TimestampController
from .formatting import format_timestamp

logger = logging.getLogger(__name__)


class CommandBridge(QObject):
    """
    Expose la commande `modified_time` à la page web.

    Le résultat est renvoyé en texte JSON:
    {"ok": true, "value": {...}, "display": "..."} ou {"ok": false, "error": "..."}
    """

    # Signal émis après chaque commande: (chemin, succès, texte affiché)
    query_finished = pyqtSignal(str, bool, str)

    def __init__(
        self,
        controller: Optional[TimestampController] = None,
        display_timezone: str = DEFAULT_TIMEZONE,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller or TimestampController()
        self.display_timezone = display_timezone

    @pyqtSlot(str, result=str)
    def modified_time(self, file_path: str) -> str:
        """Commande appelée par le JS: backend.modified_time(path, callback)."""
        try:
            result = self.controller.modified_time(file_path)
            payload = result.to_payload()
            if result.ok:
                try:
                    payload["display"] = format_timestamp(result.timestamp, self.display_timezone)
                except (OverflowError, ValueError) as e:
                    # L'instant reste valide, seul l'affichage local échoue
                    logger.warning(f"Formatage impossible pour {file_path!r}: {e}")
        except Exception as e:
            # Un slot Qt ne doit jamais propager dans la boucle d'événements
            logger.exception(f"Erreur inattendue dans modified_time({file_path!r})")
            payload = {"ok": False, "error": str(e) or e.__class__.__name__}

        if payload["ok"]:
            # Comme render() côté JS: secondes brutes si pas d'affichage local
            text = payload.get("display") or str(payload["value"]["secs_since_epoch"])
        else:
            text = payload.get("error") or ""
        self.query_finished.emit(file_path, bool(payload["ok"]), text)
        return json.dumps(payload, ensure_ascii=False)
