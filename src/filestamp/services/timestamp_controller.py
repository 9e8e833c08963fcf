#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Façade "application" utilisée par l'UI.

Objectif: le bridge Qt ne doit pas connaître l'infra (os.stat).
Le calcul est dans `filestamp.core` (usecase + ports); ici les erreurs
structurées sont ramenées à un simple message texte pour l'hôte.
"""

import logging
from typing import Optional

from filestamp.core.errors import FileStatError
from filestamp.core.models.query_models import ModifiedTimeResult
from filestamp.core.ports.file_stat import FileStatPort
from filestamp.core.usecases.modified_time import ModifiedTimeUseCase
from filestamp.infra.system.file_stat import OSFileStat

logger = logging.getLogger(__name__)


class TimestampController:
    """
    Contrôleur de la commande `modified_time`.
    Sans état: chaque appel interroge le système de fichiers.
    """

    def __init__(self, file_stat: Optional[FileStatPort] = None) -> None:
        """
        Initialise le contrôleur.

        Args:
            file_stat: Adapter de métadonnées (OSFileStat par défaut)
        """
        self._use_case = ModifiedTimeUseCase(file_stat=file_stat or OSFileStat())

    def modified_time(self, file_path: str) -> ModifiedTimeResult:
        """
        Date de dernière modification d'un fichier.

        Args:
            file_path: Chemin tel que fourni par l'UI (non normalisé)

        Returns:
            ModifiedTimeResult avec l'instant, ou le message d'erreur
        """
        try:
            return ModifiedTimeResult.success(self._use_case.execute(file_path))
        except FileStatError as e:
            logger.info(f"modified_time({file_path!r}) a échoué [{e.kind.value}]: {e}")
            return ModifiedTimeResult.failure(str(e))


_default_controller = TimestampController()


def modified_time(file_path: str) -> ModifiedTimeResult:
    """Commande exposée à l'hôte (adapter OS par défaut)."""
    return _default_controller.modified_time(file_path)
