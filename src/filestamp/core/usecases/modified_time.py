from __future__ import annotations

import logging
from dataclasses import dataclass

from filestamp.core.ports.file_stat import FileStatPort
from filestamp.domain.timestamp import Timestamp

logger = logging.getLogger(__name__)


@dataclass
class ModifiedTimeUseCase:
    """Use-case: date de dernière modification d'un chemin.

    Une seule lecture de métadonnées par appel, sans cache ni retry.
    Les FileStatError remontent telles quelles (structure conservée).
    """

    file_stat: FileStatPort

    def execute(self, file_path: str) -> Timestamp:
        timestamp = self.file_stat.modified_time(file_path)
        logger.debug(f"mtime {file_path!r} -> {timestamp.secs_since_epoch}.{timestamp.nanos_since_epoch:09d}")
        return timestamp
