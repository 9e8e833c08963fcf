from __future__ import annotations

from typing import Protocol

from filestamp.domain.timestamp import Timestamp


class FileStatPort(Protocol):
    """Lève FileStatError si le mtime n'est pas disponible."""

    def modified_time(self, path: str) -> Timestamp: ...
