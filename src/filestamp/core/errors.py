from __future__ import annotations

from enum import Enum
from typing import Optional


class IOErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    INVALID_INPUT = "invalid_input"
    UNSUPPORTED = "unsupported"
    OTHER = "other"


_KIND_BY_OS_ERROR: dict[type, IOErrorKind] = {
    FileNotFoundError: IOErrorKind.NOT_FOUND,
    NotADirectoryError: IOErrorKind.NOT_FOUND,
    PermissionError: IOErrorKind.PERMISSION_DENIED,
}


class FileStatError(Exception):
    """Échec de lecture des métadonnées d'un chemin.

    Garde la nature de l'erreur (kind, code OS) pour les appelants internes.
    `str(err)` donne la description à plat renvoyée à l'UI.
    """

    def __init__(
        self,
        kind: IOErrorKind,
        message: str,
        path: Optional[str] = None,
        os_error: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = path
        self.os_error = os_error

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_os_error(cls, exc: OSError, path: Optional[str] = None) -> "FileStatError":
        # Sous Windows le code brut est winerror, pas errno.
        code = getattr(exc, "winerror", None) or exc.errno
        kind = IOErrorKind.OTHER
        for exc_type, mapped in _KIND_BY_OS_ERROR.items():
            if isinstance(exc, exc_type):
                kind = mapped
                break

        if exc.strerror and code is not None:
            message = f"{exc.strerror} (os error {code})"
        else:
            message = exc.strerror or str(exc) or exc.__class__.__name__
        return cls(kind, message, path=path, os_error=code)
