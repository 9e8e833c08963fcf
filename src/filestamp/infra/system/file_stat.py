from __future__ import annotations

import logging
import os

from filestamp.core.errors import FileStatError, IOErrorKind
from filestamp.core.ports.file_stat import FileStatPort
from filestamp.domain.timestamp import Timestamp

logger = logging.getLogger(__name__)


class OSFileStat(FileStatPort):
    """Adapter os.stat: suit les liens symboliques, ne lit pas le contenu."""

    def modified_time(self, path: str) -> Timestamp:
        try:
            # os.fspath refuse les int (os.stat(int) interrogerait un descripteur)
            path = os.fspath(path)
        except TypeError as e:
            raise FileStatError(IOErrorKind.INVALID_INPUT, str(e)) from e

        try:
            st = os.stat(path)
        except FileNotFoundError as e:
            logger.debug(f"Chemin introuvable: {path!r}")
            raise FileStatError.from_os_error(e, path=os.fsdecode(path)) from e
        except OSError as e:
            logger.warning(f"Lecture des métadonnées impossible pour {path!r}: {e}")
            raise FileStatError.from_os_error(e, path=os.fsdecode(path)) from e
        except ValueError as e:
            # ex: "embedded null byte", "path too long for Windows"
            logger.warning(f"Chemin invalide {path!r}: {e}")
            message = str(e) or "invalid path"
            if "null byte" in message:
                message = "file name contained an unexpected NUL byte"
            raise FileStatError(
                IOErrorKind.INVALID_INPUT,
                message,
                path=repr(path),
            ) from e

        mtime_ns = st.st_mtime_ns
        if mtime_ns < 0:
            raise FileStatError(
                IOErrorKind.UNSUPPORTED,
                "modification time is before the Unix epoch and cannot be represented",
                path=os.fsdecode(path),
            )
        return Timestamp.from_ns(mtime_ns)
