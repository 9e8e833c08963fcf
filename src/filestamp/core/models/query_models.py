from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from filestamp.domain.timestamp import Timestamp


@dataclass(frozen=True)
class ModifiedTimeResult:
    """Résultat Ok/Err renvoyé à l'hôte: soit un instant, soit un message."""

    timestamp: Optional[Timestamp] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.timestamp is None) == (self.error is None):
            raise ValueError("ModifiedTimeResult: exactement un de timestamp/error doit être défini")

    @classmethod
    def success(cls, timestamp: Timestamp) -> "ModifiedTimeResult":
        return cls(timestamp=timestamp)

    @classmethod
    def failure(cls, error: str) -> "ModifiedTimeResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.timestamp is not None

    def to_payload(self) -> dict[str, Any]:
        if self.timestamp is not None:
            return {"ok": True, "value": self.timestamp.to_dict()}
        return {"ok": False, "error": self.error}
