#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Type Timestamp pour FileStamp.
Instant absolu exprimé en secondes + nanosecondes depuis l'epoch Unix.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict

NANOS_PER_SECOND = 1_000_000_000

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, order=True)
class Timestamp:
    """
    Instant de dernière modification d'une entrée du système de fichiers.

    Pas de timezone: la valeur est un instant absolu. La forme
    (secs_since_epoch, nanos_since_epoch) est celle attendue par l'UI.

    Attributes:
        secs_since_epoch: Secondes entières depuis 1970-01-01T00:00:00Z
        nanos_since_epoch: Partie sub-seconde, 0 <= nanos < 1e9
    """
    secs_since_epoch: int
    nanos_since_epoch: int = 0

    def __post_init__(self) -> None:
        if self.secs_since_epoch < 0:
            raise ValueError(f"secs_since_epoch doit être >= 0 (reçu {self.secs_since_epoch})")
        if not 0 <= self.nanos_since_epoch < NANOS_PER_SECOND:
            raise ValueError(f"nanos_since_epoch hors bornes: {self.nanos_since_epoch}")

    @classmethod
    def from_ns(cls, total_ns: int) -> "Timestamp":
        """Construit un Timestamp depuis un nombre de nanosecondes (ex: st_mtime_ns)."""
        secs, nanos = divmod(total_ns, NANOS_PER_SECOND)
        return cls(secs, nanos)

    def to_ns(self) -> int:
        return self.secs_since_epoch * NANOS_PER_SECOND + self.nanos_since_epoch

    def to_datetime(self) -> datetime:
        """Datetime UTC (timezone-aware), tronqué à la microseconde."""
        return UNIX_EPOCH + timedelta(
            seconds=self.secs_since_epoch,
            microseconds=self.nanos_since_epoch // 1000,
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "secs_since_epoch": self.secs_since_epoch,
            "nanos_since_epoch": self.nanos_since_epoch,
        }
