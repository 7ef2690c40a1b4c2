"""Plain record shapes exchanged with the noisy student repository."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class NoisyStudentData:
    id: int
    name: str
    time_added: datetime


@dataclass(frozen=True, slots=True)
class NoisyStudentCreate:
    """Record without an id. ``time_added`` defaults to the insert time."""

    name: str
    time_added: datetime | None = None


@dataclass(frozen=True, slots=True)
class NoisyStudentUpdate:
    """Partial update addressed by id. ``None`` fields are left unchanged."""

    id: int | None
    name: str | None = None

    def changes(self) -> dict[str, Any]:
        """Return the fields that should be written."""
        values: dict[str, Any] = {}
        if self.name is not None:
            values["name"] = self.name
        return values
