"""Noisy student domain object."""

from __future__ import annotations

from noisy_students.features.noisy_students.records import NoisyStudentUpdate
from noisy_students.features.noisy_students.repositories.protocols import (
    NoisyStudentRepository,
)


class NoisyStudent:
    """Transient view of a stored noisy student.

    Built fresh from a record on every fetch. The id never changes; the name
    only changes through update_name, which adopts whatever the store returns.
    """

    def __init__(
        self,
        student_id: int,
        name: str,
        noisy_student_repository: NoisyStudentRepository,
    ):
        self._id = student_id
        self._name = name
        self._noisy_student_repository = noisy_student_repository

    def get_id(self) -> int:
        return self._id

    def get_name(self) -> str:
        return self._name

    async def update_name(self, name: str | None = None) -> NoisyStudent:
        """Save a name for this student and take the stored value back.

        Args:
            name: New name to save; the currently held name when omitted.

        Returns:
            This object, carrying the name as stored.

        Raises:
            NoisyStudentNotFoundError: If the student no longer exists.
        """
        saved = await self._noisy_student_repository.save_changes(
            NoisyStudentUpdate(
                id=self._id,
                name=self._name if name is None else name,
            )
        )
        self._name = saved.name
        return self

    def __repr__(self) -> str:
        return f"NoisyStudent(id={self._id!r}, name={self._name!r})"
