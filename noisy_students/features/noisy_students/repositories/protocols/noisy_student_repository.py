"""Protocol definition for noisy student repository operations."""

from typing import Protocol

from noisy_students.features.noisy_students.records import (
    NoisyStudentCreate,
    NoisyStudentData,
    NoisyStudentUpdate,
)


class NoisyStudentRepository(Protocol):
    """Protocol for noisy student persistence.

    This protocol defines the operations the collection service and the
    domain object rely on. Implementations include
    SqlAlchemyNoisyStudentRepository.
    """

    async def create(self, data: NoisyStudentCreate) -> NoisyStudentData:
        """Store a new noisy student.

        Args:
            data: The record to insert, without an id.

        Returns:
            The stored record, including the generated id and time_added.
        """
        ...

    async def save_changes(self, data: NoisyStudentUpdate) -> NoisyStudentData:
        """Persist the supplied fields of an existing noisy student.

        Args:
            data: Partial record; id is required, None fields are kept.

        Returns:
            The full record after the update.

        Raises:
            NoisyStudentNotFoundError: If id is missing or unknown.
        """
        ...

    async def find_by_id(self, student_id: int) -> NoisyStudentData:
        """Fetch a noisy student.

        Raises:
            NoisyStudentNotFoundError: If no record has this id.
        """
        ...

    async def exist_by_id(self, student_id: int) -> bool:
        """Return True if a record with this id is stored."""
        ...

    async def find_all(self) -> list[NoisyStudentData]:
        """Return every record, newest time_added first."""
        ...

    async def count(self) -> int:
        """Return the number of stored records."""
        ...

    async def delete_by_id(self, student_id: int) -> None:
        """Remove a noisy student.

        Raises:
            NoisyStudentNotFoundError: If the store reports no such record.
        """
        ...
