"""Collection service over the noisy student repository."""

from typing import Protocol

from noisy_students.features.noisy_students.noisy_student import NoisyStudent
from noisy_students.features.noisy_students.records import (
    NoisyStudentCreate,
    NoisyStudentData,
)
from noisy_students.features.noisy_students.repositories.protocols import (
    NoisyStudentRepository,
)


class NoisyStudentList(Protocol):
    """Protocol for the noisy student collection service."""

    async def list_student(self, data: NoisyStudentCreate) -> NoisyStudent:
        """Record a new noisy student."""
        ...

    async def find_noisy_student(self, student_id: int) -> NoisyStudent:
        """Get a single noisy student by ID."""
        ...

    async def find_all(self) -> list[NoisyStudent]:
        """Get every noisy student, newest first."""
        ...

    async def remove_student(self, noisy_student: NoisyStudent) -> None:
        """Remove a noisy student."""
        ...


class StandardNoisyStudentList:
    """Implementation of the noisy student collection service."""

    def __init__(self, noisy_student_repository: NoisyStudentRepository):
        """Initialize the service with dependencies.

        Args:
            noisy_student_repository: Repository for noisy student records
        """
        self.noisy_student_repository = noisy_student_repository

    def _wrap(self, data: NoisyStudentData) -> NoisyStudent:
        return NoisyStudent(data.id, data.name, self.noisy_student_repository)

    async def list_student(self, data: NoisyStudentCreate) -> NoisyStudent:
        return self._wrap(await self.noisy_student_repository.create(data))

    async def find_noisy_student(self, student_id: int) -> NoisyStudent:
        return self._wrap(await self.noisy_student_repository.find_by_id(student_id))

    async def find_all(self) -> list[NoisyStudent]:
        students = await self.noisy_student_repository.find_all()
        return [self._wrap(student) for student in students]

    async def remove_student(self, noisy_student: NoisyStudent) -> None:
        await self.noisy_student_repository.delete_by_id(noisy_student.get_id())
