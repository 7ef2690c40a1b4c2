"""Integration tests for the noisy student facade against the test database."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from noisy_students.features.noisy_students.errors import NoisyStudentNotFoundError
from noisy_students.features.noisy_students.noisy_student_app import (
    build_noisy_student_app,
)
from noisy_students.features.noisy_students.records import NoisyStudentCreate

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
class TestNoisyStudentAppIntegration:
    """Test suite for the wired facade, list, domain object and repository."""

    async def test_add_rename_and_remove(
        self, get_db_session: async_sessionmaker[AsyncSession]
    ):
        noisy_student_list = build_noisy_student_app(
            get_db_session
        ).get_noisy_student_list()

        # Arrange
        student = await noisy_student_list.list_student(NoisyStudentCreate(name="Bob"))

        # Act
        await student.update_name("Bobby")
        refetched = await noisy_student_list.find_noisy_student(student.get_id())

        # Assert
        assert student.get_name() == "Bobby"
        assert refetched.get_name() == "Bobby"

        await noisy_student_list.remove_student(refetched)

        with pytest.raises(NoisyStudentNotFoundError):
            await noisy_student_list.find_noisy_student(student.get_id())

        # The removed student can no longer be renamed
        with pytest.raises(NoisyStudentNotFoundError):
            await student.update_name("Robert")
        assert student.get_name() == "Bobby"

    async def test_find_all_newest_first(
        self, get_db_session: async_sessionmaker[AsyncSession]
    ):
        noisy_student_list = build_noisy_student_app(
            get_db_session
        ).get_noisy_student_list()
        for name in ["Ann", "Ben"]:
            await noisy_student_list.list_student(NoisyStudentCreate(name=name))

        students = await noisy_student_list.find_all()

        assert [(s.get_id(), s.get_name()) for s in students] == [
            (2, "Ben"),
            (1, "Ann"),
        ]
