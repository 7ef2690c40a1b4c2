"""SQLAlchemy repository for noisy students."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Callable

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noisy_students.features.noisy_students.errors import NoisyStudentNotFoundError
from noisy_students.features.noisy_students.models import NoisyStudentModel
from noisy_students.features.noisy_students.records import (
    NoisyStudentCreate,
    NoisyStudentData,
    NoisyStudentUpdate,
)

logger = logging.getLogger(__name__)


def _to_data(student: NoisyStudentModel) -> NoisyStudentData:
    return NoisyStudentData(
        id=student.id,
        name=student.name,
        time_added=student.time_added,
    )


class SqlAlchemyNoisyStudentRepository:
    """NoisyStudentRepository backed by an async SQLAlchemy session.

    Every method runs in its own session and transaction. Store failures
    are logged and re-raised unchanged.
    """

    def __init__(
        self,
        get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
    ):
        """Initialize the repository with dependencies.

        Args:
            get_db_session: Function to get database session
        """
        self.get_db_session = get_db_session

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        async with self.get_db_session() as session:
            try:
                async with session.begin():
                    yield session
            except SQLAlchemyError:
                logger.warning("Noisy student store operation failed", exc_info=True)
                raise

    async def create(self, data: NoisyStudentCreate) -> NoisyStudentData:
        async with self._transaction() as session:
            student = NoisyStudentModel(name=data.name)
            if data.time_added is not None:
                student.time_added = data.time_added
            session.add(student)
            await session.flush()
            created = _to_data(student)

        logger.debug("Created noisy student id=%s", created.id)
        return created

    async def save_changes(self, data: NoisyStudentUpdate) -> NoisyStudentData:
        if data.id is None:
            logger.warning("Rejected noisy student update without an id")
            raise NoisyStudentNotFoundError(None)

        async with self._transaction() as session:
            student = await session.get(NoisyStudentModel, data.id)
            if student is None:
                logger.warning("Noisy student id=%s not found for update", data.id)
                raise NoisyStudentNotFoundError(data.id)

            # Update only the provided fields
            for key, value in data.changes().items():
                setattr(student, key, value)

            await session.flush()
            # Pick up anything the database normalized on write
            await session.refresh(student)
            updated = _to_data(student)

        logger.debug("Updated noisy student id=%s", updated.id)
        return updated

    async def find_by_id(self, student_id: int) -> NoisyStudentData:
        async with self._transaction() as session:
            student = await session.get(NoisyStudentModel, student_id)
            if student is None:
                logger.warning("Noisy student id=%s not found", student_id)
                raise NoisyStudentNotFoundError(student_id)
            return _to_data(student)

    async def exist_by_id(self, student_id: int) -> bool:
        async with self._transaction() as session:
            stmt = (
                select(func.count())
                .select_from(NoisyStudentModel)
                .where(NoisyStudentModel.id == student_id)
            )
            result = await session.execute(stmt)
            return (result.scalar() or 0) > 0

    async def find_all(self) -> list[NoisyStudentData]:
        async with self._transaction() as session:
            stmt = select(NoisyStudentModel).order_by(
                NoisyStudentModel.time_added.desc(),
                NoisyStudentModel.id.desc(),
            )
            result = await session.execute(stmt)
            return [_to_data(student) for student in result.scalars().all()]

    async def count(self) -> int:
        async with self._transaction() as session:
            result = await session.execute(
                select(func.count()).select_from(NoisyStudentModel)
            )
            return result.scalar() or 0

    async def delete_by_id(self, student_id: int) -> None:
        async with self._transaction() as session:
            result = await session.execute(
                delete(NoisyStudentModel).where(NoisyStudentModel.id == student_id)
            )
            if result.rowcount == 0:
                logger.warning("Noisy student id=%s not found for delete", student_id)
                raise NoisyStudentNotFoundError(student_id)

        logger.debug("Deleted noisy student id=%s", student_id)
