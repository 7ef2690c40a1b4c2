"""Application facade and wiring for the noisy student feature."""

from contextlib import AbstractAsyncContextManager
from functools import lru_cache
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from noisy_students.db.postgres.session import get_db_session
from noisy_students.features.noisy_students.noisy_student_list import (
    NoisyStudentList,
    StandardNoisyStudentList,
)
from noisy_students.features.noisy_students.repositories import (
    SqlAlchemyNoisyStudentRepository,
)


class NoisyStudentApp:
    """Entry point handed to the presentation layer."""

    def __init__(self, noisy_student_list: NoisyStudentList):
        self.noisy_student_list = noisy_student_list

    def get_noisy_student_list(self) -> NoisyStudentList:
        return self.noisy_student_list


def build_noisy_student_app(
    get_db_session: Callable[[], AbstractAsyncContextManager[AsyncSession]],
) -> NoisyStudentApp:
    """Wire repository, collection service and facade around a session factory."""
    repository = SqlAlchemyNoisyStudentRepository(get_db_session=get_db_session)
    return NoisyStudentApp(StandardNoisyStudentList(repository))


@lru_cache
def get_noisy_student_app() -> NoisyStudentApp:
    """Get the process-wide facade bound to the configured database."""
    return build_noisy_student_app(get_db_session)
