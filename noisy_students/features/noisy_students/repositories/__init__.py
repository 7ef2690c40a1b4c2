"""Noisy student repositories."""

from .protocols import NoisyStudentRepository
from .sqlalchemy_repository import SqlAlchemyNoisyStudentRepository

__all__ = ["NoisyStudentRepository", "SqlAlchemyNoisyStudentRepository"]
