"""Protocols for repository operations."""

from .noisy_student_repository import NoisyStudentRepository

__all__ = ["NoisyStudentRepository"]
