"""DTOs for the noisy students API endpoints."""

from pydantic import BaseModel


class NoisyStudentSummary(BaseModel):
    """A noisy student as shown on the page."""

    id: int
    name: str


class ListNoisyStudentsResponse(BaseModel):
    """Response for GET /noisy-students."""

    noisy_students: list[NoisyStudentSummary]
