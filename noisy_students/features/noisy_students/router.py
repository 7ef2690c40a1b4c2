"""Noisy students API router."""

from fastapi import APIRouter, Depends

from noisy_students.features.noisy_students.dtos import (
    ListNoisyStudentsResponse,
    NoisyStudentSummary,
)
from noisy_students.features.noisy_students.noisy_student_app import (
    NoisyStudentApp,
    get_noisy_student_app,
)

router = APIRouter(
    prefix="/noisy-students",
    tags=["noisy-students"],
)


@router.get("", response_model=ListNoisyStudentsResponse)
async def list_noisy_students(
    noisy_student_app: NoisyStudentApp = Depends(get_noisy_student_app),
) -> ListNoisyStudentsResponse:
    """List all noisy students as id/name pairs, newest first."""
    noisy_students = await noisy_student_app.get_noisy_student_list().find_all()

    return ListNoisyStudentsResponse(
        noisy_students=[
            NoisyStudentSummary(id=student.get_id(), name=student.get_name())
            for student in noisy_students
        ]
    )
