"""Custom exceptions for noisy student operations."""


class NoisyStudentNotFoundError(LookupError):
    """Raised when no noisy student exists for the requested id."""

    def __init__(self, student_id: int | None):
        self.student_id = student_id
        super().__init__(f"Noisy student does not exist: id={student_id}")
