"""Allocation errors."""

EXAM_DATE_REQUIRED = "Exam date is required for allocation calculation"


class AllocationError(Exception):
    """Base class for allocation failures."""


class ExamDateRequiredError(AllocationError):
    def __init__(self, message: str = EXAM_DATE_REQUIRED):
        super().__init__(message)
        self.message = message
