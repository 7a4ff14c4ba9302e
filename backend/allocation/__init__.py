"""Exam time-allocation engine."""

from allocation.engine import (
    SubjectScore,
    TimeWindow,
    compute_allocation,
    normalize,
    present,
    resolve_time_window,
    review_only_subjects,
    score_subject,
)
from allocation.errors import AllocationError, ExamDateRequiredError
from allocation.schemas import (
    AllocationMetadata,
    AllocationResult,
    ExamProfile,
    SubjectAllocation,
    SubjectProfile,
)

__all__ = [
    "AllocationError",
    "AllocationMetadata",
    "AllocationResult",
    "ExamDateRequiredError",
    "ExamProfile",
    "SubjectAllocation",
    "SubjectProfile",
    "SubjectScore",
    "TimeWindow",
    "compute_allocation",
    "normalize",
    "present",
    "resolve_time_window",
    "review_only_subjects",
    "score_subject",
]
