"""Allocation schemas — exam profile input and allocation result output."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ─── Input ────────────────────────────────────────────────

class SubjectProfile(CamelModel):
    subject: str = Field(min_length=1, max_length=100)
    weight: float = Field(ge=0.1, le=10)  # relative importance, must stay positive
    current_level: int = Field(ge=0, le=10)
    goal_level: int = Field(ge=0, le=10)
    position: Optional[int] = Field(default=None, ge=0)


class ExamProfile(CamelModel):
    name: Optional[str] = Field(default=None, max_length=100)
    exam_date: Optional[date] = None
    weekly_hours: float = Field(ge=0, le=168)  # 168 = hours in a week
    subjects: List[SubjectProfile] = Field(default_factory=list)

    def ordered_subjects(self) -> List[SubjectProfile]:
        """Subjects by position, falling back to list index when unset."""
        indexed = [
            (s.position if s.position is not None else i, i, s)
            for i, s in enumerate(self.subjects)
        ]
        return [s for _, _, s in sorted(indexed, key=lambda item: (item[0], item[1]))]


# ─── Output ───────────────────────────────────────────────

class SubjectAllocation(CamelModel):
    subject: str
    total_hours: float
    hours_per_week: float
    gap: int
    percentage: float


class AllocationMetadata(CamelModel):
    weeks_until_exam: int
    total_available_hours: float
    weekly_hours: float
    exam_date: str


class AllocationResult(CamelModel):
    results: List[SubjectAllocation]
    metadata: AllocationMetadata
