"""
Exam time-allocation engine.

Splits the hours left before an exam across subjects by how far each subject
is from its goal level. Pure and deterministic: the only clock input is the
explicit `now` argument.

Stages, in order:
  1. time window  — whole weeks left (rounded up) x weekly hours
  2. scoring      — gap * weight * (1 + log10(1 + gap)) per subject
  3. normalizing  — scores -> percentages and hours summing to the budget
  4. presenting   — result + echoed time-window metadata
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from allocation.errors import ExamDateRequiredError
from allocation.rounding import round_tenths
from allocation.schemas import (
    AllocationMetadata,
    AllocationResult,
    ExamProfile,
    SubjectAllocation,
    SubjectProfile,
)

WEEK = timedelta(weeks=1)
REVIEW_ONLY_PERCENTAGE = 0.1  # below this a subject is review/maintenance only


@dataclass(frozen=True)
class TimeWindow:
    exam_date: date
    weeks_until_exam: int
    total_available_hours: float
    weekly_hours: float


@dataclass(frozen=True)
class SubjectScore:
    subject: str
    gap: int
    raw_score: float


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def resolve_time_window(exam_date: date, weekly_hours: float, now: datetime) -> TimeWindow:
    """Whole weeks until the exam (partial week counts as a full one), never negative."""
    exam_start = datetime.combine(exam_date, time.min, tzinfo=timezone.utc)
    remaining = exam_start - _as_utc(now)
    weeks = max(0, -(-remaining // WEEK))
    return TimeWindow(
        exam_date=exam_date,
        weeks_until_exam=weeks,
        total_available_hours=weeks * weekly_hours,
        weekly_hours=weekly_hours,
    )


def score_subject(subject: SubjectProfile) -> SubjectScore:
    """Raw priority of one subject. Subjects at or past their goal score zero."""
    gap = max(0, subject.goal_level - subject.current_level)
    raw_score = gap * subject.weight * (1 + math.log10(1 + gap))
    return SubjectScore(subject=subject.subject, gap=gap, raw_score=raw_score)


def normalize(scores: list[SubjectScore], window: TimeWindow) -> list[SubjectAllocation]:
    if not scores:
        return []

    total_score = sum(s.raw_score for s in scores)
    weeks = window.weeks_until_exam
    budget = window.total_available_hours

    allocations = []
    for s in scores:
        if total_score > 0:
            share = s.raw_score / total_score
            percentage = share * 100
            total_hours = round_tenths(share * budget)
        else:
            # Nothing left to close: split evenly instead of starving everything.
            percentage = 100 / len(scores)
            total_hours = budget / len(scores)

        hours_per_week = round_tenths(total_hours / weeks) if weeks > 0 else 0

        allocations.append(SubjectAllocation(
            subject=s.subject,
            total_hours=total_hours,
            hours_per_week=hours_per_week,
            gap=s.gap,
            percentage=percentage,
        ))
    return allocations


def present(allocations: list[SubjectAllocation], window: TimeWindow) -> AllocationResult:
    return AllocationResult(
        results=allocations,
        metadata=AllocationMetadata(
            weeks_until_exam=window.weeks_until_exam,
            total_available_hours=window.total_available_hours,
            weekly_hours=window.weekly_hours,
            exam_date=window.exam_date.isoformat(),
        ),
    )


def compute_allocation(profile: ExamProfile, *, now: datetime) -> AllocationResult:
    """Allocate the hours left before `profile.exam_date` across its subjects.

    Raises ExamDateRequiredError when the profile has no exam date; callers are
    expected to reject such profiles before getting here.
    """
    if profile.exam_date is None:
        raise ExamDateRequiredError()

    window = resolve_time_window(profile.exam_date, profile.weekly_hours, now)
    scores = [score_subject(s) for s in profile.subjects]
    return present(normalize(scores, window), window)


def review_only_subjects(result: AllocationResult) -> list[str]:
    """Names of subjects that got (practically) no hours and only need review."""
    return [r.subject for r in result.results if r.percentage < REVIEW_ONLY_PERCENTAGE]
