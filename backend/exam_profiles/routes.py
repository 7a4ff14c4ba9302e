"""Exam profile allocation routes."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException

from allocation import AllocationResult, ExamProfile, compute_allocation
from allocation.errors import EXAM_DATE_REQUIRED

logger = logging.getLogger(__name__)

router = APIRouter()


def get_clock() -> datetime:
    """FastAPI dependency: the reference 'now' for allocation."""
    return datetime.now(timezone.utc)


@router.post("/exam-profiles/calculate", response_model=AllocationResult)
def calculate_allocation(profile: ExamProfile, now: datetime = Depends(get_clock)):
    if profile.exam_date is None:
        logger.warning("Allocation rejected: profile has no exam date")
        raise HTTPException(status_code=400, detail=EXAM_DATE_REQUIRED)

    # Subjects are listed by their stored position, as the profile store returns them.
    profile = profile.model_copy(update={"subjects": profile.ordered_subjects()})
    result = compute_allocation(profile, now=now)

    meta = result.metadata
    logger.info(
        f"Allocated {meta.total_available_hours}h over {meta.weeks_until_exam} weeks "
        f"across {len(result.results)} subjects (exam {meta.exam_date})"
    )
    return result
