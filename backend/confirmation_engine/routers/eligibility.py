"""
Confirmation Engine - Eligibility API Router

Runs the screening checklist before the wizard collects any case data.
"""
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ..schemas import EligibilityAnswers
from ..services.rules import check_eligibility

router = APIRouter(prefix="/eligibility", tags=["eligibility"])


class HardStopResponse(BaseModel):
    code: str
    message: str


class EligibilityResponse(BaseModel):
    eligible: bool
    hard_stop: Optional[HardStopResponse] = None


@router.post("/check", response_model=EligibilityResponse)
async def check(answers: EligibilityAnswers):
    """Return the first blocking condition, if any."""
    stop = check_eligibility(answers.as_answers())
    if stop is None:
        return EligibilityResponse(eligible=True)
    return EligibilityResponse(
        eligible=False,
        hard_stop=HardStopResponse(code=stop.code, message=stop.message),
    )
