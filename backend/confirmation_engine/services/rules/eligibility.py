"""
Confirmation Engine - Eligibility Gate

Screens a case before any data is collected. The checklist is evaluated in
a fixed priority order and only the FIRST failing rule is reported.
"""
from __future__ import annotations
import logging
from typing import List, Mapping, Optional, Tuple

from ...constants import MIN_DEATH_DATE, NIL_RATE_BAND
from ...models.ssot import HardStop
from ..declaration.formatting import format_date_for_declaration

logger = logging.getLogger(__name__)


# (answer key, stop code, message) - a False answer stops the case
MUST_BE_TRUE: List[Tuple[str, str, str]] = [
    (
        "dateOfDeathOnOrAfter2022",
        "DEATH_BEFORE_2022",
        f"This form is only for deaths on or after {format_date_for_declaration(MIN_DEATH_DATE)}.",
    ),
    (
        "domiciledInScotland",
        "NON_SCOTTISH_DOMICILE",
        "The deceased must have been domiciled in Scotland.",
    ),
    (
        "grossEstateUnderNRB",
        "ESTATE_OVER_THRESHOLD",
        f"Estates over £{NIL_RATE_BAND:,} require professional assistance.",
    ),
]

# (answer key, stop code, message) - a True answer stops the case
MUST_BE_FALSE: List[Tuple[str, str, str]] = [
    (
        "hasBusinessInterests",
        "BUSINESS_INTERESTS",
        "Estates with business interests require a solicitor.",
    ),
    (
        "hasAgriculturalLand",
        "AGRICULTURAL_LAND",
        "Agricultural land or agricultural relief cases require a solicitor.",
    ),
    (
        "hasForeignProperty",
        "COMPLEX_FOREIGN",
        "Complex foreign property requires a solicitor.",
    ),
    (
        "hasOngoingLitigation",
        "ONGOING_LITIGATION",
        "Ongoing litigation involving the estate requires a solicitor.",
    ),
]

DISPUTED_WILL = HardStop(
    code="DISPUTED_WILL",
    message="Disputed wills require a solicitor.",
)


def check_eligibility(answers: Mapping[str, bool]) -> Optional[HardStop]:
    """
    Return the first blocking condition, or None if the case may proceed.

    Missing answers count as False.
    """
    for key, code, message in MUST_BE_TRUE:
        if not answers.get(key, False):
            logger.info(f"Eligibility stop {code}")
            return HardStop(code=code, message=message)

    for key, code, message in MUST_BE_FALSE:
        if answers.get(key, False):
            logger.info(f"Eligibility stop {code}")
            return HardStop(code=code, message=message)

    # A "disputed" answer only means something when a valid will exists
    if answers.get("hasValidWill", False) and answers.get("willIsDisputed", False):
        logger.info(f"Eligibility stop {DISPUTED_WILL.code}")
        return DISPUTED_WILL

    return None
