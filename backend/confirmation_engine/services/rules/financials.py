"""
Confirmation Engine - Financial Aggregator

All money is whole pounds. The confirmation total computed here is the one
figure used by the inventory, the declaration and the gross value box.
"""
from __future__ import annotations
import logging
from datetime import date
from typing import Dict, Iterable, List

from dateutil.relativedelta import relativedelta

from ...constants import (
    MIN_DEATH_DATE,
    NIL_RATE_BAND,
    SMALL_ESTATE_THRESHOLD,
    TRANSFERABLE_NRB_LIMIT,
    AssetCountry,
    LiabilityType,
)
from ...models.ssot import (
    Asset,
    Case,
    Deceased,
    EstateTotals,
    Liability,
    LiabilityTotals,
)

logger = logging.getLogger(__name__)

# Countries whose assets are confirmed to; "elsewhere" is listed but never summed
CONFIRMATION_COUNTRIES = (
    AssetCountry.SCOTLAND,
    AssetCountry.ENGLAND_WALES,
    AssetCountry.NORTHERN_IRELAND,
)

LIABILITY_BUCKETS: Dict[LiabilityType, str] = {
    LiabilityType.FUNERAL: "funeral",
    LiabilityType.MORTGAGE: "mortgage",
    LiabilityType.OTHER_DEBT: "other_debt",
}


def compute_confirmation_total(assets: Iterable[Asset]) -> int:
    """Sum of the deceased's share for assets in Scotland, England/Wales and N. Ireland."""
    return sum(
        a.deceased_share_value for a in assets
        if a.country in CONFIRMATION_COUNTRIES
    )


def compute_country_totals(assets: Iterable[Asset]) -> Dict[AssetCountry, int]:
    """Deceased's share per country, "elsewhere" included. For display only."""
    totals = {country: 0 for country in AssetCountry}
    for a in assets:
        totals[a.country] += a.deceased_share_value
    return totals


def compute_liability_totals(liabilities: Iterable[Liability]) -> LiabilityTotals:
    buckets = {name: 0 for name in LIABILITY_BUCKETS.values()}
    for liability in liabilities:
        try:
            bucket = LIABILITY_BUCKETS[liability.liability_type]
        except KeyError:
            raise ValueError(
                f"Unmapped liability type: {liability.liability_type!r}"
            ) from None
        buckets[bucket] += liability.amount
    return LiabilityTotals(**buckets)


def compute_net_value(gross_pounds: int, liabilities: Iterable[Liability]) -> int:
    """Box 15 = Box 11 - Box 12 - Box 13 - Box 14. May be negative; see validate_totals."""
    totals = compute_liability_totals(liabilities)
    return gross_pounds - totals.funeral - totals.mortgage - totals.other_debt


def is_excepted_estate(gross_for_iht_pounds: int, claiming_transferable_nrb: bool) -> bool:
    """Box 21: whether the estate is below the IHT reporting threshold."""
    limit = TRANSFERABLE_NRB_LIMIT if claiming_transferable_nrb else NIL_RATE_BAND
    return gross_for_iht_pounds <= limit


def is_small_estate(gross_pounds: int) -> bool:
    return gross_pounds <= SMALL_ESTATE_THRESHOLD


def should_skip_boxes_17_to_20(iht400_completed: bool) -> bool:
    """When an IHT400 has been completed the "about the deceased" boxes are left blank."""
    return iht400_completed


def is_death_date_valid(date_of_death: date) -> bool:
    return date_of_death >= MIN_DEATH_DATE


def age_at_death(deceased: Deceased) -> int:
    return relativedelta(deceased.date_of_death, deceased.date_of_birth).years


def compute_estate_totals(case: Case, claiming_transferable_nrb: bool = False) -> EstateTotals:
    confirmation_total = compute_confirmation_total(case.assets)
    totals = EstateTotals(
        confirmation_total=confirmation_total,
        country_totals=compute_country_totals(case.assets),
        liability_totals=compute_liability_totals(case.liabilities),
        net_value=compute_net_value(confirmation_total, case.liabilities),
        is_excepted=is_excepted_estate(confirmation_total, claiming_transferable_nrb),
    )
    logger.debug(
        f"Estate totals: confirmation={totals.confirmation_total} net={totals.net_value}"
    )
    return totals


def validate_totals(case: Case) -> List[str]:
    """Cross-check the totals. Returns human-readable errors; empty means valid."""
    errors = []
    confirmation_total = compute_confirmation_total(case.assets)
    net_value = compute_net_value(confirmation_total, case.liabilities)

    if confirmation_total < 0:
        errors.append("Total estate for confirmation cannot be negative.")
    if net_value < 0:
        errors.append(
            "Net value of estate cannot be negative. "
            "Check that liabilities do not exceed gross value."
        )
    return errors
