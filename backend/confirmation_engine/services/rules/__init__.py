"""Confirmation Engine - Rule Engine

Eligibility screening and the financial figures every other engine reads.
"""
from .eligibility import check_eligibility, MUST_BE_TRUE, MUST_BE_FALSE
from .financials import (
    compute_confirmation_total,
    compute_country_totals,
    compute_liability_totals,
    compute_net_value,
    compute_estate_totals,
    is_excepted_estate,
    is_small_estate,
    is_death_date_valid,
    should_skip_boxes_17_to_20,
    age_at_death,
    validate_totals,
)

__all__ = [
    "check_eligibility", "MUST_BE_TRUE", "MUST_BE_FALSE",
    "compute_confirmation_total", "compute_country_totals",
    "compute_liability_totals", "compute_net_value", "compute_estate_totals",
    "is_excepted_estate", "is_small_estate", "is_death_date_valid",
    "should_skip_boxes_17_to_20", "age_at_death", "validate_totals",
]
