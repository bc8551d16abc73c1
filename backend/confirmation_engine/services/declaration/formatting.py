"""
Text formatting for the declaration page.
"""
from __future__ import annotations
import re
from datetime import date
from typing import Union

from ...models.ssot import Address

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TRAILING_PUNCTUATION_RE = re.compile(r"[.,\s]+$")

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def strip_trailing_punctuation(text: str) -> str:
    """Drop trailing periods, commas and whitespace ("Street., " -> "Street")."""
    return TRAILING_PUNCTUATION_RE.sub("", text)


def format_address(address: Address) -> str:
    """Join address lines and postcode with ", ", skipping empty lines."""
    parts = (
        strip_trailing_punctuation(part)
        for part in (*address.lines, address.postcode)
        if part
    )
    return ", ".join(part for part in parts if part)


def to_date(value: Union[str, date]) -> date:
    """Parse a YYYY-MM-DD string. Anything else is rejected, never coerced."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE_RE.match(value):
        raise ValueError(f"Date must be YYYY-MM-DD, got {value!r}")
    return date.fromisoformat(value)


def format_date_for_declaration(value: Union[str, date]) -> str:
    """
    Format a date for declaration prose.

    Input: "2020-06-15"
    Output: "15 June 2020" (no leading zero on the day)
    """
    d = to_date(value)
    return f"{d.day} {MONTHS[d.month - 1]} {d.year}"
