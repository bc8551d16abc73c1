"""
Helpers for the PDF's boxed, one-character-per-cell fields.
"""
from __future__ import annotations
import math
from datetime import date
from typing import List, Union

from ..declaration.formatting import to_date


def split_date_to_digits(value: Union[str, date]) -> List[str]:
    """
    Split a date into the eight DDMMYYYY cells of the form.

    Input: "1949-03-08"
    Output: ["0", "8", "0", "3", "1", "9", "4", "9"]
    """
    return list(f"{to_date(value):%d%m%Y}")


def pounds_to_currency_string(pounds: Union[int, float]) -> str:
    """Whole pounds for currency fields: floored, no pound sign, no commas."""
    return str(math.floor(pounds))


def split_number_to_digits(number: int, digit_count: int) -> List[str]:
    return list(str(number).zfill(digit_count))
