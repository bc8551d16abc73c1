"""
Inventory field-id builders.

The PDF uses two padding rules:
    Item / Desc / PR columns:  C1_Item01.Line07   (zero-padded to 2 digits)
    Amount column:             C1_AMT01.7          (not padded)
"""
from ...constants import INVENTORY_MAX_LINES

INVENTORY_TOTAL_FIELD_ID = "C1_AMT01_Total"


def _check_line(line_number: int) -> None:
    if not 1 <= line_number <= INVENTORY_MAX_LINES:
        raise ValueError(
            f"Line {line_number} out of range 1-{INVENTORY_MAX_LINES}"
        )


def inventory_item_field_id(line_number: int) -> str:
    _check_line(line_number)
    return f"C1_Item01.Line{line_number:02d}"


def inventory_desc_field_id(line_number: int) -> str:
    _check_line(line_number)
    return f"C1_Desc01.Line{line_number:02d}"


def inventory_price_field_id(line_number: int) -> str:
    _check_line(line_number)
    return f"C1_PR01.Line{line_number:02d}"


def inventory_amount_field_id(line_number: int) -> str:
    _check_line(line_number)
    return f"C1_AMT01.{line_number}"
