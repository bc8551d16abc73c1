"""
Confirmation Engine - Document Field Assembly

Turns a Case into the flat field-id -> value mapping consumed by the PDF
filler. Every figure comes from one EstateTotals computation so the
inventory total, box 9, box 11 and C1_23 always agree.

Page layout of the C1 (2022) form:
- Page 1: applicant, references, boxes 1-10 (deceased + executors)
- Page 2: declaration (C1_17 - C1_23) and declaration date
- Page 3: inventory (37 lines)
- Page 4: boxes 11-20 (value of estate, about the deceased)
- Page 5: boxes 21-26 (about the estate)
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from ...constants import (
    INVENTORY_MAX_LINES,
    MARITAL_STATUS_VALUES,
    MAX_EXECUTORS,
    RADIO_NO,
    RADIO_YES,
)
from ...errors import CaseValidationError
from ...models.ssot import (
    Case,
    DeclarationOutput,
    EstateTotals,
    HardStop,
    InventoryResult,
)
from ..declaration import compose_declaration
from ..field_map import (
    INVENTORY_TOTAL_FIELD_ID,
    FieldMap,
    get_field_id,
    get_field_ids,
    inventory_amount_field_id,
    inventory_desc_field_id,
    inventory_item_field_id,
    inventory_price_field_id,
)
from ..inventory import build_inventory
from ..rules.financials import (
    compute_estate_totals,
    should_skip_boxes_17_to_20,
    validate_totals,
)
from .digits import (
    pounds_to_currency_string,
    split_date_to_digits,
    split_number_to_digits,
)

logger = logging.getLogger(__name__)

FIRST_NAMES_FIELD_LENGTH = 40

# IHT400 is never completed for the excepted estates this engine handles
IHT400_COMPLETED = False
CLAIMING_TRANSFERABLE_NRB = False


class FieldKind(str, Enum):
    TEXT = "text"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    DROPDOWN = "dropdown"


FieldValue = Union[str, bool]


@dataclass
class DocumentFields:
    """Flat field-id -> value mapping, with the widget kind of every id."""
    values: Dict[str, FieldValue] = field(default_factory=dict)
    kinds: Dict[str, FieldKind] = field(default_factory=dict)

    def text(self, field_id: str, value: str) -> None:
        self._set(field_id, value, FieldKind.TEXT)

    def radio(self, field_id: str, value: str) -> None:
        self._set(field_id, value, FieldKind.RADIO)

    def checkbox(self, field_id: str, checked: bool) -> None:
        self._set(field_id, checked, FieldKind.CHECKBOX)

    def dropdown(self, field_id: str, value: str) -> None:
        self._set(field_id, value, FieldKind.DROPDOWN)

    def digits(self, field_ids: List[str], chars: List[str]) -> None:
        for field_id, char in zip(field_ids, chars):
            self.text(field_id, char)

    def _set(self, field_id: str, value: FieldValue, kind: FieldKind) -> None:
        self.values[field_id] = value
        self.kinds[field_id] = kind

    def as_mapping(self) -> Dict[str, FieldValue]:
        return dict(self.values)

    def __len__(self) -> int:
        return len(self.values)


@dataclass
class DocumentResult:
    totals: EstateTotals
    inventory: InventoryResult
    declaration: DeclarationOutput
    fields: Optional[DocumentFields] = None
    hard_stop: Optional[HardStop] = None


def split_first_names(first_names: str, width: int = FIRST_NAMES_FIELD_LENGTH) -> List[str]:
    """Box 2 is two fields; break at the last space that fits, else hard-split."""
    if len(first_names) <= width:
        return [first_names]
    split_at = first_names.rfind(" ", 0, width + 1)
    if split_at > 0:
        return [first_names[:split_at], first_names[split_at + 1:]]
    return [first_names[:width], first_names[width:]]


def overflow_stop(inventory: InventoryResult) -> HardStop:
    return HardStop(
        code="INVENTORY_OVERFLOW",
        message=(
            f"The estate needs {inventory.overflow_line_count} inventory lines but "
            f"form C1 holds {INVENTORY_MAX_LINES}. Continuation sheets (C2) are "
            f"not supported; please seek professional assistance."
        ),
    )


# =============================================================================
# PAGE BUILDERS
# =============================================================================

def _page_one(fields: DocumentFields, case: Case, fm: FieldMap, totals: EstateTotals) -> None:
    declarant = case.declarant
    address = declarant.address
    applicant_lines = [
        declarant.full_name,
        address.line1,
        address.line2,
        address.line3,
        f"{address.line4} {address.postcode}".strip(),
    ]
    for i, line in enumerate(applicant_lines, start=1):
        if line:
            fields.text(get_field_id(fm, f"applicant_name_line_{i}"), line)

    if case.your_reference:
        fields.text(get_field_id(fm, "applicant_reference"), case.your_reference)
    if case.hmrc_reference:
        fields.text(get_field_id(fm, "hmrc_reference"), case.hmrc_reference)

    deceased = case.deceased
    # Boxes 1-3
    fields.text(get_field_id(fm, "deceased_title"), deceased.title)
    first_name_ids = get_field_ids(fm, "deceased_first_names")
    for field_id, part in zip(first_name_ids, split_first_names(deceased.first_names)):
        fields.text(field_id, part)
    fields.text(get_field_id(fm, "deceased_surname"), deceased.surname)

    # Box 4
    for field_id, line in zip(get_field_ids(fm, "deceased_address"), deceased.address.lines):
        fields.text(field_id, line)
    fields.text(get_field_id(fm, "deceased_postcode"), deceased.address.postcode)

    # Boxes 5-8
    fields.text(get_field_id(fm, "deceased_occupation"), deceased.occupation)
    fields.digits(
        get_field_ids(fm, "deceased_date_of_birth"),
        split_date_to_digits(deceased.date_of_birth),
    )
    fields.digits(
        get_field_ids(fm, "deceased_date_of_death"),
        split_date_to_digits(deceased.date_of_death),
    )
    fields.text(get_field_id(fm, "deceased_place_of_death"), deceased.place_of_death)

    # Box 9
    fields.text(
        get_field_id(fm, "total_estate_for_confirmation"),
        pounds_to_currency_string(totals.confirmation_total),
    )

    # Box 10: up to four executors
    for number, executor in enumerate(case.executors[:MAX_EXECUTORS], start=1):
        name_address_ids = get_field_ids(fm, f"executor_{number}_name_address")
        lines = [executor.full_name, *executor.address.lines[:3]]
        for field_id, line in zip(name_address_ids, lines):
            if line:
                fields.text(field_id, line)
        fields.text(get_field_id(fm, f"executor_{number}_postcode"), executor.address.postcode)


def _page_two(fields: DocumentFields, case: Case, fm: FieldMap, declaration: DeclarationOutput) -> None:
    fields.text(get_field_id(fm, "declaration_by_executor"), declaration.declaration_by)
    fields.text(get_field_id(fm, "deceased_full_name_declaration"), declaration.deceased_name)
    fields.text(get_field_id(fm, "deceased_domicile"), declaration.domicile)
    fields.text(get_field_id(fm, "executor_status_and_appointment"), declaration.appointment_paragraph)
    fields.dropdown(get_field_id(fm, "other_executors_verb"), declaration.executor_verb)
    fields.dropdown(get_field_id(fm, "other_executors_gender"), declaration.executor_gender)
    if declaration.co_executor_names:
        fields.text(get_field_id(fm, "other_executors_names"), declaration.co_executor_names)
    fields.text(get_field_id(fm, "inventory_last_page_number"), declaration.inventory_last_page)
    fields.text(
        get_field_id(fm, "confirmation_value_total"),
        pounds_to_currency_string(declaration.confirmation_value),
    )
    fields.digits(
        get_field_ids(fm, "declaration_date"),
        split_date_to_digits(case.declaration_date),
    )


def _page_three(fields: DocumentFields, inventory: InventoryResult) -> None:
    for line in inventory.lines:
        if line.item_number:
            fields.text(inventory_item_field_id(line.line_number), line.item_number)
        if line.description:
            fields.text(inventory_desc_field_id(line.line_number), line.description)
        if line.price:
            fields.text(inventory_price_field_id(line.line_number), line.price)
        if line.amount:
            fields.text(inventory_amount_field_id(line.line_number), line.amount)
    # Viewers do not reliably run the form's auto-sum, so the total is written explicitly
    fields.text(INVENTORY_TOTAL_FIELD_ID, pounds_to_currency_string(inventory.total_pounds))


def _page_four(fields: DocumentFields, case: Case, fm: FieldMap, totals: EstateTotals) -> None:
    liabilities = totals.liability_totals
    # Boxes 11-15
    fields.text(get_field_id(fm, "gross_value_of_estate"), pounds_to_currency_string(totals.gross_value))
    fields.text(get_field_id(fm, "less_funeral_expenses"), pounds_to_currency_string(liabilities.funeral))
    fields.text(get_field_id(fm, "less_mortgage_or_security"), pounds_to_currency_string(liabilities.mortgage))
    fields.text(get_field_id(fm, "less_other_debts"), pounds_to_currency_string(liabilities.other_debt))
    fields.text(get_field_id(fm, "net_value_of_estate"), pounds_to_currency_string(totals.net_value))

    # Box 16
    fields.radio(get_field_id(fm, "iht400_completed"), RADIO_YES if IHT400_COMPLETED else RADIO_NO)
    if should_skip_boxes_17_to_20(IHT400_COMPLETED):
        return

    deceased = case.deceased
    # Box 17
    fields.radio(get_field_id(fm, "marital_status"), MARITAL_STATUS_VALUES[deceased.marital_status.value])
    # Box 18
    fields.checkbox(get_field_id(fm, "surviving_spouse"), deceased.surviving_spouse)
    fields.checkbox(get_field_id(fm, "surviving_parent"), deceased.surviving_parent)
    fields.checkbox(get_field_id(fm, "surviving_siblings"), deceased.surviving_siblings)
    # Box 19
    fields.digits(
        get_field_ids(fm, "number_of_children"),
        split_number_to_digits(deceased.number_of_children, 2),
    )
    fields.digits(
        get_field_ids(fm, "number_of_grandchildren"),
        split_number_to_digits(deceased.number_of_grandchildren, 3),
    )
    # Box 20
    if deceased.utr:
        fields.digits(get_field_ids(fm, "utr_unique_taxpayer_reference"), list(deceased.utr))
    if deceased.ni_number:
        fields.digits(get_field_ids(fm, "ni_number_national_insurance"), list(deceased.ni_number))


def _page_five(fields: DocumentFields, fm: FieldMap, totals: EstateTotals) -> None:
    # Box 21-22
    fields.radio(get_field_id(fm, "excepted_estate"), RADIO_YES if totals.is_excepted else RADIO_NO)
    fields.radio(
        get_field_id(fm, "transferable_nil_rate_band"),
        RADIO_YES if CLAIMING_TRANSFERABLE_NRB else RADIO_NO,
    )
    # Boxes 23-26
    fields.text(get_field_id(fm, "gross_value_for_inheritance_tax"), pounds_to_currency_string(totals.gross_value))
    fields.text(get_field_id(fm, "net_value_for_inheritance_tax"), pounds_to_currency_string(totals.net_value))
    fields.text(get_field_id(fm, "net_qualifying_value"), pounds_to_currency_string(totals.net_value))
    # Excepted estates pay no tax
    fields.text(get_field_id(fm, "total_tax_interest_payable"), "0")


# =============================================================================
# PUBLIC API
# =============================================================================

def build_document_fields(
    case: Case,
    field_map: FieldMap,
    totals: Optional[EstateTotals] = None,
    inventory: Optional[InventoryResult] = None,
    declaration: Optional[DeclarationOutput] = None,
) -> DocumentFields:
    """Map a case onto the form's field ids. Does not check for overflow."""
    totals = totals or compute_estate_totals(case, CLAIMING_TRANSFERABLE_NRB)
    inventory = inventory or build_inventory(case.assets)
    declaration = declaration or compose_declaration(case, totals.confirmation_total)

    fields = DocumentFields()
    _page_one(fields, case, field_map, totals)
    _page_two(fields, case, field_map, declaration)
    _page_three(fields, inventory)
    _page_four(fields, case, field_map, totals)
    _page_five(fields, field_map, totals)
    return fields


def assemble_document(case: Case, field_map: FieldMap) -> DocumentResult:
    """
    Run every engine over a case and produce the document's field values.

    Raises CaseValidationError if the totals do not cross-check.
    Returns a result carrying a hard stop (and no fields) if the inventory
    does not fit on the form.
    """
    errors = validate_totals(case)
    if errors:
        raise CaseValidationError(errors)

    totals = compute_estate_totals(case, CLAIMING_TRANSFERABLE_NRB)
    inventory = build_inventory(case.assets)
    declaration = compose_declaration(case, totals.confirmation_total)
    result = DocumentResult(totals=totals, inventory=inventory, declaration=declaration)

    if inventory.overflow:
        result.hard_stop = overflow_stop(inventory)
        logger.info(f"Document halted: {result.hard_stop.code}")
        return result

    result.fields = build_document_fields(
        case, field_map, totals=totals, inventory=inventory, declaration=declaration
    )
    logger.info(f"Assembled {len(result.fields)} field values")
    return result
