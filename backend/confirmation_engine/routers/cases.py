"""
Confirmation Engine - Cases API Router

Preview and field generation for a complete case, plus draft persistence.
Validation problems are 422s; eligibility-style stops (inventory overflow)
are ordinary 200 responses carrying a hard_stop.
"""
from __future__ import annotations
import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..constants import ASSET_COUNTRY_LABELS, ASSET_TYPE_LABELS
from ..database import get_db
from ..errors import CaseValidationError, FieldMapError, PreconditionError
from ..models.ssot import Case
from ..schemas import CaseSchema
from ..services.declaration import compose_declaration
from ..services.document import assemble_document
from ..services.field_map import load_field_map
from ..services.inventory import build_inventory
from ..services.rules import compute_estate_totals, validate_totals
from ..services.rules.financials import CONFIRMATION_COUNTRIES
from ..services import storage
from .eligibility import HardStopResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cases", tags=["cases"])


# =============================================================================
# PYDANTIC MODELS FOR API
# =============================================================================

class InventoryLineResponse(BaseModel):
    line_number: int
    item_number: str
    description: str
    price: str
    amount: str
    is_heading: bool
    is_subtotal: bool
    is_summary_line: bool


class AssetSummaryResponse(BaseModel):
    asset_id: str
    description: str
    type_label: str
    country_label: str
    deceased_share_value: int
    counts_for_confirmation: bool


class TotalsResponse(BaseModel):
    confirmation_total: int
    gross_value: int
    country_totals: Dict[str, int]
    funeral: int
    mortgage: int
    other_debt: int
    net_value: int
    is_excepted: bool


class PreviewResponse(BaseModel):
    totals: TotalsResponse
    assets: List[AssetSummaryResponse]
    inventory: List[InventoryLineResponse]
    overflow: bool
    overflow_line_count: int
    declaration: Dict[str, Union[str, int]]
    errors: List[str]


class FieldsResponse(BaseModel):
    fields: Dict[str, Union[bool, str]] = {}
    hard_stop: Optional[HardStopResponse] = None


class DraftSavedResponse(BaseModel):
    draft_id: str
    saved: bool = True


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _to_case(payload: CaseSchema) -> Case:
    try:
        return payload.to_case()
    except CaseValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors)


def _asset_summaries(case: Case) -> List[AssetSummaryResponse]:
    return [
        AssetSummaryResponse(
            asset_id=asset.asset_id,
            description=asset.description,
            type_label=ASSET_TYPE_LABELS[asset.asset_type.value],
            country_label=ASSET_COUNTRY_LABELS[asset.country.value],
            deceased_share_value=asset.deceased_share_value,
            counts_for_confirmation=asset.country in CONFIRMATION_COUNTRIES,
        )
        for asset in case.assets
    ]


def _totals_response(case: Case) -> TotalsResponse:
    totals = compute_estate_totals(case)
    return TotalsResponse(
        confirmation_total=totals.confirmation_total,
        gross_value=totals.gross_value,
        country_totals={country.value: value for country, value in totals.country_totals.items()},
        funeral=totals.liability_totals.funeral,
        mortgage=totals.liability_totals.mortgage,
        other_debt=totals.liability_totals.other_debt,
        net_value=totals.net_value,
        is_excepted=totals.is_excepted,
    )


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/preview", response_model=PreviewResponse)
async def preview(payload: CaseSchema):
    """Everything the preview page shows: totals, inventory, declaration, errors."""
    case = _to_case(payload)
    totals = _totals_response(case)
    inventory = build_inventory(case.assets)
    try:
        declaration = compose_declaration(case, totals.confirmation_total)
    except PreconditionError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return PreviewResponse(
        totals=totals,
        assets=_asset_summaries(case),
        inventory=[InventoryLineResponse(**asdict(line)) for line in inventory.lines],
        overflow=inventory.overflow,
        overflow_line_count=inventory.overflow_line_count,
        declaration=declaration.as_form_fields(),
        errors=validate_totals(case),
    )


@router.post("/fields", response_model=FieldsResponse)
async def fields(payload: CaseSchema):
    """Flat field-id -> value mapping for the PDF filler."""
    case = _to_case(payload)
    try:
        field_map = load_field_map()
    except FieldMapError as e:
        logger.error(f"Field map unavailable: {e}")
        raise HTTPException(status_code=500, detail="Field map unavailable")

    try:
        result = assemble_document(case, field_map)
    except CaseValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors)
    except PreconditionError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if result.hard_stop is not None:
        return FieldsResponse(
            hard_stop=HardStopResponse(code=result.hard_stop.code, message=result.hard_stop.message)
        )
    return FieldsResponse(fields=result.fields.as_mapping())


# -----------------------------------------------------------------------------
# Drafts
# -----------------------------------------------------------------------------

@router.put("/drafts/{draft_id}", response_model=DraftSavedResponse)
async def save_draft(draft_id: str, payload: CaseSchema, db: Session = Depends(get_db)):
    storage.save_case(db, draft_id, payload)
    return DraftSavedResponse(draft_id=draft_id)


@router.get("/drafts/{draft_id}")
async def get_draft(draft_id: str, db: Session = Depends(get_db)):
    case = storage.load_case(db, draft_id)
    if case is None:
        raise HTTPException(status_code=404, detail="Draft not found")
    return case.model_dump(mode="json", by_alias=True)


@router.delete("/drafts/{draft_id}")
async def delete_draft(draft_id: str, db: Session = Depends(get_db)):
    if not storage.clear_case(db, draft_id):
        raise HTTPException(status_code=404, detail="Draft not found")
    return {"draft_id": draft_id, "deleted": True}


@router.put("/wizard/{draft_id}", response_model=DraftSavedResponse)
async def save_wizard(draft_id: str, data: Dict[str, Any], db: Session = Depends(get_db)):
    storage.save_wizard_data(db, draft_id, data)
    return DraftSavedResponse(draft_id=draft_id)


@router.get("/wizard/{draft_id}")
async def get_wizard(draft_id: str, db: Session = Depends(get_db)):
    data = storage.load_wizard_data(db, draft_id)
    if data is None:
        raise HTTPException(status_code=404, detail="Wizard data not found")
    return data


@router.delete("/wizard/{draft_id}")
async def delete_wizard(draft_id: str, db: Session = Depends(get_db)):
    if not storage.clear_wizard_data(db, draft_id):
        raise HTTPException(status_code=404, detail="Wizard data not found")
    return {"draft_id": draft_id, "deleted": True}
