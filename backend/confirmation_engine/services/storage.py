"""
Confirmation Engine - Draft Storage

Saves and restores wizard state. A stored case is only a snapshot: it is
re-validated through CaseSchema on every load, and anything that no longer
validates is treated as absent.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from ..models.db_models import CaseDraftDB, DraftKind
from ..schemas import CASE_VERSION, CaseSchema

logger = logging.getLogger(__name__)


def _get(db: Session, draft_id: str, kind: DraftKind) -> Optional[CaseDraftDB]:
    return db.get(CaseDraftDB, (draft_id, kind))


def _put(db: Session, draft_id: str, kind: DraftKind, payload: Dict[str, Any], version: int) -> None:
    row = _get(db, draft_id, kind)
    if row is None:
        row = CaseDraftDB(id=draft_id, kind=kind)
        db.add(row)
    row.payload = payload
    row.version = version
    db.commit()


def _delete(db: Session, draft_id: str, kind: DraftKind) -> bool:
    row = _get(db, draft_id, kind)
    if row is None:
        return False
    db.delete(row)
    db.commit()
    return True


# =============================================================================
# COMPLETE CASES
# =============================================================================

def save_case(db: Session, draft_id: str, case: CaseSchema) -> None:
    payload = case.model_dump(mode="json", by_alias=True)
    _put(db, draft_id, DraftKind.CASE, payload, case.version)


def load_case(db: Session, draft_id: str) -> Optional[CaseSchema]:
    """Return the stored case, or None if missing, outdated or invalid."""
    row = _get(db, draft_id, DraftKind.CASE)
    if row is None:
        return None
    if row.version != CASE_VERSION:
        logger.warning(f"Draft {draft_id} has version {row.version}, expected {CASE_VERSION}")
        return None
    try:
        return CaseSchema.model_validate(row.payload)
    except ValidationError as exc:
        logger.warning(f"Draft {draft_id} failed re-validation: {exc.error_count()} error(s)")
        return None


def clear_case(db: Session, draft_id: str) -> bool:
    return _delete(db, draft_id, DraftKind.CASE)


# =============================================================================
# PARTIAL WIZARD DATA
# =============================================================================

def save_wizard_data(db: Session, draft_id: str, data: Dict[str, Any]) -> None:
    _put(db, draft_id, DraftKind.WIZARD, data, CASE_VERSION)


def load_wizard_data(db: Session, draft_id: str) -> Optional[Dict[str, Any]]:
    row = _get(db, draft_id, DraftKind.WIZARD)
    if row is None or not isinstance(row.payload, dict):
        return None
    return row.payload


def clear_wizard_data(db: Session, draft_id: str) -> bool:
    return _delete(db, draft_id, DraftKind.WIZARD)
