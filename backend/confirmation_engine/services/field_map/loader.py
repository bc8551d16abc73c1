"""
Confirmation Engine - Field Map

The field map is a versioned JSON file describing the fillable fields of
the C1 (2022) PDF and the semantic keys ("deceased_date_of_birth") that
point at them. A map with the wrong field count is rejected before any
value is produced.
"""
from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from ...constants import EXPECTED_FILLABLE_FIELD_COUNT
from ...errors import FieldMapError

logger = logging.getLogger(__name__)

DEFAULT_FIELD_MAP_PATH = Path(__file__).resolve().parents[2] / "data" / "c1_2022_field_map.json"
FIELD_MAP_PATH = os.getenv("FIELD_MAP_PATH", str(DEFAULT_FIELD_MAP_PATH))


# =============================================================================
# FILE FORMAT
# =============================================================================

class FieldOption(BaseModel):
    value: str
    label: str


class FieldMapField(BaseModel):
    field_id: str
    field_name: str
    field_type: str
    max_length: Optional[int] = None
    options: Optional[List[FieldOption]] = None
    checked_value: Optional[str] = None
    unchecked_value: Optional[str] = None
    calculated: bool = False
    guidance: Optional[str] = None


class ExecutorSubsection(BaseModel):
    executor_number: int
    fields: List[FieldMapField] = Field(default_factory=list)


class InventoryColumn(BaseModel):
    column_name: str
    fields: List[FieldMapField] = Field(default_factory=list)


class InventoryTable(BaseModel):
    columns: List[InventoryColumn] = Field(default_factory=list)
    total_field: FieldMapField


class FieldMapSection(BaseModel):
    section_id: str
    section_name: str
    page: int
    fields: Optional[List[FieldMapField]] = None
    subsections: Optional[List[ExecutorSubsection]] = None
    inventory_table: Optional[InventoryTable] = None


class FormMetadata(BaseModel):
    fillable_field_count: int
    total_pdf_fields_including_containers: Optional[int] = None


class FieldMap(BaseModel):
    form_metadata: FormMetadata
    wizard_field_suggestions: Dict[str, Union[str, List[str]]]
    sections: List[FieldMapSection] = Field(default_factory=list)


# =============================================================================
# LOADING
# =============================================================================

_cache: Dict[str, FieldMap] = {}


def parse_field_map(data: dict) -> FieldMap:
    """Validate raw field map data. Raises FieldMapError on any mismatch."""
    try:
        field_map = FieldMap.model_validate(data)
    except ValidationError as exc:
        raise FieldMapError(f"Malformed field map: {exc}") from exc

    count = field_map.form_metadata.fillable_field_count
    if count != EXPECTED_FILLABLE_FIELD_COUNT:
        raise FieldMapError(
            f"Field map expects {EXPECTED_FILLABLE_FIELD_COUNT} fillable fields, got {count}"
        )
    return field_map


def load_field_map(path: Optional[Union[str, Path]] = None) -> FieldMap:
    """Load (once per path) and validate the field map."""
    key = str(path or FIELD_MAP_PATH)
    if key in _cache:
        return _cache[key]

    try:
        with open(key, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise FieldMapError(f"Failed to load field map from {key}: {exc}") from exc

    field_map = parse_field_map(data)
    logger.info(
        f"Loaded field map {key} "
        f"({len(field_map.wizard_field_suggestions)} suggestion keys)"
    )
    _cache[key] = field_map
    return field_map


def set_field_map_cache(field_map: FieldMap, path: Optional[Union[str, Path]] = None) -> None:
    """Inject a pre-loaded field map (tests)."""
    _cache[str(path or FIELD_MAP_PATH)] = field_map


def clear_field_map_cache() -> None:
    _cache.clear()


# =============================================================================
# LOOKUPS
# =============================================================================

def get_field_id(field_map: FieldMap, suggestion_key: str) -> str:
    value = field_map.wizard_field_suggestions.get(suggestion_key)
    if not value or isinstance(value, list):
        raise FieldMapError(
            f'Expected single field ID for key "{suggestion_key}", got {value!r}'
        )
    return value


def get_field_ids(field_map: FieldMap, suggestion_key: str) -> List[str]:
    value = field_map.wizard_field_suggestions.get(suggestion_key)
    if not value or not isinstance(value, list):
        raise FieldMapError(
            f'Expected array of field IDs for key "{suggestion_key}", got {value!r}'
        )
    return value
