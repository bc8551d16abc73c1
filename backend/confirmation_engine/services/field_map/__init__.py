"""Confirmation Engine - Field Map

Lookup table from semantic keys to PDF field ids, plus the inventory id builders.
"""
from .loader import (
    FieldMap,
    FieldMapField,
    FieldMapSection,
    load_field_map,
    parse_field_map,
    set_field_map_cache,
    clear_field_map_cache,
    get_field_id,
    get_field_ids,
)
from .inventory_ids import (
    INVENTORY_TOTAL_FIELD_ID,
    inventory_item_field_id,
    inventory_desc_field_id,
    inventory_price_field_id,
    inventory_amount_field_id,
)

__all__ = [
    "FieldMap",
    "FieldMapField",
    "FieldMapSection",
    "load_field_map",
    "parse_field_map",
    "set_field_map_cache",
    "clear_field_map_cache",
    "get_field_id",
    "get_field_ids",
    "INVENTORY_TOTAL_FIELD_ID",
    "inventory_item_field_id",
    "inventory_desc_field_id",
    "inventory_price_field_id",
    "inventory_amount_field_id",
]
