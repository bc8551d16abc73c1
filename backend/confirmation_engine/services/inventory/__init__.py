"""Confirmation Engine - Inventory Builder"""
from .builder import (
    build_inventory,
    InventorySection,
    INVENTORY_SECTIONS,
    NIL,
    TOTAL_FOR_CONFIRMATION,
)

__all__ = [
    "build_inventory",
    "InventorySection",
    "INVENTORY_SECTIONS",
    "NIL",
    "TOTAL_FOR_CONFIRMATION",
]
