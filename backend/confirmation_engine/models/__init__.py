"""Confirmation Engine - Data Models"""
from .ssot import (
    # Case
    Address, Deceased, Executor, ExecutorStatus,
    ActiveStatus, DeclinedStatus, DeceasedStatus,
    WillNominate, WillDative, WillDetails,
    Asset, Liability, Case,
    # Derived
    HardStop, LiabilityTotals, EstateTotals,
    InventoryLine, InventoryResult, DeclarationOutput,
)

__all__ = [
    "Address", "Deceased", "Executor", "ExecutorStatus",
    "ActiveStatus", "DeclinedStatus", "DeceasedStatus",
    "WillNominate", "WillDative", "WillDetails",
    "Asset", "Liability", "Case",
    "HardStop", "LiabilityTotals", "EstateTotals",
    "InventoryLine", "InventoryResult", "DeclarationOutput",
]
