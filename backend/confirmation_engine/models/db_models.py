"""
Confirmation Engine - SQLAlchemy ORM Models
Persisted wizard drafts
"""
from datetime import datetime
from enum import Enum
from sqlalchemy import Column, String, Integer, DateTime, JSON, Enum as SQLEnum
from ..database import Base


class DraftKind(str, Enum):
    """What a stored payload holds."""
    CASE = "CASE"      # a complete, validated case snapshot
    WIZARD = "WIZARD"  # partial wizard answers, not validated


class CaseDraftDB(Base):
    """
    Versioned JSON snapshot of wizard data.

    Snapshots are re-validated on load; the row itself is never trusted.
    """
    __tablename__ = "case_drafts"

    id = Column(String(64), primary_key=True)
    kind = Column(SQLEnum(DraftKind, native_enum=False), primary_key=True, default=DraftKind.CASE)
    version = Column(Integer, nullable=False, default=1)
    payload = Column(JSON, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
