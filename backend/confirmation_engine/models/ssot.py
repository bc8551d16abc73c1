"""
Confirmation Engine - Single Source of Truth Models

The Case is the only input to every engine. It is immutable: engines derive
InventoryResult, DeclarationOutput and EstateTotals from it and never
write back. Invalid cases are rejected here, at construction, so the
engines can assume the invariants unconditionally.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Tuple, Type, Union

from ..constants import (
    MAX_EXECUTORS,
    MIN_DEATH_DATE,
    AssetCountry,
    AssetType,
    ExecutorStatusKind,
    Gender,
    LiabilityType,
    MaritalStatus,
    Sheriffdom,
)
from ..errors import CaseValidationError


def _whole_pounds_errors(label: str, value) -> List[str]:
    if isinstance(value, bool) or not isinstance(value, int):
        return [f"{label} must be a whole number of pounds."]
    if value < 0:
        return [f"{label} cannot be negative."]
    return []


def _coerce_enum(obj, attr: str, enum_cls: Type[Enum], label: str) -> List[str]:
    """Swap a raw value for its enum member in place; report it if unknown."""
    value = getattr(obj, attr)
    try:
        member = enum_cls(value)
    except (ValueError, TypeError):
        allowed = ", ".join(m.value for m in enum_cls)
        return [f"{label} {value!r} is not one of: {allowed}."]
    object.__setattr__(obj, attr, member)
    return []


# =============================================================================
# PEOPLE
# =============================================================================

@dataclass(frozen=True)
class Address:
    line1: str
    line2: str = ""
    line3: str = ""
    line4: str = ""
    postcode: str = ""

    @property
    def lines(self) -> Tuple[str, str, str, str]:
        return (self.line1, self.line2, self.line3, self.line4)


@dataclass(frozen=True)
class Deceased:
    """The deceased person (boxes 1-8 and 17-20 of the form)."""
    title: str
    first_names: str
    surname: str
    address: Address
    date_of_birth: date
    date_of_death: date
    occupation: str = ""
    place_of_death: str = ""
    marital_status: MaritalStatus = MaritalStatus.SINGLE
    surviving_spouse: bool = False
    surviving_parent: bool = False
    surviving_siblings: bool = False
    number_of_children: int = 0
    number_of_grandchildren: int = 0
    utr: str = ""
    ni_number: str = ""

    def __post_init__(self):
        errors = _coerce_enum(self, "marital_status", MaritalStatus, "Marital status")
        if self.date_of_death < MIN_DEATH_DATE:
            errors.append(
                f"Date of death must be on or after {MIN_DEATH_DATE.isoformat()}."
            )
        if self.date_of_birth > self.date_of_death:
            errors.append("Date of birth cannot be after date of death.")
        if self.number_of_children < 0 or self.number_of_grandchildren < 0:
            errors.append("Numbers of children and grandchildren cannot be negative.")
        if errors:
            raise CaseValidationError(errors)

    @property
    def full_name(self) -> str:
        return f"{self.first_names} {self.surname}"


# -----------------------------------------------------------------------------
# Executor lifecycle: one variant per status, each carrying its own date
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ActiveStatus:
    kind: ClassVar[ExecutorStatusKind] = ExecutorStatusKind.ACTIVE


@dataclass(frozen=True)
class DeclinedStatus:
    """Executor declined to act; letter_date is the date of the letter of declinature."""
    kind: ClassVar[ExecutorStatusKind] = ExecutorStatusKind.DECLINED
    letter_date: Optional[date] = None


@dataclass(frozen=True)
class DeceasedStatus:
    kind: ClassVar[ExecutorStatusKind] = ExecutorStatusKind.DECEASED
    date_of_death: Optional[date] = None


ExecutorStatus = Union[ActiveStatus, DeclinedStatus, DeceasedStatus]


@dataclass(frozen=True)
class Executor:
    full_name: str
    relationship: str
    gender: Gender
    address: Address
    is_declarant: bool = False
    status: ExecutorStatus = field(default_factory=ActiveStatus)

    def __post_init__(self):
        errors = _coerce_enum(self, "gender", Gender, "Gender")
        if not isinstance(self.status, (ActiveStatus, DeclinedStatus, DeceasedStatus)):
            errors.append(f"Executor status {self.status!r} is not a known status.")
        if errors:
            raise CaseValidationError(errors)

    @property
    def is_active(self) -> bool:
        return self.status.kind == ExecutorStatusKind.ACTIVE


# =============================================================================
# WILL / NO WILL
# =============================================================================

@dataclass(frozen=True)
class WillNominate:
    """A valid will exists: the executors are Executors Nominate."""
    has_will: ClassVar[bool] = True
    will_date: date
    codicil_dates: Tuple[date, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "codicil_dates", tuple(self.codicil_dates))


@dataclass(frozen=True)
class WillDative:
    """No will: the declarant was appointed Executor Dative by the sheriff."""
    has_will: ClassVar[bool] = False
    sheriffdom_of_decree: Sheriffdom
    decree_date: date

    def __post_init__(self):
        errors = _coerce_enum(self, "sheriffdom_of_decree", Sheriffdom, "Sheriffdom of decree")
        if errors:
            raise CaseValidationError(errors)


WillDetails = Union[WillNominate, WillDative]


# =============================================================================
# ESTATE
# =============================================================================

@dataclass(frozen=True)
class Asset:
    asset_type: AssetType
    country: AssetCountry
    description: str
    full_value: int
    deceased_share_value: int
    joint_ownership: bool = False
    # Only meaningful for heritable property
    survivorship_clause: bool = False
    asset_id: str = ""

    def __post_init__(self):
        errors = _coerce_enum(self, "asset_type", AssetType, "Asset type")
        errors += _coerce_enum(self, "country", AssetCountry, "Asset country")
        errors += _whole_pounds_errors("Full value", self.full_value)
        errors += _whole_pounds_errors("Deceased's share value", self.deceased_share_value)
        if errors:
            raise CaseValidationError(errors)

    @property
    def is_heritable(self) -> bool:
        return self.asset_type.is_heritable


@dataclass(frozen=True)
class Liability:
    liability_type: LiabilityType
    description: str
    amount: int
    liability_id: str = ""

    def __post_init__(self):
        errors = _coerce_enum(self, "liability_type", LiabilityType, "Liability type")
        errors += _whole_pounds_errors("Liability amount", self.amount)
        if errors:
            raise CaseValidationError(errors)


# =============================================================================
# CASE
# =============================================================================

@dataclass(frozen=True)
class Case:
    """
    Immutable snapshot of everything collected about one estate.

    Invariants (checked on construction):
    - 1 to 4 executors
    - exactly one executor is the declarant
    - at least one executor is active
    """
    sheriffdom: Sheriffdom
    deceased: Deceased
    executors: Tuple[Executor, ...]
    will: WillDetails
    declaration_date: date
    assets: Tuple[Asset, ...] = ()
    liabilities: Tuple[Liability, ...] = ()
    your_reference: str = ""
    hmrc_reference: str = ""
    version: int = 1

    def __post_init__(self):
        object.__setattr__(self, "executors", tuple(self.executors))
        object.__setattr__(self, "assets", tuple(self.assets))
        object.__setattr__(self, "liabilities", tuple(self.liabilities))

        errors = _coerce_enum(self, "sheriffdom", Sheriffdom, "Sheriffdom")
        if not isinstance(self.will, (WillNominate, WillDative)):
            errors.append(f"Will details {self.will!r} are neither nominate nor dative.")
        if not 1 <= len(self.executors) <= MAX_EXECUTORS:
            errors.append(f"A case needs between 1 and {MAX_EXECUTORS} executors.")
        declarants = [e for e in self.executors if e.is_declarant]
        if len(declarants) != 1:
            errors.append(
                f"Exactly one executor must be the declarant (found {len(declarants)})."
            )
        if not any(e.is_active for e in self.executors):
            errors.append("At least one executor must be active.")
        if errors:
            raise CaseValidationError(errors)

    @property
    def declarant(self) -> Executor:
        return next(e for e in self.executors if e.is_declarant)

    @property
    def active_executors(self) -> List[Executor]:
        return [e for e in self.executors if e.is_active]

    @property
    def co_executors(self) -> List[Executor]:
        """Active executors other than the declarant."""
        return [e for e in self.executors if e.is_active and not e.is_declarant]


# =============================================================================
# DERIVED OUTPUTS
# =============================================================================

@dataclass(frozen=True)
class HardStop:
    """A known, user-facing reason the case cannot proceed."""
    code: str
    message: str


@dataclass(frozen=True)
class LiabilityTotals:
    funeral: int = 0
    mortgage: int = 0
    other_debt: int = 0

    @property
    def total(self) -> int:
        return self.funeral + self.mortgage + self.other_debt


@dataclass(frozen=True)
class EstateTotals:
    """Every figure the form prints, computed once per case."""
    confirmation_total: int
    country_totals: Dict[AssetCountry, int]
    liability_totals: LiabilityTotals
    net_value: int
    is_excepted: bool

    @property
    def gross_value(self) -> int:
        return self.confirmation_total


@dataclass(frozen=True)
class InventoryLine:
    """One row of the 37-line inventory table on page 3."""
    line_number: int
    item_number: str = ""
    description: str = ""
    # Full value, shown for jointly owned assets and summary subtotals
    price: str = ""
    # Deceased's share; this column is auto-summed by the form
    amount: str = ""
    is_heading: bool = False
    is_subtotal: bool = False
    is_summary_line: bool = False


@dataclass(frozen=True)
class InventoryResult:
    lines: Tuple[InventoryLine, ...]
    total_pounds: int
    overflow: bool
    overflow_line_count: int


@dataclass(frozen=True)
class DeclarationOutput:
    """Values for the declaration page (C1_17 to C1_23)."""
    declaration_by: str
    deceased_name: str
    domicile: str
    appointment_paragraph: str
    executor_verb: str
    executor_gender: str
    co_executor_names: str
    inventory_last_page: str
    confirmation_value: int

    def as_form_fields(self) -> Dict[str, Union[str, int]]:
        return {
            "C1_17": self.declaration_by,
            "C1_18": self.deceased_name,
            "C1_19": self.domicile,
            "C1_20": self.appointment_paragraph,
            "C1_21a": self.executor_verb,
            "C1_21b": self.executor_gender,
            "C1_21c": self.co_executor_names,
            "C1_22": self.inventory_last_page,
            "C1_23": self.confirmation_value,
        }
