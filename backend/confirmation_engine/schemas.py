"""
Confirmation Engine - Boundary Schemas

Pydantic models for the wizard's JSON (camelCase keys, version 1).
Everything is validated here; CaseSchema.to_case() then builds the
immutable Case the engines consume.
"""
from __future__ import annotations
from datetime import date
from typing import Annotated, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    model_validator,
)
from pydantic.alias_generators import to_camel

from .constants import (
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
from .models.ssot import (
    ActiveStatus,
    Address,
    Asset,
    Case,
    Deceased,
    DeceasedStatus,
    DeclinedStatus,
    Executor,
    ExecutorStatus,
    Liability,
    WillDative,
    WillNominate,
)
from .services.declaration.formatting import to_date

IsoDate = Annotated[date, BeforeValidator(to_date)]
WholePounds = Annotated[int, Field(strict=True, ge=0)]
CASE_VERSION = 1


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# ELIGIBILITY
# =============================================================================

class EligibilityAnswers(BaseModel):
    """Screening questions; keys match the wizard's eligibility step."""
    model_config = ConfigDict(populate_by_name=True)

    date_of_death_on_or_after_2022: bool = Field(False, alias="dateOfDeathOnOrAfter2022")
    domiciled_in_scotland: bool = Field(False, alias="domiciledInScotland")
    gross_estate_under_nrb: bool = Field(False, alias="grossEstateUnderNRB")
    has_business_interests: bool = Field(False, alias="hasBusinessInterests")
    has_agricultural_land: bool = Field(False, alias="hasAgriculturalLand")
    has_foreign_property: bool = Field(False, alias="hasForeignProperty")
    has_ongoing_litigation: bool = Field(False, alias="hasOngoingLitigation")
    has_valid_will: bool = Field(False, alias="hasValidWill")
    will_is_disputed: Optional[bool] = Field(None, alias="willIsDisputed")

    def as_answers(self) -> dict:
        """Answers keyed the way the eligibility gate reads them."""
        return {
            key: bool(value)
            for key, value in self.model_dump(by_alias=True).items()
        }


# =============================================================================
# CASE
# =============================================================================

class AddressSchema(CamelModel):
    line1: str = Field(..., min_length=1, max_length=40)
    line2: str = Field("", max_length=40)
    line3: str = Field("", max_length=40)
    line4: str = Field("", max_length=40)
    postcode: str = Field(..., min_length=1, max_length=10)

    def to_address(self) -> Address:
        return Address(
            line1=self.line1,
            line2=self.line2,
            line3=self.line3,
            line4=self.line4,
            postcode=self.postcode,
        )


class DeceasedSchema(CamelModel):
    title: str = Field(..., min_length=1, max_length=10)
    first_names: str = Field(..., min_length=1, max_length=80)
    surname: str = Field(..., min_length=1, max_length=40)
    address: AddressSchema
    occupation: str = Field(..., min_length=1, max_length=40)
    date_of_birth: IsoDate
    date_of_death: IsoDate
    place_of_death: str = Field(..., min_length=1, max_length=40)
    marital_status: MaritalStatus
    surviving_spouse: bool
    surviving_parent: bool
    surviving_siblings: bool
    number_of_children: int = Field(..., ge=0, le=99)
    number_of_grandchildren: int = Field(..., ge=0, le=999)
    utr: str = Field("", max_length=10)
    ni_number: str = Field("", max_length=9)

    @model_validator(mode="after")
    def check_dates(self) -> "DeceasedSchema":
        if self.date_of_death < MIN_DEATH_DATE:
            raise ValueError(
                f"Date of death must be on or after {MIN_DEATH_DATE.isoformat()}"
            )
        if self.date_of_birth > self.date_of_death:
            raise ValueError("Date of birth cannot be after date of death")
        return self

    def to_deceased(self) -> Deceased:
        return Deceased(
            title=self.title,
            first_names=self.first_names,
            surname=self.surname,
            address=self.address.to_address(),
            occupation=self.occupation,
            date_of_birth=self.date_of_birth,
            date_of_death=self.date_of_death,
            place_of_death=self.place_of_death,
            marital_status=self.marital_status,
            surviving_spouse=self.surviving_spouse,
            surviving_parent=self.surviving_parent,
            surviving_siblings=self.surviving_siblings,
            number_of_children=self.number_of_children,
            number_of_grandchildren=self.number_of_grandchildren,
            utr=self.utr,
            ni_number=self.ni_number,
        )


class ExecutorSchema(CamelModel):
    full_name: str = Field(..., min_length=1, max_length=80)
    relationship: str = Field(..., min_length=1, max_length=40)
    gender: Gender
    address: AddressSchema
    is_declarant: bool
    status: ExecutorStatusKind
    declined_date: Optional[IsoDate] = None
    deceased_date: Optional[IsoDate] = None

    def to_status(self) -> ExecutorStatus:
        if self.status == ExecutorStatusKind.DECLINED:
            return DeclinedStatus(letter_date=self.declined_date)
        if self.status == ExecutorStatusKind.DECEASED:
            return DeceasedStatus(date_of_death=self.deceased_date)
        return ActiveStatus()

    def to_executor(self) -> Executor:
        return Executor(
            full_name=self.full_name,
            relationship=self.relationship,
            gender=self.gender,
            address=self.address.to_address(),
            is_declarant=self.is_declarant,
            status=self.to_status(),
        )


class WillNominateSchema(CamelModel):
    has_will: Literal[True]
    executor_type: Literal["nominate"] = "nominate"
    will_date: IsoDate
    has_codicils: bool = False
    codicil_dates: List[IsoDate] = Field(default_factory=list)

    def to_will(self) -> WillNominate:
        codicils = tuple(self.codicil_dates) if self.has_codicils else ()
        return WillNominate(will_date=self.will_date, codicil_dates=codicils)


class WillDativeSchema(CamelModel):
    has_will: Literal[False]
    executor_type: Literal["dative"] = "dative"
    sheriffdom_of_decree: Sheriffdom
    date_of_decree: IsoDate

    def to_will(self) -> WillDative:
        return WillDative(
            sheriffdom_of_decree=self.sheriffdom_of_decree,
            decree_date=self.date_of_decree,
        )


class AssetSchema(CamelModel):
    id: str = ""
    type: AssetType
    country: AssetCountry
    description: str = Field(..., min_length=1)
    full_value: WholePounds
    deceased_share_value: WholePounds
    joint_ownership: bool
    survivorship_clause: bool = False

    def to_asset(self) -> Asset:
        return Asset(
            asset_type=self.type,
            country=self.country,
            description=self.description,
            full_value=self.full_value,
            deceased_share_value=self.deceased_share_value,
            joint_ownership=self.joint_ownership,
            survivorship_clause=self.survivorship_clause,
            asset_id=self.id,
        )


class LiabilitySchema(CamelModel):
    id: str = ""
    type: LiabilityType
    description: str = Field(..., min_length=1)
    amount: WholePounds

    def to_liability(self) -> Liability:
        return Liability(
            liability_type=self.type,
            description=self.description,
            amount=self.amount,
            liability_id=self.id,
        )


class CaseSchema(CamelModel):
    version: Literal[1] = CASE_VERSION
    sheriffdom: Sheriffdom
    deceased: DeceasedSchema
    executors: List[ExecutorSchema] = Field(..., min_length=1, max_length=MAX_EXECUTORS)
    will: Union[WillNominateSchema, WillDativeSchema]
    assets: List[AssetSchema] = Field(default_factory=list)
    liabilities: List[LiabilitySchema] = Field(default_factory=list)
    declaration_date: IsoDate
    current_step: str = "eligibility"
    your_reference: str = Field("", max_length=20)
    hmrc_reference: str = Field("", max_length=20)

    @model_validator(mode="after")
    def check_executors(self) -> "CaseSchema":
        declarants = sum(1 for e in self.executors if e.is_declarant)
        if declarants != 1:
            raise ValueError(f"Exactly one executor must be the declarant (found {declarants})")
        if not any(e.status == ExecutorStatusKind.ACTIVE for e in self.executors):
            raise ValueError("At least one executor must be active")
        return self

    def to_case(self) -> Case:
        return Case(
            sheriffdom=self.sheriffdom,
            deceased=self.deceased.to_deceased(),
            executors=tuple(e.to_executor() for e in self.executors),
            will=self.will.to_will(),
            assets=tuple(a.to_asset() for a in self.assets),
            liabilities=tuple(l.to_liability() for l in self.liabilities),
            declaration_date=self.declaration_date,
            your_reference=self.your_reference,
            hmrc_reference=self.hmrc_reference,
            version=self.version,
        )
