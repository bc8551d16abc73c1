"""
Confirmation Engine - Constants

Fixed vocabulary of the C1 (2022) confirmation form.
Thresholds live here and nowhere else.
"""
from datetime import date
from enum import Enum
from typing import Dict


# =============================================================================
# THRESHOLDS
# =============================================================================

SMALL_ESTATE_THRESHOLD = 36_000
NIL_RATE_BAND = 325_000
TRANSFERABLE_NRB_LIMIT = 650_000
MIN_DEATH_DATE = date(2022, 1, 1)

INVENTORY_MAX_LINES = 37
EXPECTED_FILLABLE_FIELD_COUNT = 262

# The form has no continuation sheet support, so the inventory always ends on page 3
INVENTORY_LAST_PAGE = "3"

MAX_EXECUTORS = 4


# =============================================================================
# ENUMS
# =============================================================================

class Sheriffdom(str, Enum):
    GLASGOW_AND_STRATHKELVIN = "Glasgow and Strathkelvin"
    GRAMPIAN_HIGHLAND_AND_ISLANDS = "Grampian, Highland and Islands"
    LOTHIAN_AND_BORDERS = "Lothian and Borders"
    NORTH_STRATHCLYDE = "North Strathclyde"
    SOUTH_STRATHCLYDE_DUMFRIES_AND_GALLOWAY = "South Strathclyde, Dumfries and Galloway"
    TAYSIDE_CENTRAL_AND_FIFE = "Tayside, Central and Fife"


class AssetType(str, Enum):
    HERITABLE_PROPERTY = "heritable_property"
    BANK_ACCOUNT = "bank_account"
    BUILDING_SOCIETY = "building_society"
    SHARES = "shares"
    HOUSEHOLD_GOODS = "household_goods"
    MOTOR_VEHICLE = "motor_vehicle"
    PENSION = "pension"
    NS_I = "ns_i"
    PREMIUM_BONDS = "premium_bonds"
    OTHER = "other"

    @property
    def is_heritable(self) -> bool:
        return self in HERITABLE_TYPES


class AssetCountry(str, Enum):
    """Where an asset is situated. Only the first three count towards confirmation."""
    SCOTLAND = "scotland"
    ENGLAND_WALES = "england_wales"
    NORTHERN_IRELAND = "northern_ireland"
    ELSEWHERE = "elsewhere"


class LiabilityType(str, Enum):
    FUNERAL = "funeral"
    MORTGAGE = "mortgage"
    OTHER_DEBT = "other_debt"


class MaritalStatus(str, Enum):
    MARRIED = "married"
    SINGLE = "single"
    DIVORCED = "divorced"
    WIDOWED = "widowed"


class Gender(str, Enum):
    """Selects the Executor / Executrix wording."""
    MALE = "male"
    FEMALE = "female"


class ExecutorStatusKind(str, Enum):
    ACTIVE = "active"
    DECLINED = "declined"
    DECEASED = "deceased"


HERITABLE_TYPES = frozenset({AssetType.HERITABLE_PROPERTY})


# =============================================================================
# FORM OPTION TOKENS
# =============================================================================

# Marital status radio values (the leading space is part of the export value)
MARITAL_STATUS_VALUES: Dict[str, str] = {
    MaritalStatus.MARRIED.value: "/ M",
    MaritalStatus.SINGLE.value: "/ S",
    MaritalStatus.DIVORCED.value: "/ D",
    MaritalStatus.WIDOWED.value: "/ W",
}

RADIO_YES = "/Yes"
RADIO_NO = "/No"

# Dropdowns C1_21a and C1_21b
EXECUTOR_VERB_SINGLE = "/ am"
EXECUTOR_VERB_MULTIPLE = "/ are"
EXECUTOR_GENDER_MALE = "/ Executor"
EXECUTOR_GENDER_FEMALE = "/ Executrix"


# =============================================================================
# LABELS
# =============================================================================

ASSET_TYPE_LABELS: Dict[str, str] = {
    AssetType.HERITABLE_PROPERTY.value: "Heritable Property (Land/Buildings)",
    AssetType.BANK_ACCOUNT.value: "Bank Account",
    AssetType.BUILDING_SOCIETY.value: "Building Society Account",
    AssetType.SHARES.value: "Stocks and Shares",
    AssetType.HOUSEHOLD_GOODS.value: "Household Goods and Personal Effects",
    AssetType.MOTOR_VEHICLE.value: "Motor Vehicle",
    AssetType.PENSION.value: "Pension Arrears",
    AssetType.NS_I.value: "National Savings & Investments",
    AssetType.PREMIUM_BONDS.value: "Premium Bonds",
    AssetType.OTHER.value: "Other",
}

ASSET_COUNTRY_LABELS: Dict[str, str] = {
    AssetCountry.SCOTLAND.value: "Scotland",
    AssetCountry.ENGLAND_WALES.value: "England and Wales",
    AssetCountry.NORTHERN_IRELAND.value: "Northern Ireland",
    AssetCountry.ELSEWHERE.value: "Elsewhere (outside UK)",
}
