"""
Shared fixtures: a small family of builders for cases, executors and assets.
"""
import os
import sys
from datetime import date

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from confirmation_engine.constants import (
    AssetCountry,
    AssetType,
    Gender,
    LiabilityType,
    MaritalStatus,
    Sheriffdom,
)
from confirmation_engine.models.ssot import (
    ActiveStatus,
    Address,
    Asset,
    Case,
    Deceased,
    Executor,
    Liability,
    WillDative,
    WillNominate,
)


BASE_ADDRESS = Address(line1="10 High Street", line2="Edinburgh", postcode="EH1 1AA")

BASE_DECEASED = Deceased(
    title="Mrs",
    first_names="Margaret Anne",
    surname="Smith",
    address=Address(line1="5 Low Road", line2="Edinburgh", postcode="EH2 2BB"),
    occupation="Teacher (retired)",
    date_of_birth=date(1940, 5, 12),
    date_of_death=date(2023, 8, 15),
    place_of_death="Edinburgh",
    marital_status=MaritalStatus.WIDOWED,
    surviving_siblings=True,
    number_of_children=2,
    number_of_grandchildren=3,
)


def make_executor(**overrides) -> Executor:
    values = dict(
        full_name="James Smith",
        relationship="son",
        gender=Gender.MALE,
        address=BASE_ADDRESS,
        is_declarant=True,
        status=ActiveStatus(),
    )
    values.update(overrides)
    return Executor(**values)


def make_co_executor(**overrides) -> Executor:
    values = dict(
        full_name="Mary Brown",
        relationship="daughter",
        gender=Gender.FEMALE,
        address=Address(line1="20 Queen Street", line2="Glasgow", postcode="G1 1AA"),
        is_declarant=False,
    )
    values.update(overrides)
    return make_executor(**values)


def make_asset(**overrides) -> Asset:
    values = dict(
        asset_type=AssetType.BANK_ACCOUNT,
        country=AssetCountry.SCOTLAND,
        description="Bank of Scotland Current Account 12345678",
        full_value=5000,
        deceased_share_value=5000,
        joint_ownership=False,
    )
    values.update(overrides)
    return Asset(**values)


def make_liability(liability_type=LiabilityType.OTHER_DEBT, amount=0, description="Debt") -> Liability:
    return Liability(liability_type=liability_type, description=description, amount=amount)


def make_case(**overrides) -> Case:
    values = dict(
        sheriffdom=Sheriffdom.LOTHIAN_AND_BORDERS,
        deceased=BASE_DECEASED,
        executors=(make_executor(),),
        will=WillNominate(will_date=date(2020, 6, 15)),
        declaration_date=date(2024, 1, 10),
    )
    values.update(overrides)
    return Case(**values)


@pytest.fixture
def nominate_case():
    """Single declarant, will dated 15 June 2020, no assets."""
    return make_case()


@pytest.fixture
def dative_case():
    return make_case(
        sheriffdom=Sheriffdom.GRAMPIAN_HIGHLAND_AND_ISLANDS,
        will=WillDative(
            sheriffdom_of_decree=Sheriffdom.GRAMPIAN_HIGHLAND_AND_ISLANDS,
            decree_date=date(2023, 11, 20),
        ),
    )


@pytest.fixture
def two_executor_case():
    return make_case(executors=(make_executor(), make_co_executor()))


@pytest.fixture
def case_payload():
    """Wizard JSON for a complete, valid case (camelCase keys)."""
    return {
        "version": 1,
        "sheriffdom": "Lothian and Borders",
        "deceased": {
            "title": "Mrs",
            "firstNames": "Margaret Anne",
            "surname": "Smith",
            "address": {"line1": "5 Low Road", "line2": "Edinburgh", "line3": "", "line4": "", "postcode": "EH2 2BB"},
            "occupation": "Teacher (retired)",
            "dateOfBirth": "1940-05-12",
            "dateOfDeath": "2023-08-15",
            "placeOfDeath": "Edinburgh",
            "maritalStatus": "widowed",
            "survivingSpouse": False,
            "survivingParent": False,
            "survivingSiblings": True,
            "numberOfChildren": 2,
            "numberOfGrandchildren": 3,
            "utr": "",
            "niNumber": "",
        },
        "executors": [
            {
                "fullName": "James Smith",
                "relationship": "son",
                "gender": "male",
                "address": {"line1": "10 High Street", "line2": "Edinburgh", "line3": "", "line4": "", "postcode": "EH1 1AA"},
                "isDeclarant": True,
                "status": "active",
            }
        ],
        "will": {
            "hasWill": True,
            "executorType": "nominate",
            "willDate": "2020-06-15",
            "hasCodicils": False,
            "codicilDates": [],
        },
        "assets": [
            {
                "id": "a1",
                "type": "heritable_property",
                "country": "scotland",
                "description": "Dwellinghouse at 5 Low Road, Edinburgh",
                "fullValue": 200000,
                "deceasedShareValue": 100000,
                "jointOwnership": True,
                "survivorshipClause": False,
            },
            {
                "id": "a2",
                "type": "bank_account",
                "country": "scotland",
                "description": "Bank of Scotland Current Account 12345678",
                "fullValue": 5000,
                "deceasedShareValue": 5000,
                "jointOwnership": False,
            },
        ],
        "liabilities": [
            {"id": "l1", "type": "funeral", "description": "Funeral account", "amount": 4000},
        ],
        "declarationDate": "2024-01-10",
        "currentStep": "preview",
        "yourReference": "SMITH/1",
        "hmrcReference": "",
    }
