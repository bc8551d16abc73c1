"""
Tests for the Declaration Composer.
"""
from datetime import date

import pytest

from confirmation_engine.constants import Gender
from confirmation_engine.errors import PreconditionError
from confirmation_engine.models.ssot import (
    Address,
    DeceasedStatus,
    DeclinedStatus,
    WillNominate,
)
from confirmation_engine.services.declaration import (
    build_appointment_paragraph,
    build_co_executor_names,
    compose_declaration,
    format_address,
    format_date_for_declaration,
    get_declarant,
    strip_trailing_punctuation,
    to_date,
)

from conftest import make_case, make_co_executor, make_executor


# =============================================================================
# FORMATTING
# =============================================================================

class TestFormatting:

    @pytest.mark.parametrize("value,expected", [
        ("2020-06-15", "15 June 2020"),
        ("2021-03-01", "1 March 2021"),
        (date(2023, 12, 25), "25 December 2023"),
    ])
    def test_format_date(self, value, expected):
        assert format_date_for_declaration(value) == expected

    @pytest.mark.parametrize("bad", ["15/06/2020", "2020-6-15", "", "yesterday"])
    def test_rejects_non_iso_dates(self, bad):
        with pytest.raises(ValueError):
            to_date(bad)

    def test_strip_trailing_punctuation(self):
        assert strip_trailing_punctuation("Street., ") == "Street"
        assert strip_trailing_punctuation("J. Smith") == "J. Smith"

    def test_format_address_skips_blank_lines(self):
        address = Address(line1="20 Queen Street,", line2="Glasgow", postcode="G1 1AA")
        assert format_address(address) == "20 Queen Street, Glasgow, G1 1AA"


# =============================================================================
# APPOINTMENT PARAGRAPH
# =============================================================================

class TestNominate:
    """Executor Nominate wording (a will exists)."""

    def test_single_executor(self, nominate_case):
        assert build_appointment_paragraph(nominate_case) == (
            "James Smith, son and Executor Nominate of the late Margaret Anne Smith "
            "conform to the Will of the said deceased dated 15 June 2020 "
            "which is produced herewith, docquetted and signed by me as relative hereto"
        )

    def test_executrix(self):
        case = make_case(executors=[make_executor(full_name="Jane Smith", relationship="daughter", gender=Gender.FEMALE)])
        assert "daughter and Executrix Nominate" in build_appointment_paragraph(case)

    def test_co_executor(self, two_executor_case):
        paragraph = build_appointment_paragraph(two_executor_case)
        assert "along with Mary Brown, residing at 20 Queen Street, Glasgow, G1 1AA conform" in paragraph

    def test_several_co_executors(self):
        case = make_case(executors=[
            make_executor(),
            make_co_executor(),
            make_co_executor(full_name="Peter Smith", relationship="son", gender=Gender.MALE,
                             address=Address(line1="1 Main Street", postcode="KY1 1AA")),
        ])
        paragraph = build_appointment_paragraph(case)
        assert "Glasgow, G1 1AA, and Peter Smith, residing at 1 Main Street, KY1 1AA" in paragraph

    def test_one_codicil(self):
        case = make_case(will=WillNominate(will_date=date(2020, 6, 15), codicil_dates=[date(2021, 3, 10)]))
        assert "dated 15 June 2020 and codicil thereto dated 10 March 2021 which" in (
            build_appointment_paragraph(case)
        )

    def test_two_codicils(self):
        case = make_case(will=WillNominate(
            will_date=date(2020, 6, 15),
            codicil_dates=[date(2021, 3, 10), date(2022, 2, 1)],
        ))
        assert "and codicils thereto dated 10 March 2021 and 1 February 2022" in (
            build_appointment_paragraph(case)
        )

    def test_deceased_executor_clause(self):
        case = make_case(executors=[
            make_executor(),
            make_co_executor(status=DeceasedStatus(date_of_death=date(2023, 1, 5))),
        ])
        paragraph = build_appointment_paragraph(case)
        assert paragraph.endswith(
            "relative hereto, the said Mary Brown having since died on 5 January 2023"
        )
        assert "along with" not in paragraph

    def test_declined_executor_clause(self):
        case = make_case(executors=[
            make_executor(),
            make_co_executor(status=DeclinedStatus(letter_date=date(2023, 9, 1))),
        ])
        assert build_appointment_paragraph(case).endswith(
            ", the said Mary Brown having declined to act as Executrix by letter dated 1 September 2023"
        )

    def test_died_clauses_before_declined_clauses(self):
        case = make_case(executors=[
            make_executor(),
            make_co_executor(full_name="Anne Declined", status=DeclinedStatus()),
            make_co_executor(full_name="Bob Died", gender=Gender.MALE, status=DeceasedStatus()),
        ])
        paragraph = build_appointment_paragraph(case)
        assert paragraph.index("Bob Died having since died") < paragraph.index("Anne Declined having declined")

    def test_one_declined_clause_per_executor(self):
        """Each declined executor gets a clause; the letter date only when known."""
        case = make_case(executors=[
            make_executor(),
            make_co_executor(full_name="Anne Brown", status=DeclinedStatus(letter_date=date(2023, 1, 1))),
            make_co_executor(full_name="Beth Brown", status=DeclinedStatus()),
        ])
        paragraph = build_appointment_paragraph(case)
        assert paragraph.count("having declined to act as") == 2
        assert paragraph.count(" by letter dated") == 1
        assert paragraph.endswith(
            ", the said Anne Brown having declined to act as Executrix by letter dated 1 January 2023"
            ", the said Beth Brown having declined to act as Executrix"
        )

    def test_one_died_clause_per_executor(self):
        case = make_case(executors=[
            make_executor(),
            make_co_executor(full_name="Anne Brown", status=DeceasedStatus(date_of_death=date(2022, 6, 3))),
            make_co_executor(full_name="Bob Brown", gender=Gender.MALE, status=DeceasedStatus()),
        ])
        paragraph = build_appointment_paragraph(case)
        assert paragraph.count("having since died") == 2
        assert paragraph.count("having since died on") == 1
        assert paragraph.endswith(
            ", the said Anne Brown having since died on 3 June 2022"
            ", the said Bob Brown having since died"
        )

    def test_names_lose_trailing_punctuation(self):
        case = make_case(executors=[make_executor(full_name="James Smith.")])
        assert build_appointment_paragraph(case).startswith("James Smith, son and")


class TestDative:

    def test_paragraph(self, dative_case):
        assert build_appointment_paragraph(dative_case) == (
            "James Smith, son and Executor Dative of the late Margaret Anne Smith "
            "qua son of the said deceased who died intestate as decerned by the Sheriff "
            "at Grampian, Highland and Islands on 20 November 2023"
        )


# =============================================================================
# FULL DECLARATION
# =============================================================================

class TestComposeDeclaration:

    def test_single_executor(self, nominate_case):
        declaration = compose_declaration(nominate_case, 105_000)
        assert declaration.declaration_by == "James Smith\n10 High Street, Edinburgh, EH1 1AA"
        assert declaration.deceased_name == "Margaret Anne Smith"
        assert declaration.domicile == "The Sheriffdom of Lothian and Borders in Scotland"
        assert declaration.executor_verb == "/ am"
        assert declaration.executor_gender == "/ Executor"
        assert declaration.co_executor_names == ""
        assert declaration.inventory_last_page == "3"
        assert declaration.confirmation_value == 105_000

    def test_multiple_executors(self, two_executor_case):
        declaration = compose_declaration(two_executor_case, 0)
        assert declaration.executor_verb == "/ are"
        assert declaration.co_executor_names == "Mary Brown (daughter)"

    def test_inactive_executors_do_not_count(self):
        case = make_case(executors=[make_executor(), make_co_executor(status=DeclinedStatus())])
        declaration = compose_declaration(case, 0)
        assert declaration.executor_verb == "/ am"
        assert build_co_executor_names(case) == ""

    def test_female_declarant(self):
        case = make_case(executors=[make_executor(gender=Gender.FEMALE)])
        assert compose_declaration(case, 0).executor_gender == "/ Executrix"

    def test_form_fields(self, nominate_case):
        fields = compose_declaration(nominate_case, 42).as_form_fields()
        assert sorted(fields) == sorted(
            ["C1_17", "C1_18", "C1_19", "C1_20", "C1_21a", "C1_21b", "C1_21c", "C1_22", "C1_23"]
        )
        assert fields["C1_23"] == 42

    def test_get_declarant_requires_one(self):
        with pytest.raises(PreconditionError):
            get_declarant([make_co_executor()])
