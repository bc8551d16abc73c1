"""
Confirmation Engine - Declaration Composer

Builds the declaration page (C1_17 to C1_23). The paragraph in C1_20 follows
the wording of the C1 (2022) instructions verbatim; there are two templates:

Executor Nominate (a will exists):
    <declarant>, <relationship> and <Executor|Executrix> Nominate of the late
    <deceased> [along with <co-executor>, residing at <address>[, and ...]]
    conform to the Will of the said deceased dated <date>
    [and codicil[s] thereto dated <date>[ and <date>]]
    which is produced herewith, docquetted and signed by me as relative hereto
    [, the said <name> having since died[ on <date>]]...
    [, the said <name> having declined to act as <title>[ by letter dated <date>]]...

Executor Dative (intestate):
    <declarant>, <relationship> and <title> Dative of the late <deceased>
    qua <relationship> of the said deceased who died intestate as decerned
    by the Sheriff at <court> on <date>
"""
from __future__ import annotations
import logging
from typing import List, Sequence

from ...constants import (
    EXECUTOR_GENDER_FEMALE,
    EXECUTOR_GENDER_MALE,
    EXECUTOR_VERB_MULTIPLE,
    EXECUTOR_VERB_SINGLE,
    INVENTORY_LAST_PAGE,
    ExecutorStatusKind,
    Gender,
)
from ...errors import PreconditionError
from ...models.ssot import (
    Case,
    DeclarationOutput,
    Executor,
    WillDative,
    WillNominate,
)
from .formatting import (
    format_address,
    format_date_for_declaration,
    strip_trailing_punctuation,
)

logger = logging.getLogger(__name__)

DOCQUET_CLAUSE = "which is produced herewith, docquetted and signed by me as relative hereto"


def get_declarant(executors: Sequence[Executor]) -> Executor:
    for executor in executors:
        if executor.is_declarant:
            return executor
    raise PreconditionError("No declarant executor found")


def gender_title(gender: Gender) -> str:
    return "Executrix" if gender == Gender.FEMALE else "Executor"


def _name(executor: Executor) -> str:
    return strip_trailing_punctuation(executor.full_name)


def _deceased_name(case: Case) -> str:
    return strip_trailing_punctuation(case.deceased.full_name)


def _nominate_paragraph(case: Case, will: WillNominate, declarant: Executor) -> str:
    parts: List[str] = [
        f"{_name(declarant)}, {declarant.relationship} and "
        f"{gender_title(declarant.gender)} Nominate of the late {_deceased_name(case)}"
    ]

    co_executors = [
        f"{_name(e)}, residing at {format_address(e.address)}"
        for e in case.co_executors
    ]
    if co_executors:
        parts.append(f" along with {', and '.join(co_executors)}")

    parts.append(
        f" conform to the Will of the said deceased dated "
        f"{format_date_for_declaration(will.will_date)}"
    )

    if will.codicil_dates:
        plural = "s" if len(will.codicil_dates) > 1 else ""
        codicil_dates = " and ".join(
            format_date_for_declaration(d) for d in will.codicil_dates
        )
        parts.append(f" and codicil{plural} thereto dated {codicil_dates}")

    parts.append(f" {DOCQUET_CLAUSE}")

    for executor in case.executors:
        if executor.status.kind != ExecutorStatusKind.DECEASED:
            continue
        clause = f", the said {_name(executor)} having since died"
        if executor.status.date_of_death:
            clause += f" on {format_date_for_declaration(executor.status.date_of_death)}"
        parts.append(clause)

    for executor in case.executors:
        if executor.status.kind != ExecutorStatusKind.DECLINED:
            continue
        clause = (
            f", the said {_name(executor)} having declined to act as "
            f"{gender_title(executor.gender)}"
        )
        if executor.status.letter_date:
            clause += f" by letter dated {format_date_for_declaration(executor.status.letter_date)}"
        parts.append(clause)

    return "".join(parts)


def _dative_paragraph(case: Case, will: WillDative, declarant: Executor) -> str:
    return (
        f"{_name(declarant)}, {declarant.relationship} and "
        f"{gender_title(declarant.gender)} Dative of the late {_deceased_name(case)} "
        f"qua {declarant.relationship} of the said deceased who died intestate "
        f"as decerned by the Sheriff at {will.sheriffdom_of_decree.value} "
        f"on {format_date_for_declaration(will.decree_date)}"
    )


def build_appointment_paragraph(case: Case) -> str:
    """C1_20: the executor's status and appointment."""
    declarant = get_declarant(case.executors)
    if isinstance(case.will, WillNominate):
        return _nominate_paragraph(case, case.will, declarant)
    if isinstance(case.will, WillDative):
        return _dative_paragraph(case, case.will, declarant)
    raise PreconditionError(f"Unknown will variant: {type(case.will).__name__}")


def build_co_executor_names(case: Case) -> str:
    """C1_21c: "<name> (<relationship>)" for each active co-executor."""
    return " and ".join(
        f"{_name(e)} ({e.relationship})" for e in case.co_executors
    )


def compose_declaration(case: Case, confirmation_total: int) -> DeclarationOutput:
    """
    Build every declaration-page value for a case.

    confirmation_total must be the aggregator's figure for the same case.
    """
    declarant = get_declarant(case.executors)
    active_count = len(case.active_executors)

    declaration = DeclarationOutput(
        declaration_by=f"{declarant.full_name}\n{format_address(declarant.address)}",
        deceased_name=case.deceased.full_name,
        domicile=f"The Sheriffdom of {case.sheriffdom.value} in Scotland",
        appointment_paragraph=build_appointment_paragraph(case),
        executor_verb=EXECUTOR_VERB_SINGLE if active_count == 1 else EXECUTOR_VERB_MULTIPLE,
        executor_gender=(
            EXECUTOR_GENDER_FEMALE if declarant.gender == Gender.FEMALE
            else EXECUTOR_GENDER_MALE
        ),
        co_executor_names=build_co_executor_names(case),
        inventory_last_page=INVENTORY_LAST_PAGE,
        confirmation_value=confirmation_total,
    )
    logger.debug(
        f"Composed declaration: {active_count} active executor(s), "
        f"will={case.will.has_will}"
    )
    return declaration
