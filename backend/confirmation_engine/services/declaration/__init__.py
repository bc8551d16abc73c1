"""Confirmation Engine - Declaration Composer"""
from .composer import (
    compose_declaration,
    build_appointment_paragraph,
    build_co_executor_names,
    get_declarant,
    gender_title,
)
from .formatting import (
    format_date_for_declaration,
    format_address,
    strip_trailing_punctuation,
    to_date,
)

__all__ = [
    "compose_declaration",
    "build_appointment_paragraph",
    "build_co_executor_names",
    "get_declarant",
    "gender_title",
    "format_date_for_declaration",
    "format_address",
    "strip_trailing_punctuation",
    "to_date",
]
