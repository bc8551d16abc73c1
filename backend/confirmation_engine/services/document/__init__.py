"""Confirmation Engine - Document Assembly

Case -> flat field mapping -> template.
"""
from .digits import (
    split_date_to_digits,
    pounds_to_currency_string,
    split_number_to_digits,
)
from .fields import (
    FieldKind,
    DocumentFields,
    DocumentResult,
    build_document_fields,
    assemble_document,
    split_first_names,
)
from .filler import (
    FormWriter,
    InMemoryFormWriter,
    DocumentFiller,
    FillReport,
    normalize_option,
)

__all__ = [
    "split_date_to_digits",
    "pounds_to_currency_string",
    "split_number_to_digits",
    "FieldKind",
    "DocumentFields",
    "DocumentResult",
    "build_document_fields",
    "assemble_document",
    "split_first_names",
    "FormWriter",
    "InMemoryFormWriter",
    "DocumentFiller",
    "FillReport",
    "normalize_option",
]
