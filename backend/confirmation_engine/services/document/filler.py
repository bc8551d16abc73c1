"""
Confirmation Engine - Document Filler

The only component that touches the template. It writes a DocumentFields
mapping through a FormWriter. Template field sets drift from the code's
expectations, so a failed write is logged and skipped rather than aborting
the whole document.
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .fields import DocumentFields, FieldKind

logger = logging.getLogger(__name__)

_OPTION_PREFIX_RE = re.compile(r"^/\s*")


def normalize_option(value: str) -> str:
    """ "/Yes", "/ Yes" and "yes" all normalize to "yes"."""
    return _OPTION_PREFIX_RE.sub("", value).lower()


class FormWriter:
    """
    Interface to a fillable template. Implementations raise on any
    field they cannot write (unknown id, wrong widget type, bad option).
    """

    def set_text(self, field_id: str, value: str) -> None:
        raise NotImplementedError

    def set_radio(self, field_id: str, value: str) -> None:
        raise NotImplementedError

    def radio_options(self, field_id: str) -> List[str]:
        raise NotImplementedError

    def set_checkbox(self, field_id: str, checked: bool) -> None:
        raise NotImplementedError

    def set_dropdown(self, field_id: str, value: str) -> None:
        raise NotImplementedError


@dataclass
class FillReport:
    written: int = 0
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class DocumentFiller:
    """Fills exactly one document. Create a new filler per document."""

    def __init__(self, writer: FormWriter):
        self.writer = writer
        self._filled = False

    def fill(self, fields: DocumentFields) -> FillReport:
        if self._filled:
            raise RuntimeError("DocumentFiller has already filled its document")
        self._filled = True

        report = FillReport()
        for field_id, value in fields.values.items():
            kind = fields.kinds.get(field_id, FieldKind.TEXT)
            try:
                self._write(field_id, kind, value)
            except Exception as exc:
                logger.warning(f"Failed to set {kind.value} field {field_id}: {exc}")
                report.failed[field_id] = str(exc)
            else:
                report.written += 1

        logger.info(f"Filled {report.written} fields, {len(report.failed)} failed")
        return report

    def _write(self, field_id: str, kind: FieldKind, value) -> None:
        if kind == FieldKind.TEXT:
            self.writer.set_text(field_id, value)
        elif kind == FieldKind.RADIO:
            self._write_radio(field_id, value)
        elif kind == FieldKind.CHECKBOX:
            self.writer.set_checkbox(field_id, bool(value))
        elif kind == FieldKind.DROPDOWN:
            self.writer.set_dropdown(field_id, value)
        else:
            raise ValueError(f"Unknown field kind {kind!r}")

    def _write_radio(self, field_id: str, value: str) -> None:
        try:
            options = self.writer.radio_options(field_id)
        except (KeyError, TypeError):
            # Some yes/no "radios" are really checkboxes in the template
            self.writer.set_checkbox(field_id, normalize_option(value) == "yes")
            return

        if value in options:
            self.writer.set_radio(field_id, value)
            return

        target = normalize_option(value)
        match = next((opt for opt in options if normalize_option(opt) == target), None)
        if match is None:
            raise ValueError(f'no matching option for "{value}". Available: {options}')
        self.writer.set_radio(field_id, match)


# =============================================================================
# IN-MEMORY WRITER
# =============================================================================

class InMemoryFormWriter(FormWriter):
    """
    A template held in memory: a set of text/checkbox/dropdown ids and the
    options of each radio group. Used for previews and tests.
    """

    def __init__(
        self,
        text_fields: Optional[Set[str]] = None,
        radio_groups: Optional[Dict[str, List[str]]] = None,
        checkboxes: Optional[Set[str]] = None,
        dropdowns: Optional[Dict[str, List[str]]] = None,
    ):
        self.text_fields = set(text_fields or ())
        self.radio_groups = dict(radio_groups or {})
        self.checkboxes = set(checkboxes or ())
        self.dropdowns = dict(dropdowns or {})
        self.written: Dict[str, object] = {}

    def set_text(self, field_id: str, value: str) -> None:
        if field_id not in self.text_fields:
            raise KeyError(f"No text field {field_id}")
        self.written[field_id] = value

    def radio_options(self, field_id: str) -> List[str]:
        return list(self.radio_groups[field_id])

    def set_radio(self, field_id: str, value: str) -> None:
        if value not in self.radio_groups.get(field_id, ()):
            raise ValueError(f"{value!r} is not an option of {field_id}")
        self.written[field_id] = value

    def set_checkbox(self, field_id: str, checked: bool) -> None:
        if field_id not in self.checkboxes:
            raise KeyError(f"No checkbox {field_id}")
        self.written[field_id] = checked

    def set_dropdown(self, field_id: str, value: str) -> None:
        if value not in self.dropdowns.get(field_id, ()):
            raise ValueError(f"{value!r} is not an option of {field_id}")
        self.written[field_id] = value
