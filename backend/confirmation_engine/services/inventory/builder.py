"""
Confirmation Engine - Inventory Builder

Lays the estate out on the 37-line inventory table of page 3.

Section order is mandated by the form instructions and is fixed regardless
of content:
1. HERITABLE ESTATE IN SCOTLAND
2. MOVEABLE ESTATE IN SCOTLAND
3. ESTATE IN ENGLAND AND WALES
4. ESTATE IN NORTHERN IRELAND
5. SUMMARY FOR CONFIRMATION
6. ESTATE ELSEWHERE

Column rules:
- amount (deceased's share) is auto-summed by the form, so summary
  subtotals and "elsewhere" values never go there
- price carries the full value of jointly owned assets and the summary subtotals
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Sequence

from ...constants import INVENTORY_MAX_LINES, AssetCountry
from ...models.ssot import Asset, InventoryLine, InventoryResult
from ..rules.financials import compute_confirmation_total, compute_country_totals

logger = logging.getLogger(__name__)

NIL = "NIL"
TOTAL_FOR_CONFIRMATION = "TOTAL FOR CONFIRMATION"


@dataclass(frozen=True)
class InventorySection:
    key: str
    heading: str
    # None marks the summary section, which holds no assets
    accepts: Optional[Callable[[Asset], bool]]
    # Values listed for information only, never in the amount column
    listed_only: bool = False

    @property
    def is_summary(self) -> bool:
        return self.accepts is None


INVENTORY_SECTIONS: Sequence[InventorySection] = (
    InventorySection(
        key="heritable_scotland",
        heading="HERITABLE ESTATE IN SCOTLAND",
        accepts=lambda a: a.country == AssetCountry.SCOTLAND and a.is_heritable,
    ),
    InventorySection(
        key="moveable_scotland",
        heading="MOVEABLE ESTATE IN SCOTLAND",
        accepts=lambda a: a.country == AssetCountry.SCOTLAND and not a.is_heritable,
    ),
    InventorySection(
        key="england_wales",
        heading="ESTATE IN ENGLAND AND WALES",
        accepts=lambda a: a.country == AssetCountry.ENGLAND_WALES,
    ),
    InventorySection(
        key="northern_ireland",
        heading="ESTATE IN NORTHERN IRELAND",
        accepts=lambda a: a.country == AssetCountry.NORTHERN_IRELAND,
    ),
    InventorySection(
        key="summary",
        heading="SUMMARY FOR CONFIRMATION",
        accepts=None,
    ),
    InventorySection(
        key="elsewhere",
        heading="ESTATE ELSEWHERE",
        accepts=lambda a: a.country == AssetCountry.ELSEWHERE,
        listed_only=True,
    ),
)

# (description, country) rows of the summary section, before the total
SUMMARY_ROWS = (
    ("Estate in Scotland", AssetCountry.SCOTLAND),
    ("Estate in England and Wales", AssetCountry.ENGLAND_WALES),
    ("Estate in Northern Ireland", AssetCountry.NORTHERN_IRELAND),
)


def _subtotal_text(value: int) -> str:
    return str(value) if value > 0 else NIL


def _asset_line(asset: Asset, item_number: int, listed_only: bool) -> InventoryLine:
    if listed_only:
        # Shown, but kept out of the auto-summed amount column
        price = str(asset.full_value if asset.joint_ownership else asset.deceased_share_value)
        amount = ""
    else:
        price = str(asset.full_value) if asset.joint_ownership else ""
        amount = str(asset.deceased_share_value)

    return InventoryLine(
        line_number=0,
        item_number=str(item_number),
        description=asset.description,
        price=price,
        amount=amount,
    )


def _summary_lines(assets: Sequence[Asset], confirmation_total: int) -> List[InventoryLine]:
    country_totals = compute_country_totals(assets)
    lines = [
        InventoryLine(
            line_number=0,
            description=description,
            price=_subtotal_text(country_totals[country]),
            is_summary_line=True,
        )
        for description, country in SUMMARY_ROWS
    ]
    lines.append(
        InventoryLine(
            line_number=0,
            description=TOTAL_FOR_CONFIRMATION,
            price=str(confirmation_total),
            is_subtotal=True,
            is_summary_line=True,
        )
    )
    return lines


def build_inventory(assets: Sequence[Asset]) -> InventoryResult:
    """
    Build the inventory table for a list of assets.

    Assets keep their input order within a section; item numbers run on
    across sections. If more than INVENTORY_MAX_LINES lines are needed the
    result is flagged as overflow and truncated; overflow_line_count keeps
    the full count.
    """
    assets = list(assets)
    confirmation_total = compute_confirmation_total(assets)

    all_lines: List[InventoryLine] = []
    item_number = 1

    for section in INVENTORY_SECTIONS:
        all_lines.append(
            InventoryLine(line_number=0, description=section.heading, is_heading=True)
        )

        if section.is_summary:
            all_lines.extend(_summary_lines(assets, confirmation_total))
            continue

        section_assets = [a for a in assets if section.accepts(a)]
        if not section_assets:
            all_lines.append(InventoryLine(line_number=0, description=NIL))
            continue

        for asset in section_assets:
            all_lines.append(_asset_line(asset, item_number, section.listed_only))
            item_number += 1

    overflow = len(all_lines) > INVENTORY_MAX_LINES
    if overflow:
        logger.warning(
            f"Inventory needs {len(all_lines)} lines; the form holds {INVENTORY_MAX_LINES}"
        )

    lines = tuple(
        replace(line, line_number=idx)
        for idx, line in enumerate(all_lines[:INVENTORY_MAX_LINES], start=1)
    )

    return InventoryResult(
        lines=lines,
        total_pounds=confirmation_total,
        overflow=overflow,
        overflow_line_count=len(all_lines),
    )
