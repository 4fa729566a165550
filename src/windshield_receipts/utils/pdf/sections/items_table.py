from __future__ import annotations

from dataclasses import dataclass
from typing import List

from windshield_receipts.core.models.job import Job
from windshield_receipts.utils.formatting import format_currency, format_part_label
from windshield_receipts.utils.pdf.core.canvas import ReceiptCanvas
from windshield_receipts.utils.pdf.core.fonts import BOLD, REGULAR
from windshield_receipts.utils.pdf.core.layout import LayoutCursor, ensure_room
from windshield_receipts.utils.pdf.core.layout_common import (
    COL_DESCRIPTION,
    COL_ITEM,
    COL_PRICE,
    COL_QTY,
    COL_QTY_VALUE,
    COL_TOTAL,
    COL_TOTAL_RIGHT,
    MARGIN_LEFT,
    MARGIN_RIGHT,
)

HEADERS = [(COL_ITEM, "Item"), (COL_DESCRIPTION, "DESCRIPTION"), (COL_QTY, "QTY"), (COL_PRICE, "PRICE"), (COL_TOTAL, "TOTAL")]
HEADER_HEIGHT = 8
ROW_GAP = 3


@dataclass(frozen=True)
class ItemRow:
    number: int
    vehicle: str
    label: str
    vin_line: str
    price: float

    @property
    def height(self) -> float:
        return (15 if self.vin_line else 10) + ROW_GAP


def build_item_rows(job: Job) -> List[ItemRow]:
    """One row per part; vehicles in stored order, then their parts in stored order."""
    rows: List[ItemRow] = []
    for vehicle in job.vehicles:
        for part in vehicle.parts:
            rows.append(
                ItemRow(
                    number=len(rows) + 1,
                    vehicle=vehicle.description,
                    label=format_part_label(part),
                    vin_line=f"VIN {vehicle.vin}" if vehicle.vin else "",
                    price=part.part_total,
                )
            )
    return rows


def _render_column_headers(canvas: ReceiptCanvas, cursor: LayoutCursor) -> None:
    for x, text in HEADERS:
        canvas.text(text, x, cursor.y, BOLD, 9)
    canvas.rule(MARGIN_LEFT, cursor.y + 2, MARGIN_RIGHT, cursor.y + 2)
    cursor.advance(HEADER_HEIGHT)


def render_items_table(canvas: ReceiptCanvas, cursor: LayoutCursor, job: Job) -> float:
    """
    Line-item table. A row never straddles pages: it moves to a new page, where the
    column headers are repeated. Returns the subtotal of all part totals.
    """
    _render_column_headers(canvas, cursor)
    subtotal = 0.0
    for row in build_item_rows(job):
        if ensure_room(canvas, cursor, row.height):
            _render_column_headers(canvas, cursor)
        y = cursor.y
        price = format_currency(row.price)
        canvas.text(str(row.number), COL_ITEM, y, REGULAR, 9)
        canvas.text(row.vehicle, COL_DESCRIPTION, y, REGULAR, 9)
        canvas.text("1", COL_QTY_VALUE, y, REGULAR, 9)
        canvas.text(price, COL_PRICE, y, REGULAR, 9)
        canvas.text(price, COL_TOTAL_RIGHT, y, REGULAR, 9, align="right")
        canvas.text(row.label, COL_DESCRIPTION, y + 5, REGULAR, 9)
        if row.vin_line:
            canvas.text(row.vin_line, COL_DESCRIPTION, y + 10, REGULAR, 8)
        cursor.advance(row.height)
        subtotal += row.price
    return subtotal
