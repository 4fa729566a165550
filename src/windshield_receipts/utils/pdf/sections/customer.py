from __future__ import annotations

from windshield_receipts.core.models.job import Job
from windshield_receipts.utils.pdf.core.canvas import ReceiptCanvas
from windshield_receipts.utils.pdf.core.fonts import BOLD, REGULAR
from windshield_receipts.utils.pdf.core.layout import LayoutCursor
from windshield_receipts.utils.pdf.core.layout_common import MARGIN_LEFT


def build_customer_lines(job: Job) -> list[str]:
    """Name first, then only the address/phone lines that have data."""
    lines = [job.display_name]
    if job.street_address:
        lines.append(job.street_address)
    if job.city and job.state and job.zip_code:
        lines.append(f"{job.city}, {job.state} {job.zip_code}")
    if job.phone:
        lines.append(job.phone)
    return lines


def render_customer(canvas: ReceiptCanvas, cursor: LayoutCursor, job: Job) -> None:
    y = cursor.y
    canvas.text("To:", MARGIN_LEFT, y, BOLD, 10)
    name, *rest = build_customer_lines(job)
    canvas.text(name, MARGIN_LEFT, y + 6, REGULAR, 10)
    offset = 11
    for line in rest:
        canvas.text(line, MARGIN_LEFT, y + offset, REGULAR, 10)
        offset += 5
    cursor.advance(offset + 5)
