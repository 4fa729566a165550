from __future__ import annotations

from typing import List

from windshield_receipts.utils.pdf.core.canvas import ReceiptCanvas
from windshield_receipts.utils.pdf.core.fonts import BOLD, REGULAR, wrap_text
from windshield_receipts.utils.pdf.core.layout import LayoutCursor, flow_lines, place_title
from windshield_receipts.utils.pdf.core.layout_common import DISCLAIMER_LINE_HEIGHT, MARGIN_LEFT, WIDE_TEXT_WIDTH

TITLE = "CALIBRATION DECLINED ACKNOWLEDGMENT"

CALIBRATION_DECLINED_TEXT = (
    "The customer has declined ADAS (Advanced Driver Assistance System) calibration service following "
    "windshield replacement. Customer acknowledges and understands that:\n"
    "\n"
    "1. Modern vehicles equipped with ADAS features (lane departure warning, forward collision warning, "
    "automatic emergency braking, etc.) require calibration after windshield replacement.\n"
    "\n"
    "2. Failure to calibrate these systems may result in improper function of safety features, potentially "
    "causing accidents, injuries, or property damage.\n"
    "\n"
    "3. Windshield Repair SA is not liable for any accidents, injuries, damages, or malfunctions of ADAS "
    "systems resulting from the customer's decision to decline calibration service.\n"
    "\n"
    "4. By declining calibration, the customer assumes full responsibility for any consequences related to "
    "uncalibrated ADAS systems."
)
BODY_SIZE = 9


def build_disclaimer_lines() -> List[str]:
    return wrap_text(CALIBRATION_DECLINED_TEXT, WIDE_TEXT_WIDTH, REGULAR, BODY_SIZE)


def render_calibration_disclaimer(canvas: ReceiptCanvas, cursor: LayoutCursor) -> None:
    place_title(canvas, cursor, TITLE, MARGIN_LEFT, BOLD, 10, color_name="attention")
    cursor.advance(6)
    flow_lines(canvas, cursor, build_disclaimer_lines(), MARGIN_LEFT, REGULAR, BODY_SIZE, DISCLAIMER_LINE_HEIGHT)
    cursor.advance(10)
