"""
Warranty blocks. The variant picks the block; fleet, windshield replacement and other
glass replacement all print the same replacement warranty.
"""

from __future__ import annotations

from typing import Callable

from windshield_receipts.core.models.variant import ReceiptVariant
from windshield_receipts.utils.pdf.core.canvas import ReceiptCanvas
from windshield_receipts.utils.pdf.core.fonts import BOLD, REGULAR, wrap_text
from windshield_receipts.utils.pdf.core.layout import LayoutCursor, flow_lines, place_title
from windshield_receipts.utils.pdf.core.layout_common import LEGAL_LINE_HEIGHT, MARGIN_LEFT, WIDE_TEXT_WIDTH

TITLE_SIZE = 9
BODY_SIZE = 8

REPLACEMENT_TITLE = "WARRANTY - REPLACEMENTS"
WORKMANSHIP_WARRANTY_TEXT = (
    "Windshield Repair SA warrants that the installation or repair will be performed to the highest standards "
    "and will be free from defects in workmanship. All of our workmanship is guaranteed for the life of the "
    "vehicle, which includes wind noise and water leaks.\n"
    "\n"
    "Exclusions include, but are not limited to:\n"
    "- Damage resulting from auto collision, new rock chips or cracks\n"
    "- Leaks caused by rust deterioration\n"
    "- Aftermarket antennas or devices\n"
    "- Damages caused by a dysfunctional door regulator\n"
    "- Any issues arising from previous installations (or other work done to the vehicle) not performed by "
    "Windshield Repair SA.\n"
    "\n"
    "Our liability under this warranty is limited to the repair or replacement of the auto glass. In the event "
    "of a water leak, it is the customer's responsibility to ensure the vehicle is kept away from rain & "
    "moisture. Windshield Repair SA is not liable for any incidental or consequential damages arising from the "
    "use or inability to use the auto glass.\n"
    "\n"
    "This warranty is non-transferable and expires with the change of ownership of this vehicle.\n"
    "\n"
    "If you experience any warranty issues, please contact us immediately at 210-890-0210 so we may evaluate "
    "the issue and take necessary action. These actions may include resealing, reinstalling, or repairing. "
    "Mobile fee may apply."
)

# TODO: ADAS notice wording is not in the shop's printed warranty yet; get owner sign-off before release.
ADAS_NOTICE_TEXT = (
    "ADAS NOTICE: Vehicles equipped with Advanced Driver Assistance Systems (cameras or sensors mounted on or "
    "behind the glass) may require recalibration after glass replacement. Recalibration is only included when "
    "it is listed on this invoice."
)

REPLACEMENT_WARRANTY_TEXT = f"{WORKMANSHIP_WARRANTY_TEXT}\n\n{ADAS_NOTICE_TEXT}"

ROCK_CHIP_TITLE = "WARRANTY"
ROCK_CHIP_WARRANTY_TEXT = (
    "Upon completion of the repair, we provide a lifetime warranty to ensure the chip or crack will not spread "
    "from its original repair location. In the event that the chip does spread, we will either:\n"
    "\n"
    "- Perform a repair on the growth portion at no cost (IF the damage is deemed repairable by one of our "
    "technicians) a maximum of two times, OR\n"
    "\n"
    "- Credit 40% of the amount paid for the original repair to be applied toward a full windshield replacement "
    "by our company (IF the damage is deemed NOT repairable by one of our technicians, including but not "
    "limited to: if it has grown more than 4 inches)\n"
    "\n"
    "Please note that rock chip repair is primarily focused on restoring the structural integrity of the "
    "windshield, not for cosmetic improvement. You may still notice the chip or crack after the repair is "
    "completed - this is normal.\n"
    "\n"
    "Due to the nature of the glass being pre-damaged, there is a possibility that the chip could spread during "
    "the repair process. This becomes even more likely with extreme weather (extreme heat and cold). If this is "
    "the case, we will not charge you for the attempted repair, however, we cannot guarantee the windshield "
    "against further damage.\n"
    "\n"
    "If you experience any warranty issues, please contact us immediately at 210-890-0210 so we may evaluate "
    "the issue and take necessary action. These actions may include repairing spread or quoting for replacement "
    "if the spread is too large. Mobile fee may apply if a warranty appointment is scheduled but the chip or "
    "crack hasn't actually spread since the first repair."
)

BONUS_TITLE = "ADDITIONAL INFO"
FREE_ROCK_CHIP_TEXT = (
    "Your purchase comes with 1 free rock chip repair, performed by Windshield Repair SA, if it should occur "
    "within the first year of your windshield replacement.\n"
    "The chip must be the size of a quarter or smaller to qualify, and a mobile fee will apply if the service "
    "is performed outside of 1604. Not redeemable for cash value.\n"
    "Thank you for your business!"
)


def _render_legal_block(canvas: ReceiptCanvas, cursor: LayoutCursor, title: str, text: str) -> None:
    place_title(canvas, cursor, title, MARGIN_LEFT, BOLD, TITLE_SIZE)
    cursor.advance(6)
    lines = wrap_text(text, WIDE_TEXT_WIDTH, REGULAR, BODY_SIZE)
    flow_lines(canvas, cursor, lines, MARGIN_LEFT, REGULAR, BODY_SIZE, LEGAL_LINE_HEIGHT)


def render_no_warranty(canvas: ReceiptCanvas, cursor: LayoutCursor) -> None:
    """Dealer invoices carry no warranty text."""


def render_replacement_warranty(canvas: ReceiptCanvas, cursor: LayoutCursor) -> None:
    _render_legal_block(canvas, cursor, REPLACEMENT_TITLE, REPLACEMENT_WARRANTY_TEXT)
    cursor.advance(5)


def render_rock_chip_warranty(canvas: ReceiptCanvas, cursor: LayoutCursor) -> None:
    _render_legal_block(canvas, cursor, ROCK_CHIP_TITLE, ROCK_CHIP_WARRANTY_TEXT)
    cursor.advance(5)


def render_windshield_replacement_warranty(canvas: ReceiptCanvas, cursor: LayoutCursor) -> None:
    _render_legal_block(canvas, cursor, BONUS_TITLE, FREE_ROCK_CHIP_TEXT)
    cursor.advance(5)
    render_replacement_warranty(canvas, cursor)


WarrantyRenderer = Callable[[ReceiptCanvas, LayoutCursor], None]


def warranty_renderer(variant: ReceiptVariant) -> WarrantyRenderer:
    if variant is ReceiptVariant.DEALER:
        return render_no_warranty
    if variant is ReceiptVariant.ROCK_CHIP_REPAIR:
        return render_rock_chip_warranty
    if variant is ReceiptVariant.WINDSHIELD_REPLACEMENT:
        return render_windshield_replacement_warranty
    # fleet and other glass replacement
    return render_replacement_warranty
