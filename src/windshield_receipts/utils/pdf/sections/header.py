from __future__ import annotations

import logging

from windshield_receipts.core.services.company import CompanyInfo
from windshield_receipts.utils.pdf.core.canvas import ReceiptCanvas
from windshield_receipts.utils.pdf.core.fonts import BOLD, REGULAR
from windshield_receipts.utils.pdf.core.images import LogoLoadResult, load_logo
from windshield_receipts.utils.pdf.core.layout import LayoutCursor
from windshield_receipts.utils.pdf.core.layout_common import LOGO_H, LOGO_W, MARGIN_LEFT

LOGGER = logging.getLogger(__name__)


def render_header(canvas: ReceiptCanvas, cursor: LayoutCursor, company: CompanyInfo, logo: LogoLoadResult | None = None) -> LogoLoadResult:
    """
    Company logo (or the company name in bold when the logo can't be used) and contact lines.
    Returns the logo result so callers can tell which branch was taken.
    """
    if logo is None:
        logo_path = company.resolve_logo_path()
        logo = load_logo(logo_path) if logo_path else LogoLoadResult(error="no logo configured")

    if logo.ok:
        canvas.image(logo.image, MARGIN_LEFT, cursor.y - 5, LOGO_W, LOGO_H)
        cursor.advance(18)
    else:
        LOGGER.warning("Receipt logo unavailable, printing company name instead (%s)", logo.error)
        canvas.text(company.name, MARGIN_LEFT, cursor.y, BOLD, 16)
        cursor.advance(6)

    for offset, line in enumerate(company.contact_lines):
        canvas.text(line, MARGIN_LEFT, cursor.y + offset * 5, REGULAR, 10)
    cursor.advance(24)
    return logo
