"""
Display formatting for receipts: money, dates and part labels.
"""

from __future__ import annotations

from datetime import date, datetime

from windshield_receipts.core.models.job import GlassType, JobType, Part, ServiceType

JOB_TYPE_LABELS: dict[JobType, str] = {
    JobType.WINDSHIELD_REPLACEMENT: "Windshield Replacement",
    JobType.WINDSHIELD_REPAIR: "Windshield Repair",
    JobType.DOOR_GLASS: "Door Glass Replacement",
    JobType.BACK_GLASS: "Back Glass Replacement",
    JobType.BACK_GLASS_POWERSLIDE: "Back Glass (Powerslide) Replacement",
    JobType.QUARTER_GLASS: "Quarter Glass Replacement",
    JobType.SUNROOF: "Sunroof Replacement",
    JobType.SIDE_MIRROR: "Side Mirror Replacement",
    JobType.UNSPECIFIED: "Glass Service",
}

GLASS_TYPE_LABELS: dict[GlassType, str] = {
    GlassType.WINDSHIELD: "Windshield",
    GlassType.DOOR_GLASS: "Door Glass",
    GlassType.BACK_GLASS: "Back Glass",
    GlassType.BACK_GLASS_POWERSLIDE: "Back Glass (Powerslide)",
    GlassType.QUARTER_GLASS: "Quarter Glass",
    GlassType.SUNROOF: "Sunroof",
    GlassType.SIDE_MIRROR: "Side Mirror",
}

SERVICE_TYPE_LABELS: dict[ServiceType, str] = {
    ServiceType.REPAIR: "Repair",
    ServiceType.REPLACE: "Replacement",
    ServiceType.CALIBRATION: "Calibration",
    ServiceType.WARRANTY: "Warranty",
}


def format_currency(value: float) -> str:
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        numeric = 0.0
    return f"${numeric:.2f}"


def parse_date(value: str) -> date:
    """Accept `2026-01-25`, `2026-01-25T14:30:00` and the `...Z` form the API sends."""
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return date.fromisoformat(text[:10])


def format_date(value: str | date | None = None) -> str:
    """`Jan 5, 2026`; no value means today."""
    if value is None or value == "":
        day = date.today()
    elif isinstance(value, date):
        day = value
    else:
        day = parse_date(value)
    return f"{day:%b} {day.day}, {day.year}"


def format_part_label(part: Part) -> str:
    if part.service_type is not None and part.glass_type is not None:
        return f"{GLASS_TYPE_LABELS[part.glass_type]} {SERVICE_TYPE_LABELS[part.service_type]}"
    return JOB_TYPE_LABELS[part.job_type]
