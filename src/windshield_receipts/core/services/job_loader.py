from __future__ import annotations

import json
import math
from pathlib import Path

from windshield_receipts.core.errors import InvalidJobError
from windshield_receipts.core.models.job import Job
from windshield_receipts.utils.formatting import parse_date


def load_job(path: str | Path) -> Job:
    """Read a job record exported by the job-management API (camelCase JSON)."""
    target = Path(path)
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidJobError(f"{target.name} is not valid JSON: {exc}") from exc
    return Job.from_dict(data)


def validate_job(job: Job) -> None:
    """
    Check the fields the receipt sections dereference unconditionally.
    Raises InvalidJobError listing every problem found.
    """
    problems: list[str] = []
    if not str(job.job_number or "").strip():
        problems.append("job number is missing")

    if not job.invoice_date:
        problems.append("neither install date nor creation date is set")
    else:
        try:
            parse_date(job.invoice_date)
        except ValueError:
            problems.append(f"invoice date {job.invoice_date!r} is not an ISO date")

    has_business_name = job.is_business and bool(job.business_name.strip())
    if not has_business_name and not (job.first_name.strip() or job.last_name.strip()):
        problems.append("customer name is missing")

    for label, value in (("total due", job.total_due), ("amount paid", job.amount_paid), ("balance due", job.balance_due)):
        if not _is_finite(value):
            problems.append(f"{label} is not a number")
    for v_idx, vehicle in enumerate(job.vehicles, start=1):
        for p_idx, part in enumerate(vehicle.parts, start=1):
            if not _is_finite(part.part_total):
                problems.append(f"vehicle {v_idx} part {p_idx} total is not a number")

    if problems:
        raise InvalidJobError(problems)


def _is_finite(value) -> bool:
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False
