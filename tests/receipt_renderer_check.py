"""
Sanity script for the receipt renderer:
- renders one receipt per variant plus a multi-page overflow job
- writes PDFs to dist/ and a JSON report next to them
"""

from __future__ import annotations

import json
import sys
from copy import deepcopy
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from windshield_receipts.core.errors import ReceiptError  # noqa: E402
from windshield_receipts.core.models.job import Job  # noqa: E402
from windshield_receipts.utils.pdf.exports.receipt import export_receipt_pdf  # noqa: E402

DIST = ROOT / "dist"
REPORT_PATH = DIST / "receipt_renderer_report.json"


def _base_record() -> dict:
    return {
        "jobNumber": "JOB-2026-0042",
        "customerType": "retail",
        "firstName": "John",
        "lastName": "Doe",
        "phone": "2105550100",
        "streetAddress": "123 Main St",
        "city": "San Antonio",
        "state": "TX",
        "zipCode": "78205",
        "installDate": "2026-01-05",
        "vehicles": [
            {
                "vehicleYear": "2019",
                "vehicleMake": "Toyota",
                "vehicleModel": "Camry",
                "vin": "4T1B11HK5KU123456",
                "parts": [{"serviceType": "replace", "glassType": "windshield", "partTotal": 300}],
            }
        ],
        "totalDue": 300,
        "amountPaid": 100,
        "balanceDue": 200,
    }


def _scenario_rock_chip() -> dict:
    record = _base_record()
    record["vehicles"][0]["parts"] = [{"serviceType": "repair", "glassType": "windshield", "partTotal": 80}]
    record.update(totalDue=80, amountPaid=0, balanceDue=80)
    return record


def _scenario_windshield_declined() -> dict:
    record = _base_record()
    record["vehicles"][0]["parts"][0]["calibrationType"] = "declined"
    return record


def _scenario_other_glass() -> dict:
    record = _base_record()
    record["vehicles"][0]["parts"] = [{"jobType": "back_glass_powerslide", "partTotal": 260}]
    return record


def _scenario_dealer() -> dict:
    record = _base_record()
    record.update(customerType="dealer", isBusiness=True, businessName="Alamo Motors")
    return record


def _scenario_fleet_overflow() -> dict:
    record = _base_record()
    vehicle = record["vehicles"][0]
    record["vehicles"] = []
    for idx in range(1, 19):
        entry = deepcopy(vehicle)
        entry["vehicleModel"] = f"Transit {idx:02d}"
        entry["parts"].append({"serviceType": "replace", "glassType": "door_glass", "partTotal": 150})
        record["vehicles"].append(entry)
    record.update(customerType="fleet", calibrationDeclined=True, totalDue=18 * 450, amountPaid=0, balanceDue=18 * 450)
    return record


SCENARIOS = {
    "rock_chip": _scenario_rock_chip,
    "windshield_declined": _scenario_windshield_declined,
    "other_glass": _scenario_other_glass,
    "dealer": _scenario_dealer,
    "fleet_overflow": _scenario_fleet_overflow,
}


def main() -> None:
    DIST.mkdir(parents=True, exist_ok=True)
    results: dict[str, dict[str, str]] = {}

    for name, factory in SCENARIOS.items():
        out_path = DIST / f"test_receipt_{name}.pdf"
        try:
            export_receipt_pdf(out_path, Job.from_dict(factory()))
            results[name] = {"status": "ok", "output": str(out_path.relative_to(ROOT))}
        except ReceiptError as exc:
            results[name] = {"status": "error", "error": str(exc)}

    REPORT_PATH.write_text(json.dumps({"receipt_renderer_check": results}, indent=2), encoding="utf-8")


if __name__ == "__main__":
    main()
