import sys
from pathlib import Path

import pytest

# Ensure `src` is importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def make_job():
    """
    Factory for jobs. `parts` is a list of (job_type, part_total) pairs on one vehicle;
    pass `vehicles` for full control.
    """
    from windshield_receipts.core.models.job import CustomerType, Job, Part, Vehicle

    def _make(parts=(("windshield_replacement", 300.0),), vehicles=None, **overrides):
        if vehicles is None:
            vehicles = [
                Vehicle(
                    year="2019",
                    make="Toyota",
                    model="Camry",
                    vin="4T1B11HK5KU123456",
                    parts=[Part(job_type=jt, part_total=total) for jt, total in parts],
                )
            ]
        fields = {
            "job_number": "JOB-2026-0042",
            "customer_type": CustomerType.RETAIL,
            "is_business": False,
            "first_name": "John",
            "last_name": "Doe",
            "phone": "2105550100",
            "street_address": "123 Main St",
            "city": "San Antonio",
            "state": "TX",
            "zip_code": "78205",
            "install_date": "2026-01-05",
            "created_at": "2026-01-02T15:04:05.000Z",
            "vehicles": vehicles,
            "total_due": 300.0,
            "amount_paid": 100.0,
            "balance_due": 200.0,
        }
        fields.update(overrides)
        return Job(**fields)

    return _make


@pytest.fixture
def no_logo():
    from windshield_receipts.utils.pdf.core.images import LogoLoadResult

    return LogoLoadResult(error="FileNotFoundError: logo.jpg")


@pytest.fixture
def company(tmp_path):
    from windshield_receipts.core.services.company import CompanyInfo

    return CompanyInfo(name="Test Glass Co", logo_path=str(tmp_path / "missing-logo.jpg"))


@pytest.fixture
def logo_file(tmp_path):
    from PIL import Image

    path = tmp_path / "logo.png"
    Image.new("RGB", (120, 40), (20, 60, 160)).save(path)
    return path


@pytest.fixture
def signature_data_url():
    """Light stroke on a dark pad, the way the signature capture sends it."""
    import base64
    import io

    from PIL import Image, ImageDraw

    img = Image.new("RGB", (80, 30), (10, 10, 10))
    ImageDraw.Draw(img).line((5, 20, 75, 8), fill=(250, 250, 250), width=3)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")
