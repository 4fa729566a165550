from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

LOGGER = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parents[2]
COMPANY_PATH = PACKAGE_ROOT / "data" / "company.json"


@dataclass(frozen=True)
class CompanyInfo:
    """Company block printed at the top of every receipt."""

    name: str = "Windshield Repair SA"
    address: str = "901 SE Military Hwy #C051"
    city_state_zip: str = "San Antonio, TX 78214"
    email: str = "windshieldrepairsa@gmail.com"
    phone: str = "2108900210"
    # empty: no logo configured, the header prints the company name
    logo_path: str = ""

    @property
    def contact_lines(self) -> list[str]:
        return [self.address, self.city_state_zip, self.email, self.phone]

    def resolve_logo_path(self, base_dir: Path | None = None) -> Path | None:
        """Absolute logo path; relative paths resolve against the package (e.g. `assets/logo.jpg`)."""
        if not self.logo_path:
            return None
        logo = Path(self.logo_path)
        if logo.is_absolute():
            return logo
        return (base_dir or PACKAGE_ROOT) / logo


DEFAULT_COMPANY = CompanyInfo()


def load_company(path: Path | None = None) -> CompanyInfo:
    """
    Load company details from JSON. Unknown keys are ignored, missing keys keep defaults.
    A missing or unreadable file yields the built-in company.
    """
    target = path or COMPANY_PATH
    if not target.exists():
        return DEFAULT_COMPANY
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        LOGGER.warning("Failed to load company info from %s: %s", target, exc)
        return DEFAULT_COMPANY
    if not isinstance(data, dict):
        LOGGER.warning("Company info in %s is not an object, using defaults", target)
        return DEFAULT_COMPANY
    known = {f.name for f in fields(CompanyInfo)}
    values = {k: str(v) for k, v in data.items() if k in known and v is not None}
    return CompanyInfo(**{**asdict(DEFAULT_COMPANY), **values})


def save_company(company: CompanyInfo, path: Path | None = None) -> Path:
    target = path or COMPANY_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(asdict(company), ensure_ascii=False, indent=2), encoding="utf-8")
    return target
