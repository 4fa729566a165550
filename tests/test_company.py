import json

from windshield_receipts.core.services.company import (
    DEFAULT_COMPANY,
    PACKAGE_ROOT,
    CompanyInfo,
    load_company,
    save_company,
)


def test_missing_file_gives_defaults(tmp_path):
    assert load_company(tmp_path / "company.json") == DEFAULT_COMPANY


def test_partial_file_overrides_only_given_keys(tmp_path):
    path = tmp_path / "company.json"
    path.write_text(json.dumps({"name": "Alamo Glass", "phone": 2105551234, "fax": "ignored"}), encoding="utf-8")

    company = load_company(path)

    assert company.name == "Alamo Glass"
    assert company.phone == "2105551234"
    assert company.address == DEFAULT_COMPANY.address


def test_corrupt_or_wrong_shape_file_gives_defaults(tmp_path):
    path = tmp_path / "company.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_company(path) == DEFAULT_COMPANY

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_company(path) == DEFAULT_COMPANY


def test_save_then_load(tmp_path):
    company = CompanyInfo(name="Alamo Glass", email="shop@example.com")
    path = save_company(company, tmp_path / "nested" / "company.json")
    assert load_company(path) == company


def test_shipped_company_file_matches_defaults():
    assert load_company() == DEFAULT_COMPANY


def test_contact_lines_and_logo_path(tmp_path):
    company = CompanyInfo()
    assert company.contact_lines == [company.address, company.city_state_zip, company.email, company.phone]
    assert company.resolve_logo_path() is None
    shipped = CompanyInfo(logo_path="assets/logo.jpg")
    assert shipped.resolve_logo_path() == PACKAGE_ROOT / "assets" / "logo.jpg"
    assert shipped.resolve_logo_path(tmp_path) == tmp_path / "assets" / "logo.jpg"
    absolute = CompanyInfo(logo_path=str(tmp_path / "logo.png"))
    assert absolute.resolve_logo_path() == tmp_path / "logo.png"
