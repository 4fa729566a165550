import base64

from windshield_receipts.utils.pdf.exports.receipt import export_receipt_pdf, receipt_to_base64


def test_export_into_directory_uses_derived_filename(make_job, company, no_logo, tmp_path):
    path = export_receipt_pdf(tmp_path, make_job(), company=company, logo=no_logo)

    assert path == tmp_path / "Doe_John_Jan_5_2026_0126-0042.pdf"
    assert path.read_bytes().startswith(b"%PDF")


def test_export_to_explicit_file(make_job, company, no_logo, tmp_path):
    target = tmp_path / "receipt.pdf"
    assert export_receipt_pdf(target, make_job(), company=company, logo=no_logo) == target
    assert target.exists()


def test_receipt_to_base64(make_job, company, no_logo):
    encoded, filename = receipt_to_base64(make_job(is_business=True, business_name="Acme Glass LLC"), company=company, logo=no_logo)

    assert base64.b64decode(encoded).startswith(b"%PDF")
    assert filename == "Acme_Glass_LLC_Jan_5_2026_0126-0042.pdf"


def test_export_into_directory_with_separator_in_business_name(make_job, company, no_logo, tmp_path):
    job = make_job(is_business=True, business_name="A/C Auto Glass")

    path = export_receipt_pdf(tmp_path, job, company=company, logo=no_logo)

    assert path == tmp_path / "A-C_Auto_Glass_Jan_5_2026_0126-0042.pdf"
    assert path.read_bytes().startswith(b"%PDF")
    # the returned filename itself stays as derived
    _, filename = receipt_to_base64(job, company=company, logo=no_logo)
    assert filename == "A/C_Auto_Glass_Jan_5_2026_0126-0042.pdf"
