import base64
import io
import zlib

import pytest
from PIL import Image

from windshield_receipts.utils.pdf.core.builder import build_pdf_bytes
from windshield_receipts.utils.pdf.core.drawing import _draw_text, _escape_pdf_text
from windshield_receipts.utils.pdf.core.fonts import BOLD, REGULAR, text_width_mm, wrap_text
from windshield_receipts.utils.pdf.core.images import decode_data_url, load_logo, prepare_signature


def test_text_width_scales_with_size_and_weight():
    assert text_width_mm("WARRANTY", REGULAR, 10) == pytest.approx(2 * text_width_mm("WARRANTY", REGULAR, 5))
    assert text_width_mm("WARRANTY", BOLD, 10) > text_width_mm("WARRANTY", REGULAR, 10)


def test_wrap_text_respects_width_and_hard_breaks():
    text = "one two three four five six seven eight nine ten\n\nafter gap"
    lines = wrap_text(text, 30, REGULAR, 10)

    assert all(text_width_mm(line, REGULAR, 10) <= 30 for line in lines if " " in line)
    assert "" in lines
    assert lines[-1] == "after gap"
    assert " ".join(line for line in lines[: lines.index("")]).split() == text.split("\n")[0].split()


def test_wrap_text_keeps_overlong_word_on_its_own_line():
    assert wrap_text("Supercalifragilistic", 5, REGULAR, 10) == ["Supercalifragilistic"]


def test_escape_and_normalize_pdf_text():
    assert _escape_pdf_text("Back Glass (Powerslide)") == "Back Glass \\(Powerslide\\)"
    assert _escape_pdf_text("Café") == "Cafe"


def test_right_aligned_text_ends_at_anchor():
    left = _draw_text("$10.00", 175, 50, REGULAR, 9)
    right = _draw_text("$10.00", 175, 50, REGULAR, 9, align="right")
    assert left != right
    assert "($10.00) Tj" in right


def test_build_pdf_bytes_has_valid_xref():
    data = build_pdf_bytes(["BT /F1 10 Tf 10 10 Td (one) Tj ET\n", "BT /F2 10 Tf 10 10 Td (two) Tj ET\n"])

    assert data.startswith(b"%PDF-1.4")
    assert data.rstrip().endswith(b"%%EOF")
    assert b"/Count 2" in data
    assert b"/BaseFont /Helvetica-Bold" in data
    startxref = int(data.split(b"startxref\n")[1].split(b"\n")[0])
    assert data[startxref : startxref + 4] == b"xref"
    # each xref entry points at the matching "N 0 obj"
    entries = data[startxref:].split(b"\n")[3:]
    for obj_id, entry in enumerate(entries[:5], start=1):
        offset = int(entry[:10])
        assert data[offset:].startswith(f"{obj_id} 0 obj".encode("ascii"))


def test_load_logo_reencodes_as_jpeg(logo_file):
    result = load_logo(logo_file)

    assert result.ok
    assert result.image.filter == "/DCTDecode"
    assert (result.image.width, result.image.height) == (120, 40)
    assert result.image.data[:2] == b"\xff\xd8"


def test_load_logo_missing_file(tmp_path):
    result = load_logo(tmp_path / "nope.jpg")
    assert not result.ok
    assert "FileNotFoundError" in result.error


def test_load_logo_corrupt_file(tmp_path):
    path = tmp_path / "logo.jpg"
    path.write_bytes(b"definitely not an image")
    result = load_logo(path)
    assert not result.ok
    assert result.error


def test_prepare_signature_turns_light_strokes_into_ink(signature_data_url):
    image = prepare_signature(signature_data_url)

    assert image.color_space == "/DeviceGray"
    assert image.smask is not None
    alpha = zlib.decompress(image.smask.data)
    assert len(alpha) == image.width * image.height
    assert set(alpha) == {0, 255}
    # dark background stays transparent
    assert alpha[0] == 0


def test_prepare_signature_accepts_bare_base64():
    img = Image.new("RGB", (4, 4), (255, 255, 255))
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    image = prepare_signature(base64.b64encode(buf.getvalue()).decode("ascii"))
    assert set(zlib.decompress(image.smask.data)) == {255}


def test_decode_data_url_rejects_garbage():
    with pytest.raises(ValueError):
        decode_data_url("data:image/png;base64,@@@")
