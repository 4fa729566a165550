"""
PDF object builder: assembles page content streams, fonts and image XObjects into PDF bytes.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from windshield_receipts.utils.pdf.core.fonts import BASE_FONTS
from windshield_receipts.utils.pdf.core.images import PdfImage


def build_pdf_bytes(
    content_streams: Sequence[str],
    images: Mapping[str, PdfImage] | None = None,
    page_size=(595, 842),
) -> bytes:
    """
    Given list of page content streams (str) and named images, return ready-to-write PDF bytes.
    """
    images = images or {}
    objs: list[bytes] = []

    def add(body: bytes) -> int:
        objs.append(body)
        return len(objs)

    # 1 = catalog, 2 = pages; filled in once the kids are known
    add(b"")
    add(b"")

    font_refs = []
    for res_name, base_font in BASE_FONTS.items():
        obj_id = add(f"<< /Type /Font /Subtype /Type1 /BaseFont /{base_font} /Encoding /WinAnsiEncoding >>".encode("ascii"))
        font_refs.append(f"{res_name} {obj_id} 0 R")

    xobject_refs = []
    for name, image in images.items():
        obj_id = _add_image(add, image)
        xobject_refs.append(f"/{name} {obj_id} 0 R")

    resources = f"<< /Font << {' '.join(font_refs)} >>"
    if xobject_refs:
        resources += f" /XObject << {' '.join(xobject_refs)} >>"
    resources += " >>"

    pages_kids: list[int] = []
    for stream in content_streams:
        data = stream.encode("latin-1", "replace")
        content_id = add(_stream(f"<< /Length {len(data)} >>".encode("ascii"), data))
        page_id = add(
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 {page_size[0]} {page_size[1]}] /Contents {content_id} 0 R /Resources {resources} >>".encode(
                "ascii"
            )
        )
        pages_kids.append(page_id)

    kids_ref = " ".join(f"{kid} 0 R" for kid in pages_kids)
    objs[0] = b"<< /Type /Catalog /Pages 2 0 R >>"
    objs[1] = f"<< /Type /Pages /Count {len(pages_kids)} /Kids [{kids_ref}] >>".encode("ascii")

    header = b"%PDF-1.4\n"
    offsets = [0]
    pdf_body = bytearray()
    current_offset = len(header)
    for obj_id, body in enumerate(objs, start=1):
        chunk = f"{obj_id} 0 obj ".encode("ascii") + body + b" endobj\n"
        offsets.append(current_offset)
        pdf_body += chunk
        current_offset += len(chunk)

    xref_entries = ["0000000000 65535 f \n"] + [_format_xref_entry(off) for off in offsets[1:]]
    xref = ("xref\n0 %d\n" % len(offsets)).encode("ascii") + "".join(xref_entries).encode("ascii")
    startxref = len(header) + len(pdf_body)
    trailer = f"trailer << /Size {len(offsets)} /Root 1 0 R >>\nstartxref\n{startxref}\n%%EOF\n".encode("ascii")

    return header + bytes(pdf_body) + xref + trailer


def _add_image(add, image: PdfImage) -> int:
    smask_ref = ""
    if image.smask is not None:
        smask_id = _add_image(add, image.smask)
        smask_ref = f" /SMask {smask_id} 0 R"
    dictionary = (
        f"<< /Type /XObject /Subtype /Image /Width {image.width} /Height {image.height}"
        f" /ColorSpace {image.color_space} /BitsPerComponent {image.bits} /Filter {image.filter}"
        f"{smask_ref} /Length {len(image.data)} >>"
    )
    return add(_stream(dictionary.encode("ascii"), image.data))


def _stream(dictionary: bytes, data: bytes) -> bytes:
    return dictionary + b" stream\n" + data + b"\nendstream"


def _format_xref_entry(offset: int) -> str:
    return f"{offset:010d} 00000 n \n"
