"""
Image XObjects for the receipt: company logo and captured customer signature.
Decoding goes through Pillow; the PDF side only ever sees JPEG or raw zlib streams.
"""

from __future__ import annotations

import base64
import binascii
import io
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

# Pillow errors worth a fallback instead of aborting the receipt
IMAGE_ERRORS = (OSError, ValueError, Image.DecompressionBombError)

SIGNATURE_BRIGHTNESS_THRESHOLD = 150


@dataclass(frozen=True)
class PdfImage:
    width: int
    height: int
    data: bytes
    filter: str
    color_space: str = "/DeviceRGB"
    bits: int = 8
    smask: Optional["PdfImage"] = None


@dataclass(frozen=True)
class LogoLoadResult:
    image: PdfImage | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.image is not None


def load_logo(path: Path) -> LogoLoadResult:
    """
    Decode the logo and re-encode it as baseline JPEG. Never raises: a missing or
    undecodable file comes back as a result with `error` set.
    """
    try:
        with Image.open(path) as img:
            rgb = img.convert("RGB")
            buf = io.BytesIO()
            rgb.save(buf, format="JPEG", quality=90)
            return LogoLoadResult(
                image=PdfImage(width=rgb.width, height=rgb.height, data=buf.getvalue(), filter="/DCTDecode")
            )
    except IMAGE_ERRORS as exc:
        return LogoLoadResult(error=f"{type(exc).__name__}: {exc}")


def decode_data_url(data: str) -> bytes:
    """Accept `data:image/png;base64,...` or bare base64."""
    payload = data.split(",", 1)[1] if data.startswith("data:") else data
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"signature is not valid base64: {exc}") from exc


def prepare_signature(data: str) -> PdfImage:
    """
    Signature pads capture light strokes on a dark background. Light pixels become
    opaque black ink, everything else transparent.
    """
    raw = decode_data_url(data)
    with Image.open(io.BytesIO(raw)) as img:
        rgb = img.convert("RGB")
    cutoff = SIGNATURE_BRIGHTNESS_THRESHOLD * 3
    pixels = rgb.tobytes()
    alpha = bytes(
        255 if pixels[i] + pixels[i + 1] + pixels[i + 2] > cutoff else 0 for i in range(0, len(pixels), 3)
    )
    width, height = rgb.size
    mask = PdfImage(
        width=width,
        height=height,
        data=zlib.compress(alpha),
        filter="/FlateDecode",
        color_space="/DeviceGray",
    )
    ink = bytes(width * height)
    return PdfImage(
        width=width,
        height=height,
        data=zlib.compress(ink),
        filter="/FlateDecode",
        color_space="/DeviceGray",
        smask=mask,
    )
