"""
OCR
===
Extracts the answer text from an uploaded image (screenshot, scan) with
Tesseract, so it can be analysed like pasted text.
"""
from __future__ import annotations

from io import BytesIO

import pytesseract
from PIL import Image, UnidentifiedImageError

from textanalyzer.utils.logging import SimpleLogger

# Images larger than this (pixels, longest side) are downscaled before OCR.
MAX_IMAGE_DIM = 1200
# OEM 1 = LSTM engine, PSM 3 = fully automatic page segmentation
TESSERACT_CONFIG = "--oem 1 --psm 3"


class TextExtractionError(Exception):
    """Raised when no text could be extracted from an image."""


def _prepare_image(image_bytes: bytes, max_dim: int) -> Image.Image:
    img = Image.open(BytesIO(image_bytes))
    if img.mode == "P":
        img = img.convert("RGB")
    img.thumbnail((max_dim, max_dim), Image.LANCZOS)
    return img


def extract_text_from_image(
    image_bytes: bytes,
    *,
    max_dim: int = MAX_IMAGE_DIM,
    config: str = TESSERACT_CONFIG,
) -> str:
    """Return the stripped OCR text of an image given as raw bytes."""
    if not image_bytes:
        raise TextExtractionError("Failed to extract text from image")

    SimpleLogger.info("OCR: starting text extraction")
    try:
        img = _prepare_image(image_bytes, max_dim)
        text = pytesseract.image_to_string(img, config=config)
    except (UnidentifiedImageError, OSError, pytesseract.TesseractError) as exc:
        SimpleLogger.error(f"OCR: processing failed: {exc!r}")
        raise TextExtractionError("Failed to extract text from image") from exc

    SimpleLogger.info("OCR: completed successfully")
    return text.strip()
