from io import BytesIO

import pytest
import pytesseract
from PIL import Image

from textanalyzer.ingestion import ocr
from textanalyzer.ingestion.ocr import TextExtractionError, extract_text_from_image


def _png(size=(2400, 600), mode="RGB"):
    buf = BytesIO()
    Image.new(mode, size, color=0 if mode == "P" else "white").save(buf, format="PNG")
    return buf.getvalue()


def test_extract_downscales_and_strips(monkeypatch):
    seen = {}

    def fake_image_to_string(img, config=""):
        seen["size"] = img.size
        seen["mode"] = img.mode
        seen["config"] = config
        return "  The mitochondria is the powerhouse of the cell.\n\n"

    monkeypatch.setattr(ocr.pytesseract, "image_to_string", fake_image_to_string)

    text = extract_text_from_image(_png(mode="P"))

    assert text == "The mitochondria is the powerhouse of the cell."
    assert max(seen["size"]) <= ocr.MAX_IMAGE_DIM
    assert seen["mode"] == "RGB"
    assert seen["config"] == ocr.TESSERACT_CONFIG


def test_empty_bytes_raise():
    with pytest.raises(TextExtractionError):
        extract_text_from_image(b"")


def test_unreadable_image_raises():
    with pytest.raises(TextExtractionError):
        extract_text_from_image(b"definitely not an image")


def test_tesseract_failure_raises(monkeypatch):
    def failing(img, config=""):
        raise pytesseract.TesseractError(1, "Tesseract failed")

    monkeypatch.setattr(ocr.pytesseract, "image_to_string", failing)

    with pytest.raises(TextExtractionError):
        extract_text_from_image(_png())
