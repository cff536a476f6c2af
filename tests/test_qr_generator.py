import io
import os

import pytest
from PIL import Image

from utils.qr_generator import (
    EXPORT_INFO_FILE,
    export_batch,
    export_file_name,
    make_qr_image,
    qr_png_bytes,
)


PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_image_has_requested_size():
    image = make_qr_image("hello", size=120)
    assert image.size == (120, 120)
    assert image.mode == "RGB"


def test_png_bytes():
    png = qr_png_bytes("hello", size=100)
    assert png.startswith(PNG_MAGIC)
    assert Image.open(io.BytesIO(png)).size == (100, 100)


def test_empty_content_is_rejected():
    with pytest.raises(ValueError):
        make_qr_image("")


def test_non_positive_size_is_rejected():
    with pytest.raises(ValueError):
        make_qr_image("hello", size=0)


class TestExportFileName:

    def test_unsafe_characters_are_replaced(self):
        assert export_file_name("http://a/b?c", 0) == "1_http---a-b-c.png"

    def test_content_is_shortened(self):
        assert export_file_name("abcdefghijklmnopqrstuvwxyz", 4) == "5_abcdefghijklmnopqrst.png"


def test_export_batch(tmp_path):
    directory = str(tmp_path / "export")

    paths = export_batch(["first", "second"], directory, batch_timestamp="T", size=90)

    assert [os.path.basename(path) for path in paths] == ["1_first.png", "2_second.png"]
    assert all(os.path.exists(path) for path in paths)

    with open(os.path.join(directory, EXPORT_INFO_FILE), encoding="utf-8") as file_obj:
        info = file_obj.read()
    assert "Generated at: T" in info
    assert "Total: 2 QR code(s)" in info
    assert "File: 2_second.png" in info
    assert "Content: second" in info
