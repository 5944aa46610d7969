import logging

import numpy as np
from PIL import Image

from spritemap_explode.writer import save_frame


def _frame():
    pixels = np.zeros((6, 4, 4), dtype=np.uint8)
    pixels[2, 1] = (10, 20, 30, 40)
    return pixels


def test_save_frame_writes_png_with_alpha(tmp_path):
    path = tmp_path / "f.png"
    assert save_frame(_frame(), str(path))
    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.mode == "RGBA"
        assert img.size == (4, 6)
        assert img.getpixel((1, 2)) == (10, 20, 30, 40)


def test_save_frame_accepts_strided_views(tmp_path):
    sheet = np.zeros((8, 8, 4), dtype=np.uint8)
    sheet[:, 4:] = (1, 2, 3, 255)
    path = tmp_path / "view.png"
    assert save_frame(sheet[0:4, 4:8], str(path))
    with Image.open(path) as img:
        assert img.size == (4, 4)
        assert img.getpixel((0, 0)) == (1, 2, 3, 255)


def test_save_frame_reports_create_failure(tmp_path, caplog):
    path = tmp_path / "nope" / "f.png"
    with caplog.at_level(logging.ERROR, logger="spritemap_explode"):
        assert not save_frame(_frame(), str(path))
    assert "Cannot create file" in caplog.text
    assert not path.exists()


def test_save_frame_removes_partial_file_on_encode_failure(tmp_path, caplog, monkeypatch):
    def broken_save(self, fp, *args, **kwargs):
        fp.write(b"\x89PNG partial")
        raise OSError("disk full")

    monkeypatch.setattr(Image.Image, "save", broken_save)
    path = tmp_path / "f.png"
    with caplog.at_level(logging.ERROR, logger="spritemap_explode"):
        assert not save_frame(_frame(), str(path))
    assert "Cannot encode image into" in caplog.text
    assert "disk full" in caplog.text
    assert not path.exists()
