import pytest
from PIL import Image


@pytest.fixture
def half_empty_sheet(tmp_path):
    """64x32 sheet: left 32x32 cell opaque, right cell fully transparent."""
    path = tmp_path / "hero.png"
    img = Image.new("RGBA", (64, 32), (0, 0, 0, 0))
    # asymmetric content so a flip is observable
    img.paste(Image.new("RGBA", (8, 32), (255, 0, 0, 255)), (0, 0))
    img.paste(Image.new("RGBA", (24, 32), (0, 0, 255, 128)), (8, 0))
    img.save(path)
    return path
