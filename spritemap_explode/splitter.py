import logging
from dataclasses import dataclass, field

import numpy as np
from PIL import Image, UnidentifiedImageError

from spritemap_explode.errors import SourceDecodeError, SourceOpenError, UnsupportedFormatError
from spritemap_explode.grid import compute_grid, filename_format, frame_filename
from spritemap_explode.writer import save_frame

logger = logging.getLogger(__name__)

# Modes Pillow converts to RGBA directly.
RGBA_MODES = frozenset({"1", "L", "LA", "P", "PA", "RGB", "RGBA", "RGBa", "RGBX", "CMYK", "YCbCr"})
# 16-bit grayscale; convert("RGBA") would clip these, so they are scaled down by hand.
WIDE_GRAY_MODES = frozenset({"I", "I;16", "I;16B", "I;16L"})
# Anything else (F, I;16S, ...) cannot be cut into frames with an alpha channel.
SUBIMAGE_MODES = RGBA_MODES | WIDE_GRAY_MODES

DECODE_ERRORS = (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError, EOFError)


class SpriteMap:
    """A decoded sprite map held as a read-only RGBA array of shape (height, width, 4)."""

    def __init__(self, pixels, image_format=None):
        pixels = np.asarray(pixels, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"expected an RGBA array, got shape {pixels.shape}")
        pixels.setflags(write=False)
        self.pixels = pixels
        self.format = image_format

    @property
    def width(self):
        return self.pixels.shape[1]

    @property
    def height(self):
        return self.pixels.shape[0]

    @classmethod
    def from_image(cls, img):
        if not supports_subimages(img):
            raise UnsupportedFormatError(
                f"Image format {img.format} (mode {img.mode}) does not support extracting sub-images")
        if img.mode in WIDE_GRAY_MODES:
            return cls(widen_gray(np.array(img)), img.format)
        return cls(np.array(img.convert("RGBA")), img.format)

    @classmethod
    def open(cls, filename):
        try:
            fh = open(filename, "rb")
        except OSError as e:
            raise SourceOpenError(f"Cannot open {filename}: {e}") from e
        with fh:
            try:
                img = Image.open(fh)
                img.load()
            except DECODE_ERRORS as e:
                raise SourceDecodeError(f"Cannot decode {filename}: {e}") from e
            return cls.from_image(img)

    def frame(self, box):
        """Return a view of the pixels inside box, clamped to the sprite map."""
        left, top, right, bottom = box
        return self.pixels[top:bottom, left:right]


def supports_subimages(img):
    return img.mode in SUBIMAGE_MODES


def widen_gray(gray):
    """Map a 16-bit grayscale array to opaque 8-bit RGBA, keeping the high byte."""
    level = (np.clip(gray.astype(np.int64), 0, 0xFFFF) >> 8).astype(np.uint8)
    alpha = np.full_like(level, 255)
    return np.dstack((level, level, level, alpha))


def is_empty(frame):
    return not frame[..., 3].any()


def mirror(frame):
    return np.ascontiguousarray(frame[:, ::-1])


@dataclass
class ExplodeResult:
    written: list = field(default_factory=list)
    failed: list = field(default_factory=list)
    skipped_empty: int = 0


def explode(config, sprite_map):
    grid = compute_grid(config, sprite_map.width, sprite_map.height)
    fmt = filename_format(grid, mirror=config.mirror_left)
    result = ExplodeResult()

    logger.info("Slicing %s (%dx%d) into %d rows x %d columns of %dx%d",
                config.filename, sprite_map.width, sprite_map.height,
                grid.rows, grid.columns, grid.frame_width, grid.frame_height)

    for row, column, box in grid.cells():
        frame = sprite_map.frame(box)
        if is_empty(frame):
            logger.debug("Frame %d-%d is empty, skipping", row, column)
            result.skipped_empty += 1
            continue

        if config.mirror_left:
            outputs = [
                (frame_filename(fmt, config.prefix, row, column, "r"), frame),
                (frame_filename(fmt, config.prefix, row, column, "l"), mirror(frame)),
            ]
        else:
            outputs = [(frame_filename(fmt, config.prefix, row, column), frame)]

        for filename, pixels in outputs:
            if save_frame(pixels, filename):
                result.written.append(filename)
            else:
                result.failed.append(filename)

    logger.info("Wrote %d files from %dx%d grid (%d empty, %d failed)",
                len(result.written), grid.rows, grid.columns,
                result.skipped_empty, len(result.failed))
    return result
