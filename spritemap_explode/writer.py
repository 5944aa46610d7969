import logging
import os

from PIL import Image

logger = logging.getLogger(__name__)


def save_frame(pixels, filename):
    """Write an RGBA array as PNG. Errors are logged and reported as False, never raised."""
    try:
        fh = open(filename, "wb")
    except OSError as e:
        logger.error("Cannot create file %s: %s", filename, e)
        return False

    try:
        with fh:
            Image.fromarray(pixels).save(fh, "PNG")
    except (OSError, ValueError) as e:
        logger.error("Cannot encode image into %s: %s", filename, e)
        try:
            os.remove(filename)
        except OSError:
            logger.warning("Could not remove partial file %s", filename)
        return False

    logger.info("Saved %s", filename)
    return True
