from pathlib import Path
from typing import Tuple

from PIL import Image

from ..exceptions import DimensionProbeError


class DimensionProbe:
    """
    Reads pixel dimensions from the image header.

    Image.open() is lazy: it parses the header to learn mode and size and
    only touches pixel data on load(), which we never call.
    """

    def read_dimensions(self, path: Path) -> Tuple[int, int]:
        """
        Returns (width, height).

        Raises DimensionProbeError for anything Pillow cannot identify:
        corrupt or truncated headers, unsupported variants.
        """
        # The decompression bomb limit guards decoding only; lift it for the header read
        saved_limit = Image.MAX_IMAGE_PIXELS
        Image.MAX_IMAGE_PIXELS = None
        try:
            with Image.open(path) as im:
                width, height = im.size
        except Exception as e:
            raise DimensionProbeError(f"{path}: {e}") from e
        finally:
            Image.MAX_IMAGE_PIXELS = saved_limit

        return int(width), int(height)
