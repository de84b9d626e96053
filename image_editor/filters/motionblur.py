"""Directional motion blur: average each pixel with the pixels to its right.

For pixel (x, y) and a blur length L, the window runs from x to
min(width - 1, x + L - 1) in the same row. Each channel becomes the floor
of the window mean. Windows near the right edge shrink, so the last pixel
of every row is left unchanged.

Averages are taken over the original pixels, never over blurred ones.
A length of 0 leaves the image unchanged, as does a length of 1.

Example:
    image-editor photo.ppm blurred.ppm motionblur 5
"""

import numpy as np

from image_editor.core.types import Filter, FilterRequest, Image

image_filter = Filter(
    name='motionblur',
    help='Average each pixel with the next LENGTH-1 pixels to its right.',
    takes_length=True,
)


def blur_rows(pixels: np.ndarray, length: int) -> np.ndarray:
    """Return the blurred copy of an (H, W, 3) array."""
    width = pixels.shape[1]
    # windows never reach past the row, so longer lengths behave like width
    length = min(length, width)
    # prefix[:, i] holds the sum of pixels[:, :i]
    prefix = np.zeros((pixels.shape[0], width + 1, 3), dtype=np.int64)
    np.cumsum(pixels, axis=1, out=prefix[:, 1:])

    start = np.arange(width)
    stop = np.minimum(width, start + length)
    sums = prefix[:, stop] - prefix[:, start]
    counts = (stop - start)[np.newaxis, :, np.newaxis]
    return sums // counts


@image_filter.run
def run(image: Image, request: FilterRequest) -> None:
    length = request.length or 0
    if length < 1 or image.pixels.size == 0:
        return
    image.pixels[...] = blur_rows(image.pixels, length)
