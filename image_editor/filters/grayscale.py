"""Convert every pixel to gray: the floor of its channel mean, clamped to [0, 255].

Each pixel is independent, so an already-gray image is unchanged and
applying the filter twice gives the same result as once.

Also accepted as 'greyscale'.

Example:
    image-editor photo.ppm gray.ppm grayscale
"""

import numpy as np

from image_editor.core.types import MAX_CHANNEL, Filter, FilterRequest, Image

image_filter = Filter(
    name='grayscale',
    help='Set each pixel to the floor of its channel mean.',
    aliases=('greyscale',),
)


@image_filter.run
def run(image: Image, request: FilterRequest) -> None:
    level = np.clip(image.pixels.sum(axis=-1) // 3, 0, MAX_CHANNEL)
    image.pixels[...] = level[..., np.newaxis]
