"""Invert every colour channel: channel becomes 255 - channel.

Applying the filter twice restores the original image.

Example:
    image-editor photo.ppm negative.ppm invert
"""

from image_editor.core.types import MAX_CHANNEL, Filter, FilterRequest, Image

image_filter = Filter(
    name='invert',
    help='Invert every colour channel (255 - value).',
)


@image_filter.run
def run(image: Image, request: FilterRequest) -> None:
    image.pixels[...] = MAX_CHANNEL - image.pixels
