"""Emboss: highlight edges against the up-left diagonal neighbour.

For each pixel, take the per-channel difference (pixel - up-left pixel)
and keep the signed difference with the largest magnitude, checking red,
then green, then blue. A later channel only wins if it is strictly larger,
so ties keep the earlier channel. Pixels in the first row or column have
no up-left neighbour and use a difference of 0.

The result is gray: level = clamp(128 + diff, 0, 255).

All differences are computed from the original pixels, never from
already-embossed ones.

Example:
    image-editor photo.ppm embossed.ppm emboss
"""

import numpy as np

from image_editor.core.types import MAX_CHANNEL, Filter, FilterRequest, Image

image_filter = Filter(
    name='emboss',
    help='Gray relief from the difference with the up-left neighbour.',
)

MID_GRAY = 128


def _max_channel_diff(current: np.ndarray, up_left: np.ndarray) -> np.ndarray:
    """Signed channel difference with the largest magnitude, first channel on ties."""
    diffs = current - up_left
    # argmax returns the first occurrence of the maximum
    idx = np.argmax(np.abs(diffs), axis=-1)
    return np.take_along_axis(diffs, idx[..., np.newaxis], axis=-1)[..., 0]


@image_filter.run
def run(image: Image, request: FilterRequest) -> None:
    original = image.pixels.copy()
    diff = np.zeros(original.shape[:2], dtype=np.int64)
    if image.width() > 1 and image.height() > 1:
        diff[1:, 1:] = _max_channel_diff(original[1:, 1:], original[:-1, :-1])

    level = np.clip(MID_GRAY + diff, 0, MAX_CHANNEL)
    image.pixels[...] = level[..., np.newaxis]
