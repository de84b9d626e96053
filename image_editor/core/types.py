"""Shared types for image-editor: Color, Image, Filter, FilterRequest, errors."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

MAX_CHANNEL = 255


class UsageError(Exception):
    """Command-line misuse: bad argument count, unknown filter, bad length."""


class ParseError(ValueError):
    """Malformed pixel-map input."""


def _clamp(value: int, low: int = 0, high: int = MAX_CHANNEL) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True)
class Color:
    """An RGB triple. Channels may sit outside [0, 255] until clamped."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def clamped(self) -> Color:
        return Color(_clamp(self.red), _clamp(self.green), _clamp(self.blue))


class Image:
    """A fixed-size grid of RGB pixels addressed by (x, y).

    Pixels are stored as a dense int64 array of shape (height, width, 3),
    row-major with y as the outer axis. Filters work on `pixels` directly;
    `get` and `set` are the bounds-checked single-pixel accessors.
    """

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f'Image dimensions must be non-negative, got {width}x{height}')
        self.pixels = np.zeros((height, width, 3), dtype=np.int64)

    @classmethod
    def from_array(cls, arr) -> Image:
        """Build an image from an (H, W, 3) array-like. The data is copied."""
        data = np.array(arr, dtype=np.int64)
        if data.ndim != 3 or data.shape[2] != 3:
            raise ValueError(f'Expected an array of shape (height, width, 3), got {data.shape}')
        image = cls(data.shape[1], data.shape[0])
        image.pixels[...] = data
        return image

    def width(self) -> int:
        return self.pixels.shape[1]

    def height(self) -> int:
        return self.pixels.shape[0]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width() and 0 <= y < self.height()):
            raise IndexError(f'Pixel ({x}, {y}) outside {self.width()}x{self.height()} image')

    def get(self, x: int, y: int) -> Color:
        self._check(x, y)
        r, g, b = self.pixels[y, x]
        return Color(int(r), int(g), int(b))

    def set(self, x: int, y: int, red: int, green: int, blue: int) -> None:
        """Overwrite one pixel. Values are stored unclamped."""
        self._check(x, y)
        self.pixels[y, x] = (red, green, blue)

    def copy(self) -> Image:
        return Image.from_array(self.pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self.pixels.shape == other.pixels.shape and bool(np.array_equal(self.pixels, other.pixels))

    def __repr__(self) -> str:
        return f'Image({self.width()}x{self.height()})'


@dataclass(frozen=True)
class FilterRequest:
    """One validated filter invocation: a filter name plus its length, if it takes one."""

    name: str
    length: int | None = None


class Filter:
    """A self-registering image filter.

    Usage in a filter module:

        image_filter = Filter(name='invert', help='Invert every colour channel')

        @image_filter.run
        def run(image, request):
            ...
    """

    def __init__(self, name: str, help: str = '', aliases: tuple[str, ...] = (), takes_length: bool = False):
        self.name = name
        self.help = help
        self.aliases = aliases
        self.takes_length = takes_length
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def apply(self, image: Image, request: FilterRequest) -> None:
        """Execute the filter's run function against image, in place."""
        if self._run_fn is None:
            raise RuntimeError(f'Filter {self.name} has no run function')
        self._run_fn(image, request)
