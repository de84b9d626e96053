"""Plain-text pixel-map codec ("P3"-style).

Layout on input, as whitespace-separated tokens:

    <tag> <width> <height> <maxval> r g b r g b ...

The tag and maxval are skipped. Pixels follow row-major: all of row 0
left to right, then row 1, and so on. Any run of whitespace separates
tokens. Tokens after the last pixel are ignored.

Output always writes tag P3 and maxval 255, one image row per line.
"""

import numpy as np

from image_editor.core.types import MAX_CHANNEL, Image, ParseError

FORMAT_TAG = 'P3'
HEADER_TOKENS = 4


def read_pixmap(path: str) -> Image:
    """Parse a pixel-map file from disk."""
    with open(path, encoding='utf-8') as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise ParseError(f'{path} is not a text pixel map: {e.reason}') from None
    return parse_pixmap(text)


def parse_pixmap(text: str) -> Image:
    """Parse a pixel map from a string."""
    tokens = text.split()
    if len(tokens) < HEADER_TOKENS:
        raise ParseError(f'Truncated header: expected {HEADER_TOKENS} tokens, got {len(tokens)}')

    width = _parse_dimension(tokens[1], 'width')
    height = _parse_dimension(tokens[2], 'height')

    count = width * height * 3
    body = tokens[HEADER_TOKENS : HEADER_TOKENS + count]
    if len(body) < count:
        raise ParseError(f'Truncated pixel data: {width}x{height} image needs {count} values, got {len(body)}')

    values = []
    for offset, token in enumerate(body):
        try:
            values.append(int(token))
        except ValueError:
            raise ParseError(f'Invalid colour value {token!r} at token {HEADER_TOKENS + offset}') from None

    try:
        arr = np.array(values, dtype=np.int64).reshape(height, width, 3)
        return Image.from_array(arr)
    except (OverflowError, ValueError) as e:
        raise ParseError(f'Cannot build {width}x{height} image: {e}') from None


def _parse_dimension(token: str, label: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ParseError(f'Invalid {label}: {token!r}') from None
    if value < 0:
        raise ParseError(f'Invalid {label}: {value} is negative')
    return value


def format_pixmap(image: Image) -> str:
    """Format an image as pixel-map text."""
    parts = [f'{FORMAT_TAG}\n', f'{image.width()} {image.height()}\n', f'{MAX_CHANNEL}\n']
    for row in image.pixels:
        parts.append(''.join(f'{r} {g} {b} ' for r, g, b in row.tolist()))
        parts.append('\n')
    return ''.join(parts)


def write_pixmap(image: Image, path: str) -> None:
    """Write an image to disk. The document is fully formatted before the file is opened."""
    text = format_pixmap(image)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)
