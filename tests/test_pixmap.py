"""Tests for image_editor.core.pixmap — plain-text pixel-map codec."""

from pathlib import Path

import pytest
from image_editor.core.pixmap import format_pixmap, parse_pixmap, read_pixmap, write_pixmap
from image_editor.core.types import Color, Image, ParseError

SAMPLE = """P3
2 2
255
10 10 10 20 20 20
30 30 30 40 40 40
"""


class TestParsePixmap:
    def test_dimensions(self):
        img = parse_pixmap(SAMPLE)
        assert img.width() == 2
        assert img.height() == 2

    def test_row_major_order(self):
        img = parse_pixmap(SAMPLE)
        assert img.get(0, 0) == Color(10, 10, 10)
        assert img.get(1, 0) == Color(20, 20, 20)
        assert img.get(0, 1) == Color(30, 30, 30)
        assert img.get(1, 1) == Color(40, 40, 40)

    def test_whitespace_agnostic(self):
        img = parse_pixmap('P3 2\n1\t255 1 2 3\n\n  4\n5 6')
        assert img.get(0, 0) == Color(1, 2, 3)
        assert img.get(1, 0) == Color(4, 5, 6)

    def test_tag_and_maxval_ignored(self):
        img = parse_pixmap('X9 1 1 15 100 150 200')
        assert img.get(0, 0) == Color(100, 150, 200)

    def test_trailing_tokens_ignored(self):
        img = parse_pixmap('P3 1 1 255 1 2 3 extra 99')
        assert img.get(0, 0) == Color(1, 2, 3)

    def test_zero_size(self):
        img = parse_pixmap('P3 0 0 255')
        assert img.width() == 0
        assert img.height() == 0

    def test_non_numeric_width(self):
        with pytest.raises(ParseError, match='width'):
            parse_pixmap('P3 abc 2 255')

    def test_non_numeric_height(self):
        with pytest.raises(ParseError, match='height'):
            parse_pixmap('P3 2 2.5 255')

    def test_negative_dimension(self):
        with pytest.raises(ParseError):
            parse_pixmap('P3 -1 2 255')

    def test_truncated_header(self):
        with pytest.raises(ParseError):
            parse_pixmap('P3 2 2')

    def test_truncated_pixel_data(self):
        with pytest.raises(ParseError, match='Truncated'):
            parse_pixmap('P3 2 1 255 1 2 3 4 5')

    def test_non_numeric_colour(self):
        with pytest.raises(ParseError, match='colour'):
            parse_pixmap('P3 1 1 255 1 red 3')

    def test_colour_beyond_int64(self):
        with pytest.raises(ParseError, match='Cannot build'):
            parse_pixmap('P3 1 1 255 99999999999999999999 1 1')

    def test_dimension_beyond_array_limits(self):
        with pytest.raises(ParseError, match='Cannot build'):
            parse_pixmap('P3 100000000000000000000 0 255')

    def test_parse_error_is_value_error(self):
        assert issubclass(ParseError, ValueError)


class TestFormatPixmap:
    def test_header(self):
        text = format_pixmap(Image(3, 2))
        assert text.splitlines()[:3] == ['P3', '3 2', '255']

    def test_one_line_per_row(self):
        text = format_pixmap(parse_pixmap(SAMPLE))
        lines = text.split('\n')
        assert lines[3] == '10 10 10 20 20 20 '
        assert lines[4] == '30 30 30 40 40 40 '
        assert text.endswith('\n')

    def test_round_trip(self):
        img = Image.from_array([[[0, 1, 2], [255, 254, 253], [7, 8, 9]], [[3, 4, 5], [6, 7, 8], [100, 0, 50]]])
        again = parse_pixmap(format_pixmap(img))
        assert again == img
        assert format_pixmap(again) == format_pixmap(img)


class TestFileIO:
    def test_write_then_read(self, tmp_path: Path) -> None:
        path = tmp_path / 'out.ppm'
        img = parse_pixmap(SAMPLE)
        write_pixmap(img, str(path))
        assert read_pixmap(str(path)) == img

    def test_read_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_pixmap(str(tmp_path / 'missing.ppm'))

    def test_read_binary_file(self, tmp_path: Path) -> None:
        path = tmp_path / 'binary.ppm'
        path.write_bytes(b'P6\n1 1\n255\n\xff\xfe\x80')
        with pytest.raises(ParseError, match='not a text pixel map'):
            read_pixmap(str(path))

    def test_write_to_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            write_pixmap(Image(1, 1), str(tmp_path / 'nope' / 'out.ppm'))
