"""image-editor — Apply a spatial filter to a plain-text pixel-map image.

Usage: image-editor <in-file> <out-file> <filter> [motion-blur-length]

Filters are auto-discovered from image_editor/filters/.
Each filter module's docstring is its documentation.

Reads the whole input image, applies exactly one filter in memory, then
writes the result. Nothing is written unless every step before it succeeded.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, image-editor looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from image_editor import registry
from image_editor.core.env import Settings
from image_editor.core.pixmap import read_pixmap, write_pixmap
from image_editor.core.types import ParseError, UsageError

PROG = 'image-editor'


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str):
        raise UsageError(message)


def _filter_names() -> str:
    return '|'.join(sorted(registry.all_filters()))


def _build_parser() -> argparse.ArgumentParser:
    lines = ['Filters:']
    for name, flt in sorted(registry.all_filters().items()):
        label = name + (f' ({", ".join(flt.aliases)})' if flt.aliases else '')
        lines.append(f'  {label:<24} {flt.help}')
    lines += [
        '',
        'Examples:',
        f'  {PROG} photo.ppm gray.ppm grayscale',
        f'  {PROG} photo.ppm blurred.ppm motionblur 5',
        '',
        'Environment (set in .env or environment):',
        '  IMAGE_EDITOR_VERBOSE=1   print progress on stderr',
    ]
    parser = _Parser(
        prog=PROG,
        usage=f'{PROG} <in-file> <out-file> <{_filter_names()}> [motion-blur-length]',
        description='Apply a spatial filter to a plain-text pixel-map image.',
        epilog='\n'.join(lines),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('in_file', help='Input pixel-map file')
    parser.add_argument('out_file', help='Output pixel-map file')
    parser.add_argument('filter', help='Filter name')
    parser.add_argument('length', nargs='?', default=None, help='Motion blur length (motionblur only)')
    return parser


def _report(message: str) -> None:
    print(f'{PROG}: {message}', file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()

    # Misuse never touches the filesystem: report, print usage, exit cleanly
    try:
        args = parser.parse_args(argv)
        request = registry.make_request(args.filter, args.length)
    except UsageError as e:
        _report(str(e))
        print(parser.format_help())
        return 0

    settings = Settings.load(env_file=args.env_file)
    if settings.env_path and settings.verbose:
        _report(f'loaded {settings.env_path}')

    try:
        image = read_pixmap(args.in_file)
        if settings.verbose:
            _report(f'read {args.in_file} ({image.width()}×{image.height()})')

        registry.apply(image, request)
        if settings.verbose:
            detail = f' length={request.length}' if request.length is not None else ''
            _report(f'applied {request.name}{detail}')

        write_pixmap(image, args.out_file)
        if settings.verbose:
            _report(f'wrote {args.out_file}')
    except (ParseError, OSError) as e:
        _report(f'error: {e}')
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
