"""Filter auto-discovery, lookup and dispatch.

Scans image_editor/filters/ for modules that define an `image_filter` object
of type Filter. Collects them into a dict keyed by canonical name, plus an
alias table (e.g. 'greyscale' -> 'grayscale').

Falls back to an explicit module list for frozen builds, where
pkgutil.iter_modules returns nothing.
"""

import importlib
import pkgutil

from image_editor.core.types import Filter, FilterRequest, Image, UsageError

_registry: dict[str, Filter] = {}
_aliases: dict[str, str] = {}

# Fallback for frozen binaries
_FILTER_MODULES = [
    'emboss',
    'grayscale',
    'invert',
    'motionblur',
]


def discover() -> dict[str, Filter]:
    """Import all filter modules and return the registry."""
    if _registry:
        return _registry

    import image_editor.filters as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _FILTER_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'image_editor.filters.{modname}')
        flt = getattr(module, 'image_filter', None)
        if isinstance(flt, Filter):
            _registry[flt.name] = flt
            for alias in flt.aliases:
                _aliases[alias] = flt.name

    return _registry


def get(name: str) -> Filter:
    """Get a filter by name or alias."""
    reg = discover()
    canonical = _aliases.get(name, name)
    if canonical not in reg:
        raise KeyError(f'Unknown filter: {name}. Available: {", ".join(sorted(reg))}')
    return reg[canonical]


def all_filters() -> dict[str, Filter]:
    """Return all registered filters."""
    return discover()


def make_request(name: str, length: str | None = None) -> FilterRequest:
    """Validate a filter name and optional length argument into a FilterRequest.

    Raises UsageError if the name is unknown, if a length is given to a filter
    that takes none (or missing for one that needs it), or if the length is
    not a non-negative integer.
    """
    try:
        flt = get(name)
    except KeyError as e:
        raise UsageError(e.args[0]) from None

    if not flt.takes_length:
        if length is not None:
            raise UsageError(f'{flt.name} takes no length argument')
        return FilterRequest(flt.name)

    if length is None:
        raise UsageError(f'{flt.name} requires a length argument')
    try:
        value = int(length)
    except ValueError:
        raise UsageError(f'Invalid {flt.name} length: {length!r}') from None
    if value < 0:
        raise UsageError(f'Invalid {flt.name} length: {value} is negative')
    return FilterRequest(flt.name, value)


def apply(image: Image, request: FilterRequest) -> None:
    """Run the requested filter against image, in place."""
    get(request.name).apply(image, request)
