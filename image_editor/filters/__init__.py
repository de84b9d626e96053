"""Auto-discovery of filter modules.

Every .py file in this package that defines an `image_filter` object is
auto-registered by image_editor.registry.discover().

The explicit imports below keep frozen builds working, where
pkgutil.iter_modules cannot see the filter files at runtime.
"""

# Keep this list in sync with the filter modules
import image_editor.filters.emboss as _emboss  # noqa: F401
import image_editor.filters.grayscale as _grayscale  # noqa: F401
import image_editor.filters.invert as _invert  # noqa: F401
import image_editor.filters.motionblur as _motionblur  # noqa: F401
