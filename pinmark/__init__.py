"""Git gutter annotations against HEAD or a pinned reference."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pinmark")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
