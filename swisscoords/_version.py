"""
Exposes the version of swisscoords

Installed packages report the version from their metadata. A source checkout
falls back to the VERSION file at the repository root, which setup.py also
reads.
"""
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]

_VERSION_FILE = Path(__file__).resolve().parents[1] / "VERSION"

try:
    __version__ = version("swisscoords")
except PackageNotFoundError:
    __version__ = _VERSION_FILE.read_text(encoding="utf-8").strip() if _VERSION_FILE.is_file() else None
