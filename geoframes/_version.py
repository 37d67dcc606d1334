"""Version lookup for geoframes"""

__all__ = ['__version__', 'get_version']

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _read_version_file() -> Optional[str]:
    """Reads the repository's VERSION file, for source trees without installed metadata"""
    try:
        return _VERSION_FILE.read_text(encoding='utf-8').strip()
    except OSError:
        return None


try:
    __version__: Optional[str] = version('geoframes')
except PackageNotFoundError:
    __version__ = _read_version_file()


def get_version() -> str:
    """
    The version identifier of geoframes: the installed distribution's version, else the
    contents of the repository VERSION file, else 'unknown'.
    """
    return __version__ or 'unknown'
