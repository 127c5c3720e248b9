"""
Exposes the version of geodetics
"""
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ['__version__']

# Source checkouts without installed metadata read the VERSION file shipped at the repo root
_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'

try:
    __version__ = version('geodetics')
except PackageNotFoundError:
    __version__ = _VERSION_FILE.read_text(encoding='utf-8').strip() if _VERSION_FILE.exists() else None
