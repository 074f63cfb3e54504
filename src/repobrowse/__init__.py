# repobrowse - revision-aware browsing of submission repositories.
# Created: 2026-10-19

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("repobrowse")
except PackageNotFoundError:
    __version__ = "0.0.0"
