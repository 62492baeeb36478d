"""ISZ Toolkit - list and extract InstallShield 3 Z archives."""

__version__ = "0.1.0"

from .zarchive import AsyncZArchive, EntryInfo, ZArchive

__all__ = ["ZArchive", "AsyncZArchive", "EntryInfo", "__version__"]
