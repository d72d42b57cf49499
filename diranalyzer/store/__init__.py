"""Persistence of the registered directories list."""

from .manager import DirectoryStore, expand_path

__all__ = ["DirectoryStore", "expand_path"]
