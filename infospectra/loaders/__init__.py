"""Loaders for text sources."""

from infospectra.loaders.base import BaseLoader, LoaderError, LoaderRegistry
from infospectra.loaders.text import TextLoader, load_text

__all__ = [
    "BaseLoader",
    "LoaderError",
    "LoaderRegistry",
    "TextLoader",
    "load_text",
]
