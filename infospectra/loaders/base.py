"""
Base loader class and registry for text sources.

Loaders turn a file on disk into the raw text handed to the pipeline
and register themselves with the LoaderRegistry for format detection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar


class LoaderError(Exception):
    """Base exception for loader errors."""

    def __init__(self, message: str, source_path: Path | None = None, details: str | None = None):
        self.source_path = source_path
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "source_path": str(self.source_path) if self.source_path else None,
            "details": self.details,
        }


class BaseLoader(ABC):
    """
    Abstract base class for text loaders.

    Each loader is responsible for:
    1. Detecting if it can handle a file type
    2. Reading the file into a string
    3. Reporting warnings (e.g. fallback encodings) for the caller
    """

    SUPPORTED_EXTENSIONS: ClassVar[list[str]] = []
    LOADER_NAME: ClassVar[str] = "base"

    def __init__(self) -> None:
        self._warnings: list[str] = []

    @classmethod
    def can_load(cls, path: Path) -> bool:
        """Check if this loader can handle the given file."""
        return path.suffix.lower() in cls.SUPPORTED_EXTENSIONS

    @abstractmethod
    def load(self, path: Path) -> str:
        """
        Read a file into text.

        Raises:
            LoaderError: If loading fails
        """

    @property
    def warnings(self) -> list[str]:
        return list(self._warnings)

    def _reset_messages(self) -> None:
        self._warnings = []

    def _add_warning(self, message: str) -> None:
        self._warnings.append(message)


class LoaderRegistry:
    """Registry of available loaders."""

    _loaders: ClassVar[dict[str, type[BaseLoader]]] = {}

    @classmethod
    def register(cls, loader_class: type[BaseLoader]) -> type[BaseLoader]:
        """Register a loader class. Usable as a decorator."""
        cls._loaders[loader_class.LOADER_NAME] = loader_class
        return loader_class

    @classmethod
    def get_loader(cls, path: Path) -> BaseLoader:
        """Return a loader instance for the file type of ``path``."""
        for loader_class in cls._loaders.values():
            if loader_class.can_load(path):
                return loader_class()
        raise LoaderError(
            f"No loader available for file type: {path.suffix or '(none)'}",
            source_path=path,
            details=f"Supported: {', '.join(cls.supported_extensions())}",
        )

    @classmethod
    def supported_extensions(cls) -> list[str]:
        extensions: list[str] = []
        for loader_class in cls._loaders.values():
            extensions.extend(loader_class.SUPPORTED_EXTENSIONS)
        return sorted(set(extensions))

    @classmethod
    def load_text(cls, path: Path) -> str:
        """Pick a loader for ``path`` and read it."""
        path = Path(path)
        if not path.exists():
            raise LoaderError(f"File not found: {path}", source_path=path)
        return cls.get_loader(path).load(path)
