"""
Plain text loader.

Reads .txt files as a whole, trying UTF-8 first and falling back to
common single-byte encodings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

from infospectra.loaders.base import BaseLoader, LoaderError, LoaderRegistry

logger = logging.getLogger(__name__)

FALLBACK_ENCODINGS = ("cp1251", "cp1252", "latin-1")


@LoaderRegistry.register
class TextLoader(BaseLoader):
    """Load plain text documents."""

    SUPPORTED_EXTENSIONS: ClassVar[list[str]] = [".txt", ".text"]
    LOADER_NAME: ClassVar[str] = "text"

    def load(self, path: Path) -> str:
        """Read a text file, trying fallback encodings on decode errors."""
        self._reset_messages()
        try:
            return self.decode(path.read_bytes())
        except LoaderError as exc:
            exc.source_path = path
            raise
        except OSError as e:
            raise LoaderError(
                f"Failed to read text file: {e}",
                source_path=path,
                details=str(e),
            ) from e

    def decode(self, raw: bytes) -> str:
        """Decode raw bytes as text. Used directly for uploaded content."""
        self._reset_messages()
        try:
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError:
            pass

        for encoding in FALLBACK_ENCODINGS:
            try:
                content = raw.decode(encoding)
            except UnicodeDecodeError:
                continue
            self._add_warning(f"Used fallback encoding: {encoding}")
            logger.info("Decoded text with fallback encoding %s", encoding)
            return content

        raise LoaderError(
            "Could not decode text file with any supported encoding",
            details=f"Tried: utf-8, {', '.join(FALLBACK_ENCODINGS)}",
        )


def load_text(path: str | Path, base_directory: Path | None = None) -> str:
    """
    Read a supported text file into a string.

    The path is checked for traversal sequences, a supported extension,
    existence and the size limit before it is read.

    Args:
        path: File to read.
        base_directory: When given, the file must resolve inside it.

    Raises:
        LoaderError: If the path is rejected or the file cannot be read.
    """
    # shared.hardening imports this package, so import it at call time
    from shared.hardening import InputValidator, ValidationError

    try:
        resolved = InputValidator().validate_file_path(
            path,
            allowed_extensions=tuple(LoaderRegistry.supported_extensions()),
            base_directory=base_directory,
        )
    except ValidationError as exc:
        raise LoaderError(str(exc), source_path=Path(path)) from exc
    return LoaderRegistry.load_text(resolved)
