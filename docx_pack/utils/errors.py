"""Typed exceptions raised while writing, extracting and parsing packages."""
from __future__ import annotations

from typing import Optional


class DocxError(Exception):
    """Base class for all package errors."""


class ArchiveError(DocxError):
    """Raised when the zip container cannot be read or written."""


class InvalidArchiveError(ArchiveError):
    """Raised when the byte source is not a zip container."""


class PartNotFoundError(ArchiveError, KeyError):
    """Raised when a required part is absent from the archive."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Required DOCX part missing: {path}")
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0])


class PartReadError(ArchiveError):
    """Raised when a part exists but its bytes cannot be read as text."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to read part {path}: {reason}")
        self.path = path


class XmlStructureError(DocxError, ValueError):
    """Raised when a part's XML is malformed or does not match its schema."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path


class SerializationError(DocxError):
    """Raised when an in-memory part cannot be turned into XML."""
