"""Extract raw part text from a DOCX archive and parse it into a :class:`Docx`."""
from __future__ import annotations

import io
import zipfile
import zlib
from dataclasses import dataclass, fields
from os import PathLike
from pathlib import Path
from typing import IO, Dict, Optional, Union

from docx_pack.model.document_model import Docx
from docx_pack.parts import PART_SPECS, PARTS_BY_NAME
from docx_pack.utils.errors import InvalidArchiveError, PartNotFoundError, PartReadError
from docx_pack.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DocxFile:
    """Raw text of each known part, as found in the archive.

    Required parts are always present. Optional parts are ``None`` when the
    archive has no entry at their path; an entry that exists but cannot be
    read raises instead.
    """

    content_types: str
    document: str
    rels: str
    app: Optional[str] = None
    core: Optional[str] = None
    styles: Optional[str] = None
    font_table: Optional[str] = None
    document_rels: Optional[str] = None

    @classmethod
    def from_reader(cls, reader: IO[bytes]) -> "DocxFile":
        """Extract every known part from a seekable binary stream."""
        try:
            archive = zipfile.ZipFile(reader)
        except zipfile.BadZipFile as exc:
            raise InvalidArchiveError(f"Not a zip container: {exc}") from exc

        buffers: Dict[str, Optional[str]] = {}
        with archive:
            for spec in PART_SPECS:
                text = cls._read_part(archive, spec.path)
                if text is None:
                    if spec.required:
                        raise PartNotFoundError(spec.path)
                    LOGGER.debug("Optional part %s not present", spec.path)
                buffers[spec.name] = text

        LOGGER.debug("Extracted %d parts", sum(1 for text in buffers.values() if text is not None))
        return cls(**buffers)

    @classmethod
    def from_file(cls, path: Union[str, PathLike]) -> "DocxFile":
        with Path(path).open("rb") as handle:
            return cls.from_reader(handle)

    @classmethod
    def from_bytes(cls, data: bytes) -> "DocxFile":
        return cls.from_reader(io.BytesIO(data))

    def raw_part(self, path: str) -> Optional[str]:
        """Return the extracted text stored for an archive path."""
        for spec in PART_SPECS:
            if spec.path == path:
                return getattr(self, spec.name)
        raise KeyError(f"Unknown part path: {path}")

    def present_parts(self) -> Dict[str, str]:
        """Map archive path to text for every part that was found."""
        return {
            PARTS_BY_NAME[item.name].path: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }

    def parse(self) -> Docx:
        """Parse every extracted buffer; the first failing part aborts the whole parse."""
        values = {}
        for spec in PART_SPECS:
            raw = getattr(self, spec.name)
            values[spec.name] = None if raw is None else spec.parse(raw)
        docx = Docx(**values)
        for name in docx.missing_relationships():
            LOGGER.warning("Part %s has no relationship in its scope", PARTS_BY_NAME[name].path)
        return docx

    @staticmethod
    def _read_part(archive: zipfile.ZipFile, path: str) -> Optional[str]:
        try:
            info = archive.getinfo(path)
        except KeyError:
            return None
        try:
            data = archive.read(info)
        except (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError, RuntimeError) as exc:
            raise PartReadError(path, str(exc)) from exc
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise PartReadError(path, f"not UTF-8 text ({exc.reason})") from exc


def load_docx(source: Union[str, PathLike, IO[bytes]]) -> Docx:
    """Extract and parse a DOCX package from a path or binary stream."""
    if isinstance(source, (str, PathLike)):
        docx_file = DocxFile.from_file(source)
    else:
        docx_file = DocxFile.from_reader(source)
    return docx_file.parse()
