"""Write a :class:`Docx` aggregate into a zip container."""
from __future__ import annotations

import zipfile
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import IO, List, Optional, Union
from xml.etree import ElementTree as ET

from docx_pack.model.document_model import Docx
from docx_pack.parts import PART_SPECS, PartSpec, RelScope
from docx_pack.utils.errors import ArchiveError, SerializationError
from docx_pack.utils.logger import get_logger

LOGGER = get_logger(__name__)

# Fixed entry timestamp keeps output byte-stable for identical input.
ZIP_ENTRY_DATE_TIME = (1980, 1, 1, 0, 0, 0)


@dataclass(frozen=True)
class WriteOptions:
    """Zip entry settings; none of them affect interoperability."""

    compression: int = zipfile.ZIP_DEFLATED
    compresslevel: Optional[int] = None
    unix_permissions: int = 0o644


class DocxWriter:
    """Serialize every present part at its canonical path, in table order.

    Each written part that is referenced from a relationship graph appends
    exactly one entry to that graph, so the aggregate must not be written a
    second time without :meth:`Docx.reset_relationships`. A failure midway
    leaves the destination holding a partial archive.
    """

    def __init__(self, docx: Docx, options: Optional[WriteOptions] = None) -> None:
        self._docx = docx
        self._options = options or WriteOptions()

    def write(self, stream: IO[bytes]) -> IO[bytes]:
        """Write the package into ``stream`` and return the stream."""
        planned = [spec for spec in PART_SPECS if self._will_write(spec)]
        self._cover_content_types(planned)
        try:
            with zipfile.ZipFile(stream, "w", compression=self._options.compression) as archive:
                for spec in planned:
                    self._write_part(archive, spec)
        except (zipfile.BadZipFile, zipfile.LargeZipFile) as exc:
            raise ArchiveError(f"Unable to write zip container: {exc}") from exc
        LOGGER.debug("Wrote package with %d parts", len(planned))
        return stream

    def write_file(self, path: Union[str, PathLike]) -> Path:
        target = Path(path)
        with target.open("wb") as handle:
            self.write(handle)
        LOGGER.info("Saved %s", target.name)
        return target

    # ------------------------------------------------------------------
    def _will_write(self, spec: PartSpec) -> bool:
        if getattr(self._docx, spec.name) is not None:
            return True
        # The part-level graph comes into existence when its first dependent is written.
        if spec.name == "document_rels":
            return any(
                other.scope is RelScope.DOCUMENT and getattr(self._docx, other.name) is not None
                for other in PART_SPECS
            )
        return False

    def _cover_content_types(self, planned: List[PartSpec]) -> None:
        for spec in planned:
            if spec.content_type and self._docx.content_types.cover(spec.path, spec.content_type):
                LOGGER.debug("Registered content type override for %s", spec.path)

    def _write_part(self, archive: zipfile.ZipFile, spec: PartSpec) -> None:
        data = self._serialize(spec, getattr(self._docx, spec.name))
        archive.writestr(self._zip_info(spec.path), data, compresslevel=self._options.compresslevel)
        LOGGER.debug("Wrote %s (%d bytes)", spec.path, len(data))

        if spec.scope is RelScope.PACKAGE:
            self._docx.rels.add_rel(spec.rel_type, spec.rel_target)
        elif spec.scope is RelScope.DOCUMENT:
            self._docx.ensure_document_rels().add_rel(spec.rel_type, spec.rel_target)

    def _serialize(self, spec: PartSpec, value: object) -> bytes:
        try:
            return spec.serialize(value)
        except SerializationError as exc:
            raise SerializationError(f"{spec.path}: {exc}") from exc
        except (TypeError, ValueError, AttributeError, ET.ParseError) as exc:
            raise SerializationError(f"Failed to serialize {spec.path}: {exc}") from exc

    def _zip_info(self, path: str) -> zipfile.ZipInfo:
        info = zipfile.ZipInfo(path, date_time=ZIP_ENTRY_DATE_TIME)
        info.compress_type = self._options.compression
        info.external_attr = (self._options.unix_permissions & 0xFFFF) << 16
        return info
