"""Read-only access to the parts of a .docx container."""

import logging
import zipfile
from pathlib import Path
from typing import BinaryIO, Optional, Union
from zipfile import BadZipFile

from ..models.enums import PartName
from .exceptions import DocumentCorruptedError


logger = logging.getLogger(__name__)


class DocxContainer:
    """
    Context manager exposing named parts of a .docx bundle as bytes.

    The bundle may be given as a path or as an open binary stream.

    The archive is held open only inside the ``with`` block and is closed
    on every exit path. Nothing is unpacked to disk.

    Example:
        >>> with DocxContainer("review.docx") as container:
        ...     body = container.read_part(PartName.DOCUMENT)
    """

    def __init__(self, source: Union[str, Path, BinaryIO]):
        self.source = source
        if isinstance(source, (str, Path)):
            self.file_path = str(source)
        else:
            self.file_path = str(getattr(source, "name", "<stream>"))
        self._zip: Optional[zipfile.ZipFile] = None

    def __enter__(self) -> "DocxContainer":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self) -> None:
        """
        Open the container.

        Raises:
            FileNotFoundError: If the file does not exist.
            DocumentCorruptedError: If the file is not a readable zip bundle.
        """
        source = self.source
        if isinstance(source, (str, Path)):
            source = Path(source)
            if not source.exists():
                raise FileNotFoundError(f"File not found: {self.file_path}")

        try:
            self._zip = zipfile.ZipFile(source, "r")
        except (BadZipFile, OSError) as e:
            raise DocumentCorruptedError(
                message="Document is corrupted or not a valid Word file",
                file_path=self.file_path,
                location="file header",
                details={"original_error": str(e)},
            )

    def close(self) -> None:
        if self._zip is not None:
            self._zip.close()
            self._zip = None

    def _archive(self) -> zipfile.ZipFile:
        if self._zip is None:
            raise RuntimeError("Container is not open")
        return self._zip

    def has_part(self, part: PartName) -> bool:
        """Check whether the named part exists in the bundle."""
        return part.value in self._archive().namelist()

    def read_part(self, part: PartName) -> Optional[bytes]:
        """
        Return the raw bytes of a part, or None if the part is absent.

        Raises:
            DocumentCorruptedError: If the part exists but cannot be inflated.
        """
        if not self.has_part(part):
            logger.debug(f"Part {part.value} not present in {self.file_path}")
            return None

        try:
            return self._archive().read(part.value)
        except (BadZipFile, zipfile.LargeZipFile, OSError) as e:
            raise DocumentCorruptedError(
                message=f"Failed to read part {part.value}",
                file_path=self.file_path,
                location=part.value,
                details={"original_error": str(e)},
            )
