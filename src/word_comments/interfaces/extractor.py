"""Comment extractor interface for the Word comments extractor."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, List, Union

from ..models.comment import CommentRecord, ExtractionResult


class ICommentExtractor(ABC):
    """
    Abstract interface for comment extraction.

    Implementations read a .docx container and produce the ordered,
    threaded comment record set consumed by export writers and viewers.
    """

    @abstractmethod
    def extract(self, source: Union[str, Path, BinaryIO]) -> ExtractionResult:
        """
        Extract all comments from a document.

        Args:
            source: Path to the .docx file, or an open binary stream.

        Returns:
            ExtractionResult with the ordered record set and notes.

        Raises:
            FileNotFoundError: If the file does not exist.
            ParseError: If the container or one of its parts is unreadable.
        """
        pass

    @abstractmethod
    def has_comments(self, source: Union[str, Path, BinaryIO]) -> bool:
        """
        Check whether a document contains at least one comment.

        Only the comment definitions are inspected; no positions or
        threads are computed.
        """
        pass

    @abstractmethod
    def serialize(self, records: List[CommentRecord]) -> str:
        """
        Serialize a record set to JSON string.

        Args:
            records: The records to serialize.

        Returns:
            JSON string representation of the records.
        """
        pass

    @abstractmethod
    def deserialize(self, json_str: str) -> List[CommentRecord]:
        """
        Deserialize a JSON string to a record set.

        Raises:
            ValueError: If the JSON is invalid or malformed.
        """
        pass
