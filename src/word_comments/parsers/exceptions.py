"""Errors raised while reading a .docx container and its XML parts."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ParseError(Exception):
    """
    A container or one of its parts could not be read.

    Absent parts, unanchored comments and dangling reply links are not
    errors and never raise; only unreadable input does.

    Attributes:
        message: What went wrong.
        file_path: The .docx path, or the stream name.
        location: Part name such as ``word/comments.xml``, or
            ``file header`` when the zip itself is unreadable.
        details: Extra context, e.g. the XML parser's ``line`` and
            ``column`` or the wrapped ``original_error``.
    """
    message: str
    file_path: Optional[str] = None
    location: Optional[str] = None
    details: Optional[Dict[str, Any]] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [self.message]
        if self.file_path:
            parts.append(f"File: {self.file_path}")
        if self.location:
            line = self.details.get("line") if self.details else None
            if line is not None:
                parts.append(f"Location: {self.location}:{line}:{self.details.get('column')}")
            else:
                parts.append(f"Location: {self.location}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the error for a log record or a JSON error response."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "file_path": self.file_path,
            "location": self.location,
            "details": self.details,
        }

    @property
    def has_location(self) -> bool:
        """True if the failing part (or the zip header) is known."""
        return bool(self.location)


@dataclass
class DocumentCorruptedError(ParseError):
    """
    Exception raised when a container cannot be opened.

    The file exists but is not a readable zip bundle, or it lacks the
    main document part.
    """

    def get_recovery_suggestions(self) -> List[str]:
        """Return suggestions for recovering from this error."""
        return [
            "Try opening the file in Word to verify it's not corrupted",
            "Check if the file is password-protected or encrypted",
            "Re-save the document as .docx (legacy .doc files are not zip bundles)",
        ]


@dataclass
class MalformedPartError(ParseError):
    """
    Exception raised when an XML part of the container is not well-formed.

    The part name is stored in ``location``; the parser's line and column
    are kept in ``details``.
    """

    @property
    def part_name(self) -> Optional[str]:
        """Name of the offending part inside the container."""
        return self.location
