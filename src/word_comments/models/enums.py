"""Enumerations for the Word comments extractor."""

from enum import Enum


class PartName(Enum):
    """Names of the container parts the extractor reads."""
    DOCUMENT = "word/document.xml"
    COMMENTS = "word/comments.xml"
    COMMENTS_EXTENDED = "word/commentsExtended.xml"
    COMMENTS_EXTENSIBLE = "word/commentsExtensible.xml"


class AnchorKind(Enum):
    """Kinds of body markers that anchor a comment to a paragraph."""
    RANGE_START = "commentRangeStart"
    REFERENCE = "commentReference"
