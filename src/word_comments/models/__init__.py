"""Data models and enums for the Word comments extractor."""

from .enums import AnchorKind, PartName
from .comment import (
    DEFAULT_PARAGRAPHS_PER_PAGE,
    CommentRecord,
    CommentThread,
    CrossRefEntry,
    ExtractionResult,
    ParagraphPosition,
    RawComment,
)

__all__ = [
    # Enums
    "AnchorKind",
    "PartName",
    # Comment models
    "DEFAULT_PARAGRAPHS_PER_PAGE",
    "ParagraphPosition",
    "RawComment",
    "CrossRefEntry",
    "CommentRecord",
    "CommentThread",
    "ExtractionResult",
]
