"""
Word Comments Extractor

Extracts reviewer comments from Word (.docx) documents together with their
anchor positions, reply threads and resolution status.
"""

__version__ = "0.1.0"

# Export main components
from .extractor import CommentExtractor, extract_comments, has_comments
from .merge import CommentPresence, extract_comments_multiple, has_comments_multiple
from .filters import comments_by_reviewer, unresolved_only
from .models.comment import (
    CommentRecord,
    CommentThread,
    CrossRefEntry,
    ExtractionResult,
    ParagraphPosition,
    RawComment,
)
from .models.enums import AnchorKind, PartName
from .threads import ThreadBuilder, group_threads
from .interfaces.extractor import ICommentExtractor
from .parsers.exceptions import DocumentCorruptedError, MalformedPartError, ParseError
from .parsers.serialization import CommentSerializer
from .config import (
    ConfigurationManager,
    ExtractionConfig,
    ConfigurationError,
    ValidationResult,
)

__all__ = [
    "CommentExtractor",
    "extract_comments",
    "has_comments",
    "CommentPresence",
    "extract_comments_multiple",
    "has_comments_multiple",
    "comments_by_reviewer",
    "unresolved_only",
    "CommentRecord",
    "CommentThread",
    "CrossRefEntry",
    "ExtractionResult",
    "ParagraphPosition",
    "RawComment",
    "AnchorKind",
    "PartName",
    "ThreadBuilder",
    "group_threads",
    "ICommentExtractor",
    "DocumentCorruptedError",
    "MalformedPartError",
    "ParseError",
    "CommentSerializer",
    "ConfigurationManager",
    "ExtractionConfig",
    "ConfigurationError",
    "ValidationResult",
]
