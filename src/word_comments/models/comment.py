"""Comment-related data models for the Word comments extractor."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .enums import PartName


DEFAULT_PARAGRAPHS_PER_PAGE = 25


@dataclass(frozen=True)
class ParagraphPosition:
    """
    Position of a paragraph within the document body.

    Word stores no pagination, so the page is estimated from the
    1-based paragraph ordinal with a fixed page size.
    """
    ordinal: int
    text: str = ""
    paragraphs_per_page: int = DEFAULT_PARAGRAPHS_PER_PAGE

    @property
    def page(self) -> int:
        return math.ceil(self.ordinal / self.paragraphs_per_page)


@dataclass
class RawComment:
    """
    A comment definition as read from the comments part.

    ``para_id`` is the identifier of the comment's own first paragraph;
    it keys into the cross-reference map, not into the body.
    """
    comment_id: str
    author: str
    date: Optional[datetime]
    text: str
    para_id: Optional[str] = None


@dataclass
class CrossRefEntry:
    """Threading and resolution metadata for one comment paragraph."""
    para_id: str
    parent_para_id: Optional[str] = None
    resolved: bool = False


@dataclass
class CommentRecord:
    """
    Final, exported comment record.

    Thread fields are filled in by the thread builder; a record with
    ``thread_id`` of None has not been threaded yet.
    """
    text: str
    comment: str
    author: str
    date: Optional[datetime]
    line: Optional[int]
    page: Optional[int]
    resolved: bool
    comment_id: str
    para_id: Optional[str] = None
    parent_id: Optional[str] = None
    thread_id: Optional[int] = None
    thread_size: Optional[int] = None
    reply_depth: Optional[int] = None
    source: Optional[str] = None

    @property
    def is_root(self) -> bool:
        """True if the comment does not declare a parent."""
        return self.parent_id is None

    @property
    def is_orphaned(self) -> bool:
        """True if no anchor for the comment was found in the body."""
        return self.line is None

    def to_dict(self, include_source: bool = False) -> Dict[str, Any]:
        """Convert the record to a column-name keyed dictionary."""
        data = {
            "Text": self.text,
            "Comment": self.comment,
            "Author": self.author,
            "Date": self.date,
            "Line": self.line,
            "Page": self.page,
            "Resolved": self.resolved,
            "comment_id": self.comment_id,
            "para_id": self.para_id,
            "parent_id": self.parent_id,
            "thread_id": self.thread_id,
            "thread_size": self.thread_size,
            "reply_depth": self.reply_depth,
        }
        if include_source:
            data["Source"] = self.source
        return data


@dataclass
class CommentThread:
    """
    Nested view of one conversation thread.

    ``root_comment`` is None when every member declares a parent, which
    happens for threads made of promoted orphans.
    """
    thread_id: int
    root_comment: Optional[CommentRecord]
    replies: List[CommentRecord] = field(default_factory=list)

    @property
    def members(self) -> List[CommentRecord]:
        if self.root_comment is None:
            return list(self.replies)
        return [self.root_comment] + self.replies

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def authors(self) -> List[str]:
        """Participating authors in order of first appearance."""
        seen: List[str] = []
        for record in self.members:
            if record.author not in seen:
                seen.append(record.author)
        return seen

    @property
    def resolved(self) -> bool:
        """True only if every member of the thread is resolved."""
        return all(record.resolved for record in self.members)


@dataclass
class ExtractionResult:
    """Result of one extraction call."""
    file_path: str
    records: List[CommentRecord] = field(default_factory=list)
    parts_found: List[PartName] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    @property
    def has_comments(self) -> bool:
        return len(self.records) > 0

    def add_note(self, message: str) -> None:
        """Add an informational note for the caller."""
        self.notes.append(message)
