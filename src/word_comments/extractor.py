"""End-to-end comment extraction for Word documents.

This module wires the container reader, the part parsers, the
cross-reference resolver and the thread builder together. Each call reads
the container from scratch; no state is shared between calls.
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import BinaryIO, Dict, List, Optional, Union

from .config.models import ExtractionConfig
from .interfaces.extractor import ICommentExtractor
from .models.comment import CommentRecord, CrossRefEntry, ExtractionResult, RawComment
from .models.enums import PartName
from .parsers.comment_parser import CommentParser
from .parsers.container import DocxContainer
from .parsers.cross_reference import CrossReferenceResolver
from .parsers.exceptions import DocumentCorruptedError
from .parsers.position_indexer import PositionIndex, PositionIndexer
from .parsers.serialization import CommentSerializer
from .parsers.xml_parts import parse_part
from .threads.thread_builder import ThreadBuilder


logger = logging.getLogger(__name__)


NO_COMMENTS_NOTE = "No comments found in document."

AUXILIARY_PARTS = (PartName.COMMENTS_EXTENDED, PartName.COMMENTS_EXTENSIBLE)


def record_sort_key(record: CommentRecord):
    """Sort key for (line, date) ordering with missing values last."""
    return (
        record.line is None,
        record.line if record.line is not None else 0,
        record.date is None,
        record.date.timestamp() if record.date is not None else 0.0,
    )


def sort_records(records: List[CommentRecord]) -> List[CommentRecord]:
    """Order records by line then date; ties keep their input order."""
    return sorted(records, key=record_sort_key)


class CommentExtractor(ICommentExtractor):
    """
    Extracts the ordered, threaded comment record set of a .docx file.

    Example:
        >>> extractor = CommentExtractor()
        >>> result = extractor.extract("manuscript.docx")
        >>> for record in result.records:
        ...     print(record.line, record.author, record.comment)
    """

    def __init__(self, config: Optional[ExtractionConfig] = None):
        """
        Initialize the extractor.

        Args:
            config: Extraction settings. Defaults are used if None.
        """
        self.config = config or ExtractionConfig()
        self._comment_parser = CommentParser()
        self._resolver = CrossReferenceResolver()
        self._serializer = CommentSerializer()

    def extract(self, source: Union[str, Path, BinaryIO]) -> ExtractionResult:
        """
        Extract all comments from a document.

        Args:
            source: Path to the .docx file, or an open binary stream.

        Returns:
            ExtractionResult whose records are sorted by line then date.
            A document without comments yields no records and a note.

        Raises:
            FileNotFoundError: If the file does not exist.
            DocumentCorruptedError: If the container cannot be opened or
                has no main document part.
            MalformedPartError: If any XML part is not well-formed.
        """
        with DocxContainer(source) as container:
            file_path = container.file_path
            result = ExtractionResult(file_path=file_path)

            document_data = container.read_part(PartName.DOCUMENT)
            if document_data is None:
                raise DocumentCorruptedError(
                    message="Main document part is missing",
                    file_path=file_path,
                    location=PartName.DOCUMENT.value,
                )
            result.parts_found.append(PartName.DOCUMENT)
            document_root = parse_part(document_data, PartName.DOCUMENT, file_path)

            comments_data = container.read_part(PartName.COMMENTS)
            if comments_data is None:
                return self._no_comments(result)
            result.parts_found.append(PartName.COMMENTS)

            raw_comments = self._comment_parser.parse(
                parse_part(comments_data, PartName.COMMENTS, file_path)
            )
            if not raw_comments:
                return self._no_comments(result)

            auxiliary_roots = []
            for part in AUXILIARY_PARTS:
                data = container.read_part(part)
                if data is not None:
                    result.parts_found.append(part)
                    auxiliary_roots.append(parse_part(data, part, file_path))

        index = PositionIndexer(self.config.paragraphs_per_page).build(document_root)
        cross_refs = self._resolver.resolve(auxiliary_roots)

        records = sort_records(self._assemble(raw_comments, index, cross_refs))
        records = ThreadBuilder(self.config.max_thread_iterations).build(records)

        if not self.config.include_resolved:
            records = [r for r in records if not r.resolved]

        logger.debug(
            f"Extracted {len(records)} comments from {file_path} "
            f"({index.paragraph_count} paragraphs, {len(cross_refs)} cross-references)"
        )
        result.records = records
        return result

    def _no_comments(self, result: ExtractionResult) -> ExtractionResult:
        logger.info(f"{NO_COMMENTS_NOTE} ({result.file_path})")
        result.add_note(NO_COMMENTS_NOTE)
        return result

    def _assemble(
        self,
        raw_comments: List[RawComment],
        index: PositionIndex,
        cross_refs: Dict[str, CrossRefEntry],
    ) -> List[CommentRecord]:
        """Join raw comments with their anchors and cross-references."""
        records = []
        for raw in raw_comments:
            position = index.locate(raw.comment_id)
            entry = cross_refs.get(raw.para_id) if raw.para_id is not None else None

            records.append(
                CommentRecord(
                    text=position.text if position else "",
                    comment=raw.text,
                    author=raw.author,
                    date=raw.date,
                    line=position.ordinal if position else None,
                    page=position.page if position else None,
                    resolved=entry.resolved if entry else False,
                    comment_id=raw.comment_id,
                    para_id=raw.para_id,
                    parent_id=entry.parent_para_id if entry else None,
                )
            )
        return records

    def has_comments(self, source: Union[str, Path, BinaryIO]) -> bool:
        """
        Check whether a document has at least one comment definition.

        Only ``word/comments.xml`` is read.

        Raises:
            FileNotFoundError: If the file does not exist.
            DocumentCorruptedError: If the container cannot be opened.
            MalformedPartError: If the comments part is not well-formed.
        """
        with DocxContainer(source) as container:
            data = container.read_part(PartName.COMMENTS)
            if data is None:
                return False
            root = parse_part(data, PartName.COMMENTS, container.file_path)
        return self._comment_parser.count(root) > 0

    def serialize(self, records: List[CommentRecord]) -> str:
        """Serialize a record set to JSON string."""
        return self._serializer.serialize(records)

    def deserialize(self, json_str: str) -> List[CommentRecord]:
        """Deserialize a JSON string to a record set."""
        return self._serializer.deserialize(json_str)


def extract_comments(
    file_path: Union[str, Path, BinaryIO],
    include_resolved: Optional[bool] = None,
    config: Optional[ExtractionConfig] = None,
) -> List[CommentRecord]:
    """
    Extract the ordered, threaded comments of a .docx file.

    Args:
        file_path: Path to the .docx file, or an open binary stream.
        include_resolved: If False, resolved comments are dropped after
            threading. None (the default) defers to
            ``config.include_resolved``, which is True unless configured.
        config: Optional extraction settings.

    Returns:
        List of CommentRecord sorted by line then date; empty if the
        document has no comments.
    """
    config = config or ExtractionConfig()
    if include_resolved is not None:
        config = replace(config, include_resolved=include_resolved)
    return CommentExtractor(config).extract(file_path).records


def has_comments(file_path: Union[str, Path, BinaryIO]) -> bool:
    """Quick check for at least one comment, without full extraction."""
    return CommentExtractor().has_comments(file_path)
