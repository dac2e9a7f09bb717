"""Consolidation of comments from several versions of a document.

Each reviewer often works on a separate copy of a manuscript. The helpers
here extract every copy and merge the results into a single record set
with the same shape as a single-document extraction.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .config.models import ExtractionConfig
from .extractor import CommentExtractor, sort_records
from .filters import unresolved_only
from .models.comment import CommentRecord
from .threads.thread_builder import ThreadBuilder


logger = logging.getLogger(__name__)


PathLike = Union[str, Path]


@dataclass
class CommentPresence:
    """Presence check result for one file of a batch."""
    file: str
    path: str
    has_comments: Optional[bool]


def namespace_records(records: List[CommentRecord], prefix: str, source: str) -> List[CommentRecord]:
    """
    Prefix every identifier of one document's records.

    ``comment_id``, ``para_id`` and ``parent_id`` are opaque strings that
    are only unique within their own document. Prefixing keeps reply links
    intact inside a document while preventing collisions across documents.
    """
    def prefixed(value: Optional[str]) -> Optional[str]:
        return None if value is None else f"{prefix}{value}"

    return [
        replace(
            record,
            comment_id=prefixed(record.comment_id),
            para_id=prefixed(record.para_id),
            parent_id=prefixed(record.parent_id),
            source=source,
        )
        for record in records
    ]


def _validate_paths(paths: Sequence[PathLike]) -> List[str]:
    if isinstance(paths, (str, Path)) or len(paths) == 0:
        raise ValueError("docx_paths must be a non-empty sequence of file paths")
    return [str(p) for p in paths]


def extract_comments_multiple(
    docx_paths: Sequence[PathLike],
    include_resolved: bool = True,
    add_source: bool = False,
    config: Optional[ExtractionConfig] = None,
) -> List[CommentRecord]:
    """
    Extract and merge comments from multiple documents.

    Identifiers are prefixed with ``doc{i}_`` where ``i`` is the 1-based
    position of the file in ``docx_paths``. The merged set is sorted by
    line then date and threaded again, so thread ids are unique across
    documents while replies stay inside their own document's threads.

    Args:
        docx_paths: Paths to the .docx files.
        include_resolved: If False, resolved comments are dropped.
        add_source: If True, records keep the source file name in
            ``source``; otherwise it is cleared.
        config: Optional extraction settings.

    Returns:
        Merged list of CommentRecord.

    Raises:
        ValueError: If ``docx_paths`` is empty.
        FileNotFoundError: If any of the files does not exist.
    """
    paths = _validate_paths(docx_paths)

    missing = [p for p in paths if not Path(p).exists()]
    if missing:
        raise FileNotFoundError(f"Files not found: {', '.join(missing)}")

    config = replace(config or ExtractionConfig(), include_resolved=True)
    extractor = CommentExtractor(config)

    merged: List[CommentRecord] = []
    for i, path in enumerate(paths, start=1):
        doc_name = Path(path).name
        logger.info(f"Processing [{i}/{len(paths)}]: {doc_name}")

        records = extractor.extract(path).records
        if not records:
            logger.info(f"  No comments found in {doc_name}")
            continue

        logger.info(f"  Found {len(records)} comments")
        merged.extend(namespace_records(records, f"doc{i}_", doc_name))

    if not merged:
        logger.info("No comments found in any document.")
        return []

    merged = ThreadBuilder(config.max_thread_iterations).build(sort_records(merged))

    if not include_resolved:
        merged = unresolved_only(merged)

    if not add_source:
        merged = [replace(r, source=None) for r in merged]

    logger.info(f"Total: {len(merged)} comments from {len(paths)} documents")
    return merged


def has_comments_multiple(docx_paths: Sequence[PathLike]) -> List[CommentPresence]:
    """
    Check several documents for comments.

    Missing files are reported with ``has_comments`` of None and a
    logged warning instead of an error.
    """
    paths = _validate_paths(docx_paths)
    extractor = CommentExtractor()

    results = []
    for path in paths:
        if Path(path).exists():
            present: Optional[bool] = extractor.has_comments(path)
        else:
            logger.warning(f"File not found: {path}")
            present = None
        results.append(CommentPresence(file=Path(path).name, path=path, has_comments=present))
    return results
