"""Record set filters."""

import logging
from typing import Dict, List, Optional, Union

from .extractor import record_sort_key
from .models.comment import CommentRecord


logger = logging.getLogger(__name__)


def unresolved_only(records: List[CommentRecord]) -> List[CommentRecord]:
    """Drop resolved records, keeping order."""
    return [r for r in records if not r.resolved]


def comments_by_reviewer(
    records: List[CommentRecord],
    reviewer: Optional[str] = None,
    split: bool = False,
) -> Union[List[CommentRecord], Dict[str, List[CommentRecord]]]:
    """
    Filter or split records by author.

    Args:
        records: An extracted record set.
        reviewer: If given, keep records whose author contains this
            string, case-insensitively. Takes precedence over ``split``.
        split: If True and no reviewer is given, return a dict mapping
            each author to their records, in order of first appearance.

    Returns:
        The filtered list, the per-author dict, or by default all records
        sorted by author, then line and date.
    """
    if reviewer is not None:
        needle = reviewer.lower()
        matched = [r for r in records if needle in (r.author or "").lower()]
        if records and not matched:
            authors = ", ".join(dict.fromkeys(r.author for r in records))
            logger.info(f"No comments found for reviewer matching: {reviewer}")
            logger.info(f"Available authors: {authors}")
        return matched

    if split:
        by_author: Dict[str, List[CommentRecord]] = {}
        for record in records:
            by_author.setdefault(record.author, []).append(record)
        return by_author

    return sorted(records, key=lambda r: (r.author,) + record_sort_key(r))
