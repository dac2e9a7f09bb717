"""Thread assignment for extracted comment records."""

import logging
from collections import Counter
from dataclasses import replace
from typing import Dict, List, Optional

from ..models.comment import CommentRecord, CommentThread


logger = logging.getLogger(__name__)


DEFAULT_MAX_ITERATIONS = 10


class ThreadBuilder:
    """
    Assigns every comment record to exactly one thread.

    Parents are not guaranteed to precede their replies, so replies are
    attached by fixed-point propagation over the paragraph-id -> thread
    map rather than by a single tree walk:

    1. Each record without a parent opens a new thread.
    2. Up to ``max_iterations`` passes attach unassigned records whose
       parent paragraph is already mapped, mapping their own paragraph in
       turn. A pass that attaches nothing ends the loop.
    3. Anything left over (dangling parents, chains deeper than the bound)
       is promoted to a thread of its own.

    ``reply_depth`` is 0 for roots and otherwise the record's rank within
    its thread, in input order, minus one. It is a position in the thread,
    not the length of the parent chain.
    """

    def __init__(self, max_iterations: int = DEFAULT_MAX_ITERATIONS):
        self.max_iterations = max_iterations

    def build(self, records: List[CommentRecord]) -> List[CommentRecord]:
        """
        Return copies of ``records`` with thread fields filled in.

        Input order is preserved and determines thread numbering.
        """
        thread_ids: List[Optional[int]] = [None] * len(records)
        para_to_thread: Dict[str, int] = {}
        counter = 0

        for i, record in enumerate(records):
            if record.parent_id is None:
                counter += 1
                thread_ids[i] = counter
                if record.para_id is not None:
                    para_to_thread[record.para_id] = counter

        for iteration in range(1, self.max_iterations + 1):
            changes = 0
            for i, record in enumerate(records):
                if thread_ids[i] is not None or record.parent_id is None:
                    continue
                thread_id = para_to_thread.get(record.parent_id)
                if thread_id is None:
                    continue
                thread_ids[i] = thread_id
                if record.para_id is not None:
                    para_to_thread[record.para_id] = thread_id
                changes += 1
            if changes == 0:
                logger.debug(f"Thread propagation converged after {iteration} passes")
                break

        for i, record in enumerate(records):
            if thread_ids[i] is None:
                logger.warning(
                    f"Comment {record.comment_id} could not be attached to parent "
                    f"{record.parent_id}; promoting to its own thread"
                )
                counter += 1
                thread_ids[i] = counter

        sizes = Counter(thread_ids)
        seen: Counter = Counter()
        threaded = []
        for record, thread_id in zip(records, thread_ids):
            seen[thread_id] += 1
            depth = 0 if record.is_root else seen[thread_id] - 1
            threaded.append(
                replace(
                    record,
                    thread_id=thread_id,
                    thread_size=sizes[thread_id],
                    reply_depth=depth,
                )
            )
        return threaded


def _date_key(record: CommentRecord):
    return (record.date is None, record.date.timestamp() if record.date else 0.0)


def group_threads(records: List[CommentRecord]) -> List[CommentThread]:
    """
    Build the nested view of already-threaded records.

    Threads are ordered by thread id and members by date, undated last.

    Raises:
        ValueError: If a record has not been threaded.
    """
    members: Dict[int, List[CommentRecord]] = {}
    for record in records:
        if record.thread_id is None:
            raise ValueError(f"Comment {record.comment_id} has no thread assigned")
        members.setdefault(record.thread_id, []).append(record)

    threads = []
    for thread_id in sorted(members):
        ordered = sorted(members[thread_id], key=_date_key)
        roots = [r for r in ordered if r.is_root]
        threads.append(
            CommentThread(
                thread_id=thread_id,
                root_comment=roots[0] if roots else None,
                replies=[r for r in ordered if not r.is_root],
            )
        )
    return threads
