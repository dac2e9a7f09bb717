"""Cross-reference resolver for the auxiliary comment parts."""

import logging
from typing import Dict, Iterable, Optional, Tuple

from lxml import etree

from ..models.comment import CrossRefEntry
from .xml_parts import DONE_ATTR, PARA_ID_ATTR, PARENT_PARA_ID_ATTR, find_attr


logger = logging.getLogger(__name__)


# (para_id, parent_para_id, done flag or None when the attribute is absent)
ScannedEntry = Tuple[str, Optional[str], Optional[bool]]


class CrossReferenceResolver:
    """
    Builds the paragraph id -> CrossRefEntry map.

    ``word/commentsExtended.xml`` and ``word/commentsExtensible.xml`` may
    both describe the same comment paragraph. Parts are applied in the
    order given; a later explicit done flag overrides an earlier one, and a
    later parent reference overrides an earlier one, but absence of an
    attribute never erases what an earlier part said.
    """

    def scan(self, part_root: etree._Element) -> Iterable[ScannedEntry]:
        """Yield one entry for every element carrying a paragraph id."""
        for elem in part_root.iter():
            if not isinstance(elem.tag, str):
                # Comments and processing instructions
                continue
            para_id = find_attr(elem, PARA_ID_ATTR)
            if not para_id:
                continue
            done = find_attr(elem, DONE_ATTR)
            yield (
                para_id,
                find_attr(elem, PARENT_PARA_ID_ATTR) or None,
                None if done is None else done.strip() == "1",
            )

    def resolve(self, part_roots: Iterable[etree._Element]) -> Dict[str, CrossRefEntry]:
        """
        Union the entries of every given part.

        Args:
            part_roots: Root elements of the auxiliary parts that are
                present, in scan order. May be empty.

        Returns:
            Mapping from paragraph id to its CrossRefEntry.
        """
        entries: Dict[str, CrossRefEntry] = {}
        for root in part_roots:
            for para_id, parent_id, done in self.scan(root):
                entry = entries.get(para_id)
                if entry is None:
                    entry = entries[para_id] = CrossRefEntry(para_id=para_id)
                if parent_id is not None:
                    entry.parent_para_id = parent_id
                if done is not None:
                    entry.resolved = done

        logger.debug(
            f"Resolved {len(entries)} cross-references, "
            f"{sum(1 for e in entries.values() if e.resolved)} marked done"
        )
        return entries
