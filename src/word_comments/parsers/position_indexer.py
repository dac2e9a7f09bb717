"""Index comment anchors in the document body by paragraph position."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from lxml import etree

from ..models.comment import DEFAULT_PARAGRAPHS_PER_PAGE, ParagraphPosition
from ..models.enums import AnchorKind
from .xml_parts import iter_text, w_attr, w_tag


@dataclass
class PositionIndex:
    """
    Anchor lookup tables built from one scan of the document body.

    ``range_starts`` and ``references`` map a comment id to the position of
    the first paragraph containing the corresponding marker.
    """
    paragraph_count: int = 0
    range_starts: Dict[str, ParagraphPosition] = field(default_factory=dict)
    references: Dict[str, ParagraphPosition] = field(default_factory=dict)

    def locate(self, comment_id: str) -> Optional[ParagraphPosition]:
        """
        Return the anchor paragraph of a comment.

        Range-start anchors take precedence; reference anchors are only
        used when no range start carries the id.
        """
        position = self.range_starts.get(comment_id)
        if position is None:
            position = self.references.get(comment_id)
        return position


class PositionIndexer:
    """
    Builds a PositionIndex from the root of ``word/document.xml``.

    Every ``w:p`` is numbered in document order, including paragraphs in
    tables. Positions are paragraph-granular; Word stores no line numbers.
    """

    MARKER_TAGS = {
        w_tag(AnchorKind.RANGE_START.value): AnchorKind.RANGE_START,
        w_tag(AnchorKind.REFERENCE.value): AnchorKind.REFERENCE,
    }

    def __init__(self, paragraphs_per_page: int = DEFAULT_PARAGRAPHS_PER_PAGE):
        self.paragraphs_per_page = paragraphs_per_page

    def build(self, document_root: etree._Element) -> PositionIndex:
        """Scan the body once and return the anchor index."""
        index = PositionIndex()
        paragraphs: List[etree._Element] = list(document_root.iter(w_tag("p")))

        for ordinal, para in enumerate(paragraphs, start=1):
            position = None
            for marker in para.iter(*self.MARKER_TAGS):
                comment_id = w_attr(marker, "id")
                if comment_id is None:
                    continue
                if position is None:
                    position = ParagraphPosition(
                        ordinal=ordinal,
                        text="".join(iter_text(para)),
                        paragraphs_per_page=self.paragraphs_per_page,
                    )
                if self.MARKER_TAGS[marker.tag] is AnchorKind.RANGE_START:
                    index.range_starts.setdefault(comment_id, position)
                else:
                    index.references.setdefault(comment_id, position)

        index.paragraph_count = len(paragraphs)
        return index
