"""Comment definition parser for ``word/comments.xml``."""

from datetime import datetime, timezone
from typing import List, Optional

from lxml import etree

from ..models.comment import RawComment
from .xml_parts import PARA_ID_ATTR, find_attr, iter_text, w_attr, w_tag


DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def parse_comment_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a ``w:date`` attribute as a UTC timestamp.

    Only the ``YYYY-MM-DDTHH:MM:SS`` prefix is read; a trailing ``Z`` or
    fractional seconds are ignored. Returns None for missing or
    unparseable values.
    """
    if not value:
        return None
    try:
        parsed = datetime.strptime(value.strip()[:19], DATE_FORMAT)
    except ValueError:
        return None
    return parsed.replace(tzinfo=timezone.utc)


class CommentParser:
    """Turns ``w:comment`` definitions into RawComment records."""

    def count(self, comments_root: etree._Element) -> int:
        """Number of comment definitions in the part."""
        return sum(1 for _ in comments_root.iter(w_tag("comment")))

    def parse(self, comments_root: etree._Element) -> List[RawComment]:
        """
        Parse every comment definition, in document order.

        Args:
            comments_root: Root element of ``word/comments.xml``.

        Returns:
            One RawComment per ``w:comment`` element.
        """
        return [self._parse_comment(node) for node in comments_root.iter(w_tag("comment"))]

    def _parse_comment(self, node: etree._Element) -> RawComment:
        # Paragraph breaks inside a comment are flattened to single spaces.
        text = " ".join(iter_text(node))

        para_id = None
        first_para = next(node.iter(w_tag("p")), None)
        if first_para is not None:
            para_id = find_attr(first_para, PARA_ID_ATTR)

        return RawComment(
            comment_id=w_attr(node, "id") or "",
            author=w_attr(node, "author") or "",
            date=parse_comment_date(w_attr(node, "date")),
            text=text,
            para_id=para_id,
        )
