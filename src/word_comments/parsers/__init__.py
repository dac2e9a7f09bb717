"""Container and XML part parsers for the Word comments extractor."""

from .container import DocxContainer
from .comment_parser import CommentParser, parse_comment_date
from .cross_reference import CrossReferenceResolver
from .position_indexer import PositionIndex, PositionIndexer
from .serialization import CommentSerializer, serialize_records, deserialize_records
from .xml_parts import find_attr, normalize_attr_name, parse_part
from .exceptions import (
    ParseError,
    DocumentCorruptedError,
    MalformedPartError,
)

__all__ = [
    "DocxContainer",
    "CommentParser",
    "parse_comment_date",
    "CrossReferenceResolver",
    "PositionIndex",
    "PositionIndexer",
    "CommentSerializer",
    "serialize_records",
    "deserialize_records",
    "find_attr",
    "normalize_attr_name",
    "parse_part",
    "ParseError",
    "DocumentCorruptedError",
    "MalformedPartError",
]
