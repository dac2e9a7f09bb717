"""
XML part parsing and namespace helpers.

Parts are parsed with lxml. Element names in the main WordprocessingML
namespace are built with python-docx's ``qn`` helper; attributes written
by later Word versions live in several namespaces and are matched by
normalised local name instead.
"""

from typing import Iterator, Optional

from docx.oxml.ns import qn
from lxml import etree

from ..models.enums import PartName
from .exceptions import MalformedPartError


W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
W14_NS = "http://schemas.microsoft.com/office/word/2010/wordml"
W15_NS = "http://schemas.microsoft.com/office/word/2012/wordml"
W16CEX_NS = "http://schemas.microsoft.com/office/word/2018/wordml/cex"

# Logical attribute names, already normalised.
PARA_ID_ATTR = "paraid"
PARENT_PARA_ID_ATTR = "paraidparent"
DONE_ATTR = "done"

_PARSER = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)


def parse_part(data: bytes, part: PartName, file_path: Optional[str] = None) -> etree._Element:
    """
    Parse the bytes of a container part into an element tree.

    Args:
        data: Raw XML bytes of the part.
        part: Which part is being parsed, used for error reporting.
        file_path: Path of the container, used for error reporting.

    Returns:
        Root element of the part.

    Raises:
        MalformedPartError: If the part is not well-formed XML.
    """
    try:
        return etree.fromstring(data, parser=_PARSER)
    except etree.XMLSyntaxError as e:
        line, column = e.position if e.position else (None, None)
        raise MalformedPartError(
            message=f"Malformed XML in {part.value}: {e.msg}",
            file_path=file_path,
            location=part.value,
            details={"line": line, "column": column},
        )


def w_tag(local: str) -> str:
    """Clark-notation name for an element in the main ``w:`` namespace."""
    return qn(f"w:{local}")


def w_attr(elem: etree._Element, local: str) -> Optional[str]:
    """Read a ``w:``-qualified attribute, falling back to the bare name."""
    value = elem.get(qn(f"w:{local}"))
    if value is None:
        value = elem.get(local)
    return value


def iter_text(elem: etree._Element) -> Iterator[str]:
    """Yield the text of every ``w:t`` below ``elem`` in document order."""
    for t in elem.iter(w_tag("t")):
        yield t.text or ""


def normalize_attr_name(name: str) -> str:
    """
    Reduce an attribute name to its lowercase local part.

    Handles both Clark notation (``{uri}paraId``) and prefixed names
    (``w15:paraId``).
    """
    if "}" in name:
        name = name.rsplit("}", 1)[1]
    elif ":" in name:
        name = name.rsplit(":", 1)[1]
    return name.lower()


def find_attr(elem: etree._Element, logical_name: str) -> Optional[str]:
    """
    Find an attribute by logical name, ignoring namespace and case.

    An exact match on the normalised local name wins; otherwise the first
    attribute whose normalised name ends with ``logical_name`` is used, so
    ``paraid`` never picks up ``paraIdParent``. Different Word versions
    emit the same attribute under different qualified names, so callers
    must not rely on a fixed namespace.
    """
    logical_name = logical_name.lower()
    fallback = None
    for key, value in elem.attrib.items():
        normalized = normalize_attr_name(key)
        if normalized == logical_name:
            return value
        if fallback is None and normalized.endswith(logical_name):
            fallback = value
    return fallback
