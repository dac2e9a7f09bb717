"""Shared fixtures: minimal .docx containers built from XML strings."""

import zipfile
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pytest

from word_comments.parsers.xml_parts import W14_NS, W15_NS, W16CEX_NS, W_NS


CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '</Types>'
)


def paragraph(
    text: str = "",
    range_start: Sequence[str] = (),
    reference: Sequence[str] = (),
    para_id: Optional[str] = None,
) -> str:
    """A body ``w:p`` with optional comment anchors around its text."""
    attrs = f' w14:paraId="{para_id}"' if para_id else ""
    starts = "".join(f'<w:commentRangeStart w:id="{cid}"/>' for cid in range_start)
    ends = "".join(f'<w:commentRangeEnd w:id="{cid}"/>' for cid in range_start)
    refs = "".join(
        f'<w:r><w:commentReference w:id="{cid}"/></w:r>'
        for cid in list(range_start) + list(reference)
    )
    run = f"<w:r><w:t>{text}</w:t></w:r>" if text else ""
    return f"<w:p{attrs}>{starts}{run}{ends}{refs}</w:p>"


def document_xml(paragraphs: Sequence[str]) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{W_NS}" xmlns:w14="{W14_NS}">'
        f'<w:body>{"".join(paragraphs)}</w:body>'
        '</w:document>'
    )


def comment(
    comment_id: str,
    author: str = "Reviewer",
    date: Optional[str] = "2024-03-01T10:00:00Z",
    texts: Sequence[str] = ("A comment",),
    para_id: Optional[str] = None,
) -> str:
    """A ``w:comment`` definition, one internal paragraph per text."""
    date_attr = f' w:date="{date}"' if date else ""
    paras = []
    for i, text in enumerate(texts):
        pid = f' w14:paraId="{para_id}"' if para_id and i == 0 else ""
        paras.append(f"<w:p{pid}><w:r><w:t>{text}</w:t></w:r></w:p>")
    return (
        f'<w:comment w:id="{comment_id}" w:author="{author}"{date_attr} w:initials="R">'
        f'{"".join(paras)}</w:comment>'
    )


def comments_xml(comments: Sequence[str]) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:comments xmlns:w="{W_NS}" xmlns:w14="{W14_NS}">{"".join(comments)}</w:comments>'
    )


def extended_xml(entries: Sequence[Tuple[str, Optional[str], Optional[str]]]) -> str:
    """``commentsExtended.xml`` from (paraId, paraIdParent, done) tuples."""
    nodes = []
    for para_id, parent, done in entries:
        attrs = f'w15:paraId="{para_id}"'
        if parent:
            attrs += f' w15:paraIdParent="{parent}"'
        if done is not None:
            attrs += f' w15:done="{done}"'
        nodes.append(f"<w15:commentEx {attrs}/>")
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w15:commentsEx xmlns:w15="{W15_NS}">{"".join(nodes)}</w15:commentsEx>'
    )


def extensible_xml(entries: Sequence[Tuple[str, Optional[str]]]) -> str:
    """``commentsExtensible.xml`` from (paraId, done) tuples."""
    nodes = []
    for i, (para_id, done) in enumerate(entries):
        attrs = f'w16cex:durableId="{1000 + i}" w16cex:paraId="{para_id}"'
        if done is not None:
            attrs += f' w16cex:done="{done}"'
        nodes.append(f"<w16cex:commentExtensible {attrs}/>")
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w16cex:commentsExtensible xmlns:w16cex="{W16CEX_NS}">'
        f'{"".join(nodes)}</w16cex:commentsExtensible>'
    )


@pytest.fixture
def docx_factory(tmp_path: Path):
    """Return a builder writing a .docx with the given parts into tmp_path."""

    def build(
        name: str = "document.docx",
        paragraphs: Optional[List[str]] = None,
        comments: Optional[List[str]] = None,
        extended: Optional[str] = None,
        extensible: Optional[str] = None,
        document: Optional[str] = None,
        raw_parts: Optional[dict] = None,
    ) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            zf.writestr("[Content_Types].xml", CONTENT_TYPES)
            if document is None:
                document = document_xml(paragraphs or [paragraph("Body text")])
            zf.writestr("word/document.xml", document)
            if comments is not None:
                zf.writestr("word/comments.xml", comments_xml(comments))
            if extended is not None:
                zf.writestr("word/commentsExtended.xml", extended)
            if extensible is not None:
                zf.writestr("word/commentsExtensible.xml", extensible)
            for part_name, content in (raw_parts or {}).items():
                zf.writestr(part_name, content)
        return path

    return build
