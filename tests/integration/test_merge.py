"""Integration tests for multi-document consolidation."""

import logging

import pytest

from conftest import comment, extended_xml, paragraph
from word_comments import (
    CommentPresence,
    extract_comments_multiple,
    group_threads,
    has_comments_multiple,
)


@pytest.fixture
def reviewer_copies(docx_factory):
    """Two copies of one manuscript, each with colliding comment ids."""
    first = docx_factory(
        name="reviewer1.docx",
        paragraphs=[paragraph("Abstract", range_start=["0", "1"])],
        comments=[
            comment("0", author="Ada", date="2024-03-01T09:00:00Z", para_id="AAAAAAAA"),
            comment("1", author="Bob", date="2024-03-02T09:00:00Z", para_id="BBBBBBBB"),
        ],
        extended=extended_xml([("AAAAAAAA", None, None), ("BBBBBBBB", "AAAAAAAA", None)]),
    )
    second = docx_factory(
        name="reviewer2.docx",
        paragraphs=[paragraph("Abstract"), paragraph("Introduction", range_start=["0"])],
        comments=[comment("0", author="Cy", date="2024-03-01T08:00:00Z", para_id="AAAAAAAA")],
        extended=extended_xml([("AAAAAAAA", None, "1")]),
    )
    return [first, second]


class TestExtractCommentsMultiple:
    """Tests for extract_comments_multiple."""

    def test_identifiers_prefixed_per_document(self, reviewer_copies):
        records = extract_comments_multiple(reviewer_copies)

        assert [r.comment_id for r in records] == ["doc1_0", "doc1_1", "doc2_0"]
        assert records[1].parent_id == "doc1_AAAAAAAA"
        assert records[2].para_id == "doc2_AAAAAAAA"

    def test_threads_stay_within_document(self, reviewer_copies):
        records = extract_comments_multiple(reviewer_copies)

        threads = group_threads(records)

        assert [t.size for t in threads] == [2, 1]
        assert threads[0].authors == ["Ada", "Bob"]
        assert len({r.thread_id for r in records}) == 2

    def test_merged_set_is_ordered(self, reviewer_copies):
        records = extract_comments_multiple(reviewer_copies)
        assert [r.line for r in records] == [1, 1, 2]

    def test_source_cleared_by_default(self, reviewer_copies):
        records = extract_comments_multiple(reviewer_copies)
        assert all(r.source is None for r in records)

    def test_add_source(self, reviewer_copies):
        records = extract_comments_multiple(reviewer_copies, add_source=True)

        assert [r.source for r in records] == ["reviewer1.docx", "reviewer1.docx", "reviewer2.docx"]
        assert "Source" in records[0].to_dict(include_source=True)

    def test_exclude_resolved(self, reviewer_copies):
        records = extract_comments_multiple(reviewer_copies, include_resolved=False)
        assert [r.comment_id for r in records] == ["doc1_0", "doc1_1"]

    def test_documents_without_comments_skipped(self, docx_factory, reviewer_copies, caplog):
        empty = docx_factory(name="clean.docx")

        with caplog.at_level(logging.INFO, logger="word_comments"):
            records = extract_comments_multiple([empty] + reviewer_copies)

        assert [r.comment_id for r in records] == ["doc2_0", "doc2_1", "doc3_0"]
        assert "No comments found in clean.docx" in caplog.text

    def test_no_comments_anywhere(self, docx_factory):
        paths = [docx_factory(name="a.docx"), docx_factory(name="b.docx", comments=[])]
        assert extract_comments_multiple(paths) == []

    def test_missing_files_listed(self, tmp_path, reviewer_copies):
        missing = tmp_path / "lost.docx"

        with pytest.raises(FileNotFoundError) as exc_info:
            extract_comments_multiple(reviewer_copies + [missing])

        assert str(missing) in str(exc_info.value)

    @pytest.mark.parametrize("paths", [[], "reviewer1.docx"])
    def test_invalid_path_argument(self, paths):
        with pytest.raises(ValueError):
            extract_comments_multiple(paths)


class TestHasCommentsMultiple:
    """Tests for has_comments_multiple."""

    def test_mixed_batch(self, docx_factory, tmp_path, caplog):
        with_comments = docx_factory(name="with.docx", comments=[comment("0")])
        without = docx_factory(name="without.docx")
        missing = tmp_path / "missing.docx"

        with caplog.at_level(logging.WARNING, logger="word_comments"):
            results = has_comments_multiple([with_comments, without, missing])

        assert results == [
            CommentPresence(file="with.docx", path=str(with_comments), has_comments=True),
            CommentPresence(file="without.docx", path=str(without), has_comments=False),
            CommentPresence(file="missing.docx", path=str(missing), has_comments=None),
        ]
        assert "File not found" in caplog.text

    def test_empty_batch(self):
        with pytest.raises(ValueError):
            has_comments_multiple([])
