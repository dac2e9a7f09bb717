"""Serialization and deserialization utilities for comment record sets."""

import json
from datetime import datetime
from typing import Any, List

from ..models.comment import CommentRecord


# Column name -> CommentRecord attribute, in export order.
COLUMNS = [
    ("Text", "text"),
    ("Comment", "comment"),
    ("Author", "author"),
    ("Date", "date"),
    ("Line", "line"),
    ("Page", "page"),
    ("Resolved", "resolved"),
    ("comment_id", "comment_id"),
    ("para_id", "para_id"),
    ("parent_id", "parent_id"),
    ("thread_id", "thread_id"),
    ("thread_size", "thread_size"),
    ("reply_depth", "reply_depth"),
]

REQUIRED_TEXT_COLUMNS = ("Comment", "Author", "comment_id")
OPTIONAL_TEXT_COLUMNS = ("Text", "para_id", "parent_id", "Source")
OPTIONAL_INT_COLUMNS = ("Line", "Page", "thread_id", "thread_size", "reply_depth")


class CommentSerializer:
    """
    Handles serialization and deserialization of comment record sets.

    Every record is written with the same keys regardless of which
    auxiliary parts the source document had. Dates are ISO-8601 strings.
    """

    @staticmethod
    def serialize(records: List[CommentRecord], include_source: bool = False) -> str:
        """
        Serialize records to a JSON array string.

        Args:
            records: The records to serialize.
            include_source: Add the ``Source`` column of merged record sets.

        Returns:
            JSON string representation of the records.
        """
        return json.dumps(
            [CommentSerializer._record_to_dict(r, include_source) for r in records],
            ensure_ascii=False,
            indent=2
        )

    @staticmethod
    def deserialize(json_str: str) -> List[CommentRecord]:
        """
        Deserialize a JSON array string to records.

        Raises:
            ValueError: If the JSON is invalid or malformed.
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {str(e)}")

        if not isinstance(data, list):
            raise ValueError("Expected a JSON array of comment records")

        return [CommentSerializer._dict_to_record(item) for item in data]

    @staticmethod
    def _record_to_dict(record: CommentRecord, include_source: bool) -> dict[str, Any]:
        data = record.to_dict(include_source=include_source)
        if record.date is not None:
            data["Date"] = record.date.isoformat()
        return data

    @staticmethod
    def _dict_to_record(data: dict[str, Any]) -> CommentRecord:
        """Convert dictionary to CommentRecord."""
        if not isinstance(data, dict):
            raise ValueError("Expected dictionary for CommentRecord")

        for column in REQUIRED_TEXT_COLUMNS:
            if column not in data:
                raise ValueError(f"Missing required field '{column}' in CommentRecord")
            if not isinstance(data[column], str):
                raise ValueError(f"Field '{column}' must be a string in CommentRecord")

        for column in OPTIONAL_TEXT_COLUMNS:
            value = data.get(column)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Field '{column}' must be a string or null in CommentRecord")

        for column in OPTIONAL_INT_COLUMNS:
            value = data.get(column)
            # bool is a subclass of int
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ValueError(f"Field '{column}' must be an integer or null in CommentRecord")

        values = {attr: data.get(column) for column, attr in COLUMNS}
        date = values["date"]
        if date is not None:
            try:
                values["date"] = datetime.fromisoformat(date)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid date in CommentRecord: {date!r}")

        values["text"] = values["text"] or ""
        values["resolved"] = bool(values["resolved"])
        values["source"] = data.get("Source")
        return CommentRecord(**values)


def serialize_records(records: List[CommentRecord]) -> str:
    """Convenience function to serialize a record set."""
    return CommentSerializer.serialize(records)


def deserialize_records(json_str: str) -> List[CommentRecord]:
    """Convenience function to deserialize a record set."""
    return CommentSerializer.deserialize(json_str)
