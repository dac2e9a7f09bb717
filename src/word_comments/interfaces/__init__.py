"""Abstract interfaces for the Word comments extractor."""

from .extractor import ICommentExtractor

__all__ = [
    "ICommentExtractor",
]
