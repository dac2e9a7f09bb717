"""Comment threading for the Word comments extractor."""

from .thread_builder import DEFAULT_MAX_ITERATIONS, ThreadBuilder, group_threads

__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "ThreadBuilder",
    "group_threads",
]
