"""
Search Server - in-memory TF-IDF document search.

Documents are short texts with a status and ratings. Queries are
space-separated words; "-word" excludes every document containing it.
Results are ranked by TF-IDF relevance, ties broken by rating.
"""

from .document import Document, DocumentData, DocumentStatus
from .errors import (
    DuplicateDocumentIdError,
    EmptyDocumentError,
    MalformedQueryError,
    SearchServerError,
    UnknownDocumentIdError,
)
from .index import MAX_RESULT_DOCUMENT_COUNT
from .server import SearchServer

__version__ = "0.1.0"

__all__ = [
    "Document",
    "DocumentData",
    "DocumentStatus",
    "SearchServer",
    "MAX_RESULT_DOCUMENT_COUNT",
    "SearchServerError",
    "EmptyDocumentError",
    "DuplicateDocumentIdError",
    "UnknownDocumentIdError",
    "MalformedQueryError",
]
