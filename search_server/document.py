"""
Document records returned by and stored in the search server.
"""

from dataclasses import dataclass
from enum import Enum


class DocumentStatus(Enum):
    """Caller-defined document status, compared by equality only"""
    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


@dataclass(frozen=True)
class Document:
    """Single search result with relevance score"""
    id: int              # Caller-assigned document id
    relevance: float     # TF-IDF score for the query (not stored)
    rating: int          # Average rating computed at add time


@dataclass(frozen=True)
class DocumentData:
    """Metadata stored per document, immutable after add"""
    rating: int
    status: DocumentStatus
