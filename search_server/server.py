"""
SearchServer - public entry point of the search engine.

Usage:
    server = SearchServer("is are was a an in the with near at")
    server.add_document(0, "white cat and fancy collar", DocumentStatus.ACTUAL, [8, -3])
    server.find_top_documents("fluffy cat -collar")
    server.find_top_documents("cat", DocumentStatus.BANNED)
    server.find_top_documents("cat", lambda document_id, status, rating: rating > 0)
    server.match_document("fluffy cat", 0)

Single-threaded: the index must not be mutated while a query runs.
"""

import logging
from typing import Callable, Iterable, Iterator, List, Sequence, Tuple, Union

from .config import SearchSettings
from .document import Document, DocumentStatus
from .errors import SearchServerError
from .index import DocumentIndex, StopWordSet, parse_query
from .index import ranker
from .index.query_parser import Query
from .index.ranker import DocumentPredicate

logger = logging.getLogger(__name__)

StatusOrPredicate = Union[DocumentStatus, Callable[[int, DocumentStatus, int], bool]]


class SearchServer:
    """
    In-memory TF-IDF search over short documents.
    
    Stop words given here or through set_stop_words() apply to documents
    added afterwards and to every query.
    """
    
    def __init__(self, stop_words: Union[str, Iterable[str], None] = None):
        self._stop_words = StopWordSet()
        if isinstance(stop_words, str):
            self._stop_words.add(stop_words)
        elif stop_words is not None:
            self._stop_words.add_words(stop_words)
        self._index = DocumentIndex(self._stop_words)
    
    @classmethod
    def from_settings(cls, settings: SearchSettings) -> "SearchServer":
        """Create a server with the stop words from configuration."""
        server = cls(settings.stop_words)
        logger.info(f"Search server created with {len(server._stop_words)} stop words")
        return server
    
    def set_stop_words(self, text: str) -> None:
        """Add space-separated stop words (accumulates, never clears)."""
        if self._index.get_document_count() > 0:
            logger.warning(
                "Stop words added after documents were indexed; "
                "already indexed documents keep their words"
            )
        self._stop_words.add(text)
    
    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Sequence[int]
    ) -> None:
        """
        Add a document to the index.
        
        Raises:
            TypeError: status is not a DocumentStatus
            DuplicateDocumentIdError: document_id already added
            EmptyDocumentError: Document consists of stop words only
        """
        try:
            self._index.add_document(document_id, document, status, ratings)
        except SearchServerError as e:
            logger.warning(f"Rejected document {document_id}: {e}")
            raise
    
    def find_top_documents(
        self,
        raw_query: str,
        status_or_predicate: StatusOrPredicate = DocumentStatus.ACTUAL
    ) -> List[Document]:
        """
        Find the most relevant documents for a query.
        
        Args:
            raw_query: Space-separated words; "-word" excludes documents
            status_or_predicate: DocumentStatus to match exactly, or a callable
                predicate(document_id, status, rating) -> bool
                Default: DocumentStatus.ACTUAL
        
        Returns:
            At most MAX_RESULT_DOCUMENT_COUNT documents, most relevant first
        
        Raises:
            MalformedQueryError: Lone "-" or "--word" in query
        """
        predicate = self._resolve_predicate(status_or_predicate)
        query = self._parse_query(raw_query)
        
        documents = ranker.find_top_documents(self._index, query, predicate)
        
        logger.debug(
            f"Query '{raw_query}': {len(query.plus_words)} plus, "
            f"{len(query.minus_words)} minus words -> {len(documents)} documents"
        )
        return documents
    
    def get_document_count(self) -> int:
        return self._index.get_document_count()
    
    def match_document(self, raw_query: str, document_id: int) -> Tuple[List[str], DocumentStatus]:
        """
        Query plus-words found in a document, and the document status.
        
        The word list is empty if the document contains any minus-word.
        
        Raises:
            MalformedQueryError: Lone "-" or "--word" in query
            UnknownDocumentIdError: document_id was never added
        """
        query = self._parse_query(raw_query)
        try:
            return ranker.match_document(self._index, query, document_id)
        except SearchServerError as e:
            logger.warning(f"Cannot match document {document_id}: {e}")
            raise
    
    def get_word_frequencies(self, document_id: int) -> dict:
        """Word -> term frequency of one document (empty for unknown ids)."""
        return dict(self._index.word_frequencies(document_id))
    
    def __iter__(self) -> Iterator[int]:
        return self._index.document_ids
    
    def __len__(self) -> int:
        return self._index.get_document_count()
    
    def _parse_query(self, raw_query: str) -> Query:
        try:
            return parse_query(raw_query, self._stop_words)
        except SearchServerError as e:
            logger.warning(f"Rejected query '{raw_query}': {e}")
            raise
    
    @staticmethod
    def _resolve_predicate(status_or_predicate: StatusOrPredicate) -> DocumentPredicate:
        if isinstance(status_or_predicate, DocumentStatus):
            return ranker.status_predicate(status_or_predicate)
        if callable(status_or_predicate):
            return status_or_predicate
        raise TypeError(
            f"Expected DocumentStatus or predicate, got {type(status_or_predicate).__name__}"
        )
