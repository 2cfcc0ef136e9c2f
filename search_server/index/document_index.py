"""
Inverted index with per-document metadata.

Structure:
    word -> {document_id -> term_frequency}
    document_id -> DocumentData(rating, status)

Documents are immutable: there is no update or removal, the index only grows.
"""

import logging
import math
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Sequence

from ..document import DocumentData, DocumentStatus
from ..errors import (
    DuplicateDocumentIdError,
    EmptyDocumentError,
    UnknownDocumentIdError,
)
from .index_builder import compute_average_rating, compute_term_frequencies
from .stop_words import StopWordSet
from .tokenizer import split_into_words

logger = logging.getLogger(__name__)

_EMPTY_POSTINGS: Mapping[int, float] = MappingProxyType({})


class DocumentIndex:
    """
    Owns the inverted index and the document metadata map.
    
    Stop words are shared with the query parser so that both sides of a
    search ignore the same words.
    """
    
    def __init__(self, stop_words: StopWordSet = None):
        self.stop_words = stop_words if stop_words is not None else StopWordSet()
        self._word_to_document_freqs: Dict[str, Dict[int, float]] = {}
        self._document_to_word_freqs: Dict[int, Dict[str, float]] = {}
        self._documents: Dict[int, DocumentData] = {}
    
    def split_into_words_no_stop(self, text: str) -> List[str]:
        """Tokenize text and drop stop words."""
        return self.stop_words.filter(split_into_words(text))
    
    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus,
        ratings: Sequence[int]
    ) -> None:
        """
        Index a document and store its metadata.
        
        Args:
            document_id: Caller-assigned id, unique
            text: Document text
            status: Document status used by status filters
            ratings: Rating values, averaged into a single integer
        
        Raises:
            TypeError: If status is not a DocumentStatus
            DuplicateDocumentIdError: If document_id was already added
            EmptyDocumentError: If no words remain after stop-word removal
        """
        if not isinstance(status, DocumentStatus):
            raise TypeError(f"Expected DocumentStatus, got {type(status).__name__}")
        if document_id in self._documents:
            raise DuplicateDocumentIdError(document_id)
        
        words = self.split_into_words_no_stop(text)
        if not words:
            raise EmptyDocumentError(document_id)
        
        term_frequencies = compute_term_frequencies(words)
        for word, term_freq in term_frequencies.items():
            postings = self._word_to_document_freqs.setdefault(word, {})
            postings[document_id] = postings.get(document_id, 0.0) + term_freq
        
        self._document_to_word_freqs[document_id] = term_frequencies
        self._documents[document_id] = DocumentData(
            rating=compute_average_rating(ratings),
            status=status,
        )
        
        logger.debug(
            f"Indexed document {document_id}: {len(words)} words, "
            f"{len(term_frequencies)} unique, status={status.name}"
        )
    
    def get_document_count(self) -> int:
        """Number of stored documents."""
        return len(self._documents)
    
    def has_word(self, word: str) -> bool:
        return word in self._word_to_document_freqs
    
    def inverse_document_frequency(self, word: str) -> float:
        """
        IDF(word) = ln(N / df(word))
        
        Existence required: callers check has_word() first.
        
        Raises:
            KeyError: If word is not indexed
        """
        postings = self._word_to_document_freqs[word]
        return math.log(self.get_document_count() * 1.0 / len(postings))
    
    def documents_containing(self, word: str) -> Mapping[int, float]:
        """Document id -> term frequency for word (empty if not indexed)."""
        return self._word_to_document_freqs.get(word, _EMPTY_POSTINGS)
    
    def metadata(self, document_id: int) -> DocumentData:
        """
        Stored rating and status of a document.
        
        Raises:
            UnknownDocumentIdError: If document_id was never added
        """
        try:
            return self._documents[document_id]
        except KeyError:
            raise UnknownDocumentIdError(document_id) from None
    
    def word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Word -> term frequency for one document (empty for unknown ids)."""
        return self._document_to_word_freqs.get(document_id, {})
    
    @property
    def document_ids(self) -> Iterator[int]:
        """Document ids in insertion order."""
        return iter(self._documents)
    
    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents
    
    def __len__(self) -> int:
        return len(self._documents)
