"""
TF-IDF ranking over the inverted index.

Formula:
    relevance(doc) = Σ tf(word, doc) × ln(N / df(word))

Where the sum runs over the query plus-words contained in the document:
    tf = occurrences of word in doc / words in doc (stop words removed)
    N  = number of indexed documents
    df = number of documents containing the word

A document needs only one plus-word to be found. Any minus-word vetoes
the document outright (it is removed, not penalized).

Ordering: descending relevance; relevances closer than RELEVANCE_EPSILON
are treated as equal and ordered by descending rating.
"""

import functools
from typing import Callable, Dict, List, Tuple

from ..document import Document, DocumentStatus
from .document_index import DocumentIndex
from .query_parser import Query

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Predicate accepting only documents with exactly this status."""
    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status
    return predicate


def find_all_documents(
    index: DocumentIndex,
    query: Query,
    predicate: DocumentPredicate
) -> List[Document]:
    """
    Score every document matching the query and accepted by predicate.
    
    Args:
        index: Document index to search
        query: Parsed query
        predicate: Called as predicate(document_id, status, rating)
    
    Returns:
        Documents that survived the minus-word veto, ordered by id
    """
    document_to_relevance: Dict[int, float] = {}
    
    # Sorted iteration keeps float sums and tie order independent of hash seed
    for word in sorted(query.plus_words):
        if not index.has_word(word):
            continue
        inverse_document_freq = index.inverse_document_frequency(word)
        for document_id, term_freq in index.documents_containing(word).items():
            data = index.metadata(document_id)
            if predicate(document_id, data.status, data.rating):
                document_to_relevance[document_id] = (
                    document_to_relevance.get(document_id, 0.0)
                    + term_freq * inverse_document_freq
                )
    
    for word in query.minus_words:
        for document_id in index.documents_containing(word):
            document_to_relevance.pop(document_id, None)
    
    return [
        Document(
            id=document_id,
            relevance=relevance,
            rating=index.metadata(document_id).rating,
        )
        for document_id, relevance in sorted(document_to_relevance.items())
    ]


def _compare_documents(lhs: Document, rhs: Document) -> int:
    # Negative when lhs must come first
    if abs(lhs.relevance - rhs.relevance) < RELEVANCE_EPSILON:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


def sort_documents(documents: List[Document]) -> List[Document]:
    """Order by descending relevance, near-equal relevance by descending rating."""
    return sorted(documents, key=functools.cmp_to_key(_compare_documents))


def find_top_documents(
    index: DocumentIndex,
    query: Query,
    predicate: DocumentPredicate
) -> List[Document]:
    """
    Rank matching documents and keep the best MAX_RESULT_DOCUMENT_COUNT.
    """
    matched_documents = sort_documents(find_all_documents(index, query, predicate))
    return matched_documents[:MAX_RESULT_DOCUMENT_COUNT]


def match_document(
    index: DocumentIndex,
    query: Query,
    document_id: int
) -> Tuple[List[str], DocumentStatus]:
    """
    Plus-words of the query contained in a document.
    
    A single minus-word found in the document empties the result.
    
    Args:
        index: Document index
        query: Parsed query
        document_id: Id of an indexed document
    
    Returns:
        (matched words sorted alphabetically, document status)
    
    Raises:
        UnknownDocumentIdError: If document_id was never added
    """
    status = index.metadata(document_id).status
    
    for word in query.minus_words:
        if document_id in index.documents_containing(word):
            return [], status
    
    matched_words = [
        word for word in sorted(query.plus_words)
        if document_id in index.documents_containing(word)
    ]
    return matched_words, status
