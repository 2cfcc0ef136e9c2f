"""
Inverted index and TF-IDF ranking for the search server.

Components:
- tokenizer: Space-delimited word splitting
- stop_words: Accumulating stop-word set
- index_builder: Term frequencies and average ratings
- document_index: Inverted index (word -> document -> term frequency)
- query_parser: Plus/minus word query parsing
- ranker: TF-IDF scoring, sorting, truncation and document matching

Stop words are applied when a document is indexed and when a query is
parsed; adding stop words later does not re-filter indexed documents.
"""

from .tokenizer import split_into_words
from .stop_words import StopWordSet
from .index_builder import compute_average_rating, compute_term_frequencies
from .document_index import DocumentIndex
from .query_parser import Query, parse_query
from .ranker import (
    MAX_RESULT_DOCUMENT_COUNT,
    RELEVANCE_EPSILON,
    find_all_documents,
    find_top_documents,
    match_document,
    sort_documents,
    status_predicate,
)

__all__ = [
    "split_into_words",
    "StopWordSet",
    "compute_average_rating",
    "compute_term_frequencies",
    "DocumentIndex",
    "Query",
    "parse_query",
    "MAX_RESULT_DOCUMENT_COUNT",
    "RELEVANCE_EPSILON",
    "find_all_documents",
    "find_top_documents",
    "match_document",
    "sort_documents",
    "status_predicate",
]
