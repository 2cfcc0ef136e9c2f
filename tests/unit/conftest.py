"""Unit test fixtures - small document collections with known rankings"""

import pytest

from search_server import DocumentStatus, SearchServer
from search_server.index import DocumentIndex, StopWordSet

STOP_WORDS = "is are was a an in the with near at"


@pytest.fixture
def stop_words():
    """Stop words used across ranking tests"""
    return StopWordSet(STOP_WORDS)


@pytest.fixture
def animal_documents():
    """
    Four documents with distinct ratings.
    
    After stop-word removal:
        0:  colorful parrot green wings and red tail lost   (8 words, rating 0)
        5:  white cat long furry tail found red square      (8 words, rating 2)
        1:  grey hound black ears found railway station     (7 words, rating 8)
        38: cat city                                        (2 words, rating 3)
    """
    return [
        (0, "a colorful parrot with green wings and red tail is lost", DocumentStatus.ACTUAL, [2, -5, -4, 6, 3]),
        (5, "a white cat with long furry tail is found near the red square", DocumentStatus.ACTUAL, [-3, 3, 2, 6]),
        (1, "a grey hound with black ears is found at the railway station", DocumentStatus.ACTUAL, [7, 9]),
        (38, "cat in the city", DocumentStatus.ACTUAL, [5, 1]),
    ]


@pytest.fixture
def animal_index(stop_words, animal_documents):
    """DocumentIndex populated with animal_documents"""
    index = DocumentIndex(stop_words)
    for document_id, text, status, ratings in animal_documents:
        index.add_document(document_id, text, status, ratings)
    return index


@pytest.fixture
def animal_server(animal_documents):
    """SearchServer populated with animal_documents"""
    server = SearchServer(STOP_WORDS)
    for document_id, text, status, ratings in animal_documents:
        server.add_document(document_id, text, status, ratings)
    return server


@pytest.fixture
def mixed_status_server():
    """Same text under every status, no stop words"""
    server = SearchServer()
    server.add_document(0, "white cat and fancy collar", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.IRRELEVANT, [7, 2, 7])
    server.add_document(2, "groomed dog expressive eyes", DocumentStatus.BANNED, [5, -12, 2, 1])
    server.add_document(3, "groomed starling eugene", DocumentStatus.REMOVED, [9])
    return server
