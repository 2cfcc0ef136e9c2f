"""
Search server errors.

All errors are caller input errors: the engine rejects bad input once
instead of producing NaN relevance or silently merging index entries.
"""


class SearchServerError(Exception):
    """Base class for every error raised by the search server"""


class EmptyDocumentError(SearchServerError):
    """Document has no indexable words after stop-word removal"""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(
            f"Document {document_id} has no words left after stop-word removal"
        )


class DuplicateDocumentIdError(SearchServerError):
    """Document id was already added"""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(
            f"Document {document_id} already exists; documents are immutable once added"
        )


class UnknownDocumentIdError(SearchServerError, KeyError):
    """No document with this id was added"""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(f"Unknown document id {document_id}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return self.args[0]


class MalformedQueryError(SearchServerError, ValueError):
    """Query contains a word that cannot be parsed"""

    def __init__(self, word: str, reason: str):
        self.word = word
        self.reason = reason
        super().__init__(f"Malformed query word '{word}': {reason}")
