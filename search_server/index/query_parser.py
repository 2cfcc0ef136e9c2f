"""
Query parser: raw query text -> required (plus) and excluded (minus) words.

Query syntax:
    cat dog        -> documents containing "cat" or "dog"
    cat -dog       -> documents containing "cat", none containing "dog"

Rules:
- A word prefixed with a single "-" is a minus-word
- Stop words are dropped from both sets (checked after stripping "-")
- Duplicates collapse (both sides are sets)
- A lone "-" or a word starting with "--" is rejected
"""

from dataclasses import dataclass, field
from typing import FrozenSet

from ..errors import MalformedQueryError
from .stop_words import StopWordSet
from .tokenizer import split_into_words

MINUS_PREFIX = "-"

__all__ = ["Query", "QueryWord", "parse_query", "parse_query_word", "MalformedQueryError"]


@dataclass(frozen=True)
class QueryWord:
    """Single parsed query word"""
    data: str
    is_minus: bool
    is_stop: bool


@dataclass(frozen=True)
class Query:
    """Parsed query with disjoint roles for each word"""
    plus_words: FrozenSet[str] = field(default_factory=frozenset)
    minus_words: FrozenSet[str] = field(default_factory=frozenset)
    
    def is_empty(self) -> bool:
        return not self.plus_words and not self.minus_words


def parse_query_word(word: str, stop_words: StopWordSet) -> QueryWord:
    """
    Classify one query word.
    
    Args:
        word: Non-empty word produced by the tokenizer
        stop_words: Stop words to check against
    
    Returns:
        QueryWord with the "-" prefix stripped
    
    Raises:
        MalformedQueryError: For "-" alone or a "--" prefix
    """
    is_minus = False
    if word.startswith(MINUS_PREFIX):
        is_minus = True
        word = word[len(MINUS_PREFIX):]
        if not word:
            raise MalformedQueryError(MINUS_PREFIX, "minus sign without a word")
        if word.startswith(MINUS_PREFIX):
            raise MalformedQueryError(MINUS_PREFIX + word, "double minus sign")
    
    return QueryWord(data=word, is_minus=is_minus, is_stop=word in stop_words)


def parse_query(text: str, stop_words: StopWordSet) -> Query:
    """
    Parse raw query text into plus and minus words.
    
    Examples:
        >>> parse_query("dog -cat the", StopWordSet("the"))
        Query(plus_words=frozenset({'dog'}), minus_words=frozenset({'cat'}))
    """
    plus_words = set()
    minus_words = set()
    
    for word in split_into_words(text):
        query_word = parse_query_word(word, stop_words)
        if query_word.is_stop:
            continue
        if query_word.is_minus:
            minus_words.add(query_word.data)
        else:
            plus_words.add(query_word.data)
    
    # "cat -cat": the minus-word vetoes the document anyway
    plus_words -= minus_words
    
    return Query(plus_words=frozenset(plus_words), minus_words=frozenset(minus_words))
