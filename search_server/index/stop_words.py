"""
Stop-word set: words ignored by both indexing and querying.
"""

from typing import Iterable, Iterator, List, Set

from .tokenizer import split_into_words


class StopWordSet:
    """
    Accumulating set of stop words.
    
    Adding words never clears previously added ones. Stop words only affect
    documents indexed after they were added (already indexed words stay).
    """
    
    def __init__(self, text: str = ""):
        self._words: Set[str] = set()
        self.add(text)
    
    def add(self, text: str) -> None:
        """Tokenize text and union its words into the set."""
        self._words.update(split_into_words(text))
    
    def add_words(self, words: Iterable[str]) -> None:
        """Union already-split words into the set (empty strings are ignored)."""
        self._words.update(word for word in words if word)
    
    def filter(self, words: Iterable[str]) -> List[str]:
        """Return words that are not stop words, preserving order and duplicates."""
        return [word for word in words if word not in self._words]
    
    def __contains__(self, word: object) -> bool:
        return word in self._words
    
    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))
    
    def __len__(self) -> int:
        return len(self._words)
