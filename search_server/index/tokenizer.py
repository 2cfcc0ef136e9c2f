"""
Tokenizer for document and query text.

Tokenization rules:
1. Split on ASCII space only
2. Drop empty tokens produced by repeated spaces
3. Keep everything else as-is (no lowercasing, no punctuation stripping)

Tabs and newlines are not delimiters: "cat\\tdog" is a single word.
"""

from typing import List

WORD_DELIMITER = " "


def split_into_words(text: str) -> List[str]:
    """
    Split text into space-delimited words.
    
    Args:
        text: Document or query text
        
    Returns:
        List of non-empty words in original order
        
    Examples:
        >>> split_into_words("cat in the city")
        ['cat', 'in', 'the', 'city']
        
        >>> split_into_words("  white   cat ")
        ['white', 'cat']
        
        >>> split_into_words("")
        []
    """
    if not text:
        return []
    
    return [word for word in text.split(WORD_DELIMITER) if word]
