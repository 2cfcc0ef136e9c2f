"""
Index builder - computes per-document term frequencies and ratings.

Term frequency of a word is its occurrence count divided by the total
word count of the document (after stop-word removal), so the frequencies
of one document always sum to 1.0.
"""

import logging
from collections import Counter
from typing import Dict, List, Sequence

logger = logging.getLogger(__name__)


def compute_term_frequencies(words: List[str]) -> Dict[str, float]:
    """
    Compute normalized term frequencies for a document.
    
    Args:
        words: Document words with stop words already removed
    
    Returns:
        Dict {word: count / len(words)}, one entry per distinct word
    
    Raises:
        ValueError: If words is empty (frequency would divide by zero)
    
    Example:
        >>> compute_term_frequencies(["cat", "playing", "with", "cat"])
        {'cat': 0.5, 'playing': 0.25, 'with': 0.25}
    """
    if not words:
        raise ValueError("Cannot compute term frequencies of an empty word list")
    
    inv_word_count = 1.0 / len(words)
    counts = Counter(words)
    
    result = {word: count * inv_word_count for word, count in counts.items()}
    
    logger.debug(f"Computed term frequencies: {len(result)} unique terms from {len(words)} words")
    
    return result


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Integer mean of ratings, truncated toward zero.
    
    Floor division would round negative means down (-7 // 3 == -3),
    so the sign is applied after dividing the absolute sum.
    
    Examples:
        >>> compute_average_rating([2, -5, -4, 6, 3])
        0
        >>> compute_average_rating([7, -9, -4])
        -2
        >>> compute_average_rating([])
        0
    """
    if not ratings:
        return 0
    
    rating_sum = sum(ratings)
    average = abs(rating_sum) // len(ratings)
    return -average if rating_sum < 0 else average
