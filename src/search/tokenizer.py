"""
Query tokenizer for FAQ search.

Tokenization pipeline:
1. Lowercase conversion
2. Split on runs of whitespace
3. Drop empty segments

No stemming, stopword removal or punctuation stripping: every token is matched
literally (as a substring) against article titles and bodies, so "c++" stays
"c++" and "e-mail" stays "e-mail".
"""

from typing import List

from .errors import InvalidQuery


def tokenize(query) -> List[str]:
    """
    Split a free-text query into lowercase search terms.

    Args:
        query: Raw query string as typed by the user

    Returns:
        Non-empty list of tokens in left-to-right order

    Raises:
        InvalidQuery: If query is None, not a string, or has no tokens

    Examples:
        >>> tokenize("Reset  your PASSWORD")
        ['reset', 'your', 'password']

        >>> tokenize("C++ setup\\tguide")
        ['c++', 'setup', 'guide']
    """
    if query is None or not isinstance(query, str):
        raise InvalidQuery()

    # str.split() with no separator splits on whitespace runs and drops empties
    tokens = query.lower().split()

    if not tokens:
        raise InvalidQuery('Query parameter "q" must contain at least one search term')

    return tokens
