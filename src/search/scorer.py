"""
Term-match scorer for help center articles.

Every query token must appear (as a substring) in the title or the body,
otherwise the article is rejected. Matching articles accumulate points per token:

    +10  token occurs in the title
    +1   token occurs in the body
    +5   token occurs in the title as a whole word

The three can stack for the same token, so a token that is a whole word of
the title and also appears in the body is worth 16 points.

Whole-word matching escapes the token before building the pattern, so tokens
like "c++", "(beta)" or "*" are compared literally. Word boundaries are ASCII
only (letters, digits, underscore): "caf" is a whole word in "café menu",
"über" is not one in "über alles".
"""

import re
from typing import List

from .models import Document, ScoredCandidate

# Fixed weights (part of the search contract, not tuning knobs)
TITLE_MATCH_POINTS = 10
BODY_MATCH_POINTS = 1
TITLE_WORD_BONUS = 5


def is_whole_word(token: str, text: str) -> bool:
    """Check whether token occurs in text bounded by ASCII word boundaries"""
    return re.search(rf"\b{re.escape(token)}\b", text, re.ASCII) is not None


def score_document(document: Document, tokens: List[str]) -> ScoredCandidate:
    """
    Score one article against all query tokens.

    Args:
        document: Article to score
        tokens: Lowercase query tokens (non-empty, see tokenize())

    Returns:
        ScoredCandidate with matched=False as soon as one token is missing
        from both title and body (remaining tokens are not evaluated)

    Example:
        >>> doc = Document(id=1, title="Reset your password", body="", url=None)
        >>> score_document(doc, ["password"]).score
        15
    """
    title = (document.title or "").lower()
    body = (document.body or "").lower()

    score = 0
    for token in tokens:
        title_hit = token in title
        body_hit = token in body

        if not title_hit and not body_hit:
            return ScoredCandidate(document=document, score=0, matched=False)

        if title_hit:
            score += TITLE_MATCH_POINTS
            # \b needs a word character next to it, only worth checking on a title hit
            if is_whole_word(token, title):
                score += TITLE_WORD_BONUS
        if body_hit:
            score += BODY_MATCH_POINTS

    return ScoredCandidate(document=document, score=score, matched=True)
