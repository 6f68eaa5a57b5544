"""Rank the loaded corpus against a tokenized query"""

import logging
from typing import Iterable, List

from .models import Document, ScoredCandidate
from .scorer import score_document

logger = logging.getLogger(__name__)

# Maximum number of results returned by a search
MAX_RESULTS = 10


def rank_documents(
    documents: Iterable[Document],
    tokens: List[str],
    limit: int = MAX_RESULTS,
) -> List[ScoredCandidate]:
    """
    Score every document, drop non-matches and return the top `limit`.

    sorted() is stable, so documents with equal scores keep their corpus order.

    Args:
        documents: Corpus in page arrival order
        tokens: Lowercase query tokens
        limit: Maximum number of candidates to return

    Returns:
        Matched candidates, highest score first (empty list if nothing matches)
    """
    candidates = [score_document(document, tokens) for document in documents]
    matched = [candidate for candidate in candidates if candidate.matched]

    ranked = sorted(matched, key=lambda candidate: candidate.score, reverse=True)

    logger.debug(f"Ranked {len(matched)}/{len(candidates)} matching documents for tokens={tokens}")

    return ranked[:limit]
