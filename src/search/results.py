"""Projection of ranked candidates to the public result shape"""

from typing import Iterable, List

from .models import RankedResult, ScoredCandidate


def project_results(candidates: Iterable[ScoredCandidate]) -> List[RankedResult]:
    """Map ranked candidates to RankedResult; a missing body becomes an empty string"""
    return [
        RankedResult(
            id=candidate.document.id,
            title=candidate.document.title,
            body=candidate.document.body or "",
            url=candidate.document.url,
        )
        for candidate in candidates
    ]
