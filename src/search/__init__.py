"""
FAQ search over help center articles.

The Zendesk Help Center search API is not available for this help center, so
search is done locally: all articles are fetched page by page, each article is
scored against every query term, and the best matches are returned.

Components:
- tokenizer: Split a query into lowercase terms
- corpus: Load every article page from a content source
- scorer: Per-article term-match score with an all-terms-must-match filter
- ranker: Stable sort by score and top-K cut
- results: Projection to the public result shape
- source: Interface of a paginated document provider
- engine: FaqSearchEngine tying the steps together
"""

from .errors import InternalFailure, InvalidQuery, SearchError, UpstreamUnavailable
from .models import Document, DocumentPage, RankedResult, ScoredCandidate, SearchResponse
from .source import BaseContentSource
from .tokenizer import tokenize
from .scorer import score_document
from .ranker import MAX_RESULTS, rank_documents
from .results import project_results
from .corpus import load_corpus
from .engine import FaqSearchEngine

__all__ = [
    "BaseContentSource",
    "Document",
    "DocumentPage",
    "FaqSearchEngine",
    "InternalFailure",
    "InvalidQuery",
    "MAX_RESULTS",
    "RankedResult",
    "ScoredCandidate",
    "SearchError",
    "SearchResponse",
    "UpstreamUnavailable",
    "load_corpus",
    "project_results",
    "rank_documents",
    "score_document",
    "tokenize",
]
