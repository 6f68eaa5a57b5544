"""
FAQ search engine: tokenize → load corpus → score/rank → project.

A fresh corpus is loaded for every search; the engine keeps no state between
requests, so one instance can serve concurrent requests.
"""

import logging

from .corpus import load_corpus
from .errors import InternalFailure
from .ranker import MAX_RESULTS, rank_documents
from .models import SearchResponse
from .results import project_results
from .source import BaseContentSource
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class FaqSearchEngine:
    """Relevance search over all articles of a content source"""

    def __init__(self, source: BaseContentSource, max_results: int = MAX_RESULTS):
        self.source = source
        self.max_results = max_results

    async def search(self, query) -> SearchResponse:
        """
        Search all articles for documents containing every query term.

        Args:
            query: Raw query string

        Returns:
            SearchResponse with at most max_results results (possibly none)

        Raises:
            InvalidQuery: Query is missing or has no terms (checked before any fetch)
            InternalFailure: Unexpected error while ranking
        """
        tokens = tokenize(query)

        documents = await load_corpus(self.source)

        try:
            candidates = rank_documents(documents, tokens, limit=self.max_results)
            results = project_results(candidates)
        except Exception as e:
            logger.exception(f"Ranking failed for query tokens={tokens}")
            raise InternalFailure("Search ranking failed") from e

        logger.info(f"FAQ search: tokens={tokens}, corpus={len(documents)}, results={len(results)}")
        return SearchResponse(results=results)
