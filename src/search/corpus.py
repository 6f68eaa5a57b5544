"""
Corpus loader - pulls every article page into memory before ranking.

Ranking is a global comparison across all articles, so the whole corpus must be
visible before any scoring happens. Pages are fetched one after another because
each page's locator comes from the previous response.

Failure policy: a failed page ends pagination and the articles collected so far
are returned. Search continues on the partial corpus; the failure is only logged.
"""

import logging
from typing import List

from .errors import UpstreamUnavailable
from .models import Document
from .source import BaseContentSource

logger = logging.getLogger(__name__)


async def load_corpus(source: BaseContentSource) -> List[Document]:
    """
    Load all documents from a paginated content source.

    Args:
        source: Content source to page through

    Returns:
        Documents in page arrival order, then in-page order. May be partial if
        a page request failed.
    """
    documents: List[Document] = []
    visited = set()
    locator = source.first_page_locator()
    pages = 0

    while locator:
        if locator in visited:
            logger.warning(f"Pagination loop detected at {locator}, stopping with {len(documents)} documents")
            break
        visited.add(locator)

        try:
            page = await source.list_documents(locator)
        except UpstreamUnavailable as e:
            logger.warning(
                f"Article page fetch failed (status={e.status_code}, locator={locator}); "
                f"continuing with partial corpus of {len(documents)} documents from {pages} pages"
            )
            break

        pages += 1
        documents.extend(page.documents)
        locator = page.next_page_locator

    logger.info(f"Loaded corpus: {len(documents)} documents from {pages} pages")
    return documents
