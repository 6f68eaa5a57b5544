"""
Abstract interface for a paginated document provider.

The corpus loader only depends on this interface, so tests can plug in an
in-memory source and production uses the Zendesk Help Center client.
"""

from abc import ABC, abstractmethod

from .models import DocumentPage


class BaseContentSource(ABC):
    """Paginated listing of help center articles"""

    @abstractmethod
    def first_page_locator(self) -> str:
        """Locator of the first page (page 1, maximum page size)"""
        pass

    @abstractmethod
    async def list_documents(self, page_locator: str) -> DocumentPage:
        """
        Fetch one page of documents.

        Args:
            page_locator: Value from first_page_locator() or a previous
                page's next_page_locator

        Returns:
            DocumentPage; next_page_locator is None on the last page

        Raises:
            UpstreamUnavailable: Non-success status or transport error
        """
        pass
