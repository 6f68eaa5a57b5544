"""
Error taxonomy for FAQ search.

- InvalidQuery: caller sent a query with nothing to search for (HTTP 400)
- UpstreamUnavailable: a Zendesk call returned a non-success status or failed
  in transport. The corpus loader recovers from it by keeping the pages it
  already has; pass-through endpoints surface the upstream status.
- InternalFailure: unexpected error while ranking (HTTP 500, no partial result)
"""

from typing import Optional


class SearchError(Exception):
    """Base class for search errors"""


class InvalidQuery(SearchError):
    """Query is missing, not a string, or contains no search terms"""

    def __init__(self, message: str = 'Query parameter "q" is required'):
        super().__init__(message)
        self.message = message


class UpstreamUnavailable(SearchError):
    """Zendesk request failed"""

    def __init__(self, status_code: Optional[int] = None, locator: Optional[str] = None, reason: str = ""):
        self.status_code = status_code
        self.locator = locator
        self.reason = reason
        detail = f"status={status_code}" if status_code is not None else (reason or "transport error")
        super().__init__(f"Upstream request failed ({detail}): {locator}")


class InternalFailure(SearchError):
    """Unexpected failure while scoring or ranking"""
