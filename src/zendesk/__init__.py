"""
Zendesk collaborators.

- HelpCenterClient: public Help Center content (article pages for search,
  categories/sections/articles for browsing)
- SupportClient: ticket forms and request submission (API token auth)
"""

from .help_center import HelpCenterClient
from .support import SupportClient, build_request_payload

__all__ = [
    "HelpCenterClient",
    "SupportClient",
    "build_request_payload",
]
