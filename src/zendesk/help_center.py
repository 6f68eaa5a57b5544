"""
Zendesk Help Center client (public content, no credentials).

Requests are sent without an Authorization header on purpose: anonymous calls
only ever return articles visible to end users.

Structure of the Help Center API used here:
{help_center_url}/
├── categories.json
├── categories/{id}.json
├── categories/{id}/sections.json
├── sections/{id}.json
├── sections/{id}/articles.json
├── articles/{id}.json
└── articles.json?per_page=100      # paginated, "next_page" is a full URL or null
"""

import logging
from typing import List, Optional

import httpx

from src.config import Settings
from src.search.errors import UpstreamUnavailable
from src.search.models import Document, DocumentPage
from src.search.source import BaseContentSource

logger = logging.getLogger(__name__)

# Maximum page size accepted by the Help Center API
ARTICLES_PAGE_SIZE = 100


def _category(data: dict) -> dict:
    return {
        "id": data.get("id"),
        "name": data.get("name"),
        "description": data.get("description"),
        "html_url": data.get("html_url"),
    }


def _section(data: dict) -> dict:
    return {
        "id": data.get("id"),
        "name": data.get("name"),
        "description": data.get("description"),
        "html_url": data.get("html_url"),
        "category_id": data.get("category_id"),
    }


def _article(data: dict) -> dict:
    return {
        "id": data.get("id"),
        "title": data.get("title"),
        "body": data.get("body"),
        "html_url": data.get("html_url"),
        "section_id": data.get("section_id"),
    }


class HelpCenterClient(BaseContentSource):
    """Read-only client for the public Help Center API"""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        """
        Args:
            settings: Service settings (help center subdomain and locale)
            http_client: Shared async HTTP client (owned by the caller)
        """
        self.settings = settings
        self.http_client = http_client
        self.base_url = settings.help_center_url

    async def _get_json(self, url: str) -> dict:
        """GET a JSON document, raising UpstreamUnavailable on any failure"""
        try:
            response = await self.http_client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Help center request failed: {url} ({type(e).__name__}: {e})")
            raise UpstreamUnavailable(locator=url, reason=type(e).__name__) from e

        if not response.is_success:
            logger.error(f"Help center returned {response.status_code} for {url}")
            raise UpstreamUnavailable(status_code=response.status_code, locator=url)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Help center returned invalid JSON for {url}")
            raise UpstreamUnavailable(locator=url, reason="invalid JSON") from e

        if not isinstance(data, dict):
            logger.error(f"Help center returned {type(data).__name__} instead of an object for {url}")
            raise UpstreamUnavailable(locator=url, reason="unexpected payload")

        return data

    # Content source (corpus loader)

    def first_page_locator(self) -> str:
        return f"{self.base_url}/articles.json?per_page={ARTICLES_PAGE_SIZE}"

    async def list_documents(self, page_locator: str) -> DocumentPage:
        data = await self._get_json(page_locator)
        documents = [Document.from_article(article) for article in data.get("articles") or []]
        logger.debug(f"Fetched {len(documents)} articles from {page_locator}")
        return DocumentPage(documents=documents, next_page_locator=data.get("next_page"))

    # Pass-through browsing

    async def list_categories(self) -> List[dict]:
        data = await self._get_json(f"{self.base_url}/categories.json")
        return [_category(category) for category in data.get("categories") or []]

    async def get_category(self, category_id: str) -> Optional[dict]:
        data = await self._get_json(f"{self.base_url}/categories/{category_id}.json")
        category = data.get("category")
        return _category(category) if category else None

    async def list_sections(self, category_id: str) -> List[dict]:
        data = await self._get_json(f"{self.base_url}/categories/{category_id}/sections.json")
        return [_section(section) for section in data.get("sections") or []]

    async def get_section(self, section_id: str) -> Optional[dict]:
        data = await self._get_json(f"{self.base_url}/sections/{section_id}.json")
        section = data.get("section")
        return _section(section) if section else None

    async def list_section_articles(self, section_id: str) -> List[dict]:
        data = await self._get_json(f"{self.base_url}/sections/{section_id}/articles.json")
        return [_article(article) for article in data.get("articles") or []]

    async def get_article(self, article_id: str) -> Optional[dict]:
        data = await self._get_json(f"{self.base_url}/articles/{article_id}.json")
        article = data.get("article")
        return _article(article) if article else None
