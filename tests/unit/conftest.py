"""Unit test fixtures - in-memory content source and document builders"""

from typing import List, Optional

import pytest

from src.search.errors import UpstreamUnavailable
from src.search.models import Document, DocumentPage
from src.search.source import BaseContentSource


class FakeContentSource(BaseContentSource):
    """
    In-memory paginated source.

    Page locators are "page-1", "page-2", ...; the last page has no next locator.
    If fail_at is set, requesting that (1-based) page raises UpstreamUnavailable.
    """

    def __init__(self, pages: List[List[Document]], fail_at: Optional[int] = None, fail_status: int = 503):
        self.pages = pages
        self.fail_at = fail_at
        self.fail_status = fail_status
        self.requested: List[str] = []

    def first_page_locator(self) -> str:
        return "page-1"

    async def list_documents(self, page_locator: str) -> DocumentPage:
        self.requested.append(page_locator)
        number = int(page_locator.split("-")[1])

        if number == self.fail_at:
            raise UpstreamUnavailable(status_code=self.fail_status, locator=page_locator)

        next_locator = f"page-{number + 1}" if number < len(self.pages) else None
        return DocumentPage(documents=self.pages[number - 1], next_page_locator=next_locator)


def make_document(doc_id, title="", body="", url=None) -> Document:
    return Document(
        id=doc_id,
        title=title,
        body=body,
        url=url or f"https://help.example.com/hc/articles/{doc_id}",
    )


def make_documents(count: int, start: int = 0, title: str = "Article", body: str = "") -> List[Document]:
    return [make_document(start + i, title=f"{title} {start + i}", body=body) for i in range(count)]


@pytest.fixture
def fake_source_factory():
    """Factory for FakeContentSource (pages, fail_at=None, fail_status=503)"""
    return FakeContentSource


@pytest.fixture
def document_factory():
    return make_document


@pytest.fixture
def documents_factory():
    return make_documents


@pytest.fixture
def password_corpus():
    """Two articles about password resets: one by title, one by body only"""
    return [
        make_document(1, title="Reset your password", body="Follow the steps below..."),
        make_document(2, title="Billing FAQ", body="password reset instructions here"),
    ]
