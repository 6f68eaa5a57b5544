"""Data types shared by the search pipeline"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class Document:
    """Help center article as loaded into the in-memory corpus"""
    id: Any
    title: Optional[str]
    body: Optional[str]
    url: Optional[str]
    section_id: Optional[Any] = None

    @classmethod
    def from_article(cls, article: dict) -> "Document":
        """Build a Document from a Zendesk Help Center article payload"""
        return cls(
            id=article.get("id"),
            title=article.get("title") or "",
            body=article.get("body"),
            url=article.get("html_url"),
            section_id=article.get("section_id"),
        )


@dataclass(frozen=True)
class DocumentPage:
    """One page of a paginated listing; next_page_locator is None on the last page"""
    documents: List[Document]
    next_page_locator: Optional[str] = None


@dataclass
class ScoredCandidate:
    document: Document
    score: int
    matched: bool


@dataclass(frozen=True)
class RankedResult:
    """Public projection of a matched document"""
    id: Any
    title: str
    body: str
    url: Optional[str]


@dataclass
class SearchResponse:
    results: List[RankedResult] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.results)
