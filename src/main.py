"""
FAQ Search API - FastAPI backend for the support widget

Sits between the support widget and Zendesk:
- Help Center browsing (categories, sections, articles) from the public help center
- FAQ search: the Help Center search API is not enabled for the help center, so
  all articles are fetched page by page and ranked locally (see src/search)
- Ticket forms and support request submission via the Zendesk Requests API

Configuration is read once at startup (src/config.py) and passed to the
Zendesk clients; one shared httpx.AsyncClient serves all upstream calls.
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, List, Optional

# Load environment variables from .env.local (local dev) or .env (production)
from src.config import Settings, load_environment

loaded_env = load_environment()
if loaded_env:
    print(f"Loading environment from: {loaded_env}")
else:
    print("WARNING: No .env.local or .env file found - using system environment variables only")

# Configure logging: console (brief) + file (detailed)
from src.logging_config import setup_logging

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
setup_logging(
    log_file=os.getenv("LOG_FILE", "logs/faq-search.log") or None,
    console_level=getattr(logging, log_level, logging.INFO),
    file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
)

logger = logging.getLogger(__name__)


import httpx
from fastapi import FastAPI, HTTPException, Query, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.search import FaqSearchEngine, InternalFailure, InvalidQuery, UpstreamUnavailable
from src.zendesk import HelpCenterClient, SupportClient

# Version tracking
APP_VERSION = "0.1.0"
APP_START_TIME = datetime.now(timezone.utc)

# Global instances (created in lifespan)
settings: Optional[Settings] = None
http_client: Optional[httpx.AsyncClient] = None
help_center: Optional[HelpCenterClient] = None
support_client: Optional[SupportClient] = None
search_engine: Optional[FaqSearchEngine] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build settings and Zendesk clients, close the HTTP client on shutdown"""
    global settings, http_client, help_center, support_client, search_engine

    settings = Settings.from_env()
    logger.info(
        f"Zendesk subdomain: {settings.zendesk_subdomain or 'NOT CONFIGURED'}, "
        f"help center: {settings.help_center_url}"
    )

    http_client = httpx.AsyncClient(timeout=settings.request_timeout)
    help_center = HelpCenterClient(settings, http_client)
    support_client = SupportClient(settings, http_client)
    search_engine = FaqSearchEngine(help_center)
    logger.info("Zendesk clients initialized")

    yield

    logger.info("Shutting down...")
    await http_client.aclose()
    http_client = None
    help_center = None
    support_client = None
    search_engine = None


app = FastAPI(
    title="FAQ Search API",
    description="Help center browsing, FAQ search and support requests backed by Zendesk",
    version=APP_VERSION,
    lifespan=lifespan,
)

# CORS middleware for the embeddable widget
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float
    zendesk_configured: bool


class FaqSearchResult(BaseModel):
    id: Any
    title: Optional[str] = None
    body: str = ""
    html_url: Optional[str] = None


class FaqSearchResponse(BaseModel):
    results: List[FaqSearchResult]
    count: int


class Category(BaseModel):
    id: Any
    name: Optional[str] = None
    description: Optional[str] = None
    html_url: Optional[str] = None


class Section(Category):
    category_id: Any = None


class Article(BaseModel):
    id: Any
    title: Optional[str] = None
    body: Optional[str] = None
    html_url: Optional[str] = None
    section_id: Any = None


class CategoryListResponse(BaseModel):
    categories: List[Category]


class CategoryResponse(BaseModel):
    category: Optional[Category]


class SectionListResponse(BaseModel):
    sections: List[Section]


class SectionResponse(BaseModel):
    section: Optional[Section]


class ArticleListResponse(BaseModel):
    articles: List[Article]


class ArticleResponse(BaseModel):
    article: Optional[Article]


class TicketForm(BaseModel):
    id: Any
    name: Optional[str] = None
    display_name: Optional[str] = None
    active: Optional[bool] = None
    default: Optional[bool] = None
    ticket_field_ids: Optional[List[Any]] = None


class TicketFormListResponse(BaseModel):
    forms: List[TicketForm]


class TicketFormSummary(BaseModel):
    id: Any
    name: Optional[str] = None
    display_name: Optional[str] = None


class TicketField(BaseModel):
    id: Any
    type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    required: Optional[bool] = None
    options: List[Any] = Field(default_factory=list)


class TicketFormDetailResponse(BaseModel):
    form: TicketFormSummary
    fields: List[TicketField]
    conditions: List[Any]


class SupportRequestCreate(BaseModel):
    email: Optional[str] = Field(None, description="Requester email (required)")
    subject: Optional[str] = Field(None, description="Request subject (required)")
    message: Optional[str] = Field(None, description="Request description (required)")
    name: Optional[str] = Field(None, description="Requester name (defaults to the email local part)")
    category: Optional[str] = Field(None, description="Added to the request as a tag")
    ticket_form_id: Optional[int] = None
    custom_fields: Optional[List[dict]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "subject": "Cannot reset my password",
                "message": "The reset link in the email has expired.",
                "category": "account",
            }
        }


class SupportRequestResponse(BaseModel):
    success: bool
    request_id: Optional[int] = None
    message: str


def _upstream_error(e: UpstreamUnavailable, message: str) -> HTTPException:
    """Map a failed Zendesk call to the upstream status (502 if there was none)"""
    return HTTPException(
        status_code=e.status_code or status.HTTP_502_BAD_GATEWAY,
        detail=message,
    )


def require_support_client() -> SupportClient:
    """Request submission needs agent credentials"""
    if settings is None or support_client is None or not settings.is_configured:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Zendesk not configured",
        )
    return support_client


# Routes
@app.get("/", response_model=dict)
async def root():
    """Root endpoint"""
    return {
        "service": "FAQ Search API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check"""
    uptime = (datetime.now(timezone.utc) - APP_START_TIME).total_seconds()

    return HealthResponse(
        status="ok",
        version=APP_VERSION,
        started_at=APP_START_TIME.isoformat(),
        uptime_seconds=round(uptime, 2),
        zendesk_configured=bool(settings and settings.is_configured),
    )


@app.get("/faq/search", response_model=FaqSearchResponse)
async def faq_search(q: Optional[str] = Query(None, description="Search terms")):
    """
    Search help center articles.

    Every term must appear in the article title or body. Title matches rank
    higher than body matches, whole-word title matches get an extra bonus.
    Returns at most 10 articles; an empty list when nothing matches.

    If some article pages cannot be fetched, the search runs on the pages
    that were retrieved.

    Example:
        GET /faq/search?q=password%20reset
    """
    try:
        response = await search_engine.search(q)
    except InvalidQuery as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except InternalFailure:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )

    return FaqSearchResponse(
        results=[
            FaqSearchResult(id=result.id, title=result.title, body=result.body, html_url=result.url)
            for result in response.results
        ],
        count=response.count,
    )


@app.get("/help-center/categories", response_model=CategoryListResponse)
async def list_categories():
    """All public help center categories"""
    try:
        categories = await help_center.list_categories()
    except UpstreamUnavailable as e:
        raise _upstream_error(e, "Could not fetch categories")
    return {"categories": categories}


@app.get("/help-center/categories/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str):
    try:
        category = await help_center.get_category(category_id)
    except UpstreamUnavailable as e:
        raise _upstream_error(e, "Could not fetch category")
    return {"category": category}


@app.get("/help-center/categories/{category_id}/sections", response_model=SectionListResponse)
async def list_sections(category_id: str):
    """Sections within a category"""
    try:
        sections = await help_center.list_sections(category_id)
    except UpstreamUnavailable as e:
        raise _upstream_error(e, "Could not fetch sections")
    return {"sections": sections}


@app.get("/help-center/sections/{section_id}", response_model=SectionResponse)
async def get_section(section_id: str):
    try:
        section = await help_center.get_section(section_id)
    except UpstreamUnavailable as e:
        raise _upstream_error(e, "Could not fetch section")
    return {"section": section}


@app.get("/help-center/sections/{section_id}/articles", response_model=ArticleListResponse)
async def list_section_articles(section_id: str):
    """Articles within a section"""
    try:
        articles = await help_center.list_section_articles(section_id)
    except UpstreamUnavailable as e:
        raise _upstream_error(e, "Could not fetch articles")
    return {"articles": articles}


@app.get("/help-center/articles/{article_id}", response_model=ArticleResponse)
async def get_article(article_id: str):
    try:
        article = await help_center.get_article(article_id)
    except UpstreamUnavailable as e:
        raise _upstream_error(e, "Could not fetch article")
    return {"article": article}


@app.get("/ticket-forms", response_model=TicketFormListResponse)
async def list_ticket_forms():
    """Active ticket forms visible to end users"""
    try:
        forms = await support_client.list_ticket_forms()
    except UpstreamUnavailable as e:
        raise _upstream_error(e, "Could not fetch ticket forms")
    return {"forms": forms}


@app.get("/ticket-forms/{form_id}", response_model=TicketFormDetailResponse)
async def get_ticket_form(form_id: str):
    """
    Ticket form with its end-user visible fields and conditional field rules.
    """
    try:
        return await support_client.get_ticket_form(form_id)
    except UpstreamUnavailable as e:
        raise _upstream_error(e, "Could not fetch ticket form")


@app.post("/requests", response_model=SupportRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_support_request(request: SupportRequestCreate):
    """
    Create a support request on behalf of an end user.

    email, subject and message are checked before the Zendesk configuration,
    so an incomplete form always answers 400. The request is tagged
    "support-widget" plus the category (if given).
    """
    if not (request.email and request.subject and request.message):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: email, subject, message",
        )

    client = require_support_client()

    try:
        request_id = await client.create_request(**request.model_dump())
    except UpstreamUnavailable as e:
        if e.status_code == 422:
            raise _upstream_error(e, "Invalid request data")
        raise _upstream_error(e, "Could not create request")

    return SupportRequestResponse(
        success=True,
        request_id=request_id,
        message="Request created successfully",
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc):
    """All handled errors answer {"error": message}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler (details go to the log, not to the client)"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=Settings.from_env().port,
    )
