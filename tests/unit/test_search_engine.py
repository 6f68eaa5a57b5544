"""
Unit tests for FaqSearchEngine (tokenize → load corpus → rank → project).

Uses the in-memory FakeContentSource from conftest; no network.
"""

import logging
from unittest.mock import patch

import pytest
from src.search.engine import FaqSearchEngine
from src.search.errors import InternalFailure, InvalidQuery
from src.search.models import Document
from src.search.scorer import score_document
from src.search.tokenizer import tokenize


@pytest.mark.asyncio
async def test_password_reset_scenario(fake_source_factory, password_corpus):
    engine = FaqSearchEngine(fake_source_factory([password_corpus]))

    response = await engine.search("password reset")

    assert [result.id for result in response.results] == [1, 2]
    assert response.count == 2


@pytest.mark.asyncio
async def test_no_matches_is_empty_success(fake_source_factory, password_corpus):
    engine = FaqSearchEngine(fake_source_factory([password_corpus]))

    response = await engine.search("invoice")

    assert response.results == []
    assert response.count == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["   ", "", None, 12])
async def test_invalid_query_does_not_fetch(fake_source_factory, password_corpus, query):
    source = fake_source_factory([password_corpus])
    engine = FaqSearchEngine(source)

    with pytest.raises(InvalidQuery):
        await engine.search(query)

    assert source.requested == []


@pytest.mark.asyncio
async def test_at_most_ten_results(fake_source_factory, documents_factory):
    pages = [documents_factory(100, start=0, title="Password"), documents_factory(30, start=100, title="Password")]
    engine = FaqSearchEngine(fake_source_factory(pages))

    response = await engine.search("password")

    assert response.count == 10
    # All tie on score, so the first ten in corpus order win
    assert [result.id for result in response.results] == list(range(10))


@pytest.mark.asyncio
async def test_results_span_pages(fake_source_factory, document_factory, documents_factory):
    pages = [
        documents_factory(100, start=0, title="Billing"),
        documents_factory(99, start=100, title="Billing") + [document_factory(500, title="Invoice history")],
        [document_factory(501, title="Download invoice", body="invoice pdf")],
    ]
    engine = FaqSearchEngine(fake_source_factory(pages))

    response = await engine.search("invoice")

    assert [result.id for result in response.results] == [501, 500]


@pytest.mark.asyncio
async def test_partial_corpus_still_returns_results(fake_source_factory, documents_factory, document_factory, caplog):
    pages = [
        documents_factory(99, start=0, title="Billing") + [document_factory(1000, title="Reset password")],
        documents_factory(100, start=100, title="Billing"),
        [document_factory(2000, title="Reset password", body="reset")],
    ]
    engine = FaqSearchEngine(fake_source_factory(pages, fail_at=3))

    with caplog.at_level(logging.WARNING):
        response = await engine.search("reset password")

    # Page 3 failed: only the article from page 1 can be found
    assert [result.id for result in response.results] == [1000]
    assert "partial corpus" in caplog.text


@pytest.mark.asyncio
async def test_search_is_idempotent(fake_source_factory, documents_factory):
    pages = [documents_factory(40, title="Password reset", body="reset")]
    engine = FaqSearchEngine(fake_source_factory(pages))

    first = await engine.search("reset")
    second = await engine.search("reset")

    assert first.results == second.results


@pytest.mark.asyncio
async def test_every_result_matches_all_terms(fake_source_factory, document_factory):
    corpus = [
        document_factory(1, title="Reset password", body="account"),
        document_factory(2, title="Reset email"),
        document_factory(3, title="Account", body="reset your password"),
        document_factory(4, title="Password"),
    ]
    engine = FaqSearchEngine(fake_source_factory([corpus]))

    response = await engine.search("Reset PASSWORD")

    tokens = tokenize("Reset PASSWORD")
    by_id = {document.id: document for document in corpus}
    assert [result.id for result in response.results] == [1, 3]
    for result in response.results:
        assert score_document(by_id[result.id], tokens).matched


@pytest.mark.asyncio
async def test_missing_body_is_empty_string(fake_source_factory):
    corpus = [Document(id=1, title="Password", body=None, url="https://x/1")]
    response = await FaqSearchEngine(fake_source_factory([corpus])).search("password")

    assert response.results[0].body == ""


@pytest.mark.asyncio
async def test_metacharacter_query(fake_source_factory, document_factory):
    corpus = [document_factory(1, title="C++ toolchain"), document_factory(2, title="C runtime")]
    response = await FaqSearchEngine(fake_source_factory([corpus])).search("c++")

    assert [result.id for result in response.results] == [1]


@pytest.mark.asyncio
async def test_unexpected_ranking_error_is_internal_failure(fake_source_factory, password_corpus):
    engine = FaqSearchEngine(fake_source_factory([password_corpus]))

    with patch("src.search.engine.rank_documents", side_effect=RuntimeError("boom")):
        with pytest.raises(InternalFailure):
            await engine.search("password")


@pytest.mark.asyncio
async def test_custom_max_results(fake_source_factory, documents_factory):
    engine = FaqSearchEngine(fake_source_factory([documents_factory(8, title="Password")]), max_results=3)
    response = await engine.search("password")
    assert response.count == 3
