"""Unit tests for InMemoryVectorIndex and relevance scoring."""

import pytest

from ragchat.domain.entities import DocumentChunk
from ragchat.infrastructure.vector_index.in_memory_index import InMemoryVectorIndex
from ragchat.infrastructure.vector_index.similarity import relevance_score


def test_relevance_score_scale() -> None:
    assert relevance_score([1.0, 0.0], [2.0, 0.0]) == pytest.approx(1.0)
    assert relevance_score([1.0, 0.0], [0.0, 3.0]) == pytest.approx(0.5)
    assert relevance_score([1.0, 0.0], [-1.0, 0.0]) == pytest.approx(0.0)
    assert relevance_score([0.0, 0.0], [1.0, 0.0]) == pytest.approx(0.5)


def test_relevance_score_dimension_mismatch() -> None:
    with pytest.raises(ValueError, match="Dimension mismatch"):
        relevance_score([1.0], [1.0, 0.0])


@pytest.mark.asyncio
async def test_search_best_first_with_threshold() -> None:
    index = InMemoryVectorIndex()
    await index.add([0.0, 1.0], DocumentChunk("a.md", 0, "far"))
    await index.add([1.0, 0.1], DocumentChunk("a.md", 1, "near"))
    await index.add([1.0, 0.0], DocumentChunk("a.md", 2, "same"))

    matches = await index.search([1.0, 0.0], 10, 0.6)

    assert [m.chunk.text for m in matches] == ["same", "near"]
    assert matches[0].score >= matches[1].score >= 0.6


@pytest.mark.asyncio
async def test_duplicates_are_kept() -> None:
    index = InMemoryVectorIndex()
    chunk = DocumentChunk("a.md", 0, "dup")
    await index.add([1.0], chunk)
    await index.add([1.0], chunk)
    assert len(await index.search([1.0], 10, 0.0)) == 2


@pytest.mark.asyncio
async def test_clear_then_search_is_empty() -> None:
    index = InMemoryVectorIndex()
    await index.add([1.0, 0.0], DocumentChunk("a.md", 0, "x"))
    await index.clear()
    await index.clear()
    assert await index.search([1.0, 0.0], 10, 0.0) == []
    assert len(index) == 0


@pytest.mark.asyncio
async def test_non_positive_k_returns_empty() -> None:
    index = InMemoryVectorIndex()
    await index.add([1.0], DocumentChunk("a.md", 0, "x"))
    assert await index.search([1.0], 0, 0.0) == []
