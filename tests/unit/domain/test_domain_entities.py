"""
Name: Domain Entities Unit Tests

Responsibilities:
  - Test SourceDocument, Dataset, Chunk and RetrievalResult entities
  - Verify default values and immutability of the seed corpus types
  - Verify RetrieverMode parsing

Collaborators:
  - rag_sandbox.domain.entities: Domain entities being tested
  - pytest: Test framework

Notes:
  - Pure unit tests (no external dependencies)
  - Mark with @pytest.mark.unit
"""

from dataclasses import FrozenInstanceError

import pytest

from rag_sandbox.domain import (
    Chunk,
    Dataset,
    GeneratedAnswer,
    RetrievalResult,
    RetrieverMode,
    SourceDocument,
)


@pytest.mark.unit
class TestSourceDocument:
    """Test suite for SourceDocument entity."""

    def test_defaults(self):
        """R: Tags and last_updated are optional."""
        doc = SourceDocument(id="d1", title="Doc", content="text")

        assert doc.tags == ()
        assert doc.last_updated == ""

    def test_is_immutable(self, greek_document):
        """R: Seed documents cannot be mutated."""
        with pytest.raises(FrozenInstanceError):
            greek_document.title = "Other"


@pytest.mark.unit
class TestDataset:
    """Test suite for Dataset entity."""

    def test_defaults(self, greek_document):
        """R: Color and sample queries are optional."""
        dataset = Dataset(
            id="ds", name="DS", description="", documents=(greek_document,)
        )

        assert dataset.color == ""
        assert dataset.sample_queries == ()

    def test_is_immutable(self, tiny_dataset):
        """R: Datasets are frozen."""
        with pytest.raises(FrozenInstanceError):
            tiny_dataset.name = "Renamed"


@pytest.mark.unit
class TestChunkAndResult:
    """Test suite for derived entities."""

    def test_chunk_defaults(self):
        """R: Metadata lists default to empty, not shared."""
        first = Chunk(id="c1", doc_id="d", doc_title="D", text="t", embedding=[])
        second = Chunk(id="c2", doc_id="d", doc_title="D", text="t", embedding=[])

        first.tags.append("x")

        assert second.tags == []
        assert first.word_count == 0

    def test_retrieval_result_defaults(self):
        """R: Reasons default to empty and estimated tokens to zero."""
        chunk = Chunk(id="c1", doc_id="d", doc_title="D", text="t", embedding=[])
        result = RetrievalResult(
            chunk=chunk,
            similarity=0.0,
            semantic_score=0.5,
            keyword_score=0.0,
            hybrid_score=0.325,
            score=0.325,
        )

        assert result.reasons == []
        assert result.estimated_tokens == 0

    def test_generated_answer_defaults(self):
        """R: Citations default to empty and prompt parts to None."""
        answer = GeneratedAnswer(
            prompt="p",
            prompt_tokens=1,
            response_tokens=120,
            estimated_latency_ms=1563,
            estimated_cost_usd=0.0001,
            answer="a",
        )

        assert answer.citations == []
        assert answer.prompt_parts is None


@pytest.mark.unit
class TestRetrieverMode:
    """Test suite for RetrieverMode enum."""

    @pytest.mark.parametrize("value", ["semantic", "keyword", "hybrid"])
    def test_parse_from_string(self, value):
        """R: Modes parse from their wire value."""
        assert RetrieverMode(value).value == value

    def test_unknown_mode(self):
        """R: Unknown modes raise ValueError."""
        with pytest.raises(ValueError):
            RetrieverMode("fuzzy")
