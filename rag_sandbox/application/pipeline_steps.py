"""
Catálogo estático del pipeline RAG (narrativa, etapas del sandbox, modos).

- NARRATIVE_STEPS: los cuatro pasos "cómo funciona RAG" (01..04).
- SANDBOX_STAGES: las cinco etapas que recorre una corrida del sandbox.
- MODE_LABELS: título/subtítulo por modo de retrieval.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Final, Tuple

from ..domain.entities import PipelineStep, RetrieverMode

NARRATIVE_STEPS: Final[Tuple[PipelineStep, ...]] = (
    PipelineStep(
        id="ingest",
        label="01",
        title="Ingest & Chunk",
        description=(
            "Break trusted knowledge into reusable snippets with metadata so "
            "retrieval can stay precise."
        ),
    ),
    PipelineStep(
        id="embed",
        label="02",
        title="Embed & Store",
        description=(
            "Convert each chunk into a semantic vector and keep it in a fast, "
            "filterable index."
        ),
    ),
    PipelineStep(
        id="retrieve",
        label="03",
        title="Retrieve & Rerank",
        description=(
            "Match the live question against vectors, blend semantic and "
            "keyword signals, and surface the best context."
        ),
    ),
    PipelineStep(
        id="compose",
        label="04",
        title="Compose & Ground",
        description=(
            "Assemble a grounded prompt, let the LLM draft an answer, then cite "
            "the exact chunks used."
        ),
    ),
)

SANDBOX_STAGES: Final[Tuple[PipelineStep, ...]] = (
    PipelineStep(
        id="question",
        title="Question captured",
        description=(
            "The raw user text is normalized and preprocessed before leaving "
            "the UI."
        ),
    ),
    PipelineStep(
        id="embedding",
        title="Embedding generated",
        description=(
            "The same embedding model turns the query into a dense vector of "
            "numbers."
        ),
    ),
    PipelineStep(
        id="vector-search",
        title="Vector search",
        description=(
            "We search the vector database for nearby chunks using cosine "
            "similarity."
        ),
    ),
    PipelineStep(
        id="rerank",
        title="Hybrid rerank",
        description=(
            "Keyword overlap and metadata filters boost the most trustworthy "
            "chunks."
        ),
    ),
    PipelineStep(
        id="compose",
        title="Answer composed",
        description=(
            "The model receives a grounded prompt and streams back a response "
            "with citations."
        ),
    ),
)


@dataclass(frozen=True)
class ModeLabel:
    title: str
    subtitle: str


MODE_LABELS: Final[Dict[RetrieverMode, ModeLabel]] = {
    RetrieverMode.SEMANTIC: ModeLabel("Semantic", "Embeddings only"),
    RetrieverMode.KEYWORD: ModeLabel("Keyword", "Filtering & BM25 vibes"),
    RetrieverMode.HYBRID: ModeLabel("Hybrid", "Best of both worlds"),
}
