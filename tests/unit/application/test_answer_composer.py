"""
Name: Answer Composer Unit Tests

Responsibilities:
  - Verificar estructura del prompt y alineación Source N <-> [N] <-> cita
  - Validar fórmulas de tokens, latencia y costo
  - Validar snippet de cita (220 unidades UTF-16 + "...")
"""

import pytest

from rag_sandbox.application.answer_composer import (
    ANSWER_FOOTER,
    ANSWER_HEADER,
    AnswerComposer,
    build_system_prompt,
    generate_grounded_answer,
)
from rag_sandbox.application.retrieval import simulate_retrieval
from rag_sandbox.domain.entities import Chunk, RetrievalResult, RetrieverMode
from rag_sandbox.infrastructure.text.chunker import build_chunk_index
from rag_sandbox.infrastructure.text.tokenizer import estimate_token_count

pytestmark = pytest.mark.unit


@pytest.fixture
def tiny_results(tiny_dataset):
    """R: sso chunk primero, greek segundo (modo keyword)."""
    chunks = build_chunk_index(tiny_dataset, 100)
    return simulate_retrieval("sso", chunks, 2, RetrieverMode.KEYWORD)


def _result_for_text(text: str) -> RetrievalResult:
    chunk = Chunk(
        id="doc-long-chunk-1",
        doc_id="doc-long",
        doc_title="Long",
        text=text,
        embedding=[0.0] * 7,
    )
    return RetrievalResult(
        chunk=chunk,
        similarity=0.0,
        semantic_score=0.5,
        keyword_score=0.0,
        hybrid_score=0.325,
        score=0.325,
    )


class TestPrompt:

    def test_prompt_layout(self, tiny_dataset, tiny_results):
        answer = generate_grounded_answer("sso", tiny_results, tiny_dataset)

        assert answer.prompt.startswith(build_system_prompt(tiny_dataset))
        assert "Tiny Handbook" in answer.prompt
        assert (
            "Source 1 - SSO Notes (updated 2025-02-02)\n"
            "Reset the sso connector. Then rotate the signing secret."
        ) in answer.prompt
        assert "Source 2 - Greek Letters (updated 2025-01-01)" in answer.prompt
        assert answer.prompt.endswith("\n\nQuestion: sso\nAnswer:")

    def test_prompt_parts(self, tiny_dataset, tiny_results):
        parts = generate_grounded_answer("sso", tiny_results, tiny_dataset).prompt_parts

        assert parts.user_query == "sso"
        assert [s.index for s in parts.context_sections] == [1, 2]
        assert [s.doc_title for s in parts.context_sections] == [
            "SSO Notes",
            "Greek Letters",
        ]


class TestAnswerText:

    def test_one_line_per_source_with_citation_marker(self, tiny_dataset, tiny_results):
        answer = generate_grounded_answer("sso", tiny_results, tiny_dataset).answer

        assert answer.startswith(ANSWER_HEADER + "\n")
        assert answer.endswith("\n\n" + ANSWER_FOOTER)
        assert (
            "- SSO Notes: Reset the sso connector. Then rotate the signing secret. [1]"
            in answer
        )
        assert "- Greek Letters: alpha beta gamma delta epsilon. [2]" in answer

    def test_only_first_two_sentences(self, tiny_dataset):
        result = _result_for_text("One. Two. Three. Four.")
        answer = generate_grounded_answer("q", [result], tiny_dataset).answer
        assert "- Long: One. Two. [1]" in answer

    def test_citations_aligned(self, tiny_dataset, tiny_results):
        citations = generate_grounded_answer("sso", tiny_results, tiny_dataset).citations

        assert [c.label for c in citations] == ["Source 1", "Source 2"]
        assert [c.chunk_id for c in citations] == [
            r.chunk.id for r in tiny_results
        ]
        assert citations[0].doc_id == "doc-sso"
        assert citations[0].title == "SSO Notes"


class TestEstimates:

    def test_formulas(self, tiny_dataset, tiny_results):
        answer = generate_grounded_answer("sso", tiny_results, tiny_dataset)

        assert answer.prompt_tokens == estimate_token_count(answer.prompt)
        # Prompt chico: el mínimo de 120 tokens de respuesta domina.
        assert answer.response_tokens == 120
        total = answer.prompt_tokens + answer.response_tokens
        assert answer.estimated_latency_ms == 1200 + total * 3
        assert answer.estimated_cost_usd == pytest.approx(total / 1000 * 0.00095)

    def test_large_prompt_scales_response_tokens(self, tiny_dataset):
        result = _result_for_text(" ".join(["word"] * 1000))
        answer = generate_grounded_answer("q", [result], tiny_dataset)

        assert answer.response_tokens > 120
        assert answer.response_tokens == int(answer.prompt_tokens * 0.35 + 0.5)

    def test_no_sources_still_answers(self, tiny_dataset):
        answer = generate_grounded_answer("anything", [], tiny_dataset)

        assert answer.citations == []
        assert "Context:\n\n\nQuestion: anything" in answer.prompt
        assert answer.response_tokens == 120


class TestCitationSnippet:

    def test_short_text_not_truncated(self, tiny_dataset):
        text = "x" * 220
        citation = generate_grounded_answer(
            "q", [_result_for_text(text)], tiny_dataset
        ).citations[0]
        assert citation.snippet == text

    def test_long_text_truncated_with_ellipsis(self, tiny_dataset):
        text = "y" * 300
        citation = generate_grounded_answer(
            "q", [_result_for_text(text)], tiny_dataset
        ).citations[0]
        assert citation.snippet == "y" * 220 + "..."

    def test_limit_counts_utf16_units(self, tiny_dataset):
        # Cada emoji ocupa dos unidades: 220 emoji = 440 unidades.
        text = "😀" * 220
        citation = generate_grounded_answer(
            "q", [_result_for_text(text)], tiny_dataset
        ).citations[0]
        assert citation.snippet == "😀" * 110 + "..."

    def test_split_surrogate_pair_is_dropped(self, tiny_dataset):
        text = "x" + "😀" * 110
        citation = generate_grounded_answer(
            "q", [_result_for_text(text)], tiny_dataset
        ).citations[0]
        assert citation.snippet == "x" + "😀" * 109 + "..."


class TestAnswerComposer:

    def test_compose_equals_pure_function(self, tiny_dataset, tiny_results):
        composer = AnswerComposer()
        assert composer.compose("sso", tiny_results, tiny_dataset) == (
            generate_grounded_answer("sso", tiny_results, tiny_dataset)
        )
        assert composer.model_id == "grounded-template-v1"
