"""
Name: Answer Composer (Grounded Answer Simulator)

Qué es
------
Arma el prompt "grounded" que recibiría un LLM (system + fuentes numeradas +
pregunta) y fabrica una respuesta determinista a partir de los chunks
seleccionados, con citas [N] alineadas a "Source N".

Arquitectura
------------
- Capa: Application (assembler; no hay modelo real detrás)
- Rol: que la UI muestre prompt, tokens, latencia, costo y citas plausibles

CRC (Class-Responsibility-Collaboration)
----------------------------------------
Class: AnswerComposer (+ generate_grounded_answer, función pura)
Responsibilities:
  - Construir system prompt y bloques "Source N - {título} (updated {fecha})"
  - Estimar tokens de prompt/respuesta, latencia y costo
  - Redactar la respuesta con un bullet por fuente y citar cada chunk
Collaborators:
  - domain.entities (RetrievalResult, Dataset, GeneratedAnswer, Citation)
  - infrastructure/text/tokenizer.py (estimate_token_count)
Constraints:
  - Sin IO; mismas entradas -> misma salida
  - Alineación 1:1: resultado i <-> "Source i" <-> [i] <-> citations[i-1]
"""

from __future__ import annotations

from typing import Final, List, Sequence

from ..crosscutting.logger import logger
from ..domain.entities import (
    Citation,
    ContextSection,
    Dataset,
    GeneratedAnswer,
    PromptParts,
    RetrievalResult,
)
from ..infrastructure.text.tokenizer import (
    estimate_token_count,
    round_half_up,
    truncate_utf16,
    utf16_length,
)

# R: Constantes del "modelo" simulado.
MIN_RESPONSE_TOKENS: Final[int] = 120
RESPONSE_TOKEN_RATIO: Final[float] = 0.35
BASE_LATENCY_MS: Final[int] = 1200
LATENCY_MS_PER_TOKEN: Final[int] = 3
COST_PER_1K_TOKENS_USD: Final[float] = 0.00095

# R: Medido en unidades UTF-16 (un emoji cuenta doble).
CITATION_SNIPPET_CHARS: Final[int] = 220

ANSWER_HEADER: Final[str] = "Here is what the knowledge base confirms:"
ANSWER_FOOTER: Final[str] = (
    "Next best step: combine these grounded snippets into your runbook or "
    "response, keeping citations like [1] so stakeholders can audit the source "
    "quickly."
)


def build_system_prompt(dataset: Dataset) -> str:
    return (
        "You are an expert assistant helping a team understand their "
        f"{dataset.name}. Use only the provided context. Cite the source number "
        "in brackets when you reference information."
    )


def _source_block(result: RetrievalResult, index: int) -> str:
    chunk = result.chunk
    return (
        f"Source {index} - {chunk.doc_title} (updated {chunk.last_updated})\n"
        f"{chunk.text}"
    )


def _answer_line(result: RetrievalResult, index: int) -> str:
    """R: "- {título}: {primeras dos oraciones}. [i]" (punto final garantizado)."""
    snippet = ".".join(result.chunk.text.split(".")[:2]).strip()
    terminator = "" if snippet.endswith(".") else "."
    return f"- {result.chunk.doc_title}: {snippet}{terminator} [{index}]"


def _citation(result: RetrievalResult, index: int) -> Citation:
    text = result.chunk.text
    snippet = truncate_utf16(text, CITATION_SNIPPET_CHARS)
    if utf16_length(text) > CITATION_SNIPPET_CHARS:
        snippet += "..."
    return Citation(
        title=result.chunk.doc_title,
        chunk_id=result.chunk.id,
        doc_id=result.chunk.doc_id,
        snippet=snippet,
        label=f"Source {index}",
    )


def generate_grounded_answer(
    query: str,
    selected_chunks: Sequence[RetrievalResult],
    dataset: Dataset,
) -> GeneratedAnswer:
    """
    Respuesta grounded para `query` usando `selected_chunks` como contexto.

    Nota:
      - Sin chunks igual se arma prompt y respuesta (sección de contexto vacía).
    """
    system_prompt = build_system_prompt(dataset)

    sections: List[ContextSection] = [
        ContextSection(
            text=_source_block(result, index),
            doc_title=result.chunk.doc_title,
            index=index,
        )
        for index, result in enumerate(selected_chunks, start=1)
    ]
    context = "\n\n".join(section.text for section in sections)

    prompt = (
        f"{system_prompt}\n\nContext:\n{context}\n\nQuestion: {query}\nAnswer:"
    )

    prompt_tokens = estimate_token_count(prompt)
    response_tokens = max(
        MIN_RESPONSE_TOKENS, round_half_up(prompt_tokens * RESPONSE_TOKEN_RATIO)
    )
    total_tokens = prompt_tokens + response_tokens

    lines = [
        _answer_line(result, index)
        for index, result in enumerate(selected_chunks, start=1)
    ]
    answer = f"{ANSWER_HEADER}\n" + "\n".join(lines) + f"\n\n{ANSWER_FOOTER}"

    return GeneratedAnswer(
        prompt=prompt,
        prompt_tokens=prompt_tokens,
        response_tokens=response_tokens,
        estimated_latency_ms=BASE_LATENCY_MS + total_tokens * LATENCY_MS_PER_TOKEN,
        estimated_cost_usd=total_tokens / 1000 * COST_PER_1K_TOKENS_USD,
        answer=answer,
        citations=[
            _citation(result, index)
            for index, result in enumerate(selected_chunks, start=1)
        ],
        prompt_parts=PromptParts(
            system_prompt=system_prompt,
            context_sections=sections,
            user_query=query,
        ),
    )


class AnswerComposer:
    """
    R: Fachada con logging sobre generate_grounded_answer.

    Expone `model_id` para que la respuesta HTTP informe qué "modelo" respondió.
    """

    MODEL_ID = "grounded-template-v1"

    def compose(
        self,
        query: str,
        selected_chunks: Sequence[RetrievalResult],
        dataset: Dataset,
    ) -> GeneratedAnswer:
        answer = generate_grounded_answer(query, selected_chunks, dataset)
        logger.debug(
            "Grounded answer composed",
            extra={
                "dataset_id": dataset.id,
                "sources": len(selected_chunks),
                "prompt_tokens": answer.prompt_tokens,
                "response_tokens": answer.response_tokens,
            },
        )
        return answer

    @property
    def model_id(self) -> str:
        return self.MODEL_ID
