"""
===============================================================================
TARJETA CRC — rag_sandbox/interfaces/api/http/routers/pipeline.py
===============================================================================

Name:
    Pipeline Router

Responsibilities:
    - Retrieve: ranking de chunks (con resaltado de términos de la query).
    - Ask: corrida completa (ranking + respuesta grounded + etapas + tiempos).
    - Catálogo estático del pipeline (narrativa, etapas, modos).
    - Traducción de PipelineError -> RFC7807.

Collaborators:
    - application.usecases: RunPipelineUseCase
    - application: highlight_terms, NARRATIVE_STEPS, SANDBOX_STAGES, MODE_LABELS
    - schemas.pipeline
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from rag_sandbox.application import (
    MODE_LABELS,
    NARRATIVE_STEPS,
    SANDBOX_STAGES,
    highlight_terms,
)
from rag_sandbox.application.usecases import (
    RunPipelineInput,
    RunPipelineResult,
    RunPipelineUseCase,
)
from rag_sandbox.container import get_run_pipeline_use_case
from rag_sandbox.crosscutting.error_responses import internal_error
from rag_sandbox.domain.entities import (
    GeneratedAnswer,
    PipelineStep,
    RetrievalResult,
)

from ..error_mapping import raise_pipeline_error
from ..schemas.pipeline import (
    AnswerRes,
    AskRes,
    CitationRes,
    ContextSectionRes,
    HighlightRes,
    ModeLabelRes,
    PipelineCatalogRes,
    PipelineReq,
    PipelineStepRes,
    PromptPartsRes,
    RetrievalResultRes,
    RetrieveRes,
    StageRes,
)
from .datasets import to_chunk_res

router = APIRouter()


# =============================================================================
# Helpers (entidad -> schema)
# =============================================================================


def _to_result_res(result: RetrievalResult, query: str) -> RetrievalResultRes:
    return RetrievalResultRes(
        chunk=to_chunk_res(result.chunk),
        similarity=result.similarity,
        semantic_score=result.semantic_score,
        keyword_score=result.keyword_score,
        hybrid_score=result.hybrid_score,
        score=result.score,
        reasons=list(result.reasons),
        estimated_tokens=result.estimated_tokens,
        highlights=[
            HighlightRes(text=segment.text, highlighted=segment.highlighted)
            for segment in highlight_terms(result.chunk.text, query)
        ],
    )


def _to_answer_res(answer: GeneratedAnswer) -> AnswerRes:
    parts = answer.prompt_parts
    return AnswerRes(
        prompt=answer.prompt,
        prompt_parts=(
            PromptPartsRes(
                system_prompt=parts.system_prompt,
                context_sections=[
                    ContextSectionRes(
                        text=section.text,
                        doc_title=section.doc_title,
                        index=section.index,
                    )
                    for section in parts.context_sections
                ],
                user_query=parts.user_query,
            )
            if parts is not None
            else None
        ),
        prompt_tokens=answer.prompt_tokens,
        response_tokens=answer.response_tokens,
        estimated_latency_ms=answer.estimated_latency_ms,
        estimated_cost_usd=answer.estimated_cost_usd,
        answer=answer.answer,
        citations=[
            CitationRes(
                title=citation.title,
                chunk_id=citation.chunk_id,
                doc_id=citation.doc_id,
                snippet=citation.snippet,
                label=citation.label,
            )
            for citation in answer.citations
        ],
    )


def _to_step_res(step: PipelineStep) -> PipelineStepRes:
    return PipelineStepRes(
        id=step.id, label=step.label, title=step.title, description=step.description
    )


def _run(
    dataset_id: str,
    req: PipelineReq,
    use_case: RunPipelineUseCase,
    *,
    compose_answer: bool,
) -> RunPipelineResult:
    result = use_case.execute(
        RunPipelineInput(
            dataset_id=dataset_id,
            query=req.query,
            chunk_size=req.chunk_size,
            top_k=req.top_k,
            mode=req.mode,
            compose_answer=compose_answer,
        )
    )
    if result.error is not None:
        raise_pipeline_error(result.error, dataset_id=dataset_id)
    if result.dataset is None:
        raise internal_error("Pipeline sin dataset")
    return result


def _retrieve_fields(result: RunPipelineResult) -> dict:
    return {
        "dataset_id": result.dataset.id,
        "query": result.query,
        "mode": result.mode,
        "chunk_size": result.chunk_size,
        "top_k": result.top_k,
        "chunks_indexed": result.chunks_indexed,
        "results": [_to_result_res(r, result.query) for r in result.results],
    }


# =============================================================================
# Endpoints
# =============================================================================


@router.post(
    "/datasets/{dataset_id}/retrieve",
    response_model=RetrieveRes,
    tags=["pipeline"],
)
def retrieve(
    dataset_id: str,
    req: PipelineReq,
    use_case: RunPipelineUseCase = Depends(get_run_pipeline_use_case),
):
    result = _run(dataset_id, req, use_case, compose_answer=False)
    return RetrieveRes(**_retrieve_fields(result))


@router.post(
    "/datasets/{dataset_id}/ask",
    response_model=AskRes,
    tags=["pipeline"],
)
def ask(
    dataset_id: str,
    req: PipelineReq,
    use_case: RunPipelineUseCase = Depends(get_run_pipeline_use_case),
):
    result = _run(dataset_id, req, use_case, compose_answer=True)
    return AskRes(
        **_retrieve_fields(result),
        query_embedding=result.query_embedding,
        answer=_to_answer_res(result.answer) if result.answer is not None else None,
        stages=[
            StageRes(
                id=trace.step.id,
                title=trace.step.title,
                description=trace.step.description,
                detail=trace.detail,
            )
            for trace in result.stages
        ],
        timings=result.timings,
    )


@router.get("/pipeline/steps", response_model=PipelineCatalogRes, tags=["pipeline"])
def pipeline_steps():
    return PipelineCatalogRes(
        narrative=[_to_step_res(step) for step in NARRATIVE_STEPS],
        stages=[_to_step_res(step) for step in SANDBOX_STAGES],
        modes=[
            ModeLabelRes(mode=mode, title=label.title, subtitle=label.subtitle)
            for mode, label in MODE_LABELS.items()
        ],
    )
