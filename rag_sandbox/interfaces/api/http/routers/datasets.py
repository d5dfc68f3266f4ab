"""
===============================================================================
TARJETA CRC — rag_sandbox/interfaces/api/http/routers/datasets.py
===============================================================================

Name:
    Datasets Router

Responsibilities:
    - Listado y detalle de datasets (con estadísticas).
    - Índice de chunks de un dataset para un chunk_size dado.
    - Traducción de PipelineError -> RFC7807.

Collaborators:
    - application.usecases: ListDatasetsUseCase, GetDatasetUseCase,
      BuildChunkIndexUseCase
    - schemas.datasets
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from rag_sandbox.application import DatasetSummary
from rag_sandbox.application.usecases import (
    BuildChunkIndexUseCase,
    GetDatasetUseCase,
    ListDatasetsUseCase,
)
from rag_sandbox.container import (
    get_build_chunk_index_use_case,
    get_get_dataset_use_case,
    get_list_datasets_use_case,
)
from rag_sandbox.crosscutting.config import get_settings
from rag_sandbox.crosscutting.error_responses import internal_error
from rag_sandbox.domain.entities import Chunk, Dataset
from rag_sandbox.infrastructure.text.tokenizer import count_words

from ..error_mapping import raise_pipeline_error
from ..schemas.datasets import (
    ChunkIndexRes,
    ChunkRes,
    DatasetDetailRes,
    DatasetItem,
    DatasetsListRes,
    DatasetStatsRes,
    DocumentRes,
    TagCount,
)

router = APIRouter()
_settings = get_settings()


# =============================================================================
# Helpers (entidad -> schema)
# =============================================================================


def to_dataset_item(dataset: Dataset) -> DatasetItem:
    return DatasetItem(
        id=dataset.id,
        name=dataset.name,
        description=dataset.description,
        color=dataset.color,
        sample_queries=list(dataset.sample_queries),
        document_count=len(dataset.documents),
    )


def to_chunk_res(chunk: Chunk) -> ChunkRes:
    return ChunkRes(
        id=chunk.id,
        doc_id=chunk.doc_id,
        doc_title=chunk.doc_title,
        text=chunk.text,
        tags=list(chunk.tags),
        last_updated=chunk.last_updated,
        keywords=list(chunk.keywords),
        word_count=chunk.word_count,
        embedding=list(chunk.embedding),
    )


def _to_dataset_detail(dataset: Dataset, summary: DatasetSummary) -> DatasetDetailRes:
    item = to_dataset_item(dataset)
    return DatasetDetailRes(
        **item.model_dump(),
        documents=[
            DocumentRes(
                id=doc.id,
                title=doc.title,
                content=doc.content,
                tags=list(doc.tags),
                last_updated=doc.last_updated,
                word_count=count_words(doc.content),
            )
            for doc in dataset.documents
        ],
        stats=DatasetStatsRes(
            document_count=summary.document_count,
            word_count=summary.word_count,
            popular_tags=[
                TagCount(tag=tag, count=count) for tag, count in summary.popular_tags
            ],
        ),
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/datasets", response_model=DatasetsListRes, tags=["datasets"])
def list_datasets(
    use_case: ListDatasetsUseCase = Depends(get_list_datasets_use_case),
):
    result = use_case.execute()
    return DatasetsListRes(
        datasets=[to_dataset_item(d) for d in result.datasets],
        default_dataset_id=_settings.default_dataset_id,
    )


@router.get(
    "/datasets/{dataset_id}", response_model=DatasetDetailRes, tags=["datasets"]
)
def get_dataset(
    dataset_id: str,
    use_case: GetDatasetUseCase = Depends(get_get_dataset_use_case),
):
    result = use_case.execute(dataset_id)
    if result.error is not None:
        raise_pipeline_error(result.error, dataset_id=dataset_id)
    if result.dataset is None or result.summary is None:
        raise internal_error("Dataset sin datos")

    return _to_dataset_detail(result.dataset, result.summary)


@router.get(
    "/datasets/{dataset_id}/chunks",
    response_model=ChunkIndexRes,
    tags=["datasets"],
)
def get_chunk_index(
    dataset_id: str,
    chunk_size: int = Query(
        default=_settings.default_chunk_size, ge=1, le=_settings.max_chunk_size
    ),
    use_case: BuildChunkIndexUseCase = Depends(get_build_chunk_index_use_case),
):
    result = use_case.execute(dataset_id, chunk_size)
    if result.error is not None:
        raise_pipeline_error(result.error, dataset_id=dataset_id)

    return ChunkIndexRes(
        dataset_id=dataset_id,
        chunk_size=result.chunk_size,
        total_chunks=len(result.chunks),
        chunks=[to_chunk_res(chunk) for chunk in result.chunks],
    )
