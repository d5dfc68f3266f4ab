"""
===============================================================================
TARJETA CRC — rag_sandbox/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (repositorio, embedder, chunker, retrieval, composer).
  - Exponer factories para FastAPI (Depends).
  - Mantener singletons con caching (lru_cache).
  - Tomar límites (chunk_size, top_k, query) desde Settings.

Colaboradores:
  - crosscutting.config.get_settings
  - domain.repositories / domain.services (puertos)
  - infrastructure.* (implementaciones)
  - application.usecases.* (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - Este archivo NO depende de FastAPI (solo expone factories).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application import AnswerComposer, RetrievalService
from .application.usecases import (
    BuildChunkIndexUseCase,
    GetDatasetUseCase,
    ListDatasetsUseCase,
    RunPipelineUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import DatasetRepository
from .domain.services import EmbeddingService, TextChunkerService
from .infrastructure.repositories import InMemoryDatasetRepository
from .infrastructure.services import KeywordEmbeddingService
from .infrastructure.text.chunker import WordWindowChunker

# =============================================================================
# Infra singletons
# =============================================================================


@lru_cache(maxsize=1)
def get_dataset_repository() -> DatasetRepository:
    return InMemoryDatasetRepository()


@lru_cache(maxsize=1)
def get_embedding_service() -> EmbeddingService:
    return KeywordEmbeddingService()


@lru_cache(maxsize=1)
def get_text_chunker() -> TextChunkerService:
    return WordWindowChunker(get_embedding_service())


@lru_cache(maxsize=1)
def get_retrieval_service() -> RetrievalService:
    return RetrievalService(get_embedding_service())


@lru_cache(maxsize=1)
def get_answer_composer() -> AnswerComposer:
    return AnswerComposer()


# =============================================================================
# Use cases (baratos: se crean por request)
# =============================================================================


def get_list_datasets_use_case() -> ListDatasetsUseCase:
    return ListDatasetsUseCase(get_dataset_repository())


def get_get_dataset_use_case() -> GetDatasetUseCase:
    return GetDatasetUseCase(get_dataset_repository())


def get_build_chunk_index_use_case() -> BuildChunkIndexUseCase:
    return BuildChunkIndexUseCase(
        get_dataset_repository(),
        get_text_chunker(),
        max_chunk_size=get_settings().max_chunk_size,
    )


def get_run_pipeline_use_case() -> RunPipelineUseCase:
    settings = get_settings()
    return RunPipelineUseCase(
        get_dataset_repository(),
        get_text_chunker(),
        get_retrieval_service(),
        get_answer_composer(),
        max_chunk_size=settings.max_chunk_size,
        max_top_k=settings.max_top_k,
        max_query_chars=settings.max_query_chars,
    )
