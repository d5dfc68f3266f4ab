"""
===============================================================================
USE CASE: Build Chunk Index
===============================================================================

Business Goal:
    Mostrar cómo queda partido un dataset para un chunk_size dado
    (paso "Ingest & Chunk" + "Embed & Store" del pipeline).

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    BuildChunkIndexUseCase

Responsibilities:
    - Validar chunk_size (1..max_chunk_size).
    - Resolver el dataset (NOT_FOUND tipado).
    - Construir el índice con el TextChunkerService inyectado.

Collaborators:
    - DatasetRepository
    - TextChunkerService (WordWindowChunker)
===============================================================================
"""

from __future__ import annotations

from typing import Final

from ...domain.repositories import DatasetRepository
from ...domain.services import TextChunkerService
from .get_dataset import dataset_not_found
from .pipeline_results import BuildChunkIndexResult, PipelineError, PipelineErrorCode

RESOURCE_CHUNK_SIZE: Final[str] = "chunk_size"


def validate_chunk_size(chunk_size: int, max_chunk_size: int) -> PipelineError | None:
    """R: chunk_size debe estar en [1, max_chunk_size]."""
    if 1 <= chunk_size <= max_chunk_size:
        return None
    return PipelineError(
        code=PipelineErrorCode.VALIDATION_ERROR,
        message=f"chunk_size must be between 1 and {max_chunk_size}",
        resource=RESOURCE_CHUNK_SIZE,
    )


class BuildChunkIndexUseCase:
    def __init__(
        self,
        dataset_repository: DatasetRepository,
        chunker: TextChunkerService,
        max_chunk_size: int,
    ) -> None:
        self._datasets = dataset_repository
        self._chunker = chunker
        self._max_chunk_size = max_chunk_size

    def execute(self, dataset_id: str, chunk_size: int) -> BuildChunkIndexResult:
        error = validate_chunk_size(chunk_size, self._max_chunk_size)
        if error is not None:
            return BuildChunkIndexResult(error=error)

        dataset = self._datasets.get_dataset(dataset_id)
        if dataset is None:
            return BuildChunkIndexResult(error=dataset_not_found(dataset_id))

        return BuildChunkIndexResult(
            dataset=dataset,
            chunk_size=chunk_size,
            chunks=self._chunker.build_chunk_index(dataset, chunk_size),
        )
