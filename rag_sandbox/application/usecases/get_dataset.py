"""
===============================================================================
USE CASE: Get Dataset (Dataset + Summary)
===============================================================================

Business Goal:
    Recuperar un dataset por id junto con sus estadísticas (documentos,
    palabras, tags más usados) para la tarjeta de la UI.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    GetDatasetUseCase

Responsibilities:
    - Lookup del dataset en el repositorio.
    - Calcular DatasetSummary.
    - Devolver NOT_FOUND tipado si el id no existe.

Collaborators:
    - DatasetRepository.get_dataset
    - dataset_insights.summarize_dataset
===============================================================================
"""

from __future__ import annotations

from typing import Final

from ...domain.repositories import DatasetRepository
from ..dataset_insights import summarize_dataset
from .pipeline_results import GetDatasetResult, PipelineError, PipelineErrorCode

RESOURCE_DATASET: Final[str] = "Dataset"


def dataset_not_found(dataset_id: str) -> PipelineError:
    """R: Error único para dataset inexistente (compartido entre use cases)."""
    return PipelineError(
        code=PipelineErrorCode.NOT_FOUND,
        message=f"Dataset '{dataset_id}' not found.",
        resource=RESOURCE_DATASET,
    )


class GetDatasetUseCase:
    def __init__(self, dataset_repository: DatasetRepository) -> None:
        self._datasets = dataset_repository

    def execute(self, dataset_id: str) -> GetDatasetResult:
        dataset = self._datasets.get_dataset(dataset_id)
        if dataset is None:
            return GetDatasetResult(error=dataset_not_found(dataset_id))

        return GetDatasetResult(dataset=dataset, summary=summarize_dataset(dataset))
