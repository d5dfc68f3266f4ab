"""
USE CASE: List Datasets

Devuelve los datasets registrados, en orden de registro.
"""

from __future__ import annotations

from ...domain.repositories import DatasetRepository
from .pipeline_results import ListDatasetsResult


class ListDatasetsUseCase:
    def __init__(self, dataset_repository: DatasetRepository) -> None:
        self._datasets = dataset_repository

    def execute(self) -> ListDatasetsResult:
        return ListDatasetsResult(datasets=self._datasets.list_datasets())
