"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/dataset.py
============================================================
Class: InMemoryDatasetRepository

Responsibilities:
  - Registrar datasets en memoria (seed estático / tests).
  - Validar integridad al construir:
      - ids de dataset únicos
      - ids de documento únicos dentro de cada dataset
      - datasets con al menos un documento
  - Lookup por id y listado en orden de registro.

Collaborators:
  - domain.entities.Dataset
  - domain.repositories.DatasetRepository (contrato a implementar)
  - crosscutting.exceptions.SeedDataError

Constraints / Notes:
  - Read-only después del __init__: sin lock, no hay escrituras concurrentes.
  - Datasets son frozen: se devuelven tal cual (sin copias).
============================================================
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ....crosscutting.exceptions import SeedDataError
from ....crosscutting.logger import logger
from ....domain.entities import Dataset
from ....domain.repositories import DatasetRepository
from .sample_datasets import SAMPLE_DATASETS


class InMemoryDatasetRepository(DatasetRepository):
    """
    Registro in-memory de datasets.

    Modelo mental:
    - _datasets es la "tabla" (id -> Dataset); dict preserva orden de inserción.
    """

    def __init__(self, datasets: Iterable[Dataset] | None = None) -> None:
        self._datasets: Dict[str, Dataset] = {}
        for dataset in SAMPLE_DATASETS if datasets is None else datasets:
            self._register(dataset)

        logger.debug(
            "Dataset registry loaded",
            extra={"datasets": list(self._datasets)},
        )

    # =========================================================
    # Helpers internos (invariantes del seed)
    # =========================================================
    def _register(self, dataset: Dataset) -> None:
        if dataset.id in self._datasets:
            raise SeedDataError(f"Dataset duplicado: '{dataset.id}'")
        if not dataset.documents:
            raise SeedDataError(f"Dataset '{dataset.id}' sin documentos")

        doc_ids = [document.id for document in dataset.documents]
        if len(set(doc_ids)) != len(doc_ids):
            raise SeedDataError(
                f"Dataset '{dataset.id}' tiene ids de documento duplicados"
            )

        self._datasets[dataset.id] = dataset

    # =========================================================
    # Lecturas
    # =========================================================
    def get_dataset(self, dataset_id: str) -> Optional[Dataset]:
        return self._datasets.get(dataset_id)

    def list_datasets(self) -> List[Dataset]:
        return list(self._datasets.values())
