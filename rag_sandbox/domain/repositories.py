"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define the dataset registry contract: keyed lookup from dataset id to Dataset.
- Keep application code independent from where the corpus lives (seed, files, DB).

Collaborators
- domain.entities: Dataset
- infrastructure.repositories.in_memory: InMemoryDatasetRepository

Constraints
- Pure interfaces only: no side effects, no infrastructure imports.
"""

from typing import List, Optional, Protocol

from .entities import Dataset


class DatasetRepository(Protocol):
    """
    R: Read-only registry of datasets.

    Implementations must provide:
      - Lookup by id (None when unknown)
      - Deterministic listing order
    """

    def get_dataset(self, dataset_id: str) -> Optional[Dataset]:
        """R: Return the dataset or None if the id is unknown."""
        ...

    def list_datasets(self) -> List[Dataset]:
        """R: Return every dataset in registration order."""
        ...
