"""
Name: InMemoryDatasetRepository Unit Tests

Responsibilities:
  - Verificar seed por defecto (orden y lookup)
  - Validar invariantes de integridad al registrar datasets
"""

import pytest

from rag_sandbox.crosscutting.exceptions import SeedDataError
from rag_sandbox.domain.entities import Dataset, SourceDocument
from rag_sandbox.infrastructure.repositories.in_memory import (
    SAMPLE_DATASETS,
    InMemoryDatasetRepository,
)

pytestmark = pytest.mark.unit


def _doc(doc_id: str) -> SourceDocument:
    return SourceDocument(id=doc_id, title=doc_id.title(), content="some words")


class TestDefaultSeed:

    def test_lists_sample_datasets_in_order(self, dataset_repository):
        assert [d.id for d in dataset_repository.list_datasets()] == [
            d.id for d in SAMPLE_DATASETS
        ]

    def test_seed_has_two_datasets_with_three_documents(self):
        assert len(SAMPLE_DATASETS) == 2
        for dataset in SAMPLE_DATASETS:
            assert len(dataset.documents) == 3
            assert dataset.sample_queries

    def test_get_dataset_by_id(self, dataset_repository, support_dataset):
        assert dataset_repository.get_dataset(support_dataset.id) is support_dataset

    def test_get_unknown_dataset_returns_none(self, dataset_repository):
        assert dataset_repository.get_dataset("does-not-exist") is None


class TestIntegrity:

    def test_custom_datasets(self, tiny_dataset):
        repo = InMemoryDatasetRepository([tiny_dataset])
        assert repo.list_datasets() == [tiny_dataset]

    def test_empty_registry_is_allowed(self):
        assert InMemoryDatasetRepository([]).list_datasets() == []

    def test_duplicate_dataset_id_raises(self, tiny_dataset):
        with pytest.raises(SeedDataError, match="tiny"):
            InMemoryDatasetRepository([tiny_dataset, tiny_dataset])

    def test_dataset_without_documents_raises(self):
        empty = Dataset(id="empty", name="Empty", description="", documents=())
        with pytest.raises(SeedDataError):
            InMemoryDatasetRepository([empty])

    def test_duplicate_document_ids_raise(self):
        dataset = Dataset(
            id="dup",
            name="Dup",
            description="",
            documents=(_doc("doc-a"), _doc("doc-a")),
        )
        with pytest.raises(SeedDataError) as exc_info:
            InMemoryDatasetRepository([dataset])
        assert exc_info.value.error_code == "SEED_DATA_ERROR"
