"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures (datasets, chunks, services)
  - Configure test environment (no .env file, APP_ENV=test)

Collaborators:
  - pytest: Test framework
  - rag_sandbox.domain: Domain entities
  - rag_sandbox.infrastructure: seed corpus, embedder, chunker

Notes:
  - Fixtures are auto-discovered by pytest
  - Everything is in-memory and deterministic: no mocks needed for IO
"""

import os
import sys
from pathlib import Path
from typing import List

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")

from rag_sandbox.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from rag_sandbox.domain.entities import Chunk, Dataset, SourceDocument  # noqa: E402
from rag_sandbox.infrastructure.repositories.in_memory import (  # noqa: E402
    SECURITY_BLUEPRINTS,
    SUPPORT_PLAYBOOK,
    InMemoryDatasetRepository,
)
from rag_sandbox.infrastructure.services import KeywordEmbeddingService  # noqa: E402
from rag_sandbox.infrastructure.text.chunker import build_chunk_index  # noqa: E402


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def greek_document() -> SourceDocument:
    """R: Five-word document used for window boundary checks."""
    return SourceDocument(
        id="doc-greek",
        title="Greek Letters",
        content="alpha beta gamma delta epsilon",
        tags=("letters",),
        last_updated="2025-01-01",
    )


@pytest.fixture
def tiny_dataset(greek_document: SourceDocument) -> Dataset:
    """R: Small hand-built dataset with one SSO document and one unrelated."""
    return Dataset(
        id="tiny",
        name="Tiny Handbook",
        description="Two documents for focused tests.",
        documents=(
            SourceDocument(
                id="doc-sso",
                title="SSO Notes",
                content="Reset the sso connector. Then rotate the signing secret.",
                tags=("sso",),
                last_updated="2025-02-02",
            ),
            greek_document,
        ),
    )


@pytest.fixture
def support_dataset() -> Dataset:
    return SUPPORT_PLAYBOOK


@pytest.fixture
def security_dataset() -> Dataset:
    return SECURITY_BLUEPRINTS


@pytest.fixture
def support_chunks(support_dataset: Dataset) -> List[Chunk]:
    """R: Support playbook chunked with the UI default (90 words)."""
    return build_chunk_index(support_dataset, 90)


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def embedding_service() -> KeywordEmbeddingService:
    return KeywordEmbeddingService()


@pytest.fixture
def dataset_repository() -> InMemoryDatasetRepository:
    return InMemoryDatasetRepository()
