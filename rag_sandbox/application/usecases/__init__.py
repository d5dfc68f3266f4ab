"""
Use Cases Layer (Sandbox Operations)

Entry points del sandbox RAG:

    from rag_sandbox.application.usecases import RunPipelineUseCase, RunPipelineInput
"""

from .build_chunk_index import BuildChunkIndexUseCase, validate_chunk_size
from .get_dataset import GetDatasetUseCase
from .list_datasets import ListDatasetsUseCase
from .pipeline_results import (
    BuildChunkIndexResult,
    GetDatasetResult,
    ListDatasetsResult,
    PipelineError,
    PipelineErrorCode,
    PipelineStageTrace,
    RunPipelineResult,
)
from .run_pipeline import RunPipelineInput, RunPipelineUseCase

__all__ = [
    # Datasets
    "ListDatasetsUseCase",
    "GetDatasetUseCase",
    "BuildChunkIndexUseCase",
    "validate_chunk_size",
    # Pipeline
    "RunPipelineUseCase",
    "RunPipelineInput",
    # Results / errors
    "ListDatasetsResult",
    "GetDatasetResult",
    "BuildChunkIndexResult",
    "RunPipelineResult",
    "PipelineStageTrace",
    "PipelineError",
    "PipelineErrorCode",
]
