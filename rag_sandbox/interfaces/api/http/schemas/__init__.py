"""Schemas HTTP (pydantic) por feature."""

from .datasets import (
    ChunkIndexRes,
    ChunkRes,
    DatasetDetailRes,
    DatasetItem,
    DatasetsListRes,
    DatasetStatsRes,
    DocumentRes,
    TagCount,
)
from .pipeline import (
    AnswerRes,
    AskRes,
    CitationRes,
    ContextSectionRes,
    HighlightRes,
    ModeLabelRes,
    PipelineCatalogRes,
    PipelineReq,
    PipelineStepRes,
    PromptPartsRes,
    RetrievalResultRes,
    RetrieveRes,
    StageRes,
)

__all__ = [
    # Datasets
    "DatasetItem",
    "DatasetsListRes",
    "DatasetDetailRes",
    "DatasetStatsRes",
    "DocumentRes",
    "TagCount",
    "ChunkRes",
    "ChunkIndexRes",
    # Pipeline
    "PipelineReq",
    "HighlightRes",
    "RetrievalResultRes",
    "RetrieveRes",
    "CitationRes",
    "ContextSectionRes",
    "PromptPartsRes",
    "AnswerRes",
    "StageRes",
    "AskRes",
    "PipelineStepRes",
    "ModeLabelRes",
    "PipelineCatalogRes",
]
