"""
===============================================================================
TARJETA CRC — schemas/datasets.py
===============================================================================

Módulo:
    Schemas HTTP para Datasets y Chunk Index

Responsabilidades:
    - DTOs de respuesta para listado/detalle de datasets.
    - DTOs del índice de chunks (chunk + embedding).

Colaboradores:
    - routers/datasets.py
===============================================================================
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DatasetItem(BaseModel):
    """Dataset en listados (sin contenido de documentos)."""

    id: str
    name: str
    description: str
    color: str
    sample_queries: list[str]
    document_count: int


class DatasetsListRes(BaseModel):
    datasets: list[DatasetItem]
    default_dataset_id: str


class DocumentRes(BaseModel):
    id: str
    title: str
    content: str
    tags: list[str]
    last_updated: str
    word_count: int


class TagCount(BaseModel):
    tag: str
    count: int


class DatasetStatsRes(BaseModel):
    document_count: int
    word_count: int
    popular_tags: list[TagCount]


class DatasetDetailRes(DatasetItem):
    documents: list[DocumentRes]
    stats: DatasetStatsRes


class ChunkRes(BaseModel):
    id: str
    doc_id: str
    doc_title: str
    text: str
    tags: list[str]
    last_updated: str
    keywords: list[str]
    word_count: int
    embedding: list[float] = Field(default_factory=list)


class ChunkIndexRes(BaseModel):
    dataset_id: str
    chunk_size: int
    total_chunks: int
    chunks: list[ChunkRes]
