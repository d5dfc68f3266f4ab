"""
===============================================================================
TARJETA CRC — application/dataset_insights.py
===============================================================================

Módulo:
    Resumen de datasets + resaltado de términos de la query

Responsabilidades:
    - summarize_dataset: cantidad de documentos, palabras y tags más usados.
    - highlight_terms: segmentar un texto marcando las palabras que aparecen
      en la query (términos alfanuméricos de 4+ caracteres).

Colaboradores:
    - domain.entities.Dataset
    - interfaces/api/http (schemas de dataset y de resultados)

Principios:
    - Funciones puras, sin IO.
    - Los segmentos concatenados reconstruyen el texto original exacto.
===============================================================================
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Final, List, Tuple

from ..domain.entities import Dataset
from ..infrastructure.text.tokenizer import count_words

POPULAR_TAGS_LIMIT: Final[int] = 4

_QUERY_TERM_RE: Final[re.Pattern[str]] = re.compile(r"[a-z0-9]{4,}")
_WHITESPACE_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"(\s+)")
_NON_ALNUM_RE: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9]")


@dataclass(frozen=True)
class DatasetSummary:
    document_count: int
    word_count: int
    popular_tags: List[Tuple[str, int]] = field(default_factory=list)


@dataclass(frozen=True)
class HighlightSegment:
    text: str
    highlighted: bool = False


def summarize_dataset(dataset: Dataset) -> DatasetSummary:
    """
    Estadísticas para la tarjeta del dataset.

    popular_tags: top 4 por frecuencia; empates por primera aparición.
    """
    word_count = sum(count_words(document.content) for document in dataset.documents)
    tag_counts = Counter(tag for document in dataset.documents for tag in document.tags)

    return DatasetSummary(
        document_count=len(dataset.documents),
        word_count=word_count,
        popular_tags=sorted(
            tag_counts.items(), key=lambda item: item[1], reverse=True
        )[:POPULAR_TAGS_LIMIT],
    )


def query_terms(query: str) -> set[str]:
    """Términos resaltables: corridas [a-z0-9] de 4+ caracteres (en minúscula)."""
    return set(_QUERY_TERM_RE.findall((query or "").lower()))


def highlight_terms(text: str, query: str) -> List[HighlightSegment]:
    """
    Segmenta `text` preservando whitespace y marca las palabras de la query.

    Ej: ("Rotate API credentials", "rotate creds")
        -> [Rotate*, " ", API, " ", credentials]
    """
    terms = query_terms(query)
    if not terms:
        return [HighlightSegment(text=text)]

    segments: List[HighlightSegment] = []
    for segment in _WHITESPACE_SPLIT_RE.split(text):
        if not segment:
            continue
        cleaned = _NON_ALNUM_RE.sub("", segment.lower())
        segments.append(HighlightSegment(text=segment, highlighted=cleaned in terms))
    return segments
