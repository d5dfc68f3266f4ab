"""
===============================================================================
APPLICATION LAYER (Public API / Exports)
===============================================================================

Servicios de aplicación compartidos por los casos de uso:
  - scoring / retrieval: ranking simulado (semántico, keywords, híbrido)
  - answer_composer: respuesta grounded con citas
  - dataset_insights: resumen de dataset y resaltado de términos
  - pipeline_steps: catálogo de pasos del pipeline

Nota:
  - Los casos de uso se importan desde `usecases/`.
===============================================================================
"""

from .answer_composer import AnswerComposer, generate_grounded_answer
from .dataset_insights import (
    DatasetSummary,
    HighlightSegment,
    highlight_terms,
    summarize_dataset,
)
from .pipeline_steps import MODE_LABELS, NARRATIVE_STEPS, SANDBOX_STAGES, ModeLabel
from .retrieval import RetrievalService, simulate_retrieval
from .scoring import (
    blend_hybrid_score,
    build_reasons,
    calculate_similarity,
    compute_keyword_score,
)

__all__ = [
    # Retrieval
    "RetrievalService",
    "simulate_retrieval",
    "calculate_similarity",
    "compute_keyword_score",
    "blend_hybrid_score",
    "build_reasons",
    # Answer
    "AnswerComposer",
    "generate_grounded_answer",
    # Insights
    "DatasetSummary",
    "HighlightSegment",
    "summarize_dataset",
    "highlight_terms",
    # Catalog
    "NARRATIVE_STEPS",
    "SANDBOX_STAGES",
    "MODE_LABELS",
    "ModeLabel",
]
