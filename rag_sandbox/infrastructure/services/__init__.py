"""
Infrastructure Services (Infrastructure Layer)

Facade del paquete `infrastructure.services`: re-exporta los adapters
concretos de las interfaces del dominio.

CRC (Component Card)
--------------------
Component: infrastructure.services (Facade)
Responsibilities:
  - Publicar imports canónicos para container.py y tests
Collaborators:
  - domain.services.EmbeddingService
"""

from .keyword_embedding_service import (
    DIMENSION_KEYWORDS,
    EMBEDDING_DIMENSION,
    KeywordEmbeddingService,
    generate_embedding,
)

__all__ = [
    "KeywordEmbeddingService",
    "generate_embedding",
    "DIMENSION_KEYWORDS",
    "EMBEDDING_DIMENSION",
]
