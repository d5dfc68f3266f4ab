"""
===============================================================================
CRC CARD — infrastructure/text/tokenizer.py
===============================================================================

Componente:
  Tokenización mínima compartida (embedder, chunker, scorer, composer)

Responsabilidades:
  - Normalizar texto a tokens alfanuméricos en minúscula.
  - Filtrar stop-words para tokens "de keyword".
  - Estimar tokens de LLM a partir de palabras (heurística words * 1.3).
  - Medir y cortar texto en unidades UTF-16 (seed del embedder, snippets).

Colaboradores:
  - infrastructure/services/keyword_embedding_service.py
  - infrastructure/text/chunker.py
  - application/scoring.py, application/answer_composer.py

Decisiones:
  - Un único punto de verdad para STOP_WORDS: embedder y scorer deben
    tokenizar igual o los scores dejan de ser comparables.
===============================================================================
"""

from __future__ import annotations

import math
import re
from typing import Final

STOP_WORDS: Final[frozenset[str]] = frozenset(
    {
        "the",
        "a",
        "an",
        "and",
        "or",
        "to",
        "of",
        "for",
        "in",
        "on",
        "with",
        "by",
        "is",
        "are",
        "be",
        "that",
        "this",
        "as",
        "at",
        "it",
        "from",
    }
)

_NON_ALNUM_RE: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9\s]")

# Heurística de tokens de LLM por palabra.
TOKENS_PER_WORD: Final[float] = 1.3


def sanitize(text: str) -> list[str]:
    """Minúsculas, no-alfanuméricos -> espacio, split por whitespace."""
    return _NON_ALNUM_RE.sub(" ", (text or "").lower()).split()


def keyword_tokens(text: str) -> list[str]:
    """Tokens sanitizados sin stop-words (con repetidos, en orden)."""
    return [token for token in sanitize(text) if token not in STOP_WORDS]


def count_words(text: str) -> int:
    """Palabras separadas por whitespace (sin normalizar)."""
    return len((text or "").split())


def round_half_up(value: float) -> int:
    """Redondeo .5 hacia arriba (el round() de Python es bancario)."""
    return math.floor(value + 0.5)


def estimate_token_count(text: str) -> int:
    """Estimación de tokens: round(words * 1.3), mínimo 1."""
    return max(1, round_half_up(count_words(text) * TOKENS_PER_WORD))


def utf16_code_units(text: str) -> list[int]:
    """
    Códigos de carácter como unidades UTF-16.

    Un carácter fuera del BMP (ej: emoji) cuenta como dos unidades (surrogates).
    """
    raw = (text or "").encode("utf-16-le")
    return [int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2)]


def utf16_length(text: str) -> int:
    """Longitud en unidades UTF-16 (la que ve un cliente JavaScript)."""
    return len((text or "").encode("utf-16-le")) // 2


def truncate_utf16(text: str, max_units: int) -> str:
    """
    Prefijo de `text` con como mucho `max_units` unidades UTF-16.

    Si el corte parte un par surrogate, la mitad suelta se descarta.
    """
    raw = (text or "").encode("utf-16-le")[: max(0, max_units) * 2]
    return raw.decode("utf-16-le", errors="ignore")
