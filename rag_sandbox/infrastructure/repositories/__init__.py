"""
============================================================
TARJETA CRC — infrastructure/repositories/__init__.py
============================================================
Module: infrastructure.repositories (Public Export Surface)

Policy:
  - Solo re-exporta símbolos; no debe tener side effects.
============================================================
"""

from .in_memory import InMemoryDatasetRepository

__all__ = ["InMemoryDatasetRepository"]
