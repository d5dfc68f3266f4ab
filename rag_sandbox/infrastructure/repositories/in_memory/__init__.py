"""
In-Memory Repository Implementations.

The sandbox corpus is a static seed; data lives for the process lifetime.
"""

from .dataset import InMemoryDatasetRepository
from .sample_datasets import SAMPLE_DATASETS, SECURITY_BLUEPRINTS, SUPPORT_PLAYBOOK

__all__ = [
    "InMemoryDatasetRepository",
    "SAMPLE_DATASETS",
    "SECURITY_BLUEPRINTS",
    "SUPPORT_PLAYBOOK",
]
