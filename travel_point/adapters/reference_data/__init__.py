"""Reference data adapters - Implementations of ReferenceDataPort.

Available implementations:
- CSVReferenceRepository: Loads the tables from CSV files
- InMemoryReferenceRepository: Wraps pre-built tables
"""

from .csv_repository import CSVReferenceRepository
from .memory_repository import InMemoryReferenceRepository

__all__ = ["CSVReferenceRepository", "InMemoryReferenceRepository"]
