"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the resolution core and the
adapters that supply its data.
"""

from .reference_data import ReferenceDataPort

__all__ = ["ReferenceDataPort"]
