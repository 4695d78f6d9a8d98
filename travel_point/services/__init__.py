"""Services layer - Application orchestration.

Available services:
- TravelPointService: Resolves addresses and facilities to travel points
"""

from .travel_point_resolver import TravelPointService

__all__ = ["TravelPointService"]
