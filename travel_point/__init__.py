"""Travel point resolver for Amakusa City travel-expense rules.

Resolves a town name and lot number (or a named facility) to the
travel point used as the basis for official travel distances.

    from travel_point import Container, TravelPointService

    service = Container.create_default().resolve(TravelPointService)
    result = service.resolve_travel_point("浄南町", "４番１５号")
    result.point  # "本渡"
"""

from .container import Container
from .domain.models import FacilityRecord, LookupResult, ResolutionStatus
from .services import TravelPointService

__version__ = "0.1.0"

__all__ = [
    "Container",
    "TravelPointService",
    "LookupResult",
    "FacilityRecord",
    "ResolutionStatus",
]
