# core/pipeline.py

import logging
from typing import Optional, Protocol, Tuple

from ai.mock import generate_mock_itinerary
from core.errors import SourceFailure
from core.models import Itinerary, TripRequest

logger = logging.getLogger(__name__)


class ItinerarySource(Protocol):
    def generate(self, req: TripRequest) -> Itinerary: ...


def synthesize_itinerary(
    req: TripRequest, source: Optional[ItinerarySource]
) -> Tuple[Itinerary, bool]:
    """
    Return (itinerary, used_fallback). The primary source is tried once;
    a SourceFailure switches to the offline generator.
    """
    if source is not None:
        try:
            return source.generate(req), False
        except SourceFailure as e:
            logger.info("Using mock data for %s: %s", req.city, e)

    return generate_mock_itinerary(req.city, req.interests, req.days), True
