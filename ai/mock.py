# ai/mock.py
# ------------------------------------------------------------------------------
# Offline itinerary used whenever Gemini is unavailable or answers with
# something we cannot use.
# ------------------------------------------------------------------------------
from typing import List, Sequence

from core.models import DayPlan, Itinerary
from services.activities import PACKING_LIST, TRAVEL_TIPS, candidate_activities


def _pick(candidates: Sequence[str], index: int, fallback: str) -> str:
    return candidates[index] if index < len(candidates) else fallback


def _day_activities(city: str, day: int, total: int, candidates: Sequence[str]) -> List[str]:
    base = (day - 1) * 3
    if day == 1:
        return [
            f"Morning: Arrive in {city} and check into accommodation",
            f"Afternoon: {_pick(candidates, 0, f'Explore {city} city center')}",
            f"Evening: {_pick(candidates, 1, 'Enjoy local cuisine and relax')}",
        ]
    if day == total:
        return [
            f"Morning: {_pick(candidates, base, 'Visit remaining must-see locations')}",
            f"Afternoon: {_pick(candidates, base + 1, 'Last-minute shopping and sightseeing')}",
            f"Evening: Depart from {city} with wonderful memories",
        ]
    return [
        f"Morning: {_pick(candidates, base, f'Explore popular attractions in {city}')}",
        f"Afternoon: {_pick(candidates, base + 1, 'Experience local culture and traditions')}",
        f"Evening: {_pick(candidates, base + 2, 'Dine at authentic local restaurants')}",
    ]


def generate_mock_itinerary(city: str, interests: str, days: int = 3) -> Itinerary:
    """Deterministic itinerary built from the static activity catalogue."""
    days = max(1, days)
    candidates = candidate_activities(interests)
    return Itinerary(
        days=[
            DayPlan(day=i, activities=_day_activities(city, i, days, candidates))
            for i in range(1, days + 1)
        ],
        tips=list(TRAVEL_TIPS),
        packing=list(PACKING_LIST),
    )
