# core/models.py

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping


@dataclass(frozen=True)
class TripRequest:
    city: str
    interests: str
    days: int


@dataclass
class DayPlan:
    day: int
    activities: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"day": self.day, "activities": list(self.activities)}


@dataclass
class Itinerary:
    days: List[DayPlan] = field(default_factory=list)
    tips: List[str] = field(default_factory=list)
    packing: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "days": [d.to_dict() for d in self.days],
            "tips": list(self.tips),
            "packing": list(self.packing),
        }

    @classmethod
    def from_payload(cls, data: Any, expected_days: int) -> "Itinerary":
        """
        Build an Itinerary from the JSON returned by the model.
        Raises ValueError when the payload does not have the expected shape.
        """
        if not isinstance(data, Mapping):
            raise ValueError("payload is not a JSON object")

        raw_days = data.get("days")
        if not isinstance(raw_days, list):
            raise ValueError("'days' is missing or not a list")
        for key in ("tips", "packing"):
            if not isinstance(data.get(key), list):
                raise ValueError(f"'{key}' is missing or not a list")
        if len(raw_days) != expected_days:
            raise ValueError(f"expected {expected_days} days, got {len(raw_days)}")

        days = []
        for position, d in enumerate(raw_days, start=1):
            if not isinstance(d, Mapping) or not isinstance(d.get("activities"), list):
                raise ValueError(f"day {position} has no activities list")
            # the model's own numbering is not trusted
            days.append(DayPlan(day=position, activities=[str(a) for a in d["activities"]]))

        return cls(
            days=days,
            tips=[str(t) for t in data["tips"]],
            packing=[str(p) for p in data["packing"]],
        )


@dataclass
class PlanResult:
    city: str
    itinerary: Itinerary
    images: List[str]
    using_mock_data: bool
    days: int
