# tests/conftest.py

from types import SimpleNamespace

import pytest

from core.config import Settings
from core.errors import SourceFailure
from core.models import DayPlan, Itinerary


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-gemini-key", unsplash_api_key="test-unsplash-key")


class FakeSource:
    """Stands in for GeminiSource; raises SourceFailure unless an itinerary is given."""

    def __init__(self, itinerary=None, error=None, models=None):
        self.itinerary = itinerary
        self.error = error
        self.models = models or []
        self.calls = 0

    def generate(self, req):
        self.calls += 1
        if self.error is not None:
            raise self.error
        if self.itinerary is None:
            raise SourceFailure("offline")
        return self.itinerary

    def available_models(self):
        if isinstance(self.error, Exception) and not isinstance(self.error, SourceFailure):
            raise self.error
        return self.models


class FakeImages:
    def __init__(self, urls=None):
        self.urls = urls if urls is not None else ["https://example.com/a.jpg"]
        self.cities = []

    def city_images(self, city):
        self.cities.append(city)
        return list(self.urls)


def sample_itinerary(days=2):
    return Itinerary(
        days=[DayPlan(day=i, activities=[f"AI morning {i}", f"AI afternoon {i}", f"AI evening {i}"])
              for i in range(1, days + 1)],
        tips=["Book ahead"],
        packing=["Umbrella"],
    )


def gemini_response(text):
    part = SimpleNamespace(text=text)
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


def gemini_model(name="models/gemini-2.5-flash", methods=("generateContent",)):
    return SimpleNamespace(
        name=name,
        display_name=name.split("/")[-1].replace("-", " ").title(),
        description="test model",
        supported_generation_methods=list(methods),
    )
