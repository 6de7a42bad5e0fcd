# tests/test_pipeline.py

import pytest

from ai.mock import generate_mock_itinerary
from conftest import FakeSource, sample_itinerary
from core.errors import SourceFailure
from core.models import TripRequest
from core.pipeline import synthesize_itinerary

REQ = TripRequest(city="Paris", interests="culture, food", days=4)


def test_primary_source_wins():
    source = FakeSource(itinerary=sample_itinerary(4))
    itin, used_fallback = synthesize_itinerary(REQ, source)
    assert used_fallback is False
    assert itin.days[0].activities[0] == "AI morning 1"
    assert source.calls == 1


def test_source_failure_falls_back_to_mock():
    source = FakeSource(error=SourceFailure("boom"))
    itin, used_fallback = synthesize_itinerary(REQ, source)
    assert used_fallback is True
    assert itin == generate_mock_itinerary("Paris", "culture, food", 4)
    assert source.calls == 1


def test_no_source_goes_straight_to_mock():
    itin, used_fallback = synthesize_itinerary(REQ, None)
    assert used_fallback is True
    assert len(itin.days) == 4


def test_unexpected_errors_propagate():
    with pytest.raises(KeyError):
        synthesize_itinerary(REQ, FakeSource(error=KeyError("bug")))
