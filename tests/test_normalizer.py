# tests/test_normalizer.py

import pytest

from core.errors import EmptyCity, EmptyInterests, InputTooLong, TooManyDays
from core.normalizer import normalize_days, normalize_trip_request


def test_basic_form():
    req = normalize_trip_request({"city": " Paris ", "interests": "food", "days": "4"})
    assert (req.city, req.interests, req.days) == ("Paris", "food", 4)


def test_interests_list_is_joined():
    req = normalize_trip_request({"city": "Paris", "interests": ["culture", "food"]})
    assert req.interests == "culture, food"


def test_city_list_takes_first_element():
    req = normalize_trip_request({"city": ["Rome", "Milan"]})
    assert req.city == "Rome"


def test_non_string_values_are_stringified():
    req = normalize_trip_request({"city": 42, "interests": 7, "days": 2})
    assert req.city == "42"
    assert req.interests == "7"
    assert req.days == 2


@pytest.mark.parametrize("city", ["", "   ", None, [], "<>"])
def test_empty_city(city):
    with pytest.raises(EmptyCity) as exc:
        normalize_trip_request({"city": city, "interests": "food"})
    assert exc.value.user_message == "Please provide a city name"


def test_missing_interests_default():
    assert normalize_trip_request({"city": "Oslo"}).interests == "general sightseeing"
    assert normalize_trip_request({"city": "Oslo", "interests": None}).interests == "general sightseeing"


@pytest.mark.parametrize("interests", ["", "  ", [], [""]])
def test_empty_interests(interests):
    with pytest.raises(EmptyInterests) as exc:
        normalize_trip_request({"city": "Oslo", "interests": interests})
    assert exc.value.user_message == "Please provide your travel interests"


def test_interests_list_is_joined_as_given():
    req = normalize_trip_request({"city": "Oslo", "interests": ["food", " nature"]})
    assert req.interests == "food,  nature"


def test_city_too_long():
    normalize_trip_request({"city": "a" * 100})
    with pytest.raises(InputTooLong):
        normalize_trip_request({"city": "a" * 101})


@pytest.mark.parametrize("city", ["<" + "a" * 100, "   " + "a" * 99, "a" * 99 + "  "])
def test_city_length_counts_submitted_text(city):
    with pytest.raises(InputTooLong):
        normalize_trip_request({"city": city, "interests": "food"})


def test_interests_too_long():
    with pytest.raises(InputTooLong):
        normalize_trip_request({"city": "Oslo", "interests": "x" * 201})
    with pytest.raises(InputTooLong):
        normalize_trip_request({"city": "Oslo", "interests": "<" + "x" * 200})
    with pytest.raises(InputTooLong):
        normalize_trip_request({"city": "Oslo", "interests": ["x" * 100, "y" * 99]})


def test_angle_brackets_are_stripped():
    req = normalize_trip_request({"city": "<b>Lisbon</b>", "interests": "<script>food"})
    assert req.city == "bLisbon/b"
    assert req.interests == "scriptfood"


@pytest.mark.parametrize("raw", [None, "", "abc", "0", "-2", []])
def test_days_default(raw):
    assert normalize_days(raw) == 3


def test_days_list_and_padding():
    assert normalize_days(["5"]) == 5
    assert normalize_days(" 7 ") == 7


def test_days_upper_bound():
    assert normalize_days("30") == 30
    with pytest.raises(TooManyDays) as exc:
        normalize_days("31")
    assert "30 days" in exc.value.user_message


def test_days_bound_is_configurable():
    with pytest.raises(TooManyDays):
        normalize_trip_request({"city": "Oslo", "days": "8"}, max_days=7)
