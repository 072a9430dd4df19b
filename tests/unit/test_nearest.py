"""Tests for geodesic distance and nearest-city scan."""

import pytest

from citysearch.core.types import Coordinate
from citysearch.search.nearest import distance_m, nearest
from tests.factories import make_city

MOSCOW = Coordinate(55.7558, 37.6173)
SAINT_PETERSBURG = Coordinate(59.9386, 30.3141)


class TestDistance:
    def test_same_point(self):
        assert distance_m(MOSCOW, MOSCOW) == pytest.approx(0.0, abs=0.01)

    def test_moscow_to_saint_petersburg(self):
        """Roughly 634 km along the ellipsoid."""
        distance = distance_m(MOSCOW, SAINT_PETERSBURG)
        assert 625_000 < distance < 645_000

    def test_symmetric(self):
        assert distance_m(MOSCOW, SAINT_PETERSBURG) == pytest.approx(distance_m(SAINT_PETERSBURG, MOSCOW))

    def test_one_degree_latitude(self):
        distance = distance_m(Coordinate(55.0, 37.0), Coordinate(56.0, 37.0))
        assert 110_000 < distance < 113_000


class TestNearest:
    def test_empty(self):
        assert nearest([], MOSCOW) is None

    def test_closest_wins(self):
        cities = [
            make_city(0, "Санкт-Петербург", lat=59.9386, lon=30.3141),
            make_city(1, "Тверь", lat=56.8587, lon=35.9176),
            make_city(2, "Москва", lat=55.7558, lon=37.6173),
        ]
        city, distance = nearest(cities, Coordinate(55.8, 37.7))

        assert city.id == 2
        assert distance < 10_000

    def test_tie_returns_first_in_catalog_order(self):
        cities = [
            make_city(0, "Далеко", lat=40.0, lon=20.0),
            make_city(1, "Первый", lat=55.0, lon=37.0),
            make_city(2, "Второй", lat=55.0, lon=37.0),
        ]
        city, _ = nearest(cities, Coordinate(55.0, 37.0))

        assert city.id == 1

    def test_equidistant_across_meridian(self):
        """Points mirrored across the query meridian are the same distance away."""
        cities = [
            make_city(0, "Восток", lat=55.0, lon=38.0),
            make_city(1, "Запад", lat=55.0, lon=36.0),
        ]
        city, _ = nearest(cities, Coordinate(55.0, 37.0))

        assert city.id == 0
