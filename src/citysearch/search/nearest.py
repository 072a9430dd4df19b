"""Nearest-city lookup by geodesic distance."""

import math
from collections.abc import Iterable

from geopy.distance import geodesic

from citysearch.core.types import City, Coordinate


def distance_m(a: Coordinate, b: Coordinate) -> float:
    """Geodesic (WGS-84 ellipsoid) distance between two points in meters."""
    return geodesic(a.as_tuple(), b.as_tuple()).meters


def nearest(cities: Iterable[City], coordinate: Coordinate) -> tuple[City, float] | None:
    """Return the closest city and its distance in meters.

    Linear scan; on equal distances the first city in catalog order wins.
    Returns None for an empty catalog.
    """
    best: City | None = None
    best_distance = math.inf
    for city in cities:
        distance = distance_m(city.coordinate, coordinate)
        if distance < best_distance:
            best, best_distance = city, distance
    if best is None:
        return None
    return best, best_distance
