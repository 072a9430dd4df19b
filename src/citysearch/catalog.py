"""Catalog decoding — JSON payload to an ordered list of cities.

Wire format, as published alongside the app:

    {
      "cities": [{"name": "Москва", "coordinate": {"lat": 55.75, "lon": 37.61},
                  "subject": null}, ...],
      "citySizeIndexes": [16, 70, 300]
    }

A city's id is its position in ``cities``. ``citySizeIndexes`` holds the
ascending end positions of each tier: cities before the first boundary are
big, before the second middle, and so on. Cities past the last tier are
dropped.

Pydantic models here are the wire contract, decoupled from the internal
domain dataclasses.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from citysearch.core.errors import CatalogError
from citysearch.core.types import City, CityTier, Coordinate

logger = logging.getLogger(__name__)


class CoordinatePayload(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class CityPayload(BaseModel):
    name: str = Field(..., min_length=1)
    coordinate: CoordinatePayload
    subject: str | None = None


class CatalogPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cities: list[CityPayload]
    size_indexes: list[int] = Field(..., alias="citySizeIndexes")

    @field_validator("size_indexes")
    @classmethod
    def _ascending(cls, value: list[int]) -> list[int]:
        if any(later < earlier for earlier, later in zip(value, value[1:])):
            raise ValueError(f"citySizeIndexes must be ascending, got {value}")
        return value


def tier_for_index(index: int, size_indexes: list[int]) -> int:
    """Rank of the first tier boundary lying beyond ``index``.

    36 with boundaries [16, 70, 300] → 1 (middle)
    500 with boundaries [16, 70, 300] → 3 (tiny)
    """
    for rank, boundary in enumerate(size_indexes):
        if index < boundary:
            return rank
    return len(size_indexes)


def parse_catalog(payload: dict) -> list[City]:
    """Decode a catalog payload into cities ordered as given.

    Raises:
        CatalogError: the payload does not match the wire format.
    """
    try:
        catalog = CatalogPayload.model_validate(payload)
    except ValidationError as e:
        raise CatalogError(f"Invalid city catalog: {e}") from e

    cities: list[City] = []
    for index, raw in enumerate(catalog.cities):
        rank = tier_for_index(index, catalog.size_indexes)
        try:
            tier = CityTier(rank)
        except ValueError:
            logger.warning("Dropping %d cities past the last known tier", len(catalog.cities) - index)
            break
        cities.append(City(
            id=index,
            name=raw.name,
            coordinate=Coordinate(raw.coordinate.lat, raw.coordinate.lon),
            tier=tier,
            subject=raw.subject,
        ))

    logger.info("Decoded %d cities", len(cities), extra={"city_count": len(cities)})
    return cities


def load_catalog(path: str | Path) -> list[City]:
    """Read and decode a catalog JSON file."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Failed to read city catalog {path}: {e}") from e
    if not isinstance(payload, dict):
        raise CatalogError(f"City catalog {path} must be a JSON object")
    return parse_catalog(payload)


def dump_catalog(cities: list[City]) -> dict:
    """Encode cities back into the wire format.

    Cities must already be grouped by ascending tier.
    """
    tiers = [city.tier for city in cities]
    if tiers != sorted(tiers):
        raise CatalogError("Cities must be grouped by ascending tier to encode")

    size_indexes = [
        sum(1 for tier in tiers if tier <= boundary_tier)
        for boundary_tier in list(CityTier)[:-1]
    ]
    return {
        "cities": [
            {
                "name": city.name,
                "coordinate": {"lat": city.coordinate.latitude, "lon": city.coordinate.longitude},
                "subject": city.subject,
            }
            for city in cities
        ],
        "citySizeIndexes": size_indexes,
    }
