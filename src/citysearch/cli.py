"""citysearch CLI — search and nearest-city commands over a catalog file."""

import sys

from pydantic import ValidationError

from citysearch.catalog import CoordinatePayload, load_catalog
from citysearch.config import settings
from citysearch.core.errors import CatalogError
from citysearch.core.types import CombinedSizes, Coordinate, SearchResult, SectionKind
from citysearch.observability.logging import request_scope, setup_logging
from citysearch.observability.tracing import configure_tracing
from citysearch.query import normalize_query, validate_query
from citysearch.search.engine import CitySearchEngine


SECTION_TITLES = {
    SectionKind.BIG_CITIES: "Big cities",
    SectionKind.UNTITLED: "",
    CombinedSizes.BIG_AND_MIDDLE: "Big and middle cities",
    CombinedSizes.OTHERS: "Other cities",
}


def _split_catalog_option(args: list[str]) -> tuple[str, list[str]]:
    """Pull ``--catalog PATH`` out of ``args``; default from settings."""
    path = settings.catalog_path
    rest: list[str] = []
    it = iter(args)
    for arg in it:
        if arg == "--catalog":
            path = next(it, "")
            if not path:
                raise ValueError("--catalog needs a path")
        elif arg.startswith("--catalog="):
            path = arg.split("=", 1)[1]
        else:
            rest.append(arg)
    return path, rest


def _init() -> None:
    setup_logging(json_format=settings.log_json, level=settings.log_level)
    configure_tracing(settings)


def _load_engine(path: str) -> CitySearchEngine:
    try:
        cities = load_catalog(path)
    except CatalogError as e:
        print(f"Could not load catalog: {e}")
        sys.exit(1)
    return CitySearchEngine.build(cities)


def main(argv: list[str] | None = None) -> None:
    """Search the catalog: citysearch [--catalog PATH] <query>"""
    _init()
    args = sys.argv[1:] if argv is None else argv
    with request_scope():
        _search(args)


def _search(args: list[str]) -> None:
    try:
        catalog_path, words = _split_catalog_option(args)
    except ValueError as e:
        print(e)
        words = []
        catalog_path = ""

    if not words or not catalog_path:
        print("Usage: citysearch [--catalog PATH] <query>")
        print('  Example: citysearch "нижний нов"')
        print("  An empty query (\"\") lists the big cities.")
        sys.exit(1)

    raw = " ".join(words)
    validation = validate_query(raw, settings.query_alphabet)
    if not validation.is_valid:
        print(f"Ignored symbols: {validation.invalid_symbols!r}")

    engine = _load_engine(catalog_path)
    query = normalize_query(raw, settings.query_alphabet)
    result = engine.search(query) if query else engine.default_result()
    _print_result(engine, result)


def _print_result(engine: CitySearchEngine, result: SearchResult) -> None:
    label = result.query or "(default)"
    print(f"\nQuery: {label}")
    print(f"{'=' * 50}")

    if not result.sections:
        print("Nothing found.")
        return

    for section in result.sections:
        title = SECTION_TITLES[section.sizes or section.kind]
        if title:
            print(f"\n{title} ({len(section.city_ids)}):")
        for city_id in section.city_ids:
            city = engine.city(city_id)
            subject = f" ({city.subject})" if city.subject else ""
            print(f"  {city.name}{subject}")

    print(f"\nTotal: {len(result.matched_ids)} cities")


def nearest_main(argv: list[str] | None = None) -> None:
    """Find the nearest city: citysearch-nearest [--catalog PATH] <lat> <lon>"""
    _init()
    args = sys.argv[1:] if argv is None else argv
    with request_scope():
        _nearest(args)


def _nearest(args: list[str]) -> None:
    try:
        catalog_path, rest = _split_catalog_option(args)
        lat, lon = (float(value) for value in rest)
        CoordinatePayload(lat=lat, lon=lon)
    except (ValueError, ValidationError):
        print("Usage: citysearch-nearest [--catalog PATH] <lat> <lon>")
        print("  Example: citysearch-nearest 55.75 37.62")
        sys.exit(1)

    engine = _load_engine(catalog_path)
    found = engine.nearest_city_with_distance(Coordinate(lat, lon))
    if found is None:
        print("Catalog is empty.")
        return

    city, distance = found
    subject = f" ({city.subject})" if city.subject else ""
    print(f"Nearest city: {city.name}{subject}")
    print(f"Distance:     {distance / 1000:,.1f} km")


if __name__ == "__main__":
    main()
