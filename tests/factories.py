"""Catalog and city builders shared by the tests."""

from citysearch.core.types import City, CityTier, Coordinate

# Tier boundaries: big 0-14, middle 15-59, small 60-299, tiny 300-601.
SIZE_INDEXES = [15, 60, 300]
CATALOG_SIZE = 602

BIG_CITIES = [
    ("Санкт-Петербург", 59.9386, 30.3141),
    ("Новосибирск", 55.0415, 82.9346),
    ("Екатеринбург", 56.8519, 60.6122),
    ("Казань", 55.7887, 49.1221),
    ("Краснодар", 45.0355, 38.9753),
    ("Красноярск", 56.0184, 92.8672),
    ("Москва", 55.7558, 37.6173),
    ("Нижний Новгород", 56.3269, 44.0059),
    ("Челябинск", 55.1644, 61.4368),
    ("Самара", 53.1959, 50.1002),
    ("Омск", 54.9885, 73.3242),
    ("Ростов-на-Дону", 47.2357, 39.7015),
    ("Уфа", 54.7388, 55.9721),
    ("Воронеж", 51.6720, 39.1843),
    ("Пермь", 58.0105, 56.2502),
]

# Named cities scattered among generated fillers, by id.
NAMED_CITIES = {
    90: ("Красногорск", None),
    579: ("Кравцово", None),
    580: ("Красноармейск", None),
    581: ("Красновишерск", None),
    582: ("Красногвардейское", None),
    583: ("Красногорское", None),
    584: ("Краснозаводск", None),
    585: ("Краснознаменск", "Московская область"),
    586: ("Краснознаменск", "Калининградская область"),
    587: ("Краснокаменск", None),
    588: ("Краснокамск", None),
    589: ("Краснообск", None),
    590: ("Красноперекопск", None),
    591: ("Краснослободск", None),
    592: ("Краснотурьинск", None),
    593: ("Красноуральск", None),
    594: ("Красноуфимск", None),
    595: ("Красный Кут", None),
    596: ("Красный Сулин", None),
    597: ("Кронштадт", None),
    598: ("Кропоткин", None),
    599: ("Крымск", None),
    600: ("Крюково", None),
    601: ("Кряжим", None),
}


def _filler_name(index: int) -> str:
    if index < SIZE_INDEXES[1]:
        return f"Город {index}"
    if index < SIZE_INDEXES[2]:
        return f"Село {index}"
    return f"Деревня {index}"


def _city_payload(name: str, lat: float, lon: float, subject: str | None = None) -> dict:
    return {"name": name, "coordinate": {"lat": lat, "lon": lon}, "subject": subject}


def build_catalog_payload() -> dict:
    cities = []
    for index in range(CATALOG_SIZE):
        if index < len(BIG_CITIES):
            cities.append(_city_payload(*BIG_CITIES[index]))
            continue
        lat = 50.0 + (index % 100) * 0.1
        lon = 30.0 + index // 100
        if index in NAMED_CITIES:
            name, subject = NAMED_CITIES[index]
            cities.append(_city_payload(name, lat, lon, subject))
        else:
            cities.append(_city_payload(_filler_name(index), lat, lon))
    return {"cities": cities, "citySizeIndexes": SIZE_INDEXES}


def make_city(
    id: int,
    name: str,
    tier: CityTier = CityTier.SMALL,
    lat: float = 55.0,
    lon: float = 37.0,
    subject: str | None = None,
) -> City:
    return City(id=id, name=name, coordinate=Coordinate(lat, lon), tier=tier, subject=subject)


