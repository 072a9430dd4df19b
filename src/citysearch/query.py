"""Query sanitizing — keep only searchable characters before hitting the engine.

The engine expects a non-empty, lowercased query built from the accepted
alphabet and single spaces. Anything else is stripped here and reported
back so a UI can tell the user which symbols were ignored.
"""

import re
from dataclasses import dataclass

LOWERCASED_RUSSIAN_ALPHABET = "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"
RUSSIAN_ALPHABET = LOWERCASED_RUSSIAN_ALPHABET + LOWERCASED_RUSSIAN_ALPHABET.upper()
SPACE = " "

_SPACES = re.compile(r" {2,}")


@dataclass(frozen=True)
class QueryValidation:
    """Outcome of sanitizing raw user input."""

    text: str
    invalid_symbols: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.invalid_symbols is None

    def query(self) -> str:
        return self.text.lower()


def validate_query(text: str, alphabet: str = RUSSIAN_ALPHABET) -> QueryValidation:
    """Split ``text`` into accepted characters and rejected symbols."""
    accepted = set(alphabet) | {SPACE}
    valid = "".join(ch for ch in text if ch in accepted)
    if len(valid) == len(text):
        return QueryValidation(text=text)
    invalid = "".join(ch for ch in text if ch not in accepted)
    return QueryValidation(text=valid, invalid_symbols=invalid)


def normalize_query(text: str, alphabet: str = RUSSIAN_ALPHABET) -> str:
    """Sanitize, lowercase and tidy spacing. Returns "" if nothing is left.

    '  Нижний   Новгород!' → 'нижний новгород'
    """
    query = validate_query(text, alphabet).query()
    return _SPACES.sub(SPACE, query).strip(SPACE)
