"""Exceptions raised for violated engine preconditions and bad catalogs."""


class EmptyQueryError(ValueError):
    """``search`` was called with an empty query; use ``default_result`` instead."""


class CatalogOrderError(ValueError):
    """Big-tier cities do not form a contiguous prefix of the catalog."""


class CatalogError(ValueError):
    """A catalog payload could not be decoded."""
