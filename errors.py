"""Errors raised while reading software data or computing damages."""


class InvalidDataShape(ValueError):
    """Raised when bandwidth data is neither a number nor a documented mapping."""
    pass


class CatalogError(Exception):
    """Raised when a catalog entry cannot be turned into a software."""
    pass


class UnknownSoftware(KeyError):
    """Raised when a software is not present in the catalog."""
    pass


__all__ = [
    "InvalidDataShape",
    "CatalogError",
    "UnknownSoftware",
]
