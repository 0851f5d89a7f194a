"""Exceptions raised while reading hero, enemy and rules definitions."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """A definition file is missing, unreadable or not valid JSON."""


class DataValidationError(DataError):
    """A definition file parsed but its fields have the wrong shape."""


class DataReferenceError(DataError):
    """Definitions are individually valid but inconsistent with each other (e.g. no boss)."""
