"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a hero, enemy or session cannot be created."""


class EncounterError(Exception):
    """Raised when a combat operation is requested in the wrong encounter state."""


class TableError(Exception):
    """Raised when a blackjack action is not valid for the current round."""
