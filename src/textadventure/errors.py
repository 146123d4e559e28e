class TextAdventureError(Exception):
    """Base error for text adventure domain exceptions."""


class InvalidPositionError(TextAdventureError):
    """Raised when a coordinate does not fall on the board."""


class BoardError(TextAdventureError):
    """Raised when a board violates its topology invariants."""


class RosterError(TextAdventureError):
    """Raised when the roster is in a state that correct construction cannot produce."""


class SettingsError(TextAdventureError):
    """Raised when configuration values cannot be interpreted."""
