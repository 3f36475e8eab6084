"""Exceptions raised by the scheduler."""


class LeitnerError(Exception):
    """Base class for scheduler errors."""


class CardNotFoundError(LeitnerError, LookupError):
    """Raised by strict updates when a card is in no bucket."""

    def __init__(self, card):
        super().__init__(f"Flashcard not found in any bucket: {card.front!r}")
        self.card = card


class InvalidBucketsError(LeitnerError, ValueError):
    """Raised when a bucket map breaks its invariants."""


class ConfigError(LeitnerError):
    """Raised when the settings file cannot be used."""
