"""Custom exception hierarchy for word search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(WordSearchError):
    """Raised when a length threshold or engine setting is unusable."""


class EngineStateError(WordSearchError):
    """Raised when an engine is asked to build a second puzzle."""


class ValidationError(WordSearchError):
    """Raised when the finished grid fails its integrity checks."""
