class DategridError(Exception):
    """Base error."""

class InvalidConfigError(DategridError, ValueError):
    """Raised when a calendar is configured with an unusable value (mode, week start, ...)."""

class UnknownPresetError(DategridError, KeyError):
    """Raised when a preset name is not in the registry."""

class PatternError(DategridError, ValueError):
    """Raised by the label renderer on a malformed pattern. Never escapes `label()`."""
