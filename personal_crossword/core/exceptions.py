"""Custom exception hierarchy for crossword layout."""


class CrosswordError(Exception):
    """Base exception for crossword failures."""


class InvalidWordError(CrosswordError):
    """Raised when a word/clue entry is empty or malformed."""


class PlacementError(CrosswordError):
    """Raised when a word cannot be written to the grid without a conflict."""


class ValidationError(CrosswordError):
    """Raised when the layout integrity checks fail."""


class UploadError(CrosswordError):
    """Raised when a rendered puzzle image cannot be uploaded."""
