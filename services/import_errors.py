"""
Exceptions raised while importing player exports.

The import service turns every PlayerImportError into a failed
ImportResult carrying the exception message.
"""


class PlayerImportError(Exception):
    """Base class for player import failures."""
    pass


class FileReadError(PlayerImportError):
    """The source file could not be read."""
    pass


class UnsupportedFormatError(PlayerImportError):
    """The file extension does not map to a known adapter."""
    pass


class StructuralError(PlayerImportError, ValueError):
    """No table, no header row, or a malformed CSV record."""
    pass


class EmptyResultError(PlayerImportError, ValueError):
    """No valid player rows were left after filtering."""
    pass


class SizeLimitExceededError(PlayerImportError):
    """The export holds more players than the import limit."""
    pass
