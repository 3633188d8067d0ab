"""Error types raised while materializing file sets.

Filesystem failures are not wrapped: they surface as the ``OSError`` raised
by ``pathlib``.
"""

from devs_scaffold.helpers.helpers_logging import print_error


class ScaffoldError(Exception):
    """Base error for scaffolding failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def print_error(self) -> None:
        """Print the error message using the logging helper."""
        print_error(self.message)


class ValidationError(ScaffoldError):
    """Raised when a patch document cannot be merged safely.

    Attributes:
        origin: Relative file path the document belongs to ('' if unknown).
        key_path: Dotted/indexed path of the offending node
            (e.g. ``configurations[1]``).
    """

    def __init__(self, message: str, origin: str = "", key_path: str = "") -> None:
        location = ":".join(part for part in (origin, key_path) if part)
        super().__init__(f"{location}: {message}" if location else message)
        self.origin = origin
        self.key_path = key_path


class ParseError(ScaffoldError):
    """Raised when existing on-disk content is not a valid structured document."""

    def __init__(self, message: str, origin: str = "") -> None:
        super().__init__(f"{origin}: {message}" if origin else message)
        self.origin = origin
