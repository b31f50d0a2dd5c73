"""CSS parser error types."""

from uncss.errors import UncssError


class CssParseError(UncssError):
    """Raised when CSS source cannot be parsed into a rule tree."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
