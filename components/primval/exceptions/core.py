"""Exception hierarchy shared by the primval components."""


class PrimvalException(Exception):
    """Base class for errors raised by primval."""

    pass


class ConfigurationError(PrimvalException):
    """Raised when primval configuration is invalid."""

    pass


class CsvLineTooLongError(PrimvalException):
    """Raised while reading a CSV file when a line exceeds the configured length."""

    def __init__(self, line_number: int, length: int, max_line_length: int):
        self.line_number = line_number
        self.length = length
        self.max_line_length = max_line_length
        super().__init__(
            f"Line {line_number} is {length} characters long, limit is {max_line_length}"
        )
