from primval.exceptions.core import ConfigurationError, CsvLineTooLongError, PrimvalException

__all__ = ["ConfigurationError", "CsvLineTooLongError", "PrimvalException"]
