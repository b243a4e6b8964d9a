from primval.csv_ingest.core import (
    CsvDialect,
    LineEndingSetting,
    auto_detect_line_endings,
    line_endings,
    parse_csv_line,
    read_csv_file,
)

__all__ = [
    "CsvDialect",
    "LineEndingSetting",
    "auto_detect_line_endings",
    "line_endings",
    "parse_csv_line",
    "read_csv_file",
]
