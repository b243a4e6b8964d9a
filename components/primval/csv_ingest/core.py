"""CSV ingestion through the primval coercion pipeline.

Public API:
- parse_csv_line(line, keep_empty=True, ...) -> list
- read_csv_file(path, max_line_length=None, ...) -> list of rows, or None on failure
- auto_detect_line_endings(enabled=True): context manager for the process-wide
  line-ending detection setting

Dialect arguments left as None fall back to the values of
``primval.config.get_config()``.
"""

from __future__ import annotations

import csv
import io
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from primval.coercion.core import primitive_value
from primval.config.core import PrimvalConfig, get_config
from primval.containers.core import primitive_array
from primval.exceptions.core import ConfigurationError, CsvLineTooLongError
from primval.logging import get_logger
from primval.predicates.core import is_empty

logger = get_logger(__name__)


class CsvDialect(BaseModel):
    """Delimiter, quoting and line length rules for reading CSV text."""

    model_config = ConfigDict(frozen=True)

    delimiter: str = Field(default=",", min_length=1, max_length=1)
    enclosure: str = Field(default='"', min_length=1, max_length=1)
    escape: str = Field(default="\\", max_length=1)
    max_line_length: int = Field(default=0, ge=0)

    @classmethod
    def from_config(cls, config: PrimvalConfig) -> "CsvDialect":
        return cls(
            delimiter=config.csv_delimiter,
            enclosure=config.csv_enclosure,
            escape=config.csv_escape,
            max_line_length=config.csv_max_line_length,
        )

    def reader_options(self) -> dict:
        """Keyword arguments for ``csv.reader``.

        ``csv.reader`` gets no escapechar: it would treat the escape as special
        before any character. Escaped enclosures are rewritten by unescape()
        instead.
        """
        return {
            "delimiter": self.delimiter,
            "quotechar": self.enclosure,
            "escapechar": None,
            "doublequote": True,
        }

    def unescape(self, text: str) -> str:
        """Turn each escape+enclosure pair into a doubled enclosure.

        The escape character is literal everywhere else, so ``C:\\temp`` and a
        trailing backslash survive parsing unchanged.
        """
        if not self.escape or self.escape == self.enclosure:
            return text
        return text.replace(self.escape + self.enclosure, self.enclosure * 2)


def _resolve_dialect(**overrides: Any) -> CsvDialect:
    defaults = CsvDialect.from_config(get_config()).model_dump()
    defaults.update({k: v for k, v in overrides.items() if v is not None})
    return CsvDialect(**defaults)


# ===== Line-ending detection =====


class LineEndingSetting:
    """Process-wide switch for recognising a bare ``\\r`` as a row terminator.

    Only change it through auto_detect_line_endings(), which holds the lock
    for the whole scope.
    """

    def __init__(self, auto_detect: bool):
        self.auto_detect = auto_detect
        self.lock = threading.RLock()

    @property
    def newline(self) -> str:
        """The ``newline`` argument for ``open()`` matching the setting."""
        return "" if self.auto_detect else "\n"


line_endings = LineEndingSetting(False)


@contextmanager
def auto_detect_line_endings(enabled: bool = True) -> Iterator[LineEndingSetting]:
    """Install a line-ending detection value for the duration of the block.

    The previous value is restored on every exit path. Other threads entering
    the context manager wait until the block finishes.
    """
    with line_endings.lock:
        previous = line_endings.auto_detect
        line_endings.auto_detect = enabled
        try:
            yield line_endings
        finally:
            line_endings.auto_detect = previous


# ===== Parsing =====


def _prepare_lines(lines: Iterable[str], dialect: CsvDialect) -> Iterator[str]:
    for line_number, line in enumerate(lines, start=1):
        length = len(line.rstrip("\r\n"))
        if dialect.max_line_length and length > dialect.max_line_length:
            raise CsvLineTooLongError(line_number, length, dialect.max_line_length)
        yield dialect.unescape(line)


def parse_csv_line(
    line: str,
    keep_empty: bool = True,
    delimiter: Optional[str] = None,
    enclosure: Optional[str] = None,
    escape: Optional[str] = None,
) -> List[Any]:
    """Parse one CSV record and convert its fields with primitive_value().

    Quoted fields may contain the delimiter and newlines. The escape character
    only has meaning before the enclosure (``\\"`` reads as ``"``); elsewhere
    it is kept as is. An empty line is a single empty field.

    Args:
        line: The CSV text of one record.
        keep_empty: Keep fields that are empty after conversion.
        delimiter: Field separator.
        enclosure: Quote character.
        escape: Escape character, "" to disable.

    Returns:
        List[Any]: The converted fields, in order.

    Examples:
        >>> parse_csv_line("1,2,3,")
        [1, 2, 3, '']
        >>> parse_csv_line("1,2,3,", keep_empty=False)
        [1, 2, 3]
    """
    dialect = _resolve_dialect(delimiter=delimiter, enclosure=enclosure, escape=escape)
    reader = csv.reader(io.StringIO(dialect.unescape(line), newline=""), **dialect.reader_options())
    fields = [primitive_value(field) for field in next(reader, [""])]
    if keep_empty:
        return fields
    return [field for field in fields if not is_empty(field)]


def read_csv_file(
    path: str | Path,
    max_line_length: Optional[int] = None,
    delimiter: Optional[str] = None,
    enclosure: Optional[str] = None,
    escape: Optional[str] = None,
    detect_line_endings: bool = True,
) -> Optional[List[List[Any]]]:
    """Read a whole CSV file, converting each row with primitive_array().

    ``detect_line_endings`` is installed as the line-ending setting while the
    file is read. When on, files using ``\\n``, ``\\r\\n`` or ``\\r`` all
    parse; when off, a bare ``\\r`` is not a row end and such files fail.
    Blank lines give empty rows.

    Args:
        path: Path to the file, read as UTF-8.
        max_line_length: Longest accepted line in characters, 0 for unbounded.
        delimiter: Field separator.
        enclosure: Quote character.
        escape: Escape character, "" to disable.
        detect_line_endings: Recognise a bare ``\\r`` as a row terminator.

    Returns:
        The converted rows, or None if the file cannot be opened or read, or
        if the ``PRIMVAL_CSV_*`` configuration is invalid. Errors are logged,
        never raised.

    Raises:
        pydantic.ValidationError: If an explicitly passed dialect argument is
            invalid.
    """
    try:
        dialect = _resolve_dialect(
            max_line_length=max_line_length,
            delimiter=delimiter,
            enclosure=enclosure,
            escape=escape,
        )
    except ConfigurationError as e:
        logger.warning("Could not read CSV file %s: %s", path, e)
        return None

    with auto_detect_line_endings(detect_line_endings) as setting:
        try:
            with open(path, "r", encoding="utf-8", newline=setting.newline) as handle:
                lines = _prepare_lines(handle, dialect)
                rows = [primitive_array(row) for row in csv.reader(lines, **dialect.reader_options())]
        except Exception as e:  # noqa: BLE001 - failures are reported as None
            logger.warning("Could not read CSV file %s: %s", path, e, exc_info=True)
            return None

    logger.debug("Read %d rows from %s", len(rows), path)
    return rows
