"""Flat-file access: parse the arrivals file and write the report."""

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from zoo_intake.config import settings
from zoo_intake.models.animal import IntakeRecord

logger = logging.getLogger(__name__)

# Name up to the first comma, an integer age (leading whitespace allowed),
# one ignored separator, then a non-empty species.
_LINE_RE = re.compile(
    r"(?P<name>[^,]*),[ \t\n\v\f\r]*(?P<age>[+-]?[0-9]+)[^0-9](?P<species>.+)",
    re.DOTALL,
)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ArtifactOpenError(OSError):
    """Raised when the input or output file cannot be opened."""

    def __init__(self, direction: str, path: str | Path) -> None:
        super().__init__(f"Could not open {direction} artifact: {path}")
        self.direction = direction
        self.path = Path(path)


def parse_line(line: str) -> IntakeRecord | None:
    """Parse a ``Name,Age,Species`` line.

    Returns None when the line does not fit the format. Nothing around the
    fields is trimmed, so a trailing carriage return stays in the species.
    """
    match = _LINE_RE.fullmatch(line)
    if match is None:
        return None
    age = int(match["age"])
    if not _INT_MIN <= age <= _INT_MAX:
        return None
    return IntakeRecord(name=match["name"], age=age, species=match["species"])


def parse_lines(lines: Iterable[str]) -> Iterator[IntakeRecord]:
    """Yield a record for every well-formed line, skipping the rest."""
    for lineno, line in enumerate(lines, start=1):
        record = parse_line(line.removesuffix("\n"))
        if record is None:
            logger.debug("Skipping malformed line %d: %r", lineno, line)
            continue
        yield record


def load_intake_records(path: str | Path | None = None) -> list[IntakeRecord]:
    """Read every intake record from the arrivals file."""
    path = Path(path or settings.INPUT_FILE)
    try:
        f = open(path, "r", encoding=settings.ENCODING, errors="surrogateescape", newline="\n")
    except OSError as exc:
        raise ArtifactOpenError("read", path) from exc
    with f:
        records = list(parse_lines(f))
    logger.info("Loaded %d intake records from %s", len(records), path)
    return records


def write_report(report: str, path: str | Path | None = None) -> Path:
    """Write the rendered report, replacing any previous file."""
    path = Path(path or settings.OUTPUT_FILE)
    try:
        f = open(path, "w", encoding=settings.ENCODING, errors="surrogateescape", newline="")
    except OSError as exc:
        raise ArtifactOpenError("write", path) from exc
    with f:
        f.write(report)
    logger.info("Wrote report (%d characters) to %s", len(report), path)
    return path
