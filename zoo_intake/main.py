"""Command-line entry point: arrivals file in, intake report out."""

import logging
import sys
from pathlib import Path

from zoo_intake.config import settings
from zoo_intake.db.intake_file import ArtifactOpenError, load_intake_records, write_report
from zoo_intake.services.classifier_service import classify_records
from zoo_intake.services.report_service import render_report

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


def run(input_path: str | Path | None = None, output_path: str | Path | None = None) -> int:
    """Process the arrivals file and write the report.

    Returns the process exit status: 0 on success, 1 when either file
    cannot be opened.
    """
    input_path = Path(input_path or settings.INPUT_FILE)
    output_path = Path(output_path or settings.OUTPUT_FILE)

    try:
        records = load_intake_records(input_path)
    except ArtifactOpenError as exc:
        logger.error("%s (%s)", exc, exc.__cause__)
        print("Error: Could not open input file.", file=sys.stderr)
        return 1

    animals = classify_records(records)
    report = render_report(animals)

    try:
        write_report(report, output_path)
    except ArtifactOpenError as exc:
        logger.error("%s (%s)", exc, exc.__cause__)
        print("Error: Could not open output file.", file=sys.stderr)
        return 1

    print(f"Animal processing complete. Report generated in {output_path}")
    return 0


def main() -> None:
    configure_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
