"""Tests for parsing the arrivals file and writing the report file."""

import pytest

from zoo_intake.db.intake_file import (
    ArtifactOpenError,
    load_intake_records,
    parse_line,
    parse_lines,
    write_report,
)
from zoo_intake.models.animal import IntakeRecord


class TestParseLine:
    """parse_line() tests."""

    def test_well_formed_line(self):
        assert parse_line("Leo,5,Lion") == IntakeRecord(name="Leo", age=5, species="Lion")

    @pytest.mark.parametrize(
        "line",
        ["OnlyOneField", "Name,NotANumber,Species", "Leo,5", "Leo,5,", "", "Leo,,Lion"],
    )
    def test_malformed_line_is_rejected(self, line):
        assert parse_line(line) is None

    def test_whitespace_before_age_is_skipped(self):
        record = parse_line("Leo, 7,Lion")
        assert record.age == 7

    def test_signed_age(self):
        assert parse_line("Old,-3,Turtle").age == -3
        assert parse_line("Old,+4,Turtle").age == 4

    def test_age_out_of_int_range(self):
        assert parse_line("Big,99999999999,Whale") is None

    def test_empty_name_is_allowed(self):
        assert parse_line(",2,Bear") == IntakeRecord(name="", age=2, species="Bear")

    def test_species_is_not_trimmed(self):
        record = parse_line("Leo,5,Lion \r")
        assert record.species == "Lion \r"
        assert parse_line("Leo,5, Lion").species == " Lion"

    def test_any_single_separator_after_age(self):
        record = parse_line("Leo,5;Lion")
        assert record.species == "Lion"

    def test_only_one_separator_is_consumed(self):
        record = parse_line("Leo,5,,Lion")
        assert record.species == ",Lion"

    def test_name_stops_at_first_comma(self):
        record = parse_line("Mr,5,Lion,Extra")
        assert record.name == "Mr"
        assert record.species == "Lion,Extra"


class TestParseLines:
    """parse_lines() tests."""

    def test_malformed_lines_do_not_abort(self):
        lines = ["OnlyOneField\n", "Leo,5,Lion\n", "Name,NotANumber,Species\n", "Spot,3,Hyena"]
        records = list(parse_lines(lines))
        assert [r.name for r in records] == ["Leo", "Spot"]

    def test_trailing_newline_is_removed(self):
        (record,) = parse_lines(["Baloo,10,Bear\n"])
        assert record.species == "Bear"


class TestLoadIntakeRecords:
    """load_intake_records() tests."""

    def test_loads_records_in_order(self, tmp_path):
        path = tmp_path / "arrivingAnimals.txt"
        path.write_text("Leo,5,Lion\nbad line\nZelda,2,Zebra\n")
        records = load_intake_records(path)
        assert [(r.name, r.species) for r in records] == [("Leo", "Lion"), ("Zelda", "Zebra")]

    def test_keeps_carriage_returns(self, tmp_path):
        path = tmp_path / "arrivingAnimals.txt"
        path.write_bytes(b"Leo,5,Lion\r\n")
        (record,) = load_intake_records(path)
        assert record.species == "Lion\r"

    def test_lone_carriage_return_does_not_end_line(self, tmp_path):
        path = tmp_path / "arrivingAnimals.txt"
        path.write_bytes(b"Leo,5,Lion\rSpot,3,Hyena\n")
        (record,) = load_intake_records(path)
        assert record.name == "Leo"
        assert record.species == "Lion\rSpot,3,Hyena"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ArtifactOpenError) as excinfo:
            load_intake_records(tmp_path / "missing.txt")
        assert excinfo.value.direction == "read"
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)


class TestWriteReport:
    """write_report() tests."""

    def test_overwrites_existing_file(self, tmp_path):
        path = tmp_path / "newAnimals.txt"
        path.write_text("old contents that are longer than the new ones\n")
        write_report("new\n", path)
        assert path.read_text() == "new\n"

    def test_unopenable_output(self, tmp_path):
        with pytest.raises(ArtifactOpenError) as excinfo:
            write_report("report\n", tmp_path / "no-such-dir" / "newAnimals.txt")
        assert excinfo.value.direction == "write"
