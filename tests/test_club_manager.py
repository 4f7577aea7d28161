import pytest

from core.club_manager import ClubManager
from core.exceptions import InputFormatError
from services.parsing_service import parse_input


def test_run_from_text(example_input, example_output):
    assert ClubManager.run_from_text(example_input) == example_output


def test_run_from_file(example_file, example_output):
    assert ClubManager.run_from_file(example_file) == example_output


def test_run_session_with_parsed_input(example_input, example_output):
    config, events = parse_input(example_input.splitlines())

    assert ClubManager.run_session(config, events) == example_output


def test_malformed_line_fails_whole_run(example_input):
    with pytest.raises(InputFormatError):
        ClubManager.run_from_text(example_input + "16:00 9 client5\n")


def test_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        ClubManager.run_from_file(tmp_path / "missing.txt")
