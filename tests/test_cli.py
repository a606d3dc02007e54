#!/usr/bin/env python3
"""
Tests for the command line entry point.
"""

import sys
import os

# Add the src directory to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import io
import json

import pytest
from student_registry import __version__
from student_registry.cli.main import LOG_LEVEL_ENV, main

ANSWERS = [
    "Ivan", "Petrenko", "Olehovych", "15.05.2000", "2018", "Law",
    "Olena", "Kovalenko", "", "2001-03-02", "2019", "Computer Science",
    "2024-05-15", "e",
]


class InterruptedStdin(io.StringIO):
    """Stdin that raises KeyboardInterrupt once its lines are used up."""

    def readline(self, *args):
        line = super().readline(*args)
        if not line:
            raise KeyboardInterrupt
        return line


def feed(monkeypatch, lines):
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{line}\n" for line in lines)))


class TestMain:
    """Test the student-registry command."""

    def test_text_report(self, monkeypatch, capsys):
        """Test a complete run without the final pause."""
        feed(monkeypatch, ANSWERS)

        assert main(["--no-pause"]) == 0

        out = capsys.readouterr().out
        assert "=== Person details ===" in out
        assert "Student age: 23 years" in out
        assert "Occurrences of 'e' in the surname: 2" in out
        assert "Press Enter" not in out

    def test_waits_for_enter(self, monkeypatch, capsys):
        """Test that the run ends with a keypress prompt."""
        feed(monkeypatch, ANSWERS + [""])

        assert main([]) == 0
        assert capsys.readouterr().out.rstrip().endswith("Press Enter to exit...")

    def test_json_output(self, monkeypatch, capsys):
        """Test that the JSON report follows the text report."""
        feed(monkeypatch, ANSWERS)

        main(["--no-pause", "--format", "json"])

        out = capsys.readouterr().out
        payload = json.loads(out[out.index("\n{") + 1:])
        assert payload["student_age"] == 23
        assert payload["letter_count"] == 2
        assert payload["person"]["surname"] == "Petrenko"
        assert payload["student"]["specialty"] == "Computer Science"
        assert payload["roles"]["student"] == "Student of Computer Science, admitted in 2019"

    def test_date_parts_entry(self, monkeypatch, capsys):
        """Test dates typed as day, month and year."""
        answers = (
            ["Ivan", "Petrenko", "", "15", "5", "2000", "2018", "Law"]
            + ["Olena", "Kovalenko", "", "2", "3", "2001", "2019", "History"]
            + ["14", "5", "2024", "t"]
        )
        feed(monkeypatch, answers)

        main(["--no-pause", "--date-entry", "parts"])

        out = capsys.readouterr().out
        assert "Birth date, day: " in out
        assert "Student age: 23 years" in out

    def test_validation_error_still_exits_cleanly(self, monkeypatch, capsys):
        """Test that a rejected value is reported and the exit status is zero."""
        feed(monkeypatch, ["", "Petrenko", "", ""])

        assert main([]) == 0

        out = capsys.readouterr().out
        assert "Error: first_name: must not be blank" in out
        assert "Press Enter to exit..." in out

    def test_input_ends_early(self, monkeypatch, capsys):
        """Test that closing stdin mid-run is reported."""
        feed(monkeypatch, ["Ivan"])

        assert main(["--no-pause"]) == 0
        assert "Input aborted." in capsys.readouterr().out

    def test_version(self, capsys):
        """Test the version flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_interrupt_at_final_pause(self, monkeypatch, capsys):
        """Test that Ctrl-C while waiting for Enter exits cleanly."""
        stdin = InterruptedStdin("".join(f"{line}\n" for line in ANSWERS))
        monkeypatch.setattr("sys.stdin", stdin)

        assert main([]) == 0

        out = capsys.readouterr().out
        assert "Student age: 23 years" in out
        assert out.rstrip().endswith("Input aborted.")

    def test_invalid_log_level_from_environment(self, monkeypatch, capsys):
        """Test that an unknown level in the environment is rejected."""
        monkeypatch.setenv(LOG_LEVEL_ENV, "verbose")

        with pytest.raises(SystemExit) as exc_info:
            main(["--no-pause"])

        assert exc_info.value.code == 2
        err = capsys.readouterr().err
        assert LOG_LEVEL_ENV in err
        assert "'VERBOSE'" in err

    def test_log_level_from_environment(self, monkeypatch, capsys):
        """Test that a known level in the environment is accepted in any case."""
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        feed(monkeypatch, ANSWERS)

        assert main(["--no-pause"]) == 0
        assert "Student age: 23 years" in capsys.readouterr().out
