"""Tests for the training months command line."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path to import cli and flagset modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.cli import main


def test_default_report(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "28",
        "Training needs to be finished in March.",
        "Training needs to be finished in April.",
        "Training needs to be finished in May.",
    ]


def test_months_option(capsys):
    assert main(["--months", "december", "January"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "2049",
        "Training needs to be finished in January.",
        "Training needs to be finished in December.",
    ]


def test_value_option(capsys):
    assert main(["--value", "0"]) == 0
    assert capsys.readouterr().out.splitlines() == ["0"]


def test_flagstring_options(capsys):
    assert main(["--flagstring", "GBBC", "--show-flagstring"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "2049",
        "Flagstring: GBBC",
        "Training needs to be finished in January.",
        "Training needs to be finished in December.",
    ]


@pytest.mark.parametrize("argv", [
    ["--months", "Smarch"],
    ["--flagstring", "XYZ"],
    ["--value", "1", "--months", "May"],
])
def test_bad_input_is_a_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2
    assert capsys.readouterr().out == ""
