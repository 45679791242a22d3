"""Command-line entry point tests."""
import pytest

from passgen.cli import EXIT_CONFIGURATION_ERROR, main
from passgen.config import settings


class TestCliSuccess:
    """Tests for successful runs."""

    def test_default_policy_prints_one_password(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert len(lines) == 1
        assert len(lines[0]) == settings.output_length

    def test_seed_is_reproducible(self, capsys):
        assert main(["--seed", "42"]) == 0
        first = capsys.readouterr().out
        assert main(["--seed", "42"]) == 0
        second = capsys.readouterr().out
        assert first == second

    def test_custom_policy(self, capsys):
        args = [
            "--length", "10",
            "--min-lower", "2",
            "--min-upper", "2",
            "--min-numeric", "2",
            "--min-special", "4",
            "--special-chars", "#",
        ]
        assert main(args) == 0
        password = capsys.readouterr().out.strip()
        assert len(password) == 10
        assert password.count("#") == 4

    def test_zero_length_prints_empty_line(self, capsys):
        args = ["--length", "0", "--min-lower", "0", "--min-upper", "0", "--min-numeric", "0"]
        assert main(args) == 0
        assert capsys.readouterr().out == "\n"


class TestCliErrors:
    """Tests for configuration failures."""

    def test_length_below_minimums(self, capsys):
        assert main(["--length", "3"]) == EXIT_CONFIGURATION_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error:" in captured.err
        assert "3" in captured.err

    def test_special_minimum_without_alphabet(self, capsys):
        assert main(["--min-special", "1", "--special-chars", ""]) == EXIT_CONFIGURATION_ERROR
        assert capsys.readouterr().out == ""

    def test_negative_minimum(self, capsys):
        assert main(["--min-lower", "-1"]) == EXIT_CONFIGURATION_ERROR
        assert "non-negative" in capsys.readouterr().err

    def test_unknown_flag_exits(self):
        with pytest.raises(SystemExit):
            main(["--bogus"])

    def test_rejected_event_emitted(self, capsys, recording_sink):
        main(["--length", "1"])
        assert recording_sink.events[0][0] == "password_rejected"
        assert recording_sink.events[0][1]["source"] == "cli"

    @pytest.mark.parametrize("specials", ["éa", "*a"])
    def test_non_punctuation_specials_rejected(self, capsys, specials):
        args = ["--min-special", "3", "--special-chars", specials, "--seed", "1"]
        assert main(args) == EXIT_CONFIGURATION_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error:" in captured.err

    def test_length_over_limit_rejected(self, capsys):
        args = ["--length", str(settings.max_output_length + 1)]
        assert main(args) == EXIT_CONFIGURATION_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert str(settings.max_output_length) in captured.err
