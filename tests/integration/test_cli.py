"""Integration tests for the command line interface."""

import io
import logging
import pytest
from pymolmass import __version__
from pymolmass.cli import build_parser, main, run_batch, run_interactive
from pymolmass.parsing.config.settings_parser import Settings


class TestBatchMode:
    """Test cases for --formula evaluation."""
    def test_single_formula(self, element_file, capsys):
        """Test the report printed for a valid formula."""
        assert main([str(element_file), "-f", "C6H12O6"]) == 0
        out = capsys.readouterr().out
        assert out == (
            "The atomic weight of C6H12O6 is 180.16\n"
            "The elements are Carbon, Hydrogen and Oxygen\n"
        )

    def test_unknown_symbol(self, element_file, capsys):
        """Test the diagnostics for an unknown symbol."""
        assert main([str(element_file), "-f", "Xx2"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Xx: no such element\nXx2: not a valid compound\n" in captured.err

    def test_empty_formula(self, element_file, capsys):
        """Test the diagnostic for a formula without symbols."""
        assert main([str(element_file), "-f", "123"]) == 1
        captured = capsys.readouterr()
        assert "123: not a valid compound" in captured.err
        assert "no such element" not in captured.err

    def test_failure_does_not_stop_later_formulas(self, element_file, capsys):
        """Test that each formula is evaluated independently."""
        assert main([str(element_file), "-f", "Xx", "-f", "NaCl"]) == 1
        out = capsys.readouterr().out
        assert "The atomic weight of NaCl is 58.44\n" in out
        assert "The elements are Chlorine and Sodium\n" in out

    def test_decimals_option(self, element_file, capsys):
        """Test the --decimals override."""
        main([str(element_file), "--decimals", "3", "-f", "H2O"])
        assert "The atomic weight of H2O is 18.015\n" in capsys.readouterr().out

    def test_bundled_table_by_default(self, capsys):
        """Test that the bundled table is used without a weights file."""
        assert main(["-f", "Fe2O3"]) == 0
        out = capsys.readouterr().out
        assert "The atomic weight of Fe2O3 is 159.69\n" in out
        assert "The elements are Iron and Oxygen\n" in out

    def test_config_file(self, settings_file, capsys):
        """Test that the settings file supplies the table and precision."""
        assert main(["--config", str(settings_file), "-f", "NaCl"]) == 0
        assert "The atomic weight of NaCl is 58.440\n" in capsys.readouterr().out

    def test_run_batch_streams(self, sample_table):
        """Test run_batch with explicit streams."""
        out, err = io.StringIO(), io.StringIO()
        assert run_batch(["O2", "Q"], sample_table, Settings(), out=out, err=err) == 1
        assert out.getvalue() == "The atomic weight of O2 is 32.00\nThe element is Oxygen\n"
        assert err.getvalue() == "Q: no such element\nQ: not a valid compound\n"


class TestInteractiveMode:
    """Test cases for the prompt loop."""
    def test_read_loop(self, element_file, capsys, monkeypatch):
        """Test prompting, evaluation and the final newline."""
        monkeypatch.setattr("sys.stdin", io.StringIO("NaCl\n123\nCO2\n"))
        assert main([str(element_file)]) == 0
        captured = capsys.readouterr()
        assert captured.out == (
            "Chemical composition? "
            "The atomic weight of NaCl is 58.44\n"
            "The elements are Chlorine and Sodium\n"
            "Chemical composition? "
            "Chemical composition? "
            "The atomic weight of CO2 is 44.01\n"
            "The elements are Carbon and Oxygen\n"
            "Chemical composition? \n"
        )
        assert "123: not a valid compound" in captured.err

    def test_custom_prompt_and_crlf(self, sample_table):
        """Test a custom prompt and stripping of Windows line endings."""
        out, err = io.StringIO(), io.StringIO()
        run_interactive(sample_table, Settings(prompt="> "), stdin=io.StringIO("O2\r\n"), out=out, err=err)
        assert out.getvalue() == "> The atomic weight of O2 is 32.00\nThe element is Oxygen\n> \n"

    def test_empty_input(self, sample_table):
        """Test immediate end of input."""
        out = io.StringIO()
        assert run_interactive(sample_table, Settings(), stdin=io.StringIO(""), out=out) == 0
        assert out.getvalue() == "Chemical composition? \n"


class TestStartupFailures:
    """Test cases for fatal start-up errors."""
    def test_missing_weights_file(self, tmp_path, capsys):
        """Test that a missing table exits with status 1."""
        assert main([str(tmp_path / "missing.txt"), "-f", "H2O"]) == 1
        assert "file not found" in capsys.readouterr().err

    def test_empty_weights_file(self, tmp_path, capsys):
        """Test that an empty table exits with status 1."""
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        assert main([str(path), "-f", "H2O"]) == 1
        assert "no atomic weights there!" in capsys.readouterr().err

    def test_malformed_weights_file(self, tmp_path, capsys):
        """Test that a malformed line exits with status 1."""
        path = tmp_path / "bad.txt"
        path.write_text("1.008 H Hydrogen\n15.999 O\n", encoding="utf-8")
        assert main([str(path)]) == 1
        assert "malformed line 2" in capsys.readouterr().err

    def test_malformed_line_reported_once(self, tmp_path, capsys, caplog):
        """Test that a malformed table produces one diagnostic and no error-level log record."""
        path = tmp_path / "bad.txt"
        path.write_text("1.008 H Hydrogen\n15.999 O\n", encoding="utf-8")
        assert main([str(path), "-f", "H"]) == 1
        assert capsys.readouterr().err.count("malformed line 2") == 1
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]

    def test_unbalanced_quote_in_table(self, tmp_path, capsys):
        """Test that a quote inside a name does not break loading."""
        path = tmp_path / "quoted.txt"
        path.write_text('1.008 H "Hydrogen\n15.999 O Oxygen\n', encoding="utf-8")
        assert main([str(path), "-f", "HO"]) == 0
        out = capsys.readouterr().out
        assert "The atomic weight of HO is 17.01" in out
        assert 'The elements are "Hydrogen and Oxygen' in out

    def test_quoted_symbol_in_table(self, tmp_path, capsys):
        """Test that a quoted symbol is reported as a malformed line."""
        path = tmp_path / "quoted.txt"
        path.write_text('15.999 O Oxygen\n1.008 "H" Hydrogen\n', encoding="utf-8")
        assert main([str(path), "-f", "H2O"]) == 1
        assert "malformed line 2" in capsys.readouterr().err

    def test_settings_path_is_directory(self, tmp_path, capsys):
        """Test that a directory passed as --config exits with status 1."""
        assert main(["--config", str(tmp_path), "-f", "H2O"]) == 1
        assert "Cannot read" in capsys.readouterr().err

    def test_invalid_settings(self, tmp_path, capsys):
        """Test that invalid settings exit with status 1."""
        path = tmp_path / "settings.yaml"
        path.write_text("decimals: -4\n", encoding="utf-8")
        assert main(["--config", str(path), "-f", "H2O"]) == 1
        assert "decimals" in capsys.readouterr().err

    def test_negative_decimals_option(self, element_file, capsys):
        """Test that a negative --decimals exits with status 1."""
        assert main([str(element_file), "--decimals", "-1", "-f", "H2O"]) == 1


class TestParser:
    """Test cases for argument parsing."""
    def test_version(self, capsys):
        """Test the --version flag."""
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_log_level_case_insensitive(self):
        """Test that the log level is normalised to upper case."""
        args = build_parser().parse_args(["--log-level", "debug"])
        assert args.log_level == "DEBUG"
