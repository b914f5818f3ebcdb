"""
Tests for the shecomp command line tool.

Tests:
- Input sources (argument, file, stdin)
- Output modes (compress, padding, no padding)
- Usage errors and core error exit codes
"""

import io

import pytest

from shecomp import __version__
from shecomp.main import main


SHE_MESSAGE = "6bc1bee22e409f96e93d7e117393172aae2d8a571e03ac9c9eb76fac45af8e51"
SHE_OUTPUT = "c7277a0dc1fb853b5f4d9cbd26be40c6"
SHE_KDF_INPUT = "000102030405060708090a0b0c0d0e0f010153484500800000000000000000b0"
SHE_KDF_OUTPUT = "118a46447a770d87828a69c222e2d17e"


class TestInputSources:
    """CLI input selection."""

    def test_positional_argument(self, capsys):
        """Hex given as an argument is compressed."""
        assert main([SHE_MESSAGE]) == 0
        assert capsys.readouterr().out == SHE_OUTPUT

    def test_input_file(self, tmp_path, capsys):
        """Hex read from a file."""
        path = tmp_path / "message.hex"
        path.write_text(SHE_MESSAGE)
        assert main(["-i", str(path)]) == 0
        assert capsys.readouterr().out == SHE_OUTPUT

    def test_stdin(self, monkeypatch, capsys):
        """Hex read from stdin when no argument or file is given."""
        monkeypatch.setattr("sys.stdin", io.StringIO(SHE_MESSAGE))
        assert main([]) == 0
        assert capsys.readouterr().out == SHE_OUTPUT

    def test_file_and_argument_conflict(self, tmp_path):
        """A file and a positional argument together are a usage error."""
        path = tmp_path / "message.hex"
        path.write_text(SHE_MESSAGE)
        with pytest.raises(SystemExit) as exc:
            main(["-i", str(path), SHE_MESSAGE])
        assert exc.value.code == 2

    def test_missing_file(self, tmp_path, capsys):
        """An unreadable input file exits non-zero."""
        assert main(["-i", str(tmp_path / "missing.hex")]) == 1
        assert "cannot read input" in capsys.readouterr().err


class TestOutputModes:
    """CLI output modes."""

    def test_padding_only(self, capsys):
        """-p prints only the padding."""
        assert main(["-p", SHE_MESSAGE]) == 0
        assert capsys.readouterr().out == "80000000000000000000000000000100"

    def test_padding_empty_input(self, capsys):
        """-p with empty input prints one full padding block."""
        assert main(["--padding", ""]) == 0
        assert capsys.readouterr().out == "8" + "0" * 31

    def test_no_padding(self, capsys):
        """-n compresses caller-padded input."""
        assert main(["-n", SHE_KDF_INPUT]) == 0
        assert capsys.readouterr().out == SHE_KDF_OUTPUT

    def test_conflicting_modes(self):
        """-p and -n together are a usage error."""
        with pytest.raises(SystemExit) as exc:
            main(["-p", "-n", SHE_MESSAGE])
        assert exc.value.code == 2

    def test_upper_case_input_lower_case_output(self, capsys):
        """Output is lower-case regardless of input case."""
        assert main([SHE_MESSAGE.upper()]) == 0
        assert capsys.readouterr().out == SHE_OUTPUT

    def test_verbose(self, capsys):
        """-v reports events on stderr, output unchanged."""
        assert main(["-v", SHE_MESSAGE]) == 0
        captured = capsys.readouterr()
        assert captured.out == SHE_OUTPUT
        assert "message_decoded" in captured.err
        assert "compression_done" in captured.err

    def test_version(self, capsys):
        """--version prints the package version."""
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestErrors:
    """Core errors map to exit code 1 with a message on stderr."""

    def test_odd_length(self, capsys):
        """Odd-length input."""
        assert main(["8"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "malformed input" in captured.err

    def test_invalid_char(self, capsys):
        """Non-hex input."""
        assert main(["zz"]) == 1
        assert "invalid hex character" in capsys.readouterr().err

    def test_trailing_newline_on_stdin(self, monkeypatch, capsys):
        """A line terminator is part of the input and is rejected."""
        monkeypatch.setattr("sys.stdin", io.StringIO(SHE_MESSAGE + "\n"))
        assert main([]) == 1
        assert "malformed input" in capsys.readouterr().err

    def test_misaligned_no_padding(self, capsys):
        """-n with input that is not block-aligned."""
        assert main(["-n", "00" * 17]) == 1
        assert "alignment" in capsys.readouterr().err

    def test_verbose_failure_event(self, capsys):
        """-v reports failures as events too."""
        assert main(["-v", "8"]) == 1
        assert "compression_failed" in capsys.readouterr().err
