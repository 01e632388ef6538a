"""
gbtrace CLI Tests
=================

Tests for the gbtrace command-line tracer.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import click
import pytest
from click.testing import CliRunner

from gbcore.cli.errors import ExitCode
from gbcore.cli.gbtrace import main, parse_address


@pytest.fixture
def runner():
    return CliRunner()


# =============================================================================
# Address Parsing
# =============================================================================

class TestParseAddress:
    """Test address argument parsing."""

    @pytest.mark.parametrize("text,value", [
        ("0", 0),
        ("256", 0x0100),
        ("0x0150", 0x0150),
        ("0XFFFE", 0xFFFE),
        ("$C000", 0xC000),
    ])
    def test_valid(self, text, value):
        assert parse_address(text) == value

    @pytest.mark.parametrize("text", ["zz", "0x10000", "-1", "$"])
    def test_invalid(self, text):
        with pytest.raises(click.BadParameter):
            parse_address(text)


# =============================================================================
# CLI Tests
# =============================================================================

class TestGbtraceCLI:
    """Tests for the gbtrace CLI tool."""

    def test_cli_help(self, runner):
        """Test CLI help output."""
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Trace LR35902 machine code" in result.output

    def test_cli_version(self, runner):
        """Test CLI version output."""
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "gbtrace" in result.output

    def test_trace_lines(self, runner, tmp_path):
        """Each executed instruction gets a trace line."""
        program = tmp_path / "prog.bin"
        program.write_bytes(bytes([0x00, 0x41, 0xC3, 0x00, 0x00]))  # NOP; LD B,C; JP $0000

        result = runner.invoke(main, [str(program), "--steps", "3"])

        assert result.exit_code == 0
        assert "$0000: NOP" in result.output
        assert "$0001: LD B,C" in result.output
        assert "$0002: JP a16" in result.output
        assert "; 3 instructions executed" in result.output
        assert "PC=$0000" in result.output

    def test_load_address(self, runner, tmp_path):
        """--address sets both the load address and PC."""
        program = tmp_path / "prog.bin"
        program.write_bytes(bytes([0x00, 0x00]))

        result = runner.invoke(main, [str(program), "--address", "0x0150", "-n", "2", "-q"])

        assert result.exit_code == 0
        assert "$0150: NOP" not in result.output  # quiet
        assert "PC=$0152" in result.output

    def test_stack_pointer_option(self, runner, tmp_path):
        """--sp sets the initial stack pointer used by CALL."""
        program = tmp_path / "prog.bin"
        program.write_bytes(bytes([0xCD, 0x10, 0x00]))  # CALL $0010

        result = runner.invoke(main, [str(program), "--sp", "$D000", "-n", "1"])

        assert result.exit_code == 0
        assert "SP=$CFFE" in result.output
        assert "PC=$0010" in result.output

    def test_unknown_opcode_exits(self, runner, tmp_path):
        """An unknown opcode stops the trace with exit code 1."""
        program = tmp_path / "prog.bin"
        program.write_bytes(bytes([0x00, 0x3E, 0x42]))

        result = runner.invoke(main, [str(program)])

        assert result.exit_code == ExitCode.EMULATION_ERROR
        assert "Unknown instruction found for: 0x3e" in result.output
        assert "; 1 instructions executed" in result.output

    def test_halt_exits(self, runner, tmp_path):
        """HALT is reported as not implemented."""
        program = tmp_path / "prog.bin"
        program.write_bytes(bytes([0x76]))

        result = runner.invoke(main, [str(program)])

        assert result.exit_code == ExitCode.EMULATION_ERROR
        assert "not implemented" in result.output

    def test_legacy_memory(self, runner, tmp_path):
        """--legacy-memory makes $FFFF unreachable."""
        program = tmp_path / "prog.bin"
        program.write_bytes(bytes([0x00]))

        ok = runner.invoke(main, [str(program), "-a", "0xFFFF", "-n", "1"])
        assert ok.exit_code == 0

        result = runner.invoke(main, [str(program), "-a", "0xFFFE", "--legacy-memory"])
        assert result.exit_code == ExitCode.EMULATION_ERROR
        assert "out of range" in result.output

    def test_image_too_large(self, runner, tmp_path):
        """An image that runs past the end of memory is rejected."""
        program = tmp_path / "prog.bin"
        program.write_bytes(bytes(4))

        result = runner.invoke(main, [str(program), "-a", "0xFFFE"])

        assert result.exit_code == ExitCode.EMULATION_ERROR

    def test_invalid_address(self, runner, tmp_path):
        program = tmp_path / "prog.bin"
        program.write_bytes(bytes([0x00]))

        result = runner.invoke(main, [str(program), "--address", "zz"])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Invalid address" in result.output

    def test_empty_file(self, runner, tmp_path):
        program = tmp_path / "empty.bin"
        program.write_bytes(b"")

        result = runner.invoke(main, [str(program)])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "is empty" in result.output

    def test_missing_file(self, runner, tmp_path):
        """click rejects a missing input path."""
        result = runner.invoke(main, [str(tmp_path / "nope.bin")])
        assert result.exit_code == 2
