"""
gbtrace - LR35902 Execution Tracer
==================================

Loads a raw binary into a fresh CPU and steps through it, printing one
line per executed instruction followed by the register state.

Usage Examples
--------------
Trace from address 0:
    $ gbtrace program.bin

Load at $0100 and set up a stack:
    $ gbtrace program.bin --address 0x0100 --sp 0xFFFE

Limit the number of steps:
    $ gbtrace program.bin --steps 50

There is no cartridge header parsing, banking or interrupt handling; the
binary is copied byte-for-byte into flat memory.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
import sys
from pathlib import Path

import click

from gbcore import __version__
from gbcore.config import CoreConfig, LEGACY_MEMORY_SIZE, MEMORY_SIZE
from gbcore.cpu import CPU
from gbcore.cli.errors import ExitCode, handle_cli_exception


def parse_address(value: str) -> int:
    """
    Parse a 16-bit address given as 0x-hex, $-hex or decimal.

    Raises:
        click.BadParameter: If the value is malformed or out of range
    """
    try:
        if value.lower().startswith("0x"):
            address = int(value, 16)
        elif value.startswith("$"):
            address = int(value[1:], 16)
        else:
            address = int(value)
    except ValueError:
        raise click.BadParameter(f"Invalid address '{value}'")

    if not 0 <= address <= 0xFFFF:
        raise click.BadParameter("Address must be 0-65535 (0x0000-0xFFFF)")
    return address


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-a", "--address",
    type=str,
    default="0",
    help="Load address and initial PC (hex with 0x or $ prefix, or decimal). Default: 0",
)
@click.option(
    "--sp",
    "stack_pointer",
    type=str,
    default="0",
    help="Initial stack pointer. Default: 0",
)
@click.option(
    "-n", "--steps",
    type=click.IntRange(min=0),
    default=100,
    show_default=True,
    help="Maximum number of instructions to execute",
)
@click.option(
    "--legacy-memory",
    is_flag=True,
    help="Size memory at 0xFFFF bytes so that $FFFF faults",
)
@click.option(
    "-q", "--quiet",
    is_flag=True,
    help="Print only the final register state",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (DEBUG logging)",
)
@click.version_option(version=__version__, prog_name="gbtrace")
def main(
    input_file: Path,
    address: str,
    stack_pointer: str,
    steps: int,
    legacy_memory: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """
    Trace LR35902 machine code.

    INPUT_FILE is a raw binary copied into memory at --address.

    Execution stops after --steps instructions or at the first unknown or
    unimplemented opcode, which exits with status 1.

    Examples:

        # Trace 20 instructions of a program linked at $0100
        gbtrace code.bin --address 0x0100 --steps 20

        # Final state only
        gbtrace code.bin -q
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    try:
        base_address = parse_address(address)
        initial_sp = parse_address(stack_pointer)
        data = input_file.read_bytes()
    except (click.BadParameter, OSError) as e:
        handle_cli_exception(e, verbose)

    if not data:
        click.echo(f"Error: {input_file} is empty", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    config = CoreConfig(
        memory_size=LEGACY_MEMORY_SIZE if legacy_memory else MEMORY_SIZE,
        trace=verbose,
    )
    cpu = CPU(config)

    executed = 0
    try:
        cpu.load_program(data, base_address)
        cpu.pc = base_address
        cpu.sp = initial_sp

        if verbose:
            click.echo(f"Input file: {input_file} ({len(data)} bytes)", err=True)
            click.echo(f"Load address: ${base_address:04X}", err=True)

        for _ in range(steps):
            pc = cpu.pc
            instruction = cpu.step()
            executed += 1
            if not quiet:
                click.echo(f"${pc:04X}: {str(instruction):<12} {cpu.state}  F={cpu.registers.f}")
    except Exception as e:
        click.echo(f"; {executed} instructions executed", err=True)
        click.echo(f"; {cpu.state}", err=True)
        handle_cli_exception(e, verbose)

    click.echo(f"; {executed} instructions executed")
    click.echo(f"; {cpu.state}  F={cpu.registers.f}")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
