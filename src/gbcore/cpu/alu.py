"""
Arithmetic-Logic Unit
=====================

Pure flag computations for the 8-bit arithmetic instructions. Each
function takes the operands and returns the wrapped result together with
the complete new flags value, leaving register writes to the CPU.

Only ADD is wired to an opcode today.
"""

from .flags import FlagsRegister


def half_carry_add(a: int, b: int) -> bool:
    """True if adding the low nibbles carries into bit 4."""
    return (a & 0x0F) + (b & 0x0F) > 0x0F


def add8(a: int, b: int) -> tuple[int, FlagsRegister]:
    """
    Add two 8-bit values.

    All four flags are overwritten:
        Z  result is zero
        N  cleared
        H  carry out of bit 3
        C  carry out of bit 7

    Args:
        a: Accumulator value before the add
        b: Operand

    Returns:
        (result & 0xFF, new flags)
    """
    total = a + b
    result = total & 0xFF
    flags = FlagsRegister(
        zero=result == 0,
        subtract=False,
        half_carry=half_carry_add(a, b),
        carry=total > 0xFF,
    )
    return result, flags
