"""
LR35902 Flags Register
======================

The F register packs four condition flags into its high nibble:

        7  6  5  4  3  2  1  0
        Z  N  H  C  0  0  0  0

The low nibble does not exist in hardware. It always reads back as zero,
and anything written there is discarded.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass
from enum import IntFlag


class Flag(IntFlag):
    """Bit masks of the flags inside the F byte."""
    C = 0x10  # Carry
    H = 0x20  # Half-carry (carry out of bit 3)
    N = 0x40  # Subtract
    Z = 0x80  # Zero


# Bits that can ever be set in F
FLAGS_MASK = 0xF0


@dataclass
class FlagsRegister:
    """
    The four CPU condition flags.

    Attributes:
        zero: Set when the result of an operation is zero
        subtract: Set when the last arithmetic operation was a subtraction
        half_carry: Set on a carry out of the low nibble
        carry: Set when the result overflowed 8 bits (or borrowed)

    Example:
        >>> f = FlagsRegister.from_byte(0b1010_0000)
        >>> f.zero, f.half_carry
        (True, True)
        >>> f.to_byte()
        160
    """
    zero: bool = False
    subtract: bool = False
    half_carry: bool = False
    carry: bool = False

    def to_byte(self) -> int:
        """Pack the flags into a byte. Bits 3-0 are always zero."""
        value = 0
        if self.zero:
            value |= Flag.Z
        if self.subtract:
            value |= Flag.N
        if self.half_carry:
            value |= Flag.H
        if self.carry:
            value |= Flag.C
        return int(value)

    @classmethod
    def from_byte(cls, value: int) -> "FlagsRegister":
        """Unpack flags from a byte, ignoring the low nibble."""
        return cls(
            zero=bool(value & Flag.Z),
            subtract=bool(value & Flag.N),
            half_carry=bool(value & Flag.H),
            carry=bool(value & Flag.C),
        )

    def __int__(self) -> int:
        return self.to_byte()

    def __str__(self) -> str:
        """Render as 'ZNHC' with '-' for clear flags, e.g. 'Z-H-'."""
        return "".join(
            name if state else "-"
            for name, state in (
                ("Z", self.zero),
                ("N", self.subtract),
                ("H", self.half_carry),
                ("C", self.carry),
            )
        )
