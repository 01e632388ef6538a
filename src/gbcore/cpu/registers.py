"""
LR35902 Register File
=====================

Seven 8-bit general registers (A, B, C, D, E, H, L) plus the flags
register F. The 16-bit pairs AF, BC, DE and HL are views over two 8-bit
registers, high register first. They are computed on every access and
never stored separately.

AF is special: its low byte is the packed flags byte, so only the high
nibble of a value written through AF survives.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from enum import Enum

from .flags import FlagsRegister


class RegisterPair(Enum):
    """16-bit register pair selector."""
    AF = "af"
    BC = "bc"
    DE = "de"
    HL = "hl"


# (high register, low register) for each pair; AF's low half is F
_PAIR_HALVES = {
    RegisterPair.AF: ("a", "f"),
    RegisterPair.BC: ("b", "c"),
    RegisterPair.DE: ("d", "e"),
    RegisterPair.HL: ("h", "l"),
}


class Registers:
    """
    CPU register file.

    Writes to the 8-bit registers are masked to 8 bits, matching the
    hardware's wraparound.

    Example:
        >>> r = Registers()
        >>> r.bc = 0xF00F
        >>> r.b, r.c
        (240, 15)
        >>> r.af = 0x0FFF
        >>> hex(r.af)
        '0xff0'
    """

    def __init__(self):
        self._a = 0
        self._b = 0
        self._c = 0
        self._d = 0
        self._e = 0
        self._h = 0
        self._l = 0
        self.f = FlagsRegister()

    # ========================================
    # 8-bit Registers
    # ========================================

    @property
    def a(self) -> int:
        """Accumulator (8-bit)."""
        return self._a

    @a.setter
    def a(self, value: int) -> None:
        self._a = value & 0xFF

    @property
    def b(self) -> int:
        return self._b

    @b.setter
    def b(self, value: int) -> None:
        self._b = value & 0xFF

    @property
    def c(self) -> int:
        return self._c

    @c.setter
    def c(self, value: int) -> None:
        self._c = value & 0xFF

    @property
    def d(self) -> int:
        return self._d

    @d.setter
    def d(self, value: int) -> None:
        self._d = value & 0xFF

    @property
    def e(self) -> int:
        return self._e

    @e.setter
    def e(self, value: int) -> None:
        self._e = value & 0xFF

    @property
    def h(self) -> int:
        return self._h

    @h.setter
    def h(self, value: int) -> None:
        self._h = value & 0xFF

    @property
    def l(self) -> int:
        return self._l

    @l.setter
    def l(self, value: int) -> None:
        self._l = value & 0xFF

    # ========================================
    # 16-bit Pairs
    # ========================================

    def get_pair(self, pair: RegisterPair) -> int:
        """
        Read a register pair as a 16-bit value.

        Args:
            pair: Which pair to read

        Returns:
            (high << 8) | low, with the flags byte as AF's low byte
        """
        high_name, low_name = _PAIR_HALVES[pair]
        high = getattr(self, high_name)
        if pair is RegisterPair.AF:
            low = self.f.to_byte()
        else:
            low = getattr(self, low_name)
        return (high << 8) | low

    def set_pair(self, pair: RegisterPair, value: int) -> None:
        """
        Write a 16-bit value into a register pair.

        Args:
            pair: Which pair to write
            value: 16-bit value; high byte goes to the first register
        """
        value &= 0xFFFF
        high_name, low_name = _PAIR_HALVES[pair]
        setattr(self, high_name, value >> 8)
        if pair is RegisterPair.AF:
            self.f = FlagsRegister.from_byte(value & 0xFF)
        else:
            setattr(self, low_name, value & 0xFF)

    @property
    def af(self) -> int:
        """AF pair (A:F). Low nibble always reads as zero."""
        return self.get_pair(RegisterPair.AF)

    @af.setter
    def af(self, value: int) -> None:
        self.set_pair(RegisterPair.AF, value)

    @property
    def bc(self) -> int:
        """BC pair (B:C)."""
        return self.get_pair(RegisterPair.BC)

    @bc.setter
    def bc(self, value: int) -> None:
        self.set_pair(RegisterPair.BC, value)

    @property
    def de(self) -> int:
        """DE pair (D:E)."""
        return self.get_pair(RegisterPair.DE)

    @de.setter
    def de(self, value: int) -> None:
        self.set_pair(RegisterPair.DE, value)

    @property
    def hl(self) -> int:
        """HL pair (H:L). Also the address register for (HL) operands."""
        return self.get_pair(RegisterPair.HL)

    @hl.setter
    def hl(self, value: int) -> None:
        self.set_pair(RegisterPair.HL, value)

    def reset(self) -> None:
        """Clear every register and flag."""
        self.a = self.b = self.c = self.d = self.e = self.h = self.l = 0
        self.f = FlagsRegister()

    def __repr__(self) -> str:
        return (
            f"Registers(a=${self.a:02X} f={self.f} b=${self.b:02X} "
            f"c=${self.c:02X} d=${self.d:02X} e=${self.e:02X} "
            f"h=${self.h:02X} l=${self.l:02X})"
        )
