"""
LR35902 Instruction Set and Decoder
===================================

Defines the decoded instruction vocabulary and the opcode tables that map
raw bytes to it.

Instructions are immutable values. Each variant carries only the operands
it needs, so the CPU can dispatch with a single ``match`` over the
variant classes:

    Load(target, source)   LD r,r' / LD r,(HL) / LD (HL),r
    Push(target)           PUSH rr
    Pop(target)            POP rr
    Add(target)            ADD A,r
    Nop()                  NOP
    Halt()                 HALT
    Jump(test)             JP [cc,]a16
    Call(test)             CALL [cc,]a16
    Return(test)           RET [cc]

Decode Tables
-------------
The LR35902 has two 256-entry opcode tables. The second one is selected
by the 0xCB prefix byte. Only a subset of the unprefixed table is
populated; every other byte, and every prefixed byte, decodes to None.
Unpopulated opcodes never fall back to a neighbouring instruction.

Usage:
    >>> decode(0x41, prefixed=False)
    Load(target=<LoadByteTarget.B: 'B'>, source=<LoadByteSource.C: 'C'>)
    >>> str(decode(0xC2, prefixed=False))
    'JP NZ,a16'
    >>> decode(0x3E, prefixed=False) is None
    True

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import UnrecognizedOpcodeError
from .flags import FlagsRegister
from .registers import RegisterPair


# Lead byte selecting the prefixed opcode table
PREFIX_BYTE = 0xCB


# =============================================================================
# Operand Selectors
# =============================================================================

class LoadByteTarget(Enum):
    """Destination of an 8-bit load."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    H = "H"
    L = "L"
    HLI = "(HL)"  # Memory at the address held in HL


class LoadByteSource(Enum):
    """Source of an 8-bit load."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    H = "H"
    L = "L"
    D8 = "d8"     # Immediate byte following the opcode
    HLI = "(HL)"  # Memory at the address held in HL


class ArithmeticTarget(Enum):
    """Register operand of an 8-bit arithmetic instruction."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    H = "H"
    L = "L"


# PUSH/POP operate on the same pairs the register file exposes
StackTarget = RegisterPair


class JumpTest(Enum):
    """Branch condition for JP, CALL and RET."""
    NOT_ZERO = "NZ"
    ZERO = "Z"
    NOT_CARRY = "NC"
    CARRY = "C"
    ALWAYS = ""

    def holds(self, flags: FlagsRegister) -> bool:
        """Evaluate the condition against the current flags."""
        match self:
            case JumpTest.NOT_ZERO:
                return not flags.zero
            case JumpTest.ZERO:
                return flags.zero
            case JumpTest.NOT_CARRY:
                return not flags.carry
            case JumpTest.CARRY:
                return flags.carry
            case JumpTest.ALWAYS:
                return True


# =============================================================================
# Instruction Variants
# =============================================================================

@dataclass(frozen=True)
class Instruction:
    """
    Base class for decoded instructions.

    Never instantiated directly; use decode() or from_byte().
    """

    @staticmethod
    def from_byte(byte: int, prefixed: bool = False) -> "Instruction":
        """
        Decode an opcode byte, raising on failure.

        Args:
            byte: Opcode byte (0-255)
            prefixed: True if the byte followed the 0xCB prefix

        Returns:
            The decoded instruction

        Raises:
            UnrecognizedOpcodeError: If the byte has no table entry
        """
        instruction = decode(byte, prefixed)
        if instruction is None:
            raise UnrecognizedOpcodeError(byte, prefixed)
        return instruction


@dataclass(frozen=True)
class Load(Instruction):
    """LD target,source (8-bit)."""
    target: LoadByteTarget
    source: LoadByteSource

    def __str__(self) -> str:
        return f"LD {self.target.value},{self.source.value}"


@dataclass(frozen=True)
class Push(Instruction):
    """PUSH rr."""
    target: StackTarget

    def __str__(self) -> str:
        return f"PUSH {self.target.name}"


@dataclass(frozen=True)
class Pop(Instruction):
    """POP rr."""
    target: StackTarget

    def __str__(self) -> str:
        return f"POP {self.target.name}"


@dataclass(frozen=True)
class Add(Instruction):
    """ADD A,r."""
    target: ArithmeticTarget

    def __str__(self) -> str:
        return f"ADD A,{self.target.value}"


@dataclass(frozen=True)
class Nop(Instruction):
    """NOP."""

    def __str__(self) -> str:
        return "NOP"


@dataclass(frozen=True)
class Halt(Instruction):
    """HALT. Decoded, not executed."""

    def __str__(self) -> str:
        return "HALT"


def _conditional(mnemonic: str, test: JumpTest, operand: str = "") -> str:
    """Format 'JP NZ,a16', 'JP a16', 'RET C', 'RET'."""
    parts = [p for p in (test.value, operand) if p]
    if not parts:
        return mnemonic
    return f"{mnemonic} {','.join(parts)}"


@dataclass(frozen=True)
class Jump(Instruction):
    """JP [cc,]a16."""
    test: JumpTest

    def __str__(self) -> str:
        return _conditional("JP", self.test, "a16")


@dataclass(frozen=True)
class Call(Instruction):
    """CALL [cc,]a16."""
    test: JumpTest

    def __str__(self) -> str:
        return _conditional("CALL", self.test, "a16")


@dataclass(frozen=True)
class Return(Instruction):
    """RET [cc]."""
    test: JumpTest

    def __str__(self) -> str:
        return _conditional("RET", self.test)


# =============================================================================
# Opcode Tables
# =============================================================================

# Operand order encoded in bits 5-3 (target) and 2-0 (source) of LD r,r'
_LD_OPERAND_ORDER = ("B", "C", "D", "E", "H", "L", "HLI", "A")

HALT_OPCODE = 0x76

_CONDITION_ORDER = (
    JumpTest.ALWAYS,
    JumpTest.NOT_ZERO,
    JumpTest.ZERO,
    JumpTest.NOT_CARRY,
    JumpTest.CARRY,
)


def _build_unprefixed_table() -> tuple[Optional[Instruction], ...]:
    """
    Build the 256-entry unprefixed decode table.

    Returns:
        Tuple indexed by opcode; None marks an unrecognized opcode.
    """
    table: list[Optional[Instruction]] = [None] * 256

    table[0x00] = Nop()

    # LD r,r' block; the (HL),(HL) slot is HALT
    for opcode in range(0x40, 0x80):
        if opcode == HALT_OPCODE:
            table[opcode] = Halt()
            continue
        target = _LD_OPERAND_ORDER[(opcode >> 3) & 0x07]
        source = _LD_OPERAND_ORDER[opcode & 0x07]
        table[opcode] = Load(LoadByteTarget[target], LoadByteSource[source])

    # PUSH / POP
    for push_op, pop_op, pair in (
        (0xF5, 0xF1, RegisterPair.AF),
        (0xC5, 0xC1, RegisterPair.BC),
        (0xD5, 0xD1, RegisterPair.DE),
        (0xE5, 0xE1, RegisterPair.HL),
    ):
        table[push_op] = Push(pair)
        table[pop_op] = Pop(pair)

    # ADD A,r (0x86 ADD A,(HL) is not populated)
    for opcode, target in (
        (0x87, ArithmeticTarget.A),
        (0x80, ArithmeticTarget.B),
        (0x81, ArithmeticTarget.C),
        (0x82, ArithmeticTarget.D),
        (0x83, ArithmeticTarget.E),
        (0x84, ArithmeticTarget.H),
        (0x85, ArithmeticTarget.L),
    ):
        table[opcode] = Add(target)

    # Control flow, in ALWAYS, NZ, Z, NC, C order
    for variant, opcodes in (
        (Jump, (0xC3, 0xC2, 0xCA, 0xD2, 0xDA)),
        (Call, (0xCD, 0xC4, 0xCC, 0xD4, 0xDC)),
        (Return, (0xC9, 0xC0, 0xC8, 0xD0, 0xD8)),
    ):
        for opcode, test in zip(opcodes, _CONDITION_ORDER):
            table[opcode] = variant(test)

    return tuple(table)


# TODO: populate with the rotate/shift and BIT/SET/RES groups once the CPU
# grows handlers for them.
_PREFIXED_TABLE: tuple[Optional[Instruction], ...] = (None,) * 256

_UNPREFIXED_TABLE = _build_unprefixed_table()


def decode(byte: int, prefixed: bool = False) -> Optional[Instruction]:
    """
    Look up an opcode byte in the decode tables.

    Args:
        byte: Opcode byte (0-255)
        prefixed: True to use the 0xCB-prefixed table

    Returns:
        The decoded instruction, or None if the opcode is unrecognized
    """
    if not 0 <= byte <= 0xFF:
        return None
    if prefixed:
        return _PREFIXED_TABLE[byte]
    return _UNPREFIXED_TABLE[byte]


def recognized_opcodes(prefixed: bool = False) -> list[int]:
    """List every opcode byte that decodes in the given table."""
    table = _PREFIXED_TABLE if prefixed else _UNPREFIXED_TABLE
    return [opcode for opcode, entry in enumerate(table) if entry is not None]
