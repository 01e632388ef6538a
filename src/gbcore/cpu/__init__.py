"""
gbcore CPU Package
==================

LR35902 processor components, leaves first:

- `flags.py`: FlagsRegister (Z/N/H/C packed into the high nibble of F)
- `registers.py`: Register file with AF/BC/DE/HL pair views
- `memory.py`: Flat memory bus
- `alu.py`: Pure flag computations for arithmetic
- `instructions.py`: Instruction variants and the opcode decode tables
- `cpu.py`: Fetch/decode/execute engine

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from .flags import Flag, FlagsRegister
from .registers import RegisterPair, Registers
from .memory import MemoryBus
from .instructions import (
    PREFIX_BYTE,
    HALT_OPCODE,
    Instruction,
    Load,
    Push,
    Pop,
    Add,
    Nop,
    Halt,
    Jump,
    Call,
    Return,
    LoadByteTarget,
    LoadByteSource,
    ArithmeticTarget,
    StackTarget,
    JumpTest,
    decode,
    recognized_opcodes,
)
from .cpu import CPU, CPUState

__all__ = [
    # Flags / registers
    "Flag",
    "FlagsRegister",
    "RegisterPair",
    "Registers",
    # Memory
    "MemoryBus",
    # Instructions
    "PREFIX_BYTE",
    "HALT_OPCODE",
    "Instruction",
    "Load",
    "Push",
    "Pop",
    "Add",
    "Nop",
    "Halt",
    "Jump",
    "Call",
    "Return",
    "LoadByteTarget",
    "LoadByteSource",
    "ArithmeticTarget",
    "StackTarget",
    "JumpTest",
    "decode",
    "recognized_opcodes",
    # Engine
    "CPU",
    "CPUState",
]
