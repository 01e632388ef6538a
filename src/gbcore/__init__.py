"""
gbcore - LR35902 Instruction-Execution Core
===========================================

This package emulates the instruction core of the Sharp LR35902, the 8-bit
processor in the original Game Boy: register file, flags, a flat memory
bus, the opcode decoder and the fetch/decode/execute engine.

Only a subset of the instruction set is implemented: NOP, 8-bit loads
between registers and (HL), PUSH/POP, ADD A,r, and conditional or
unconditional JP, CALL and RET. Any other opcode stops the run with an
error. Interrupts, timers, video, audio and cartridge banking are not
part of this package.

Quick Start
-----------
    >>> from gbcore import CPU
    >>> cpu = CPU()
    >>> cpu.load_program(bytes([0x00, 0xC3, 0x00, 0x01]))  # NOP; JP $0100
    >>> cpu.step(); cpu.step()
    Nop()
    Jump(test=<JumpTest.ALWAYS: ''>)
    >>> f"${cpu.pc:04X}"
    '$0100'

Or trace a raw binary from the command line:
    $ gbtrace program.bin --steps 20

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

__version__ = "1.0.0"
__author__ = "Hugo José Pinto & Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from gbcore.config import CoreConfig, MEMORY_SIZE, LEGACY_MEMORY_SIZE
from gbcore.errors import (
    GBCoreError,
    UnrecognizedOpcodeError,
    UnimplementedInstructionError,
    MemoryAccessError,
)
from gbcore.cpu import (
    CPU,
    CPUState,
    Flag,
    FlagsRegister,
    RegisterPair,
    Registers,
    MemoryBus,
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

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Configuration
    "CoreConfig",
    "MEMORY_SIZE",
    "LEGACY_MEMORY_SIZE",
    # Exception hierarchy
    "GBCoreError",
    "UnrecognizedOpcodeError",
    "UnimplementedInstructionError",
    "MemoryAccessError",
    # CPU
    "CPU",
    "CPUState",
    "Flag",
    "FlagsRegister",
    "RegisterPair",
    "Registers",
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
]
