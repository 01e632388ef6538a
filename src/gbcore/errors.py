"""
gbcore Error Hierarchy
======================

This module defines the exception hierarchy for the LR35902 core.
All exceptions inherit from GBCoreError, allowing a host to catch every
fatal emulation condition with a single except clause.

Exception Hierarchy
-------------------
GBCoreError (base)
├── UnrecognizedOpcodeError - byte has no entry in the decode tables
├── UnimplementedInstructionError - decoded, but no execute handler
└── MemoryAccessError - address outside the memory bus

Design Philosophy
-----------------
Every error here is fatal. The core never recovers from them and never
downgrades them to a no-op; the host decides how to report them. Each
exception keeps the raw values that caused it as attributes so tests and
front-ends can inspect them without parsing the message.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from typing import Any


# =============================================================================
# Base Exception Class
# =============================================================================

class GBCoreError(Exception):
    """
    Base exception for all gbcore errors.

    Catch this to handle any fatal condition raised by the CPU:

        try:
            cpu.run(10_000)
        except GBCoreError as e:
            print(f"Emulation stopped: {e}")
    """
    pass


# =============================================================================
# Decode / Execute Exceptions
# =============================================================================

class UnrecognizedOpcodeError(GBCoreError):
    """
    Opcode byte has no mapping in the decode tables.

    Raised by CPU.step() (and Instruction.from_byte()) when decoding fails.
    Prefixed opcodes are rendered with a "cb" marker in front of the hex
    digits, so 0xCB 0x37 reads as "0xcb37".

    Attributes:
        opcode: The opcode byte that failed to decode
        prefixed: True if the byte followed the 0xCB prefix
    """

    def __init__(self, opcode: int, prefixed: bool = False):
        self.opcode = opcode
        self.prefixed = prefixed
        super().__init__(f"Unknown instruction found for: {self.description}")

    @property
    def description(self) -> str:
        """Hex rendering of the opcode, e.g. '0x3e' or '0xcb37'."""
        marker = "cb" if self.prefixed else ""
        return f"0x{marker}{self.opcode:02x}"


class UnimplementedInstructionError(GBCoreError):
    """
    Instruction decoded successfully but the CPU has no handler for it.

    HALT is the one decoded instruction in the current table that lands
    here.

    Attributes:
        instruction: The decoded instruction value
    """

    def __init__(self, instruction: Any):
        self.instruction = instruction
        super().__init__(
            f"Instruction: {instruction} ({instruction!r}) not implemented"
        )


# =============================================================================
# Memory Exceptions
# =============================================================================

class MemoryAccessError(GBCoreError):
    """
    Memory access outside the bus.

    Addresses are never wrapped; anything at or beyond the configured
    size is a fault.

    Attributes:
        address: The offending address
        size: Number of bytes the bus holds
    """

    def __init__(self, address: int, size: int):
        self.address = address
        self.size = size
        super().__init__(
            f"Memory access out of range: ${address:04X} "
            f"(bus size ${size:04X})"
        )
