"""
LR35902 CPU Emulator
====================

Fetch/decode/execute engine for the Game Boy's 8-bit processor.

The LR35902 is a Sharp derivative of the Intel 8080 / Zilog Z80 with:
- 8-bit registers: A, B, C, D, E, H, L and flags F
- 16-bit views: AF, BC, DE, HL
- 16-bit registers: SP (stack pointer), PC (program counter)
- Flags: Z (zero), N (subtract), H (half-carry), C (carry)
- Little-endian 16-bit operands in the instruction stream

Each call to step() runs exactly one instruction:

    1. Read the byte at PC
    2. If it is the 0xCB prefix, read the opcode from PC+1
    3. Decode; unknown opcodes raise UnrecognizedOpcodeError
    4. Execute; the handler returns the next PC, which is committed

Handlers never touch PC themselves; they compute and return the next
value. Decoded instructions without a handler raise
UnimplementedInstructionError. Both errors are fatal for the run.

The stack grows downward. A 16-bit push stores the high byte first, at
SP-1, then the low byte at SP-2; pop reverses that exactly.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import CoreConfig
from ..errors import UnimplementedInstructionError, UnrecognizedOpcodeError
from . import alu
from .instructions import (
    PREFIX_BYTE,
    Add,
    ArithmeticTarget,
    Call,
    Instruction,
    Jump,
    Load,
    LoadByteSource,
    LoadByteTarget,
    Nop,
    Pop,
    Push,
    Return,
    decode,
)
from .memory import MemoryBus
from .registers import Registers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CPUState:
    """
    Snapshot of the architectural registers.

    All values are plain ints:
    - a, b, c, d, e, h, l: 8-bit unsigned
    - f: packed flags byte (low nibble always 0)
    - pc, sp: 16-bit unsigned
    """
    a: int = 0
    f: int = 0
    b: int = 0
    c: int = 0
    d: int = 0
    e: int = 0
    h: int = 0
    l: int = 0
    sp: int = 0
    pc: int = 0

    def __str__(self) -> str:
        return (
            f"AF=${(self.a << 8) | self.f:04X} BC=${(self.b << 8) | self.c:04X} "
            f"DE=${(self.d << 8) | self.e:04X} HL=${(self.h << 8) | self.l:04X} "
            f"SP=${self.sp:04X} PC=${self.pc:04X}"
        )


class CPU:
    """
    LR35902 CPU with its own register file and memory bus.

    A CPU owns all of its state; separate instances share nothing.

    Attributes:
        config: The CoreConfig used to build this instance
        registers: The register file (A-L and flags)
        memory: The memory bus

    Example:
        >>> cpu = CPU()
        >>> cpu.load_program(bytes([0x80]))  # ADD A,B
        >>> cpu.registers.b = 0x42
        >>> cpu.step()
        Add(target=<ArithmeticTarget.B: 'B'>)
        >>> f"A=${cpu.registers.a:02X}"
        'A=$42'
    """

    def __init__(self, config: Optional[CoreConfig] = None):
        """
        Initialize a CPU with zeroed registers and memory.

        Args:
            config: CoreConfig for memory size and tracing. Defaults to a
                    full 64KB bus with tracing off.
        """
        self.config = config or CoreConfig()
        self.registers = Registers()
        self.memory = MemoryBus(self.config.memory_size)
        self._pc = 0
        self._sp = 0

    # ========================================
    # Program Counter / Stack Pointer
    # ========================================

    @property
    def pc(self) -> int:
        """Program counter (16-bit)."""
        return self._pc

    @pc.setter
    def pc(self, value: int) -> None:
        self._pc = value & 0xFFFF

    @property
    def sp(self) -> int:
        """Stack pointer (16-bit)."""
        return self._sp

    @sp.setter
    def sp(self, value: int) -> None:
        self._sp = value & 0xFFFF

    @property
    def state(self) -> CPUState:
        """Current register snapshot."""
        r = self.registers
        return CPUState(
            a=r.a, f=r.f.to_byte(),
            b=r.b, c=r.c, d=r.d, e=r.e, h=r.h, l=r.l,
            sp=self.sp, pc=self.pc,
        )

    def reset(self) -> None:
        """Zero registers, PC, SP and memory."""
        self.registers.reset()
        self.memory.clear()
        self.pc = 0
        self.sp = 0

    def load_program(self, data: bytes, address: int = 0) -> None:
        """
        Copy a program image into memory. PC is left unchanged.

        Raises:
            MemoryAccessError: If the image does not fit
        """
        self.memory.load(data, address)
        logger.debug(f"Loaded {len(data)} bytes at ${address:04X}")

    # ========================================
    # Main Execution Loop
    # ========================================

    def step(self) -> Instruction:
        """
        Fetch, decode and execute exactly one instruction.

        Returns:
            The instruction that was executed

        Raises:
            UnrecognizedOpcodeError: Opcode not in the decode tables
            UnimplementedInstructionError: No handler for the instruction
            MemoryAccessError: An access left the memory bus
        """
        instruction_byte = self.memory.read_byte(self.pc)
        prefixed = instruction_byte == PREFIX_BYTE
        if prefixed:
            instruction_byte = self.read_next_byte()

        instruction = decode(instruction_byte, prefixed)
        if instruction is None:
            error = UnrecognizedOpcodeError(instruction_byte, prefixed)
            logger.debug(f"${self.pc:04X}: {error}")
            raise error

        if self.config.trace:
            logger.debug(f"${self.pc:04X}: {instruction}")

        self.pc = self.execute(instruction)
        return instruction

    def run(self, max_steps: int) -> int:
        """
        Execute max_steps instructions.

        Errors propagate immediately and end the run.

        Returns:
            Number of instructions executed
        """
        for _ in range(max_steps):
            self.step()
        return max_steps

    def execute(self, instruction: Instruction) -> int:
        """
        Execute a decoded instruction.

        Args:
            instruction: Instruction to run, as produced by decode()

        Returns:
            The next program counter value (not yet committed)

        Raises:
            UnimplementedInstructionError: No handler for the instruction
        """
        match instruction:
            case Load(target=target, source=source):
                self.load(target, source)
                if source is LoadByteSource.D8:
                    return (self.pc + 2) & 0xFFFF
                return (self.pc + 1) & 0xFFFF

            case Push(target=pair):
                self.push(self.registers.get_pair(pair))
                return (self.pc + 1) & 0xFFFF

            case Pop(target=pair):
                self.registers.set_pair(pair, self.pop())
                return (self.pc + 1) & 0xFFFF

            case Add(target=target):
                self.add(self._arithmetic_operand(target))
                return (self.pc + 1) & 0xFFFF

            case Nop():
                return (self.pc + 1) & 0xFFFF

            case Jump(test=test):
                return self.jump(test.holds(self.registers.f))

            case Call(test=test):
                return self.call(test.holds(self.registers.f))

            case Return(test=test):
                return self.return_(test.holds(self.registers.f))

            case _:
                logger.debug(f"${self.pc:04X}: no handler for {instruction}")
                raise UnimplementedInstructionError(instruction)

    # ========================================
    # Operand Fetch
    # ========================================

    def read_next_byte(self) -> int:
        """Read the byte after the opcode (PC+1)."""
        return self.memory.read_byte((self.pc + 1) & 0xFFFF)

    def read_next_word(self) -> int:
        """Read the little-endian word at PC+1 (low) and PC+2 (high)."""
        low = self.memory.read_byte((self.pc + 1) & 0xFFFF)
        high = self.memory.read_byte((self.pc + 2) & 0xFFFF)
        return (high << 8) | low

    # ========================================
    # Instruction Helpers
    # ========================================

    def _arithmetic_operand(self, target: ArithmeticTarget) -> int:
        return getattr(self.registers, target.name.lower())

    def load(self, target: LoadByteTarget, source: LoadByteSource) -> None:
        """Copy an 8-bit value from source to target."""
        match source:
            case LoadByteSource.D8:
                value = self.read_next_byte()
            case LoadByteSource.HLI:
                value = self.memory.read_byte(self.registers.hl)
            case _:
                value = getattr(self.registers, source.name.lower())

        if target is LoadByteTarget.HLI:
            self.memory.write_byte(self.registers.hl, value)
        else:
            setattr(self.registers, target.name.lower(), value)

    def add(self, value: int) -> None:
        """ADD A,value: accumulate into A and overwrite all four flags."""
        self.registers.a, self.registers.f = alu.add8(self.registers.a, value)

    def jump(self, should_jump: bool) -> int:
        """
        Resolve a JP a16.

        Returns:
            The little-endian target if should_jump, otherwise PC+3
            (opcode plus two address bytes)
        """
        if should_jump:
            return self.read_next_word()
        return (self.pc + 3) & 0xFFFF

    def call(self, should_jump: bool) -> int:
        """
        Resolve a CALL a16.

        When taken, the return address PC+3 is pushed before jumping.
        Not taken leaves the stack alone.
        """
        next_pc = (self.pc + 3) & 0xFFFF
        if should_jump:
            self.push(next_pc)
            return self.read_next_word()
        return next_pc

    def return_(self, should_jump: bool) -> int:
        """Resolve a RET: pop the return address if taken, else PC+1."""
        if should_jump:
            return self.pop()
        return (self.pc + 1) & 0xFFFF

    # ========================================
    # Stack Operations
    # ========================================

    def push(self, value: int) -> None:
        """Push a 16-bit value: high byte at SP-1, low byte at SP-2."""
        self.sp -= 1
        self.memory.write_byte(self.sp, (value >> 8) & 0xFF)
        self.sp -= 1
        self.memory.write_byte(self.sp, value & 0xFF)

    def pop(self) -> int:
        """Pop a 16-bit value: low byte at SP, high byte at SP+1."""
        low = self.memory.read_byte(self.sp)
        self.sp += 1
        high = self.memory.read_byte(self.sp)
        self.sp += 1
        return (high << 8) | low
