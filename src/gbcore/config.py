"""
Core Configuration
==================

Construction-time settings for a CPU instance.

Example:
    >>> from gbcore import CPU, CoreConfig, LEGACY_MEMORY_SIZE
    >>> cpu = CPU(CoreConfig(memory_size=LEGACY_MEMORY_SIZE))
    >>> cpu.memory.size
    65535
"""

from dataclasses import dataclass


# Full 16-bit address space
MEMORY_SIZE = 0x10000

# Earlier sizing that leaves $FFFF unreachable
LEGACY_MEMORY_SIZE = 0xFFFF


@dataclass(frozen=True)
class CoreConfig:
    """
    Configuration for CPU initialization.

    Attributes:
        memory_size: Bytes in the memory bus (1 to 0x10000). Default
                     covers the full 16-bit address space.
        trace: Log every executed instruction at DEBUG level.
    """
    memory_size: int = MEMORY_SIZE
    trace: bool = False

    def __post_init__(self):
        if not 0 < self.memory_size <= MEMORY_SIZE:
            raise ValueError(
                f"memory_size must be 1-{MEMORY_SIZE}, got {self.memory_size}"
            )
