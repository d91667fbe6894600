"""The shared system bus and the base class of every chipset device."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum

# The address bus is narrower than a word; this selects the usable bits.
ADDRESS_BUS_MASK = 0x0FFFFFFF


class ReadWrite(IntEnum):
    """Direction of a bus transfer."""

    READ = 0
    WRITE = 1


class ByteWord(IntEnum):
    """Width of a bus transfer."""

    BYTE = 0
    WORD = 1


@dataclass
class SystemBus:
    """Signals shared between the CPU, MEMC and memory devices."""

    address_bus: int = 0
    data_bus: int = 0
    read_write: ReadWrite = ReadWrite.READ
    byte_word: ByteWord = ByteWord.BYTE
    abort_memory_access: bool = False
    enable_rom: bool = False


class Device(ABC):
    """A chip attached to the system bus and advanced one clock tick at a time."""

    def __init__(self, system_bus: SystemBus) -> None:
        self.system_bus = system_bus

    def tick(self) -> None:
        """Advance the device by one clock tick."""
        self._do_tick()

    @abstractmethod
    def _do_tick(self) -> None:
        """Perform one tick of the device's work."""