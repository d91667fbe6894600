"""The RAM and its interface to the system bus."""

from __future__ import annotations

from oak import log
from oak.chipset.device import Device, SystemBus

RAM_SIZE = 1000000
_BYTE_MASK = 0xFF


class Ram(Device):
    """Byte-addressed random access memory of ``RAM_SIZE`` bytes."""

    def __init__(self, system_bus: SystemBus) -> None:
        super().__init__(system_bus)
        self.data = bytearray(RAM_SIZE)
        log.debug("RAM initialised")

    def _check(self, address: int, action: str) -> None:
        if not 0 <= address < len(self.data):
            log.error(f"Failed to {action} RAM, address out of range: ", address)
            raise IndexError(f"RAM address out of range: {address:#x}")

    def read(self, address: int) -> int:
        """Return the byte at ``address``; raise IndexError if out of range."""
        self._check(address, "read")
        return self.data[address]

    def write(self, address: int, byte: int) -> None:
        """Store the low eight bits of ``byte`` at ``address``.

        Raises IndexError if the address is out of range.
        """
        self._check(address, "write")
        self.data[address] = byte & _BYTE_MASK

    def _do_tick(self) -> None:
        pass