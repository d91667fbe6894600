"""The ROM and its interface to the system bus."""

from __future__ import annotations

import os

from oak import log
from oak.chipset.device import ByteWord, Device, SystemBus


class Rom(Device):
    """Read-only memory loaded from an image file."""

    def __init__(self, system_bus: SystemBus) -> None:
        super().__init__(system_bus)
        self.data = b""
        log.debug("ROM initialised")

    def load(self, path: str | os.PathLike) -> int:
        """Replace the ROM content with the file at ``path``.

        Returns the number of bytes loaded. Raises OSError if the file
        cannot be read and ValueError if it is empty.
        """
        try:
            with open(path, "rb") as image:
                content = image.read()
        except OSError:
            log.error("Failed to open ROM file: ", path)
            raise
        if not content:
            log.error("Failed to load ROM file contents: ", path)
            raise ValueError(f"ROM file is empty: {path}")
        self.data = content
        log.info("Successfully loaded ROM file: ", path, ", ", len(content), " bytes")
        return len(content)

    def read_byte(self, address: int) -> int:
        """Return the byte at ``address``; raise IndexError if out of range."""
        if not 0 <= address < len(self.data):
            log.error("Failed to read ROM, address out of range: ", address)
            raise IndexError(f"ROM address out of range: {address:#x}")
        return self.data[address]

    def read_word(self, address: int) -> int:
        """Return the big-endian word at ``address``; raise IndexError if out of range."""
        if not 0 <= address <= len(self.data) - 4:
            log.error("Failed to read ROM, address out of range: ", address)
            raise IndexError(f"ROM address out of range: {address:#x}")
        return int.from_bytes(self.data[address:address + 4], "big")

    def _do_tick(self) -> None:
        bus = self.system_bus
        if bus.abort_memory_access or not bus.enable_rom:
            return
        try:
            if bus.byte_word is ByteWord.BYTE:
                self.read_byte(bus.address_bus)
                # Byte reads validate the address but drive zero onto the bus.
                bus.data_bus = 0
            else:
                bus.data_bus = self.read_word(bus.address_bus)
        except IndexError as exc:
            raise RuntimeError("Illegal memory access attempted") from exc
        log.log(
            log.Level.TRACE,
            f"Wrote value from ROM memory into data bus: 0x{bus.data_bus:x}",
        )