"""The system-level wiring of an A3000 machine."""

from __future__ import annotations

import os

from oak import log
from oak.arm2.cpu import Arm2
from oak.chipset.device import SystemBus
from oak.chipset.ioc import Ioc
from oak.chipset.memc import Memc
from oak.chipset.ram import Ram
from oak.chipset.rom import Rom


class A3000:
    """The CPU, controllers and memories sharing one system bus."""

    def __init__(self) -> None:
        self.system_bus = SystemBus()
        self.arm2 = Arm2(self.system_bus)
        self.ioc = Ioc(self.system_bus)
        self.memc = Memc(self.system_bus)
        self.ram = Ram(self.system_bus)
        self.rom = Rom(self.system_bus)
        log.debug("A3000 initialised")

    def load_rom(self, path: str | os.PathLike) -> int:
        """Load a ROM image; return its size in bytes."""
        return self.rom.load(path)

    def print_state(self) -> None:
        """Log the CPU state."""
        self.arm2.print_state()

    def reset(self) -> None:
        """Put the memory controller and CPU into their reset state."""
        self.memc.reset()
        self.arm2.reset()

    def tick(self) -> None:
        """Advance the machine by one clock tick.

        On failure the CPU state is logged and RuntimeError is raised.
        """
        log.log(log.Level.TRACE, "Stepping A3000")
        try:
            self.arm2.tick()
            self.memc.tick()
            self.rom.tick()
        except Exception as exc:
            self.arm2.print_state()
            raise RuntimeError(str(exc)) from exc