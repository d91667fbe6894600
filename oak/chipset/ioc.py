"""The input-output controller."""

from __future__ import annotations

from oak import log
from oak.chipset.device import Device, SystemBus


class Ioc(Device):
    """The I/O controller; it does nothing on the bus yet."""

    def __init__(self, system_bus: SystemBus) -> None:
        super().__init__(system_bus)
        log.debug("IOC initialised")

    def _do_tick(self) -> None:
        pass