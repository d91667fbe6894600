"""The memory controller: memory map selection and control register."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Optional

from oak import log
from oak.chipset.device import Device, SystemBus

ADDRESS_LOOKUP_TABLE_SIZE = 128
PAGE_SIZE_MASK = 0x00000005
OS_MODE_SELECT_MASK = 0x00001000
_PAGE_SIZE_SHIFT = 2
_OS_MODE_SELECT_SHIFT = 12
_WORD_MASK = 0xFFFFFFFF


class PageSize(IntEnum):
    """Physical page size selection."""

    FOUR_KBYTES = 0
    EIGHT_KBYTES = 1
    SIXTEEN_KBYTES = 2
    THIRTY_TWO_KBYTES = 3

    @property
    def description(self) -> str:
        return ("4KBytes", "8KBytes", "16KBytes", "32KBytes")[self]


class OSModeSelect(IntEnum):
    """Whether OS mode is selected."""

    DESELECTED = 0
    SELECTED = 1

    @property
    def description(self) -> str:
        return ("Deselected", "Selected")[self]


class MapRegion(IntEnum):
    """Regions of the address map."""

    LOGICAL_RAM = 0
    PHYSICAL_RAM = 1
    IO = 2
    LOW_ROM = 3
    HIGH_ROM = 4


# Inclusive start and end address of every region.
READ_MAP = {
    MapRegion.LOGICAL_RAM: (0x0000000, 0x2000000),
    MapRegion.PHYSICAL_RAM: (0x2000001, 0x3000000),
    MapRegion.IO: (0x3000001, 0x3400000),
    MapRegion.LOW_ROM: (0x3400001, 0x3800000),
    MapRegion.HIGH_ROM: (0x3800001, 0x3FFFFFF),
}

_ROM_REGIONS = frozenset({MapRegion.LOW_ROM, MapRegion.HIGH_ROM})


class Memc(Device):
    """The memory controller.

    Each tick asks the active memory map which region is addressed and
    enables the ROM on the bus when that region is ROM.
    """

    def __init__(self, system_bus: SystemBus) -> None:
        super().__init__(system_bus)
        self.lookup_table = [0] * ADDRESS_LOOKUP_TABLE_SIZE
        self.control_register = 0
        self._map: Optional[Callable[[], MapRegion]] = None
        log.debug("MEMC initialised")

    def reset(self) -> None:
        """Map ROM over the whole address space so the CPU boots from it."""
        log.debug("Reset")
        self._map = self._reset_region

    def enable_default_memory_map(self) -> None:
        """Switch to the normal memory map."""
        self._map = self._default_region

    @staticmethod
    def _reset_region() -> MapRegion:
        return MapRegion.LOW_ROM

    @staticmethod
    def _default_region() -> MapRegion:
        return MapRegion.LOGICAL_RAM

    @property
    def page_size(self) -> PageSize:
        """The page size held in the control register."""
        size = PageSize((self.control_register & PAGE_SIZE_MASK) >> _PAGE_SIZE_SHIFT)
        log.debug("Getting memory page size: ", size.description)
        return size

    @page_size.setter
    def page_size(self, size: PageSize) -> None:
        size = PageSize(size)
        log.debug("Setting memory page size: ", size.description)
        self.control_register &= ~PAGE_SIZE_MASK & _WORD_MASK
        self.control_register |= size << _PAGE_SIZE_SHIFT

    @property
    def os_mode_select(self) -> OSModeSelect:
        """The OS mode selection held in the control register."""
        select = OSModeSelect(
            (self.control_register & OS_MODE_SELECT_MASK) >> _OS_MODE_SELECT_SHIFT
        )
        log.debug("Getting OS mode select: ", select.description)
        return select

    @os_mode_select.setter
    def os_mode_select(self, select: OSModeSelect) -> None:
        select = OSModeSelect(select)
        log.debug("Setting OS mode select: ", select.description)
        self.control_register &= ~OS_MODE_SELECT_MASK & _WORD_MASK
        self.control_register |= select << _OS_MODE_SELECT_SHIFT

    def _do_tick(self) -> None:
        if self._map is None:
            raise RuntimeError("MEMC memory map has not been configured")
        self.system_bus.enable_rom = self._map() in _ROM_REGIONS