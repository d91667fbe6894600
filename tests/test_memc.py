import pytest

from oak.chipset.device import SystemBus
from oak.chipset.memc import (
    OS_MODE_SELECT_MASK,
    Memc,
    OSModeSelect,
    PageSize,
)


@pytest.fixture
def bus():
    return SystemBus()


def test_tick_after_reset_enables_rom(bus):
    memc = Memc(bus)
    memc.reset()
    memc.tick()
    assert bus.enable_rom is True


def test_default_map_disables_rom(bus):
    memc = Memc(bus)
    memc.reset()
    memc.tick()
    memc.enable_default_memory_map()
    memc.tick()
    assert bus.enable_rom is False


def test_tick_without_map_raises(bus):
    memc = Memc(bus)
    with pytest.raises(RuntimeError):
        memc.tick()


def test_os_mode_select_round_trip(bus):
    memc = Memc(bus)
    assert memc.os_mode_select is OSModeSelect.DESELECTED
    memc.os_mode_select = OSModeSelect.SELECTED
    assert memc.os_mode_select is OSModeSelect.SELECTED
    assert memc.control_register == OS_MODE_SELECT_MASK
    memc.os_mode_select = OSModeSelect.DESELECTED
    assert memc.os_mode_select is OSModeSelect.DESELECTED
    assert memc.control_register == 0


@pytest.mark.parametrize("size", [PageSize.FOUR_KBYTES, PageSize.EIGHT_KBYTES])
def test_page_size_round_trip(bus, size):
    memc = Memc(bus)
    memc.page_size = size
    assert memc.page_size is size


def test_page_size_and_os_mode_are_independent(bus):
    memc = Memc(bus)
    memc.os_mode_select = OSModeSelect.SELECTED
    memc.page_size = PageSize.EIGHT_KBYTES
    assert memc.os_mode_select is OSModeSelect.SELECTED
    memc.os_mode_select = OSModeSelect.DESELECTED
    assert memc.page_size is PageSize.EIGHT_KBYTES


def test_descriptions(bus):
    memc = Memc(bus)
    assert memc.page_size.description == "4KBytes"
    assert memc.os_mode_select.description == "Deselected"
    memc.os_mode_select = OSModeSelect.SELECTED
    assert memc.os_mode_select.description == "Selected"
    memc.page_size = PageSize.EIGHT_KBYTES
    assert memc.page_size.description == "8KBytes"