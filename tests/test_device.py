import pytest

from oak.chipset.device import ByteWord, Device, ReadWrite, SystemBus


class _Counter(Device):
    def __init__(self, system_bus):
        super().__init__(system_bus)
        self.ticks = 0

    def _do_tick(self):
        self.ticks += 1
        self.system_bus.data_bus = self.ticks


def test_system_bus_defaults():
    bus = SystemBus()
    assert bus.address_bus == 0
    assert bus.data_bus == 0
    assert bus.read_write is ReadWrite.READ
    assert bus.byte_word is ByteWord.BYTE
    assert bus.abort_memory_access is False
    assert bus.enable_rom is False


def test_tick_runs_device_work_on_shared_bus():
    bus = SystemBus()
    device = _Counter(bus)
    device.tick()
    device.tick()
    assert device.ticks == 2
    assert bus.data_bus == 2
    assert device.system_bus is bus


def test_device_is_abstract():
    with pytest.raises(TypeError):
        Device(SystemBus())