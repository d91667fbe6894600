import pytest

from oak.a3000 import A3000
from oak.arm2.cpsr import Mode


@pytest.fixture
def rom_file(tmp_path):
    path = tmp_path / "image.rom"
    path.write_bytes(b"\x12\x34\x56\x78\x9a\xbc\xde\xf0")
    return path


def test_load_rom_returns_size(rom_file):
    machine = A3000()
    assert machine.load_rom(rom_file) == 8


def test_load_missing_rom_raises(tmp_path):
    machine = A3000()
    with pytest.raises(OSError):
        machine.load_rom(tmp_path / "missing.rom")


def test_reset_puts_cpu_in_supervisor_mode():
    machine = A3000()
    machine.reset()
    assert machine.arm2.register_file.mode is Mode.SVC


def test_tick_after_reset_reads_first_rom_word(rom_file):
    machine = A3000()
    machine.reset()
    machine.load_rom(rom_file)
    machine.tick()
    assert machine.system_bus.enable_rom is True
    assert machine.system_bus.data_bus == 0x12345678


def test_second_tick_fetches_rom_word_into_pipeline(rom_file):
    machine = A3000()
    machine.reset()
    machine.load_rom(rom_file)
    machine.tick()
    machine.tick()
    assert machine.arm2.pipeline.fetch == 0x12345678


def test_tick_without_rom_raises_runtime_error():
    machine = A3000()
    machine.reset()
    with pytest.raises(RuntimeError, match="Illegal memory access"):
        machine.tick()


def test_tick_without_reset_raises_runtime_error(rom_file):
    machine = A3000()
    machine.load_rom(rom_file)
    with pytest.raises(RuntimeError):
        machine.tick()