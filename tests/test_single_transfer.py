import pytest

from oak.arm2.cpsr import StatusFlag
from oak.arm2.opcodes.single_transfer import (
    SingleTransfer,
    SingleTransferInstruction,
)
from oak.arm2.register_file import RegisterFile


@pytest.fixture
def register_file():
    return RegisterFile()


@pytest.mark.parametrize(
    "code, text",
    [(0, "[LDR] LOAD MEMORY"), (1, "[STR] STORE MEMORY")],
)
def test_descriptions(code, text):
    assert SingleTransferInstruction(code).description == text


def test_always_condition_executes(register_file):
    op = SingleTransfer(0xE4000000, register_file)
    assert op.execute() is True
    assert op.cycle_count == 1


def test_never_condition_skips(register_file):
    op = SingleTransfer(0xF4000000, register_file)
    assert op.execute() is True
    assert op.cycle_count == 0


def test_carry_set_condition(register_file):
    register_file.set_status_flag(StatusFlag.CARRY, True)
    op = SingleTransfer(0x24000000, register_file)
    op.execute()
    assert op.cycle_count == 1