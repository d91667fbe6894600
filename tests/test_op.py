import pytest

from oak import log
from oak.arm2.cpsr import StatusFlag
from oak.arm2.opcodes.op import Condition, Op
from oak.arm2.register_file import RegisterFile


class _Recording(Op):
    """An instruction taking a fixed number of ticks, counting its work."""

    def __init__(self, opcode, register_file, ticks=1):
        super().__init__(opcode, register_file)
        self.ticks = ticks
        self.work_done = 0

    def _do_execute(self):
        self.work_done += 1
        return self.work_done >= self.ticks


def _registers(n=False, z=False, c=False, v=False):
    registers = RegisterFile()
    registers.set_status_flag(StatusFlag.NEGATIVE, n)
    registers.set_status_flag(StatusFlag.ZERO, z)
    registers.set_status_flag(StatusFlag.CARRY, c)
    registers.set_status_flag(StatusFlag.OVERFLOW, v)
    return registers


def _opcode(condition):
    return condition << 28


@pytest.mark.parametrize("condition", list(Condition))
def test_condition_decoded_from_top_bits(condition):
    op = _Recording(_opcode(condition) | 0x0ABCDEF, RegisterFile())
    assert op.condition is condition


@pytest.mark.parametrize(
    "condition, flags, expected",
    [
        (Condition.EQ, {"z": True}, True),
        (Condition.EQ, {}, False),
        (Condition.NE, {"z": True}, False),
        (Condition.NE, {}, True),
        (Condition.CS, {"c": True}, True),
        (Condition.CS, {}, False),
        (Condition.CC, {"c": True}, False),
        (Condition.CC, {}, True),
        (Condition.MI, {"n": True}, True),
        (Condition.MI, {}, False),
        (Condition.PL, {"n": True}, False),
        (Condition.PL, {}, True),
        (Condition.VS, {"v": True}, True),
        (Condition.VS, {}, False),
        (Condition.VC, {"v": True}, False),
        (Condition.VC, {}, True),
        (Condition.HI, {"c": True}, True),
        (Condition.HI, {"c": True, "z": True}, False),
        (Condition.HI, {}, False),
        (Condition.LS, {}, True),
        (Condition.LS, {"c": True, "z": True}, True),
        (Condition.LS, {"c": True}, False),
        (Condition.GE, {"n": True, "v": True}, True),
        (Condition.GE, {}, True),
        (Condition.GE, {"n": True}, False),
        (Condition.LT, {"n": True}, True),
        (Condition.LT, {"v": True}, True),
        (Condition.LT, {"n": True, "v": True}, False),
        (Condition.GT, {}, True),
        (Condition.GT, {"n": True, "v": True}, True),
        (Condition.GT, {"z": True}, False),
        (Condition.GT, {"n": True}, False),
        (Condition.LE, {"z": True}, True),
        (Condition.LE, {"v": True}, True),
        (Condition.LE, {}, False),
        (Condition.AL, {}, True),
        (Condition.AL, {"n": True, "z": True, "c": True, "v": True}, True),
        (Condition.NV, {}, False),
        (Condition.NV, {"n": True, "z": True, "c": True, "v": True}, False),
    ],
)
def test_check_conditions(condition, flags, expected):
    op = _Recording(_opcode(condition), _registers(**flags))
    assert op.check_conditions() is expected


def test_unmet_condition_completes_without_work():
    op = _Recording(_opcode(Condition.NV), RegisterFile())
    assert op.execute() is True
    assert op.work_done == 0
    assert op.cycle_count == 0
    assert op.conditions_met is False


def test_met_condition_runs_and_counts_cycle():
    op = _Recording(_opcode(Condition.AL), RegisterFile())
    assert op.execute() is True
    assert op.work_done == 1
    assert op.cycle_count == 1
    assert op.conditions_met is True


def test_multi_cycle_instruction_reports_completion_on_last_tick():
    op = _Recording(_opcode(Condition.AL), RegisterFile(), ticks=3)
    results = [op.execute() for _ in range(3)]
    assert results == [False, False, True]
    assert op.cycle_count == 3


def test_conditions_checked_only_on_first_tick():
    registers = _registers(z=True)
    op = _Recording(_opcode(Condition.EQ), registers, ticks=2)
    assert op.execute() is False
    registers.set_status_flag(StatusFlag.ZERO, False)
    assert op.execute() is True
    assert op.work_done == 2


def test_opcode_truncated_to_word():
    op = _Recording((1 << 32) | _opcode(Condition.AL) | 0x5, RegisterFile())
    assert op.opcode == _opcode(Condition.AL) | 0x5


def test_op_is_abstract():
    with pytest.raises(TypeError):
        Op(0, RegisterFile())


def test_unmet_condition_logged_at_trace(capsys):
    previous = log.get_current_level()
    log.set_current_level(log.Level.TRACE)
    try:
        capsys.readouterr()
        _Recording(_opcode(Condition.NV), RegisterFile()).execute()
        out = capsys.readouterr().out
    finally:
        log.set_current_level(previous)
    assert "Op conditions not met" in out