"""Multiply (MUL) and Multiply-Accumulate (MLA) instructions."""

from __future__ import annotations

from enum import IntEnum

from oak import log
from oak.arm2.opcodes.op import Op
from oak.log import Level


class MultiplyInstruction(IntEnum):
    """The two multiply variants."""

    MULTIPLY = 0
    MULTIPLY_ACCUMULATE = 1

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    MultiplyInstruction.MULTIPLY: "[MUL] MULTIPLY",
    MultiplyInstruction.MULTIPLY_ACCUMULATE: "[MLA] MULTIPLY ACCUMULATE",
}


class Multiply(Op):
    """A multiply instruction; it completes in a single tick."""

    def _do_execute(self) -> bool:
        if log.get_current_level() <= Level.TRACE:
            log.log(Level.TRACE, "Executing multiply op code 0x", f"{self.opcode:08x}")
        return True