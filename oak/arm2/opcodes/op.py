"""Common behaviour of ARM2 instructions: condition checks and cycle counting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Callable

from oak import log
from oak.arm2.cpsr import StatusFlag
from oak.arm2.register_file import RegisterFile
from oak.log import Level

_WORD_MASK = 0xFFFFFFFF
_CONDITION_FIELD_MASK = 0xF0000000
_CONDITION_FIELD_SHIFT = 28


class Condition(IntEnum):
    """The condition field held in the top four bits of every instruction."""

    EQ = 0b0000  # Z set (equal)
    NE = 0b0001  # Z clear (not equal)
    CS = 0b0010  # C set (unsigned higher or same)
    CC = 0b0011  # C clear (unsigned lower)
    MI = 0b0100  # N set (negative)
    PL = 0b0101  # N clear (positive or zero)
    VS = 0b0110  # V set (overflow)
    VC = 0b0111  # V clear (no overflow)
    HI = 0b1000  # C set and Z clear (unsigned higher)
    LS = 0b1001  # C clear or Z set (unsigned lower or same)
    GE = 0b1010  # N equals V (greater or equal)
    LT = 0b1011  # N differs from V (less than)
    GT = 0b1100  # Z clear and N equals V (greater than)
    LE = 0b1101  # Z set or N differs from V (less than or equal)
    AL = 0b1110  # always
    NV = 0b1111  # never


# Each predicate receives the N, Z, C and V flags in that order.
_PREDICATES: dict[Condition, Callable[[bool, bool, bool, bool], bool]] = {
    Condition.EQ: lambda n, z, c, v: z,
    Condition.NE: lambda n, z, c, v: not z,
    Condition.CS: lambda n, z, c, v: c,
    Condition.CC: lambda n, z, c, v: not c,
    Condition.MI: lambda n, z, c, v: n,
    Condition.PL: lambda n, z, c, v: not n,
    Condition.VS: lambda n, z, c, v: v,
    Condition.VC: lambda n, z, c, v: not v,
    Condition.HI: lambda n, z, c, v: c and not z,
    Condition.LS: lambda n, z, c, v: not c or z,
    Condition.GE: lambda n, z, c, v: n == v,
    Condition.LT: lambda n, z, c, v: n != v,
    Condition.GT: lambda n, z, c, v: not z and n == v,
    Condition.LE: lambda n, z, c, v: z or n != v,
    Condition.AL: lambda n, z, c, v: True,
    Condition.NV: lambda n, z, c, v: False,
}


class Op(ABC):
    """An instruction decoded from a 32-bit op code.

    Subclasses implement ``_do_execute``, which performs one clock tick of
    work and returns True once the instruction has completed.
    """

    def __init__(self, opcode: int, register_file: RegisterFile) -> None:
        self.opcode = opcode & _WORD_MASK
        self.register_file = register_file
        self.condition = Condition(
            (self.opcode & _CONDITION_FIELD_MASK) >> _CONDITION_FIELD_SHIFT
        )
        self.conditions_met = False
        self.cycle_count = 0

    def check_conditions(self) -> bool:
        """Return whether the status flags satisfy the condition field."""
        flags = self.register_file
        return _PREDICATES[self.condition](
            flags.get_status_flag(StatusFlag.NEGATIVE),
            flags.get_status_flag(StatusFlag.ZERO),
            flags.get_status_flag(StatusFlag.CARRY),
            flags.get_status_flag(StatusFlag.OVERFLOW),
        )

    def execute(self) -> bool:
        """Run one tick; return True when the instruction has finished.

        Conditions are checked only on the first tick. An instruction whose
        conditions fail completes at once without doing any work.
        """
        tracing = log.get_current_level() <= Level.TRACE
        if self.cycle_count == 0 and not self.conditions_met:
            if not self.check_conditions():
                if tracing:
                    log.log(
                        Level.TRACE,
                        "Op conditions not met, no further execution required",
                    )
                return True
            self.conditions_met = True

        self.cycle_count += 1
        if tracing:
            log.log(Level.TRACE, "Instruction cycle count: ", self.cycle_count)
        return self._do_execute()

    @abstractmethod
    def _do_execute(self) -> bool:
        """Perform one tick of the instruction's work."""