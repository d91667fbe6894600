"""Branch (B) and Branch-with-Link (BL) instructions."""

from __future__ import annotations

from enum import IntEnum

from oak import log
from oak.arm2.opcodes.op import Op
from oak.arm2.register_file import RegisterFile, RegisterRef
from oak.log import Level

LINK_BIT_MASK = 0x01000000
OFFSET_MASK = 0x00FFFFFF


class BranchInstruction(IntEnum):
    """The two branch variants, selected by the link bit."""

    BRANCH = 0
    BRANCH_WITH_LINK = 1

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    BranchInstruction.BRANCH: "[B] BRANCH",
    BranchInstruction.BRANCH_WITH_LINK: "[BL] BRANCH WITH LINK",
}


class Branch(Op):
    """Adds the 24-bit offset to the program counter, optionally saving a link.

    With the link bit set, the address after the current program counter is
    stored in R14 so the subroutine can return to it.
    """

    def __init__(self, opcode: int, register_file: RegisterFile) -> None:
        super().__init__(opcode, register_file)
        self.offset = self.opcode & OFFSET_MASK
        self.instruction = (
            BranchInstruction.BRANCH_WITH_LINK
            if self.opcode & LINK_BIT_MASK
            else BranchInstruction.BRANCH
        )

    def _do_execute(self) -> bool:
        if log.get_current_level() <= Level.TRACE:
            log.log(
                Level.TRACE,
                "Executing: ", self.instruction.description, ", offset: ", self.offset,
            )
        pc = self.register_file.program_counter
        target = (pc + self.offset) & OFFSET_MASK
        if self.instruction is BranchInstruction.BRANCH_WITH_LINK:
            self.register_file.set_register(RegisterRef.R14, pc + 1)
        self.register_file.program_counter = target
        return True