"""ALU data processing instructions (AND, EOR, SUB, ... MVN)."""

from __future__ import annotations

from enum import IntEnum

from oak import log
from oak.arm2.opcodes.op import Op
from oak.arm2.register_file import RegisterFile
from oak.log import Level

INSTRUCTION_MASK = 0x03C00000
_INSTRUCTION_SHIFT = 21
_IMMEDIATE_SHIFT = 24


class DataProcessingInstruction(IntEnum):
    """ALU operation codes."""

    AND = 0b0000
    EOR = 0b0001
    SUB = 0b0010
    RSB = 0b0011
    ADD = 0b0100
    ADC = 0b0101
    SBC = 0b0110
    RSC = 0b0111
    TST = 0b1000
    TEQ = 0b1001
    CMP = 0b1010
    CMN = 0b1011
    ORR = 0b1100
    MOV = 0b1101
    BIC = 0b1110
    MVN = 0b1111

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    DataProcessingInstruction.AND: "[AND] LOGICAL AND",
    DataProcessingInstruction.EOR: "[EOR] LOGICAL EOR",
    DataProcessingInstruction.SUB: "[SUB] SUBTRACT OP 2 FROM OP 1",
    DataProcessingInstruction.RSB: "[RSB] SUBTRACT OP 1 FROM OP 2",
    DataProcessingInstruction.ADD: "[ADD] ADDITION",
    DataProcessingInstruction.ADC: "[ADC] ADDITION WITH CARRY",
    DataProcessingInstruction.SBC: "[SBC] SUBTRACT OP 2 FROM OP 1 WITH CARRY",
    DataProcessingInstruction.RSC: "[RSC] SUBTRACT OP 1 FROM OP 2 WITH CARRY",
    DataProcessingInstruction.TST: "[TST] LOGICAL AND, RESULT NOT WRITTEN",
    DataProcessingInstruction.TEQ: "[TEQ] LOGICAL EOR, RESULT NOT WRITTEN",
    DataProcessingInstruction.CMP: "[CMP] SUBTRACTION, RESULT NOT WRITTEN",
    DataProcessingInstruction.CMN: "[CMN] ADDITION, RESULT NOT WRITTEN",
    DataProcessingInstruction.ORR: "[ORR] LOGICAL OR",
    DataProcessingInstruction.MOV: "[MOV] MOVE OP 2",
    DataProcessingInstruction.BIC: "[BIC] BIT CLEAR",
    DataProcessingInstruction.MVN: "[MVN] MOVE NOT OP 2",
}


class DataProcessing(Op):
    """An ALU instruction decoded from the op code's instruction field.

    Raises ValueError when the decoded field names no known operation.
    """

    def __init__(self, opcode: int, register_file: RegisterFile) -> None:
        super().__init__(opcode, register_file)
        code = (self.opcode & INSTRUCTION_MASK) >> _INSTRUCTION_SHIFT
        try:
            self.instruction = DataProcessingInstruction(code)
        except ValueError:
            raise ValueError(f"Unrecognised instruction: {code}") from None

    @property
    def uses_immediate(self) -> bool:
        """Whether the second operand is an immediate value."""
        return bool((self.opcode >> _IMMEDIATE_SHIFT) & 0b1)

    def operand2(self) -> int:
        """Return the second operand.

        The operand's source (immediate or register) is identified and
        logged; its value is not yet decoded and is always 0.
        """
        if log.get_current_level() <= Level.TRACE:
            if self.uses_immediate:
                log.log(Level.TRACE, "Instruction uses an immediate value")
            else:
                log.log(Level.TRACE, "Instruction uses a register value")
        return 0

    def _do_execute(self) -> bool:
        if log.get_current_level() <= Level.TRACE:
            log.log(Level.TRACE, "Executing: ", self.instruction.description)
        return True