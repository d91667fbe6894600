"""Single data transfer instructions (LDR and STR)."""

from __future__ import annotations

from enum import IntEnum

from oak import log
from oak.arm2.opcodes.op import Op
from oak.log import Level


class SingleTransferInstruction(IntEnum):
    """Load from or store to a single memory location."""

    LOAD_MEMORY = 0
    STORE_MEMORY = 1

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    SingleTransferInstruction.LOAD_MEMORY: "[LDR] LOAD MEMORY",
    SingleTransferInstruction.STORE_MEMORY: "[STR] STORE MEMORY",
}


class SingleTransfer(Op):
    """A single data transfer instruction; it completes in a single tick."""

    def _do_execute(self) -> bool:
        if log.get_current_level() <= Level.TRACE:
            log.log(
                Level.TRACE,
                "Executing single transfer op code 0x", f"{self.opcode:08x}",
            )
        return True