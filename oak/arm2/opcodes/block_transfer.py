"""Block data transfer instructions (LDM and STM)."""

from __future__ import annotations

from enum import IntEnum

from oak import log
from oak.arm2.opcodes.op import Op
from oak.log import Level


class BlockTransferInstruction(IntEnum):
    """Load several registers from, or store them to, a block of memory."""

    LOAD_MEMORY = 0
    STORE_MEMORY = 1

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    BlockTransferInstruction.LOAD_MEMORY: "[LDM] LOAD MEMORY",
    BlockTransferInstruction.STORE_MEMORY: "[STM] STORE MEMORY",
}


class BlockTransfer(Op):
    """A block data transfer instruction; it completes in a single tick."""

    def _do_execute(self) -> bool:
        if log.get_current_level() <= Level.TRACE:
            log.log(
                Level.TRACE,
                "Executing block transfer op code 0x", f"{self.opcode:08x}",
            )
        return True