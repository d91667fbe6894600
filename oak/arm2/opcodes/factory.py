"""Classification of op codes and creation of the matching instruction."""

from __future__ import annotations

from oak.arm2.opcodes.block_transfer import BlockTransfer
from oak.arm2.opcodes.branch import Branch
from oak.arm2.opcodes.data_processing import DataProcessing
from oak.arm2.opcodes.multiply import Multiply
from oak.arm2.opcodes.op import Op
from oak.arm2.opcodes.single_transfer import SingleTransfer
from oak.arm2.register_file import RegisterFile


def is_branch(opcode: int) -> bool:
    """Whether bits 25 or 27 mark the op code as a branch."""
    return bool((opcode >> 25) & 0x5)


def is_data_processing(opcode: int) -> bool:
    """Whether bits 26 and 27 are both clear."""
    return (opcode >> 26) & 0x3 == 0


def is_multiply(opcode: int) -> bool:
    """Whether bits 22 through 27 are all clear."""
    return (opcode >> 22) & 0x3F == 0


def is_single_data_transfer(opcode: int) -> bool:
    """Whether bit 26 is set and bit 27 is clear."""
    return (opcode >> 26) & 0x3 == 0x1


def is_block_data_transfer(opcode: int) -> bool:
    """Whether bits 25 through 27 hold 100."""
    return (opcode >> 25) & 0x7 == 0x4


_KINDS = (
    (is_branch, Branch),
    (is_data_processing, DataProcessing),
    (is_multiply, Multiply),
    (is_single_data_transfer, SingleTransfer),
    (is_block_data_transfer, BlockTransfer),
)


def create(opcode: int, register_file: RegisterFile) -> Op:
    """Return the instruction for ``opcode``, checked in a fixed order.

    Raises ValueError if no instruction kind matches.
    """
    for matches, kind in _KINDS:
        if matches(opcode):
            return kind(opcode, register_file)
    raise ValueError(f"Failed to parse instruction from op code 0x{opcode:08x}")