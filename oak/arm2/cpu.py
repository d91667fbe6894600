"""The ARM2 CPU: a three-stage pipeline feeding decoded instructions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from oak import log
from oak.arm2.cpsr import Mode, StatusFlag
from oak.arm2.opcodes.factory import create
from oak.arm2.opcodes.op import Op
from oak.arm2.register_file import RegisterFile, RegisterRef
from oak.chipset.device import ByteWord, Device, ReadWrite, SystemBus


@dataclass
class Pipeline:
    """Op codes held in the fetch, decode and execute stages."""

    fetch: int = 0
    decode: int = 0
    execute: int = 0


class Arm2(Device):
    """The CPU, which fetches op codes from the data bus each tick."""

    def __init__(self, system_bus: SystemBus) -> None:
        super().__init__(system_bus)
        self.pipeline = Pipeline()
        self.register_file = RegisterFile()
        self.current_instruction: Optional[Op] = None
        log.debug("ARM2 initialised")

    def _advance_pipeline(self) -> None:
        log.log(log.Level.TRACE, "Advancing pipeline")
        stages = self.pipeline
        stages.execute, stages.decode, stages.fetch = (
            stages.decode,
            stages.fetch,
            self.system_bus.data_bus,
        )
        # An empty execute stage means no instruction has reached it yet.
        if stages.execute == 0:
            log.log(log.Level.TRACE, "Instruction pipeline empty, skipping cycle")
            return
        self.current_instruction = create(stages.execute, self.register_file)

    def _do_tick(self) -> None:
        # Multi-cycle instructions hold the pipeline until they complete.
        if self.current_instruction is not None and not self.current_instruction.execute():
            return
        self._advance_pipeline()

    def flush_pipeline(self) -> None:
        """Empty every pipeline stage."""
        self.pipeline = Pipeline()

    def print_state(self) -> None:
        """Log the status register at TRACE level."""
        self.register_file.print_cpsr()

    def reset(self) -> None:
        """Enter supervisor mode and restart execution from address zero.

        The status register in force before the reset is saved in the
        supervisor copy of R14.
        """
        log.debug("Reset")
        registers = self.register_file
        saved = registers.cpsr_value
        registers.mode = Mode.SVC
        registers.set_register(RegisterRef.R14, saved)

        self.flush_pipeline()
        registers.program_counter = 0
        registers.set_status_flag(StatusFlag.IRQ_DISABLE, True)
        registers.set_status_flag(StatusFlag.FIQ_DISABLE, True)
        self.system_bus.read_write = ReadWrite.READ
        self.system_bus.byte_word = ByteWord.WORD