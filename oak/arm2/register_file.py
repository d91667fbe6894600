"""The ARM2 register file with mode-dependent register banking."""

from __future__ import annotations

from enum import IntEnum

from oak import log
from oak.arm2.cpsr import Cpsr, Mode, StatusFlag
from oak.arm2.register import Register
from oak.log import Level


class RegisterRef(IntEnum):
    """Register numbers; R15 holds the combined PC and status word."""

    R0 = 0
    R1 = 1
    R2 = 2
    R3 = 3
    R4 = 4
    R5 = 5
    R6 = 6
    R7 = 7
    R8 = 8
    R9 = 9
    R10 = 10
    R11 = 11
    R12 = 12
    R13 = 13
    R14 = 14
    R15 = 15


_BANKING = (
    (Mode.USER,) * 8  # R0-R7
    + (Mode.FIQ,) * 5  # R8-R12
    + (Mode.SVC,) * 2  # R13-R14
)


def _register_name(reg: RegisterRef) -> str:
    return "R15/CPSR" if reg is RegisterRef.R15 else reg.name


class RegisterFile:
    """Registers R0-R14 plus the R15 status and program counter register."""

    def __init__(self) -> None:
        self.registers = [Register(mode) for mode in _BANKING]
        self.cpsr = Cpsr()
        log.debug("RegisterFile initialised")

    @property
    def cpsr_value(self) -> int:
        """The raw R15 word."""
        return self.cpsr.value

    @cpsr_value.setter
    def cpsr_value(self, value: int) -> None:
        self.cpsr.value = value

    @property
    def mode(self) -> Mode:
        """The current processor mode."""
        return self.cpsr.mode

    @mode.setter
    def mode(self, mode: Mode) -> None:
        self.cpsr.mode = mode

    @property
    def program_counter(self) -> int:
        """The current program counter."""
        return self.cpsr.program_counter

    @program_counter.setter
    def program_counter(self, counter: int) -> None:
        self.cpsr.program_counter = counter

    @staticmethod
    def _ref(reg: int) -> RegisterRef:
        try:
            return RegisterRef(reg)
        except ValueError:
            message = f"Failed to access register: {reg}"
            log.critical(message)
            raise ValueError(message) from None

    def get_register(self, reg: RegisterRef) -> int:
        """Return the value of ``reg`` as seen in the current mode."""
        reg = self._ref(reg)
        mode = self.mode
        if reg is RegisterRef.R15:
            value = self.cpsr.value
        else:
            value = self.registers[reg].get(mode)
        if log.get_current_level() <= Level.TRACE:
            log.log(
                Level.TRACE,
                f"Fetched 0x{value:x} from [ {_register_name(reg)} ], mode: {mode.name}",
            )
        return value

    def set_register(self, reg: RegisterRef, value: int) -> None:
        """Write ``value`` into ``reg`` as seen in the current mode."""
        reg = self._ref(reg)
        mode = self.mode
        if reg is RegisterRef.R15:
            self.cpsr.value = value
        else:
            self.registers[reg].set(mode, value)
        if log.get_current_level() <= Level.TRACE:
            log.log(
                Level.TRACE,
                f"Set register [ {_register_name(reg)} ] to 0x{value:x}, mode: {mode.name}",
            )

    def get_status_flag(self, flag: StatusFlag) -> bool:
        """Return whether ``flag`` is set in R15."""
        return self.cpsr.get_status_flag(flag)

    def set_status_flag(self, flag: StatusFlag, set_: bool) -> None:
        """Set or clear ``flag`` in R15."""
        self.cpsr.set_status_flag(flag, set_)

    def print_cpsr(self) -> None:
        """Log the R15 state at TRACE level."""
        self.cpsr.print_state()