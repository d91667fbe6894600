"""The ARM2 combined status flags and program counter register (R15)."""

from __future__ import annotations

from enum import Enum, IntEnum

from oak import log
from oak.log import Level

_MODE_MASK = 0x00000003
_PROGRAM_COUNTER_MASK = 0x03FFFFFC
_PROGRAM_COUNTER_MAX = 0x00FFFFFF
_WORD_MASK = 0xFFFFFFFF


def _tracing() -> bool:
    return log.get_current_level() <= Level.TRACE


class Mode(IntEnum):
    """Processor mode, held in the two lowest bits of R15."""

    USER = 0
    FIQ = 1
    IRQ = 2
    SVC = 3


class StatusFlag(Enum):
    """Status and interrupt-disable bits; each value is the flag's mask."""

    FIQ_DISABLE = 0x04000000
    IRQ_DISABLE = 0x08000000
    OVERFLOW = 0x10000000
    CARRY = 0x20000000
    ZERO = 0x40000000
    NEGATIVE = 0x80000000


def mode_string(mode: Mode) -> str:
    """Return the display name of a processor mode."""
    return Mode(mode).name


class Cpsr:
    """Status flags, program counter and mode packed into one 32-bit word."""

    def __init__(self, value: int = 0) -> None:
        self._value = value & _WORD_MASK

    @property
    def value(self) -> int:
        """The raw 32-bit register content."""
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = value & _WORD_MASK

    @property
    def mode(self) -> Mode:
        """The current processor mode."""
        mode = Mode(self._value & _MODE_MASK)
        if _tracing():
            log.log(Level.TRACE, "Fetched current Mode: ", mode.name)
        return mode

    @mode.setter
    def mode(self, mode: Mode) -> None:
        mode = Mode(mode)
        self._value = (self._value & ~_MODE_MASK & _WORD_MASK) | mode
        if _tracing():
            log.log(Level.TRACE, "Set current Mode: ", mode.name)

    @property
    def program_counter(self) -> int:
        """The 24-bit word-addressed program counter."""
        counter = (self._value & _PROGRAM_COUNTER_MASK) >> 2
        if _tracing():
            log.log(Level.TRACE, "Fetched Program Counter value: ", counter)
        return counter

    @program_counter.setter
    def program_counter(self, counter: int) -> None:
        if not 0 <= counter <= _PROGRAM_COUNTER_MAX:
            log.error("Attempt to set Program Counter higher than 0x00FFFFFF")
            raise ValueError(
                f"Program counter {counter:#x} outside 0x0-0x{_PROGRAM_COUNTER_MAX:08X}"
            )
        self._value = (self._value & ~_PROGRAM_COUNTER_MASK & _WORD_MASK) | (counter << 2)
        if _tracing():
            log.log(Level.TRACE, "Set Program Counter value: ", counter)

    def get_status_flag(self, flag: StatusFlag) -> bool:
        """Return whether ``flag`` is set."""
        is_set = bool(self._value & flag.value)
        if _tracing():
            log.log(
                Level.TRACE,
                "Fetched status flag [ ", flag.name, " ], set: ", int(is_set),
            )
        return is_set

    def set_status_flag(self, flag: StatusFlag, set_: bool) -> None:
        """Set or clear ``flag``."""
        if set_:
            self._value |= flag.value
        else:
            self._value &= ~flag.value & _WORD_MASK
        if _tracing():
            log.log(
                Level.TRACE,
                "Set status flag [ ", flag.name, " ], set: ", int(bool(set_)),
            )

    def format_state(self) -> str:
        """Return a two-line table of the flags, program counter and mode."""
        bits = " | ".join(
            str(int(bool(self._value & flag.value)))
            for flag in (
                StatusFlag.NEGATIVE,
                StatusFlag.ZERO,
                StatusFlag.CARRY,
                StatusFlag.OVERFLOW,
                StatusFlag.IRQ_DISABLE,
                StatusFlag.FIQ_DISABLE,
            )
        )
        pc = (self._value & _PROGRAM_COUNTER_MASK) >> 2
        mode = Mode(self._value & _MODE_MASK).name
        header = " | N | Z | C | V | I | F |     PC     | MODE"
        row = f" | {bits} | 0x{pc:08x} | {mode}"
        return f"{header}\n{row}"

    def print_state(self) -> None:
        """Log the register state at TRACE level."""
        if not _tracing():
            return
        for line in self.format_state().splitlines():
            log.log(Level.TRACE, line)