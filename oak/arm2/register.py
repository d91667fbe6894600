"""A general-purpose ARM2 register with per-mode shadow copies."""

from __future__ import annotations

from oak.arm2.cpsr import Mode

_WORD_MASK = 0xFFFFFFFF


class Register:
    """A register banked for every mode up to ``highest_access_mode``.

    Modes above the highest banked mode share the USER copy.
    """

    def __init__(self, highest_access_mode: Mode) -> None:
        self.highest_access_mode = Mode(highest_access_mode)
        self._shadows = [0] * (self.highest_access_mode + 1)

    def _bank(self, mode: Mode) -> int:
        return Mode.USER if mode > self.highest_access_mode else Mode(mode)

    def get(self, mode: Mode) -> int:
        """Return the value seen in ``mode``."""
        return self._shadows[self._bank(mode)]

    def set(self, mode: Mode, value: int) -> None:
        """Store ``value`` in the copy seen by ``mode``."""
        self._shadows[self._bank(mode)] = value & _WORD_MASK