"""An Acorn Archimedes A3000 emulator: machine, chipset, ARM2 CPU, window and command."""

__version__ = "1.0.0"