# oak

An early-stage emulator for the Acorn Archimedes A3000. It models the
shared system bus, the MEMC memory controller, the IOC, RAM and ROM, and an
ARM2 CPU with its banked register file, combined status/program-counter
register (CPSR) and a three-stage instruction pipeline.

Execution is stepped by hand, one clock tick at a time, so the machine's
state can be inspected as a ROM image starts to run.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
oak -r path/to/riscos.rom
```

An 800x600 black window opens, the machine is put into its reset state and
the ROM image is loaded. Without `-r` the file `./riscos-3.71.rom` is used.
If the ROM cannot be read, or is empty, the command exits with status 1.

While the window has focus:

| Key         | Action                                        |
|-------------|-----------------------------------------------|
| Right arrow | Advance the machine by one clock tick         |
| `p`         | Log the CPU's CPSR table (shown at TRACE only) |
| `q`         | Quit                                          |

Closing the window, or sending SIGINT, SIGTERM or SIGABRT, also quits.

### Options

```
-h          Show usage and exit
-l LEVEL    Log level: TRACE, DEBUG, INFO, WARN, ERROR, CRITICAL (default INFO)
-r FILE     ROM file to load
```

Unknown options are ignored. An unknown log level prints the usage text and
exits. Use `-l TRACE` to see each pipeline step, every register access and
the output of the `p` key.

Log lines are written to standard output in the form
`[ LEVEL ] file.py:line ( function ) message`.

## Using it as a library

The machine can be driven without a window:

```python
from oak import log
from oak.a3000 import A3000

log.set_current_level(log.Level.TRACE)

machine = A3000()
machine.reset()
size = machine.load_rom("riscos.rom")   # bytes loaded
for _ in range(10):
    machine.tick()
machine.print_state()
```

`A3000.load_rom` raises `OSError` if the file cannot be opened and
`ValueError` if it is empty. `A3000.tick` advances the CPU, the MEMC and
the ROM in turn; if any of them fails, the CPU state is logged and
`RuntimeError` is raised.

### Registers

```python
from oak.arm2.cpsr import Mode, StatusFlag
from oak.arm2.register_file import RegisterFile, RegisterRef

registers = RegisterFile()
registers.set_register(RegisterRef.R8, 1000)
registers.set_status_flag(StatusFlag.ZERO, True)
print(registers.get_register(RegisterRef.R8), registers.mode)  # 1000 Mode.USER

registers.mode = Mode.FIQ          # R8-R12 now have their own FIQ copies
registers.program_counter = 0x500  # 24 bits; larger values raise ValueError
```

R0-R7 are shared by all modes, R8-R12 have a FIQ copy and R13-R14 have
FIQ, IRQ and SVC copies. R15 is the CPSR word itself. `oak.arm2.cpsr.Cpsr`
and `oak.arm2.register.Register` can also be used on their own.

### Instructions

```python
from oak.arm2.opcodes.factory import create
from oak.arm2.register_file import RegisterFile

registers = RegisterFile()
op = create(0xEA000004, registers)   # an always-executed branch, offset 4
op.execute()                         # True: finished in one tick
print(registers.program_counter)     # 4
```

`create` tries, in this order, `is_branch` (bit 25 or bit 27 set),
`is_data_processing`, `is_multiply`, `is_single_data_transfer` and
`is_block_data_transfer`, and returns a `Branch`, `DataProcessing`,
`Multiply`, `SingleTransfer` or `BlockTransfer`. It raises `ValueError`
when no kind matches. Every instruction checks its condition field against
the N, Z, C and V flags on its first tick and finishes at once if the
condition fails.

## What it does not do yet

- Only branches change machine state. Data processing, multiply and the
  single and block transfer instructions are decoded and complete in one
  tick without computing anything; `DataProcessing.operand2` always
  returns 0.
- The window stays black: nothing is drawn from video memory.
- RAM and the IOC are not driven from the system bus on a tick, and there
  is no keyboard, sound or disc emulation.
- After reset the MEMC maps every address to ROM; its normal map
  (`Memc.enable_default_memory_map`) sends every address to logical RAM.
- ROM byte reads check the address but put 0 on the data bus.