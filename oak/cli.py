"""Command-line entry point for the emulator."""

from __future__ import annotations

import signal
import sys
import threading
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

import pygame

from oak import log
from oak.a3000 import A3000
from oak.display import Display, QuitRequested, start_renderer, stop_renderer

NAME = "Oak"
VERSION_MAJOR = 1
VERSION_MINOR = 0
DEFAULT_WINDOW_WIDTH = 800
DEFAULT_WINDOW_HEIGHT = 600
DEFAULT_ROM_PATH = "./riscos-3.71.rom"

USAGE = (
    "Usage: Oak [arguments]\n\n"
    "Arguments:\n\n"
    "\t-h\tShow usage\n"
    "\t-l\tSet log level (e.g., ./Oak -l DEBUG). Default INFO. Options:\n"
    "\t\t\tTRACE\n"
    "\t\t\tDEBUG\n"
    "\t\t\tINFO\n"
    "\t\t\tWARN\n"
    "\t\t\tERROR\n"
    "\t\t\tCRITICAL\n"
    "\t-r\tSpecify ROM file (e.g., ./Oak -r myROM). Defaults to ./riscos-3.71.rom\n"
)

_OPTIONS_WITH_VALUE = "lr"


@dataclass
class Options:
    """Settings taken from the command line."""

    log_level: log.Level = log.DEFAULT_LEVEL
    rom_path: str = DEFAULT_ROM_PATH
    show_help: bool = False


def help_text() -> str:
    """Return the program banner followed by the usage text."""
    return f"\n{NAME} {VERSION_MAJOR}.{VERSION_MINOR}\n{USAGE}"


def _scan(argv: Sequence[str]) -> Iterator[tuple[str, Optional[str]]]:
    """Yield (flag, value) pairs; clustered flags and attached values allowed."""
    args = iter(argv)
    for arg in args:
        if arg == "--":
            return
        if not arg.startswith("-") or arg == "-":
            continue
        body = arg[1:]
        while body:
            flag, body = body[0], body[1:]
            if flag in _OPTIONS_WITH_VALUE:
                value = body or next(args, None)
                body = ""
                if value is not None:
                    yield flag, value
            else:
                yield flag, None


def parse_arguments(argv: Sequence[str]) -> Options:
    """Parse ``-h``, ``-l LEVEL`` and ``-r PATH``; unknown options are ignored.

    Parsing stops at ``-h``. Raises ValueError for an unknown log level.
    """
    options = Options()
    for flag, value in _scan(argv):
        if flag == "h":
            options.show_help = True
            return options
        if flag == "l":
            options.log_level = log.level_from_string(value)
        elif flag == "r":
            options.rom_path = value
    return options


def _run(options: Options, stop: threading.Event) -> int:
    display = Display(NAME, DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)
    machine = A3000()
    machine.reset()
    try:
        machine.load_rom(options.rom_path)
    except (OSError, ValueError):
        log.error("Failed to load ROM file: ", options.rom_path)
        return 1

    log.info("Initialised Oak v", VERSION_MAJOR, ".", VERSION_MINOR)

    while not stop.is_set():
        try:
            events = display.process_events()
        except QuitRequested:
            break
        for event in events:
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_RIGHT:
                machine.tick()
            elif event.key == pygame.K_p:
                machine.print_state()
            elif event.key == pygame.K_q:
                log.info("Quit requested")
                stop.set()
    log.info("Shutting down")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the emulator; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_arguments(args)
    except ValueError as exc:
        log.error("Invalid log level selection entered: ", exc)
        print(help_text())
        return 0
    if options.show_help:
        print(help_text())
        return 0
    log.set_current_level(options.log_level)

    stop = threading.Event()

    def on_signal(signum, _frame) -> None:
        log.info("Signal raised [ ", signal.Signals(signum).name, " ], exiting ...")
        stop.set()

    previous = {
        sig: signal.signal(sig, on_signal)
        for sig in (signal.SIGABRT, signal.SIGTERM, signal.SIGINT)
    }
    try:
        try:
            start_renderer()
        except RuntimeError:
            log.error("Could not start renderer")
            return 1
        try:
            return _run(options, stop)
        finally:
            stop_renderer()
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)