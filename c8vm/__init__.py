"""CHIP-8 virtual machine package."""

from c8vm.state import EmulatorState, StackState, create_state
from c8vm.emulator import execute, fetch, tick, load_rom, load_program
from c8vm.decode import DecodedInstruction, decode
from c8vm.timer import Timer, Freq
from c8vm.machine import Machine
from c8vm.errors import (
    C8Error, ProgramLoadError, ProgramTooLargeError, InvalidProgramStateError,
    UnknownInstructionError, StackUnderflowError, StackOverflowError,
)
from c8vm.constants import *
from c8vm.rendering import display_to_rgb, create_color_scheme, render_frame

__all__ = [
    "EmulatorState",
    "StackState",
    "create_state",
    "fetch",
    "execute",
    "tick",
    "load_rom",
    "load_program",
    "DecodedInstruction",
    "decode",
    "Timer",
    "Freq",
    "Machine",
    "C8Error",
    "ProgramLoadError",
    "ProgramTooLargeError",
    "InvalidProgramStateError",
    "UnknownInstructionError",
    "StackUnderflowError",
    "StackOverflowError",
    "PROGRAM_START",
    "FONT_START",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "display_to_rgb",
    "create_color_scheme",
    "render_frame",
]
