"""Main CHIP-8 execution engine."""

import os

import jax.numpy as jnp
from c8vm.state import EmulatorState
from c8vm.decode import decode
from c8vm.constants import ADDRESS_MASK, PROGRAM_START, MAX_PROGRAM_SIZE
from c8vm.errors import ProgramLoadError, ProgramTooLargeError
from c8vm.logging import get_logger
from c8vm.instructions.system import execute_system_instruction, unknown_instruction
from c8vm.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_skip_if_key
)
from c8vm.instructions.alu import execute_alu_operation
from c8vm.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from c8vm.instructions.display import execute_display
from c8vm.instructions.misc import execute_misc_instruction

logger = get_logger("c8vm.emulator")

# Indexed by the leading nibble. BNNN is not part of the supported set.
OPCODE_TABLE = [
    execute_system_instruction,
    execute_jump,
    execute_call,
    execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate,
    execute_skip_if_equal_register,
    execute_set,
    execute_add,
    execute_alu_operation,
    execute_skip_if_not_equal_register,
    execute_set_index,
    unknown_instruction,
    execute_random,
    execute_display,
    execute_skip_if_key,
    execute_misc_instruction,
]


def execute(state: EmulatorState, instruction: int) -> EmulatorState:
    """Execute single CHIP-8 instruction.

    Raises:
        InvalidProgramStateError: on an unknown instruction or a call stack fault.
    """
    decoded_instruction = decode(instruction)
    return OPCODE_TABLE[decoded_instruction.opcode](state, decoded_instruction)


def _pack_u16(high, low) -> int:
    """Pack two bytes into a 16-bit instruction word."""
    return (int(high) << 8) | int(low)


def fetch(state: EmulatorState) -> tuple[EmulatorState, int]:
    """Fetch next instruction from memory and advance the program counter."""
    pc = int(state.pc)
    instruction = _pack_u16(state.memory[pc], state.memory[(pc + 1) & ADDRESS_MASK])
    if logger.is_enabled_for("DEBUG"):
        logger.debug(f"0x{pc:03X}: {instruction:04X}")
    return state.replace(pc=jnp.astype((pc + 2) & ADDRESS_MASK, jnp.uint16)), instruction


def update_timers(state: EmulatorState) -> EmulatorState:
    """Let both timers consume the wall-clock time elapsed since the last update."""
    return state.replace(
        delay_timer=state.delay_timer.update(),
        sound_timer=state.sound_timer.update(),
    )


def tick(state: EmulatorState) -> EmulatorState:
    """Advance timers, then fetch and execute exactly one instruction."""
    state = update_timers(state)
    state, instruction = fetch(state)
    return execute(state, instruction)


def load_program(state: EmulatorState, data: bytes, source: str = "<bytes>") -> EmulatorState:
    """Copy program bytes into memory starting at 0x200."""
    if len(data) > MAX_PROGRAM_SIZE:
        raise ProgramTooLargeError(source, len(data), MAX_PROGRAM_SIZE)
    if not data:
        return state
    rom_array = jnp.array(list(data), dtype=jnp.uint8)
    new_memory = state.memory.at[PROGRAM_START:PROGRAM_START + len(data)].set(rom_array)
    logger.info(f"Loaded {len(data)} bytes from {source}")
    return state.replace(memory=new_memory)


def load_rom(state: EmulatorState, filename: str | os.PathLike) -> EmulatorState:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    try:
        with open(filename, 'rb') as f:
            rom_data = f.read()
    except OSError as err:
        raise ProgramLoadError(filename) from err
    return load_program(state, rom_data, source=os.fspath(filename))
