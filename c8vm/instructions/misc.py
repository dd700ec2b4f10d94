"""CHIP-8 miscellaneous instructions (Fxxx)."""

import jax.numpy as jnp
from c8vm.constants import ADDRESS_MASK, FONT_START, FONT_GLYPH_SIZE
from c8vm.state import EmulatorState
from c8vm.decode import DecodedInstruction
from c8vm.instructions.system import unknown_instruction


def _register_value(state: EmulatorState, x: int) -> int:
    return int(state.V[x])


def execute_get_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX07 - Set VX to delay timer value."""
    return state.replace(V=state.V.at[instruction.x].set(state.delay_timer.val()))


def execute_set_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX15 - Set delay timer to VX."""
    return state.replace(delay_timer=state.delay_timer.reset(_register_value(state, instruction.x)))


def execute_set_sound_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX18 - Set sound timer to VX."""
    return state.replace(sound_timer=state.sound_timer.reset(_register_value(state, instruction.x)))


def execute_add_to_index(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX1E - Add VX to I register (no overflow flag)."""
    new_i = jnp.astype(state.I, jnp.int32) + state.V[instruction.x]
    return state.replace(I=jnp.astype(new_i & 0xFFFF, jnp.uint16))


def execute_wait_for_key(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX0A - Wait for key press.

    Never blocks: while no key is down the program counter is rewound so the
    same instruction runs again on the next tick.
    """
    if not jnp.any(state.keypad):
        return state.replace(pc=jnp.astype((jnp.astype(state.pc, jnp.int32) - 2) & ADDRESS_MASK, jnp.uint16))
    # argmax returns the first True, i.e. the lowest pressed key
    pressed_key = jnp.argmax(state.keypad)
    return state.replace(V=state.V.at[instruction.x].set(jnp.astype(pressed_key, jnp.uint8)))


def execute_font_character(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX29 - Set I to location of sprite for digit VX."""
    font_address = FONT_START + _register_value(state, instruction.x) * FONT_GLYPH_SIZE
    return state.replace(I=jnp.astype(font_address, jnp.uint16))


def execute_bcd_conversion(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    value = state.V[instruction.x]

    digits = jnp.array([
        value // 100,
        (value // 10) % 10,
        value % 10
    ], dtype=jnp.uint8)

    indices = (jnp.arange(3) + jnp.astype(state.I, jnp.int32)) & ADDRESS_MASK
    return state.replace(memory=state.memory.at[indices].set(digits))


def execute_store_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX55 - Store V0 through VX in memory starting at I."""
    count = instruction.x + 1
    indices = (jnp.arange(count) + jnp.astype(state.I, jnp.int32)) & ADDRESS_MASK
    return state.replace(memory=state.memory.at[indices].set(state.V[:count]))


def execute_load_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX65 - Load V0 through VX from memory starting at I."""
    count = instruction.x + 1
    indices = (jnp.arange(count) + jnp.astype(state.I, jnp.int32)) & ADDRESS_MASK
    return state.replace(V=state.V.at[:count].set(state.memory[indices]))


MISC_INSTRUCTIONS = {
    0x07: execute_get_delay_timer,
    0x0A: execute_wait_for_key,
    0x15: execute_set_delay_timer,
    0x18: execute_set_sound_timer,
    0x1E: execute_add_to_index,
    0x29: execute_font_character,
    0x33: execute_bcd_conversion,
    0x55: execute_store_registers,
    0x65: execute_load_registers,
}


def execute_misc_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """Dispatch misc instructions on the low byte."""
    handler = MISC_INSTRUCTIONS.get(instruction.nn, unknown_instruction)
    return handler(state, instruction)
