"""CHIP-8 system instructions (0x0xxx)."""

import jax.numpy as jnp
from c8vm.constants import ADDRESS_MASK
from c8vm.state import EmulatorState
from c8vm.decode import DecodedInstruction
from c8vm.errors import UnknownInstructionError
from c8vm.stack import pop


def instruction_address(state: EmulatorState) -> int:
    """Address the current instruction was fetched from."""
    return (int(state.pc) - 2) & ADDRESS_MASK


def unknown_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """Any pattern with no handler."""
    raise UnknownInstructionError(instruction.raw, instruction_address(state))


def execute_clear_screen(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """00E0 - Clear display."""
    return state.replace(display=jnp.zeros_like(state.display))


def execute_return(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """00EE - Return from subroutine."""
    stack, address = pop(state.stack, instruction_address(state))
    return state.replace(stack=stack, pc=address)


SYSTEM_INSTRUCTIONS = {
    0x00E0: execute_clear_screen,
    0x00EE: execute_return,
}


def execute_system_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """Dispatch system instructions."""
    handler = SYSTEM_INSTRUCTIONS.get(instruction.raw, unknown_instruction)
    return handler(state, instruction)
