"""Tests for system instructions (0xxx) and call stack faults."""

import jax.numpy as jnp
import pytest
from c8vm import (
    execute, STACK_SIZE, InvalidProgramStateError, StackOverflowError,
    StackUnderflowError, UnknownInstructionError,
)


def test_execute_clear_screen(fresh_state):
    """00E0 - Clear display."""
    state = fresh_state.replace(display=fresh_state.display.at[0, 0].set(True).at[63, 31].set(True))

    state = execute(state, 0x00E0)

    assert jnp.sum(state.display) == 0


def test_execute_call_and_return(fresh_state):
    """2NNN (call) and 00EE (return) together."""
    state = fresh_state
    initial_pc = state.pc

    state = execute(state, 0x2300)
    assert state.pc == 0x300
    assert state.stack.data[state.stack.pointer - 1] == initial_pc

    state = execute(state, 0x00EE)
    assert state.pc == initial_pc
    assert state.stack.pointer == 0


def test_nested_calls_unwind_in_order(fresh_state):
    state = execute(fresh_state, 0x2300)
    state = execute(state, 0x2400)
    state = execute(state, 0x2500)

    state = execute(state, 0x00EE)
    assert state.pc == 0x400
    state = execute(state, 0x00EE)
    assert state.pc == 0x300
    state = execute(state, 0x00EE)
    assert state.pc == fresh_state.pc


def test_return_with_empty_stack(fresh_state):
    with pytest.raises(StackUnderflowError) as excinfo:
        execute(fresh_state, 0x00EE)
    assert isinstance(excinfo.value, InvalidProgramStateError)


def test_call_with_full_stack(fresh_state):
    state = fresh_state
    for _ in range(STACK_SIZE):
        state = execute(state, 0x2300)

    with pytest.raises(StackOverflowError):
        execute(state, 0x2300)


@pytest.mark.parametrize("instruction", [0x0000, 0x0123, 0x00E1, 0x00FF])
def test_unknown_system_instruction(fresh_state, instruction):
    with pytest.raises(UnknownInstructionError) as excinfo:
        execute(fresh_state, instruction)
    assert excinfo.value.instruction == instruction
    assert f"{instruction:04X}" in str(excinfo.value)
