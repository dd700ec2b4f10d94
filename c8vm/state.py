"""CHIP-8 machine state structures."""

import time
from typing import Callable

import jax
import jax.numpy as jnp
from flax.struct import dataclass, PyTreeNode, field

from c8vm.constants import (
    PROGRAM_START, FONT_START, FONT_DATA, MEMORY_SIZE, SCREEN_WIDTH, SCREEN_HEIGHT,
    STACK_SIZE, NUM_REGISTERS, NUM_KEYS,
)
from c8vm.timer import Timer


@dataclass(frozen=True)
class StackState:
    """Bounded call stack of return addresses."""
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: int = 0


class EmulatorState(PyTreeNode):
    """Main CHIP-8 machine state."""
    rng: jax.Array
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    pc: jnp.ndarray = field(default_factory=lambda: jnp.asarray(PROGRAM_START, dtype=jnp.uint16))
    display: jnp.ndarray = field(default_factory=lambda: jnp.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), dtype=jnp.bool_))
    stack: StackState = field(default_factory=StackState)
    delay_timer: Timer = field(default_factory=Timer)
    sound_timer: Timer = field(default_factory=Timer)
    keypad: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_KEYS, dtype=jnp.bool_))
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    I: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))


def create_state(rng: jax.Array = None,
                 clock: Callable[[], int] = time.monotonic_ns) -> EmulatorState:
    """Create initial machine state with font data loaded and both timers at zero."""
    if rng is None:
        rng = jax.random.PRNGKey(0)
    state = EmulatorState(rng, delay_timer=Timer.zero(clock), sound_timer=Timer.zero(clock))
    return state.replace(memory=state.memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(FONT_DATA))
