"""Test configuration and fixtures for CHIP-8 machine tests."""

import pytest
import jax.numpy as jnp
from c8vm import create_state, Machine
from c8vm.timer import Freq


class FakeClock:
    """Manually advanced nanosecond clock."""

    def __init__(self, start: int = 1_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ns: int):
        self.now += ns

    def advance_ticks(self, ticks: int):
        self.advance(ticks * Freq().period_ns)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fresh_state(clock):
    """Provide a fresh machine state for each test."""
    return create_state(clock=clock)


@pytest.fixture
def machine(clock):
    """Provide a machine driven by the fake clock."""
    return Machine(ticks_per_frame=10, clock=clock)


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )


def set_registers(state, **registers):
    """Helper to set registers by name, e.g. ``V1=0x10, VF=1``."""
    V = state.V
    for name, value in registers.items():
        V = V.at[int(name[1:], 16)].set(value)
    return state.replace(V=V)
