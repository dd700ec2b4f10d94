"""Host-facing CHIP-8 machine."""

import os
import time
from typing import Callable

import jax
import numpy as np

from c8vm.constants import NUM_KEYS
from c8vm.emulator import load_rom, load_program, tick
from c8vm.logging import get_logger
from c8vm.rendering import render_frame
from c8vm.state import EmulatorState, create_state

logger = get_logger("c8vm.machine")


class Machine:
    """Owns one emulator state and advances it in place.

    The instruction handlers are pure functions over :class:`EmulatorState`;
    this class rebinds ``self.state`` after every step so a host can treat
    the machine as a single mutable object.
    """

    def __init__(self, ticks_per_frame: int = 10, seed: int = 0,
                 clock: Callable[[], int] = time.monotonic_ns):
        if ticks_per_frame < 1:
            raise ValueError(f"ticks_per_frame must be positive, got {ticks_per_frame}")
        self.ticks_per_frame = ticks_per_frame
        self.state: EmulatorState = create_state(jax.random.PRNGKey(seed), clock)

    def load_program(self, path: str | os.PathLike):
        """Load a program file at 0x200.

        Raises:
            ProgramLoadError: if the file cannot be read or does not fit.
        """
        self.state = load_rom(self.state, path)

    def load_bytes(self, data: bytes):
        self.state = load_program(self.state, data)

    def tick(self):
        """Advance timers and execute one instruction."""
        self.state = tick(self.state)

    def run_frame(self):
        """Execute ``ticks_per_frame`` instructions."""
        for _ in range(self.ticks_per_frame):
            self.tick()

    def render(self, frame: np.ndarray) -> np.ndarray:
        return render_frame(self.state.display, frame)

    def key_pressed(self, key: int, pressed: bool):
        if not 0 <= key < NUM_KEYS:
            raise IndexError(f"Key {key} outside 0..{NUM_KEYS - 1}")
        logger.debug(f"key {key:x} => {pressed}")
        self.state = self.state.replace(keypad=self.state.keypad.at[key].set(pressed))

    @property
    def pc(self) -> int:
        return int(self.state.pc)

    @property
    def delay(self) -> int:
        return self.state.delay_timer.val()

    @property
    def sound(self) -> int:
        return self.state.sound_timer.val()
