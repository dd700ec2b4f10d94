"""Wall-clock driven CHIP-8 countdown timers."""

import time
from typing import Callable

from flax.struct import dataclass, PyTreeNode, field

from c8vm.constants import TIMER_TICKS, TIMER_DURATION_NS


@dataclass(frozen=True)
class Freq:
    """Tick rate: ``ticks`` decrements per ``duration_ns`` nanoseconds."""
    ticks: int = TIMER_TICKS
    duration_ns: int = TIMER_DURATION_NS

    @property
    def period_ns(self) -> int:
        return self.duration_ns // self.ticks


class Timer(PyTreeNode):
    """Decaying 8-bit counter.

    The value drops by one for every elapsed tick period of real time,
    independently of how often :meth:`update` is called. Timers are immutable;
    :meth:`update` and :meth:`reset` return new instances.
    """
    value: int = 0
    period_ns: int = field(pytree_node=False, default=Freq().period_ns)
    acc_ns: int = 0
    last_ns: int = 0
    clock: Callable[[], int] = field(pytree_node=False, default=time.monotonic_ns)

    @classmethod
    def with_freq(cls, value: int, freq: Freq = Freq(),
                  clock: Callable[[], int] = time.monotonic_ns) -> "Timer":
        return cls(value=int(value) & 0xFF, period_ns=freq.period_ns,
                   acc_ns=0, last_ns=clock(), clock=clock)

    @classmethod
    def new(cls, value: int, clock: Callable[[], int] = time.monotonic_ns) -> "Timer":
        return cls.with_freq(value, Freq(), clock)

    @classmethod
    def zero(cls, clock: Callable[[], int] = time.monotonic_ns) -> "Timer":
        return cls.new(0, clock)

    def update(self) -> "Timer":
        """Consume elapsed time, decrementing once per whole tick period."""
        now = self.clock()
        acc = self.acc_ns + (now - self.last_ns)
        value = self.value
        while value > 0 and acc >= self.period_ns:
            value -= 1
            acc -= self.period_ns
        return self.replace(value=value, acc_ns=acc, last_ns=now)

    def reset(self, value: int) -> "Timer":
        """Start over from ``value`` keeping the same rate and clock."""
        return self.replace(value=int(value) & 0xFF, acc_ns=0, last_ns=self.clock())

    def val(self) -> int:
        return self.value
