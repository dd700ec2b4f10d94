"""CHIP-8 call stack operations."""

import jax.numpy as jnp
from c8vm.constants import ADDRESS_MASK, STACK_SIZE
from c8vm.errors import StackOverflowError, StackUnderflowError
from c8vm.state import StackState


def push(stack: StackState, address: jnp.ndarray) -> StackState:
    """Push address onto stack."""
    if stack.pointer >= STACK_SIZE:
        raise StackOverflowError(int(address), stack.pointer)
    masked_address = address & ADDRESS_MASK
    new_data = stack.data.at[stack.pointer].set(masked_address)
    return stack.replace(data=new_data, pointer=stack.pointer + 1)


def pop(stack: StackState, address: int = 0) -> tuple[StackState, jnp.ndarray]:
    """Pop address from stack.

    ``address`` is only used to report where an underflowing return sits.
    """
    if stack.pointer == 0:
        raise StackUnderflowError(address)
    new_pointer = stack.pointer - 1
    popped_address = stack.data[new_pointer]
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address
