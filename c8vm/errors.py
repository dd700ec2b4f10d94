"""Exceptions raised by the CHIP-8 machine."""


class C8Error(Exception):
    """Base class for all machine errors."""


class ProgramLoadError(C8Error):
    """Program image could not be loaded.

    The underlying cause (usually an ``OSError``) is chained as ``__cause__``.
    """

    def __init__(self, path, message: str = "Failed to load the program"):
        self.path = path
        super().__init__(f"{message}: {path}")


class ProgramTooLargeError(ProgramLoadError):
    """Program does not fit between the program start and the end of memory."""

    def __init__(self, path, size: int, capacity: int):
        self.size = size
        self.capacity = capacity
        super().__init__(path, f"Program is {size} bytes, only {capacity} fit in memory")


class InvalidProgramStateError(C8Error):
    """The running program reached a state the machine cannot continue from."""


class UnknownInstructionError(InvalidProgramStateError):
    """Fetched instruction matches no known pattern."""

    def __init__(self, instruction: int, address: int):
        self.instruction = instruction
        self.address = address
        super().__init__(f"Unknown instruction {instruction:04X} at 0x{address:03X}")


class StackUnderflowError(InvalidProgramStateError):
    """Return executed with an empty call stack."""

    def __init__(self, address: int):
        self.address = address
        super().__init__(f"Return with empty call stack at 0x{address:03X}")


class StackOverflowError(InvalidProgramStateError):
    """Subroutine call executed with a full call stack."""

    def __init__(self, address: int, depth: int):
        self.address = address
        self.depth = depth
        super().__init__(f"Call stack overflow (depth {depth}) at 0x{address:03X}")
