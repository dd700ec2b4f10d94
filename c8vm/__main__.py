"""Command line entry point: ``c8vm ROM [key=value ...]``."""

import argparse
import sys

from omegaconf.errors import OmegaConfBaseException

from c8vm.config import load_config
from c8vm.errors import ProgramLoadError
from c8vm.logging import get_logger, set_log_level
from c8vm.machine import Machine

logger = get_logger("c8vm")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="c8vm", description="Run a CHIP-8 program.")
    parser.add_argument("rom", help="CHIP-8 program to execute")
    parser.add_argument(
        "overrides", nargs="*",
        help="config overrides, e.g. ticks_per_frame=15 headless=true frames=120",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(args.overrides)
    except (OmegaConfBaseException, ValueError) as err:
        print(f"Invalid configuration: {err}", file=sys.stderr)
        return 2
    set_log_level(config.log_level)

    machine = Machine(ticks_per_frame=config.ticks_per_frame, seed=config.seed)
    try:
        machine.load_program(args.rom)
    except ProgramLoadError as err:
        cause = f" ({err.__cause__})" if err.__cause__ else ""
        logger.critical(f"{err}{cause}")
        return 1

    # Imported late so a bad ROM path fails before pygame initialises
    from c8vm.host import run_headless, run_window

    if config.headless:
        run_headless(machine, config)
    else:
        run_window(machine, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
