"""pygame window loop and headless runner."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from c8vm.config import HostConfig
from c8vm.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from c8vm.errors import InvalidProgramStateError
from c8vm.logging import get_logger, progress
from c8vm.machine import Machine
from c8vm.rendering import create_color_scheme, display_to_rgb, save_screenshot

logger = get_logger("c8vm.host")

# 1 2 3 C / 4 5 6 D / 7 8 9 E / A 0 B F on the left-hand block of a QWERTY keyboard
KEY_MAP = {
    pygame.K_1: 0x1, pygame.K_2: 0x2, pygame.K_3: 0x3, pygame.K_4: 0xC,
    pygame.K_q: 0x4, pygame.K_w: 0x5, pygame.K_e: 0x6, pygame.K_r: 0xD,
    pygame.K_a: 0x7, pygame.K_s: 0x8, pygame.K_d: 0x9, pygame.K_f: 0xE,
    pygame.K_z: 0xA, pygame.K_x: 0x0, pygame.K_c: 0xB, pygame.K_v: 0xF,
}

CAPTION = "C8"


def handle_key_event(machine: Machine, event) -> bool:
    """Forward a keypad event to the machine. Returns False on quit requests."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key in KEY_MAP:
            machine.key_pressed(KEY_MAP[event.key], True)
    elif event.type == pygame.KEYUP and event.key in KEY_MAP:
        machine.key_pressed(KEY_MAP[event.key], False)
    return True


def draw(screen, machine: Machine, config: HostConfig):
    on_color, off_color = create_color_scheme(config.color_scheme)
    rgb = display_to_rgb(machine.state.display, 1, on_color, off_color)
    # surfarray wants (width, height, 3)
    surface = pygame.surfarray.make_surface(rgb.transpose(1, 0, 2))
    screen.blit(pygame.transform.scale(surface, screen.get_size()), (0, 0))
    pygame.display.flip()


def run_window(machine: Machine, config: HostConfig):
    """Run the machine in a window until it is closed or Escape is pressed.

    A program fault halts the machine but leaves the window open on the last
    frame.
    """
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH * config.scale, SCREEN_HEIGHT * config.scale))
    pygame.display.set_caption(CAPTION)
    clock = pygame.time.Clock()

    halted = False
    running = True
    try:
        while running:
            clock.tick(config.fps)

            for event in pygame.event.get():
                if not handle_key_event(machine, event):
                    running = False

            if not halted:
                try:
                    machine.run_frame()
                except InvalidProgramStateError as err:
                    logger.error(f"Program halted: {err}")
                    pygame.display.set_caption(f"{CAPTION} - HALTED")
                    halted = True

            draw(screen, machine, config)
    finally:
        pygame.quit()


def run_headless(machine: Machine, config: HostConfig) -> int:
    """Run ``config.frames`` frames without a window.

    Returns:
        Number of frames completed before the end or a program fault
    """
    completed = 0
    for _ in progress(range(config.frames), total=config.frames, desc="Frames"):
        try:
            machine.run_frame()
        except InvalidProgramStateError as err:
            logger.error(f"Program halted after {completed} frames: {err}")
            break
        completed += 1

    if config.screenshot:
        save_screenshot(machine.state.display, config.screenshot, config.scale, config.color_scheme)
        logger.info(f"Saved screenshot to {config.screenshot}")
    return completed
