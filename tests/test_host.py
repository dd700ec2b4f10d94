"""Tests for pygame event handling."""

import pygame
from c8vm.host import KEY_MAP, handle_key_event


def test_key_layout_covers_keypad():
    assert sorted(KEY_MAP.values()) == list(range(16))
    assert KEY_MAP[pygame.K_x] == 0x0
    assert KEY_MAP[pygame.K_4] == 0xC


def test_key_events_reach_machine(machine):
    assert handle_key_event(machine, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
    assert machine.state.keypad[0x5]

    assert handle_key_event(machine, pygame.event.Event(pygame.KEYUP, key=pygame.K_w))
    assert not machine.state.keypad[0x5]


def test_unmapped_key_ignored(machine):
    assert handle_key_event(machine, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_m))
    assert not machine.state.keypad.any()


def test_quit_events():
    assert not handle_key_event(None, pygame.event.Event(pygame.QUIT))
    assert not handle_key_event(None, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
