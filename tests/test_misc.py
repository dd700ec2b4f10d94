"""Tests for miscellaneous instructions (Fxxx)."""

import pytest
from c8vm import execute, UnknownInstructionError, FONT_START, PROGRAM_START
from conftest import set_registers


class TestTimers:
    """Test timer-related instructions."""

    def test_misc_timer_instructions(self, fresh_state):
        """Timer set and get operations."""
        state = execute(fresh_state, 0x6030)  # V0 = 48
        state = execute(state, 0xF015)        # delay = V0
        assert state.delay_timer.val() == 48

        state = execute(state, 0x6120)  # V1 = 32
        state = execute(state, 0xF118)  # sound = V1
        assert state.sound_timer.val() == 32

        state = execute(state, 0xF207)  # V2 = delay
        assert state.V[2] == 48

    def test_set_delay_restarts_accumulator(self, fresh_state, clock):
        """Assigning a timer discards partially elapsed periods."""
        state = execute(fresh_state, 0x6005)
        state = execute(state, 0xF015)
        clock.advance(state.delay_timer.period_ns - 1)
        state = state.replace(delay_timer=state.delay_timer.update())

        state = execute(state, 0xF015)
        clock.advance(1)
        state = state.replace(delay_timer=state.delay_timer.update())

        assert state.delay_timer.val() == 5

    def test_read_after_decay(self, fresh_state, clock):
        state = execute(fresh_state, 0x600A)
        state = execute(state, 0xF015)
        clock.advance_ticks(4)
        state = state.replace(delay_timer=state.delay_timer.update())

        state = execute(state, 0xF307)
        assert state.V[3] == 6


class TestBCD:
    """Test BCD conversion."""

    @pytest.mark.parametrize("value,digits", [(156, [1, 5, 6]), (215, [2, 1, 5]), (0, [0, 0, 0]),
                                              (255, [2, 5, 5]), (9, [0, 0, 9]), (40, [0, 4, 0])])
    def test_bcd_conversion(self, fresh_state, value, digits):
        state = set_registers(fresh_state, V0=value)
        state = execute(state, 0xA300)
        state = execute(state, 0xF033)

        stored = [int(d) for d in state.memory[0x300:0x303]]
        assert stored == digits
        assert stored[0] * 100 + stored[1] * 10 + stored[2] == value


class TestFont:
    """Test font character addressing."""

    def test_misc_font_character(self, fresh_state):
        state = execute(fresh_state, 0x600A)  # V0 = 0xA
        state = execute(state, 0xF029)

        assert state.I == FONT_START + 0xA * 5

    def test_font_loaded(self, fresh_state):
        assert [int(b) for b in fresh_state.memory[FONT_START:FONT_START + 5]] == [0xF0, 0x90, 0x90, 0x90, 0xF0]
        assert [int(b) for b in fresh_state.memory[FONT_START + 75:FONT_START + 80]] == [0xF0, 0x80, 0xF0, 0x80, 0x80]


class TestWaitForKey:
    """Test FX0A."""

    def test_no_key_rewinds(self, fresh_state):
        state = fresh_state.replace(pc=fresh_state.pc + 2)  # as if just fetched
        state = execute(state, 0xF50A)
        assert state.pc == PROGRAM_START

    def test_lowest_pressed_key_stored(self, fresh_state):
        state = fresh_state.replace(keypad=fresh_state.keypad.at[0xC].set(True).at[0x4].set(True))
        state = state.replace(pc=state.pc + 2)
        state = execute(state, 0xF50A)

        assert state.V[5] == 0x4
        assert state.pc == PROGRAM_START + 2


def test_unknown_misc_instruction(fresh_state):
    with pytest.raises(UnknownInstructionError):
        execute(fresh_state, 0xF0FF)
