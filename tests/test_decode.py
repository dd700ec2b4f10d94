"""Tests for instruction decoding."""

import dataclasses

from c8vm import decode


def test_decode_fields():
    decoded = decode(0xD12F)

    assert (decoded.opcode, decoded.x, decoded.y, decoded.n) == (0xD, 0x1, 0x2, 0xF)
    assert decoded.nn == 0x2F
    assert decoded.nnn == 0x12F
    assert decoded.raw == 0xD12F


def test_decoded_instruction_fields_only():
    """Only the raw word and its operand fields are exposed."""
    names = [f.name for f in dataclasses.fields(decode(0x00E0))]
    assert names == ["raw", "opcode", "x", "y", "n", "nn", "nnn"]
