"""
Listing format tests.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from hc16_disasm import render_bytes
from hc16_disasm.config import MNEMONIC_COLUMN
from hc16_disasm.decoder import Decoder
from hc16_disasm.opcodes import AddressingMode
from hc16_disasm.operands import OP_FF, OP_GGGG, OP_II, OP_Z, OP_ZG
from hc16_disasm.renderer import format_listing, format_operand, render


def _line(data, offset=0):
    return render(Decoder(bytes(data)).decode_at(offset))


def _expect(head, rest):
    return head.ljust(MNEMONIC_COLUMN) + "  " + rest


class TestFormatOperand:

    def test_plain(self):
        assert format_operand(OP_FF, 0xAB, AddressingMode.EXT) == "0xab"

    def test_indexed_marker(self):
        assert format_operand(OP_FF, 0xAB, AddressingMode.IND8Y) == "[%y]+0xab"
        assert format_operand(OP_GGGG, 0x1234, AddressingMode.IND16Z) == "[%z]+0x1234"

    def test_negative_prints_twos_complement(self):
        assert format_operand(OP_GGGG, -16, AddressingMode.EXT) == "0xfff0"
        assert format_operand(OP_II, -1, AddressingMode.IMM8) == "0xff"

    def test_nibbles_print_two_digits(self):
        assert format_operand(OP_ZG, -1, AddressingMode.EXT) == "0x0f"
        assert format_operand(OP_Z, 3, AddressingMode.EXT20) == "0x03"

    def test_leading_zeros_kept(self):
        assert format_operand(OP_GGGG, 0x10, AddressingMode.EXT) == "0x0010"


class TestRender:

    def test_indexed_8(self):
        line = _line([0x00, 0xAB])
        assert line == _expect("00000000: 00ab", "com [%x]+0xab")
        assert line.index("com") == MNEMONIC_COLUMN + 2

    def test_indexed_16_negative(self):
        assert _line([0x17, 0x00, 0xFF, 0xF0]) == _expect(
            "00000000: 1700fff0", "com [%x]+0xfff0")

    def test_inherent_has_no_trailing_space(self):
        line = _line([0x27, 0xF7])
        assert line == _expect("00000000: 27f7", "rts")
        assert not line.endswith(" ")

    def test_accumulator_offset_mode(self):
        assert _line([0x27, 0x45]) == _expect("00000000: 2745", "ldaa")

    def test_twenty_bit_indexed(self):
        assert _line([0x4B, 0x0F, 0xFF, 0xFE]) == _expect(
            "00000000: 4b0ffffe", "jmp [%x]+0x0f, [%x]+0xfffe")

    def test_ext20(self):
        assert _line([0xFA, 0x3C, 0x12, 0x34]) == _expect(
            "00000000: fa3c1234", "jsr 0x03, 0x0c, 0x12, 0x34")

    def test_bit_branch(self):
        assert _line([0x3A, 0x01, 0x12, 0x34, 0x00, 0x10]) == _expect(
            "00000000: 3a0112340010", "brclr 0x01, 0x12, 0x34, 0x0010")

    def test_unrecognized(self):
        assert _line([0x07, 0x80]) == _expect("00000000: 0780", "unrecognized 0x80")

    def test_offset_and_raw_bytes_in_stream_order(self):
        line = _line([0x27, 0xF7, 0x37, 0xB5, 0xBE, 0xEF], offset=2)
        assert line == _expect("00000002: 37b5beef", "ldd 0xbe, 0xef")

    def test_large_offset(self):
        data = bytes(0x10000) + bytes([0x27, 0xF7])
        assert _line(data, offset=0x10000).startswith("00010000: 27f7 ")


class TestListing:

    DATA = bytes([0x00, 0xAB, 0x27, 0xF7])

    def test_default_profile_blank_lines(self):
        text = format_listing(Decoder(self.DATA))
        assert text == (_expect("00000000: 00ab", "com [%x]+0xab") + "\n\n"
                        + _expect("00000002: 27f7", "rts") + "\n\n")

    def test_compact_profile(self):
        text = render_bytes(self.DATA, "compact")
        assert text.splitlines() == [
            _expect("00000000: 00ab", "com [%x]+0xab"),
            _expect("00000002: 27f7", "rts"),
        ]
        assert text.endswith("rts\n")

    def test_empty_image(self):
        assert render_bytes(b"") == ""

    def test_unknown_profile(self):
        with pytest.raises(KeyError):
            render_bytes(self.DATA, "bogus")
