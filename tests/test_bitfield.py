"""
Bit-field extractor tests.

Covers byte-aligned, sub-byte and byte-spanning fields, sign / zero
extension, and bounds checking before any byte is read.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from hc16_disasm.bitfield import OutOfBoundsError, extract, require, to_unsigned
from hc16_disasm.operands import (
    ALL_FIELDS, OP_FF, OP_GGGG, OP_II, OP_Z, OP_ZG, Extension, OperandField,
    OperandKind,
)


class TracingBuffer:
    """Byte buffer that records every index read and fails on out-of-range ones."""

    def __init__(self, data):
        self._data = bytes(data)
        self.reads = []

    def __len__(self):
        return len(self._data)

    def __getitem__(self, i):
        assert isinstance(i, int), f"non-integer access {i!r}"
        self.reads.append(i)
        assert 0 <= i < len(self._data), f"out-of-range read at {i}"
        return self._data[i]


def _field(width, ext=Extension.NONE):
    return OperandField("t", OperandKind.OFFSET16, width, ext)


# ═══════════════════════════════════════════════
# Alignment
# ═══════════════════════════════════════════════

class TestAlignment:

    def test_single_byte(self):
        assert extract(b"\xab", 0, OP_FF) == (0xAB, 8)

    def test_second_byte(self):
        assert extract(b"\x00\x5a", 8, OP_FF) == (0x5A, 8)

    def test_upper_nibble(self):
        """4-bit field at bit 0 is the high nibble."""
        assert extract(b"\xa5", 0, _field(4)) == (0xA, 4)

    def test_lower_nibble(self):
        assert extract(b"\xa5", 4, _field(4)) == (0x5, 4)

    def test_single_bit(self):
        assert extract(b"\x40", 1, _field(1)) == (1, 1)
        assert extract(b"\x40", 2, _field(1)) == (0, 1)

    def test_big_endian_word(self):
        assert extract(b"\x12\x34", 0, _field(16)) == (0x1234, 16)

    def test_word_spanning_three_bytes(self):
        """16 bits starting mid-byte cover three bytes."""
        assert extract(b"\x12\x34\x56", 4, _field(16)) == (0x2345, 16)

    def test_twenty_bits(self):
        assert extract(b"\x0a\xbc\xde", 4, _field(20)) == (0xABCDE, 20)

    def test_thirty_two_bits(self):
        assert extract(b"\xde\xad\xbe\xef", 0, _field(32)) == (0xDEADBEEF, 32)

    def test_odd_width_odd_offset(self):
        # 0b1011_0110 0b1100_0000 -> bits 3..9 = 1 0110 11 = 0b1011011
        assert extract(bytes([0b10110110, 0b11000000]), 3, _field(7)) == (0b1011011, 7)

    def test_buffer_not_mutated(self):
        buf = bytearray(b"\xff\x00")
        extract(buf, 4, _field(8, Extension.SIGN))
        assert buf == bytearray(b"\xff\x00")


# ═══════════════════════════════════════════════
# Extension
# ═══════════════════════════════════════════════

class TestExtension:

    def test_sign_extend_negative(self):
        assert extract(b"\x80", 0, OP_II) == (-128, 8)
        assert extract(b"\xff", 0, OP_II) == (-1, 8)

    def test_sign_extend_positive(self):
        assert extract(b"\x7f", 0, OP_II) == (127, 8)

    def test_sign_extend_word(self):
        assert extract(b"\xff\xf0", 0, OP_GGGG) == (-16, 16)

    def test_sign_extend_nibble(self):
        """zg is the signed top nibble of a 20-bit offset."""
        assert extract(b"\x0f", 4, OP_ZG) == (-1, 4)
        assert extract(b"\x07", 4, OP_ZG) == (7, 4)

    def test_zero_extend_nibble(self):
        assert extract(b"\xf0", 0, OP_Z) == (15, 4)

    def test_no_extension_is_unsigned(self):
        assert extract(b"\xff", 0, OP_FF) == (255, 8)

    @pytest.mark.parametrize("width", range(1, 33))
    def test_top_bit_set_all_widths(self, width):
        """Top bit set: SIGN gives a negative value, ZERO a non-negative one."""
        buf = b"\xff\xff\xff\xff"
        signed, _ = extract(buf, 0, _field(width, Extension.SIGN))
        zeroed, _ = extract(buf, 0, _field(width, Extension.ZERO))
        assert signed < 0
        assert signed == -1
        assert zeroed == (1 << width) - 1
        assert 0 <= zeroed < (1 << width)

    def test_to_unsigned(self):
        assert to_unsigned(-1, 4) == 0xF
        assert to_unsigned(-16, 16) == 0xFFF0
        assert to_unsigned(0x12, 8) == 0x12


# ═══════════════════════════════════════════════
# Bounds
# ═══════════════════════════════════════════════

class TestBounds:

    def test_field_past_end(self):
        with pytest.raises(OutOfBoundsError):
            extract(b"\x12", 0, OP_GGGG)

    def test_no_read_before_failing(self):
        buf = TracingBuffer(b"\x12\x34")
        with pytest.raises(OutOfBoundsError):
            extract(buf, 12, OP_FF)     # needs bytes 1 and 2
        assert buf.reads == []

    def test_empty_buffer(self):
        buf = TracingBuffer(b"")
        with pytest.raises(OutOfBoundsError):
            extract(buf, 0, _field(1))
        assert buf.reads == []

    def test_exact_fit_reads_only_needed_bytes(self):
        buf = TracingBuffer(b"\x00\x12\x34\x00")
        assert extract(buf, 8, OP_GGGG) == (0x1234, 16)
        assert buf.reads == [1, 2]

    def test_negative_offset(self):
        with pytest.raises(OutOfBoundsError):
            extract(b"\x00\x00", -8, OP_FF)

    def test_error_details(self):
        with pytest.raises(OutOfBoundsError) as exc:
            require(b"\x00\x00\x00", 2, 4, "brclr at 0x00000002")
        err = exc.value
        assert (err.offset, err.needed, err.size) == (2, 4, 3)
        assert "brclr" in str(err)
        assert isinstance(err, IndexError)

    def test_require_at_end_is_ok_for_zero_bytes(self):
        require(b"\x00", 1, 0)


class TestOperandField:

    @pytest.mark.parametrize("width", [0, -1, 33])
    def test_bad_width(self, width):
        with pytest.raises(ValueError):
            OperandField("bad", OperandKind.IMM8, width)

    def test_display_width(self):
        assert OP_Z.hex_digits == 2
        assert OP_FF.hex_digits == 2
        assert OP_GGGG.hex_digits == 4
        assert _field(20).hex_digits == 6

    def test_mask(self):
        assert OP_ZG.mask == 0xF
        assert OP_GGGG.mask == 0xFFFF

    def test_cpu16_fields(self):
        assert len({f.kind for f in ALL_FIELDS}) == len(ALL_FIELDS)
        assert {f.name for f in ALL_FIELDS if f.signed} == {"gggg", "zg", "ii", "rrrr"}

    def test_kind_identifies_field(self):
        """Equal fields compare equal regardless of identity."""
        clone = OperandField("gggg", OperandKind.OFFSET16, 16, Extension.SIGN)
        assert clone == OP_GGGG
        assert clone is not OP_GGGG
        assert clone.kind is OperandKind.OFFSET16
