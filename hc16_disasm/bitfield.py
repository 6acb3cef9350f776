"""
Bit-field extraction from a big-endian byte stream.

Bits are numbered MSB-first from the start of the buffer: bit 0 is the
top bit of byte 0, bit 8 the top bit of byte 1, and so on. A field may
start and end anywhere, covering part of one byte or spanning several.

The buffer is only touched through ``len(buffer)`` and ``buffer[i]`` with
integer ``i``, and every read is bounds-checked before the first byte is
fetched.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .operands import Extension, OperandField


class OutOfBoundsError(IndexError):
    """Raised when a read would go past the end of the input buffer."""
    def __init__(self, offset: int, needed: int, size: int, context: str = ""):
        self.offset = offset
        self.needed = needed
        self.size = size
        self.context = context
        msg = (f"need {needed} byte(s) at offset 0x{offset:08x}, "
               f"buffer holds 0x{size:x} byte(s)")
        super().__init__(f"{context}: {msg}" if context else msg)


def require(buffer: Sequence[int], offset: int, count: int, context: str = "") -> None:
    """Check that ``count`` bytes starting at ``offset`` lie inside ``buffer``."""
    size = len(buffer)
    if offset < 0 or count < 0 or offset > size or count > size - offset:
        raise OutOfBoundsError(offset, count, size, context)


def extract(buffer: Sequence[int], bit_offset: int, field: OperandField,
            context: Optional[str] = None) -> Tuple[int, int]:
    """Extract ``field`` starting at ``bit_offset``.

    Returns ``(value, bits_consumed)``. With ``Extension.SIGN`` the top bit
    of the field is replicated, so a set top bit gives a negative int.
    """
    width = field.width_bits
    first = bit_offset // 8
    last = (bit_offset + width - 1) // 8
    require(buffer, first, last - first + 1, context or f"field {field.name}")

    raw = 0
    for i in range(first, last + 1):
        raw = (raw << 8) | (buffer[i] & 0xFF)

    # drop the bits after the field in the last byte, then mask off the front
    trailing = (last + 1) * 8 - (bit_offset + width)
    value = (raw >> trailing) & field.mask

    if field.extension is Extension.SIGN and value & (1 << (width - 1)):
        value -= 1 << width
    return value, width


def to_unsigned(value: int, width_bits: int) -> int:
    """Two's-complement view of ``value`` in ``width_bits`` bits."""
    return value & ((1 << width_bits) - 1)
