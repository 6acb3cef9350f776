"""
Listing renderer.

    00000000: 00ab             com [%x]+0xab
    00000002: 17001234         com [%x]+0x1234

Offset and raw bytes are padded to MNEMONIC_COLUMN, followed by two spaces
and the mnemonic. Operand values are printed in the field's own width (two
hex digits per started byte); sign-extended values print as their
two's-complement bits.
"""

from __future__ import annotations

from typing import Iterable

from .bitfield import to_unsigned
from .config import (
    DEFAULT_PROFILE, INDEX_MARKER, MNEMONIC_COLUMN, OFFSET_DIGITS, OUTPUT_PROFILES,
)
from .decoder import DecodedInstruction
from .opcodes import AddressingMode
from .operands import OperandField


def format_operand(field: OperandField, value: int, mode: AddressingMode) -> str:
    """One operand, with the index-register marker for indexed modes."""
    text = f"0x{to_unsigned(value, field.width_bits):0{field.hex_digits}x}"
    if mode.is_indexed:
        return INDEX_MARKER.format(reg=mode.index_register) + text
    return text


def render(inst: DecodedInstruction) -> str:
    """Format one decoded instruction as a listing line (no newline)."""
    head = f"{inst.offset:0{OFFSET_DIGITS}x}: {inst.raw_bytes.hex()}"
    operands = ", ".join(format_operand(field, value, inst.mode)
                         for field, value in inst.operands)
    line = f"{head:<{MNEMONIC_COLUMN}}  {inst.mnemonic}"
    if operands:
        line += " " + operands
    return line


def format_listing(instructions: Iterable[DecodedInstruction],
                   profile: str = DEFAULT_PROFILE) -> str:
    """Render a sequence of instructions with the profile's line endings."""
    line_end = OUTPUT_PROFILES[profile]["line_end"]
    return "".join(render(inst) + line_end for inst in instructions)
