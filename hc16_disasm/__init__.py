"""
hc16dis — Motorola CPU16 (68HC16) Disassembler
==============================================
Turns a raw CPU16 program image into a flat listing, one instruction per
line, decoding straight through from offset 0.

Architecture:
    ┌───────────┐    ┌──────────┐    ┌───────────┐    ┌──────────┐
    │ raw bytes │───>│ Decoder  │───>│ Decoded   │───>│ Renderer │───> text
    └───────────┘    └──────────┘    │ Instr.    │    └──────────┘
                       │      │      └───────────┘
                       v      v
              InstructionTable  bitfield.extract

    - operands.py:  operand field widths / extension, named CPU16 fields
    - opcodes.py:   4 pages x 256 opcode descriptors (prebytes $17/$27/$37)
    - bitfield.py:  bounds-checked big-endian bit-field reads
    - decoder.py:   fetch/decode loop, cursor + state
    - renderer.py:  listing line format
"""

__version__ = "0.2.0"
__author__ = "KingAI"

from typing import List, Optional, Sequence

from .bitfield import OutOfBoundsError, extract
from .decoder import DecodedInstruction, Decoder, DecoderState
from .opcodes import (
    AddressingMode, InstructionDescriptor, InstructionTable, Page, default_table,
)
from .operands import Extension, OperandField, OperandKind
from .renderer import format_listing, format_operand, render

__all__ = [
    'AddressingMode', 'DecodedInstruction', 'Decoder', 'DecoderState',
    'Extension', 'InstructionDescriptor', 'InstructionTable', 'OperandField',
    'OperandKind', 'OutOfBoundsError', 'Page', 'default_table',
    'disassemble_bytes', 'disassemble_hex', 'extract', 'format_listing',
    'format_operand', 'parse_hex', 'render', 'render_bytes',
]


def disassemble_bytes(data: Sequence[int], table: Optional[InstructionTable] = None,
                      recover: bool = False) -> List[DecodedInstruction]:
    """Decode a whole image. Raises OutOfBoundsError unless ``recover``."""
    return list(Decoder(data, table, recover=recover))


def parse_hex(hex_string: str) -> bytes:
    """Parse flexible hex input: '17 00 12 34', '17,00,12,34', '0x17 0x00', '17001234'."""
    s = hex_string.strip()
    s = s.replace("0x", "").replace("0X", "")
    s = s.replace(",", " ").replace(";", " ").replace("\n", " ").replace("\t", " ")
    return bytes.fromhex("".join(s.split()))


def disassemble_hex(hex_string: str, table: Optional[InstructionTable] = None,
                    recover: bool = False) -> List[DecodedInstruction]:
    return disassemble_bytes(parse_hex(hex_string), table, recover)


def render_bytes(data: Sequence[int], profile: str = "hc16dis",
                 table: Optional[InstructionTable] = None) -> str:
    """Full listing text for an image."""
    return format_listing(Decoder(data, table), profile)
