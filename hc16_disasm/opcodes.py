"""
CPU16 Instruction Table
=======================
Opcode -> instruction descriptor maps for the Motorola CPU16 (68HC16).

The CPU16 opcode space is split into four pages. A page is selected by an
optional prebyte in front of the opcode:

  (none)  page 0  — indexed 8-bit, branches, immediate 8-bit
  $17     page 1  — indexed 16-bit, extended
  $27     page 2  — word ops, E-indexed, inherent
  $37     page 3  — inherent, immediate 16-bit, long branches

Every (page, opcode) pair resolves to a descriptor; opcodes with no
instruction resolve to ``unrecognized`` so lookup never fails.

Usage:
    table = default_table()
    desc = table.lookup(Page.PAGE_17, 0x00)   # com gggg,X
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Dict, Mapping, Optional, Tuple

from . import config
from .operands import (
    FF, FFHHLL, GGGG, GGGGMMMM, HHLL, HHLLHHLL, HHLLMMMM, II, JJKK,
    MMFFRR, MMGGGG, MMGGGGRRRR, MMHHLL, MMHHLLRRRR, NONE, RR, RRRR,
    XOYO, ZBHHLL, ZGGGGG, Layout, OperandField, layout_bits,
)

UNRECOGNIZED = "unrecognized"


# ═══════════════════════════════════════════════════════════════════════
# ADDRESSING MODES / PAGES
# ═══════════════════════════════════════════════════════════════════════

class AddressingMode(Enum):
    """CPU16 addressing modes. ``label`` is the display name."""
    IND8X = ("ind8x", "X")
    IND8Y = ("ind8y", "Y")
    IND8Z = ("ind8z", "Z")
    IND16X = ("ind16x", "X")
    IND16Y = ("ind16y", "Y")
    IND16Z = ("ind16z", "Z")
    IND20X = ("ind20x", "X")
    IND20Y = ("ind20y", "Y")
    IND20Z = ("ind20z", "Z")
    EXT = ("ext", "EXT")
    EXT20 = ("ext20", "EXT20")
    REL8 = ("rel8", "rel8")
    REL16 = ("rel16", "rel16")
    IMM8 = ("imm8", "imm8")
    IMM16 = ("imm16", "imm16")
    INH = ("inh", "INH")
    EX = ("ex", "E_X")              # accumulator E offset, X
    EY = ("ey", "E_Y")
    EZ = ("ez", "E_Z")
    IXP2EXT = ("ixp2ext", "IXP->EXT")
    EXT2IXP = ("ext2ixp", "EXT->IXP")
    EXT2EXT = ("ext2ext", "EXT->EXT")

    def __init__(self, key: str, label: str):
        self.key = key
        self.label = label

    @property
    def is_indexed(self) -> bool:
        """Register-plus-offset modes (8/16/20-bit X, Y, Z)."""
        return self.key.startswith("ind")

    @property
    def index_register(self) -> Optional[str]:
        if self.is_indexed:
            return self.label.lower()
        return None


class Page(Enum):
    """Opcode page, selected by an optional prebyte. Value is the table index."""
    UNPREFIXED = 0
    PAGE_17 = 1
    PAGE_27 = 2
    PAGE_37 = 3

    @property
    def prefix(self) -> Optional[int]:
        if self is Page.UNPREFIXED:
            return None
        return 0x07 | (self.value << 4)

    @property
    def default_mode(self) -> AddressingMode:
        """Mode given to opcodes with no defined instruction on this page."""
        if self.value < 2:
            return AddressingMode.IMM8
        return AddressingMode.INH

    @property
    def default_operands(self) -> Layout:
        if self.value < 2:
            return II
        return NONE

    @classmethod
    def from_prefix(cls, prefix: int) -> "Page":
        if prefix not in PREFIX_BYTES:
            raise ValueError(f"${prefix:02X} is not a page prebyte")
        return cls((prefix >> 4) & 3)


PREFIX_BYTES = frozenset(config.PREFIX_BYTES)


@dataclass(frozen=True)
class InstructionDescriptor:
    """Static description of one opcode on one page."""
    opcode: int
    mnemonic: str
    mode: AddressingMode
    operands: Tuple[OperandField, ...] = ()

    @property
    def operand_bits(self) -> int:
        return layout_bits(self.operands)

    @property
    def operand_bytes(self) -> int:
        """Bytes following the opcode (operand bits rounded up)."""
        return (self.operand_bits + 7) // 8

    @property
    def recognized(self) -> bool:
        return self.mnemonic != UNRECOGNIZED

    def __str__(self) -> str:
        fields = " ".join(f.name for f in self.operands)
        return f"{self.mnemonic:8s} ({self.mode.label}{', ' + fields if fields else ''})"


# (mnemonic, mode, operand layout)
Entry = Tuple[str, AddressingMode, Layout]


class InstructionTable:
    """Immutable 4 x 256 descriptor table.

    Built from a ``{Page: {opcode: (mnemonic, mode, layout)}}`` mapping.
    Pages or opcodes left out of the mapping are filled with the page's
    ``unrecognized`` descriptor, so a small synthetic table is still a
    complete table.
    """

    __slots__ = ("_pages",)

    def __init__(self, pages: Optional[Mapping[Page, Mapping[int, Entry]]] = None):
        pages = pages or {}
        built = []
        for page in Page:
            entries = pages.get(page, {})
            for opcode in entries:
                if not 0 <= opcode <= 0xFF:
                    raise ValueError(f"{page.name}: opcode {opcode!r} out of range")
            row = []
            for opcode in range(0x100):
                if opcode in entries:
                    mnemonic, mode, layout = entries[opcode]
                    row.append(InstructionDescriptor(opcode, mnemonic, mode, tuple(layout)))
                else:
                    row.append(InstructionDescriptor(
                        opcode, UNRECOGNIZED, page.default_mode, page.default_operands))
            built.append(tuple(row))
        self._pages: Tuple[Tuple[InstructionDescriptor, ...], ...] = tuple(built)

    def lookup(self, page: Page, opcode: int) -> InstructionDescriptor:
        if not 0 <= opcode <= 0xFF:
            raise ValueError(f"opcode {opcode!r} out of range 0..255")
        return self._pages[page.value][opcode]

    def page(self, page: Page) -> Tuple[InstructionDescriptor, ...]:
        return self._pages[page.value]

    def __iter__(self):
        for page in Page:
            for desc in self._pages[page.value]:
                yield page, desc

    def __len__(self) -> int:
        return sum(len(row) for row in self._pages)

    def get_stats(self) -> Dict[str, int]:
        stats = {page.name.lower(): sum(1 for d in self._pages[page.value] if d.recognized)
                 for page in Page}
        stats["total"] = sum(stats.values())
        return stats


# ═══════════════════════════════════════════════════════════════════════
# CPU16 OPCODE MAPS
# ═══════════════════════════════════════════════════════════════════════

_M = AddressingMode
IND8X, IND8Y, IND8Z = _M.IND8X, _M.IND8Y, _M.IND8Z
IND16X, IND16Y, IND16Z = _M.IND16X, _M.IND16Y, _M.IND16Z
IND20X, IND20Y, IND20Z = _M.IND20X, _M.IND20Y, _M.IND20Z
EXT, EXT20, INH = _M.EXT, _M.EXT20, _M.INH
REL8, REL16, IMM8, IMM16 = _M.REL8, _M.REL16, _M.IMM8, _M.IMM16
EX, EY, EZ = _M.EX, _M.EY, _M.EZ
IXP2EXT, EXT2IXP, EXT2EXT = _M.IXP2EXT, _M.EXT2IXP, _M.EXT2EXT


def _page0_opcodes() -> Dict[int, Entry]:
    """Unprefixed opcode map. $17/$27/$37 are the page prebytes."""
    return {
        0x00: ("com",    IND8X,   FF),
        0x01: ("dec",    IND8X,   FF),
        0x02: ("neg",    IND8X,   FF),
        0x03: ("inc",    IND8X,   FF),
        0x04: ("asl",    IND8X,   FF),
        0x05: ("clr",    IND8X,   FF),
        0x06: ("tst",    IND8X,   FF),
        0x08: ("bclr",   IND16X,  MMGGGG),
        0x09: ("bset",   IND16X,  MMGGGG),
        0x0a: ("brclr",  IND16X,  MMGGGGRRRR),
        0x0b: ("brset",  IND16X,  MMGGGGRRRR),
        0x0c: ("rol",    IND8X,   FF),
        0x0d: ("asr",    IND8X,   FF),
        0x0e: ("ror",    IND8X,   FF),
        0x0f: ("lsr",    IND8X,   FF),
        0x10: ("com",    IND8Y,   FF),
        0x11: ("dec",    IND8Y,   FF),
        0x12: ("neg",    IND8Y,   FF),
        0x13: ("inc",    IND8Y,   FF),
        0x14: ("asl",    IND8Y,   FF),
        0x15: ("clr",    IND8Y,   FF),
        0x16: ("tst",    IND8Y,   FF),
        0x17: ("prebyte", INH,     NONE),
        0x18: ("bclr",   IND16Y,  MMGGGG),
        0x19: ("bset",   IND16Y,  MMGGGG),
        0x1a: ("brclr",  IND16Y,  MMGGGGRRRR),
        0x1b: ("brset",  IND16Y,  MMGGGGRRRR),
        0x1c: ("rol",    IND8Y,   FF),
        0x1d: ("asr",    IND8Y,   FF),
        0x1e: ("ror",    IND8Y,   FF),
        0x1f: ("lsr",    IND8Y,   FF),
        0x20: ("com",    IND8Z,   FF),
        0x21: ("dec",    IND8Z,   FF),
        0x22: ("neg",    IND8Z,   FF),
        0x23: ("inc",    IND8Z,   FF),
        0x24: ("asl",    IND8Z,   FF),
        0x25: ("clr",    IND8Z,   FF),
        0x26: ("tst",    IND8Z,   FF),
        0x27: ("prebyte", INH,     NONE),
        0x28: ("bclr",   IND16Z,  MMGGGG),
        0x29: ("bset",   IND16Z,  MMGGGG),
        0x2a: ("brclr",  IND16Z,  MMGGGGRRRR),
        0x2b: ("brset",  IND16Z,  MMGGGGRRRR),
        0x2c: ("rol",    IND8Z,   FF),
        0x2d: ("asr",    IND8Z,   FF),
        0x2e: ("ror",    IND8Z,   FF),
        0x2f: ("lsr",    IND8Z,   FF),
        0x30: ("movb",   IXP2EXT, FFHHLL),
        0x31: ("movw",   IXP2EXT, FFHHLL),
        0x32: ("movb",   EXT2IXP, FFHHLL),
        0x33: ("movw",   EXT2IXP, FFHHLL),
        0x34: ("pshm",   INH,     II),
        0x35: ("pulm",   INH,     II),
        0x36: ("bsr",    REL8,    RR),
        0x37: ("prebyte", INH,     NONE),
        0x38: ("bclr",   EXT,     MMHHLL),
        0x39: ("bset",   EXT,     MMHHLL),
        0x3a: ("brclr",  EXT,     MMHHLLRRRR),
        0x3b: ("brset",  EXT,     MMHHLLRRRR),
        0x3c: ("aix",    IMM8,    II),
        0x3d: ("aiy",    IMM8,    II),
        0x3e: ("aiz",    IMM8,    II),
        0x3f: ("ais",    IMM8,    II),
        0x40: ("suba",   IND8X,   FF),
        0x41: ("adda",   IND8X,   FF),
        0x42: ("sbca",   IND8X,   FF),
        0x43: ("adca",   IND8X,   FF),
        0x44: ("eora",   IND8X,   FF),
        0x45: ("ldaa",   IND8X,   FF),
        0x46: ("anda",   IND8X,   FF),
        0x47: ("oraa",   IND8X,   FF),
        0x48: ("cmpa",   IND8X,   FF),
        0x49: ("bita",   IND8X,   FF),
        0x4a: ("staa",   IND8X,   FF),
        0x4b: ("jmp",    IND20X,  ZGGGGG),
        0x4c: ("cpx",    IND8X,   FF),
        0x4d: ("cpy",    IND8X,   FF),
        0x4e: ("cpz",    IND8X,   FF),
        0x4f: ("cps",    IND8X,   FF),
        0x50: ("suba",   IND8Y,   FF),
        0x51: ("adda",   IND8Y,   FF),
        0x52: ("sbca",   IND8Y,   FF),
        0x53: ("adca",   IND8Y,   FF),
        0x54: ("eora",   IND8Y,   FF),
        0x55: ("ldaa",   IND8Y,   FF),
        0x56: ("anda",   IND8Y,   FF),
        0x57: ("oraa",   IND8Y,   FF),
        0x58: ("cmpa",   IND8Y,   FF),
        0x59: ("bita",   IND8Y,   FF),
        0x5a: ("staa",   IND8Y,   FF),
        0x5b: ("jmp",    IND20Y,  ZGGGGG),
        0x5c: ("cpx",    IND8Y,   FF),
        0x5d: ("cpy",    IND8Y,   FF),
        0x5e: ("cpz",    IND8Y,   FF),
        0x5f: ("cps",    IND8Y,   FF),
        0x60: ("suba",   IND8Z,   FF),
        0x61: ("adda",   IND8Z,   FF),
        0x62: ("sbca",   IND8Z,   FF),
        0x63: ("adca",   IND8Z,   FF),
        0x64: ("eora",   IND8Z,   FF),
        0x65: ("ldaa",   IND8Z,   FF),
        0x66: ("anda",   IND8Z,   FF),
        0x67: ("oraa",   IND8Z,   FF),
        0x68: ("cmpa",   IND8Z,   FF),
        0x69: ("bita",   IND8Z,   FF),
        0x6a: ("staa",   IND8Z,   FF),
        0x6b: ("jmp",    IND20Z,  ZGGGGG),
        0x6c: ("cpx",    IND8Z,   FF),
        0x6d: ("cpy",    IND8Z,   FF),
        0x6e: ("cpz",    IND8Z,   FF),
        0x6f: ("cps",    IND8Z,   FF),
        0x70: ("suba",   IMM8,    FF),
        0x71: ("adda",   IMM8,    FF),
        0x72: ("sbca",   IMM8,    FF),
        0x73: ("adca",   IMM8,    FF),
        0x74: ("eora",   IMM8,    FF),
        0x75: ("ldaa",   IMM8,    FF),
        0x76: ("anda",   IMM8,    FF),
        0x77: ("oraa",   IMM8,    FF),
        0x78: ("cmpa",   IMM8,    FF),
        0x79: ("bita",   IMM8,    FF),
        0x7a: ("jmp",    EXT20,   ZBHHLL),
        0x7b: ("mac",    IMM8,    FF),
        0x7c: ("adde",   IMM8,    FF),
        0x80: ("subd",   IND8X,   FF),
        0x81: ("addd",   IND8X,   FF),
        0x82: ("sbcd",   IND8X,   FF),
        0x83: ("adcd",   IND8X,   FF),
        0x84: ("eord",   IND8X,   FF),
        0x85: ("ldd",    IND8X,   FF),
        0x86: ("andd",   IND8X,   FF),
        0x87: ("ord",    IND8X,   FF),
        0x88: ("cmpd",   IND8X,   FF),
        0x89: ("jsr",    IND20X,  ZGGGGG),
        0x8a: ("std",    IND8X,   FF),
        0x8b: ("brset",  IND8X,   MMFFRR),
        0x8c: ("stx",    IND8X,   FF),
        0x8d: ("sty",    IND8X,   FF),
        0x8e: ("stz",    IND8X,   FF),
        0x8f: ("sts",    IND8X,   FF),
        0x90: ("subd",   IND8Y,   FF),
        0x91: ("addd",   IND8Y,   FF),
        0x92: ("sbcd",   IND8Y,   FF),
        0x93: ("adcd",   IND8Y,   FF),
        0x94: ("eord",   IND8Y,   FF),
        0x95: ("ldd",    IND8Y,   FF),
        0x96: ("andd",   IND8Y,   FF),
        0x97: ("ord",    IND8Y,   FF),
        0x98: ("cmpd",   IND8Y,   FF),
        0x99: ("jsr",    IND20Y,  ZGGGGG),
        0x9a: ("std",    IND8Y,   FF),
        0x9b: ("brset",  IND8Y,   MMFFRR),
        0x9c: ("stx",    IND8Y,   FF),
        0x9d: ("sty",    IND8Y,   FF),
        0x9e: ("stz",    IND8Y,   FF),
        0x9f: ("sts",    IND8Y,   FF),
        0xa0: ("subd",   IND8Z,   FF),
        0xa1: ("addd",   IND8Z,   FF),
        0xa2: ("sbcd",   IND8Z,   FF),
        0xa3: ("adcd",   IND8Z,   FF),
        0xa4: ("eord",   IND8Z,   FF),
        0xa5: ("ldd",    IND8Z,   FF),
        0xa6: ("andd",   IND8Z,   FF),
        0xa7: ("ord",    IND8Z,   FF),
        0xa8: ("cmpd",   IND8Z,   FF),
        0xa9: ("jsr",    IND20Z,  ZGGGGG),
        0xaa: ("std",    IND8Z,   FF),
        0xab: ("brset",  IND8Z,   MMFFRR),
        0xac: ("stx",    IND8Z,   FF),
        0xad: ("sty",    IND8Z,   FF),
        0xae: ("stz",    IND8Z,   FF),
        0xaf: ("sts",    IND8Z,   FF),
        0xb0: ("bra",    REL8,    RR),
        0xb1: ("brn",    REL8,    RR),
        0xb2: ("bhi",    REL8,    RR),
        0xb3: ("bls",    REL8,    RR),
        0xb4: ("bcc",    REL8,    RR),
        0xb5: ("bcs",    REL8,    RR),
        0xb6: ("bne",    REL8,    RR),
        0xb7: ("beq",    REL8,    RR),
        0xb8: ("bvc",    REL8,    RR),
        0xb9: ("bvs",    REL8,    RR),
        0xba: ("bpl",    REL8,    RR),
        0xbb: ("bmi",    REL8,    RR),
        0xbc: ("bge",    REL8,    RR),
        0xbd: ("blt",    REL8,    RR),
        0xbe: ("bgt",    REL8,    RR),
        0xbf: ("ble",    REL8,    RR),
        0xc0: ("subb",   IND8X,   FF),
        0xc1: ("addb",   IND8X,   FF),
        0xc2: ("sbcb",   IND8X,   FF),
        0xc3: ("adcb",   IND8X,   FF),
        0xc4: ("eorb",   IND8X,   FF),
        0xc5: ("ldab",   IND8X,   FF),
        0xc6: ("andb",   IND8X,   FF),
        0xc7: ("orab",   IND8X,   FF),
        0xc8: ("cmpb",   IND8X,   FF),
        0xc9: ("bitb",   IND8X,   FF),
        0xca: ("stab",   IND8X,   FF),
        0xcb: ("brclr",  IND8X,   MMFFRR),
        0xcc: ("ldx",    IND8X,   FF),
        0xcd: ("ldy",    IND8X,   FF),
        0xce: ("ldz",    IND8X,   FF),
        0xcf: ("lds",    IND8X,   FF),
        0xd0: ("subb",   IND8Y,   FF),
        0xd1: ("addb",   IND8Y,   FF),
        0xd2: ("sbcb",   IND8Y,   FF),
        0xd3: ("adcb",   IND8Y,   FF),
        0xd4: ("eorb",   IND8Y,   FF),
        0xd5: ("ldab",   IND8Y,   FF),
        0xd6: ("andb",   IND8Y,   FF),
        0xd7: ("orab",   IND8Y,   FF),
        0xd8: ("cmpb",   IND8Y,   FF),
        0xd9: ("bitb",   IND8Y,   FF),
        0xda: ("stab",   IND8Y,   FF),
        0xdb: ("brclr",  IND8Y,   MMFFRR),
        0xdc: ("ldx",    IND8Y,   FF),
        0xdd: ("ldy",    IND8Y,   FF),
        0xde: ("ldz",    IND8Y,   FF),
        0xdf: ("lds",    IND8Y,   FF),
        0xe0: ("subb",   IND8Z,   FF),
        0xe1: ("addb",   IND8Z,   FF),
        0xe2: ("sbcb",   IND8Z,   FF),
        0xe3: ("adcb",   IND8Z,   FF),
        0xe4: ("eorb",   IND8Z,   FF),
        0xe5: ("ldab",   IND8Z,   FF),
        0xe6: ("andb",   IND8Z,   FF),
        0xe7: ("orab",   IND8Z,   FF),
        0xe8: ("cmpb",   IND8Z,   FF),
        0xe9: ("bitb",   IND8Z,   FF),
        0xea: ("stab",   IND8Z,   FF),
        0xeb: ("brclr",  IND8Z,   MMFFRR),
        0xec: ("ldx",    IND8Z,   FF),
        0xed: ("ldy",    IND8Z,   FF),
        0xee: ("ldz",    IND8Z,   FF),
        0xef: ("lds",    IND8Z,   FF),
        0xf0: ("subb",   IMM8,    II),
        0xf1: ("addb",   IMM8,    II),
        0xf2: ("sbcb",   IMM8,    II),
        0xf3: ("adcb",   IMM8,    II),
        0xf4: ("eorb",   IMM8,    II),
        0xf5: ("ldab",   IMM8,    II),
        0xf6: ("andb",   IMM8,    II),
        0xf7: ("orab",   IMM8,    II),
        0xf8: ("cmpb",   IMM8,    II),
        0xf9: ("bitb",   IMM8,    II),
        0xfa: ("jsr",    EXT20,   ZBHHLL),
        0xfb: ("rmac",   IMM8,    XOYO),
        0xfc: ("addd",   IMM8,    II),
    }


def _page1_opcodes() -> Dict[int, Entry]:
    """Prebyte $17 opcode map."""
    return {
        0x00: ("com",    IND16X,  GGGG),
        0x01: ("dec",    IND16X,  GGGG),
        0x02: ("neg",    IND16X,  GGGG),
        0x03: ("inc",    IND16X,  GGGG),
        0x04: ("asl",    IND16X,  GGGG),
        0x05: ("clr",    IND16X,  GGGG),
        0x06: ("tst",    IND16X,  GGGG),
        0x08: ("bclr",   IND8X,   MMGGGG),
        0x09: ("bset",   IND8X,   MMGGGG),
        0x0c: ("rol",    IND16X,  GGGG),
        0x0d: ("asr",    IND16X,  GGGG),
        0x0e: ("ror",    IND16X,  GGGG),
        0x0f: ("lsr",    IND16X,  GGGG),
        0x10: ("com",    IND16Y,  GGGG),
        0x11: ("dec",    IND16Y,  GGGG),
        0x12: ("neg",    IND16Y,  GGGG),
        0x13: ("inc",    IND16Y,  GGGG),
        0x14: ("asl",    IND16Y,  GGGG),
        0x15: ("clr",    IND16Y,  GGGG),
        0x16: ("tst",    IND16Y,  GGGG),
        0x18: ("bclr",   IND8Y,   MMGGGG),
        0x19: ("bset",   IND8Y,   MMGGGG),
        0x1c: ("rol",    IND16Y,  GGGG),
        0x1d: ("asr",    IND16Y,  GGGG),
        0x1e: ("ror",    IND16Y,  GGGG),
        0x1f: ("lsr",    IND16Y,  GGGG),
        0x20: ("com",    IND16Z,  GGGG),
        0x21: ("dec",    IND16Z,  GGGG),
        0x22: ("neg",    IND16Z,  GGGG),
        0x23: ("inc",    IND16Z,  GGGG),
        0x24: ("asl",    IND16Z,  GGGG),
        0x25: ("clr",    IND16Z,  GGGG),
        0x26: ("tst",    IND16Z,  GGGG),
        0x28: ("bclr",   IND8Z,   MMGGGG),
        0x29: ("bset",   IND8Z,   MMGGGG),
        0x2c: ("rol",    IND16Z,  GGGG),
        0x2d: ("asr",    IND16Z,  GGGG),
        0x2e: ("ror",    IND16Z,  GGGG),
        0x2f: ("lsr",    IND16Z,  GGGG),
        0x30: ("com",    EXT,     HHLL),
        0x31: ("dec",    EXT,     HHLL),
        0x32: ("neg",    EXT,     HHLL),
        0x33: ("inc",    EXT,     HHLL),
        0x34: ("asl",    EXT,     HHLL),
        0x35: ("clr",    EXT,     HHLL),
        0x36: ("tst",    EXT,     HHLL),
        0x3c: ("rol",    EXT,     HHLL),
        0x3d: ("asr",    EXT,     HHLL),
        0x3e: ("ror",    EXT,     HHLL),
        0x3f: ("lsr",    EXT,     HHLL),
        0x40: ("suba",   IND16X,  GGGG),
        0x41: ("adda",   IND16X,  GGGG),
        0x42: ("sbca",   IND16X,  GGGG),
        0x43: ("adca",   IND16X,  GGGG),
        0x44: ("eora",   IND16X,  GGGG),
        0x45: ("ldaa",   IND16X,  GGGG),
        0x46: ("anda",   IND16X,  GGGG),
        0x47: ("oraa",   IND16X,  GGGG),
        0x48: ("cmpa",   IND16X,  GGGG),
        0x49: ("bita",   IND16X,  GGGG),
        0x4a: ("staa",   IND16X,  GGGG),
        0x4c: ("cpx",    IND16X,  GGGG),
        0x4d: ("cpy",    IND16X,  GGGG),
        0x4e: ("cpz",    IND16X,  GGGG),
        0x4f: ("cps",    IND16X,  GGGG),
        0x50: ("suba",   IND16Y,  GGGG),
        0x51: ("adda",   IND16Y,  GGGG),
        0x52: ("sbca",   IND16Y,  GGGG),
        0x53: ("adca",   IND16Y,  GGGG),
        0x54: ("eora",   IND16Y,  GGGG),
        0x55: ("ldaa",   IND16Y,  GGGG),
        0x56: ("anda",   IND16Y,  GGGG),
        0x57: ("oraa",   IND16Y,  GGGG),
        0x58: ("cmpa",   IND16Y,  GGGG),
        0x59: ("bita",   IND16Y,  GGGG),
        0x5a: ("staa",   IND16Y,  GGGG),
        0x5c: ("cpx",    IND16Y,  GGGG),
        0x5d: ("cpy",    IND16Y,  GGGG),
        0x5e: ("cpz",    IND16Y,  GGGG),
        0x5f: ("cps",    IND16Y,  GGGG),
        0x60: ("suba",   IND16Z,  GGGG),
        0x61: ("adda",   IND16Z,  GGGG),
        0x62: ("sbca",   IND16Z,  GGGG),
        0x63: ("adca",   IND16Z,  GGGG),
        0x64: ("eora",   IND16Z,  GGGG),
        0x65: ("ldaa",   IND16Z,  GGGG),
        0x66: ("anda",   IND16Z,  GGGG),
        0x67: ("oraa",   IND16Z,  GGGG),
        0x68: ("cmpa",   IND16Z,  GGGG),
        0x69: ("bita",   IND16Z,  GGGG),
        0x6a: ("staa",   IND16Z,  GGGG),
        0x6c: ("cpx",    IND16Z,  GGGG),
        0x6d: ("cpy",    IND16Z,  GGGG),
        0x6e: ("cpz",    IND16Z,  GGGG),
        0x6f: ("cps",    IND16Z,  GGGG),
        0x70: ("suba",   EXT,     HHLL),
        0x71: ("adda",   EXT,     HHLL),
        0x72: ("sbca",   EXT,     HHLL),
        0x73: ("adca",   EXT,     HHLL),
        0x74: ("eora",   EXT,     HHLL),
        0x75: ("ldaa",   EXT,     HHLL),
        0x76: ("anda",   EXT,     HHLL),
        0x77: ("oraa",   EXT,     HHLL),
        0x78: ("cmpa",   EXT,     HHLL),
        0x79: ("bita",   EXT,     HHLL),
        0x7a: ("staa",   EXT,     HHLL),
        0x7c: ("cpx",    EXT,     HHLL),
        0x7d: ("cpy",    EXT,     HHLL),
        0x7e: ("cpz",    EXT,     HHLL),
        0x7f: ("cps",    EXT,     HHLL),
        0x8c: ("stx",    IND16X,  GGGG),
        0x8d: ("sty",    IND16X,  GGGG),
        0x8e: ("stz",    IND16X,  GGGG),
        0x8f: ("sts",    IND16X,  GGGG),
        0x9c: ("stx",    IND16Y,  GGGG),
        0x9d: ("sty",    IND16Y,  GGGG),
        0x9e: ("stz",    IND16Y,  GGGG),
        0x9f: ("sts",    IND16Y,  GGGG),
        0xac: ("stx",    IND16Z,  GGGG),
        0xad: ("sty",    IND16Z,  GGGG),
        0xae: ("stz",    IND16Z,  GGGG),
        0xaf: ("sts",    IND16Z,  GGGG),
        0xbc: ("stx",    EXT,     HHLL),
        0xbd: ("sty",    EXT,     HHLL),
        0xbe: ("stz",    EXT,     HHLL),
        0xbf: ("sts",    EXT,     HHLL),
        0xc0: ("subb",   IND16X,  GGGG),
        0xc1: ("addb",   IND16X,  GGGG),
        0xc2: ("sbcb",   IND16X,  GGGG),
        0xc3: ("adcb",   IND16X,  GGGG),
        0xc4: ("eorb",   IND16X,  GGGG),
        0xc5: ("ldab",   IND16X,  GGGG),
        0xc6: ("andb",   IND16X,  GGGG),
        0xc7: ("orab",   IND16X,  GGGG),
        0xc8: ("cmpb",   IND16X,  GGGG),
        0xc9: ("bitb",   IND16X,  GGGG),
        0xca: ("stab",   IND16X,  GGGG),
        0xcc: ("ldx",    IND16X,  GGGG),
        0xcd: ("ldy",    IND16X,  GGGG),
        0xce: ("ldz",    IND16X,  GGGG),
        0xcf: ("lds",    IND16X,  GGGG),
        0xd0: ("subb",   IND16Y,  GGGG),
        0xd1: ("addb",   IND16Y,  GGGG),
        0xd2: ("sbcb",   IND16Y,  GGGG),
        0xd3: ("adcb",   IND16Y,  GGGG),
        0xd4: ("eorb",   IND16Y,  GGGG),
        0xd5: ("ldab",   IND16Y,  GGGG),
        0xd6: ("andb",   IND16Y,  GGGG),
        0xd7: ("orab",   IND16Y,  GGGG),
        0xd8: ("cmpb",   IND16Y,  GGGG),
        0xd9: ("bitb",   IND16Y,  GGGG),
        0xda: ("stab",   IND16Y,  GGGG),
        0xdc: ("ldx",    IND16Y,  GGGG),
        0xdd: ("ldy",    IND16Y,  GGGG),
        0xde: ("ldz",    IND16Y,  GGGG),
        0xdf: ("lds",    IND16Y,  GGGG),
        0xe0: ("subb",   IND16Z,  GGGG),
        0xe1: ("addb",   IND16Z,  GGGG),
        0xe2: ("sbcb",   IND16Z,  GGGG),
        0xe3: ("adcb",   IND16Z,  GGGG),
        0xe4: ("eorb",   IND16Z,  GGGG),
        0xe5: ("ldab",   IND16Z,  GGGG),
        0xe6: ("andb",   IND16Z,  GGGG),
        0xe7: ("orab",   IND16Z,  GGGG),
        0xe8: ("cmpb",   IND16Z,  GGGG),
        0xe9: ("bitb",   IND16Z,  GGGG),
        0xea: ("stab",   IND16Z,  GGGG),
        0xec: ("ldx",    IND16Z,  GGGG),
        0xed: ("ldy",    IND16Z,  GGGG),
        0xee: ("ldz",    IND16Z,  GGGG),
        0xef: ("lds",    IND16Z,  GGGG),
        0xf0: ("subb",   EXT,     HHLL),
        0xf1: ("addb",   EXT,     HHLL),
        0xf2: ("sbcb",   EXT,     HHLL),
        0xf3: ("adcb",   EXT,     HHLL),
        0xf4: ("eorb",   EXT,     HHLL),
        0xf5: ("ldab",   EXT,     HHLL),
        0xf6: ("andb",   EXT,     HHLL),
        0xf7: ("orab",   EXT,     HHLL),
        0xf8: ("cmpb",   EXT,     HHLL),
        0xf9: ("bitb",   EXT,     HHLL),
        0xfa: ("stab",   EXT,     HHLL),
        0xfc: ("ldx",    EXT,     HHLL),
        0xfd: ("ldy",    EXT,     HHLL),
        0xfe: ("ldz",    EXT,     HHLL),
        0xff: ("lds",    EXT,     HHLL),
    }


def _page2_opcodes() -> Dict[int, Entry]:
    """Prebyte $27 opcode map."""
    return {
        0x00: ("comw",   IND16X,  GGGGMMMM),
        0x01: ("decw",   IND16X,  GGGGMMMM),
        0x02: ("negw",   IND16X,  GGGGMMMM),
        0x03: ("incw",   IND16X,  GGGGMMMM),
        0x04: ("aslw",   IND16X,  GGGGMMMM),
        0x05: ("clrw",   IND16X,  GGGGMMMM),
        0x06: ("tstw",   IND16X,  GGGGMMMM),
        0x08: ("bclrw",  IND16X,  GGGGMMMM),
        0x09: ("bsetw",  IND16X,  GGGGMMMM),
        0x0c: ("rolw",   IND16X,  GGGGMMMM),
        0x0d: ("asrw",   IND16X,  GGGGMMMM),
        0x0e: ("rorw",   IND16X,  GGGGMMMM),
        0x0f: ("lsrw",   IND16X,  GGGGMMMM),
        0x10: ("comw",   IND16Y,  GGGGMMMM),
        0x11: ("decw",   IND16Y,  GGGGMMMM),
        0x12: ("negw",   IND16Y,  GGGGMMMM),
        0x13: ("incw",   IND16Y,  GGGGMMMM),
        0x14: ("aslw",   IND16Y,  GGGGMMMM),
        0x15: ("clrw",   IND16Y,  GGGGMMMM),
        0x16: ("tstw",   IND16Y,  GGGGMMMM),
        0x18: ("bclrw",  IND16Y,  GGGGMMMM),
        0x19: ("bsetw",  IND16Y,  GGGGMMMM),
        0x1c: ("rolw",   IND16Y,  GGGGMMMM),
        0x1d: ("asrw",   IND16Y,  GGGGMMMM),
        0x1e: ("rorw",   IND16Y,  GGGGMMMM),
        0x1f: ("lsrw",   IND16Y,  GGGGMMMM),
        0x20: ("comw",   IND16Z,  GGGGMMMM),
        0x21: ("decw",   IND16Z,  GGGGMMMM),
        0x22: ("negw",   IND16Z,  GGGGMMMM),
        0x23: ("incw",   IND16Z,  GGGGMMMM),
        0x24: ("aslw",   IND16Z,  GGGGMMMM),
        0x25: ("clrw",   IND16Z,  GGGGMMMM),
        0x26: ("tstw",   IND16Z,  GGGGMMMM),
        0x28: ("bclrw",  IND16Z,  GGGGMMMM),
        0x29: ("bsetw",  IND16Z,  GGGGMMMM),
        0x2c: ("rolw",   IND16Z,  GGGGMMMM),
        0x2d: ("asrw",   IND16Z,  GGGGMMMM),
        0x2e: ("rorw",   IND16Z,  GGGGMMMM),
        0x2f: ("lsrw",   IND16Z,  GGGGMMMM),
        0x30: ("comw",   EXT,     HHLLMMMM),
        0x31: ("decw",   EXT,     HHLLMMMM),
        0x32: ("negw",   EXT,     HHLLMMMM),
        0x33: ("incw",   EXT,     HHLLMMMM),
        0x34: ("aslw",   EXT,     HHLLMMMM),
        0x35: ("clrw",   EXT,     HHLLMMMM),
        0x36: ("tstw",   EXT,     HHLLMMMM),
        0x38: ("bclrw",  EXT,     HHLLMMMM),
        0x39: ("bsetw",  EXT,     HHLLMMMM),
        0x3c: ("rolw",   EXT,     HHLLMMMM),
        0x3d: ("asrw",   EXT,     HHLLMMMM),
        0x3e: ("rorw",   EXT,     HHLLMMMM),
        0x3f: ("lsrw",   EXT,     HHLLMMMM),
        0x40: ("suba",   EX,      NONE),
        0x41: ("adda",   EX,      NONE),
        0x42: ("sbca",   EX,      NONE),
        0x43: ("adca",   EX,      NONE),
        0x44: ("eora",   EX,      NONE),
        0x45: ("ldaa",   EX,      NONE),
        0x46: ("anda",   EX,      NONE),
        0x47: ("oraa",   EX,      NONE),
        0x48: ("cmpa",   EX,      NONE),
        0x49: ("bita",   EX,      NONE),
        0x4a: ("staa",   EX,      NONE),
        0x4c: ("nop",    EX,      NONE),
        0x4d: ("tyx",    EX,      NONE),
        0x4e: ("tzx",    EX,      NONE),
        0x4f: ("tsx",    EX,      NONE),
        0x50: ("suba",   EY,      NONE),
        0x51: ("adda",   EY,      NONE),
        0x52: ("sbca",   EY,      NONE),
        0x53: ("adca",   EY,      NONE),
        0x54: ("eora",   EY,      NONE),
        0x55: ("ldaa",   EY,      NONE),
        0x56: ("anda",   EY,      NONE),
        0x57: ("oraa",   EY,      NONE),
        0x58: ("cmpa",   EY,      NONE),
        0x59: ("bita",   EY,      NONE),
        0x5a: ("staa",   EY,      NONE),
        0x5c: ("txy",    EY,      NONE),
        0x5e: ("tzy",    EY,      NONE),
        0x5f: ("tsy",    EY,      NONE),
        0x60: ("suba",   EZ,      NONE),
        0x61: ("adda",   EZ,      NONE),
        0x62: ("sbca",   EZ,      NONE),
        0x63: ("adca",   EZ,      NONE),
        0x64: ("eora",   EZ,      NONE),
        0x65: ("ldaa",   EZ,      NONE),
        0x66: ("anda",   EZ,      NONE),
        0x67: ("oraa",   EZ,      NONE),
        0x68: ("cmpa",   EZ,      NONE),
        0x69: ("bita",   EZ,      NONE),
        0x6a: ("staa",   EZ,      NONE),
        0x6c: ("txz",    EZ,      NONE),
        0x6d: ("tyz",    EZ,      NONE),
        0x6f: ("tsz",    EZ,      NONE),
        0x70: ("come",   INH,     NONE),
        0x71: ("lded",   EXT,     HHLL),
        0x72: ("nege",   INH,     NONE),
        0x73: ("sted",   EXT,     HHLL),
        0x74: ("asle",   INH,     NONE),
        0x75: ("clre",   INH,     NONE),
        0x76: ("tste",   INH,     NONE),
        0x77: ("rti",    INH,     NONE),
        0x78: ("ade",    INH,     NONE),
        0x79: ("sde",    INH,     NONE),
        0x7a: ("xgde",   INH,     NONE),
        0x7b: ("tde",    INH,     NONE),
        0x7c: ("role",   INH,     NONE),
        0x7d: ("asre",   INH,     NONE),
        0x7e: ("rore",   INH,     NONE),
        0x7f: ("lsre",   INH,     NONE),
        0x80: ("subd",   EX,      NONE),
        0x81: ("addd",   EX,      NONE),
        0x82: ("sbcd",   EX,      NONE),
        0x83: ("adcd",   EX,      NONE),
        0x84: ("eord",   EX,      NONE),
        0x85: ("ldd",    EX,      NONE),
        0x86: ("andd",   EX,      NONE),
        0x87: ("ord",    EX,      NONE),
        0x88: ("cpd",    EX,      NONE),
        0x8a: ("std",    EX,      NONE),
        0x90: ("subd",   EY,      NONE),
        0x91: ("addd",   EY,      NONE),
        0x92: ("sbcd",   EY,      NONE),
        0x93: ("adcd",   EY,      NONE),
        0x94: ("eord",   EY,      NONE),
        0x95: ("ldd",    EY,      NONE),
        0x96: ("andd",   EY,      NONE),
        0x97: ("ord",    EY,      NONE),
        0x98: ("cpd",    EY,      NONE),
        0x9a: ("std",    EY,      NONE),
        0xa0: ("subd",   EZ,      NONE),
        0xa1: ("addd",   EZ,      NONE),
        0xa2: ("sbcd",   EZ,      NONE),
        0xa3: ("adcd",   EZ,      NONE),
        0xa4: ("eord",   EZ,      NONE),
        0xa5: ("ldd",    EZ,      NONE),
        0xa6: ("andd",   EZ,      NONE),
        0xa7: ("ord",    EZ,      NONE),
        0xa8: ("cpd",    EZ,      NONE),
        0xaa: ("std",    EZ,      NONE),
        0xb0: ("ldhi",   INH,     NONE),
        0xb1: ("tedm",   INH,     NONE),
        0xb2: ("tem",    INH,     NONE),
        0xb3: ("tmxed",  INH,     NONE),
        0xb4: ("tmer",   INH,     NONE),
        0xb5: ("tmet",   INH,     NONE),
        0xb6: ("aslm",   INH,     NONE),
        0xb7: ("pshmac", INH,     NONE),
        0xb8: ("pulmac", INH,     NONE),
        0xb9: ("asrm",   INH,     NONE),
        0xba: ("tekb",   INH,     NONE),
        0xc0: ("subb",   EX,      NONE),
        0xc1: ("addb",   EX,      NONE),
        0xc2: ("sbcb",   EX,      NONE),
        0xc3: ("adcb",   EX,      NONE),
        0xc4: ("eorb",   EX,      NONE),
        0xc5: ("ldab",   EX,      NONE),
        0xc6: ("andb",   EX,      NONE),
        0xc7: ("orab",   EX,      NONE),
        0xc8: ("cmpb",   EX,      NONE),
        0xc9: ("bitb",   EX,      NONE),
        0xca: ("stab",   EX,      NONE),
        0xd0: ("subb",   EY,      NONE),
        0xd1: ("addb",   EY,      NONE),
        0xd2: ("sbcb",   EY,      NONE),
        0xd3: ("adcb",   EY,      NONE),
        0xd4: ("eorb",   EY,      NONE),
        0xd5: ("ldab",   EY,      NONE),
        0xd6: ("andb",   EY,      NONE),
        0xd7: ("orab",   EY,      NONE),
        0xd8: ("cmpb",   EY,      NONE),
        0xd9: ("bitb",   EY,      NONE),
        0xda: ("stab",   EY,      NONE),
        0xe0: ("subb",   EZ,      NONE),
        0xe1: ("addb",   EZ,      NONE),
        0xe2: ("sbcb",   EZ,      NONE),
        0xe3: ("adcb",   EZ,      NONE),
        0xe4: ("eorb",   EZ,      NONE),
        0xe5: ("ldab",   EZ,      NONE),
        0xe6: ("andb",   EZ,      NONE),
        0xe7: ("orab",   EZ,      NONE),
        0xe8: ("cmpb",   EZ,      NONE),
        0xe9: ("bitb",   EZ,      NONE),
        0xea: ("stab",   EZ,      NONE),
        0xf0: ("comd",   INH,     NONE),
        0xf1: ("ldstop", INH,     NONE),
        0xf2: ("negd",   INH,     NONE),
        0xf3: ("wai",    INH,     NONE),
        0xf4: ("asld",   INH,     NONE),
        0xf5: ("clrd",   INH,     NONE),
        0xf6: ("tstd",   INH,     NONE),
        0xf7: ("rts",    INH,     NONE),
        0xf8: ("sxt",    INH,     NONE),
        0xf9: ("lbsr",   REL16,   RRRR),
        0xfa: ("tbek",   INH,     NONE),
        0xfb: ("ted",    INH,     NONE),
        0xfc: ("rold",   INH,     NONE),
        0xfd: ("asrd",   INH,     NONE),
        0xfe: ("rord",   INH,     NONE),
        0xff: ("lsrd",   INH,     NONE),
    }


def _page3_opcodes() -> Dict[int, Entry]:
    """Prebyte $37 opcode map."""
    return {
        0x00: ("coma",   INH,     NONE),
        0x01: ("deca",   INH,     NONE),
        0x02: ("nega",   INH,     NONE),
        0x03: ("inca",   INH,     NONE),
        0x04: ("asla",   INH,     NONE),
        0x05: ("clra",   INH,     NONE),
        0x06: ("tsta",   INH,     NONE),
        0x07: ("tba",    INH,     NONE),
        0x08: ("psha",   INH,     NONE),
        0x09: ("pula",   INH,     NONE),
        0x0a: ("sba",    INH,     NONE),
        0x0b: ("aba",    INH,     NONE),
        0x0c: ("rola",   INH,     NONE),
        0x0d: ("asra",   INH,     NONE),
        0x0e: ("rora",   INH,     NONE),
        0x0f: ("lsra",   INH,     NONE),
        0x10: ("comb",   INH,     NONE),
        0x11: ("decb",   INH,     NONE),
        0x12: ("negb",   INH,     NONE),
        0x13: ("incb",   INH,     NONE),
        0x14: ("aslb",   INH,     NONE),
        0x15: ("clrb",   INH,     NONE),
        0x16: ("tstb",   INH,     NONE),
        0x17: ("tbb",    INH,     NONE),
        0x18: ("pshb",   INH,     NONE),
        0x19: ("pulb",   INH,     NONE),
        0x1a: ("sbb",    INH,     NONE),
        0x1b: ("abb",    INH,     NONE),
        0x1c: ("rolb",   INH,     NONE),
        0x1d: ("asrb",   INH,     NONE),
        0x1e: ("rorb",   INH,     NONE),
        0x1f: ("lsrb",   INH,     NONE),
        0x20: ("swi",    INH,     NONE),
        0x21: ("daa",    INH,     NONE),
        0x22: ("ace",    INH,     NONE),
        0x23: ("aced",   INH,     NONE),
        0x24: ("mul",    INH,     NONE),
        0x25: ("emul",   INH,     NONE),
        0x26: ("emuls",  INH,     NONE),
        0x27: ("fmuls",  INH,     NONE),
        0x28: ("ediv",   INH,     NONE),
        0x29: ("edivs",  INH,     NONE),
        0x2a: ("idiv",   INH,     NONE),
        0x2b: ("fdiv",   INH,     NONE),
        0x2c: ("tpd",    INH,     NONE),
        0x2d: ("tdp",    INH,     NONE),
        0x2f: ("tdmsk",  INH,     NONE),
        0x30: ("sube",   IMM16,   JJKK),
        0x31: ("adde",   IMM16,   JJKK),
        0x32: ("sbce",   IMM16,   JJKK),
        0x33: ("adce",   IMM16,   JJKK),
        0x34: ("eore",   IMM16,   JJKK),
        0x35: ("lde",    IMM16,   JJKK),
        0x36: ("ande",   IMM16,   JJKK),
        0x37: ("ore",    IMM16,   JJKK),
        0x38: ("cpe",    IMM16,   JJKK),
        0x3a: ("andp",   IMM16,   JJKK),
        0x3b: ("orp",    IMM16,   JJKK),
        0x3c: ("aix",    IMM16,   JJKK),
        0x3d: ("aiy",    IMM16,   JJKK),
        0x3e: ("aiz",    IMM16,   JJKK),
        0x3f: ("ais",    IMM16,   JJKK),
        0x40: ("sube",   IND16X,  GGGG),
        0x41: ("adde",   IND16X,  GGGG),
        0x42: ("sbce",   IND16X,  GGGG),
        0x43: ("adce",   IND16X,  GGGG),
        0x44: ("eore",   IND16X,  GGGG),
        0x45: ("lde",    IND16X,  GGGG),
        0x46: ("ande",   IND16X,  GGGG),
        0x47: ("ore",    IND16X,  GGGG),
        0x48: ("cpe",    IND16X,  GGGG),
        0x4a: ("ste",    IND16X,  GGGG),
        0x4c: ("xgex",   INH,     NONE),
        0x4d: ("aex",    INH,     NONE),
        0x4e: ("txs",    INH,     NONE),
        0x4f: ("abx",    INH,     NONE),
        0x50: ("sube",   IND16Y,  GGGG),
        0x51: ("adde",   IND16Y,  GGGG),
        0x52: ("sbce",   IND16Y,  GGGG),
        0x53: ("adce",   IND16Y,  GGGG),
        0x54: ("eore",   IND16Y,  GGGG),
        0x55: ("lde",    IND16Y,  GGGG),
        0x56: ("ande",   IND16Y,  GGGG),
        0x57: ("ore",    IND16Y,  GGGG),
        0x58: ("cpe",    IND16Y,  GGGG),
        0x5a: ("ste",    IND16Y,  GGGG),
        0x5c: ("xgey",   INH,     NONE),
        0x5d: ("aey",    INH,     NONE),
        0x5e: ("tys",    INH,     NONE),
        0x5f: ("aby",    INH,     NONE),
        0x60: ("sube",   IND16Z,  GGGG),
        0x61: ("adde",   IND16Z,  GGGG),
        0x62: ("sbce",   IND16Z,  GGGG),
        0x63: ("adce",   IND16Z,  GGGG),
        0x64: ("eore",   IND16Z,  GGGG),
        0x65: ("lde",    IND16Z,  GGGG),
        0x66: ("ande",   IND16Z,  GGGG),
        0x67: ("ore",    IND16Z,  GGGG),
        0x68: ("cpe",    IND16Z,  GGGG),
        0x6a: ("ste",    IND16Z,  GGGG),
        0x6c: ("xgez",   INH,     NONE),
        0x6d: ("aez",    INH,     NONE),
        0x6e: ("tzs",    INH,     NONE),
        0x6f: ("abz",    INH,     NONE),
        0x70: ("sube",   EXT,     HHLL),
        0x71: ("adde",   EXT,     HHLL),
        0x72: ("sbce",   EXT,     HHLL),
        0x73: ("adce",   EXT,     HHLL),
        0x74: ("eore",   EXT,     HHLL),
        0x75: ("lde",    EXT,     HHLL),
        0x76: ("ande",   EXT,     HHLL),
        0x77: ("ore",    EXT,     HHLL),
        0x78: ("cpe",    EXT,     HHLL),
        0x7a: ("ste",    EXT,     HHLL),
        0x7c: ("cpx",    IMM16,   JJKK),
        0x7d: ("cpy",    IMM16,   JJKK),
        0x7e: ("cpz",    IMM16,   JJKK),
        0x7f: ("cps",    IMM16,   JJKK),
        0x80: ("lbra",   REL16,   RRRR),
        0x81: ("lbrn",   REL16,   RRRR),
        0x82: ("lbhi",   REL16,   RRRR),
        0x83: ("lbls",   REL16,   RRRR),
        0x84: ("lbcc",   REL16,   RRRR),
        0x85: ("lbcs",   REL16,   RRRR),
        0x86: ("lbne",   REL16,   RRRR),
        0x87: ("lbeq",   REL16,   RRRR),
        0x88: ("lbvc",   REL16,   RRRR),
        0x89: ("lbvs",   REL16,   RRRR),
        0x8a: ("lbpl",   REL16,   RRRR),
        0x8b: ("lbmi",   REL16,   RRRR),
        0x8c: ("lbge",   REL16,   RRRR),
        0x8d: ("lblt",   REL16,   RRRR),
        0x8e: ("lbgt",   REL16,   RRRR),
        0x8f: ("lble",   REL16,   RRRR),
        0x90: ("lbmv",   REL16,   RRRR),
        0x91: ("lbev",   REL16,   RRRR),
        0x9c: ("tbxk",   INH,     NONE),
        0x9d: ("tbyk",   INH,     NONE),
        0x9e: ("tbzk",   INH,     NONE),
        0x9f: ("tbsk",   INH,     NONE),
        0xa6: ("bgnd",   INH,     NONE),
        0xac: ("txkb",   INH,     NONE),
        0xad: ("tykb",   INH,     NONE),
        0xae: ("tzkb",   INH,     NONE),
        0xaf: ("tskb",   INH,     NONE),
        0xb0: ("subd",   IMM16,   JJKK),
        0xb1: ("addd",   IMM16,   JJKK),
        0xb2: ("sbcd",   IMM16,   JJKK),
        0xb3: ("adcd",   IMM16,   JJKK),
        0xb4: ("eord",   IMM16,   JJKK),
        0xb5: ("ldd",    IMM16,   JJKK),
        0xb6: ("andd",   IMM16,   JJKK),
        0xb7: ("ord",    IMM16,   JJKK),
        0xb8: ("cpd",    IMM16,   JJKK),
        0xbc: ("ldx",    IMM16,   JJKK),
        0xbd: ("ldy",    IMM16,   JJKK),
        0xbe: ("ldz",    IMM16,   JJKK),
        0xbf: ("lds",    IMM16,   JJKK),
        0xc0: ("subd",   IND16X,  GGGG),
        0xc1: ("addd",   IND16X,  GGGG),
        0xc2: ("sbcd",   IND16X,  GGGG),
        0xc3: ("adcd",   IND16X,  GGGG),
        0xc4: ("eord",   IND16X,  GGGG),
        0xc5: ("ldd",    IND16X,  GGGG),
        0xc6: ("andd",   IND16X,  GGGG),
        0xc7: ("ord",    IND16X,  GGGG),
        0xc8: ("cpd",    IND16X,  GGGG),
        0xca: ("std",    IND16X,  GGGG),
        0xcc: ("xgdx",   INH,     NONE),
        0xcd: ("adx",    INH,     NONE),
        0xd0: ("subd",   IND16Y,  GGGG),
        0xd1: ("addd",   IND16Y,  GGGG),
        0xd2: ("sbcd",   IND16Y,  GGGG),
        0xd3: ("adcd",   IND16Y,  GGGG),
        0xd4: ("eord",   IND16Y,  GGGG),
        0xd5: ("ldd",    IND16Y,  GGGG),
        0xd6: ("andd",   IND16Y,  GGGG),
        0xd7: ("ord",    IND16Y,  GGGG),
        0xd8: ("cpd",    IND16Y,  GGGG),
        0xda: ("std",    IND16Y,  GGGG),
        0xdc: ("xgdy",   INH,     NONE),
        0xdd: ("ady",    INH,     NONE),
        0xe0: ("subd",   IND16Z,  GGGG),
        0xe1: ("addd",   IND16Z,  GGGG),
        0xe2: ("sbcd",   IND16Z,  GGGG),
        0xe3: ("adcd",   IND16Z,  GGGG),
        0xe4: ("eord",   IND16Z,  GGGG),
        0xe5: ("ldd",    IND16Z,  GGGG),
        0xe6: ("andd",   IND16Z,  GGGG),
        0xe7: ("ord",    IND16Z,  GGGG),
        0xe8: ("cpd",    IND16Z,  GGGG),
        0xea: ("std",    IND16Z,  GGGG),
        0xec: ("xgdz",   INH,     NONE),
        0xed: ("adz",    INH,     NONE),
        0xf0: ("subd",   EXT,     HHLL),
        0xf1: ("addd",   EXT,     HHLL),
        0xf2: ("sbcd",   EXT,     HHLL),
        0xf3: ("adcd",   EXT,     HHLL),
        0xf4: ("eord",   EXT,     HHLL),
        0xf5: ("ldd",    EXT,     HHLL),
        0xf6: ("andd",   EXT,     HHLL),
        0xf7: ("ord",    EXT,     HHLL),
        0xf8: ("cpd",    EXT,     HHLL),
        0xfa: ("std",    EXT,     HHLL),
        0xfc: ("tpa",    INH,     NONE),
        0xfd: ("tap",    INH,     NONE),
        0xfe: ("movb",   EXT2EXT, HHLLHHLL),
        0xff: ("movw",   EXT2EXT, HHLLHHLL),
    }


@lru_cache(maxsize=None)
def default_table() -> InstructionTable:
    """The full CPU16 table. Built once; the result is shared."""
    return InstructionTable({
        Page.UNPREFIXED: _page0_opcodes(),
        Page.PAGE_17: _page1_opcodes(),
        Page.PAGE_27: _page2_opcodes(),
        Page.PAGE_37: _page3_opcodes(),
    })
