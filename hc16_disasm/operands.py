"""
CPU16 Operand Fields
====================
Bit-level operand layout for Motorola CPU16 (68HC16) instructions.

Every instruction's operand bytes are described as an ordered list of
fields. Field names follow the Motorola CPU16 Reference Manual opcode
tables (ff, gggg, hh ll, jj kk, mm, rr, ...):

  b     4-bit address extension
  ff    8-bit unsigned offset
  gggg  16-bit signed offset
  zg    upper nibble [19:16] of a 20-bit signed offset
  hh    high byte of a 16-bit address
  ll    low byte of a 16-bit address
  ii    8-bit signed immediate
  jj    high byte of a 16-bit immediate
  kk    low byte of a 16-bit immediate
  mm    8-bit mask
  mmmm  16-bit mask
  rr    8-bit relative displacement
  rrrr  16-bit signed relative displacement
  xo    MAC X index offset
  yo    MAC Y index offset
  z     4-bit zero extension

Fields are identified by their ``kind`` tag, never by object identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Extension(Enum):
    """How the bits above a field's top bit are filled."""
    NONE = "none"
    SIGN = "sext"
    ZERO = "zext"


class OperandKind(Enum):
    """Role of an operand field inside the instruction encoding."""
    ADDR_EXT = "b"
    OFFSET8 = "ff"
    OFFSET16 = "gggg"
    OFFSET20_HIGH = "zg"
    ADDR_HIGH = "hh"
    IMM8 = "ii"
    IMM16_HIGH = "jj"
    IMM16_LOW = "kk"
    ADDR_LOW = "ll"
    MASK8 = "mm"
    MASK16 = "mmmm"
    REL8 = "rr"
    REL16 = "rrrr"
    MAC_X = "xo"
    MAC_Y = "yo"
    ZERO_EXT = "z"


@dataclass(frozen=True)
class OperandField:
    """One fixed-width field inside an instruction's operand bytes."""
    name: str
    kind: OperandKind
    width_bits: int
    extension: Extension = Extension.NONE

    def __post_init__(self):
        if not isinstance(self.width_bits, int) or not 1 <= self.width_bits <= 32:
            raise ValueError(
                f"operand field {self.name!r}: width must be 1..32 bits, got {self.width_bits!r}")

    @property
    def mask(self) -> int:
        return (1 << self.width_bits) - 1

    @property
    def hex_digits(self) -> int:
        """Display width: two hex digits per started byte."""
        return 2 * ((self.width_bits + 7) // 8)

    @property
    def signed(self) -> bool:
        return self.extension is Extension.SIGN

    def __str__(self) -> str:
        ext = "" if self.extension is Extension.NONE else f", {self.extension.value}"
        return f"{self.name}:{self.width_bits}{ext}"


# ═══════════════════════════════════════════════════════════════════════
# CPU16 FIELDS
# ═══════════════════════════════════════════════════════════════════════

_F = OperandField
_K = OperandKind

OP_B    = _F("b",    _K.ADDR_EXT,      4)
OP_FF   = _F("ff",   _K.OFFSET8,       8)
OP_GGGG = _F("gggg", _K.OFFSET16,     16, Extension.SIGN)
OP_ZG   = _F("zg",   _K.OFFSET20_HIGH, 4, Extension.SIGN)
OP_HH   = _F("hh",   _K.ADDR_HIGH,     8)
OP_II   = _F("ii",   _K.IMM8,          8, Extension.SIGN)
OP_JJ   = _F("jj",   _K.IMM16_HIGH,    8)
OP_KK   = _F("kk",   _K.IMM16_LOW,     8)
OP_LL   = _F("ll",   _K.ADDR_LOW,      8)
OP_MM   = _F("mm",   _K.MASK8,         8)
OP_MMMM = _F("mmmm", _K.MASK16,       16)
OP_RR   = _F("rr",   _K.REL8,          8)
OP_RRRR = _F("rrrr", _K.REL16,        16, Extension.SIGN)
OP_XO   = _F("xo",   _K.MAC_X,         8)
OP_YO   = _F("yo",   _K.MAC_Y,         8)
OP_Z    = _F("z",    _K.ZERO_EXT,      4, Extension.ZERO)

ALL_FIELDS: Tuple[OperandField, ...] = (
    OP_B, OP_FF, OP_GGGG, OP_ZG, OP_HH, OP_II, OP_JJ, OP_KK,
    OP_LL, OP_MM, OP_MMMM, OP_RR, OP_RRRR, OP_XO, OP_YO, OP_Z,
)


# ═══════════════════════════════════════════════════════════════════════
# OPERAND LAYOUTS  (ordered, as encoded after the opcode)
# ═══════════════════════════════════════════════════════════════════════

Layout = Tuple[OperandField, ...]

NONE: Layout = ()

FF: Layout = (OP_FF,)
II: Layout = (OP_II,)
RR: Layout = (OP_RR,)
GGGG: Layout = (OP_GGGG,)
RRRR: Layout = (OP_RRRR,)

GGGGMMMM: Layout = (OP_GGGG, OP_MMMM)
HHLL: Layout = (OP_HH, OP_LL)
JJKK: Layout = (OP_JJ, OP_KK)
MMGGGG: Layout = (OP_MM, OP_GGGG)
XOYO: Layout = (OP_XO, OP_YO)
ZGGGGG: Layout = (OP_ZG, OP_GGGG)

FFHHLL: Layout = (OP_FF, OP_HH, OP_LL)
HHLLMMMM: Layout = (OP_HH, OP_LL, OP_MMMM)
MMFFRR: Layout = (OP_MM, OP_FF, OP_RR)
MMGGGGRRRR: Layout = (OP_MM, OP_GGGG, OP_RRRR)
MMHHLL: Layout = (OP_MM, OP_HH, OP_LL)

HHLLHHLL: Layout = (OP_HH, OP_LL, OP_HH, OP_LL)
MMHHLLRRRR: Layout = (OP_MM, OP_HH, OP_LL, OP_RRRR)
ZBHHLL: Layout = (OP_Z, OP_B, OP_HH, OP_LL)


def layout_bits(layout: Layout) -> int:
    """Total encoded width of a layout in bits."""
    return sum(f.width_bits for f in layout)
