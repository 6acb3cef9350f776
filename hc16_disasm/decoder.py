"""
CPU16 fetch/decode loop.

One ``Decoder`` walks one in-memory program image from offset 0:

    prebyte?  opcode  operand bytes...
    |<------- instruction length ------->|

The length is known before any operand is read: prebyte (0 or 1) +
opcode (1) + the descriptor's operand bits rounded up to whole bytes.
Operand fields are right-aligned inside the operand bytes, so padding
(e.g. the unused top nibble of a 20-bit ``zg gggg`` offset) sits in the
high bits of the first operand byte.

Decoding stops (state DONE) once fewer than MIN_INSTRUCTION_SIZE bytes
remain. An out-of-bounds read ends the run unless ``recover`` is set, in
which case the offending byte is skipped and decoding resumes at the next.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

from .bitfield import OutOfBoundsError, extract, require
from .config import MIN_INSTRUCTION_SIZE
from .opcodes import (
    PREFIX_BYTES, AddressingMode, InstructionDescriptor, InstructionTable,
    Page, default_table,
)
from .operands import OperandField

log = logging.getLogger(__name__)


class DecoderState(Enum):
    SCANNING = "scanning"
    DONE = "done"


@dataclass(frozen=True)
class DecodedInstruction:
    """One decoded instruction, exactly as it sits in the stream."""
    offset: int
    page: Page
    opcode: int
    descriptor: InstructionDescriptor
    raw_bytes: bytes
    operand_values: Tuple[int, ...]

    @property
    def length(self) -> int:
        return len(self.raw_bytes)

    @property
    def mnemonic(self) -> str:
        return self.descriptor.mnemonic

    @property
    def mode(self) -> AddressingMode:
        return self.descriptor.mode

    @property
    def operands(self) -> List[Tuple[OperandField, int]]:
        """(field, value) pairs in encoding order."""
        return list(zip(self.descriptor.operands, self.operand_values))


class Decoder:
    """
    Fetch/decode loop over one program image.

    Usage:
        dec = Decoder(data)
        for inst in dec:
            print(render(inst))
        dec.cursor          # final position
    """

    def __init__(self, data: Sequence[int], table: Optional[InstructionTable] = None,
                 *, recover: bool = False):
        self.data = data
        self.table = table if table is not None else default_table()
        self.recover = recover
        self.cursor = 0
        self.errors: List[OutOfBoundsError] = []   # skipped when recovering
        self.state = DecoderState.SCANNING
        self._update_state()

    # ── public API ──

    def decode_at(self, cursor: int) -> DecodedInstruction:
        """Decode the instruction at ``cursor``. Does not move the cursor."""
        data = self.data
        require(data, cursor, 1, "opcode fetch")
        first = data[cursor]

        if first in PREFIX_BYTES:
            require(data, cursor + 1, 1, f"opcode after prebyte ${first:02X}")
            page = Page.from_prefix(first)
            opcode = data[cursor + 1]
            header = 2
        else:
            page = Page.UNPREFIXED
            opcode = first
            header = 1

        desc = self.table.lookup(page, opcode)
        length = header + desc.operand_bytes
        require(data, cursor, length, f"{desc.mnemonic} at 0x{cursor:08x}")

        padding = desc.operand_bytes * 8 - desc.operand_bits
        bit = (cursor + header) * 8 + padding
        values = []
        for field in desc.operands:
            value, used = extract(data, bit, field)
            values.append(value)
            bit += used

        raw = bytes(data[i] for i in range(cursor, cursor + length))
        log.debug("%08x: page=%d opcode=$%02X %s bits=%d len=%d",
                  cursor, page.value, opcode, desc, desc.operand_bits, length)
        return DecodedInstruction(
            offset=cursor,
            page=page,
            opcode=opcode,
            descriptor=desc,
            raw_bytes=raw,
            operand_values=tuple(values),
        )

    def step(self) -> Optional[DecodedInstruction]:
        """Decode at the cursor and advance past it.

        Returns None when already DONE, or when a bad byte was skipped in
        recover mode.
        """
        if self.state is DecoderState.DONE:
            return None
        try:
            inst = self.decode_at(self.cursor)
        except OutOfBoundsError as e:
            if not self.recover:
                self.state = DecoderState.DONE
                raise
            log.warning("0x%08x: %s (skipping 1 byte)", self.cursor, e)
            self.errors.append(e)
            self.cursor += 1
            self._update_state()
            return None
        self.cursor += inst.length
        self._update_state()
        return inst

    def __iter__(self) -> Iterator[DecodedInstruction]:
        while self.state is DecoderState.SCANNING:
            inst = self.step()
            if inst is not None:
                yield inst

    # ── helpers ──

    def _update_state(self) -> None:
        if self.cursor + MIN_INSTRUCTION_SIZE > len(self.data):
            self.state = DecoderState.DONE
