"""
Instruction table tests — coverage of all 4 x 256 entries, page prebytes,
unrecognized defaults, and injected synthetic tables.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import dataclasses

import pytest

from hc16_disasm.opcodes import (
    PREFIX_BYTES, UNRECOGNIZED, AddressingMode, InstructionDescriptor,
    InstructionTable, Page, default_table,
)
from hc16_disasm.operands import (
    FF, GGGG, HHLL, II, JJKK, MMGGGG, OP_GGGG, OP_MMMM, RRRR, ZGGGGG,
)


@pytest.fixture(scope="module")
def table():
    return default_table()


class TestCoverage:

    def test_every_entry_populated(self, table):
        assert len(table) == 4 * 256
        for page in Page:
            row = table.page(page)
            assert len(row) == 256
            for opcode, desc in enumerate(row):
                assert isinstance(desc, InstructionDescriptor)
                assert desc.opcode == opcode
                assert isinstance(desc.mode, AddressingMode)
                assert desc.operand_bits >= 0
                assert 0 <= len(desc.operands) <= 4
                assert desc.mnemonic

    def test_lookup_matches_iteration(self, table):
        for page, desc in table:
            assert table.lookup(page, desc.opcode) is desc

    def test_operand_bytes_rounded_up(self, table):
        jmp = table.lookup(Page.UNPREFIXED, 0x4B)
        assert jmp.operands == ZGGGGG
        assert jmp.operand_bits == 20
        assert jmp.operand_bytes == 3

    def test_stats(self, table):
        stats = table.get_stats()
        assert stats == {
            "unprefixed": 249,
            "page_17": 186,
            "page_27": 201,
            "page_37": 208,
            "total": 844,
        }

    def test_default_table_is_shared(self):
        assert default_table() is default_table()

    def test_lookup_rejects_bad_opcode(self, table):
        with pytest.raises(ValueError):
            table.lookup(Page.UNPREFIXED, 0x100)
        with pytest.raises(ValueError):
            table.lookup(Page.PAGE_17, -1)


class TestKnownEntries:
    """Spot checks against the CPU16 opcode map."""

    def test_com_indexed_8(self, table):
        desc = table.lookup(Page.UNPREFIXED, 0x00)
        assert (desc.mnemonic, desc.mode, desc.operands) == ("com", AddressingMode.IND8X, FF)

    def test_com_indexed_16(self, table):
        desc = table.lookup(Page.PAGE_17, 0x00)
        assert (desc.mnemonic, desc.mode, desc.operands) == ("com", AddressingMode.IND16X, GGGG)

    def test_word_ops(self, table):
        desc = table.lookup(Page.PAGE_27, 0x00)
        assert desc.mnemonic == "comw"
        assert desc.operands == (OP_GGGG, OP_MMMM)

    def test_long_branch(self, table):
        desc = table.lookup(Page.PAGE_37, 0x80)
        assert (desc.mnemonic, desc.mode, desc.operands) == ("lbra", AddressingMode.REL16, RRRR)

    def test_immediate_16(self, table):
        desc = table.lookup(Page.PAGE_37, 0xB5)
        assert (desc.mnemonic, desc.mode, desc.operands) == ("ldd", AddressingMode.IMM16, JJKK)

    def test_inherent(self, table):
        desc = table.lookup(Page.PAGE_27, 0xF7)
        assert (desc.mnemonic, desc.mode, desc.operands) == ("rts", AddressingMode.INH, ())

    def test_accumulator_e_indexed(self, table):
        desc = table.lookup(Page.PAGE_27, 0x45)
        assert (desc.mnemonic, desc.mode, desc.operands) == ("ldaa", AddressingMode.EX, ())

    def test_move_modes(self, table):
        assert table.lookup(Page.UNPREFIXED, 0x30).mode is AddressingMode.IXP2EXT
        assert table.lookup(Page.UNPREFIXED, 0x32).mode is AddressingMode.EXT2IXP
        assert table.lookup(Page.PAGE_37, 0xFE).mode is AddressingMode.EXT2EXT
        assert table.lookup(Page.PAGE_37, 0xFE).operand_bytes == 4

    def test_index_register_follows_row(self, table):
        """jsr 20-bit indexed uses X, Y, Z on rows 8, 9, A."""
        assert table.lookup(Page.UNPREFIXED, 0x89).mode is AddressingMode.IND20X
        assert table.lookup(Page.UNPREFIXED, 0x99).mode is AddressingMode.IND20Y
        assert table.lookup(Page.UNPREFIXED, 0xA9).mode is AddressingMode.IND20Z

    def test_store_b_column(self, table):
        for opcode in (0xCA, 0xDA, 0xEA):
            assert table.lookup(Page.UNPREFIXED, opcode).mnemonic == "stab"

    def test_bit_ops_without_branch(self, table):
        assert table.lookup(Page.UNPREFIXED, 0x08).operands == MMGGGG
        assert table.lookup(Page.UNPREFIXED, 0x0A).operand_bytes == 5

    def test_extended_ops_carry_address(self, table):
        assert table.lookup(Page.PAGE_37, 0xF5).operands == HHLL
        assert table.lookup(Page.PAGE_27, 0x71).operands == HHLL

    def test_ext20_jumps(self, table):
        assert table.lookup(Page.UNPREFIXED, 0x7A).mode is AddressingMode.EXT20
        assert table.lookup(Page.UNPREFIXED, 0xFA).mode is AddressingMode.EXT20


class TestPages:

    def test_prefix_bytes(self):
        assert PREFIX_BYTES == {0x17, 0x27, 0x37}
        assert [p.prefix for p in Page] == [None, 0x17, 0x27, 0x37]

    def test_from_prefix(self):
        assert Page.from_prefix(0x17) is Page.PAGE_17
        assert Page.from_prefix(0x27) is Page.PAGE_27
        assert Page.from_prefix(0x37) is Page.PAGE_37

    def test_from_prefix_rejects_other_bytes(self):
        with pytest.raises(ValueError):
            Page.from_prefix(0x47)

    def test_prebyte_entries(self, table):
        for prefix in PREFIX_BYTES:
            desc = table.lookup(Page.UNPREFIXED, prefix)
            assert desc.mnemonic == "prebyte"
            assert desc.operands == ()

    def test_prebytes_are_ordinary_opcodes_inside_a_page(self, table):
        assert table.lookup(Page.PAGE_37, 0x17).mnemonic == "tbb"
        assert table.lookup(Page.PAGE_37, 0x37).mnemonic == "ore"


class TestUnrecognized:

    def test_unprefixed_default(self, table):
        desc = table.lookup(Page.UNPREFIXED, 0x07)
        assert desc.mnemonic == UNRECOGNIZED
        assert not desc.recognized
        assert desc.mode is AddressingMode.IMM8
        assert desc.operands == II
        assert desc.operand_bytes == 1

    def test_page_17_default(self, table):
        desc = table.lookup(Page.PAGE_17, 0x07)
        assert desc.mnemonic == UNRECOGNIZED
        assert desc.mode is AddressingMode.IMM8
        assert desc.operands == II

    @pytest.mark.parametrize("page", [Page.PAGE_27, Page.PAGE_37])
    def test_inherent_pages_default(self, table, page):
        desc = table.lookup(page, 0xEF if page is Page.PAGE_37 else 0x07)
        assert desc.mnemonic == UNRECOGNIZED
        assert desc.mode is AddressingMode.INH
        assert desc.operands == ()


class TestSyntheticTable:

    def test_small_table_is_complete(self):
        t = InstructionTable({Page.UNPREFIXED: {0x01: ("nop", AddressingMode.INH, ())}})
        assert len(t) == 1024
        assert t.lookup(Page.UNPREFIXED, 0x01).mnemonic == "nop"
        assert t.lookup(Page.UNPREFIXED, 0x02).mnemonic == UNRECOGNIZED
        assert t.lookup(Page.PAGE_37, 0x01).mnemonic == UNRECOGNIZED
        assert t.get_stats()["total"] == 1

    def test_empty_table(self):
        t = InstructionTable()
        assert all(not desc.recognized for _, desc in t)

    def test_bad_opcode_in_mapping(self):
        with pytest.raises(ValueError):
            InstructionTable({Page.PAGE_17: {0x1FF: ("bad", AddressingMode.INH, ())}})

    def test_descriptors_are_frozen(self):
        desc = default_table().lookup(Page.UNPREFIXED, 0x00)
        with pytest.raises(dataclasses.FrozenInstanceError):
            desc.mnemonic = "xyz"

    def test_table_has_no_setters(self):
        t = InstructionTable()
        with pytest.raises(AttributeError):
            t.extra = 1


class TestAddressingMode:

    def test_labels(self):
        assert AddressingMode.IND8X.label == "X"
        assert AddressingMode.IND16Z.label == "Z"
        assert AddressingMode.IXP2EXT.label == "IXP->EXT"
        assert AddressingMode.EXT2EXT.label == "EXT->EXT"

    def test_indexed(self):
        assert AddressingMode.IND20Y.is_indexed
        assert AddressingMode.IND20Y.index_register == "y"
        assert not AddressingMode.EX.is_indexed
        assert AddressingMode.EXT.index_register is None
