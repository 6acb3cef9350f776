"""
hc16dis — Constants and output profiles
"""

# =============================================================================
#  DECODING
# =============================================================================
PREFIX_BYTES = (0x17, 0x27, 0x37)   # page 1, 2, 3 prebytes
MIN_INSTRUCTION_SIZE = 2            # smallest CPU16 instruction, in bytes


# =============================================================================
#  LISTING LAYOUT
# =============================================================================
OFFSET_DIGITS = 8                   # "%08x" byte offset
MNEMONIC_COLUMN = 25                # offset + hex bytes are padded to this column
INDEX_MARKER = "[%{reg}]+"          # printed before each indexed-mode operand

OUTPUT_PROFILES = {
    "hc16dis": {
        "line_end": "\n\n",         # every instruction followed by a blank line
        "description": "Classic hc16dis listing",
    },
    "compact": {
        "line_end": "\n",
        "description": "One line per instruction",
    },
}
DEFAULT_PROFILE = "hc16dis"


# =============================================================================
#  EXIT CODES
# =============================================================================
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_OPEN = 2                       # could not open input
EXIT_STAT = 3                       # could not stat input
EXIT_ALLOC = 4                      # could not allocate the input buffer
EXIT_READ = 5                       # short or failed read
EXIT_DECODE = 6                     # at least one file hit an out-of-bounds decode
