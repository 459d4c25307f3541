"""
dotbits
=======

Bit manipulation helpers for fixed-width unsigned integers and for lists of
booleans read as bits.

Endianness:
-----------
All operations are little-endian: position 0 is the least significant bit, so
position 0 of 0b00001111 is True. For big-endian order reverse the value
(UInt.bit_rev()) or the list (list.reverse()).

Example Usage:
-------------
from dotbits import U8, U32, BitVec

U8(0b00001000).bit_set(0, True)          # U8(0x09)
U8(0b10110100).bit_ones()                # [2, 4, 5, 7]
U8(0b00001111).bit_rev()                 # U8(0xF0)
U8(0b11010000).get_bit_range(4, 8)       # U8(0x0D)

U32(24).signed_left_shift(-2)            # same as 24 >> 2

bits = BitVec([False] * 7 + [True])
bits.try_into_u8()                       # 128
bits.try_into_uint(4)                    # raises ConversionOverflow

"""

# --- Integer bit views --- #
from .bit_manip import (
    UInt,
    U8,
    U16,
    U32,
    U64,
    U128,
    USize,
    uint_registry,
    uint_type,
)

# --- Boolean list bit view --- #
from .bit_vec import BitVec

# --- Errors --- #
from .enums import errorKinds
from .errors import BitError, ConversionOverflow, PosOutOfBounds

# --- Expose a version number ---
__version__ = "1.0.0"
