#!/usr/bin/env python3

import logging
import struct

from .errors import ConversionOverflow, PosOutOfBounds
from .helpers import get_bit

logger = logging.getLogger(__name__)

# Native pointer width, matches USize.BITS
NATIVE_BITS = struct.calcsize("P") * 8


class BitVec(list):
    """
    A list of booleans read as a little-endian bit pattern.

    Index 0 is the least significant bit. Mutators work in place and return
    the list so calls can be chained:

        BitVec([0, 1]).set_on(0).toggle(1).trim()   # -> BitVec([True])

    Positions are checked against the current length. Passing grow=True to
    set/set_on/set_off/toggle pads the list with False instead of raising.
    """

    def __init__(self, iterable=()):
        super().__init__(bool(b) for b in iterable)

    def __repr__(self):
        return f"BitVec({list.__repr__(self)})"

    @classmethod
    def from_int(cls, value: int, length: int):
        """Builds the `length`-entry little-endian view of a non-negative int."""
        if value < 0:
            raise ValueError(f"Cannot take the bit view of a negative value: {value}")
        return cls(get_bit(value, i) for i in range(length))

    # --- Queries --- #
    def ones(self) -> list[int]:
        """Returns every position that is True."""
        return [i for i, b in enumerate(self) if b]

    def zeroes(self) -> list[int]:
        """Returns every position that is False."""
        return [i for i, b in enumerate(self) if not b]

    # --- Mutators --- #
    def _check_pos(self, pos: int, grow: bool):
        if pos < 0 or (pos >= len(self) and not grow):
            logger.debug("Rejected position %s for BitVec of length %s", pos, len(self))
            raise PosOutOfBounds(pos, len(self))
        if pos >= len(self):
            logger.debug("Growing BitVec from %s to %s entries", len(self), pos + 1)
            self.extend([False] * (pos + 1 - len(self)))

    def set(self, pos: int, flag: bool, grow: bool = False):
        """Sets a position to flag."""
        self._check_pos(pos, grow)
        self[pos] = bool(flag)
        return self

    def set_on(self, pos: int, grow: bool = False):
        return self.set(pos, True, grow)

    def set_off(self, pos: int, grow: bool = False):
        return self.set(pos, False, grow)

    def toggle(self, pos: int, grow: bool = False):
        """Flips a position."""
        self._check_pos(pos, grow)
        self[pos] = not self[pos]
        return self

    def trim(self):
        """Removes trailing False values. Interior False values are kept."""
        while self and not self[-1]:
            self.pop()
        return self

    # --- Conversions --- #
    def _first_excess(self, bits: int):
        for i in range(bits, len(self)):
            if self[i]:
                return i
        return None

    def _fold(self, bits: int) -> int:
        value = 0
        for i, b in enumerate(self[:bits]):
            if b:
                value |= 1 << i
        return value

    def into_uint(self, bits: int) -> int:
        """
        Folds the list into an unsigned int of the given width.

        The list does not have to be exactly `bits` long, but a True entry at
        or past `bits` is a caller error and raises ValueError. Use
        try_into_uint when the list comes from untrusted data.
        """
        excess = self._first_excess(bits)
        if excess is not None:
            raise ValueError(
                f"BitVec does not fit in {bits} bits: position {excess} is set"
            )
        return self._fold(bits)

    def try_into_uint(self, bits: int) -> int:
        """
        Checked form of into_uint.

        Raises:
            ConversionOverflow: a True entry sits at or past `bits`.
        """
        excess = self._first_excess(bits)
        if excess is not None:
            logger.debug("Conversion to %s bits overflows at position %s", bits, excess)
            raise ConversionOverflow(bits, excess)
        return self._fold(bits)

    def into_u8(self) -> int:
        return self.into_uint(8)

    def into_u16(self) -> int:
        return self.into_uint(16)

    def into_u32(self) -> int:
        return self.into_uint(32)

    def into_u64(self) -> int:
        return self.into_uint(64)

    def into_u128(self) -> int:
        return self.into_uint(128)

    def into_usize(self) -> int:
        return self.into_uint(NATIVE_BITS)

    def try_into_u8(self) -> int:
        return self.try_into_uint(8)

    def try_into_u16(self) -> int:
        return self.try_into_uint(16)

    def try_into_u32(self) -> int:
        return self.try_into_uint(32)

    def try_into_u64(self) -> int:
        return self.try_into_uint(64)

    def try_into_u128(self) -> int:
        return self.try_into_uint(128)

    def try_into_usize(self) -> int:
        return self.try_into_uint(NATIVE_BITS)
