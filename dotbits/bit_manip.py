#!/usr/bin/env python3

import logging
from dataclasses import dataclass
from typing import Optional

from .bit_vec import NATIVE_BITS, BitVec
from .errors import PosOutOfBounds
from .helpers import (
    assign_bit,
    get_bit,
    get_bits,
    reverse_bits,
    set_bits,
    toggle_bit,
    trailing_ones,
    trailing_zeros,
    width_mask,
)

logger = logging.getLogger(__name__)


# --- UInt Base Class --- #
@dataclass
class UInt:
    """
    Base class for fixed-width unsigned integer bit views.

    Subclasses only set BITS; every operation is shared. Position 0 is the
    least significant bit.

    Operations that take a caller-supplied position (bit_get, bit_set, bit_on,
    bit_off, bit_tog) raise PosOutOfBounds. Range operations treat a bad range
    as a programming error and raise ValueError.
    """

    value: int = 0

    BITS = None

    def __post_init__(self):
        if self.BITS is None:
            raise TypeError("UInt has no width, use one of U8..U128 or USize")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{type(self).__name__} value must be an int, got {self.value!r}")
        if not 0 <= self.value <= self.max_value():
            raise ValueError(
                f"{type(self).__name__} value out of range: {self.value}. Min: 0 Max: {self.max_value()}"
            )

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __repr__(self):
        digits = self.BITS // 4
        return f"{type(self).__name__}(0x{self.value:0{digits}X})"

    @classmethod
    def bit_len(cls) -> int:
        """Bit width of the type."""
        return cls.BITS

    @classmethod
    def max_value(cls) -> int:
        return width_mask(cls.BITS)

    def _check_pos(self, pos: int):
        if not 0 <= pos < self.BITS:
            logger.debug("Rejected position %s for %s", pos, type(self).__name__)
            raise PosOutOfBounds(pos, self.BITS)

    def _check_range(self, start: int, end: int):
        if not 0 <= start < end <= self.BITS:
            raise ValueError(
                f"Invalid bit range [{start}, {end}) for {type(self).__name__}: "
                f"need 0 <= start < end <= {self.BITS}"
            )

    # --- Single bits --- #
    def bit_get(self, pos: int) -> bool:
        self._check_pos(pos)
        return bool(get_bit(self.value, pos))

    def bit_set(self, pos: int, flag: bool):
        """Sets bit `pos` to flag, leaving every other bit alone. Returns self."""
        self._check_pos(pos)
        self.value = assign_bit(self.value, pos, flag)
        return self

    def bit_on(self, pos: int):
        return self.bit_set(pos, True)

    def bit_off(self, pos: int):
        return self.bit_set(pos, False)

    def bit_tog(self, pos: int):
        """Flips bit `pos`. Returns self."""
        self._check_pos(pos)
        self.value = toggle_bit(self.value, pos)
        return self

    # --- Whole value views --- #
    def bits(self) -> BitVec:
        """Returns all BITS bits, least significant first."""
        return BitVec(self.bit_get(i) for i in range(self.BITS))

    def bit_ones(self) -> list[int]:
        """
        Returns every set position. Same result as bits().ones() without
        building the intermediate list.
        """
        positions = []
        looper = self.value
        while looper != 0:
            shift = trailing_zeros(looper)
            positions.append(shift)
            looper &= ~(1 << shift)
        return positions

    def bit_zeroes(self) -> list[int]:
        """
        Returns every unset position. Same result as bits().zeroes() without
        building the intermediate list.
        """
        positions = []
        looper = self.value
        while looper != self.max_value():
            shift = trailing_ones(looper)
            positions.append(shift)
            looper |= 1 << shift
        return positions

    def bit_first_one(self) -> Optional[int]:
        if self.value == 0:
            return None
        return trailing_zeros(self.value)

    def bit_first_zero(self) -> Optional[int]:
        if self.value == self.max_value():
            return None
        return trailing_ones(self.value)

    def count_ones(self) -> int:
        return bin(self.value).count("1")

    def count_zeroes(self) -> int:
        return self.BITS - self.count_ones()

    # --- Ranges --- #
    def get_bit_range(self, start: int, end: int):
        """Returns bits [start, end) right-aligned to bit 0."""
        self._check_range(start, end)
        return type(self)(get_bits(self.value, start, end))

    def set_bit_range(self, start: int, end: int, insert: int):
        """
        Returns a copy with bits [start, end) replaced by the low
        (end - start) bits of insert. Higher bits of insert are dropped.
        """
        self._check_range(start, end)
        return type(self)(set_bits(self.value, int(insert), start, end))

    # --- Shifts --- #
    def _shift(self, amount: int, left: bool):
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"Shift amount must be an int, got {amount!r}")
        if amount < 0:
            amount = -amount
            left = not left
        if amount >= self.BITS:
            return type(self)(0)
        if left:
            return type(self)((self.value << amount) & self.max_value())
        return type(self)(self.value >> amount)

    def signed_left_shift(self, amount: int):
        """Computes self << amount, or self >> -amount if amount is negative."""
        return self._shift(amount, left=True)

    def signed_right_shift(self, amount: int):
        """Computes self >> amount, or self << -amount if amount is negative."""
        return self._shift(amount, left=False)

    # --- Reversal --- #
    def bit_rev(self):
        """Reverses all BITS bits in place. Returns self."""
        self.value = reverse_bits(self.value, self.BITS)
        return self


# --- Concrete widths --- #
@dataclass(repr=False)
class U8(UInt):
    BITS = 8


@dataclass(repr=False)
class U16(UInt):
    BITS = 16


@dataclass(repr=False)
class U32(UInt):
    BITS = 32


@dataclass(repr=False)
class U64(UInt):
    BITS = 64


@dataclass(repr=False)
class U128(UInt):
    BITS = 128


@dataclass(repr=False)
class USize(UInt):
    BITS = NATIVE_BITS


# --- Type Registry --- #
uint_registry = {
    "u8": U8,
    "u16": U16,
    "u32": U32,
    "u64": U64,
    "u128": U128,
    "usize": USize,
}


def uint_type(name: str):
    """Looks up a UInt class by name, e.g. 'u16'."""
    try:
        return uint_registry[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown type: {name}. Valid: {', '.join(uint_registry)}"
        ) from None
