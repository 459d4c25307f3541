#!/usr/bin/env python3

# --- Bit Helpers --- #
#
# Plain int-level helpers shared by the UInt and BitVec views. Nothing here
# checks bounds; callers validate positions first.


def width_mask(bits: int) -> int:
    """Returns a mask with the low `bits` bits set."""
    return (1 << bits) - 1


def get_bit(field: int, bit_position: int) -> int:
    """Gets the value of a single bit at a given position."""
    return (field >> bit_position) & 0x1


def assign_bit(field: int, bit_position: int, flag: bool) -> int:
    """Forces a single bit to `flag` without branching on it."""
    return field ^ ((-int(bool(flag)) ^ field) & (1 << bit_position))


def toggle_bit(field: int, bit_position: int) -> int:
    """Flips a single bit."""
    return field ^ (1 << bit_position)


def get_bits(field: int, start: int, end: int) -> int:
    """Gets bits [start, end) right-aligned to bit 0."""
    return (field >> start) & width_mask(end - start)


def set_bits(field: int, value: int, start: int, end: int) -> int:
    """Replaces bits [start, end) with the low bits of value."""
    mask = width_mask(end - start) << start
    return (field & ~mask) | ((value << start) & mask)


def trailing_zeros(field: int) -> int:
    """Index of the lowest set bit. field must be non-zero."""
    return (field & -field).bit_length() - 1


def trailing_ones(field: int) -> int:
    """Index of the lowest clear bit of a non-negative field."""
    return trailing_zeros(~field)


def reverse_bits(field: int, bits: int) -> int:
    """Reverses the order of the low `bits` bits."""
    out = 0
    for _ in range(bits):
        out = (out << 1) | (field & 0x1)
        field >>= 1
    return out
