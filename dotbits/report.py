#!/usr/bin/env python3

import dataclasses
from dataclasses import dataclass
from typing import Optional


# --- Report Row --- #
@dataclass
class BitReport:
    """One row of `dotbits` output: the bit views of a single value."""

    # fmt: off
    type       : str
    value      : int
    bits       : str            # LSB first
    ones       : list
    zeroes     : list
    first_one  : Optional[int]
    first_zero : Optional[int]
    reversed   : int
    range      : Optional[int] = None
    # fmt: on

    @classmethod
    def from_uint(cls, uint, bit_range=None):
        """Builds a report from a UInt, optionally extracting [start, end)."""
        extracted = None
        if bit_range is not None:
            start, end = bit_range
            extracted = int(uint.get_bit_range(start, end))
        # bit_rev works in place
        reversed_value = int(type(uint)(uint.value).bit_rev())
        return cls(
            type=type(uint).__name__.lower(),
            value=uint.value,
            bits="".join("1" if b else "0" for b in uint.bits()),
            ones=uint.bit_ones(),
            zeroes=uint.bit_zeroes(),
            first_one=uint.bit_first_one(),
            first_zero=uint.bit_first_zero(),
            reversed=reversed_value,
            range=extracted,
        )

    @classmethod
    def csv_header(cls, fields=None):
        if fields is None:
            return [f.name for f in dataclasses.fields(cls)]
        else:
            return fields

    def to_csv(self, fields=None):
        if fields is None:
            return [f"{getattr(self, f.name)}" for f in dataclasses.fields(self)]
        else:
            return [f"{getattr(self, field)}" for field in fields]

    def to_text(self, fields=None):
        names = self.csv_header(fields)
        width = max(len(name) for name in names)
        return "\n".join(
            f"{name:<{width}} : {value}" for name, value in zip(names, self.to_csv(fields))
        )
