#!/usr/bin/env python3

from .enums import errorKinds


class BitError(Exception):
    """Base class for recoverable dotbits errors."""

    kind = None

    def __init__(self, detail=""):
        message = self.kind.value if self.kind is not None else ""
        if detail and message:
            message = f"{message}: {detail}"
        elif detail:
            message = detail
        super().__init__(message)


class PosOutOfBounds(BitError, IndexError):
    """The position is out of bounds for the value being accessed."""

    kind = errorKinds.POS_OUT_OF_BOUNDS

    def __init__(self, pos: int, limit: int):
        self.pos = pos
        self.limit = limit
        super().__init__(f"{pos} not in 0..{limit}")


class ConversionOverflow(BitError, OverflowError):
    """When converting, the resulting value is too large to store in the target type."""

    kind = errorKinds.CONVERSION_OVERFLOW

    def __init__(self, bits: int, pos: int):
        self.bits = bits
        self.pos = pos
        super().__init__(f"bit {pos} set, target holds {bits} bits")
