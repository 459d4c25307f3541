from enum import Enum


class errorKinds(Enum):
    CONVERSION_OVERFLOW = "converted value overflows"
    POS_OUT_OF_BOUNDS = "position out of bounds"
