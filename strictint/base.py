#!/usr/bin/env python
# -*- coding: utf-8 -*-

import collections
import enum
import struct

import numpy as np

'''
Stateless definitions that are used throughout the strict integer types and
their overflow policies: signedness, policies, the storage unit lookup and the
portable logical limits.
'''


class Sign(enum.Enum):
    SIGNED = 'signed'
    UNSIGNED = 'unsigned'


class Overflow(enum.Enum):
    '''
    What an arithmetic result that does not fit the logical range turns into.
    '''
    WRAP = 'wrap'
    FAIL = 'fail'
    SATURATE = 'saturate'


BIT_WIDTHS = (8, 16, 32, 64)

# Py_ssize_t is what numpy.intp maps to
SIZE_BITS = np.dtype(np.intp).itemsize * 8
POINTER_BITS = struct.calcsize('P') * 8


_STORAGE_UNITS = {
    (Sign.SIGNED, 8): np.dtype(np.int8),
    (Sign.SIGNED, 16): np.dtype(np.int16),
    (Sign.SIGNED, 32): np.dtype(np.int32),
    (Sign.SIGNED, 64): np.dtype(np.int64),
    (Sign.UNSIGNED, 8): np.dtype(np.uint8),
    (Sign.UNSIGNED, 16): np.dtype(np.uint16),
    (Sign.UNSIGNED, 32): np.dtype(np.uint32),
    (Sign.UNSIGNED, 64): np.dtype(np.uint64),
}


def storage_unit(sign, bits):
    '''
    Native numpy integer type used to hold a value of the given signedness and
    logical bit width. Guaranteed to be at least `bits` wide, not exactly.
    '''
    try:
        return _STORAGE_UNITS[(Sign(sign), int(bits))]
    except KeyError:
        raise ValueError(f"No storage unit for {Sign(sign).value} {bits} bits, expected one of {BIT_WIDTHS}") from None


def storage_bits(dtype):
    return np.dtype(dtype).itemsize * 8


def unsigned_counterpart(dtype):
    '''
    Unsigned numpy integer type with the same width as `dtype`.
    '''
    return np.dtype(f"u{np.dtype(dtype).itemsize}")


class Limits(collections.namedtuple('Limits', ['min', 'max'])):
    '''
    Inclusive logical range of an integer type. The checked primitives are
    written against this, never against the range of a storage unit.
    '''
    __slots__ = ()

    @property
    def is_signed(self):
        return self.min < 0

    @property
    def bits(self):
        return (self.max - self.min).bit_length()

    def contains(self, num):
        return self.min <= num <= self.max

    def clamp(self, num):
        return max(self.min, min(self.max, num))


def portable_limits(sign, bits):
    '''
    Logical (min, max) for a signedness and bit width, in two's complement.
    '''
    bits = int(bits)
    if Sign(sign) is Sign.UNSIGNED:
        return Limits(0, (1 << bits) - 1)
    return Limits(-(1 << (bits - 1)), (1 << (bits - 1)) - 1)


def mask(bits):
    return (1 << bits) - 1  # 0xFFF... or 0b111...


def reinterpret(pattern, sign, bits):
    '''
    Read the low `bits` bits of a bit pattern as a value of the given
    signedness, sign-extending from the logical width and not from the width
    of whatever storage unit holds it.
    '''
    pattern = int(pattern) & mask(bits)
    if Sign(sign) is Sign.SIGNED and pattern >> (bits - 1):
        pattern -= 1 << bits
    return pattern


def convert(num, from_dtype, to_dtype):
    '''
    Native conversion of a value held in one storage unit to another, with the
    usual truncating / sign-extending semantics of a C integer cast.
    '''
    held = np.array(int(num) & mask(storage_bits(from_dtype)), dtype=unsigned_counterpart(from_dtype))
    return held.view(from_dtype).astype(to_dtype).item()
