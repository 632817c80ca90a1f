#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pytest
import unittest

from hypothesis import assume, given
from hypothesis.strategies import integers

from strictint.errors import (
    ErrorKind,
    IntegerDivisionByZeroError,
    StrictIntError,
)
from strictint.integer import (
    I8, I16, I32, I64, U8, U16, U64,
    ISize, USize,
    FailingInt,
    SaturatingInt,
    int_cast,
)


class FailingI32(FailingInt, bits=32):
    __slots__ = ()


class SaturatingI16(SaturatingInt, bits=16):
    __slots__ = ()


def values_of(cls):
    '''
    Hypothesis strategy that generates raw ints within the range of a strict
    integer type.
    '''
    return integers(min_value=cls.limits.min, max_value=cls.limits.max)


def wrapped(num, bits, is_signed):
    num %= 2 ** bits
    if is_signed and num >= 2 ** (bits - 1):
        num -= 2 ** bits
    return num


class WrapPropertiesTestCase(unittest.TestCase):

    @given(a=values_of(I32))
    def test_wraparound_identity_i32(self, a):
        a = I32(a)
        self.assertEqual(a + (I32.max() - a) + I32(1), I32.min())

    @given(a=values_of(U16))
    def test_wraparound_identity_u16(self, a):
        a = U16(a)
        self.assertEqual(a + (U16.max() - a) + U16(1), U16.min())

    @given(a=values_of(I64), b=values_of(I64))
    def test_add_is_modular(self, a, b):
        self.assertEqual((I64(a) + I64(b)).raw, wrapped(a + b, 64, True))

    @given(a=values_of(I32), b=values_of(I32))
    def test_mul_is_modular(self, a, b):
        self.assertEqual((I32(a) * I32(b)).raw, wrapped(a * b, 32, True))

    @given(a=values_of(U64), b=values_of(U64))
    def test_sub_is_modular(self, a, b):
        self.assertEqual((U64(a) - U64(b)).raw, wrapped(a - b, 64, False))

    @given(a=values_of(I16), b=values_of(I16))
    def test_div_truncates(self, a, b):
        assume(b != 0)
        self.assertEqual((I16(a) / I16(b)).raw, wrapped(int(a / b), 16, True))

    @given(a=values_of(I8), n=integers(min_value=0, max_value=20))
    def test_shl_is_modular(self, a, n):
        self.assertEqual((I8(a) << n).raw, wrapped(a << n, 8, True))

    @given(a=values_of(I8))
    def test_never_fails(self, a):
        for b in (I8.min(), I8(-1), I8(1), I8.max()):
            I8(a) + b
            I8(a) - b
            I8(a) * b
            I8(a) / b
        -I8(a)


class FailPropertiesTestCase(unittest.TestCase):

    @given(a=values_of(ISize), b=values_of(ISize))
    def test_add_matches_exact(self, a, b):
        exact = a + b
        if ISize.limits.contains(exact):
            self.assertEqual(ISize(a) + ISize(b), ISize(exact))
        else:
            with pytest.raises(StrictIntError) as exc_info:
                ISize(a) + ISize(b)
            kind = ErrorKind.OVERFLOW if exact > ISize.limits.max else ErrorKind.UNDERFLOW
            self.assertEqual(exc_info.value.kind, kind)

    @given(a=values_of(USize), b=values_of(USize))
    def test_sub_matches_exact(self, a, b):
        exact = a - b
        if exact >= 0:
            self.assertEqual(USize(a) - USize(b), USize(exact))
        else:
            with pytest.raises(StrictIntError) as exc_info:
                USize(a) - USize(b)
            self.assertEqual(exc_info.value.kind, ErrorKind.UNDERFLOW)

    @given(a=values_of(FailingI32), b=values_of(FailingI32))
    def test_mul_matches_exact(self, a, b):
        exact = a * b
        if FailingI32.limits.contains(exact):
            self.assertEqual(FailingI32(a) * FailingI32(b), FailingI32(exact))
        else:
            with pytest.raises(StrictIntError):
                FailingI32(a) * FailingI32(b)

    @given(a=values_of(ISize))
    def test_div_by_zero(self, a):
        with pytest.raises(IntegerDivisionByZeroError):
            ISize(a) / ISize(0)

    def test_boundaries(self):
        for cls in (ISize, USize, FailingI32):
            with pytest.raises(StrictIntError) as exc_info:
                cls.max() + cls(1)
            self.assertEqual(exc_info.value.kind, ErrorKind.OVERFLOW)
            with pytest.raises(StrictIntError) as exc_info:
                cls.min() - cls(1)
            self.assertEqual(exc_info.value.kind, ErrorKind.UNDERFLOW)


class SaturatePropertiesTestCase(unittest.TestCase):

    @given(a=values_of(SaturatingI16), b=values_of(SaturatingI16))
    def test_add_clamps(self, a, b):
        result = SaturatingI16(a) + SaturatingI16(b)
        self.assertEqual(result.raw, max(-32768, min(32767, a + b)))

    @given(a=values_of(I64))
    def test_cast_clamps(self, a):
        result = int_cast(SaturatingI16, I64(a))
        self.assertEqual(result.raw, SaturatingI16.limits.clamp(a))


class CastPropertiesTestCase(unittest.TestCase):

    @given(a=values_of(I64))
    def test_wrap_cast_truncates(self, a):
        self.assertEqual(int_cast(I16, I64(a)).raw, wrapped(a, 16, True))
        self.assertEqual(int_cast(U8, I64(a)).raw, wrapped(a, 8, False))

    @given(a=values_of(I8))
    def test_wrap_cast_sign_extends(self, a):
        self.assertEqual(int_cast(I64, I8(a)).raw, a)
        self.assertEqual(int_cast(U64, I8(a)).raw, wrapped(a, 64, False))

    @given(a=values_of(I64))
    def test_fail_cast_range(self, a):
        if FailingI32.limits.contains(a):
            self.assertEqual(int_cast(FailingI32, I64(a)), FailingI32(a))
        else:
            with pytest.raises(StrictIntError) as exc_info:
                int_cast(FailingI32, I64(a))
            kind = ErrorKind.OVERFLOW if a > FailingI32.limits.max else ErrorKind.UNDERFLOW
            self.assertEqual(exc_info.value.kind, kind)
            self.assertEqual(exc_info.value.op, 'cast')

    @given(a=values_of(I16))
    def test_round_trip_signed(self, a):
        self.assertEqual(int_cast(I16, int_cast(I64, I16(a))), I16(a))
        self.assertEqual(int_cast(I16, int_cast(FailingI32, I16(a))), I16(a))

    @given(a=values_of(U8))
    def test_round_trip_unsigned(self, a):
        self.assertEqual(int_cast(U8, int_cast(ISize, U8(a))), U8(a))
        self.assertEqual(int_cast(U8, int_cast(USize, U8(a))), U8(a))


if __name__ == '__main__':
    unittest.main()
