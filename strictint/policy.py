#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from strictint.base import Overflow, Sign, mask, portable_limits, reinterpret
from strictint.checked import (
    check_shift,
    trunc_div,
    try_add,
    try_div,
    try_mul,
    try_shl,
    try_shr,
    try_sub,
)
from strictint.errors import ErrorKind, raise_for


class IntegerOps:
    '''
    Arithmetic over raw integer values of one signedness and bit width. Abstract
    class that is sub-typed once per overflow policy in this module; a strict
    integer type picks its sub-type a single time, when the type is declared.
    '''
    overflow = None

    def __init__(self, sign, bits):
        self.sign = Sign(sign)
        self.bits = int(bits)
        self.limits = portable_limits(self.sign, self.bits)
        self.mask = mask(self.bits)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.sign.value}, {self.bits})"

    def _div_by_zero(self, op, a):
        # no policy gives a zero divisor a meaning, so all of them raise
        logging.debug(f"Division of {a} by zero in {self!r}.")
        raise_for(ErrorKind.DIVISION_BY_ZERO, op, f"{a} / 0")


class WrapOps(IntegerOps):
    '''
    Arithmetic modulo 2 ** bits. Every result is computed over the unsigned
    bit patterns of the operands and then read back with the signedness of the
    type, so no intermediate ever leaves the unsigned range.
    '''
    overflow = Overflow.WRAP

    def _wrap(self, pattern):
        return reinterpret(pattern, self.sign, self.bits)

    def add(self, a, b):
        return self._wrap((a & self.mask) + (b & self.mask))

    def sub(self, a, b):
        return self._wrap((a & self.mask) - (b & self.mask))

    def mul(self, a, b):
        return self._wrap((a & self.mask) * (b & self.mask))

    def div(self, a, b):
        if b == 0:
            self._div_by_zero('div', a)
        # divide magnitudes as unsigned, then negate in the unsigned domain,
        # so that min / -1 comes back around to min
        q = (abs(a) & self.mask) // (abs(b) & self.mask)
        if (a < 0) != (b < 0):
            q = -q
        return self._wrap(q)

    def shl(self, a, n):
        n = check_shift(n)
        if n >= self.bits:
            return 0
        return self._wrap((a & self.mask) << n)

    def shr(self, a, n):
        n = check_shift(n)
        if n >= self.bits:
            return -1 if a < 0 else 0
        return a >> n

    def neg(self, a):
        return self._wrap(-(a & self.mask))


class FailOps(IntegerOps):
    '''
    Checked arithmetic: every operation goes through its primitive in
    `strictint.checked` and raises a `strictint.errors.StrictIntError` instead
    of returning a value that does not fit.
    '''
    overflow = Overflow.FAIL

    def _checked(self, op, fn, a, b):
        result, error = fn(a, b, self.limits)
        if error is not ErrorKind.NONE:
            logging.debug(f"{error.name} in {op}({a}, {b}) for {self!r}.")
            raise_for(error, op, f"{a}, {b} outside [{self.limits.min}, {self.limits.max}]")
        return result

    def add(self, a, b):
        return self._checked('add', try_add, a, b)

    def sub(self, a, b):
        return self._checked('sub', try_sub, a, b)

    def mul(self, a, b):
        return self._checked('mul', try_mul, a, b)

    def div(self, a, b):
        return self._checked('div', try_div, a, b)

    def shl(self, a, n):
        return self._checked('shl', try_shl, a, n)

    def shr(self, a, n):
        return self._checked('shr', try_shr, a, n)

    def neg(self, a):
        result, error = try_sub(0, a, self.limits)
        if error is not ErrorKind.NONE:
            logging.debug(f"{error.name} in neg({a}) for {self!r}.")
            raise_for(error, 'neg', f"-{a} outside [{self.limits.min}, {self.limits.max}]")
        return result


class SaturateOps(IntegerOps):
    '''
    Arithmetic that computes the exact result and clamps it to the logical
    range. Only division by zero raises.
    '''
    overflow = Overflow.SATURATE

    def _saturate(self, op, result):
        clamped = self.limits.clamp(result)
        if clamped != result:
            logging.debug(f"Saturated {op} result {result} to {clamped} for {self!r}.")
        return clamped

    def add(self, a, b):
        return self._saturate('add', a + b)

    def sub(self, a, b):
        return self._saturate('sub', a - b)

    def mul(self, a, b):
        return self._saturate('mul', a * b)

    def div(self, a, b):
        if b == 0:
            self._div_by_zero('div', a)
        return self._saturate('div', trunc_div(a, b))

    def shl(self, a, n):
        n = check_shift(n)
        if n >= self.bits:
            # any non-zero value is already past the range at this amount
            return self._saturate('shl', a * (self.limits.max + 1))
        return self._saturate('shl', a << n)

    def shr(self, a, n):
        n = check_shift(n)
        if n >= self.bits:
            return -1 if a < 0 else 0
        return a >> n

    def neg(self, a):
        return self._saturate('neg', -a)


_OPS = {
    Overflow.WRAP: WrapOps,
    Overflow.FAIL: FailOps,
    Overflow.SATURATE: SaturateOps,
}


def ops_for(overflow, sign, bits):
    '''
    Arithmetic implementation for an overflow policy over one signedness and
    bit width.
    '''
    return _OPS[Overflow(overflow)](sign, bits)
