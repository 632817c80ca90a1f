#!/usr/bin/env python
# -*- coding: utf-8 -*-

from strictint.errors import ErrorKind

'''
Policy-independent fallible arithmetic over plain Python integers, checked
against a `strictint.base.Limits` range. Every function returns a
`(result, error)` pair; when `error` is not ErrorKind.NONE the result is the
untouched left-hand operand.
'''


def trunc_div(a, b):
    '''
    Integer division rounding toward zero, unlike Python's flooring `//`.
    '''
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def try_add(a, b, limits):
    if b < 0:
        if limits.min - b > a:
            return a, ErrorKind.UNDERFLOW
    else:
        if limits.max - b < a:
            return a, ErrorKind.OVERFLOW
    return a + b, ErrorKind.NONE


def try_sub(a, b, limits):
    if b < 0:
        if limits.max + b < a:
            return a, ErrorKind.OVERFLOW
    else:
        if limits.min + b > a:
            return a, ErrorKind.UNDERFLOW
    return a - b, ErrorKind.NONE


def try_mul(a, b, limits):
    '''
    Multiply, checking the exact product against both ends of the range. This
    covers the signed `min * -1` case that a truncating `max / b < a` test
    lets through.
    '''
    if b == 0:
        return 0, ErrorKind.NONE
    result = a * b
    if result > limits.max:
        return a, ErrorKind.OVERFLOW
    if result < limits.min:
        return a, ErrorKind.UNDERFLOW
    return result, ErrorKind.NONE


def try_div(a, b, limits):
    if b == 0:
        return a, ErrorKind.DIVISION_BY_ZERO
    if limits.is_signed and a == limits.min and b == -1:
        return a, ErrorKind.OVERFLOW
    return trunc_div(a, b), ErrorKind.NONE


def check_shift(n):
    '''
    Shift amounts are unsigned; a negative one is a caller error and not an
    arithmetic failure.
    '''
    n = int(n)
    if n < 0:
        raise ValueError(f"Negative shift count {n}")
    return n


def try_shl(a, n, limits):
    '''
    Shift left, failing when the amount is not below the bit width or when a
    significant bit (sign bit included) would be shifted out of the range.
    '''
    n = check_shift(n)
    if n >= limits.bits:
        return a, ErrorKind.OVERFLOW
    result = a << n
    if result > limits.max:
        return a, ErrorKind.OVERFLOW
    if result < limits.min:
        return a, ErrorKind.UNDERFLOW
    return result, ErrorKind.NONE


def try_shr(a, n, limits):
    '''
    Shift right (arithmetic for negative values), failing only when the
    amount is not below the bit width.
    '''
    n = check_shift(n)
    if n >= limits.bits:
        return a, ErrorKind.OVERFLOW
    return a >> n, ErrorKind.NONE
