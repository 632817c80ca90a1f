#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import operator

from strictint.base import (
    POINTER_BITS,
    SIZE_BITS,
    Overflow,
    Sign,
    convert,
    portable_limits,
    reinterpret,
    storage_bits,
    storage_unit,
)
from strictint.errors import ErrorKind, raise_for
from strictint.policy import ops_for


class StrictInt:
    '''
    Fixed-width signed or unsigned integers whose overflow behaviour is part of
    the type. Abstract class: a concrete type is declared by sub-typing with
    the signedness, bit width and overflow policy as class keywords, e.g.

        class I32(StrictInt, sign=Sign.SIGNED, bits=32, overflow=Overflow.WRAP):
            pass

    Each keyword can also come from a partially configured parent, so that
    `class FailingI32(FailingInt, bits=32)` is enough.
    '''
    sign = None
    bits = None
    overflow = None
    is_complete = False

    __slots__ = ('_n',)

    def __init_subclass__(cls, sign=None, bits=None, overflow=None, **kwargs):
        super().__init_subclass__(**kwargs)
        if sign is not None:
            cls.sign = Sign(sign)
        if bits is not None:
            cls.bits = int(bits)
        if overflow is not None:
            cls.overflow = Overflow(overflow)

        cls.is_complete = None not in (cls.sign, cls.bits, cls.overflow)
        if not cls.is_complete:
            return

        cls.is_signed = cls.sign is Sign.SIGNED
        cls.is_noexcept = cls.overflow is not Overflow.FAIL
        cls.storage = storage_unit(cls.sign, cls.bits)
        cls.limits = portable_limits(cls.sign, cls.bits)
        cls.ops = ops_for(cls.overflow, cls.sign, cls.bits)
        assert storage_bits(cls.storage) >= cls.bits, f"Storage {cls.storage} narrower than {cls.bits:,d} bits"
        logging.debug(f"Declared {cls.__name__}: {cls.sign.value} {cls.bits} bits, {cls.overflow.value} on overflow, stored as {cls.storage}.")

    def __init__(self, num=0):
        '''
        Initialize with a value that can be converted with the top-level int()
        call and lies within the logical range of the type. Defaults to zero.
        '''
        if not type(self).is_complete:
            raise TypeError(f"{type(self).__name__} needs a sign, a bit width and an overflow policy")
        num = int(num)
        if not self.limits.contains(num):
            raise ValueError(f"Value {num} out-of-range for {self.sign.value} {self.bits:,d} bits")
        self._n = num

    @classmethod
    def _of(cls, num):
        # results of the policy engine are in range already
        self = cls.__new__(cls)
        self._n = num
        return self

    @classmethod
    def min(cls):
        return cls._of(cls.limits.min)

    @classmethod
    def max(cls):
        return cls._of(cls.limits.max)

    @property
    def raw(self):
        return self._n

    def __repr__(self):
        return f"{self.__class__.__name__}({self._n})"

    def __format__(self, *fmt_args):
        '''
        Just use the underlying Python int()'s formatting.
        '''
        return self._n.__format__(*fmt_args)

    def __int__(self):
        return self._n

    def __index__(self):
        return self._n

    def __bool__(self):
        return self._n != 0

    def __hash__(self):
        return hash(self._n)

    def _operand(self, o):
        '''
        Raw value of a right-hand operand: another value of this exact type, or
        a plain int that fits the type.
        '''
        if type(o) is type(self):
            return o._n
        if isinstance(o, int) and not isinstance(o, bool):
            return type(self)(o)._n
        return NotImplemented

    def _binary(self, fn, o):
        b = self._operand(o)
        if b is NotImplemented:
            return NotImplemented
        return self._of(fn(self._n, b))

    '''
    Comparison dunders cannot overflow, so just implement these with the
    underlying Python int() operators.
    '''
    def _compare(self, cmp, o):
        if type(o) is type(self):
            return cmp(self._n, o._n)
        if isinstance(o, int) and not isinstance(o, bool):
            return cmp(self._n, o)
        return NotImplemented

    def __eq__(self, o): return self._compare(operator.eq, o)
    def __ne__(self, o): return self._compare(operator.ne, o)
    def __lt__(self, o): return self._compare(operator.lt, o)
    def __le__(self, o): return self._compare(operator.le, o)
    def __gt__(self, o): return self._compare(operator.gt, o)
    def __ge__(self, o): return self._compare(operator.ge, o)

    def __add__(self, o):
        return self._binary(self.ops.add, o)

    def __sub__(self, o):
        return self._binary(self.ops.sub, o)

    def __mul__(self, o):
        return self._binary(self.ops.mul, o)

    def __truediv__(self, o):
        return self._binary(self.ops.div, o)

    def __lshift__(self, n):
        return self._of(self.ops.shl(self._n, operator.index(n)))

    def __rshift__(self, n):
        return self._of(self.ops.shr(self._n, operator.index(n)))

    def __neg__(self):
        return self._of(self.ops.neg(self._n))

    '''
    Bitwise operators work on in-range two's complement values and so can
    never overflow, whatever the policy.
    '''
    def __and__(self, o):
        return self._binary(operator.and_, o)

    def __or__(self, o):
        return self._binary(operator.or_, o)

    def __xor__(self, o):
        return self._binary(operator.xor, o)

    def __invert__(self):
        return self._of(reinterpret(~self._n, self.sign, self.bits))

    def logical_not(self):
        return self._of(int(self._n == 0))


class WrappingInt(StrictInt, sign=Sign.SIGNED, overflow=Overflow.WRAP):
    __slots__ = ()


class WrappingUInt(StrictInt, sign=Sign.UNSIGNED, overflow=Overflow.WRAP):
    __slots__ = ()


class FailingInt(StrictInt, sign=Sign.SIGNED, overflow=Overflow.FAIL):
    __slots__ = ()


class FailingUInt(StrictInt, sign=Sign.UNSIGNED, overflow=Overflow.FAIL):
    __slots__ = ()


class SaturatingInt(StrictInt, sign=Sign.SIGNED, overflow=Overflow.SATURATE):
    __slots__ = ()


class SaturatingUInt(StrictInt, sign=Sign.UNSIGNED, overflow=Overflow.SATURATE):
    __slots__ = ()


class I8(WrappingInt, bits=8):
    __slots__ = ()


class I16(WrappingInt, bits=16):
    __slots__ = ()


class I32(WrappingInt, bits=32):
    __slots__ = ()


class I64(WrappingInt, bits=64):
    __slots__ = ()


class U8(WrappingUInt, bits=8):
    __slots__ = ()


class U16(WrappingUInt, bits=16):
    __slots__ = ()


class U32(WrappingUInt, bits=32):
    __slots__ = ()


class U64(WrappingUInt, bits=64):
    __slots__ = ()


class ISize(FailingInt, bits=SIZE_BITS):
    """
    Class for a signed integer as wide as the platform's Py_ssize_t, for sizes
    and counts that must never silently wrap.
    """
    __slots__ = ()


class USize(FailingUInt, bits=SIZE_BITS):
    __slots__ = ()


class IPtr(FailingInt, bits=POINTER_BITS):
    """
    Class for a signed integer as wide as a platform pointer.
    """
    __slots__ = ()


class UPtr(FailingUInt, bits=POINTER_BITS):
    __slots__ = ()


def int_cast(to, num):
    '''
    Convert a strict integer to the strict integer type `to`, applying the
    overflow policy of `to` at the boundary. Fail raises when the value lies
    outside the destination range, Saturate clamps to it, and Wrap keeps the
    bit pattern truncated or sign-extended to the destination storage unit.
    '''
    if not isinstance(num, StrictInt):
        raise TypeError(f"Expected a strict integer, got {type(num).__name__}")
    if not (isinstance(to, type) and issubclass(to, StrictInt) and to.is_complete):
        raise TypeError(f"Cannot cast to {to!r}")

    n = num.raw
    if to.overflow is Overflow.FAIL:
        if n > to.max().raw:
            logging.debug(f"Overflow casting {num!r} to {to.__name__}.")
            raise_for(ErrorKind.OVERFLOW, 'cast', f"{n} > {to.limits.max}")
        if n < to.min().raw:
            logging.debug(f"Underflow casting {num!r} to {to.__name__}.")
            raise_for(ErrorKind.UNDERFLOW, 'cast', f"{n} < {to.limits.min}")
        return to._of(n)

    if to.overflow is Overflow.SATURATE:
        clamped = to.limits.clamp(n)
        if clamped != n:
            logging.debug(f"Saturated {num!r} to {clamped} casting to {to.__name__}.")
        return to._of(clamped)

    # WRAP
    held = convert(n, num.storage, to.storage)
    return to._of(reinterpret(held, to.sign, to.bits))
