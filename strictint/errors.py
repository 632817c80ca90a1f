#!/usr/bin/env python
# -*- coding: utf-8 -*-

import enum


class ErrorKind(enum.Enum):
    NONE = 0
    UNDERFLOW = 1
    OVERFLOW = 2
    DIVISION_BY_ZERO = 3


class StrictIntError(ArithmeticError):
    '''
    Base class for arithmetic failures signalled by strict integers. Carries
    the kind of failure and the tag of the operation that produced it, such
    as "add" or "cast".
    '''
    kind = None

    def __init__(self, op, detail=None):
        self.op = op
        self.detail = detail
        msg = op if detail is None else f"{op}: {detail}"
        super().__init__(msg)


class IntegerUnderflowError(StrictIntError):
    kind = ErrorKind.UNDERFLOW


class IntegerOverflowError(StrictIntError, OverflowError):
    kind = ErrorKind.OVERFLOW


class IntegerDivisionByZeroError(StrictIntError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO


_ERRORS = {
    ErrorKind.UNDERFLOW: IntegerUnderflowError,
    ErrorKind.OVERFLOW: IntegerOverflowError,
    ErrorKind.DIVISION_BY_ZERO: IntegerDivisionByZeroError,
}


def raise_for(kind, op, detail=None):
    '''
    Raise the exception matching a failed checked operation. Does nothing for
    ErrorKind.NONE.
    '''
    if kind is ErrorKind.NONE:
        return
    raise _ERRORS[kind](op, detail)
