#!/usr/bin/env python3
# -*- coding: utf-8 -*-


class OBBError(Exception):
    """Base class for all errors raised by PyOBB."""


class InvalidInputError(OBBError, ValueError):
    """Raised for unusable input: too few or degenerate points, bad box data."""


class SerializationError(OBBError, ValueError):
    """Raised when a serialized object is missing fields or is malformed."""


class NumericError(OBBError, ArithmeticError):
    """Raised when a computation would divide by zero or produce NaN."""
