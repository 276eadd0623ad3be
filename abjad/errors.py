"""Error kinds reported in failure results."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_INPUT = "EmptyInput"
    INVALID_CHARACTERS = "InvalidCharacters"
    NO_VALID_CHARACTERS = "NoValidCharacters"
    NO_VALID_LETTERS = "NoValidLetters"
    UNINITIALIZED_TABLE = "UninitializedTable"
    INVALID_VALUE = "InvalidValue"


class AbjadError(Exception):
    """
    Base class for errors raised inside the context.

    Public entry points on `AbjadContext` catch these and hand back a
    `Failure` result instead of letting them escape.
    """

    kind: ErrorKind


class UninitializedTable(AbjadError):
    kind = ErrorKind.UNINITIALIZED_TABLE


class InvalidValue(AbjadError):
    kind = ErrorKind.INVALID_VALUE
