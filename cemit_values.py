#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from cemit_errors import EmitContractError
from cemit_string_escape import encode_c_text_literal

# ========================================
# Values that can appear as call arguments
# or variable initializers in emitted C.
# ========================================

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1
FLOAT32_MAX = 3.4028234663852886e38


class CType(Enum):
    """Declared type tag of a typed identifier."""
    TEXT = "char *"
    INT32 = "int "
    INT64 = "long long "
    FLOAT = "float "
    DOUBLE = "double "
    BOOL = "bool "
    CHAR = "char "

    @property
    def decl_prefix(self) -> str:
        """C declaration keyword(s), including the separator before the name."""
        return self.value


class CValue:
    """
    Base class for all emittable values.
    Used only as a common marker; concrete values are dataclasses below.
    """
    pass


def _check_int(value, lo: int, hi: int, range_code: str, kind: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise EmitContractError(f"[EMT-0020] {kind} payload must be an int, got {type(value).__name__}")
    if not lo <= value <= hi:
        raise EmitContractError(f"[{range_code}] {kind} payload {value} out of range [{lo}, {hi}]")


def _check_float(value, kind: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise EmitContractError(f"[EMT-0030] {kind} payload must be a finite number, got {value!r}")
    try:
        as_float = float(value)
    except OverflowError:
        raise EmitContractError(f"[EMT-0030] {kind} payload {value} does not fit in a float") from None
    if not math.isfinite(as_float):
        raise EmitContractError(f"[EMT-0030] {kind} payload must be a finite number, got {value!r}")


def _check_text(value, kind: str) -> None:
    if not isinstance(value, str):
        raise EmitContractError(f"[EMT-0061] {kind} must be a str, got {type(value).__name__}")


@dataclass(frozen=True)
class StrLit(CValue):
    value: str

    def __post_init__(self):
        _check_text(self.value, "string payload")


@dataclass(frozen=True)
class Ident(CValue):
    name: str  # emitted verbatim

    def __post_init__(self):
        _check_text(self.name, "identifier")


@dataclass(frozen=True)
class Int32Lit(CValue):
    value: int

    def __post_init__(self):
        _check_int(self.value, INT32_MIN, INT32_MAX, "EMT-0021", "int32")


@dataclass(frozen=True)
class Int64Lit(CValue):
    value: int

    def __post_init__(self):
        _check_int(self.value, INT64_MIN, INT64_MAX, "EMT-0022", "int64")


@dataclass(frozen=True)
class FloatLit(CValue):
    value: float

    def __post_init__(self):
        _check_float(self.value, "float")
        if abs(self.value) > FLOAT32_MAX:
            raise EmitContractError(f"[EMT-0031] float payload {self.value!r} exceeds single precision")


@dataclass(frozen=True)
class DoubleLit(CValue):
    value: float

    def __post_init__(self):
        _check_float(self.value, "double")


@dataclass(frozen=True)
class BoolLit(CValue):
    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise EmitContractError(f"[EMT-0040] bool payload must be a bool, got {type(self.value).__name__}")


@dataclass(frozen=True)
class CharLit(CValue):
    value: str  # emitted verbatim between single quotes

    def __post_init__(self):
        if not isinstance(self.value, str) or len(self.value) != 1:
            raise EmitContractError(f"[EMT-0050] char payload must be a single character, got {self.value!r}")


@dataclass(frozen=True)
class TypedIdent(CValue):
    """Initializer naming another variable of a declared type."""
    ctype: CType
    name: str

    def __post_init__(self):
        if not isinstance(self.ctype, CType):
            raise EmitContractError(f"[EMT-0060] unknown type tag {self.ctype!r} for '{self.name}'")
        _check_text(self.name, "typed identifier name")


@dataclass(frozen=True)
class CharBuffer(CValue):
    """Uninitialized text buffer of a fixed size."""
    size: int

    def __post_init__(self):
        if not isinstance(self.size, int) or isinstance(self.size, bool) or self.size < 1:
            raise EmitContractError(f"[EMT-0010] buffer size must be a positive int, got {self.size!r}")


CArg = Union[StrLit, Ident, Int32Lit, Int64Lit, FloatLit, DoubleLit, BoolLit, CharLit]
VarInit = Union[StrLit, Int32Lit, Int64Lit, FloatLit, DoubleLit, BoolLit, CharLit, TypedIdent, CharBuffer]


# --- literal rendering ---

def format_float(value: float) -> str:
    """Shortest round-tripping decimal form, e.g. 3.5, 1.0, 1e+20."""
    return repr(float(value))


def render_arg(arg: CArg) -> str:
    """Render a call argument as C source text."""
    if isinstance(arg, StrLit):
        return f'"{encode_c_text_literal(arg.value)}"'
    elif isinstance(arg, Ident):
        return arg.name
    elif isinstance(arg, (Int32Lit, Int64Lit)):
        return str(arg.value)
    elif isinstance(arg, (FloatLit, DoubleLit)):
        return format_float(arg.value)
    elif isinstance(arg, BoolLit):
        return "true" if arg.value else "false"
    elif isinstance(arg, CharLit):
        return f"'{arg.value}'"
    else:
        raise EmitContractError(f"[EMT-0070] {format_value(arg)} cannot be passed as a call argument")


def format_value(v: object) -> str:
    """Short description of a value for error messages."""
    if isinstance(v, CValue):
        return repr(v)
    return f"<{type(v).__name__}>"
