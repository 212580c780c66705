#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import pytest

from cemit_errors import EmitContractError
from cemit_values import (
    BoolLit, CType, CharBuffer, CharLit, DoubleLit, FloatLit, Ident, Int32Lit, Int64Lit, StrLit,
    TypedIdent, format_float, render_arg,
)


def test_render_string_arg_is_quoted_and_escaped():
    assert render_arg(StrLit('say "hi"\n')) == r'"say \"hi\"\n"'


def test_render_ident_arg_is_verbatim():
    assert render_arg(Ident("argv[0]")) == "argv[0]"


def test_render_integer_args_are_plain_decimal():
    assert render_arg(Int32Lit(-42)) == "-42"
    assert render_arg(Int64Lit(9223372036854775807)) == "9223372036854775807"


def test_render_float_args():
    assert render_arg(FloatLit(3.5)) == "3.5"
    assert render_arg(DoubleLit(0.1)) == "0.1"
    assert render_arg(DoubleLit(1.0)) == "1.0"


def test_format_float_uses_shortest_round_trip_form():
    assert format_float(1e20) == "1e+20"
    assert format_float(2) == "2.0"


def test_render_bool_args():
    assert render_arg(BoolLit(True)) == "true"
    assert render_arg(BoolLit(False)) == "false"


def test_render_char_arg_is_verbatim_in_single_quotes():
    assert render_arg(CharLit("x")) == "'x'"


@pytest.mark.parametrize("value", [TypedIdent(CType.INT32, "n"), CharBuffer(4), "raw", 7])
def test_render_arg_rejects_non_argument_values(value):
    with pytest.raises(EmitContractError, match=r"\[EMT-0070\]"):
        render_arg(value)


def test_ctype_declaration_prefixes():
    assert CType.TEXT.decl_prefix == "char *"
    assert CType.INT32.decl_prefix == "int "
    assert CType.INT64.decl_prefix == "long long "
    assert CType.BOOL.decl_prefix == "bool "
