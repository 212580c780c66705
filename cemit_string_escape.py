#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

"""
Text literal escaping for emitted C code.

Only line breaks, tabs and double quotes are escaped. CRLF pairs must be
rewritten before lone LFs, otherwise a CRLF would come out as a raw CR
followed by an escaped LF.
"""

from typing import List, Tuple


# (raw, escaped) in application order
_ESCAPES: List[Tuple[str, str]] = [
    ("\r\n", "\\r\\n"),
    ("\n", "\\n"),
    ("\t", "\\t"),
    ('"', '\\"'),
]


def encode_c_text_literal(text: str) -> str:
    """
    Encode text into a C string-literal body (without quotes).
    """
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    return text


def decode_c_text_literal(body: str) -> str:
    """
    Undo encode_c_text_literal.

    Exact for any original text that contains no backslashes.
    """
    for raw, escaped in _ESCAPES:
        body = body.replace(escaped, raw)
    return body
