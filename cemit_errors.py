#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

# cemit_errors.py
from __future__ import annotations

import re
from typing import Dict, Optional


EMIT_ERROR_CODES: Dict[str, str] = {
    "EMT-0010": "character buffer size is not a positive integer",
    "EMT-0020": "integer payload is not an int",
    "EMT-0021": "int32 payload out of range",
    "EMT-0022": "int64 payload out of range",
    "EMT-0030": "float payload is not a finite number",
    "EMT-0031": "float payload out of single-precision range",
    "EMT-0040": "bool payload is not a bool",
    "EMT-0050": "char payload is not exactly one character",
    "EMT-0060": "typed identifier has an unknown type tag",
    "EMT-0061": "text or name payload is not a str",
    "EMT-0070": "value kind is not valid as a call argument",
    "EMT-0071": "value kind is not valid as a variable initializer",
    "EMT-0080": "exit code is not an int32",
}

_CODE_RE = re.compile(r"\[(EMT-\d{4})\]")


class EmitContractError(ValueError):
    """
    Raised when a caller hands the emitter a value it can never render.
    Not for semantic misuse of names; those are rendered as requested.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def code(self) -> Optional[str]:
        match = _CODE_RE.search(self.message)
        return match.group(1) if match else None

    def format(self) -> str:
        message = self.message
        if self.code is None:
            message = f"[EMT-9999] {message}"
        return f"emit contract violation: {message}"
