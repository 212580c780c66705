#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from cemit_code import Code
from cemit_context import EmitContext, LogLevel


@pytest.fixture
def code() -> Code:
    return Code()


@pytest.fixture
def debug_context() -> EmitContext:
    return EmitContext(log_level=LogLevel.DEBUG)


def expected_program(body_lines: Iterable[str] = (), includes: Iterable[str] = (), exit_code: int = 0) -> str:
    """Build the text a Code is expected to render.

    Usage:
        def test_something(code):
            code.call_no_args("f")
            assert code.render() == expected_program(["f();"])
    """
    head = "".join(f"#include<{name}>\n" for name in includes)
    body = "".join(f"{line}\n" for line in body_lines)
    return f"{head}int main() {{\n{body}return {exit_code};\n}}\n"
