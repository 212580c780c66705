"""
C Code Builder

Accumulates authoring calls (includes, calls, variable declarations, exit
code) and renders them into a complete single-function C program.
The builder is a textual accumulator: it never checks that referenced
names exist or that they are legal C identifiers.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass, field
from typing import List, Sequence, Set, Tuple

from cemit_errors import EmitContractError
from cemit_string_escape import encode_c_text_literal
from cemit_values import (
    BoolLit, CArg, CType, CharBuffer, CharLit, DoubleLit, FloatLit, Int32Lit, Int64Lit,
    INT32_MAX, INT32_MIN, StrLit, TypedIdent, VarInit, format_float, format_value, render_arg,
)

BOOL_SUPPORT_HEADER = "stdbool.h"
ENTRY_SIGNATURE = "int main() {"


@dataclass
class CStatementBuffer:
    """
    Append-only list of rendered statement lines.
    """
    lines: List[str] = field(default_factory=list)

    def emit(self, line: str) -> None:
        """Append one statement line (without its line break)."""
        self.lines.append(line)

    def to_string(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)


@dataclass
class Code:
    """
    A C program under construction.

    Responsibilities:
    - Append call and declaration statements, in call order
    - Track #include directives, de-duplicated in first-seen order
    - Hold the value returned from main()
    - Render the whole program

    Does NOT:
    - Validate identifiers or declaration order
    - Support control flow or nested blocks

    Example:
        code = Code()
        code.add_inclusion("stdio.h")
        code.call_with_args("printf", [StrLit("Hello World!")])
        code.set_exit(1)

    renders:
        #include<stdio.h>
        int main() {
        printf("Hello World!");
        return 1;
        }
    """

    _body: CStatementBuffer = field(default_factory=CStatementBuffer, init=False)
    _includes: List[str] = field(default_factory=list, init=False)
    _include_set: Set[str] = field(default_factory=set, init=False)
    _exit_code: int = field(default=0, init=False)

    # ============================================================================
    # Program-Level State
    # ============================================================================

    @property
    def inclusions(self) -> Tuple[str, ...]:
        return tuple(self._includes)

    @property
    def exit_code(self) -> int:
        return self._exit_code

    @property
    def statements(self) -> Tuple[str, ...]:
        return tuple(self._body.lines)

    def set_exit(self, value: int) -> None:
        """Set the value returned from main(). Last call wins."""
        if not isinstance(value, int) or isinstance(value, bool) or not INT32_MIN <= value <= INT32_MAX:
            raise EmitContractError(f"[EMT-0080] exit code must be an int32, got {value!r}")
        self._exit_code = value

    def add_inclusion(self, name: str) -> None:
        """Add an #include directive unless one for `name` already exists."""
        self.require_include(name)

    def require_include(self, name: str) -> None:
        if name in self._include_set:
            return
        self._include_set.add(name)
        self._includes.append(name)

    # ============================================================================
    # Statement Emission
    # ============================================================================

    def call_no_args(self, name: str) -> None:
        """Emit `name();`."""
        self._body.emit(f"{name}();")

    def call_with_args(self, name: str, args: Sequence[CArg]) -> None:
        """
        Emit `name(arg1,arg2,...);`.

        Every argument is rendered before anything is appended, so a bad
        argument leaves the program untouched.
        """
        rendered = "".join(f"{render_arg(arg)}," for arg in args)
        if rendered.endswith(","):
            rendered = rendered[:-1]
        self._body.emit(f"{name}({rendered});")

    def declare_variable(self, name: str, init: VarInit) -> None:
        """Emit a single variable declaration initialized from `init`."""
        decl = self._render_declaration(name, init)
        if self._needs_bool_support(init):
            self.require_include(BOOL_SUPPORT_HEADER)
        self._body.emit(decl)

    @staticmethod
    def _needs_bool_support(init: VarInit) -> bool:
        if isinstance(init, BoolLit):
            return True
        return isinstance(init, TypedIdent) and init.ctype is CType.BOOL

    @staticmethod
    def _render_declaration(name: str, init: VarInit) -> str:
        if isinstance(init, StrLit):
            return f'char {name}[]="{encode_c_text_literal(init.value)}";'
        elif isinstance(init, Int32Lit):
            return f"int {name}={init.value};"
        elif isinstance(init, Int64Lit):
            return f"long long {name}={init.value};"
        elif isinstance(init, FloatLit):
            return f"float {name}={format_float(init.value)};"
        elif isinstance(init, DoubleLit):
            return f"double {name}={format_float(init.value)};"
        elif isinstance(init, BoolLit):
            return f"bool {name}={'true' if init.value else 'false'};"
        elif isinstance(init, CharLit):
            return f"char {name}='{init.value}';"
        elif isinstance(init, TypedIdent):
            return f"{init.ctype.decl_prefix}{name}={init.name};"
        elif isinstance(init, CharBuffer):
            return f"char {name}[{init.size}];"
        else:
            raise EmitContractError(f"[EMT-0071] {format_value(init)} cannot initialize variable '{name}'")

    # ============================================================================
    # Rendering
    # ============================================================================

    def render_includes(self) -> str:
        return "".join(f"#include<{name}>\n" for name in self._includes)

    def render(self) -> str:
        """Returns the complete generated C program."""
        return (
            f"{self.render_includes()}"
            f"{ENTRY_SIGNATURE}\n"
            f"{self._body.to_string()}"
            f"return {self._exit_code};\n"
            "}\n"
        )

    def __str__(self) -> str:
        return self.render()
