#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import argparse
import time
from pathlib import Path

from cemit_code import Code
from cemit_context import EmitContext, LogLevel
from cemit_errors import EmitContractError
from cemit_logger import log_debug, log_error, log_info, log_stage, log_timing
from cemit_values import CharBuffer, Ident, StrLit


def build_emit_context(args: argparse.Namespace) -> EmitContext:
    """Build an EmitContext from command-line arguments."""
    verbosity = getattr(args, 'verbosity', 0)
    if verbosity >= 3:
        log_level = LogLevel.DEBUG
    elif verbosity >= 1:
        log_level = LogLevel.INFO
    else:
        log_level = LogLevel.ERROR

    return EmitContext(
        log_rich_format=getattr(args, 'log', False),
        log_level=log_level,
    )


def build_hello_world() -> Code:
    """Greets the user, then reads a word into a small buffer."""
    code = Code()
    code.add_inclusion("stdio.h")
    code.call_with_args("printf", [StrLit("Hello World!")])
    code.declare_variable("a", CharBuffer(5))
    code.call_with_args("scanf", [StrLit("%s"), Ident("a")])
    code.set_exit(1)
    return code


def build_bench_program() -> Code:
    code = Code()
    code.set_exit(1)
    code.call_with_args("printf", [StrLit("Hello World!")])
    code.call_no_args("printf")
    code.add_inclusion("stdio.h")
    return code


def cmd_hello(args: argparse.Namespace) -> int:
    """Generate the hello-world program."""
    context = build_emit_context(args)

    log_stage(context, "Building", "hello_world")
    try:
        c_code = build_hello_world().render()
    except EmitContractError as e:
        log_error(context, e.format())
        return 1

    if args.output:
        try:
            Path(args.output).write_text(c_code)
        except OSError as e:
            log_error(context, f"error: [CEM-0010] cannot write {args.output}: {e}")
            return 1
        log_info(context, f"Generated C code: {args.output}")
    else:
        print(c_code, end="")

    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    """Time building and rendering a small program."""
    context = build_emit_context(args)
    iterations = args.iterations
    if iterations < 1:
        log_error(context, f"error: [CEM-0020] iteration count must be positive, got {iterations}")
        return 1

    log_stage(context, "Benchmarking", "bench_simple")
    size = 0
    start = time.perf_counter()
    try:
        for _ in range(iterations):
            size += len(build_bench_program().render())
    except EmitContractError as e:
        log_error(context, e.format())
        return 1
    elapsed = time.perf_counter() - start

    log_debug(context, f"Rendered {size} bytes")
    log_timing(context, "bench_simple", elapsed, iterations)
    per_iter_us = elapsed / iterations * 1e6
    print(f"bench_simple: {iterations} iterations, {per_iter_us:.3f} us/iter")
    return 0


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="cemitc", description="C code emission examples")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    parser.add_argument("-v", "--verbose",
                        action='count',
                        default=0,
                        dest='verbosity',
                        help="Increase verbosity: -v=INFO, -vvv=DEBUG")
    parser.add_argument("-l", "--log",
                        action='store_true',
                        default=False,
                        help="Enable rich log formatting (timestamps, levels)")

    ###########################
    # hello command
    ###########################
    p_hello = subparsers.add_parser("hello", help="Generate the hello-world C program")
    p_hello.add_argument("--output", "-o", help="Output C file (default: stdout)")
    p_hello.set_defaults(func=cmd_hello)

    ###########################
    # bench command
    ###########################
    p_bench = subparsers.add_parser("bench", help="Benchmark program building", aliases=["benchmark"])
    p_bench.add_argument("--iterations", "-n", type=int, default=10000,
                         help="Number of build+render rounds (default: 10000)")
    p_bench.set_defaults(func=cmd_bench)

    args = parser.parse_args(argv)

    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
