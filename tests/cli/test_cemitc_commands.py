#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import re

import pytest

import cemitc
from cemit_errors import EmitContractError

HELLO_WORLD_C = (
    "#include<stdio.h>\n"
    "int main() {\n"
    'printf("Hello World!");\n'
    "char a[5];\n"
    'scanf("%s",a);\n'
    "return 1;\n"
    "}\n"
)


def _run_main(argv):
    with pytest.raises(SystemExit) as exc:
        cemitc.main(argv)
    return exc.value.code


def test_hello_prints_program_to_stdout(capsys):
    rc = _run_main(["hello"])

    assert rc == 0
    assert capsys.readouterr().out == HELLO_WORLD_C


def test_hello_writes_output_file(tmp_path, capsys):
    out_file = tmp_path / "hello_world.c"

    rc = _run_main(["-v", "hello", "-o", str(out_file)])

    assert rc == 0
    assert out_file.read_text() == HELLO_WORLD_C
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"Generated C code: {out_file}" in captured.err


def test_hello_unwritable_output_fails(tmp_path, capsys):
    rc = _run_main(["hello", "-o", str(tmp_path / "missing" / "hello.c")])

    assert rc == 1
    assert "[CEM-0010]" in capsys.readouterr().err


def test_hello_reports_contract_errors(monkeypatch, capsys):
    def _broken():
        raise EmitContractError("[EMT-0010] buffer size must be a positive int, got 0")

    monkeypatch.setattr(cemitc, "build_hello_world", _broken)

    rc = _run_main(["hello"])

    assert rc == 1
    assert "emit contract violation: [EMT-0010]" in capsys.readouterr().err


def test_bench_reports_timing(capsys):
    rc = _run_main(["bench", "-n", "25"])

    assert rc == 0
    out = capsys.readouterr().out
    assert re.fullmatch(r"bench_simple: 25 iterations, \d+\.\d{3} us/iter\n", out)


def test_benchmark_alias(capsys):
    rc = _run_main(["benchmark", "--iterations", "1"])

    assert rc == 0
    assert "bench_simple: 1 iterations" in capsys.readouterr().out


def test_bench_rejects_non_positive_iterations(capsys):
    rc = _run_main(["bench", "-n", "0"])

    assert rc == 1
    assert "[CEM-0020]" in capsys.readouterr().err


def test_bench_program_shape():
    assert cemitc.build_bench_program().render() == (
        "#include<stdio.h>\n"
        "int main() {\n"
        'printf("Hello World!");\n'
        "printf();\n"
        "return 1;\n"
        "}\n"
    )


def test_command_is_required(capsys):
    assert _run_main([]) == 2


def test_bench_debug_logs_timing(capsys):
    rc = _run_main(["-vvv", "bench", "-n", "3"])

    assert rc == 0
    err = capsys.readouterr().err
    assert "Benchmarking 'bench_simple'" in err
    assert re.search(r"bench_simple: \d+\.\d{6}s total, \d+\.\d{3} us/round over 3 round\(s\)", err)
