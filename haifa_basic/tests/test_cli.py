from __future__ import annotations

import pytest

from haifa_basic.cli import main


def test_execute_inline_program(capsys) -> None:
    assert main(["-e", "10 PRINT 1+1\n20 END"]) == 0
    assert capsys.readouterr().out == "2\t"


def test_inline_program_accepts_escaped_newlines(capsys) -> None:
    assert main(["-e", "10 PRINT 1\\n20 PRINT 2"]) == 0
    assert capsys.readouterr().out == "1\t2\t"


def test_run_script_file(tmp_path, capsys) -> None:
    script = tmp_path / "count.bas"
    script.write_text("10 I = 0\n20 I = I + 1\n30 IF I < 3 THEN 20\n40 PRINT I\n", encoding="utf-8")
    assert main([str(script), "--newline"]) == 0
    assert capsys.readouterr().out == "3\t\n"


def test_missing_script_file(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "missing.bas")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_runtime_error_is_rendered(capsys) -> None:
    assert main(["-e", "10 GOTO 50"]) == 1
    err = capsys.readouterr().err
    assert "<inline>:1:9: LineNotAccessible" in err
    assert "10 GOTO 50" in err


def test_syntax_error_is_rendered(capsys) -> None:
    assert main(["-e", "10 PRINT"]) == 1
    assert "syntax error" in capsys.readouterr().err


def test_budget_flag(capsys) -> None:
    assert main(["-e", "10 GOTO 10", "--max-steps", "5"]) == 1
    assert "ExecutionBudgetExceeded" in capsys.readouterr().err


def test_show_env_and_significant_length(capsys) -> None:
    assert main(["-e", "10 COUNT = 2\n20 CO = CO + 1", "--significant-length", "2", "--show-env"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "CO: 3" in captured.err


def test_script_and_inline_are_exclusive(tmp_path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "prog.bas"), "-e", "10 END"])


def test_missing_program_is_an_error() -> None:
    with pytest.raises(SystemExit):
        main([])


def test_deeply_nested_expression_is_rejected(capsys) -> None:
    assert main(["-e", "10 PRINT " + "(" * 200 + "1" + ")" * 200]) == 1
    assert "nested too deeply" in capsys.readouterr().err


def test_non_ascii_digit_is_rejected(capsys) -> None:
    assert main(["-e", "10 PRINT ٣"]) == 1
    assert "Unexpected character" in capsys.readouterr().err
