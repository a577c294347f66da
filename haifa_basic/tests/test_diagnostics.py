import io

import pytest

from haifa_basic.debug import format_basic_error, format_location, format_syntax_error
from haifa_basic.errors import BasicError, LineNotAccessibleError
from haifa_basic.parser import BasicParser, ParserError
from haifa_basic.runtime import run_source


def test_format_location_variants():
    assert format_location("a.bas", None, None) == "a.bas"
    assert format_location("a.bas", 3, None) == "a.bas:3"
    assert format_location("a.bas", 3, 7) == "a.bas:3:7"


def test_runtime_error_with_source_excerpt():
    source = "10 PRINT 1\n20 GOTO 999"
    with pytest.raises(LineNotAccessibleError) as info:
        run_source(source, source_name="prog.bas", stdout=io.StringIO())
    text = format_basic_error(info.value, source)
    assert text.splitlines() == [
        "prog.bas:2:9: LineNotAccessible in interpret_line: line 999 is not accessible",
        "    20 GOTO 999",
        "            ^",
    ]


def test_error_without_token_has_no_excerpt():
    error = BasicError("boom", context="somewhere", source_name="x.bas")
    error.kind = LineNotAccessibleError.kind
    assert format_basic_error(error, "10 END") == "x.bas: LineNotAccessible in somewhere: boom"


def test_syntax_error_rendering():
    source = "10 PRINT 1\n20 GOTO X"
    with pytest.raises(ParserError) as info:
        BasicParser.parse(source)
    lines = format_syntax_error(info.value, "prog.bas", source).splitlines()
    assert lines[0].startswith("prog.bas:2:9: syntax error: Expected NUMBER")
    assert lines[1:] == ["    20 GOTO X", "            ^"]
