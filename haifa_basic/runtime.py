from __future__ import annotations

import pathlib
from typing import List, Optional, TextIO

from .ast import Program
from .interpreter import BasicInterpreter
from .parser import BasicParser


def parse_source(source: str) -> Program:
    return BasicParser.parse(source)


def run_program(
    program: Program,
    *,
    source_name: str = "<string>",
    stdout: Optional[TextIO] = None,
    max_steps: Optional[int] = None,
    significant_length: Optional[int] = None,
) -> BasicInterpreter:
    interpreter = BasicInterpreter(
        stdout=stdout,
        max_steps=max_steps,
        significant_length=significant_length,
    )
    interpreter.init(source_name)
    interpreter.run(program)
    return interpreter


def run_source(
    source: str,
    *,
    source_name: str = "<string>",
    stdout: Optional[TextIO] = None,
    max_steps: Optional[int] = None,
    significant_length: Optional[int] = None,
) -> List[float]:
    program = parse_source(source)
    interpreter = run_program(
        program,
        source_name=source_name,
        stdout=stdout,
        max_steps=max_steps,
        significant_length=significant_length,
    )
    return list(interpreter.output)


def run_script(path: str, **kwargs) -> List[float]:
    data = pathlib.Path(path).read_text(encoding="utf-8")
    return run_source(data, source_name=path, **kwargs)

__all__ = ["parse_source", "run_program", "run_source", "run_script"]
