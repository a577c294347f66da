from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .ast import Line, Program, Stmt
from .errors import LineNumberDefinedTwiceError, LineNumberTooLargeError
from .value_utils import MAX_LINE_NUMBER, parse_line_number

logger = logging.getLogger(__name__)


@dataclass
class CompiledLine:
    statements: List[Stmt]
    next_line: Optional[int] = None


@dataclass
class ProgramIndex:
    """Program lines keyed by number, each chained to its numeric successor."""

    lines: Dict[int, CompiledLine] = field(default_factory=dict)
    first_line: Optional[int] = None

    def get(self, line_number: int) -> Optional[CompiledLine]:
        return self.lines.get(line_number)

    def line_numbers(self) -> List[int]:
        return list(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def build_program_index(program: Program, *, source_name: str = "<unknown>") -> ProgramIndex:
    context = "pre_process_lines"
    collected: Dict[int, CompiledLine] = {}
    for line in program.lines:
        number, compiled = _compile_line(line, source_name)
        if number in collected:
            raise LineNumberDefinedTwiceError(
                f"line number {number} is defined twice",
                context=context,
                line_number=number,
                token=line.line_number,
                source_name=source_name,
            )
        collected[number] = compiled

    index = ProgramIndex()
    for number in sorted(collected):
        index.lines[number] = collected[number]

    # Thread the follow relation from the highest line down.
    following: Optional[int] = None
    for number in reversed(index.lines):
        index.lines[number].next_line = following
        following = number
    index.first_line = following

    logger.debug("indexed %d lines, first line %s", len(index), index.first_line)
    return index


def _compile_line(line: Line, source_name: str) -> Tuple[int, CompiledLine]:
    context = "pre_process_line"
    token = line.line_number
    number = parse_line_number(token, context=context, source_name=source_name)
    if number > MAX_LINE_NUMBER:
        raise LineNumberTooLargeError(
            f"line number {number} exceeds the maximum of {MAX_LINE_NUMBER}",
            context=context,
            token=token,
            source_name=source_name,
        )
    return number, CompiledLine(list(line.statements))


__all__ = ["CompiledLine", "ProgramIndex", "build_program_index"]
