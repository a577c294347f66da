from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

from .ast import (
    Assignment,
    EndStmt,
    GotoStmt,
    GotoTarget,
    IfStmt,
    PrintStmt,
    Program,
    RemarkStmt,
    Stmt,
)
from .environment import BasicEnvironment
from .errors import ExecutionBudgetExceeded, LineNotAccessibleError
from .evaluator import ExpressionEvaluator
from .lexer import Token
from .operators import is_truthy
from .program import ProgramIndex, build_program_index
from .value_utils import format_number, parse_line_number

logger = logging.getLogger(__name__)

PRINT_SEPARATOR = "\t"


class BasicInterpreter:
    """Runs a parsed program line by line.

    The cursor (``next_line``) is the only control-flow state: it is moved to
    the following line before a line's statements run, and GOTO, IF and END
    overwrite it. ``None`` ends the run.
    """

    def __init__(
        self,
        *,
        stdout: Optional[TextIO] = None,
        max_steps: Optional[int] = None,
        significant_length: Optional[int] = None,
    ) -> None:
        if max_steps is not None and max_steps < 0:
            raise ValueError("max_steps must not be negative")
        self.stdout = stdout
        self.max_steps = max_steps
        self.significant_length = significant_length
        self.source_name = "<unknown>"
        self.env = BasicEnvironment(significant_length=significant_length)
        self.next_line: Optional[int] = None
        self.output: List[float] = []
        self.steps = 0
        self._jump_token: Optional[Token] = None
        self._evaluator = ExpressionEvaluator(self.env, source_name=self.source_name)

    def init(self, source_name: str) -> None:
        self.source_name = source_name

    # ------------------------------------------------------------------ public API
    def run(self, program: Program) -> None:
        index = build_program_index(program, source_name=self.source_name)
        self.interpret(index)

    def interpret(self, index: ProgramIndex) -> None:
        self._reset()
        self.next_line = index.first_line
        while self.next_line is not None:
            self._interpret_line(index, self.next_line)

    # ------------------------------------------------------------------ helpers
    def _reset(self) -> None:
        self.env = BasicEnvironment(significant_length=self.significant_length)
        self._evaluator = ExpressionEvaluator(self.env, source_name=self.source_name)
        self.output = []
        self.steps = 0
        self.next_line = None
        self._jump_token = None

    def _interpret_line(self, index: ProgramIndex, line_number: int) -> None:
        current = index.get(line_number)
        if current is None:
            raise LineNotAccessibleError(
                f"line {line_number} is not accessible",
                context="interpret_line",
                line_number=line_number,
                token=self._jump_token,
                source_name=self.source_name,
            )
        self._jump_token = None
        self._charge_step(line_number)
        logger.debug("line %d", line_number)
        self.next_line = current.next_line
        for stmt in current.statements:
            if not self.execute_statement(stmt):
                break

    def _charge_step(self, line_number: int) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise ExecutionBudgetExceeded(
                f"execution budget of {self.max_steps} lines exceeded at line {line_number}",
                context="interpret_line",
                source_name=self.source_name,
            )

    def execute_statement(self, stmt: Stmt) -> bool:
        """Execute one statement; return False when the rest of the line must be skipped."""
        logger.debug("execute %s at %d:%d", type(stmt).__name__, stmt.line, stmt.column)
        if isinstance(stmt, RemarkStmt):
            return True
        if isinstance(stmt, GotoStmt):
            self._jump(stmt.target, "process_goto")
            return False
        if isinstance(stmt, IfStmt):
            return self._process_if(stmt)
        if isinstance(stmt, Assignment):
            self._process_assign(stmt)
            return True
        if isinstance(stmt, PrintStmt):
            self._process_print(stmt)
            return True
        if isinstance(stmt, EndStmt):
            logger.debug("end")
            self.next_line = None
            return False
        raise TypeError(f"Unsupported statement: {stmt!r}")

    def _jump(self, target: Token, context: str) -> None:
        line_number = parse_line_number(target, context=context, source_name=self.source_name)
        logger.debug("goto %d", line_number)
        self.next_line = line_number
        self._jump_token = target

    def _process_if(self, stmt: IfStmt) -> bool:
        predicate = self._evaluator.evaluate(stmt.condition)
        if not is_truthy(predicate):
            return True
        branch = stmt.then_branch
        if isinstance(branch, GotoTarget):
            self._jump(branch.target, "process_if_statement")
            return False
        return self.execute_statement(branch)

    def _process_assign(self, stmt: Assignment) -> None:
        value = self._evaluator.evaluate(stmt.value)
        self.env.write(stmt.target.value, value)

    def _process_print(self, stmt: PrintStmt) -> None:
        stream = self.stdout if self.stdout is not None else sys.stdout
        for expr in stmt.values:
            value = self._evaluator.evaluate(expr)
            self.output.append(value)
            stream.write(f"{format_number(value)}{PRINT_SEPARATOR}")


__all__ = ["BasicInterpreter", "PRINT_SEPARATOR"]
