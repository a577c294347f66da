from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .lexer import Token

# Expression nodes. Each precedence level of the grammar has its own node so
# the evaluator can fold a level left to right and reject operators that do
# not belong to it.

@dataclass
class Expr:
    line: int
    column: int

@dataclass
class NumberLiteral(Expr):
    token: Token

@dataclass
class Variable(Expr):
    name: Token

@dataclass
class Negation(Expr):
    operand: "Factor"

@dataclass
class Parenthesized(Expr):
    expression: "LogicalOr"


Factor = Union[NumberLiteral, Variable, Negation, Parenthesized]


@dataclass
class OperatorTerm:
    op: Token
    operand: Expr


@dataclass
class Multiplication(Expr):
    first: Expr
    rest: List[OperatorTerm] = field(default_factory=list)

@dataclass
class Summation(Expr):
    first: Multiplication
    rest: List[OperatorTerm] = field(default_factory=list)

@dataclass
class Relational(Expr):
    first: Summation
    rest: List[OperatorTerm] = field(default_factory=list)

@dataclass
class LogicalNot(Expr):
    operand: Relational
    op: Optional[Token] = None

@dataclass
class LogicalAnd(Expr):
    first: LogicalNot
    rest: List[OperatorTerm] = field(default_factory=list)

@dataclass
class LogicalOr(Expr):
    first: LogicalAnd
    rest: List[OperatorTerm] = field(default_factory=list)


Expression = LogicalOr

# Statement nodes

@dataclass
class Stmt:
    line: int
    column: int

@dataclass
class RemarkStmt(Stmt):
    text: str = ""

@dataclass
class GotoStmt(Stmt):
    target: Token


@dataclass
class GotoTarget:
    """Bare line number after THEN (or IF ... GOTO n)."""

    line: int
    column: int
    target: Token


@dataclass
class IfStmt(Stmt):
    condition: Expression
    then_branch: Union[Stmt, GotoTarget]

@dataclass
class Assignment(Stmt):
    target: Token
    value: Expression
    has_let: bool = False

@dataclass
class PrintStmt(Stmt):
    values: List[Expression]

@dataclass
class EndStmt(Stmt):
    pass

@dataclass
class Line:
    line_number: Token
    statements: List[Stmt]

@dataclass
class Program:
    lines: List[Line] = field(default_factory=list)

__all__ = [
    "Expr",
    "NumberLiteral",
    "Variable",
    "Negation",
    "Parenthesized",
    "Factor",
    "OperatorTerm",
    "Multiplication",
    "Summation",
    "Relational",
    "LogicalNot",
    "LogicalAnd",
    "LogicalOr",
    "Expression",
    "Stmt",
    "RemarkStmt",
    "GotoStmt",
    "GotoTarget",
    "IfStmt",
    "Assignment",
    "PrintStmt",
    "EndStmt",
    "Line",
    "Program",
]
