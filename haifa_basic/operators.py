from __future__ import annotations

import enum
import math
from typing import Callable, Dict, FrozenSet, Optional

from .errors import OperatorApplicationError, UnknownOperatorError
from .lexer import Token

TRUE = 1.0
FALSE = 0.0


def _truth(value: bool) -> float:
    return TRUE if value else FALSE


def _divide(left: float, right: float) -> float:
    if right == 0.0:
        raise ZeroDivisionError("division by zero")
    return left / right


class BinaryOperator(enum.Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "="
    NE = "<>"
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    AND = "AND"
    OR = "OR"

    @classmethod
    def from_lexeme(
        cls,
        lexeme: str,
        *,
        context: str,
        allowed: Optional[FrozenSet["BinaryOperator"]] = None,
        token: Optional[Token] = None,
        source_name: str = "<unknown>",
    ) -> "BinaryOperator":
        op = _BINARY_LEXEMES.get(lexeme.strip().upper())
        if op is None or (allowed is not None and op not in allowed):
            raise UnknownOperatorError(
                f"unknown operator {lexeme!r}",
                context=context,
                token=token,
                source_name=source_name,
            )
        return op

    def apply(
        self,
        left: float,
        right: float,
        context: str,
        *,
        token: Optional[Token] = None,
        source_name: str = "<unknown>",
    ) -> float:
        try:
            result = _BINARY_IMPL[self](left, right)
        except (ZeroDivisionError, OverflowError) as exc:
            raise OperatorApplicationError(
                f"cannot apply '{self.value}' to {left} and {right}: {exc}",
                context=context,
                token=token,
                source_name=source_name,
            ) from exc
        if not math.isfinite(result):
            raise OperatorApplicationError(
                f"'{self.value}' on {left} and {right} produced {result}",
                context=context,
                token=token,
                source_name=source_name,
            )
        return result


class UnaryOperator(enum.Enum):
    NOT = "NOT"
    NEG = "-"

    @classmethod
    def from_lexeme(
        cls,
        lexeme: str,
        *,
        context: str,
        token: Optional[Token] = None,
        source_name: str = "<unknown>",
    ) -> "UnaryOperator":
        try:
            return cls(lexeme.strip().upper())
        except ValueError:
            raise UnknownOperatorError(
                f"unknown unary operator {lexeme!r}",
                context=context,
                token=token,
                source_name=source_name,
            ) from None

    def apply(
        self,
        operand: float,
        context: str,
        *,
        token: Optional[Token] = None,
        source_name: str = "<unknown>",
    ) -> float:
        if self is UnaryOperator.NOT:
            return _truth(operand == 0.0)
        if self is UnaryOperator.NEG:
            return -operand
        raise OperatorApplicationError(
            f"unsupported unary operator {self.value}",
            context=context,
            token=token,
            source_name=source_name,
        )


_BINARY_LEXEMES: Dict[str, BinaryOperator] = {op.value: op for op in BinaryOperator}
_BINARY_LEXEMES["><"] = BinaryOperator.NE

_BINARY_IMPL: Dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUB: lambda a, b: a - b,
    BinaryOperator.MUL: lambda a, b: a * b,
    BinaryOperator.DIV: _divide,
    BinaryOperator.EQ: lambda a, b: _truth(a == b),
    BinaryOperator.NE: lambda a, b: _truth(a != b),
    BinaryOperator.LT: lambda a, b: _truth(a < b),
    BinaryOperator.LE: lambda a, b: _truth(a <= b),
    BinaryOperator.GT: lambda a, b: _truth(a > b),
    BinaryOperator.GE: lambda a, b: _truth(a >= b),
    BinaryOperator.AND: lambda a, b: _truth(a != 0.0 and b != 0.0),
    BinaryOperator.OR: lambda a, b: _truth(a != 0.0 or b != 0.0),
}

LOGICAL_OR_OPS = frozenset({BinaryOperator.OR})
LOGICAL_AND_OPS = frozenset({BinaryOperator.AND})
RELATIONAL_OPS = frozenset(
    {
        BinaryOperator.EQ,
        BinaryOperator.NE,
        BinaryOperator.LT,
        BinaryOperator.LE,
        BinaryOperator.GT,
        BinaryOperator.GE,
    }
)
SUM_OPS = frozenset({BinaryOperator.ADD, BinaryOperator.SUB})
PRODUCT_OPS = frozenset({BinaryOperator.MUL, BinaryOperator.DIV})


def is_truthy(value: float) -> bool:
    return value != 0.0


__all__ = [
    "BinaryOperator",
    "UnaryOperator",
    "LOGICAL_OR_OPS",
    "LOGICAL_AND_OPS",
    "RELATIONAL_OPS",
    "SUM_OPS",
    "PRODUCT_OPS",
    "TRUE",
    "FALSE",
    "is_truthy",
]
