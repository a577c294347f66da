from __future__ import annotations

from typing import FrozenSet, List

from .ast import (
    Expr,
    LogicalAnd,
    LogicalNot,
    LogicalOr,
    Multiplication,
    Negation,
    NumberLiteral,
    OperatorTerm,
    Parenthesized,
    Relational,
    Summation,
    Variable,
)
from .environment import BasicEnvironment
from .operators import (
    LOGICAL_AND_OPS,
    LOGICAL_OR_OPS,
    PRODUCT_OPS,
    RELATIONAL_OPS,
    SUM_OPS,
    BinaryOperator,
    UnaryOperator,
)
from .value_utils import parse_number


class ExpressionEvaluator:
    """Reduces an expression tree to a number.

    Every binary level is folded left to right and both operands are always
    evaluated, so ``AND``/``OR`` do not short-circuit.
    """

    def __init__(self, env: BasicEnvironment, *, source_name: str = "<unknown>"):
        self.env = env
        self.source_name = source_name

    def evaluate(self, expr: Expr) -> float:
        if isinstance(expr, LogicalOr):
            return self._logical_or(expr)
        if isinstance(expr, LogicalAnd):
            return self._logical_and(expr)
        if isinstance(expr, LogicalNot):
            return self._logical_not(expr)
        if isinstance(expr, Relational):
            return self._relational(expr)
        if isinstance(expr, Summation):
            return self._summation(expr)
        if isinstance(expr, Multiplication):
            return self._multiplication(expr)
        return self._factor(expr)

    # ------------------------------------------------------------------ levels
    def _logical_or(self, expr: LogicalOr) -> float:
        return self._fold(self._logical_and(expr.first), expr.rest, LOGICAL_OR_OPS, "process_logical_or")

    def _logical_and(self, expr: LogicalAnd) -> float:
        return self._fold(self._logical_not(expr.first), expr.rest, LOGICAL_AND_OPS, "process_logical_and")

    def _logical_not(self, expr: LogicalNot) -> float:
        context = "process_logical_not"
        result = self._relational(expr.operand)
        if expr.op is None:
            return result
        op = UnaryOperator.from_lexeme(
            expr.op.value, context=context, token=expr.op, source_name=self.source_name
        )
        return op.apply(result, context, token=expr.op, source_name=self.source_name)

    def _relational(self, expr: Relational) -> float:
        return self._fold(self._summation(expr.first), expr.rest, RELATIONAL_OPS, "process_relational")

    def _summation(self, expr: Summation) -> float:
        return self._fold(self._multiplication(expr.first), expr.rest, SUM_OPS, "process_summation")

    def _multiplication(self, expr: Multiplication) -> float:
        return self._fold(self._factor(expr.first), expr.rest, PRODUCT_OPS, "process_multiplication")

    def _fold(
        self,
        result: float,
        rest: List[OperatorTerm],
        allowed: FrozenSet[BinaryOperator],
        context: str,
    ) -> float:
        for term in rest:
            op = BinaryOperator.from_lexeme(
                term.op.value,
                context=context,
                allowed=allowed,
                token=term.op,
                source_name=self.source_name,
            )
            operand = self.evaluate(term.operand)
            result = op.apply(result, operand, context, token=term.op, source_name=self.source_name)
        return result

    def _factor(self, expr: Expr) -> float:
        context = "process_factor"
        if isinstance(expr, NumberLiteral):
            return parse_number(expr.token, context=context, source_name=self.source_name)
        if isinstance(expr, Variable):
            return self.env.read(expr.name.value)
        if isinstance(expr, Negation):
            return -self._factor(expr.operand)
        if isinstance(expr, Parenthesized):
            return self.evaluate(expr.expression)
        raise TypeError(f"Unsupported expression: {expr!r}")


__all__ = ["ExpressionEvaluator"]
