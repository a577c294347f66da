from __future__ import annotations

import enum
from typing import Optional

from .lexer import Token


class ErrorKind(enum.Enum):
    PARSE_FLOAT = "ParseFloat"
    PARSE_LINE_NUMBER = "ParseLineNumber"
    LINE_NUMBER_TOO_LARGE = "LineNumberTooLarge"
    LINE_NUMBER_DEFINED_TWICE = "LineNumberDefinedTwice"
    LINE_NOT_ACCESSIBLE = "LineNotAccessible"
    UNKNOWN_OPERATOR = "UnknownOperator"
    OPERATOR_APPLICATION_FAILURE = "OperatorApplicationFailure"
    EXECUTION_BUDGET_EXCEEDED = "ExecutionBudgetExceeded"


class BasicError(RuntimeError):
    """Error raised by the BASIC engine with the failing operation attached."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        context: str,
        token: Optional[Token] = None,
        source_name: str = "<unknown>",
    ):
        super().__init__(message)
        self.message = message
        self.context = context
        self.token = token
        self.source_name = source_name

    @property
    def line(self) -> Optional[int]:
        return self.token.line if self.token is not None else None

    @property
    def column(self) -> Optional[int]:
        return self.token.column if self.token is not None else None


class ParseFloatError(BasicError):
    kind = ErrorKind.PARSE_FLOAT


class ParseLineNumberError(BasicError):
    kind = ErrorKind.PARSE_LINE_NUMBER


class LineNumberTooLargeError(BasicError):
    kind = ErrorKind.LINE_NUMBER_TOO_LARGE


class LineNumberDefinedTwiceError(BasicError):
    kind = ErrorKind.LINE_NUMBER_DEFINED_TWICE

    def __init__(self, message: str, *, line_number: int, **kwargs):
        super().__init__(message, **kwargs)
        self.line_number = line_number


class LineNotAccessibleError(BasicError):
    kind = ErrorKind.LINE_NOT_ACCESSIBLE

    def __init__(self, message: str, *, line_number: int, **kwargs):
        super().__init__(message, **kwargs)
        self.line_number = line_number


class UnknownOperatorError(BasicError):
    kind = ErrorKind.UNKNOWN_OPERATOR


class OperatorApplicationError(BasicError):
    kind = ErrorKind.OPERATOR_APPLICATION_FAILURE


class ExecutionBudgetExceeded(BasicError):
    kind = ErrorKind.EXECUTION_BUDGET_EXCEEDED


__all__ = [
    "ErrorKind",
    "BasicError",
    "ParseFloatError",
    "ParseLineNumberError",
    "LineNumberTooLargeError",
    "LineNumberDefinedTwiceError",
    "LineNotAccessibleError",
    "UnknownOperatorError",
    "OperatorApplicationError",
    "ExecutionBudgetExceeded",
]
