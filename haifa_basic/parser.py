from __future__ import annotations

from typing import Callable, List, Optional, Set, Union

from .ast import (
    Assignment,
    EndStmt,
    Expr,
    GotoStmt,
    GotoTarget,
    IfStmt,
    Line,
    LogicalAnd,
    LogicalNot,
    LogicalOr,
    Multiplication,
    Negation,
    NumberLiteral,
    OperatorTerm,
    Parenthesized,
    PrintStmt,
    Program,
    Relational,
    RemarkStmt,
    Stmt,
    Summation,
    Variable,
)
from .lexer import BasicLexer, Token

_RELATIONAL = {"=", "<>", "><", "<", "<=", ">", ">="}

# Combined depth of parentheses, unary minus and IF ... THEN IF chains.
MAX_NESTING = 64


class ParserError(SyntaxError):
    def __init__(self, message: str, token: Optional[Token] = None):
        if token is not None:
            message = f"{message} at {token.line}:{token.column}"
        super().__init__(message)
        self.token = token
        self.line = token.line if token is not None else None
        self.column = token.column if token is not None else None


class BasicParser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    @classmethod
    def parse(cls, source: str) -> Program:
        lexer = BasicLexer(source)
        tokens = lexer.tokenize()
        parser = cls(tokens)
        return parser._parse_program()

    # ------------------------------------------------------------------
    def _current(self) -> Token:
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        token = self._current()
        if token.kind != "EOF":
            self.pos += 1
        return token

    def _match(self, *kinds: str) -> Optional[Token]:
        if self._current().kind in kinds:
            return self._advance()
        return None

    def _expect(self, kind: str) -> Token:
        token = self._current()
        if token.kind != kind:
            raise ParserError(f"Expected {kind}, got {token.kind}", token)
        return self._advance()

    def _match_op(self, symbols: Set[str]) -> Optional[Token]:
        token = self._current()
        if token.kind == "OP" and token.value in symbols:
            return self._advance()
        return None

    def _nest(self, token: Token) -> None:
        self.depth += 1
        if self.depth > MAX_NESTING:
            raise ParserError(f"Expression nested too deeply (limit {MAX_NESTING})", token)

    def _skip_newlines(self) -> bool:
        skipped = False
        while self._match("NEWLINE"):
            skipped = True
        return skipped

    def _parse_program(self) -> Program:
        lines: List[Line] = []
        self._skip_newlines()
        if self._current().kind == "EOF":
            raise ParserError("Program has no lines", self._current())
        lines.append(self._parse_line())
        while self._current().kind != "EOF":
            if not self._skip_newlines():
                raise ParserError(f"Expected end of line, got {self._current().kind}", self._current())
            if self._current().kind == "EOF":
                break
            lines.append(self._parse_line())
        return Program(lines)

    def _parse_line(self) -> Line:
        number = self._expect("NUMBER")
        statements: List[Stmt] = [self._parse_statement()]
        while self._match(":"):
            statements.append(self._parse_statement())
        return Line(number, statements)

    def _parse_statement(self) -> Stmt:
        token = self._current()
        if token.kind == "REM":
            self._advance()
            return RemarkStmt(token.line, token.column, token.value)
        if token.kind == "GOTO":
            self._advance()
            return GotoStmt(token.line, token.column, self._expect("NUMBER"))
        if token.kind == "IF":
            return self._parse_if()
        if token.kind == "LET":
            self._advance()
            return self._parse_assignment(token, has_let=True)
        if token.kind == "IDENT":
            return self._parse_assignment(token, has_let=False)
        if token.kind == "PRINT":
            return self._parse_print()
        if token.kind == "END":
            self._advance()
            return EndStmt(token.line, token.column)
        raise ParserError(f"Unexpected token {token.kind}", token)

    def _parse_if(self) -> IfStmt:
        if_tok = self._expect("IF")
        condition = self._parse_expression()
        branch: Union[Stmt, GotoTarget]
        if self._match("THEN"):
            target = self._match("NUMBER")
            if target is not None:
                branch = GotoTarget(target.line, target.column, target)
            else:
                self._nest(if_tok)
                try:
                    branch = self._parse_statement()
                finally:
                    self.depth -= 1
        elif self._match("GOTO"):
            target = self._expect("NUMBER")
            branch = GotoTarget(target.line, target.column, target)
        else:
            raise ParserError(f"Expected THEN or GOTO, got {self._current().kind}", self._current())
        return IfStmt(if_tok.line, if_tok.column, condition, branch)

    def _parse_assignment(self, start: Token, *, has_let: bool) -> Assignment:
        name = self._expect("IDENT")
        if self._match_op({"="}) is None:
            raise ParserError("Expected '=' in assignment", self._current())
        value = self._parse_expression()
        return Assignment(start.line, start.column, name, value, has_let)

    def _parse_print(self) -> PrintStmt:
        tok = self._expect("PRINT")
        values = [self._parse_expression()]
        while self._match(",", ";"):
            values.append(self._parse_expression())
        return PrintStmt(tok.line, tok.column, values)

    # ------------------------ expression parsing ------------------------- #
    def _parse_expression(self) -> LogicalOr:
        return self._parse_logical_or()

    def _collect(self, accept: Callable[[], Optional[Token]], operand: Callable[[], Expr]) -> List[OperatorTerm]:
        rest: List[OperatorTerm] = []
        while True:
            op = accept()
            if op is None:
                return rest
            rest.append(OperatorTerm(op, operand()))

    def _parse_logical_or(self) -> LogicalOr:
        first = self._parse_logical_and()
        rest = self._collect(lambda: self._match("OR"), self._parse_logical_and)
        return LogicalOr(first.line, first.column, first, rest)

    def _parse_logical_and(self) -> LogicalAnd:
        first = self._parse_logical_not()
        rest = self._collect(lambda: self._match("AND"), self._parse_logical_not)
        return LogicalAnd(first.line, first.column, first, rest)

    def _parse_logical_not(self) -> LogicalNot:
        op = self._match("NOT")
        operand = self._parse_relational()
        if op is not None:
            return LogicalNot(op.line, op.column, operand, op)
        return LogicalNot(operand.line, operand.column, operand)

    def _parse_relational(self) -> Relational:
        first = self._parse_summation()
        rest = self._collect(lambda: self._match_op(_RELATIONAL), self._parse_summation)
        return Relational(first.line, first.column, first, rest)

    def _parse_summation(self) -> Summation:
        first = self._parse_multiplication()
        rest = self._collect(lambda: self._match_op({"+", "-"}), self._parse_multiplication)
        return Summation(first.line, first.column, first, rest)

    def _parse_multiplication(self) -> Multiplication:
        first = self._parse_factor()
        rest = self._collect(lambda: self._match_op({"*", "/"}), self._parse_factor)
        return Multiplication(first.line, first.column, first, rest)

    def _parse_factor(self) -> Expr:
        token = self._current()
        if token.kind == "NUMBER":
            self._advance()
            return NumberLiteral(token.line, token.column, token)
        if token.kind == "IDENT":
            self._advance()
            return Variable(token.line, token.column, token)
        if token.kind == "OP" and token.value == "-":
            self._advance()
            self._nest(token)
            try:
                operand = self._parse_factor()
            finally:
                self.depth -= 1
            return Negation(token.line, token.column, operand)
        if token.kind == "(":
            self._advance()
            self._nest(token)
            try:
                expr = self._parse_expression()
                self._expect(")")
            finally:
                self.depth -= 1
            return Parenthesized(token.line, token.column, expr)
        if token.kind == "EOF":
            raise ParserError("Unexpected EOF", token)
        raise ParserError(f"Unexpected token {token.kind}", token)

__all__ = ["BasicParser", "ParserError"]
