from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

DIGITS = "0123456789"
_WORD_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz" + DIGITS)

KEYWORDS = {
    "REM",
    "GOTO",
    "IF",
    "THEN",
    "LET",
    "PRINT",
    "END",
    "AND",
    "OR",
    "NOT",
}

@dataclass(frozen=True)
class Token:
    kind: str
    value: str
    line: int
    column: int

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Token({self.kind!r}, {self.value!r}, {self.line}:{self.column})"


class LexerError(SyntaxError):
    def __init__(self, message: str, line: int, column: int):
        super().__init__(f"{message} at {line}:{column}")
        self.line = line
        self.column = column


class BasicLexer:
    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.pos = 0
        self.line = 1
        self.column = 1

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        while True:
            token = self._next_token()
            if token is None:
                break
            tokens.append(token)
        tokens.append(Token("EOF", "", self.line, self.column))
        return tokens

    # ------------------------------- internals ---------------------------- #
    def _peek(self, offset: int = 0) -> str:
        idx = self.pos + offset
        if idx >= self.length:
            return "\0"
        return self.source[idx]

    def _advance(self, count: int = 1) -> str:
        ch = ""
        for _ in range(count):
            if self.pos >= self.length:
                return "\0"
            ch = self.source[self.pos]
            self.pos += 1
            if ch == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        return ch

    def _next_token(self) -> Optional[Token]:
        while self._peek() in " \t\r":
            self._advance()

        start_line, start_col = self.line, self.column
        ch = self._peek()
        if ch == "\0":
            return None

        if ch == "\n":
            self._advance()
            return Token("NEWLINE", "\n", start_line, start_col)
        if ch in DIGITS or (ch == "." and self._peek(1) in DIGITS):
            return self._number(start_line, start_col)
        if ch.isascii() and ch.isalpha():
            return self._word(start_line, start_col)

        two_char = ch + self._peek(1)
        if two_char in {"<>", "><", "<=", ">="}:
            self._advance(2)
            return Token("OP", two_char, start_line, start_col)
        if ch in "+-*/=<>":
            self._advance()
            return Token("OP", ch, start_line, start_col)
        if ch in "(),;:":
            self._advance()
            return Token(ch, ch, start_line, start_col)

        raise LexerError(f"Unexpected character {ch!r}", start_line, start_col)

    def _number(self, line: int, col: int) -> Token:
        start = self.pos
        has_dot = False
        while True:
            ch = self._peek()
            if ch == ".":
                if has_dot:
                    break
                has_dot = True
                self._advance()
            elif ch in DIGITS:
                self._advance()
            else:
                break
        # Exponent only when digits follow, otherwise the E starts an identifier.
        if self._peek() in "eE":
            offset = 2 if self._peek(1) in "+-" else 1
            if self._peek(offset) in DIGITS:
                self._advance(offset)
                while self._peek() in DIGITS:
                    self._advance()
        value = self.source[start:self.pos]
        return Token("NUMBER", value, line, col)

    def _word(self, line: int, col: int) -> Token:
        start = self.pos
        while self._peek() in _WORD_CHARS:
            self._advance()
        value = self.source[start:self.pos].upper()
        if value == "REM":
            return self._remark(line, col)
        kind = value if value in KEYWORDS else "IDENT"
        return Token(kind, value, line, col)

    def _remark(self, line: int, col: int) -> Token:
        start = self.pos
        while self._peek() not in {"\n", "\0"}:
            self._advance()
        text = self.source[start:self.pos].strip()
        return Token("REM", text, line, col)

__all__ = ["BasicLexer", "LexerError", "Token", "KEYWORDS"]
