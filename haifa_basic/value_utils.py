from __future__ import annotations

import math
import re

from .errors import ParseFloatError, ParseLineNumberError
from .lexer import Token

MAX_LINE_NUMBER = 63999

_UNSIGNED = re.compile(r"[0-9]+")


def parse_number(token: Token, *, context: str, source_name: str = "<unknown>") -> float:
    """Convert a numeric literal lexeme such as ``12``, ``.5`` or ``1.5E3``."""
    symbol = token.value.replace(" ", "").replace("E", "e")
    try:
        value = float(symbol)
    except ValueError as exc:
        raise ParseFloatError(
            f"invalid numeric literal {token.value!r}: {exc}",
            context=context,
            token=token,
            source_name=source_name,
        ) from exc
    # float() also accepts "inf" and "nan", which are not BASIC literals.
    if not math.isfinite(value):
        raise ParseFloatError(
            f"invalid numeric literal {token.value!r}",
            context=context,
            token=token,
            source_name=source_name,
        )
    return value


def parse_line_number(token: Token, *, context: str, source_name: str = "<unknown>") -> int:
    """Convert a line-number lexeme into an unsigned integer; no bound check."""
    symbol = token.value.replace(" ", "")
    if not _UNSIGNED.fullmatch(symbol):
        raise ParseLineNumberError(
            f"invalid line number {token.value!r}",
            context=context,
            token=token,
            source_name=source_name,
        )
    return int(symbol)


def format_number(value: float) -> str:
    """Integral values below 1e16 print as integers; everything else uses repr."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


__all__ = ["MAX_LINE_NUMBER", "format_number", "parse_line_number", "parse_number"]
