from typing import Optional

from ..errors import BasicError


def format_location(source_name: str, line: Optional[int], column: Optional[int]) -> str:
    if line is None:
        return source_name
    if column is None:
        return f"{source_name}:{line}"
    return f"{source_name}:{line}:{column}"


def _excerpt(source: Optional[str], line: Optional[int], column: Optional[int]) -> list[str]:
    if source is None or line is None:
        return []
    lines = source.splitlines()
    if not 1 <= line <= len(lines):
        return []
    text = lines[line - 1]
    excerpt = [f"    {text}"]
    if column is not None:
        excerpt.append("    " + " " * (column - 1) + "^")
    return excerpt


def format_basic_error(error: BasicError, source: Optional[str] = None) -> str:
    location = format_location(error.source_name, error.line, error.column)
    head = f"{location}: {error.kind.value} in {error.context}: {error.message}"
    return "\n".join([head, *_excerpt(source, error.line, error.column)])


def format_syntax_error(error: SyntaxError, source_name: str, source: Optional[str] = None) -> str:
    line = getattr(error, "line", None)
    column = getattr(error, "column", None)
    location = format_location(source_name, line, column)
    head = f"{location}: syntax error: {error.msg}"
    return "\n".join([head, *_excerpt(source, line, column)])


__all__ = ["format_basic_error", "format_location", "format_syntax_error"]
