from .diagnostics import format_basic_error, format_location, format_syntax_error

__all__ = ["format_basic_error", "format_location", "format_syntax_error"]
