from .environment import BasicEnvironment
from .errors import BasicError, ErrorKind
from .interpreter import BasicInterpreter
from .parser import BasicParser, ParserError
from .program import CompiledLine, ProgramIndex, build_program_index
from .runtime import parse_source, run_program, run_script, run_source

__all__ = [
    "run_script",
    "run_source",
    "run_program",
    "parse_source",
    "BasicInterpreter",
    "BasicEnvironment",
    "BasicParser",
    "ParserError",
    "BasicError",
    "ErrorKind",
    "CompiledLine",
    "ProgramIndex",
    "build_program_index",
]
