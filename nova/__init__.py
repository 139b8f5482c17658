# Nova language package
# This package provides a scanner, parser and tree-walking interpreter for the Nova language.
from .errors import ErrorReporter, NovaRuntimeError
from .interpreter import run_program, compile_module, Interpreter
from .parser import parse_program

__all__ = [
    'run_program',
    'compile_module',
    'parse_program',
    'Interpreter',
    'ErrorReporter',
    'NovaRuntimeError',
]
