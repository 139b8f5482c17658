"""Error types and the diagnostic sink shared by the Nova pipeline.

Static errors (scan and parse) are reported as they are found and only set
a flag; run-time errors are raised as `NovaRuntimeError` and reported once
by the interpreter's top-level loop. Any other exception escaping the
pipeline is an internal fault and is left to propagate.
"""

import sys
from typing import Optional, TextIO

from nova.tokens import Token, TokenKind


class NovaRuntimeError(Exception):
    """Exception type used to propagate Nova runtime errors."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class ParseError(Exception):
    """Internal exception used to unwind the parser to a statement boundary."""


class NovaSyntaxError(Exception):
    """Raised by the grammar front-end, which does not recover from errors."""
    def __init__(self, line: int, message: str):
        super().__init__(f"[line {line}] Error: {message}")
        self.line = line
        self.message = message


class ErrorReporter:
    """Collects and prints diagnostics for one or more runs."""
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.had_error = False
        self.had_runtime_error = False
        self.error_count = 0

    def _write(self, text: str):
        # resolve lazily so that redirected/captured stderr is honoured
        print(text, file=self.stream if self.stream is not None else sys.stderr)

    def error(self, line: int, message: str):
        self.report(line, '', message)

    def error_at(self, token: Token, message: str):
        if token.kind == TokenKind.EOF:
            self.report(token.line, ' at end', message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def report(self, line: int, where: str, message: str):
        self._write(f"[line {line}] Error{where}: {message}")
        self.had_error = True
        self.error_count += 1

    def runtime_error(self, err: NovaRuntimeError):
        self._write(f"{err.message}\n[line {err.token.line}]")
        self.had_runtime_error = True

    def reset(self):
        self.had_error = False
        self.had_runtime_error = False
        self.error_count = 0
