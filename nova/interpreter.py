"""Tree-walking interpreter for the Nova language.

This module ties the pipeline together: source text is scanned and parsed
into statements (see scanner.py, parser.py and grammar.py) and the
`Interpreter` evaluates them directly. Expressions evaluate to run-time
values and statements execute for effect. Variable state lives in a chain
of `Environment` scopes; the interpreter holds one "current" environment
that is swapped for the duration of each block and always restored.

A `NovaRuntimeError` raised anywhere during execution aborts the rest of
the run and is reported once by `interpret`. Any other exception is an
internal fault and propagates to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, TextIO

from .ast import (
    Assign, Binary, Block, Call, Expr, Expression, Grouping, If, Literal,
    Logical, Print, Stmt, Unary, Var, Variable, While,
)
from .callable import NovaCallable
from .environment import Environment
from .errors import ErrorReporter, NovaRuntimeError, NovaSyntaxError
from .grammar import parse_with_grammar
from .parser import parse_program
from .std import populate_std_environment
from .tokens import Token, TokenKind
from .types import divide, is_equal, is_number, is_truthy, stringify, type_name


PARSERS = ('descent', 'grammar')


def parse_source(source: str, reporter: ErrorReporter, parser: str = 'descent') -> List[Stmt]:
    """Parse source with the selected front-end, reporting static errors."""
    if parser == 'descent':
        return parse_program(source, reporter)
    if parser == 'grammar':
        try:
            return parse_with_grammar(source)
        except NovaSyntaxError as err:
            reporter.error(err.line, err.message)
            return []
    raise ValueError(f"unknown parser {parser!r}; expected one of {PARSERS}")


class Interpreter:
    """Core interpreter that executes Nova statements."""
    def __init__(self, out: Optional[TextIO] = None, reporter: Optional[ErrorReporter] = None,
                 debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.globals = populate_std_environment(Environment())
        self.environment = self.globals
        self.out = out
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def run_source(self, source: str, parser: str = 'descent') -> bool:
        """Parse and run source against this interpreter's global state.

        Returns False if this source produced a static or run-time error.
        Static errors suppress execution entirely. Errors reported by earlier
        sources do not block this one.
        """
        errors_before = self.reporter.error_count
        statements = parse_source(source, self.reporter, parser)
        if self.reporter.error_count > errors_before:
            return False
        return self.interpret(statements)

    def interpret(self, statements: List[Stmt]) -> bool:
        try:
            for stmt in statements:
                if self.debug_level >= 1:
                    self.debug(f"execute {type(stmt).__name__}")
                self.execute(stmt)
        except NovaRuntimeError as err:
            if self.debug_level >= 1:
                self.debug(f"runtime error at line {err.token.line}: {err.message}")
            self.reporter.runtime_error(err)
            return False
        return True

    def execute_block(self, statements: List[Stmt], environment: Environment):
        previous = self.environment
        if self.debug_level >= 2:
            self.debug(f"enter scope depth {environment.depth}")
        try:
            self.environment = environment
            for stmt in statements:
                self.execute(stmt)
        finally:
            self.environment = previous
            if self.debug_level >= 2:
                self.debug(f"leave scope depth {environment.depth}")

    def execute(self, stmt: Stmt):
        if isinstance(stmt, Expression):
            self.evaluate(stmt.expression)
            return
        if isinstance(stmt, Print):
            value = self.evaluate(stmt.expression)
            print(stringify(value), file=self.out)
            return
        if isinstance(stmt, Var):
            value = None
            if stmt.initializer is not None:
                value = self.evaluate(stmt.initializer)
            self.environment.define(stmt.name.lexeme, value)
            if self.debug_level >= 2:
                self.debug(f"define {stmt.name.lexeme}: {type_name(value)} = {stringify(value)}")
            return
        if isinstance(stmt, Block):
            self.execute_block(stmt.statements, Environment(self.environment))
            return
        if isinstance(stmt, If):
            cond = self.evaluate(stmt.condition)
            truthy = is_truthy(cond)
            if self.debug_level >= 3:
                self.debug(f"if condition {stringify(cond)} -> {truthy}")
            if truthy:
                self.execute(stmt.then_branch)
            elif stmt.else_branch is not None:
                self.execute(stmt.else_branch)
            return
        if isinstance(stmt, While):
            while True:
                cond = self.evaluate(stmt.condition)
                if self.debug_level >= 3:
                    self.debug(f"while condition {stringify(cond)}")
                if not is_truthy(cond):
                    break
                self.execute(stmt.body)
            return
        raise NotImplementedError(f"execute: unexpected node type {type(stmt)}")

    def evaluate(self, expr: Expr) -> Any:
        if isinstance(expr, Literal):
            return expr.value
        if isinstance(expr, Grouping):
            return self.evaluate(expr.expression)
        if isinstance(expr, Variable):
            return self.environment.get(expr.name)
        if isinstance(expr, Assign):
            value = self.evaluate(expr.value)
            self.environment.assign(expr.name, value)
            if self.debug_level >= 2:
                self.debug(f"assign {expr.name.lexeme} = {stringify(value)}")
            return value
        if isinstance(expr, Unary):
            right = self.evaluate(expr.right)
            if expr.operator.kind == TokenKind.BANG:
                return not is_truthy(right)
            if expr.operator.kind == TokenKind.MINUS:
                self.check_number_operand(expr.operator, right)
                return -right
            raise NotImplementedError(f"unsupported unary operator {expr.operator.lexeme}")
        if isinstance(expr, Logical):
            left = self.evaluate(expr.left)
            # short-circuit: the result is one of the operands, not a boolean
            if expr.operator.kind == TokenKind.OR:
                if is_truthy(left):
                    return left
            elif not is_truthy(left):
                return left
            return self.evaluate(expr.right)
        if isinstance(expr, Binary):
            # operands evaluate left to right
            left = self.evaluate(expr.left)
            right = self.evaluate(expr.right)
            return self.apply_binary_op(expr.operator, left, right)
        if isinstance(expr, Call):
            callee = self.evaluate(expr.callee)
            arguments = [self.evaluate(arg) for arg in expr.arguments]
            return self.call_function(callee, arguments, expr.paren)
        raise NotImplementedError(f"evaluate: unexpected node type {type(expr)}")

    def call_function(self, callee: Any, arguments: List[Any], paren: Token) -> Any:
        if not isinstance(callee, NovaCallable):
            raise NovaRuntimeError(paren, 'Can only call functions and classes.')
        if len(arguments) != callee.arity():
            raise NovaRuntimeError(paren, f"Expected {callee.arity()} arguments but got {len(arguments)}.")
        if self.debug_level >= 3:
            self.debug(f"call {callee} with {len(arguments)} arguments")
        return callee.call(self, arguments)

    def apply_binary_op(self, operator: Token, left: Any, right: Any) -> Any:
        kind = operator.kind
        if kind == TokenKind.PLUS:
            if is_number(left) and is_number(right):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise NovaRuntimeError(operator, 'Operands must be two numbers or two strings.')
        if kind == TokenKind.BANG_EQUAL:
            return not is_equal(left, right)
        if kind == TokenKind.EQUAL_EQUAL:
            return is_equal(left, right)

        # everything else is numeric only
        self.check_number_operands(operator, left, right)
        if kind == TokenKind.MINUS:
            return left - right
        if kind == TokenKind.STAR:
            return left * right
        if kind == TokenKind.SLASH:
            return divide(left, right)
        if kind == TokenKind.GREATER:
            return left > right
        if kind == TokenKind.GREATER_EQUAL:
            return left >= right
        if kind == TokenKind.LESS:
            return left < right
        if kind == TokenKind.LESS_EQUAL:
            return left <= right
        raise NotImplementedError(f"unsupported binary operator {operator.lexeme}")

    @staticmethod
    def check_number_operand(operator: Token, operand: Any):
        if not is_number(operand):
            raise NovaRuntimeError(operator, 'Operand must be a number.')

    @staticmethod
    def check_number_operands(operator: Token, left: Any, right: Any):
        if not (is_number(left) and is_number(right)):
            raise NovaRuntimeError(operator, 'Operands must be numbers.')


def run_program(source: str, debug_level: int = 0, out: Optional[TextIO] = None,
                reporter: Optional[ErrorReporter] = None, parser: str = 'descent') -> ErrorReporter:
    """Convenience function to compile and run a Nova program from a source string.

    Each call uses a fresh interpreter, so no state leaks between runs. The
    returned reporter tells the caller whether static or run-time errors
    occurred.
    """
    reporter = reporter if reporter is not None else ErrorReporter()
    interpreter = Interpreter(out=out, reporter=reporter, debug_level=debug_level)
    try:
        interpreter.run_source(source, parser)
    finally:
        interpreter.close()
    return reporter


def compile_module(file_path: str, debug_level: int = 0, reporter: Optional[ErrorReporter] = None,
                   parser: str = 'descent') -> Interpreter:
    """Compile and execute a Nova file, returning the interpreter instance."""
    source = Path(file_path).read_text(encoding='utf-8')
    interpreter = Interpreter(reporter=reporter, debug_level=debug_level)
    try:
        interpreter.run_source(source, parser)
    finally:
        interpreter.close()
    return interpreter
