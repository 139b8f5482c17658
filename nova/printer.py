"""Render Nova ASTs as parenthesized prefix text, e.g. `(* (- 123) (group 45.67))`."""

from __future__ import annotations

from typing import List, Union

from .ast import (
    Assign, Binary, Block, Call, Expr, Expression, Grouping, If, Literal,
    Logical, Print, Stmt, Unary, Var, Variable, While,
)
from .types import stringify


class AstPrinter:
    def print(self, node: Union[Expr, Stmt]) -> str:
        if isinstance(node, Stmt):
            return self.print_stmt(node)
        return self.print_expr(node)

    def print_program(self, statements: List[Stmt]) -> str:
        return '\n'.join(self.print_stmt(stmt) for stmt in statements)

    def print_expr(self, expr: Expr) -> str:
        if isinstance(expr, Binary):
            return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)
        if isinstance(expr, Logical):
            return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)
        if isinstance(expr, Grouping):
            return self.parenthesize('group', expr.expression)
        if isinstance(expr, Literal):
            if isinstance(expr.value, str):
                return f'"{expr.value}"'
            return stringify(expr.value)
        if isinstance(expr, Unary):
            return self.parenthesize(expr.operator.lexeme, expr.right)
        if isinstance(expr, Variable):
            return expr.name.lexeme
        if isinstance(expr, Assign):
            return self.parenthesize(f"= {expr.name.lexeme}", expr.value)
        if isinstance(expr, Call):
            return self.parenthesize('call', expr.callee, *expr.arguments)
        raise NotImplementedError(f"print_expr: unexpected node type {type(expr)}")

    def print_stmt(self, stmt: Stmt) -> str:
        if isinstance(stmt, Expression):
            return self.parenthesize(';', stmt.expression)
        if isinstance(stmt, Print):
            return self.parenthesize('print', stmt.expression)
        if isinstance(stmt, Var):
            if stmt.initializer is None:
                return f"(var {stmt.name.lexeme})"
            return self.parenthesize(f"var {stmt.name.lexeme}", stmt.initializer)
        if isinstance(stmt, Block):
            return self.parenthesize('block', *stmt.statements)
        if isinstance(stmt, If):
            if stmt.else_branch is None:
                return self.parenthesize('if', stmt.condition, stmt.then_branch)
            return self.parenthesize('if', stmt.condition, stmt.then_branch, stmt.else_branch)
        if isinstance(stmt, While):
            return self.parenthesize('while', stmt.condition, stmt.body)
        raise NotImplementedError(f"print_stmt: unexpected node type {type(stmt)}")

    def parenthesize(self, name: str, *parts: Union[Expr, Stmt]) -> str:
        text = '(' + name
        for part in parts:
            text += ' ' + self.print(part)
        return text + ')'
