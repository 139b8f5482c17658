"""Declarative grammar front-end for the Nova language.

The same grammar the hand-written parser implements, written as a Lark
LALR grammar. The parse tree is transformed into exactly the AST that
`nova.parser.Parser` produces for well-formed programs, including the
desugaring of `for` loops, which makes this front-end a cross-check for
the recursive-descent parser.

Unlike the recursive-descent parser this front-end does not recover: the
first syntax error is raised as a `NovaSyntaxError`.
"""

from __future__ import annotations

import re
from typing import List, Optional

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedToken, VisitError

from .ast import (
    Assign, Binary, Block, Call, Expression, Grouping, If, Literal, Logical,
    Print, Stmt, Unary, Var, Variable, While,
)
from .errors import NovaSyntaxError
from .parser import MAX_ARGUMENTS, desugar_for
from .tokens import Token, TokenKind


# keywords the grammar has no production for
RESERVED_WORDS = ('class', 'fun', 'return', 'super', 'this')

WORD = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


NOVA_GRAMMAR = r"""
    start: declaration*

    ?declaration: var_decl
                | statement

    var_decl: "var" IDENTIFIER ["=" expression] ";"

    ?statement: expr_stmt
              | for_stmt
              | if_stmt
              | print_stmt
              | while_stmt
              | block

    for_stmt: "for" "(" for_init [expression] ";" [expression] ")" statement
    for_init: var_decl
            | expr_stmt
            | ";"
    if_stmt: "if" "(" expression ")" statement ["else" statement]
    while_stmt: "while" "(" expression ")" statement
    block: "{" declaration* "}"
    expr_stmt: expression ";"
    print_stmt: "print" expression ";"

    // Expressions, lowest to highest precedence
    ?expression: assignment
    ?assignment: IDENTIFIER "=" assignment -> assign
               | logic_or
    ?logic_or: logic_and (OR logic_and)*
    ?logic_and: equality (AND equality)*
    ?equality: comparison ((BANG_EQUAL | EQUAL_EQUAL) comparison)*
    ?comparison: term ((GREATER | GREATER_EQUAL | LESS | LESS_EQUAL) term)*
    ?term: factor ((MINUS | PLUS) factor)*
    ?factor: unary ((SLASH | STAR) unary)*
    ?unary: (BANG | MINUS) unary -> unary_op
          | call
    ?call: primary
         | call "(" [arguments] RIGHT_PAREN -> call_expr
    arguments: expression ("," expression)*
    ?primary: NUMBER -> number
            | STRING -> string
            | "true" -> true
            | "false" -> false
            | "nil" -> nil
            | "(" expression ")" -> grouping
            | IDENTIFIER -> variable

    // Tokens
    OR: "or"
    AND: "and"
    BANG: "!"
    BANG_EQUAL: "!="
    EQUAL_EQUAL: "=="
    GREATER: ">"
    GREATER_EQUAL: ">="
    LESS: "<"
    LESS_EQUAL: "<="
    MINUS: "-"
    PLUS: "+"
    SLASH: "/"
    STAR: "*"
    RIGHT_PAREN: ")"
    // reserved words without a production here still may not name variables
    IDENTIFIER: /(?!(?:class|fun|return|super|this)\b)[A-Za-z_][A-Za-z0-9_]*/
    NUMBER: /[0-9]+(\.[0-9]+)?/
    STRING: /"[^"]*"/

    // Comments and whitespace
    LINE_COMMENT: /\/\/[^\n]*/
    %ignore LINE_COMMENT
    %ignore /[ \t\r\n]+/
"""


NOVA_PARSER = Lark(
    NOVA_GRAMMAR,
    parser='lalr',
    propagate_positions=True,
    maybe_placeholders=True,
)


def to_token(tok, kind: Optional[TokenKind] = None) -> Token:
    """Convert a Lark token into a Nova token."""
    if kind is None:
        kind = TokenKind[tok.type]
    return Token(kind, str(tok), None, tok.line)


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def start(self, items):
        return list(items)

    # Statements
    @v_args(inline=True)
    def var_decl(self, name, initializer):
        return Var(to_token(name), initializer)

    @v_args(inline=True)
    def expr_stmt(self, expr):
        return Expression(expr)

    @v_args(inline=True)
    def print_stmt(self, expr):
        return Print(expr)

    def block(self, items):
        return Block(list(items))

    @v_args(inline=True)
    def if_stmt(self, condition, then_branch, else_branch):
        return If(condition, then_branch, else_branch)

    @v_args(inline=True)
    def while_stmt(self, condition, body):
        return While(condition, body)

    def for_init(self, items):
        # the bare ';' alternative leaves no children
        return items[0] if items else None

    @v_args(inline=True)
    def for_stmt(self, initializer, condition, increment, body):
        return desugar_for(initializer, condition, increment, body)

    # Expressions
    @v_args(inline=True)
    def assign(self, name, value):
        return Assign(to_token(name), value)

    def fold_binary(self, node_class, items):
        left = items[0]
        i = 1
        while i < len(items):
            operator = to_token(items[i])
            right = items[i + 1]
            left = node_class(left, operator, right)
            i += 2
        return left

    def logic_or(self, items):
        return self.fold_binary(Logical, items)

    def logic_and(self, items):
        return self.fold_binary(Logical, items)

    def equality(self, items):
        return self.fold_binary(Binary, items)

    def comparison(self, items):
        return self.fold_binary(Binary, items)

    def term(self, items):
        return self.fold_binary(Binary, items)

    def factor(self, items):
        return self.fold_binary(Binary, items)

    @v_args(inline=True)
    def unary_op(self, operator, right):
        return Unary(to_token(operator), right)

    @v_args(inline=True)
    def call_expr(self, callee, arguments, paren):
        return Call(callee, to_token(paren), arguments if arguments is not None else [])

    @v_args(meta=True)
    def arguments(self, meta, items):
        if len(items) > MAX_ARGUMENTS:
            raise NovaSyntaxError(meta.line, f"Can't have more than {MAX_ARGUMENTS} arguments.")
        return list(items)

    @v_args(inline=True)
    def number(self, tok):
        return Literal(float(tok))

    @v_args(inline=True)
    def string(self, tok):
        return Literal(str(tok)[1:-1])

    def true(self, items):
        return Literal(True)

    def false(self, items):
        return Literal(False)

    def nil(self, items):
        return Literal(None)

    @v_args(inline=True)
    def grouping(self, expr):
        return Grouping(expr)

    @v_args(inline=True)
    def variable(self, name):
        return Variable(to_token(name))


def end_line(source: str) -> int:
    return source.count('\n') + 1


def parse_with_grammar(source: str) -> List[Stmt]:
    """Parse Nova source code into statements using the Lark grammar.

    Any syntax error is raised as a `NovaSyntaxError`.
    """
    try:
        tree = NOVA_PARSER.parse(source)
    except UnexpectedCharacters as err:
        word = WORD.match(source, err.pos_in_stream)
        if word and word.group() in RESERVED_WORDS:
            raise NovaSyntaxError(err.line, f"Unexpected '{word.group()}'.") from err
        raise NovaSyntaxError(err.line, 'Unexpected character.') from err
    except UnexpectedToken as err:
        if err.token.type == '$END':
            raise NovaSyntaxError(end_line(source), 'Unexpected end of input.') from err
        raise NovaSyntaxError(err.token.line, f"Unexpected '{err.token}'.") from err
    except UnexpectedEOF as err:
        raise NovaSyntaxError(end_line(source), 'Unexpected end of input.') from err
    try:
        return ASTTransformer().transform(tree)
    except VisitError as err:
        if isinstance(err.orig_exc, NovaSyntaxError):
            raise err.orig_exc from err
        raise
