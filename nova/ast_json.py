"""JSON serialization/deserialization for Nova ASTs.

This module converts between Nova AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Every node carries a
`"type"` discriminator; tokens are stored as `{kind, lexeme, literal, line}`.
It supports a full round-trip for all node types.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .ast import (
    Assign,
    Binary,
    Block,
    Call,
    Expression,
    Grouping,
    If,
    Literal,
    Logical,
    Print,
    Stmt,
    Unary,
    Var,
    Variable,
    While,
)
from .tokens import Token, TokenKind


def token_to_obj(t: Token) -> Dict[str, Any]:
    return {"kind": t.kind.name, "lexeme": t.lexeme, "literal": t.literal, "line": t.line}


def token_from_obj(o: Dict[str, Any]) -> Token:
    return Token(TokenKind[o["kind"]], o["lexeme"], o.get("literal"), o["line"])


def ast_to_obj(node: Any) -> Any:
    # Primitives
    if node is None:
        return None
    if isinstance(node, list):
        return [ast_to_obj(n) for n in node]

    # Expressions
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value}
    if isinstance(node, Grouping):
        return {"type": "Grouping", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Unary):
        return {
            "type": "Unary",
            "operator": token_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Binary):
        return {
            "type": "Binary",
            "left": ast_to_obj(node.left),
            "operator": token_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Logical):
        return {
            "type": "Logical",
            "left": ast_to_obj(node.left),
            "operator": token_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Variable):
        return {"type": "Variable", "name": token_to_obj(node.name)}
    if isinstance(node, Assign):
        return {
            "type": "Assign",
            "name": token_to_obj(node.name),
            "value": ast_to_obj(node.value),
        }
    if isinstance(node, Call):
        return {
            "type": "Call",
            "callee": ast_to_obj(node.callee),
            "paren": token_to_obj(node.paren),
            "arguments": [ast_to_obj(a) for a in node.arguments],
        }

    # Statements
    if isinstance(node, Expression):
        return {"type": "Expression", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Print):
        return {"type": "Print", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Var):
        return {
            "type": "Var",
            "name": token_to_obj(node.name),
            "initializer": ast_to_obj(node.initializer),
        }
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, If):
        return {
            "type": "If",
            "condition": ast_to_obj(node.condition),
            "then_branch": ast_to_obj(node.then_branch),
            "else_branch": ast_to_obj(node.else_branch),
        }
    if isinstance(node, While):
        return {
            "type": "While",
            "condition": ast_to_obj(node.condition),
            "body": ast_to_obj(node.body),
        }

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(o: Any) -> Any:
    if o is None:
        return None
    if isinstance(o, list):
        return [ast_from_obj(x) for x in o]
    if not isinstance(o, dict):
        raise TypeError(f"Invalid AST JSON fragment: {o!r}")
    t = o.get("type")

    if t == "Literal":
        return Literal(o.get("value"))
    if t == "Grouping":
        return Grouping(ast_from_obj(o["expression"]))
    if t == "Unary":
        return Unary(token_from_obj(o["operator"]), ast_from_obj(o["right"]))
    if t == "Binary":
        return Binary(ast_from_obj(o["left"]), token_from_obj(o["operator"]), ast_from_obj(o["right"]))
    if t == "Logical":
        return Logical(ast_from_obj(o["left"]), token_from_obj(o["operator"]), ast_from_obj(o["right"]))
    if t == "Variable":
        return Variable(token_from_obj(o["name"]))
    if t == "Assign":
        return Assign(token_from_obj(o["name"]), ast_from_obj(o["value"]))
    if t == "Call":
        return Call(
            ast_from_obj(o["callee"]),
            token_from_obj(o["paren"]),
            [ast_from_obj(a) for a in o.get("arguments", [])],
        )

    if t == "Expression":
        return Expression(ast_from_obj(o["expression"]))
    if t == "Print":
        return Print(ast_from_obj(o["expression"]))
    if t == "Var":
        return Var(token_from_obj(o["name"]), ast_from_obj(o.get("initializer")))
    if t == "Block":
        return Block([ast_from_obj(s) for s in o.get("statements", [])])
    if t == "If":
        return If(
            ast_from_obj(o["condition"]),
            ast_from_obj(o["then_branch"]),
            ast_from_obj(o.get("else_branch")),
        )
    if t == "While":
        return While(ast_from_obj(o["condition"]), ast_from_obj(o["body"]))

    raise ValueError(f"Unknown AST node type: {t}")


def program_to_obj(statements: List[Stmt]) -> Dict[str, Any]:
    return {"type": "Program", "body": [ast_to_obj(s) for s in statements]}


def program_from_obj(o: Dict[str, Any]) -> List[Stmt]:
    if o.get("type") != "Program":
        raise ValueError("AST JSON root must be a Program")
    return [ast_from_obj(s) for s in o.get("body", [])]
