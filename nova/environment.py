from typing import Any, Dict, Optional

from nova.errors import NovaRuntimeError
from nova.tokens import Token


class Environment:
    """Represents a scope mapping identifiers to values, linked to its enclosing scope."""
    def __init__(self, enclosing: Optional['Environment'] = None):
        self.enclosing = enclosing
        self.values: Dict[str, Any] = {}

    def define(self, name: str, value: Any):
        # redeclaring in the same scope simply replaces the binding
        self.values[name] = value

    def get(self, name: Token) -> Any:
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                return env.values[name.lexeme]
            env = env.enclosing
        raise NovaRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any):
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                env.values[name.lexeme] = value
                return
            env = env.enclosing
        raise NovaRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    @property
    def depth(self) -> int:
        """Number of enclosing scopes above this one."""
        count = 0
        env = self.enclosing
        while env is not None:
            count += 1
            env = env.enclosing
        return count
