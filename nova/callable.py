from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, List

if TYPE_CHECKING:
    from .interpreter import Interpreter


class NovaCallable(ABC):
    """Anything that can appear as the callee of a call expression."""

    @abstractmethod
    def arity(self) -> int:
        ...

    @abstractmethod
    def call(self, interpreter: 'Interpreter', arguments: List[Any]) -> Any:
        ...


@dataclass
class NativeFunction(NovaCallable):
    name: str
    parameters: int
    fn: Callable[[List[Any]], Any]

    def arity(self) -> int:
        return self.parameters

    def call(self, interpreter: 'Interpreter', arguments: List[Any]) -> Any:
        return self.fn(arguments)

    def __str__(self) -> str:
        return f"<native fn {self.name}>"
