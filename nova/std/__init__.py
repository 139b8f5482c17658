import time
from typing import Any, List

from nova.callable import NativeFunction
from nova.environment import Environment


def std_clock(args: List[Any]) -> Any:
    return time.time()


STANDARD_FUNCTIONS = [
    NativeFunction('clock', 0, std_clock),
]


def populate_std_environment(env: Environment) -> Environment:
    """Define the native functions every program starts with."""
    for fn in STANDARD_FUNCTIONS:
        env.define(fn.name, fn)
    return env
