"""Runtime environment for lis.

The Environment stores bindings of Symbols to values and supports nested
scopes via an `outer` link. A child references its parent but never writes
into it except through `set`.
"""

from __future__ import annotations

import logging
from typing import Optional

from lis import LispValue
from lis.errors import LisTypeError, LisUnboundVariable
from lis.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any previous binding.

        Raises LisTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LisTypeError(f"Cannot define {name!r}: not a symbol")
        logger.debug("define %s in env %#x", name, id(self))
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Overwrite an existing binding for `name` in the frame that owns it.

        Raises LisUnboundVariable if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise LisUnboundVariable(str(name), f"Cannot set! unbound variable: {name}")
        logger.debug("set! %s in env %#x", name, id(env))
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Return the value bound to `name`, walking outward through parents.

        Raises LisUnboundVariable if no frame binds it.
        """
        env = self.find(name)
        if env is None:
            raise LisUnboundVariable(str(name))
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)
