"""User-defined procedure representation and argument binding for lis."""

from __future__ import annotations

from lis import SExpression, LispValue
from lis.errors import LisArityError
from lis.types.environment import Environment
from lis.types.symbol import Symbol


class UserProcedure:
    """A named procedure created by define-func.

    `env` is only set when closures are enabled; otherwise the procedure
    carries no environment and runs in a child of whichever env calls it.
    """

    __slots__ = ("name", "params", "body", "env")

    def __init__(
        self,
        name: str,
        params: list[str],
        body: list[SExpression],
        env: Environment | None = None,
    ):
        self.name: str = name
        self.params: list[str] = params
        self.body: list[SExpression] = body
        self.env: Environment | None = env

    def __str__(self) -> str:
        return f"user-function:{self.name}"

    def __repr__(self) -> str:
        return f"UserProcedure({self.name!r}, {self.params!r})"

    def extend_env(self, args: list[LispValue], caller_env: Environment) -> Environment:
        """Bind `args` positionally to the parameters in a fresh child env.

        The parent is the captured env when there is one, else `caller_env`.
        """
        if len(args) != len(self.params):
            raise LisArityError(
                f"{self.name} expects {len(self.params)} argument(s), got {len(args)}"
            )
        new_env = Environment(outer=self.env if self.env is not None else caller_env)
        for param, arg in zip(self.params, args):
            new_env.define(Symbol(param), arg)
        return new_env
