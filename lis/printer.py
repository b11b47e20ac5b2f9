"""
Renders lis values back into their canonical S-expression text.

Atoms and lists render as text the reader accepts again; procedures render
as opaque placeholders.
"""

from lis import LispValue
from lis.errors import LisTypeError
from lis.types.symbol import Symbol
from lis.types.user_procedure import UserProcedure


def sexpr(value: LispValue) -> str:
    """Return the canonical text form of `value`."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # repr keeps a '.', 'e', 'inf' or 'nan', so the text reads back as a float
        return repr(value)
    if isinstance(value, Symbol):
        return value.name
    if isinstance(value, list):
        return "(" + " ".join(sexpr(item) for item in value) + ")"
    if isinstance(value, UserProcedure):
        return str(value)
    if callable(value):
        return "function"
    raise LisTypeError(f"Cannot render {value!r}")
