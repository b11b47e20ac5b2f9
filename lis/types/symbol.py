from __future__ import annotations
import sys


class Symbol:
    """An identifier read from source; evaluates by environment lookup.

    Names are interned, so equal symbols share one string and compare by
    identity of that string. `true` and `false` never become symbols when
    read, though a Symbol with either name can still be bound directly.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
