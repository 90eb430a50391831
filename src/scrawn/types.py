"""Typed AST for pricing expressions.

A ``PriceExpr`` is one of three immutable node shapes:

- ``AmountExpr``: a literal amount in cents.
- ``TagExpr``: a named price tag, resolved to a value by the backend.
- ``OpExpr``: an arithmetic operation over two or more sub-expressions,
  applied left to right.

Invariant:
- nodes returned by the builders in ``scrawn.builders`` are always valid;
  instantiating node classes directly bypasses validation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Tuple, Union


class OpType(str, Enum):
    """Supported arithmetic operations."""

    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"


@dataclass(frozen=True)
class AmountExpr:
    """A literal amount in cents."""

    value: int

    @property
    def kind(self) -> Literal["amount"]:
        return "amount"


@dataclass(frozen=True)
class TagExpr:
    """A reference to a named price tag."""

    name: str

    @property
    def kind(self) -> Literal["tag"]:
        return "tag"


@dataclass(frozen=True)
class OpExpr:
    """An arithmetic operation combining sub-expressions."""

    op: OpType
    args: Tuple["PriceExpr", ...]

    @property
    def kind(self) -> Literal["op"]:
        return "op"


PriceExpr = Union[AmountExpr, TagExpr, OpExpr]

# Builder input: a sub-expression or a raw number of cents.
ExprInput = Union[PriceExpr, int, float]
