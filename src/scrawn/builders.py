"""Builder functions for pricing expressions.

Builders are the public construction path: each one assembles a node and
validates it before returning, so every value they produce is well formed.

Example::

    from scrawn import add, mul, tag

    # (PREMIUM_CALL * 3) + EXTRA_FEE + 250 cents
    expr = add(mul(tag("PREMIUM_CALL"), 3), tag("EXTRA_FEE"), 250)
"""

from __future__ import annotations

import logging
import math
from typing import Any, TypeVar

from .errors import PricingExpressionError
from .types import AmountExpr, ExprInput, OpExpr, OpType, PriceExpr, TagExpr
from .validate import validate_expr

logger = logging.getLogger(__name__)

__all__ = ["amount", "tag", "add", "sub", "mul", "div", "to_expr"]

_E = TypeVar("_E", AmountExpr, TagExpr, OpExpr)


def _coerce_cents(value: Any) -> Any:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def to_expr(value: ExprInput) -> PriceExpr:
    """Wrap a raw number as an ``AmountExpr``; pass expressions through."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return AmountExpr(value=_coerce_cents(value))
    return value


def _checked(expr: _E) -> _E:
    try:
        validate_expr(expr)
    except PricingExpressionError as exc:
        logger.debug("Rejected pricing expression %r: %s", expr, exc.message)
        raise
    return expr


def tag(name: str) -> TagExpr:
    """Reference a named price tag; the backend resolves its value."""
    return _checked(TagExpr(name=name))


def amount(cents: int) -> AmountExpr:
    """Create an explicit amount literal in cents."""
    return _checked(AmountExpr(value=_coerce_cents(cents)))


def _op(op: OpType, args: tuple) -> OpExpr:
    return _checked(OpExpr(op=op, args=tuple(to_expr(arg) for arg in args)))


def add(*args: ExprInput) -> OpExpr:
    """arg1 + arg2 + ..."""
    return _op(OpType.ADD, args)


def sub(*args: ExprInput) -> OpExpr:
    """arg1 - arg2 - ..., left to right."""
    return _op(OpType.SUB, args)


def mul(*args: ExprInput) -> OpExpr:
    """arg1 * arg2 * ..."""
    return _op(OpType.MUL, args)


def div(*args: ExprInput) -> OpExpr:
    """arg1 / arg2 / ..., left to right.

    The backend performs integer division and truncates. Literal zero divisors
    are rejected here; tag divisors are checked by the backend.
    """
    return _op(OpType.DIV, args)
