"""Canonical string encoding for pricing expressions.

Output format (no whitespace):

- Amount: ``250``
- Tag: ``tag('PREMIUM_CALL')``
- Operation: ``add(100,tag('FEE'),250)``

The backend evaluator parses this form, so it must stay byte-for-byte stable:
structurally equal trees always produce identical strings.
"""

from __future__ import annotations

from typing import Any, List

from .errors import PricingExpressionError
from .types import AmountExpr, OpExpr, OpType, PriceExpr, TagExpr
from .validate import validate_amount

__all__ = ["serialize_expr", "pretty_print_expr"]


def _amount_token(expr: AmountExpr) -> str:
    value = expr.value
    if isinstance(value, float):
        # Fractional or non-finite cents must never be truncated on the wire.
        validate_amount(value)
        value = int(value)
    return str(value)


def _tag_token(expr: TagExpr) -> str:
    escaped = expr.name.replace("'", "\\'")
    return f"tag('{escaped}')"


def _op_name(expr: OpExpr) -> str:
    return OpType(expr.op).value.lower()


def _unsupported(expr: Any) -> PricingExpressionError:
    return PricingExpressionError(f"Unsupported expression node: {type(expr).__name__}")


def serialize_expr(expr: PriceExpr) -> str:
    """Serialize an expression to its canonical single-line form."""
    if isinstance(expr, AmountExpr):
        return _amount_token(expr)
    if isinstance(expr, TagExpr):
        return _tag_token(expr)
    if isinstance(expr, OpExpr):
        return f"{_op_name(expr)}({','.join(serialize_expr(arg) for arg in expr.args)})"
    raise _unsupported(expr)


def pretty_print_expr(expr: PriceExpr, indent: int = 2) -> str:
    """Render an expression over multiple indented lines for logs.

    Example::

        add(
          mul(
            tag('PREMIUM'),
            3
          ),
          100
        )

    Not meant for wire transfer; use :func:`serialize_expr` for that.
    """
    return _pretty(expr, 0, max(0, indent))


def _pretty(expr: PriceExpr, level: int, indent: int) -> str:
    if isinstance(expr, AmountExpr):
        return _amount_token(expr)
    if isinstance(expr, TagExpr):
        return _tag_token(expr)
    if isinstance(expr, OpExpr):
        name = _op_name(expr)
        if not expr.args:
            return f"{name}()"
        child_pad = " " * ((level + 1) * indent)
        lines: List[str] = [child_pad + _pretty(arg, level + 1, indent) for arg in expr.args]
        return f"{name}(\n" + ",\n".join(lines) + "\n" + " " * (level * indent) + ")"
    raise _unsupported(expr)
