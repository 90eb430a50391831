"""Strict conversion between pricing expressions and JSON-compatible dicts.

The dict shape is ``{"kind": "amount", "value": 250}``,
``{"kind": "tag", "name": "FEE"}`` or
``{"kind": "op", "op": "ADD", "args": [...]}``. Decoding builds through the
validating builders, so a decoded expression is always well formed.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from .builders import add, amount, div, mul, sub, tag
from .errors import PricingExpressionError
from .types import AmountExpr, OpExpr, OpType, PriceExpr, TagExpr

_BUILDERS: Dict[OpType, Callable[..., OpExpr]] = {
    OpType.ADD: add,
    OpType.SUB: sub,
    OpType.MUL: mul,
    OpType.DIV: div,
}

_REQUIRED_FIELDS: Dict[str, tuple[str, ...]] = {
    "amount": ("value",),
    "tag": ("name",),
    "op": ("op", "args"),
}


def expr_to_dict(expr: PriceExpr) -> Dict[str, Any]:
    if isinstance(expr, AmountExpr):
        return {"kind": "amount", "value": expr.value}
    if isinstance(expr, TagExpr):
        return {"kind": "tag", "name": expr.name}
    if isinstance(expr, OpExpr):
        return {
            "kind": "op",
            "op": OpType(expr.op).value,
            "args": [expr_to_dict(arg) for arg in expr.args],
        }
    raise PricingExpressionError(f"Unsupported expression node: {type(expr).__name__}")


def expr_from_dict(data: Any, path: str = "$") -> PriceExpr:
    """Decode and validate an expression from its dict form.

    Raises:
        PricingExpressionError: if the shape is malformed or any node breaks
            a pricing rule. Shape errors name the offending JSON path.
    """
    if not isinstance(data, dict):
        raise PricingExpressionError(f"Expression at {path} must be a JSON object, got {type(data).__name__}")

    kind = data.get("kind")
    if not isinstance(kind, str) or kind not in _REQUIRED_FIELDS:
        raise PricingExpressionError(f"Expression at {path} has unknown kind: {kind!r}")
    for field_name in _REQUIRED_FIELDS[kind]:
        if field_name not in data:
            raise PricingExpressionError(f"Expression at {path} missing required field '{field_name}'")

    if kind == "amount":
        return amount(data["value"])
    if kind == "tag":
        return tag(data["name"])

    raw_op = data["op"]
    try:
        op = OpType(str(raw_op).upper())
    except ValueError:
        raise PricingExpressionError(f"Expression at {path} has unknown operator: {raw_op!r}") from None
    args = data["args"]
    if not isinstance(args, list):
        raise PricingExpressionError(
            f"Invalid field 'args' at {path}: expected list, got {type(args).__name__}"
        )
    return _BUILDERS[op](*(expr_from_dict(arg, f"{path}.args[{index}]") for index, arg in enumerate(args)))
