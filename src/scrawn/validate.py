"""Client-side validation for pricing expressions.

The SDK validates only what is decidable without live data:

- non-finite or fractional amounts
- empty, padded or malformed tag names
- operations with fewer than 2 arguments
- division by a literal zero

Tag existence, division by a tag, overflow and negative results are left to
the backend evaluator.
"""

from __future__ import annotations

import math
import re
from typing import Any, Sequence

from .errors import PricingExpressionError
from .types import AmountExpr, OpExpr, OpType, TagExpr

TAG_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")


def validate_expr(expr: Any) -> None:
    """Validate a pricing expression tree.

    Raises:
        PricingExpressionError: on the first violation found, depth-first and
            left to right across operation arguments.
    """
    if isinstance(expr, AmountExpr):
        validate_amount(expr.value)
    elif isinstance(expr, TagExpr):
        validate_tag_name(expr.name)
    elif isinstance(expr, OpExpr):
        _validate_op(expr)
    else:
        raise PricingExpressionError(f"Unsupported expression node: {type(expr).__name__}")


def validate_amount(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PricingExpressionError(f"Amount must be a number, got: {type(value).__name__}")
    if isinstance(value, int):
        return
    if not math.isfinite(value):
        raise PricingExpressionError(f"Amount must be a finite number, got: {value}")
    if not value.is_integer():
        raise PricingExpressionError(
            f"Amount must be an integer (cents), got: {value}. "
            "Hint: Use cents instead of dollars (e.g., 250 instead of 2.50)"
        )


def validate_tag_name(name: Any) -> None:
    if not isinstance(name, str):
        raise PricingExpressionError(f"Tag name must be a string, got: {type(name).__name__}")
    if not name:
        raise PricingExpressionError("Tag name cannot be empty")
    stripped = name.strip()
    if not stripped:
        raise PricingExpressionError("Tag name cannot be only whitespace")
    if stripped != name:
        raise PricingExpressionError(f'Tag name cannot have leading or trailing whitespace: "{name}"')
    if TAG_NAME_RE.fullmatch(name) is None:
        raise PricingExpressionError(
            "Tag name must start with a letter or underscore and contain only "
            f'alphanumeric characters, underscores, or hyphens: "{name}"'
        )


def _validate_op(expr: OpExpr) -> None:
    try:
        op = OpType(expr.op)
    except ValueError:
        raise PricingExpressionError(f"Unknown operator: {expr.op!r}") from None

    args = expr.args
    if isinstance(args, (str, bytes)) or not isinstance(args, Sequence):
        raise PricingExpressionError(
            f"Operation {op.value.lower()} arguments must be a sequence, got: {type(args).__name__}"
        )
    if len(args) < 2:
        raise PricingExpressionError(
            f"Operation {op.value.lower()} requires at least 2 arguments, got: {len(args)}"
        )

    for arg in args:
        validate_expr(arg)

    if op is OpType.DIV:
        # Only literal divisors; tag and nested divisors are resolved remotely.
        for index in range(1, len(args)):
            arg = args[index]
            if isinstance(arg, AmountExpr) and arg.value == 0:
                raise PricingExpressionError(f"Division by zero: divisor at position {index + 1} is 0")


def is_valid_expr(expr: Any) -> bool:
    """Return True if ``expr`` passes :func:`validate_expr`."""
    try:
        validate_expr(expr)
    except PricingExpressionError:
        return False
    return True
