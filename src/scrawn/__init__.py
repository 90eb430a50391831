"""Pricing expression DSL for the scrawn billing SDK.

Build expressions from literal cents, named price tags and arithmetic
operators, then serialize them for the backend evaluator::

    from scrawn import add, mul, tag, serialize_expr

    expr = add(mul(tag("PREMIUM_CALL"), 3), tag("EXTRA_FEE"), 250)
    serialize_expr(expr)  # "add(mul(tag('PREMIUM_CALL'),3),tag('EXTRA_FEE'),250)"
"""

__version__ = "0.1.0"

from .builders import add, amount, div, mul, sub, tag, to_expr
from .debit import Debit, build_debit
from .errors import PricingExpressionError, ScrawnConfigError, ScrawnError, ScrawnValidationError
from .schema import expr_from_dict, expr_to_dict
from .serialize import pretty_print_expr, serialize_expr
from .types import AmountExpr, ExprInput, OpExpr, OpType, PriceExpr, TagExpr
from .validate import is_valid_expr, validate_expr

__all__ = [
    "__version__",
    "AmountExpr",
    "Debit",
    "ExprInput",
    "OpExpr",
    "OpType",
    "PriceExpr",
    "PricingExpressionError",
    "ScrawnConfigError",
    "ScrawnError",
    "ScrawnValidationError",
    "TagExpr",
    "add",
    "amount",
    "build_debit",
    "div",
    "expr_from_dict",
    "expr_to_dict",
    "is_valid_expr",
    "mul",
    "pretty_print_expr",
    "serialize_expr",
    "sub",
    "tag",
    "to_expr",
    "validate_expr",
]
