"""Debit field boundary between pricing values and outbound requests.

An event debits exactly one of a literal amount, a named price tag, or a
pricing expression. ``Debit.to_fields`` produces the single populated request
field; the transport layer embeds it verbatim.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import PricingExpressionError, ScrawnValidationError
from .serialize import serialize_expr
from .types import PriceExpr
from .validate import validate_amount, validate_expr, validate_tag_name

logger = logging.getLogger(__name__)

__all__ = ["Debit", "build_debit"]


@dataclass(frozen=True)
class Debit:
    amount: Optional[int] = None
    tag: Optional[str] = None
    expr: Optional[PriceExpr] = None

    @classmethod
    def of_amount(cls, cents: int) -> "Debit":
        return build_debit(amount=cents)

    @classmethod
    def of_tag(cls, name: str) -> "Debit":
        return build_debit(tag=name)

    @classmethod
    def of_expr(cls, expr: PriceExpr) -> "Debit":
        return build_debit(expr=expr)

    def to_fields(self) -> Dict[str, Any]:
        if self.amount is not None:
            return {"debit_amount": self.amount}
        if self.tag is not None:
            return {"debit_tag": self.tag}
        return {"debit_expr": serialize_expr(self.expr)}


def build_debit(
    amount: Optional[int] = None,
    tag: Optional[str] = None,
    expr: Optional[PriceExpr] = None,
) -> Debit:
    """Validate and assemble a debit.

    Raises:
        ScrawnValidationError: unless exactly one field is provided and valid.
    """
    provided = [name for name, value in (("amount", amount), ("tag", tag), ("expr", expr)) if value is not None]
    if len(provided) != 1:
        raise ScrawnValidationError("Exactly one of debit_amount, debit_tag or debit_expr must be provided")

    try:
        if amount is not None:
            validate_amount(amount)
            if amount < 0:
                raise PricingExpressionError(f"debit_amount must be non-negative, got: {amount}")
            amount = int(amount)
        elif tag is not None:
            validate_tag_name(tag)
        else:
            validate_expr(expr)
    except PricingExpressionError as exc:
        raise ScrawnValidationError(f"Invalid debit_{provided[0]}: {exc.message}") from exc

    logger.debug("Built debit from %s", provided[0])
    return Debit(amount=amount, tag=tag, expr=expr)
