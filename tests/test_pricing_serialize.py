import pytest

from scrawn import (
    AmountExpr,
    OpExpr,
    OpType,
    PricingExpressionError,
    TagExpr,
    add,
    amount,
    div,
    mul,
    pretty_print_expr,
    serialize_expr,
    sub,
    tag,
)


@pytest.mark.parametrize("cents, expected", [(100, "100"), (0, "0"), (-50, "-50"), (3.0, "3")])
def test_serialize_amounts(cents, expected):
    assert serialize_expr(amount(cents)) == expected


def test_serialize_tag():
    assert serialize_expr(tag("PREMIUM_CALL")) == "tag('PREMIUM_CALL')"


def test_serialize_escapes_single_quotes_in_tag_names():
    # Builders reject quotes; ad-hoc nodes still serialize unambiguously.
    assert serialize_expr(TagExpr(name="it's")) == "tag('it\\'s')"


@pytest.mark.parametrize(
    "expr, expected",
    [
        (add(100, 200), "add(100,200)"),
        (sub(100, 50), "sub(100,50)"),
        (mul(10, 5), "mul(10,5)"),
        (div(100, 2), "div(100,2)"),
        (add(100, tag("FEE")), "add(100,tag('FEE'))"),
        (div(100, tag("DIVISOR")), "div(100,tag('DIVISOR'))"),
    ],
)
def test_serialize_operations(expr, expected):
    assert serialize_expr(expr) == expected


def test_serialize_nested_billing_expression():
    expr = add(mul(tag("PREMIUM_CALL"), 3), tag("EXTRA_FEE"), 250)
    assert serialize_expr(expr) == "add(mul(tag('PREMIUM_CALL'),3),tag('EXTRA_FEE'),250)"


def test_serialize_per_token_pricing():
    expr = add(
        mul(tag("INPUT_TOKENS"), tag("INPUT_RATE")),
        mul(tag("OUTPUT_TOKENS"), tag("OUTPUT_RATE")),
    )
    assert serialize_expr(expr) == (
        "add(mul(tag('INPUT_TOKENS'),tag('INPUT_RATE')),mul(tag('OUTPUT_TOKENS'),tag('OUTPUT_RATE')))"
    )


def test_serialize_discount_calculation():
    expr = sub(tag("SUBTOTAL"), div(mul(tag("SUBTOTAL"), tag("DISCOUNT_PERCENT")), 100))
    assert serialize_expr(expr) == "sub(tag('SUBTOTAL'),div(mul(tag('SUBTOTAL'),tag('DISCOUNT_PERCENT')),100))"


def test_serialize_has_no_whitespace():
    expr = div(add(mul(tag("INPUT"), 2), mul(tag("OUTPUT"), 3)), 100)
    serialized = serialize_expr(expr)
    assert not any(ch.isspace() for ch in serialized)


def test_structurally_equal_expressions_serialize_identically():
    first = add(mul(tag("A"), 3), div(tag("B"), 2))
    second = add(mul(tag("A"), 3), div(tag("B"), 2))
    assert first == second
    assert serialize_expr(first) == serialize_expr(second) == serialize_expr(first)


@pytest.mark.parametrize(
    "left, right",
    [
        pytest.param(add(1, 2), sub(1, 2), id="operator"),
        pytest.param(sub(1, 2), sub(2, 1), id="argument_order"),
        pytest.param(add(add(1, 2), 3), add(1, add(2, 3)), id="nesting"),
        pytest.param(add(1, 2, 3), add(add(1, 2), 3), id="flattening"),
        pytest.param(tag("A"), tag("a"), id="tag_case"),
    ],
)
def test_structurally_different_expressions_serialize_differently(left, right):
    assert serialize_expr(left) != serialize_expr(right)


def test_pretty_print_leaves_match_canonical_tokens():
    assert pretty_print_expr(amount(100)) == "100"
    assert pretty_print_expr(tag("PREMIUM")) == "tag('PREMIUM')"


def test_pretty_print_nested_default_indent():
    expr = add(mul(tag("PREMIUM"), 3), 100)
    assert pretty_print_expr(expr) == "\n".join(
        [
            "add(",
            "  mul(",
            "    tag('PREMIUM'),",
            "    3",
            "  ),",
            "  100",
            ")",
        ]
    )


def test_pretty_print_custom_indent():
    assert pretty_print_expr(sub(tag("TOTAL"), 50), indent=4) == "sub(\n    tag('TOTAL'),\n    50\n)"


def test_pretty_print_does_not_read_project_config(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[tool.scrawn\n", encoding="utf-8")
    assert pretty_print_expr(add(1, 2)) == "add(\n  1,\n  2\n)"


def test_pretty_print_collapses_whitespace_to_canonical_form():
    expr = div(add(mul(tag("INPUT"), 2), mul(tag("OUTPUT"), 3)), 100)
    collapsed = "".join(pretty_print_expr(expr, indent=3).split())
    assert collapsed == serialize_expr(expr)


def test_pretty_print_empty_op_node():
    assert pretty_print_expr(OpExpr(op=OpType.ADD, args=())) == "add()"


def test_serialize_ad_hoc_integral_float_amount():
    assert serialize_expr(AmountExpr(value=7.0)) == "7"


@pytest.mark.parametrize(
    "value, message",
    [(2.5, "integer (cents)"), (float("inf"), "finite number"), (float("nan"), "finite number")],
)
def test_serialize_rejects_ad_hoc_fractional_or_non_finite_amount(value, message):
    with pytest.raises(PricingExpressionError) as excinfo:
        serialize_expr(OpExpr(op=OpType.ADD, args=(AmountExpr(value=value), AmountExpr(1))))
    assert message in excinfo.value.message
    with pytest.raises(PricingExpressionError):
        pretty_print_expr(AmountExpr(value=value))
