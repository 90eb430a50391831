import json
import logging
import sys

import click

from . import __version__ as VERSION
from .config import refresh_config
from .errors import PricingExpressionError, ScrawnError
from .schema import expr_from_dict
from .serialize import pretty_print_expr, serialize_expr

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.pass_context
@click.option("--version", is_flag=True, help="Show the version and exit.")
def main(ctx, version):
    """scrawn pricing expression tools"""
    try:
        config = refresh_config()
    except ScrawnError as exc:
        _emit_structured_error(exc.explanation, code=exc.error_code, category=exc.category)
    logging.basicConfig(level=config.effective_log_level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"config": config}

    if version:
        click.echo(f"scrawn version {VERSION}")
        return
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _emit_structured_error(message: str, *, code: str, category: str, as_json: bool = False, exit_code: int = 2):
    payload = {
        "ok": False,
        "expression": None,
        "error": {
            "code": code,
            "category": category,
            "message": message,
        },
    }
    if as_json:
        click.echo(json.dumps(payload, indent=2, sort_keys=True))
    else:
        click.echo(f"scrawn error [{category}:{code}]: {message}", err=True)
    sys.exit(exit_code)


def _load_expression(source, as_json: bool = False):
    try:
        data = json.load(source)
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError from the utf-8 reader.
        _emit_structured_error(
            f"Input is not valid UTF-8 JSON: {exc}", code="INVALID_JSON", category="INPUT", as_json=as_json
        )
    try:
        return expr_from_dict(data)
    except PricingExpressionError as exc:
        logger.debug("Rejected expression from %s", getattr(source, "name", "<input>"))
        _emit_structured_error(
            exc.message, code="PRICING_EXPRESSION", category="VALIDATION", as_json=as_json, exit_code=1
        )


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--pretty", is_flag=True, help="Emit the indented, multi-line form")
@click.option("--indent", type=click.IntRange(min=0), default=None, help="Indent width for --pretty")
@click.pass_context
def serialize(ctx, source, pretty, indent):
    """Print the canonical form of a JSON-encoded expression."""
    expr = _load_expression(source)
    if pretty:
        if indent is None:
            indent = ctx.obj["config"].pretty_indent
        click.echo(pretty_print_expr(expr, indent))
    else:
        click.echo(serialize_expr(expr))


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--json", "json_output", is_flag=True, help="Emit a machine-readable report")
def validate(source, json_output):
    """Check a JSON-encoded expression against the pricing rules."""
    expr = _load_expression(source, as_json=json_output)
    canonical = serialize_expr(expr)
    if json_output:
        click.echo(json.dumps({"ok": True, "expression": canonical, "error": None}, indent=2, sort_keys=True))
    else:
        click.echo(f"OK: {canonical}")


if __name__ == "__main__":
    main()
