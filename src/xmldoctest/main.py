"""Command-line interface for xmldoctest."""

import json
import logging
from pathlib import Path
from typing import Any

import typer

from . import __version__
from .config import load_config
from .context import ExecutionContext
from .documentation import load_documentation
from .exceptions import DocTestException
from .extract import extract_examples
from .generator import generate_for_file
from .runner import STATUS_ERROR, STATUS_FAILED, collect_doctests, run_doctests

app = typer.Typer(help="Run examples from XML documentation files")

SOURCE_HELP = "XML documentation file (path or http(s) URL)"


@app.command(name="list")
def list_examples(
    source: str = typer.Argument(..., help=SOURCE_HELP),
    as_json: bool = typer.Option(False, "--json", help="Output JSON instead of text"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print JSON output"),
):
    """List the executable examples in a documentation file."""
    try:
        examples = list(extract_examples(load_documentation(source)))
    except DocTestException as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    if as_json:
        payload = _with_meta({"examples": [{"name": example.name, "record": example.record} for example in examples]})
        typer.echo(json.dumps(payload, indent=2 if pretty else None))
        return
    for example in examples:
        typer.echo(example.name)


@app.command()
def run(
    source: str = typer.Argument(..., help=SOURCE_HELP),
    using: list[str] = typer.Option(None, "--using", "-u", help="Module to import before each example"),
    comment: str | None = typer.Option(None, "--comment", help="Line comment token of expected output (default: #)"),
    config_file: Path | None = typer.Option(None, "--config", help="pyproject.toml to read settings from"),
    as_json: bool = typer.Option(False, "--json", help="Output JSON instead of text"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print JSON output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
):
    """Run every example in a documentation file and verify its output."""
    _configure_logging(verbose)
    try:
        config = load_config(config_file).override(usings=using, comment=comment)
        records = load_documentation(source)
    except DocTestException as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    preamble = ExecutionContext.from_usings(config.usings)
    outcomes = run_doctests(collect_doctests(records, preamble, comment=config.comment))
    failed = [outcome for outcome in outcomes if not outcome.passed]
    if as_json:
        payload = _with_meta(
            {
                "total": len(outcomes),
                "failed": len(failed),
                "results": [outcome.to_dict() for outcome in outcomes],
            }
        )
        typer.echo(json.dumps(payload, indent=2 if pretty else None))
    else:
        for outcome in outcomes:
            typer.echo(f"{outcome.status.upper():<6} {outcome.name}")
            if outcome.status == STATUS_ERROR:
                typer.echo(f"  {outcome.message}")
            elif outcome.status == STATUS_FAILED:
                _emit_failure(outcome)
        typer.echo(f"{len(outcomes) - len(failed)} of {len(outcomes)} examples passed.")
    if failed:
        raise typer.Exit(1)


@app.command()
def generate(
    source: Path = typer.Argument(..., help="XML documentation file"),
    class_name: str | None = typer.Option(None, "--class", help="Name of the generated test class"),
    using: list[str] = typer.Option(None, "--using", "-u", help="Module to import in the generated module"),
    comment: str | None = typer.Option(None, "--comment", help="Line comment token of expected output (default: #)"),
    config_file: Path | None = typer.Option(None, "--config", help="pyproject.toml to read settings from"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the module to a file"),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files"),
):
    """Generate a pytest module from the examples in a documentation file."""
    try:
        config = load_config(config_file).override(usings=using, comment=comment, class_name=class_name)
        result = generate_for_file(source, class_name=config.class_name, usings=config.usings, comment=config.comment)
    except DocTestException as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    for diagnostic in result.diagnostics:
        typer.echo(f"{diagnostic}", err=True)
    if result.source is None:
        raise typer.Exit(1)
    if output:
        if output.exists() and not force:
            typer.echo(f"File exists: {output} (use --force to overwrite)", err=True)
            raise typer.Exit(1)
        output.write_text(result.source, encoding="utf-8")
    else:
        typer.echo(result.source, nl=False)
    if result.diagnostics:
        raise typer.Exit(1)


def main():
    """Entry point for the CLI."""
    app()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _emit_failure(outcome) -> None:
    if outcome.expected is None:
        typer.echo(f"  {outcome.message}")
        return
    typer.echo("  Expected:")
    for line in outcome.expected:
        typer.echo(f"    {line!r}")
    typer.echo("  Actual:")
    for line in outcome.actual:
        typer.echo(f"    {line!r}")


def _with_meta(payload: dict[str, Any]) -> dict[str, Any]:
    meta = {
        "generator": {
            "name": "xmldoctest",
            "version": __version__,
        }
    }
    combined = dict(payload)
    combined["_meta"] = meta
    return combined


if __name__ == "__main__":
    main()
