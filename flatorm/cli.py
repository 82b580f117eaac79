"""flatorm CLI - print the SQL flatorm generates for record classes."""

import importlib
from typing import Optional

import typer
from typing_extensions import Annotated

from flatorm import __version__
from flatorm.core.config import config
from flatorm.core.introspector import extract
from flatorm.core.registry import get_type_mapper
from flatorm.exceptions import FlatORMError, IntrospectionError
from flatorm.models.dialect import Dialect
from flatorm.operators.sql.generator import get_generator
from flatorm.utils.logging import setup_logging

app = typer.Typer(
    name="flatorm",
    help="flatorm - SQL for flat, column-annotated records",
    add_completion=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"flatorm version {__version__}")
        raise typer.Exit()


def _load_record_class(target: str) -> type:
    """Import a record class given as ``module:Class`` or ``module.Class``."""
    if ":" in target:
        module_path, _, class_name = target.partition(":")
    else:
        module_path, _, class_name = target.rpartition(".")

    if not module_path or not class_name:
        raise typer.BadParameter(f"Expected 'module:Class', got '{target}'")

    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise typer.BadParameter(f"Cannot import module '{module_path}': {e}") from e

    try:
        return getattr(module, class_name)
    except AttributeError as e:
        raise typer.BadParameter(f"Module '{module_path}' has no class '{class_name}'") from e


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """flatorm - derive table schemas and SQL from record classes."""
    setup_logging()


@app.command()
def schema(
    target: Annotated[
        str,
        typer.Argument(help="Record class as 'module:Class'"),
    ],
    dialect: Annotated[
        Optional[str],
        typer.Option("--dialect", "-d", help="sqlite, postgres or mysql (default: FLATORM_DEFAULT_DIALECT)"),
    ] = None,
) -> None:
    """Print the CREATE TABLE statement for a record class."""
    dialect = dialect or config.default_dialect
    record_class = _load_record_class(target)

    try:
        record = record_class()
    except TypeError as e:
        typer.secho(
            f"Record class must be constructible with defaults: {e}", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=1)

    try:
        descriptor = extract(record, resolve_types=True, dialect=dialect)
        statement = get_generator(dialect).create_table(descriptor)
    except IntrospectionError as e:
        typer.secho(f"Invalid record: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except FlatORMError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if statement.is_empty:
        typer.secho(f"No CREATE TABLE shape for dialect '{dialect}'", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(statement.sql)


@app.command()
def dialects() -> None:
    """List supported dialects and their identity column clause."""
    for dialect in Dialect:
        identity = get_type_mapper(dialect).identity_type()
        typer.echo(f"{dialect.value:<10} {identity}")


if __name__ == "__main__":
    app()
