"""`modpack pack` command.

Packs the module at `--path` (default: current directory) as VERSION into
OUTPUT_DIRECTORY (default: current directory, which also skips the go.mod copy).

Exit codes:
- 0: all three artifacts written
- 1: any pack step failed (message on stderr)
- 2: usage error
"""

from __future__ import annotations

import logging

import typer

from modpack.bundle.pack import pack_module
from modpack.core.errors import PackError


def register(app: typer.Typer) -> None:
    @app.command("pack")
    def pack(
        version: str = typer.Argument(..., help="Version label, e.g. v1.2.3 (used verbatim)."),
        output_directory: str = typer.Argument(".", help="Existing directory to write the pack into."),
        path: str = typer.Option(".", "--path", help="Module root containing go.mod."),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each step and archived file."),
    ) -> None:
        """Pack a module into source.zip, <version>.info and go.mod."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

        try:
            result = pack_module(path, version, output_directory)
        except PackError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(code=1) from e

        typer.echo(str(result.archive_path))
