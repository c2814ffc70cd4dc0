"""modpack CLI entrypoint.

`modpack pack` is the only command that touches the filesystem; it resolves
the three pack parameters from the command line and hands them to
`modpack.bundle.pack_module()`.
"""

from __future__ import annotations

import typer

app = typer.Typer(
    name="modpack",
    add_completion=False,
    no_args_is_help=True,
    help="Package a module directory into source.zip, <version>.info and go.mod.",
)


@app.callback()
def _callback() -> None:
    """Pack Go-style modules for a module proxy layout."""


@app.command("version")
def show_version() -> None:
    """Print the modpack release."""
    from modpack import __version__

    typer.echo(__version__)


# Commands live in their own modules; `pack` pulls in the bundle package.
from modpack.cli.commands import pack as _pack_cmd  # noqa: E402

_pack_cmd.register(app)
