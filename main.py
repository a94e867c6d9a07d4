from typing import List, Optional, Tuple

import typer

import dependencies
import utils
from atom.exceptions import TimestampError
from config import get_conf
from jsonfeed.exceptions import ParseError

PROGRAM = "jsonfeed2atom"
VERSION = "0.1.0"

HELP = f"""{PROGRAM} {VERSION}

Converts a JSON Feed to Atom. Learn about JSON Feed: https://jsonfeed.org/

Usage: {PROGRAM} [[input] output]

input is a path to a JSON Feed file, stdin is read when it is missing.
output is a path to an Atom file (use - to write to stdout).
"""

app = typer.Typer(
    add_completion=False, rich_markup_mode=None, context_settings={"help_option_names": ["-h", "--help"]}
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"{PROGRAM} {VERSION}")
        raise typer.Exit()


def split_paths(paths: List[str]) -> Tuple[Optional[str], Optional[str]]:
    """Returns (input, output) from the positional arguments, a single one is the output."""
    if len(paths) > 2:
        raise typer.BadParameter("expected at most two paths: [[input] output]")
    if len(paths) == 2:
        return paths[0], paths[1]
    if len(paths) == 1:
        return None, paths[0]
    return None, None


@app.command(help=HELP)
def convert(
        paths: Optional[List[str]] = typer.Argument(None, metavar="[[input] output]", show_default=False),
        force: bool = typer.Option(
            False, "--force", "-f", help="rewrite file even if modification time is newer than the feed"
        ),
        version: bool = typer.Option(
            False, "--version", callback=_version_callback, is_eager=True,
            help="show version information and exit"
        ),
):
    conf = get_conf()
    utils.init_logging(level=conf.log_level.value)

    input_path, output_path = split_paths(list(paths or []))
    source_ = dependencies.get_source(input_path)
    converter = dependencies.get_converter(output_path, force=force or conf.force, escape=conf.escape_xml)

    try:
        converter.convert(source_.read())
    except ParseError as e:
        typer.echo("Cannot parse feed.", err=True)
        raise typer.Exit(code=1) from e
    except TimestampError as e:
        typer.echo(f"Cannot determine feed update time: {e}", err=True)
        raise typer.Exit(code=1) from e
    except OSError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
