"""
monkeyi - Token Printer Command-Line Interface
==============================================

Usage Examples
--------------
Interactive session (one lexer per line):
    $ monkeyi
    >> let five = 5;

Tokenize a whole file:
    $ monkeyi program.mk

Show byte offsets:
    $ monkeyi --offsets program.mk

Fail on unrecognised characters:
    $ monkeyi --strict program.mk
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from monkeyi import __version__
from monkeyi.cli.errors import ExitCode, handle_cli_exception
from monkeyi.config import ReplConfig
from monkeyi import repl


@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-p", "--prompt",
    type=str,
    default=None,
    help="Prompt for interactive mode (default: '>> ' or $MONKEYI_PROMPT)",
)
@click.option(
    "--offsets",
    is_flag=True,
    default=False,
    help="Prefix each token with its byte offset",
)
@click.option(
    "--warn-illegal",
    is_flag=True,
    default=False,
    help="Print a warning line for each ILLEGAL token",
)
@click.option(
    "--strict",
    is_flag=True,
    help="With INPUT_FILE, exit with status 1 if any ILLEGAL token is found",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging on stderr)",
)
@click.version_option(version=__version__, prog_name="monkeyi")
def main(
    input_file: Optional[Path],
    prompt: Optional[str],
    offsets: bool,
    warn_illegal: bool,
    strict: bool,
    verbose: bool,
) -> None:
    """
    Print the tokens of monkey source code.

    With INPUT_FILE, the whole file is tokenized as one buffer. Without it,
    lines are read from standard input and each line is tokenized on its
    own until input ends.

    \b
    Examples:
        monkeyi                      # Interactive
        monkeyi program.mk           # Tokenize a file
        monkeyi --offsets prog.mk    # Show byte offsets
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    config = ReplConfig.from_env()
    if prompt is not None:
        config.prompt = prompt
    if offsets:
        config.show_offsets = True
    if warn_illegal:
        config.echo_illegal_warnings = True

    stdout = click.get_text_stream("stdout")

    try:
        if input_file is None:
            repl.start(click.get_binary_stream("stdin"), stdout, config)
            return

        illegal = repl.lex_source(input_file.read_bytes(), stdout, config)

        if verbose:
            click.echo(f"{illegal} illegal token(s) in {input_file}", err=True)

        if strict and illegal:
            click.echo(
                f"error: {illegal} illegal token(s) in {input_file}", err=True
            )
            sys.exit(ExitCode.LEX_ERROR)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
