"""
Token-Printing REPL
===================

Reads source one line at a time, lexes each line with a fresh Lexer and
prints every token until END_OF_INPUT. Nothing carries over between lines.

Input streams may be text or binary. Binary lines are handed to the lexer
undecoded, so malformed UTF-8 is reported as an encoding error for that
line and the loop moves on to the next one.

Example session:
    >> let x = 1;
    LET 'let'
    IDENTIFIER 'x'
    ASSIGN '='
    INTEGER_LITERAL '1'
    SEMICOLON ';'
    >>
"""

import logging
from typing import IO, AnyStr, Optional

from monkeyi.config import PROMPT, ReplConfig
from monkeyi.errors import InvalidEncodingError
from monkeyi.lexer import Lexer, Source
from monkeyi.token import Token, TokenKind


logger = logging.getLogger(__name__)

__all__ = ["PROMPT", "format_token", "lex_source", "start"]


def format_token(token: Token, config: Optional[ReplConfig] = None) -> str:
    """Render a token for display, optionally prefixed with its byte offset."""
    if config is not None and config.show_offsets:
        return f"@{token.offset} {token}"
    return str(token)


def _write_tokens(lexer: Lexer, out_stream: IO[str], config: ReplConfig) -> int:
    """Print every token before END_OF_INPUT; return the ILLEGAL count."""
    illegal = 0
    for token in lexer.tokenize():
        if token.kind is TokenKind.END_OF_INPUT:
            break
        out_stream.write(format_token(token, config) + "\n")
        if token.kind is TokenKind.ILLEGAL:
            illegal += 1
            if config.echo_illegal_warnings:
                out_stream.write(
                    f"warning: illegal character {token.literal!r} "
                    f"at byte {token.offset}\n"
                )
    return illegal


def lex_source(
    source: Source,
    out_stream: IO[str],
    config: Optional[ReplConfig] = None,
) -> int:
    """
    Tokenize one complete buffer and print its tokens.

    Args:
        source: Complete source text, as str or UTF-8 bytes
        out_stream: Where tokens are written
        config: Display settings (defaults if omitted)

    Returns:
        Number of ILLEGAL tokens encountered

    Raises:
        InvalidEncodingError: If the source is not well-formed Unicode
    """
    config = config or ReplConfig()
    return _write_tokens(Lexer(source), out_stream, config)


def _strip_line_end(line: AnyStr) -> AnyStr:
    if isinstance(line, bytes):
        return line.rstrip(b"\r\n")
    return line.rstrip("\r\n")


def start(
    in_stream: IO,
    out_stream: IO[str],
    config: Optional[ReplConfig] = None,
) -> int:
    """
    Run the read-lex-print loop until the input stream ends.

    Args:
        in_stream: Text or binary stream to read lines from
        out_stream: Text stream for prompts and tokens
        config: REPL settings (defaults if omitted)

    Returns:
        Number of lines processed
    """
    config = config or ReplConfig()
    lines = 0

    while True:
        out_stream.write(config.prompt)
        out_stream.flush()

        line = in_stream.readline()
        if not line:
            return lines
        lines += 1

        try:
            lexer = Lexer(_strip_line_end(line))
        except InvalidEncodingError as e:
            logger.info(f"Skipping line {lines}: {e.message}")
            out_stream.write(f"{e}\n")
            continue

        _write_tokens(lexer, out_stream, config)
