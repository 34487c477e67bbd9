"""
monkeyi - Lexer for the monkey Toy Language
===========================================

This package turns monkey source text into classified tokens for a parser.

Main Components
---------------
- **token**: TokenKind, Token and the keyword table
- **lexer**: Scanner (Unicode-aware cursor) and Lexer (token classifier)
- **repl**: line-oriented token printer
- **cli**: the ``monkeyi`` command

Quick Start
-----------
    >>> from monkeyi import Lexer, TokenKind
    >>> lexer = Lexer("x != 10")
    >>> [t.kind.name for t in lexer.tokenize()]
    ['IDENTIFIER', 'NOT_EQUAL', 'INTEGER_LITERAL', 'END_OF_INPUT']

Or from the command line:
    $ monkeyi program.mk
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from monkeyi.errors import MonkeyError, LexerError, InvalidEncodingError
from monkeyi.token import (
    KEYWORDS,
    Token,
    TokenKind,
    lookup_ident,
    lookup_keyword,
)
from monkeyi.lexer import Lexer, Scanner
from monkeyi.config import ReplConfig

__all__ = [
    "__version__",
    # Errors
    "MonkeyError",
    "LexerError",
    "InvalidEncodingError",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenKind",
    "lookup_ident",
    "lookup_keyword",
    # Lexer
    "Lexer",
    "Scanner",
    # REPL
    "ReplConfig",
]
