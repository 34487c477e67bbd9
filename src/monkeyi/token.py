"""
Token Definitions
=================

Token kinds, the Token value type and the keyword table for the monkey
language.

Token Categories
----------------
- Special: ILLEGAL, END_OF_INPUT
- Identifiers and literals: IDENTIFIER (letters only), INTEGER_LITERAL
- Operators: = + - ! * / < > == !=
- Delimiters: , ; ( ) { }
- Keywords: fn let true false if else return

Example Usage
-------------
>>> from monkeyi.token import Token, TokenKind, lookup_ident
>>> lookup_ident("let")
<TokenKind.LET: 22>
>>> lookup_ident("Let")
<TokenKind.IDENTIFIER: 3>
>>> Token(TokenKind.ASSIGN, "=") == Token(TokenKind.ASSIGN, "=", offset=9)
True
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Optional


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Closed set of token kinds produced by the lexer.

    Keywords are distinguished from identifiers so the parser never has
    to compare spellings.
    """

    # === Special ===
    ILLEGAL = auto()            # Unrecognised code point
    END_OF_INPUT = auto()       # Terminal token, empty literal

    # === Identifiers and Literals ===
    IDENTIFIER = auto()         # add, foobar, x, y
    INTEGER_LITERAL = auto()    # 1343456

    # === Operators ===
    ASSIGN = auto()             # =
    PLUS = auto()               # +
    MINUS = auto()              # -
    BANG = auto()               # !
    ASTERISK = auto()           # *
    SLASH = auto()              # /
    LESS_THAN = auto()          # <
    GREATER_THAN = auto()       # >
    EQUAL = auto()              # ==
    NOT_EQUAL = auto()          # !=

    # === Delimiters ===
    COMMA = auto()              # ,
    SEMICOLON = auto()          # ;
    LEFT_PAREN = auto()         # (
    RIGHT_PAREN = auto()        # )
    LEFT_BRACE = auto()         # {
    RIGHT_BRACE = auto()        # }

    # === Keywords ===
    FUNCTION = auto()           # fn
    LET = auto()                # let
    TRUE = auto()               # true
    FALSE = auto()              # false
    IF = auto()                 # if
    ELSE = auto()               # else
    RETURN = auto()             # return

    def is_keyword(self) -> bool:
        """Return True if this kind is a reserved word."""
        return self in _KEYWORD_KINDS

    def is_operator(self) -> bool:
        """Return True if this kind is an operator."""
        return self in _OPERATOR_KINDS

    def is_delimiter(self) -> bool:
        """Return True if this kind is a delimiter."""
        return self in _DELIMITER_KINDS


_OPERATOR_KINDS = frozenset({
    TokenKind.ASSIGN,
    TokenKind.PLUS,
    TokenKind.MINUS,
    TokenKind.BANG,
    TokenKind.ASTERISK,
    TokenKind.SLASH,
    TokenKind.LESS_THAN,
    TokenKind.GREATER_THAN,
    TokenKind.EQUAL,
    TokenKind.NOT_EQUAL,
})

_DELIMITER_KINDS = frozenset({
    TokenKind.COMMA,
    TokenKind.SEMICOLON,
    TokenKind.LEFT_PAREN,
    TokenKind.RIGHT_PAREN,
    TokenKind.LEFT_BRACE,
    TokenKind.RIGHT_BRACE,
})


# =============================================================================
# Keyword Table
# =============================================================================

# Read-only view; built once at import and shared by every lexer
KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    "fn": TokenKind.FUNCTION,
    "let": TokenKind.LET,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "return": TokenKind.RETURN,
})

_KEYWORD_KINDS = frozenset(KEYWORDS.values())


def lookup_keyword(spelling: str) -> Optional[TokenKind]:
    """
    Return the reserved kind for an exact keyword spelling, or None.

    Matching is case-sensitive with no normalization: "let" is a keyword,
    "Let" and "LET" are not.
    """
    return KEYWORDS.get(spelling)


def lookup_ident(spelling: str) -> TokenKind:
    """Classify a run of letters as a keyword or an IDENTIFIER."""
    kind = lookup_keyword(spelling)
    if kind is None:
        return TokenKind.IDENTIFIER
    return kind


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified unit of source text.

    Attributes:
        kind: The TokenKind classification
        literal: Exact source spelling ("" for END_OF_INPUT)
        offset: Byte offset of the token's first code point in the UTF-8
            buffer. Informational only; not part of equality.
    """
    kind: TokenKind
    literal: str
    offset: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.literal!r}, @{self.offset})"

    def __str__(self) -> str:
        return f"{self.kind.name} {self.literal!r}"
