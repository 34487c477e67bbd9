"""
monkey Lexer (Tokenizer)
========================

This module converts monkey source text into a stream of tokens for the
parser. It is split into two cooperating pieces:

- **Scanner**: owns the immutable UTF-8 buffer and a cursor over its code
  points. It tracks byte offsets so multi-byte code points are never split.
- **Lexer**: pulls code points from the Scanner and produces exactly one
  Token per ``next_token()`` call.

Classification Order
--------------------
1. Whitespace is skipped (Unicode whitespace, no comment syntax)
2. End of input -> END_OF_INPUT with an empty literal, forever after
3. Punctuation, with one code point of lookahead for ``==`` and ``!=``
4. Letters -> keyword or IDENTIFIER (letters only, no digits or ``_``)
5. Decimal digits -> INTEGER_LITERAL (no sign, point or separators)
6. Anything else -> ILLEGAL holding that single code point

The lexer never raises while scanning. The only failure is malformed input,
reported by ``InvalidEncodingError`` when the Scanner is constructed.

Example Usage
-------------
>>> from monkeyi.lexer import Lexer
>>> lexer = Lexer("let five = 5;")
>>> for token in lexer.tokenize():
...     print(token)
LET 'let'
IDENTIFIER 'five'
ASSIGN '='
INTEGER_LITERAL '5'
SEMICOLON ';'
END_OF_INPUT ''
"""

import logging
from typing import Iterator, Optional, Union

from monkeyi.errors import InvalidEncodingError
from monkeyi.token import Token, TokenKind, lookup_ident


logger = logging.getLogger(__name__)

Source = Union[str, bytes, bytearray, memoryview]


# =============================================================================
# Character Classes
# =============================================================================

# Single code point tokens with no lookahead
SINGLE_TOKENS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
}

# Code points that become a two code point token when followed by "="
# first -> (kind alone, kind with "=")
EQUALS_PAIRS: dict[str, tuple[TokenKind, TokenKind]] = {
    "=": (TokenKind.ASSIGN, TokenKind.EQUAL),
    "!": (TokenKind.BANG, TokenKind.NOT_EQUAL),
}

# str.isspace() also accepts the C0 information separators, which are not
# Unicode White_Space
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(char: str) -> bool:
    """Return True for Unicode White_Space code points."""
    return char.isspace() and char not in _NOT_WHITESPACE


def is_letter(char: str) -> bool:
    """Return True for Unicode letters (general category L*)."""
    return char.isalpha()


def is_digit(char: str) -> bool:
    """Return True for Unicode decimal digits (general category Nd)."""
    return char.isdecimal()


def _encoded_width(lead: int) -> int:
    """Width in bytes of a UTF-8 sequence, from its (valid) lead byte."""
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def _validate(source: Source) -> bytes:
    """
    Return source as well-formed UTF-8 bytes.

    Raises:
        InvalidEncodingError: If bytes are not valid UTF-8, or a str holds
            lone surrogates
    """
    if isinstance(source, str):
        try:
            return source.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidEncodingError(e.reason, offset=e.start) from e

    data = bytes(source)
    try:
        data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(e.reason, offset=e.start) from e
    return data


# =============================================================================
# Scanner (Cursor)
# =============================================================================

class Scanner:
    """
    Cursor over the code points of an immutable UTF-8 buffer.

    Attributes:
        buffer: The validated UTF-8 source
        position: Byte offset of the current code point
        read_position: Byte offset just past the current code point
        current: The current code point, or None once input is exhausted

    Invariants:
        0 <= position <= read_position <= len(buffer)
        Once current is None it stays None for every later advance().
    """

    def __init__(self, source: Source):
        """
        Validate the source and load the first code point.

        Args:
            source: Complete source text, as str or UTF-8 bytes

        Raises:
            InvalidEncodingError: If the source is not well-formed Unicode
        """
        self.buffer = _validate(source)
        self.position = 0
        self.read_position = 0
        self.current: Optional[str] = None
        self.advance()

    @property
    def at_end(self) -> bool:
        """True once every code point has been consumed."""
        return self.current is None

    def _decode_at(self, offset: int) -> tuple[Optional[str], int]:
        """Decode the code point starting at offset; (None, 0) past the end."""
        if offset >= len(self.buffer):
            return None, 0
        width = _encoded_width(self.buffer[offset])
        return self.buffer[offset:offset + width].decode("utf-8"), width

    def advance(self) -> None:
        """Move the cursor one code point forward."""
        char, width = self._decode_at(self.read_position)
        self.position = self.read_position
        self.read_position += width
        self.current = char

    def peek(self) -> Optional[str]:
        """Return the code point the next advance() would load, without moving."""
        char, _ = self._decode_at(self.read_position)
        return char

    def slice(self, start: int, end: int) -> str:
        """Decode the source text between two code point boundaries."""
        return self.buffer[start:end].decode("utf-8")


# =============================================================================
# Lexer (Token Classifier)
# =============================================================================

class Lexer:
    """
    Pull-based tokenizer for monkey source.

    Usage:
        lexer = Lexer(source_text)
        token = lexer.next_token()
        while token.kind is not TokenKind.END_OF_INPUT:
            ...
            token = lexer.next_token()

    A Lexer holds mutable cursor state; drive each instance from a single
    caller.
    """

    def __init__(self, source: Source):
        """
        Args:
            source: Complete source text, as str or UTF-8 bytes

        Raises:
            InvalidEncodingError: If the source is not well-formed Unicode
        """
        self.scanner = Scanner(source)
        logger.debug(f"Lexer created over {len(self.scanner.buffer)} bytes")

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Leaves the cursor on the first code point after the token. After
        END_OF_INPUT has been returned, every further call returns it again.
        """
        self._skip_whitespace()

        scanner = self.scanner
        char = scanner.current
        start = scanner.position

        if char is None:
            return Token(TokenKind.END_OF_INPUT, "", start)

        if char in EQUALS_PAIRS:
            alone, paired = EQUALS_PAIRS[char]
            if scanner.peek() == "=":
                scanner.advance()
                scanner.advance()
                return Token(paired, char + "=", start)
            scanner.advance()
            return Token(alone, char, start)

        if char in SINGLE_TOKENS:
            scanner.advance()
            return Token(SINGLE_TOKENS[char], char, start)

        if is_letter(char):
            literal = self._read_run(is_letter)
            return Token(lookup_ident(literal), literal, start)

        if is_digit(char):
            literal = self._read_run(is_digit)
            return Token(TokenKind.INTEGER_LITERAL, literal, start)

        logger.debug(f"Illegal code point U+{ord(char):04X} at byte {start}")
        scanner.advance()
        return Token(TokenKind.ILLEGAL, char, start)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the first END_OF_INPUT.

        Yields:
            Token objects in source order
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END_OF_INPUT:
                return

    # =========================================================================
    # Helpers
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Discard any run of whitespace under the cursor."""
        scanner = self.scanner
        while scanner.current is not None and is_whitespace(scanner.current):
            scanner.advance()

    def _read_run(self, accept) -> str:
        """Consume the maximal run of code points satisfying accept."""
        scanner = self.scanner
        start = scanner.position
        while scanner.current is not None and accept(scanner.current):
            scanner.advance()
        return scanner.slice(start, scanner.position)
