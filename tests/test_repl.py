# =============================================================================
# test_repl.py - REPL Tests
# =============================================================================
# Covers the line loop over text and binary streams, encoding error
# recovery, token formatting and whole-buffer lexing.
# =============================================================================

import io

from monkeyi.config import ReplConfig
from monkeyi.repl import PROMPT, format_token, lex_source, start
from monkeyi.token import Token, TokenKind


# =============================================================================
# Helper Function
# =============================================================================

def run(data, config=None) -> tuple[int, str]:
    """Run the REPL over text or bytes input, returning (lines, output)."""
    in_stream = io.BytesIO(data) if isinstance(data, bytes) else io.StringIO(data)
    out_stream = io.StringIO()
    lines = start(in_stream, out_stream, config)
    return lines, out_stream.getvalue()


# =============================================================================
# Loop Tests
# =============================================================================

class TestStart:
    """Test the read-lex-print loop."""

    def test_empty_input(self):
        """The prompt is written once, then the loop ends."""
        lines, output = run("")
        assert lines == 0
        assert output == PROMPT

    def test_single_line(self):
        lines, output = run("let five = 5;\n")
        assert lines == 1
        assert output == (
            ">> LET 'let'\n"
            "IDENTIFIER 'five'\n"
            "ASSIGN '='\n"
            "INTEGER_LITERAL '5'\n"
            "SEMICOLON ';'\n"
            ">> "
        )

    def test_last_line_without_newline(self):
        lines, output = run("x")
        assert lines == 1
        assert output == ">> IDENTIFIER 'x'\n>> "

    def test_blank_line(self):
        lines, output = run("\n")
        assert lines == 1
        assert output == ">> >> "

    def test_crlf_stripped(self):
        _, output = run(b"a\r\n")
        assert output == ">> IDENTIFIER 'a'\n>> "

    def test_fresh_lexer_per_line(self):
        """An operator split across lines is never joined."""
        _, output = run("=\n=\n")
        assert output.count("ASSIGN '='") == 2
        assert "EQUAL" not in output

    def test_binary_input_decoded_as_utf8(self):
        _, output = run("héllo\n".encode("utf-8"))
        assert "IDENTIFIER 'héllo'" in output

    def test_invalid_line_reported_and_skipped(self):
        """A malformed line is reported and the loop carries on."""
        lines, output = run(b"\xff\nlet\n")
        assert lines == 2
        assert "byte 0: error: invalid UTF-8 input" in output
        assert "LET 'let'" in output
        assert output.index("invalid UTF-8") < output.index("LET 'let'")

    def test_illegal_tokens_printed(self):
        _, output = run("@\n")
        assert "ILLEGAL '@'" in output

    def test_custom_prompt(self):
        _, output = run("x\n", ReplConfig(prompt="monkey> "))
        assert output.startswith("monkey> ")
        assert output.endswith("monkey> ")

    def test_illegal_warnings(self):
        config = ReplConfig(echo_illegal_warnings=True)
        _, output = run("a @\n", config)
        assert "warning: illegal character '@' at byte 2" in output

    def test_offsets_shown(self):
        _, output = run("a = 1\n", ReplConfig(show_offsets=True))
        assert "@2 ASSIGN '='" in output


# =============================================================================
# Formatting Tests
# =============================================================================

class TestFormatToken:
    """Test token display."""

    def test_default(self):
        assert format_token(Token(TokenKind.BANG, "!", 3)) == "BANG '!'"

    def test_with_offsets(self):
        config = ReplConfig(show_offsets=True)
        assert format_token(Token(TokenKind.BANG, "!", 3), config) == "@3 BANG '!'"


# =============================================================================
# Whole Buffer Tests
# =============================================================================

class TestLexSource:
    """Test lexing one complete buffer."""

    def test_multiline_buffer(self):
        """A file is one buffer; newlines are just whitespace."""
        out = io.StringIO()
        illegal = lex_source("let x = 1;\nx == 1", out)
        assert illegal == 0
        assert out.getvalue().splitlines() == [
            "LET 'let'",
            "IDENTIFIER 'x'",
            "ASSIGN '='",
            "INTEGER_LITERAL '1'",
            "SEMICOLON ';'",
            "IDENTIFIER 'x'",
            "EQUAL '=='",
            "INTEGER_LITERAL '1'",
        ]

    def test_counts_illegal(self):
        out = io.StringIO()
        assert lex_source(b"@ # x", out) == 2

    def test_invalid_encoding_raises(self):
        import pytest
        from monkeyi.errors import InvalidEncodingError

        with pytest.raises(InvalidEncodingError):
            lex_source(b"\xc3", io.StringIO())
