"""Tests for INDENT/DEDENT/NEWLINE synthesis by the mode state machine."""

import pytest

from pylite.errors import IndentationMismatchError, LexError
from pylite.lexer import Lexer
from pylite.tokens import TokenType

T = TokenType


def types(source: str) -> list[TokenType]:
    return [t.type for t in Lexer(source).tokenize()]


class TestScenarios:
    """End-to-end token streams for small programs."""

    def test_simple_assignment(self) -> None:
        tokens = list(Lexer("x = 1\n").tokenize())
        assert [(t.type, t.value) for t in tokens] == [
            (T.NAME, "x"),
            (T.ASSIGN, None),
            (T.NUMBER, 1),
            (T.NEWLINE, None),
            (T.EOF, None),
        ]

    def test_if_block(self) -> None:
        assert types("if x:\n    y = 1\n") == [
            T.IF,
            T.NAME,
            T.COLON,
            T.NEWLINE,
            T.INDENT,
            T.NAME,
            T.ASSIGN,
            T.NUMBER,
            T.NEWLINE,
            T.DEDENT,
            T.EOF,
        ]

    def test_dedent_to_unknown_level(self) -> None:
        lexer = Lexer("if x:\n    y = 1\n   z = 2\n")
        seen = []
        with pytest.raises(IndentationMismatchError, match="Bad indentation.") as excinfo:
            while True:
                seen.append(lexer.next_token().type)
        assert seen[-1] == T.DEDENT
        assert excinfo.value.location.lineno == 3
        assert excinfo.value.location.col_offset == 1

    def test_flush_at_end_of_input(self) -> None:
        assert types("\tx\n") == [T.INDENT, T.NAME, T.NEWLINE, T.DEDENT, T.EOF]


class TestIndent:
    def test_nested_blocks(self) -> None:
        source = "while a:\n  if b:\n    pass\n  pass\npass\n"
        assert types(source) == [
            T.WHILE, T.NAME, T.COLON, T.NEWLINE,
            T.INDENT, T.IF, T.NAME, T.COLON, T.NEWLINE,
            T.INDENT, T.PASS, T.NEWLINE,
            T.DEDENT, T.PASS, T.NEWLINE,
            T.DEDENT, T.PASS, T.NEWLINE,
            T.EOF,
        ]

    def test_multiple_dedents_on_one_line(self) -> None:
        source = "if a:\n  if b:\n    x\ny\n"
        tokens = list(Lexer(source).tokenize())
        assert [t.type for t in tokens] == [
            T.IF, T.NAME, T.COLON, T.NEWLINE,
            T.INDENT, T.IF, T.NAME, T.COLON, T.NEWLINE,
            T.INDENT, T.NAME, T.NEWLINE,
            T.DEDENT, T.DEDENT, T.NAME, T.NEWLINE,
            T.EOF,
        ]
        dedents = [t for t in tokens if t.type == T.DEDENT]
        assert all(t.location.lineno == 4 and t.location.col_offset == 1 for t in dedents)

    def test_flush_closes_every_open_block(self) -> None:
        source = "if a:\n  if b:\n    if c:\n      x\n"
        result = types(source)
        assert result[-4:] == [T.DEDENT, T.DEDENT, T.DEDENT, T.EOF]

    def test_no_trailing_newline_in_block(self) -> None:
        assert types("if a:\n    x") == [
            T.IF, T.NAME, T.COLON, T.NEWLINE, T.INDENT, T.NAME, T.DEDENT, T.EOF,
        ]

    def test_tab_equals_eight_spaces(self) -> None:
        source = "if a:\n\tx\n        y\n"
        assert types(source) == [
            T.IF, T.NAME, T.COLON, T.NEWLINE,
            T.INDENT, T.NAME, T.NEWLINE,
            T.NAME, T.NEWLINE,
            T.DEDENT, T.EOF,
        ]

    def test_spaces_before_tab_share_the_stop(self) -> None:
        assert types("if a:\n   \tx\n\ty\n").count(T.INDENT) == 1

    def test_dedent_between_levels_is_error(self) -> None:
        source = "if a:\n        x\n    y\n"
        with pytest.raises(IndentationMismatchError):
            list(Lexer(source).tokenize())

    def test_indented_first_line(self) -> None:
        assert types("  x\n") == [T.INDENT, T.NAME, T.NEWLINE, T.DEDENT, T.EOF]

    def test_indent_without_colon(self) -> None:
        # Block structure is the parser's business
        assert types("x\n  y\n") == [
            T.NAME, T.NEWLINE, T.INDENT, T.NAME, T.NEWLINE, T.DEDENT, T.EOF,
        ]


class TestBlankAndCommentLines:
    def test_empty_source(self) -> None:
        assert types("") == [T.EOF]

    def test_only_blank_lines(self) -> None:
        assert types("\n\n   \n\t\n") == [T.EOF]

    def test_only_comments(self) -> None:
        assert types("# one\n    # two\n# three") == [T.EOF]

    def test_blank_lines_do_not_dedent(self) -> None:
        source = "if a:\n    x\n\n  # note\n\n    y\n"
        assert types(source) == [
            T.IF, T.NAME, T.COLON, T.NEWLINE,
            T.INDENT, T.NAME, T.NEWLINE,
            T.NAME, T.NEWLINE,
            T.DEDENT, T.EOF,
        ]

    def test_whitespace_only_last_line(self) -> None:
        assert types("x\n   ") == [T.NAME, T.NEWLINE, T.EOF]

    def test_trailing_comment_emits_newline(self) -> None:
        assert types("pass # done\nx\n") == [T.PASS, T.NEWLINE, T.NAME, T.NEWLINE, T.EOF]


class TestLineBreaks:
    def test_crlf(self) -> None:
        tokens = list(Lexer("if a:\r\n    x = 1\r\n").tokenize())
        assert [t.type for t in tokens] == [
            T.IF, T.NAME, T.COLON, T.NEWLINE,
            T.INDENT, T.NAME, T.ASSIGN, T.NUMBER, T.NEWLINE,
            T.DEDENT, T.EOF,
        ]
        assert tokens[3].text == "\r\n"
        assert tokens[5].location.lineno == 2

    def test_lfcr(self) -> None:
        tokens = list(Lexer("x\n\ry\n\r").tokenize())
        assert [t.type for t in tokens] == [T.NAME, T.NEWLINE, T.NAME, T.NEWLINE, T.EOF]
        assert tokens[1].text == "\n\r"
        assert tokens[2].location.lineno == 2
        assert tokens[2].location.col_offset == 1

    def test_crlf_blank_lines(self) -> None:
        assert types("\r\n\r\nx\r\n") == [T.NAME, T.NEWLINE, T.EOF]

    def test_comment_before_crlf(self) -> None:
        tokens = list(Lexer("x # c\r\n").tokenize())
        assert tokens[1].type == T.NEWLINE
        assert tokens[1].text == "\r\n"


class TestEndOfInput:
    def test_eof_is_idempotent(self) -> None:
        lexer = Lexer("x\n")
        tokens = [lexer.next_token() for _ in range(3)]
        assert tokens[-1].type == T.EOF
        again = [lexer.next_token() for _ in range(5)]
        assert all(t is tokens[-1] for t in again)

    def test_tokenize_stops_at_eof(self) -> None:
        lexer = Lexer("x\n")
        assert [t.type for t in lexer.tokenize()] == [T.NAME, T.NEWLINE, T.EOF]
        assert [t.type for t in lexer.tokenize()] == [T.EOF]

    def test_error_is_raised_not_tokenized(self) -> None:
        lexer = Lexer("x = ?\n")
        assert lexer.next_token().type == T.NAME
        assert lexer.next_token().type == T.ASSIGN
        with pytest.raises(LexError):
            lexer.next_token()
