"""Tests for the public pylite API."""

import pytest

import pylite
from pylite import (
    LexError,
    Lexer,
    SourceLocation,
    Token,
    TokenType,
    indent_column,
    tokenize,
)


class TestTokenize:
    """Test the tokenize() convenience function."""

    def test_returns_list_ending_in_eof(self) -> None:
        tokens = tokenize("x = 1\n")
        assert isinstance(tokens, list)
        assert tokens[-1].type == TokenType.EOF

    def test_source_name(self) -> None:
        tokens = tokenize("x", "main.pyl")
        assert all(t.location.source_file == "main.pyl" for t in tokens)

    def test_matches_lexer(self) -> None:
        source = "while n < 10:\n    n += 1\n"
        assert tokenize(source) == list(Lexer(source).tokenize())

    def test_raises_lex_error(self) -> None:
        with pytest.raises(LexError):
            tokenize("x = ~1")

    def test_realistic_program(self) -> None:
        source = (
            "# count down\n"
            "n = int(input(\"start: \"))\n"
            "while not n == 0:\n"
            "    if n % 2 == 0 and n <= 10:\n"
            "        print(\"even\")\n"
            "    n -= 1\n"
            "print(n // 3)\n"
        )
        types = [t.type for t in tokenize(source)]
        assert types.count(TokenType.INDENT) == 2
        assert types.count(TokenType.DEDENT) == 2
        assert types.count(TokenType.NEWLINE) == 6
        assert TokenType.INT_TYPE in types
        assert TokenType.INPUT in types
        assert TokenType.MOD in types
        assert TokenType.INT_DIV in types
        assert TokenType.MINUS_ASSIGN in types
        strings = [t.value for t in tokenize(source) if t.type == TokenType.STRING]
        assert strings == ["start: ", "even"]


class TestToken:
    """Token value object behaviour."""

    def test_aliases(self) -> None:
        token = tokenize("count")[0]
        assert token.kind is token.type is TokenType.NAME
        assert token.payload == token.value == "count"
        assert token.lineno == 1
        assert token.col == 1

    def test_frozen(self) -> None:
        token = tokenize("x")[0]
        with pytest.raises(AttributeError):
            token.value = "y"  # type: ignore[misc]

    def test_structural_flag(self) -> None:
        tokens = tokenize("if a:\n  b\n")
        structural = {t.type for t in tokens if t.is_structural}
        assert structural == {
            TokenType.NEWLINE,
            TokenType.INDENT,
            TokenType.DEDENT,
            TokenType.EOF,
        }

    def test_repr(self) -> None:
        name, assign, number = tokenize("x = 10")[:3]
        assert repr(name) == "Token(NAME, 'x', 1:1)"
        assert repr(assign) == "Token(ASSIGN, 1:3)"
        assert repr(number) == "Token(NUMBER, 10, 1:5)"

    def test_equality(self) -> None:
        assert tokenize("x")[0] == Token(TokenType.NAME, "x", "x", SourceLocation(1, 1))


class TestSourceLocation:
    def test_str(self) -> None:
        assert str(SourceLocation(4, 2, "a.pyl")) == "a.pyl:4:2"

    def test_aliases(self) -> None:
        loc = SourceLocation(4, 2)
        assert (loc.line, loc.column) == (4, 2)
        assert loc.source_file == "<input>"


class TestExports:
    def test_all_exports_exist(self) -> None:
        for name in pylite.__all__:
            assert hasattr(pylite, name), name

    def test_indent_column_exported(self) -> None:
        assert indent_column("\t\t") == 17
