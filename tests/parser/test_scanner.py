# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the MemoML lexical scanner."""

import pytest

from memoml.parser.errors import ScanError
from memoml.parser.scanner import Scanner, tokenize
from memoml.parser.tokens import Location, Token, TokenKind

# ###############
# Test Helpers
# ###############


def _tokens_no_eof(source: str) -> list[Token]:
    """Return all tokens except the terminal EOF token."""
    result = tokenize(source)
    assert result[-1].kind == TokenKind.EOF
    return result[:-1]


def _kinds(source: str) -> list[TokenKind]:
    """Return the token kinds for all tokens including EOF."""
    return [tok.kind for tok in tokenize(source)]


def _values(source: str) -> list[object]:
    """Return the token values for all tokens except EOF."""
    return [tok.value for tok in _tokens_no_eof(source)]


# ###############
# EOF Handling
# ###############


class TestEof:
    def test_empty_string_produces_only_eof(self) -> None:
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.EOF

    def test_eof_has_no_lexeme_or_value(self) -> None:
        eof = tokenize("")[0]
        assert eof.lexeme is None
        assert eof.value is None

    def test_eof_emitted_exactly_once_after_content(self) -> None:
        kinds = _kinds("a; b { c; }")
        assert kinds.count(TokenKind.EOF) == 1
        assert kinds[-1] == TokenKind.EOF

    def test_eof_carries_final_line(self) -> None:
        eof = tokenize("a;\nb;\n")[-1]
        assert eof.location == Location(3)


# ###############
# Listener Emission
# ###############


class TestListener:
    def test_tokens_emitted_in_source_order(self) -> None:
        seen: list[TokenKind] = []
        Scanner(lambda token: seen.append(token.kind)).scan("x 1;")
        assert seen == [TokenKind.IDENTIFIER, TokenKind.NUMBER, TokenKind.SEMICOLON, TokenKind.EOF]

    def test_each_scan_starts_fresh(self) -> None:
        seen: list[Token] = []
        scanner = Scanner(seen.append)
        scanner.scan("a\nb")
        scanner.scan("c")
        assert [t.value for t in seen] == ["a", "b", None, "c", None]
        assert seen[-2].location == Location(1)

    def test_tokens_before_error_are_already_emitted(self) -> None:
        seen: list[Token] = []
        with pytest.raises(ScanError):
            Scanner(seen.append).scan("a; ?")
        assert [t.kind for t in seen] == [TokenKind.IDENTIFIER, TokenKind.SEMICOLON]


# ###############
# Structural Tokens
# ###############


class TestStructuralTokens:
    @pytest.mark.parametrize(
        ("source", "expected_kind"),
        [
            ("{", TokenKind.LEFT_BRACE),
            ("}", TokenKind.RIGHT_BRACE),
            (";", TokenKind.SEMICOLON),
        ],
    )
    def test_single_character_then_eof(self, source: str, expected_kind: TokenKind) -> None:
        tokens = tokenize(source)
        assert [t.kind for t in tokens] == [expected_kind, TokenKind.EOF]
        assert tokens[0].lexeme == source
        assert tokens[0].value == source

    def test_adjacent_braces(self) -> None:
        assert _kinds("{};") == [
            TokenKind.LEFT_BRACE,
            TokenKind.RIGHT_BRACE,
            TokenKind.SEMICOLON,
            TokenKind.EOF,
        ]


# ###############
# Identifiers and Reserved Words
# ###############


class TestIdentifiers:
    @pytest.mark.parametrize("source", ["ident1", "i", "I", "_", "X_", "snake_case_2", "_9"])
    def test_identifier_value_is_its_text(self, source: str) -> None:
        tokens = _tokens_no_eof(source)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.IDENTIFIER
        assert tokens[0].value == source
        assert tokens[0].lexeme == source

    def test_identifier_followed_by_semicolon(self) -> None:
        tokens = tokenize("ident2;")
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER, TokenKind.SEMICOLON, TokenKind.EOF]
        assert tokens[0].value == "ident2"

    def test_identifier_cannot_start_with_digit(self) -> None:
        assert _kinds("2x") == [TokenKind.NUMBER, TokenKind.IDENTIFIER, TokenKind.EOF]

    def test_non_ascii_letter_is_unexpected(self) -> None:
        with pytest.raises(ScanError):
            tokenize("é")


class TestReservedWords:
    @pytest.mark.parametrize(
        ("source", "expected_kind", "expected_value"),
        [
            ("true", TokenKind.TRUE, True),
            ("false", TokenKind.FALSE, False),
            ("null", TokenKind.NULL, None),
        ],
    )
    def test_reserved_word(self, source: str, expected_kind: TokenKind, expected_value: object) -> None:
        tokens = _tokens_no_eof(source)
        assert len(tokens) == 1
        assert tokens[0].kind == expected_kind
        assert tokens[0].value is expected_value
        assert tokens[0].lexeme == source

    @pytest.mark.parametrize("source", ["True", "NULL", "nulls", "truex", "false_"])
    def test_near_miss_is_identifier(self, source: str) -> None:
        tokens = _tokens_no_eof(source)
        assert tokens[0].kind == TokenKind.IDENTIFIER
        assert tokens[0].value == source


# ###############
# String Literals
# ###############


class TestStringLiterals:
    def test_empty_string(self) -> None:
        tokens = _tokens_no_eof('""')
        assert tokens[0].kind == TokenKind.STRING
        assert tokens[0].value == ""

    def test_simple_string(self) -> None:
        tokens = _tokens_no_eof('"str"')
        assert tokens[0].kind == TokenKind.STRING
        assert tokens[0].value == "str"

    def test_lexeme_is_empty(self) -> None:
        assert _tokens_no_eof('"str"')[0].lexeme == ""

    def test_string_keeps_comment_marker_and_braces(self) -> None:
        assert _values('"# {not} ;a comment"') == ["# {not} ;a comment"]

    def test_backslash_is_not_an_escape(self) -> None:
        assert _values('"a\\" b') == ["a\\", "b"]

    def test_string_spanning_lines_counts_lines(self) -> None:
        tokens = tokenize('"one\ntwo" x')
        assert tokens[0].value == "one\ntwo"
        assert tokens[1].location == Location(2)

    def test_unterminated_string_raises(self) -> None:
        with pytest.raises(ScanError) as exc_info:
            tokenize('"unterminated')
        assert "Unterminated string." in str(exc_info.value)

    def test_unterminated_string_reports_line_at_end_of_input(self) -> None:
        with pytest.raises(ScanError) as exc_info:
            tokenize('a;\n"one\ntwo')
        assert exc_info.value.line == 3


# ###############
# Number Literals
# ###############


class TestNumberLiterals:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("3", 3),
            ("0", 0),
            ("42", 42),
            ("2.5", 2.5),
            (".75", 0.75),
            ("10.125", 10.125),
            ("-1", -1),
            ("-2.5", -2.5),
            ("-.5", -0.5),
        ],
    )
    def test_number_value(self, source: str, expected: float) -> None:
        tokens = _tokens_no_eof(source)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.NUMBER
        assert tokens[0].value == expected
        assert tokens[0].lexeme == source

    def test_value_is_float(self) -> None:
        assert isinstance(_tokens_no_eof("3")[0].value, float)

    def test_second_fraction_starts_a_new_number(self) -> None:
        tokens = _tokens_no_eof("1.5.25")
        assert [t.lexeme for t in tokens] == ["1.5", ".25"]

    def test_trailing_dot_is_not_part_of_number(self) -> None:
        with pytest.raises(ScanError) as exc_info:
            tokenize("3.")
        assert "'.'" in str(exc_info.value)

    def test_trailing_dot_before_identifier(self) -> None:
        with pytest.raises(ScanError):
            tokenize("3.x")

    @pytest.mark.parametrize("source", [".", "-", "-x", "-.", "..5", "- 1"])
    def test_dangling_dot_or_minus_raises(self, source: str) -> None:
        with pytest.raises(ScanError) as exc_info:
            tokenize(source)
        assert "Unexpected character" in str(exc_info.value)

    def test_no_scientific_notation(self) -> None:
        tokens = _tokens_no_eof("1e5")
        assert [t.kind for t in tokens] == [TokenKind.NUMBER, TokenKind.IDENTIFIER]
        assert tokens[1].value == "e5"


# ###############
# Comments and Whitespace
# ###############


class TestCommentsAndWhitespace:
    @pytest.mark.parametrize("source", ["# comment", "\t", " ", "\r\n", "#", "# a\n# b\n"])
    def test_produces_only_eof(self, source: str) -> None:
        assert _kinds(source) == [TokenKind.EOF]

    def test_comment_ends_at_newline(self) -> None:
        tokens = tokenize("# comment\nkey;")
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER, TokenKind.SEMICOLON, TokenKind.EOF]
        assert tokens[0].location == Location(2)

    def test_comment_does_not_swallow_line_count(self) -> None:
        tokens = tokenize("a; # one\n# two\nb;")
        assert tokens[2].value == "b"
        assert tokens[2].location == Location(3)

    def test_comment_after_token_on_same_line(self) -> None:
        assert _values("key 1; # trailing { ;") == ["key", 1, ";"]


# ###############
# Locations and Errors
# ###############


class TestLocations:
    def test_tokens_carry_line_and_zero_column(self) -> None:
        tokens = tokenize("a;\n\nb;")
        assert [t.line for t in tokens] == [1, 1, 3, 3, 3]
        assert all(t.location is not None and t.location.column == 0 for t in tokens)

    def test_carriage_return_does_not_count_lines(self) -> None:
        assert tokenize("a\r\nb")[1].line == 2


class TestUnexpectedCharacters:
    @pytest.mark.parametrize("source", ["?", "=", "[", "'single'", "a:b", "@"])
    def test_unexpected_character_raises(self, source: str) -> None:
        with pytest.raises(ScanError) as exc_info:
            tokenize(source)
        assert "Unexpected character" in str(exc_info.value)

    def test_error_carries_line(self) -> None:
        with pytest.raises(ScanError) as exc_info:
            tokenize("a;\nb;\n  $")
        assert exc_info.value.line == 3
        assert str(exc_info.value).startswith("Line 3: ")
