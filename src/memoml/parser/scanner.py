# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for MemoML text.

Converts raw source text into tokens, handing each one to a listener as soon
as it is complete.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from memoml.model.node import Value
from memoml.parser.errors import ScanError
from memoml.parser.tokens import Location, Token, TokenKind

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

ScannerListener = Callable[[Token], None]


class Scanner:
    """Single-pass, character-driven scanner.

    Every call to :meth:`scan` starts over at the beginning of the given
    source; nothing is carried between calls.
    """

    def __init__(self, listener: ScannerListener) -> None:
        self._listener = listener
        self._source = ""
        self._start = 0
        self._pos = 0
        self._line = 1
        self._token_line = 1
        self._emitted = 0

    def scan(self, source: str) -> None:
        """Scan *source* and emit its tokens, finishing with exactly one EOF token.

        Comments and whitespace produce no tokens.

        Raises:
            ScanError: On an unexpected character or an unterminated string.
        """
        self._source = source
        self._start = 0
        self._pos = 0
        self._line = 1
        self._emitted = 0
        logger.debug("Scanning %d character(s)", len(source))

        while not self._at_end():
            self._start = self._pos
            self._token_line = self._line
            self._scan_token()

        self._token_line = self._line
        self._emit(TokenKind.EOF)
        logger.debug("Scanned %d token(s) over %d line(s)", self._emitted, self._line)

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek_next(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _advance(self) -> str:
        """Consume the current character and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def _emit(self, kind: TokenKind, lexeme: str | None = None, value: Value = None) -> None:
        self._emitted += 1
        self._listener(Token(kind, lexeme, value, Location(self._token_line)))

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch on the next character."""
        ch = self._advance()

        if ch in _STRUCTURAL_TOKENS:
            self._emit(_STRUCTURAL_TOKENS[ch], ch, ch)
        elif ch == "#":
            self._skip_comment()
        elif ch in " \r\t":
            pass
        elif ch == "\n":
            self._line += 1
        elif ch == '"':
            self._scan_string()
        elif _is_digit(ch) or ch in ".-":
            self._scan_number()
        elif _is_alpha(ch):
            self._scan_identifier()
        else:
            raise ScanError(f"Unexpected character {ch!r}.", self._line)

    def _skip_comment(self) -> None:
        """Consume a '#' comment up to, but not including, the end of the line."""
        while not self._at_end() and self._peek() != "\n":
            self._advance()

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        """Scan a double-quoted string. There are no escape sequences."""
        while not self._at_end() and self._peek() != '"':
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._at_end():
            raise ScanError("Unterminated string.", self._line)

        self._advance()  # closing "
        self._emit(TokenKind.STRING, "", self._source[self._start + 1 : self._pos - 1])

    def _scan_number(self) -> None:
        """Scan ``-?(digits('.'digits)? | '.'digits)``; the first character is already consumed."""
        lead = self._source[self._start]
        if lead == "-":
            if not (_is_digit(self._peek()) or (self._peek() == "." and _is_digit(self._peek_next()))):
                raise ScanError("Unexpected character '-'.", self._line)
            lead = self._advance()

        if lead == ".":
            if not _is_digit(self._peek()):
                raise ScanError("Unexpected character '.'.", self._line)
            self._consume_digits()
        else:
            self._consume_digits()
            # A '.' without a digit after it is not part of the number.
            if self._peek() == "." and _is_digit(self._peek_next()):
                self._advance()
                self._consume_digits()

        text = self._source[self._start : self._pos]
        self._emit(TokenKind.NUMBER, text, float(text))

    def _consume_digits(self) -> None:
        while _is_digit(self._peek()):
            self._advance()

    def _scan_identifier(self) -> None:
        """Scan an identifier and map reserved words to their literal kinds."""
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self._source[self._start : self._pos]
        kind, value = _KEYWORDS.get(text, (TokenKind.IDENTIFIER, text))
        self._emit(kind, text, value)


def tokenize(source: str) -> list[Token]:
    """Scan *source* and return all tokens as a list ending with the EOF token.

    Raises:
        ScanError: On an unexpected character or an unterminated string.
    """
    tokens: list[Token] = []
    Scanner(tokens.append).scan(source)
    return tokens


# ################
# Implementation
# ################

_KEYWORDS: Mapping[str, tuple[TokenKind, Value]] = MappingProxyType(
    {
        "false": (TokenKind.FALSE, False),
        "null": (TokenKind.NULL, None),
        "true": (TokenKind.TRUE, True),
    }
)

_STRUCTURAL_TOKENS: Mapping[str, TokenKind] = MappingProxyType(
    {
        "{": TokenKind.LEFT_BRACE,
        "}": TokenKind.RIGHT_BRACE,
        ";": TokenKind.SEMICOLON,
    }
)


def _is_digit(ch: str) -> bool:
    return ch != "" and "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def _is_alphanumeric(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch)
