# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token and source location value types shared by the scanner and parser."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from memoml.model.node import Value

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """All token kinds produced by the MemoML scanner."""

    EOF = "EOF"

    # Structure
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    SEMICOLON = ";"

    # Names
    IDENTIFIER = "IDENTIFIER"

    # Literals
    STRING = "STRING"
    NUMBER = "NUMBER"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"


LITERAL_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.STRING,
        TokenKind.NUMBER,
        TokenKind.TRUE,
        TokenKind.FALSE,
        TokenKind.NULL,
    }
)


@dataclass(frozen=True)
class Location:
    """A position in the source text.

    Attributes:
        line: 1-based line number.
        column: Reserved; the scanner does not track columns and always uses 0.
    """

    line: int
    column: int = 0

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        kind: The kind of token.
        lexeme: The raw matched text. STRING tokens carry an empty lexeme and
            EOF carries none.
        value: The decoded literal (identifier text for IDENTIFIER tokens).
        location: Where the token was found, if known.
    """

    kind: TokenKind
    lexeme: str | None = None
    value: Value = None
    location: Location | None = None

    @property
    def is_literal(self) -> bool:
        """Return True for tokens that can stand as a node value."""
        return self.kind in LITERAL_KINDS

    @property
    def line(self) -> int | None:
        """Return the token's line, or None when it carries no location."""
        return self.location.line if self.location is not None else None

    def __str__(self) -> str:
        location = f"{self.location} " if self.location is not None else ""
        return f'{location}{self.kind.name} "{self.lexeme or ""}" {self.value!r}'
