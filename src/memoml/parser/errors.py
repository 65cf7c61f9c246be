# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised while scanning and parsing MemoML text."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from memoml.parser.parser import ParserState
    from memoml.parser.tokens import Token

# ###############
# Public Interface
# ###############


class MemoSyntaxError(Exception):
    """Base class for malformed MemoML input.

    Attributes:
        message: The description of the problem, without location prefix.
        line: 1-based line number of the error, if known.
        path: The file being parsed, if the input came from a file.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.path: Path | None = None

    def __str__(self) -> str:
        prefix = f"{self.path}: " if self.path is not None else ""
        if self.line is not None:
            return f"{prefix}Line {self.line}: {self.message}"
        return f"{prefix}{self.message}"


class ScanError(MemoSyntaxError):
    """Raised when the scanner meets an unexpected character or an unterminated string."""


class ParseError(MemoSyntaxError):
    """Raised when a token is not allowed in the parser's current state.

    Attributes:
        state: The parser state the token was fed in.
        token: The offending token.
    """

    def __init__(self, state: ParserState, token: Token) -> None:
        super().__init__(
            f'Unexpected {token.kind.name} token "{token.lexeme or ""}" in state {state.name}.',
            token.line,
        )
        self.state = state
        self.token = token


class IncompleteDocumentError(Exception):
    """Raised when the finished tree is requested before the parser reached EOF."""

    def __init__(self) -> None:
        super().__init__("Incomplete document.")
