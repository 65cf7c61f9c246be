# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner and parser for MemoML text."""

from memoml.parser.errors import IncompleteDocumentError, MemoSyntaxError, ParseError, ScanError
from memoml.parser.parser import Parser, ParserState, ParserTrace
from memoml.parser.scanner import Scanner, ScannerListener, tokenize
from memoml.parser.tokens import Location, Token, TokenKind

__all__ = [
    "IncompleteDocumentError",
    "Location",
    "MemoSyntaxError",
    "ParseError",
    "Parser",
    "ParserState",
    "ParserTrace",
    "ScanError",
    "Scanner",
    "ScannerListener",
    "Token",
    "TokenKind",
    "tokenize",
]
