# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""MemoML: a small language of nested, ordered, key-repeatable scopes."""

from memoml.document import parse, parse_file, to_json
from memoml.model.node import SCHEMA_NAME, SCHEMA_VERSION, Node, Value
from memoml.parser import (
    IncompleteDocumentError,
    Location,
    MemoSyntaxError,
    ParseError,
    Parser,
    ParserState,
    ParserTrace,
    ScanError,
    Scanner,
    Token,
    TokenKind,
    tokenize,
)

__all__ = [
    "IncompleteDocumentError",
    "Location",
    "MemoSyntaxError",
    "Node",
    "ParseError",
    "Parser",
    "ParserState",
    "ParserTrace",
    "SCHEMA_NAME",
    "SCHEMA_VERSION",
    "ScanError",
    "Scanner",
    "Token",
    "TokenKind",
    "Value",
    "parse",
    "parse_file",
    "to_json",
    "tokenize",
]
