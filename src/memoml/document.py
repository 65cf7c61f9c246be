# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Whole-document entry points: text or file in, tree out."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from memoml.model.node import Node
from memoml.parser.errors import MemoSyntaxError
from memoml.parser.parser import Parser
from memoml.parser.scanner import Scanner

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse(text: str) -> Node:
    """Parse MemoML text into a tree.

    Args:
        text: The complete document.

    Returns:
        The document root, keyed by the schema name and valued by the schema
        version, whose children are the top-level entries.

    Raises:
        TypeError: If *text* is not a string.
        ScanError: If the text contains an unexpected character or an
            unterminated string.
        ParseError: If the tokens do not form a valid document.
    """
    if not isinstance(text, str):
        raise TypeError("Invalid argument type.")

    parser = Parser()
    Scanner(parser.feed).scan(text)
    return parser.document_root


def parse_file(path: Path, encoding: str = "utf-8") -> Node:
    """Read and parse a MemoML file.

    Syntax errors are re-raised with :attr:`MemoSyntaxError.path` set to *path*.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid in *encoding*.
        MemoSyntaxError: If the file content is not valid MemoML.
    """
    logger.debug("Parsing %s", path)
    text = path.read_text(encoding=encoding)
    try:
        return parse(text)
    except MemoSyntaxError as exc:
        exc.path = path
        raise


def to_json(node: Node, indent: int | None = None) -> str:
    """Render *node* and its descendants as JSON in the ``{key, value?, children?}`` shape.

    The output is identical to ``json.dumps(node.to_dict(), indent=indent)``,
    but the tree is written with an explicit stack so deeply nested documents
    do not exhaust the recursion limit.
    """
    separator = "," if indent is not None else ", "
    parts: list[str] = []
    pending: list[str | tuple[Node, int]] = [(node, 0)]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        current, level = item
        pending.extend(reversed(_node_pieces(current, level, separator, indent)))
    return "".join(parts)


# ################
# Implementation
# ################


def _node_pieces(node: Node, level: int, separator: str, indent: int | None) -> list[str | tuple[Node, int]]:
    """Return the text pieces of one JSON object, with its children left as pending nodes."""
    inner = _line_break(level + 1, indent)
    pieces: list[str | tuple[Node, int]] = ["{" + inner + '"key": ' + json.dumps(node.key)]
    if node.has_value:
        pieces.append(separator + inner + '"value": ' + json.dumps(node.value))
    if "children" in node.model_fields_set:
        if not node.children:
            pieces.append(separator + inner + '"children": ' + ("null" if node.children is None else "[]"))
        else:
            pieces.append(separator + inner + '"children": [')
            for index, child in enumerate(node.children):
                pieces.append((separator if index else "") + _line_break(level + 2, indent))
                pieces.append((child, level + 2))
            pieces.append(inner + "]")
    pieces.append(_line_break(level, indent) + "}")
    return pieces


def _line_break(level: int, indent: int | None) -> str:
    return "" if indent is None else "\n" + " " * (indent * level)
