# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token-driven state-machine parser for MemoML.

Consumes one token per call and assembles the document tree on an explicit
scope stack rather than through recursive calls.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from memoml.model.node import Node
from memoml.parser.errors import IncompleteDocumentError, ParseError
from memoml.parser.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ParserState(enum.Enum):
    """States of the parser's state machine."""

    KEY = "key"
    VALUE = "value"
    SCOPE = "scope"
    EOF = "eof"


@dataclass(frozen=True)
class ParserTrace:
    """One recorded parser step: the state before the step and the token fed."""

    state: ParserState
    token: Token


class Parser:
    """Builds a MemoML tree from tokens fed one at a time.

    The grammar accepted is::

        document := entry*
        entry    := IDENTIFIER value? ( ';' | '{' entry* '}' )
        value    := STRING | NUMBER | TRUE | FALSE | NULL

    An entry without a value gets ``True``. The first grammar violation
    raises :class:`ParseError`; the parser is unusable afterwards.

    Args:
        trace: Record every ``(state, token)`` pair consumed, for diagnostics.
    """

    def __init__(self, trace: bool = False) -> None:
        self._document_root = Node.root()
        self._state = ParserState.KEY
        self._scope_stack: list[Node] = [self._document_root]
        self._next_node = Node(key="")
        self._enable_trace = trace
        self._trace: list[ParserTrace] = []

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def depth(self) -> int:
        """Return the number of open scopes, counting the document root."""
        return len(self._scope_stack)

    @property
    def document_root(self) -> Node:
        """Return the finished tree.

        Raises:
            IncompleteDocumentError: If the EOF token has not been fed yet.
        """
        if self._state is not ParserState.EOF:
            raise IncompleteDocumentError()
        return self._document_root

    @property
    def trace(self) -> list[ParserTrace] | None:
        """Return the recorded steps, or None when tracing is disabled."""
        return self._trace if self._enable_trace else None

    def feed(self, token: Token) -> None:
        """Consume one token and advance the state machine.

        Raises:
            ParseError: If *token* is not allowed in the current state,
                including any token after EOF.
        """
        if self._enable_trace:
            self._trace.append(ParserTrace(self._state, token))

        if self._state is ParserState.KEY:
            self._on_key(token)
        elif self._state is ParserState.VALUE:
            self._on_value(token)
        elif self._state is ParserState.SCOPE:
            self._on_scope(token)
        else:
            raise ParseError(self._state, token)

    # ------------------------------------------------------------------
    # State handlers
    # ------------------------------------------------------------------

    def _on_key(self, token: Token) -> None:
        if token.kind is TokenKind.IDENTIFIER:
            self._next_node.key = str(token.value)
            self._state = ParserState.VALUE
        elif token.kind is TokenKind.RIGHT_BRACE:
            if len(self._scope_stack) <= 1:
                raise ParseError(self._state, token)
            closing_scope = self._scope_stack.pop()
            self._current_scope.add_child(closing_scope)
            logger.debug("Closed scope %r at depth %d", closing_scope.key, len(self._scope_stack))
            self._reset_next_node()
        elif token.kind is TokenKind.EOF:
            self._state = ParserState.EOF
        else:
            raise ParseError(self._state, token)

    def _on_value(self, token: Token) -> None:
        if token.is_literal:
            self._next_node.value = token.value
            self._state = ParserState.SCOPE
        elif token.kind in (TokenKind.SEMICOLON, TokenKind.LEFT_BRACE):
            # No literal between key and terminator: the entry is a flag.
            self._next_node.value = True
            self._on_scope(token)
        else:
            raise ParseError(self._state, token)

    def _on_scope(self, token: Token) -> None:
        if token.kind is TokenKind.SEMICOLON:
            self._current_scope.add_child(self._next_node)
        elif token.kind is TokenKind.LEFT_BRACE:
            self._scope_stack.append(self._next_node)
            logger.debug("Opened scope %r at depth %d", self._next_node.key, len(self._scope_stack))
        else:
            raise ParseError(self._state, token)
        self._reset_next_node()
        self._state = ParserState.KEY

    # ------------------------------------------------------------------
    # Scope stack helpers
    # ------------------------------------------------------------------

    @property
    def _current_scope(self) -> Node:
        return self._scope_stack[-1]

    def _reset_next_node(self) -> None:
        self._next_node = Node(key="")
