# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tree model produced by the MemoML parser."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

# ###############
# Public Interface
# ###############

SCHEMA_NAME = "MemoML"
SCHEMA_VERSION = "0.1.0"

Value = str | float | bool | None


class Node(BaseModel):
    """One entry of a MemoML document: a key, an optional value and nested entries.

    A scope is a node with children. Keys may repeat within one scope, so a
    node's children form an ordered multimap.

    Attributes:
        key: The entry name. Empty only for a node still being staged.
        value: The entry value. An unset value is distinct from an explicit
            ``null``, which is stored as ``None``.
        children: Nested entries in source order, or None until the first
            child is added.
    """

    key: str
    value: Value = None
    children: list[Node] | None = None

    @classmethod
    def root(cls) -> Node:
        """Create the synthetic document root carrying the schema identification."""
        return cls(key=SCHEMA_NAME, value=SCHEMA_VERSION)

    @property
    def has_value(self) -> bool:
        """Return True if a value was explicitly given, including ``null``."""
        return "value" in self.model_fields_set

    def add_child(self, node: Node) -> None:
        """Append *node* to this node's children, creating the list on first use."""
        if self.children is None:
            self.children = []
        self.children.append(node)

    def find(self, key: str) -> Node | None:
        """Return the first direct child named *key*, or None."""
        for child in self.children or ():
            if child.key == key:
                return child
        return None

    def find_all(self, key: str) -> list[Node]:
        """Return every direct child named *key*, in source order."""
        return [child for child in self.children or () if child.key == key]

    def to_dict(self) -> dict[str, Any]:
        """Return the exchanged tree shape ``{key, value?, children?}``.

        Fields that were never set are omitted at every level. The tree is
        walked with an explicit stack, so nesting depth is not limited by the
        interpreter's recursion limit.
        """
        result = self._own_fields()
        pending: list[tuple[Node, dict[str, Any]]] = [(self, result)]
        while pending:
            node, out = pending.pop()
            if "children" not in node.model_fields_set:
                continue
            if node.children is None:
                out["children"] = None
                continue
            children: list[dict[str, Any]] = []
            out["children"] = children
            for child in node.children:
                child_out = child._own_fields()
                children.append(child_out)
                pending.append((child, child_out))
        return result

    def _own_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {"key": self.key}
        if self.has_value:
            fields["value"] = self.value
        return fields


# Resolve the forward reference in the self-referential model.
Node.model_rebuild()
