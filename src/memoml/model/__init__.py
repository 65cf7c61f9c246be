# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tree model for parsed MemoML documents."""

from memoml.model.node import SCHEMA_NAME, SCHEMA_VERSION, Node, Value

__all__ = [
    "Node",
    "SCHEMA_NAME",
    "SCHEMA_VERSION",
    "Value",
]
