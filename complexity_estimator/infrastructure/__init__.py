"""
Infrastructure layer - External dependencies (tree-sitter grammar and parser)
"""

from .syntax_tree import iter_topdown, node_text, numeric_value
from .tree_sitter_parser import JavaScriptParser, get_parser, load_language

__all__ = [
    "JavaScriptParser",
    "get_parser",
    "load_language",
    "iter_topdown",
    "node_text",
    "numeric_value",
]
