"""JavaScript/TypeScript parser built on tree-sitter.

Responsibility: load the TSX grammar once and turn source text into a
syntax tree, rejecting snippets that do not parse cleanly.
"""

import threading
from functools import lru_cache

import tree_sitter_typescript
from tree_sitter import Language, Parser, Tree

from .syntax_tree import first_syntax_error


class TreeSitterConfig:
    """Parser settings.

    TSX is a superset of JavaScript that also accepts JSX and TypeScript
    annotations. tree-sitter applies automatic semicolon insertion, so
    semicolon-free snippets parse the same as terminated ones.
    """

    ENCODING = "utf-8"


@lru_cache(maxsize=1)
def load_language() -> Language:
    """TSX grammar bundled with ``tree-sitter-typescript``."""
    return Language(tree_sitter_typescript.language_tsx())


class JavaScriptParser:
    """tree-sitter based JavaScript parser.

    Singleton so the grammar is loaded once per process. A tree-sitter
    ``Parser`` is not safe to share between threads, so calls are serialised.
    """

    _instance = None
    _parser = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize_parser()
        return cls._instance

    def _initialize_parser(self) -> None:
        self._parser = Parser(load_language())
        self._lock = threading.Lock()

    def parse(self, code: str) -> Tree:
        """Parses JavaScript source into a tree-sitter tree.

        Args:
            code: Source to parse.

        Returns:
            Tree rooted at a ``program`` node.

        Raises:
            ValueError: If the tree contains ERROR or MISSING nodes.
        """
        with self._lock:
            tree = self._parser.parse(code.encode(TreeSitterConfig.ENCODING))

        error = first_syntax_error(tree.root_node)
        if error is not None:
            raise ValueError(f"Syntax error: {error}")
        return tree


@lru_cache(maxsize=1)
def get_parser() -> JavaScriptParser:
    """Factory returning the singleton parser."""
    return JavaScriptParser()
