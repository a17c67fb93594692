"""Small helpers over tree-sitter nodes."""

from typing import Iterator, Optional, Union

from tree_sitter import Node


Number = Union[int, float]

_COMMENT = "comment"


def node_text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""


def iter_topdown(node: Node) -> Iterator[Node]:
    """Pre-order walk in source order, without recursion."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def named_args(node: Node) -> list:
    return [child for child in node.named_children if child.type != _COMMENT]


def unwrap_parens(node: Optional[Node]) -> Optional[Node]:
    while node is not None and node.type == "parenthesized_expression":
        inner = named_args(node)
        if not inner:
            break
        node = inner[0]
    return node


def operator_of(node: Node) -> Optional[str]:
    op = node.child_by_field_name("operator")
    return op.type if op is not None else None


def is_identifier(node: Optional[Node], name: str) -> bool:
    return node is not None and node.type == "identifier" and node_text(node) == name


def numeric_value(text: str) -> Optional[Number]:
    """
    Value of a numeric literal, None for BigInt literals.

    Handles hex/binary/octal prefixes and ``_`` separators; integral values
    come back as ``int``.
    """
    if text.endswith("n"):
        return None
    if text[:2].lower() in ("0x", "0b", "0o"):
        return int(text.replace("_", ""), 0)
    value = float(text.replace("_", ""))
    return int(value) if value.is_integer() else value


def first_syntax_error(root: Node) -> Optional[str]:
    """Describes the first ERROR or MISSING node, None for a clean tree."""
    if not root.has_error:
        return None
    for node in iter_topdown(root):
        row, column = node.start_point
        where = f"line {row + 1}, column {column + 1}"
        if node.is_missing:
            return f"Missing {node.type!r} at {where}"
        if node.type == "ERROR":
            snippet = node_text(node).split("\n")[0][:20]
            return f"Unexpected {snippet!r} at {where}"
    return "Invalid syntax"
