"""
Syntax-tree scanner for JavaScript snippets.

This is also the fallback profile for any snippet the detector does not
recognise. The snippet is parsed with tree-sitter (TSX grammar, so JSX and
TypeScript annotations are accepted) and walked top-down in source order:

- ``for (init; test; update)``: ``i++`` linear, ``i *= k`` / ``i /= k``
  logarithmic, anything else linear ("Standard for loop").
- ``while (...)``: linear.
- ``function name(...)``: calls to ``name`` inside its body are recursive
  branches; ``name(n / k)`` gives the reduction factor and any arithmetic,
  comparison or bitwise binary expression in the body counts as linear
  extra work.
"""

import logging
from typing import Optional, Tuple

from tree_sitter import Node

from ..domain.growth import classify
from ..domain.recurrence import ExtraWork, RecurrenceParameters, solve
from ..infrastructure import get_parser
from ..infrastructure.syntax_tree import (
    Number,
    is_identifier,
    iter_topdown,
    named_args,
    node_text,
    numeric_value,
    operator_of,
    unwrap_parens,
)
from .base import ScanReport, StructuralScanner


logger = logging.getLogger(__name__)

_FUNCTION_DECLARATIONS = {"function_declaration", "generator_function_declaration"}
_LOGICAL_OPERATORS = {"&&", "||", "??"}


def is_binary(node: Node) -> bool:
    """Binary expression in the ESTree sense: logical operators excluded."""
    return node.type == "binary_expression" and operator_of(node) not in _LOGICAL_OPERATORS


def _division_literal(call: Node) -> Optional[Number]:
    """``k`` when the first argument of ``call`` is ``<expr> / k``."""
    arguments = call.child_by_field_name("arguments")
    if arguments is None:
        return None
    args = named_args(arguments)
    if not args:
        return None
    first = unwrap_parens(args[0])
    if not is_binary(first) or operator_of(first) != "/":
        return None
    right = unwrap_parens(first.child_by_field_name("right"))
    if right is None or right.type != "number":
        return None
    return numeric_value(node_text(right))


class JavaScriptScanner(StructuralScanner):
    name = "javascript"

    def scan(self, code: str) -> ScanReport:
        try:
            tree = get_parser().parse(code)
        except ValueError as exc:
            logger.warning("JavaScript snippet rejected by the parser: %s", exc)
            return ScanReport(error=f"JavaScript parsing error: {exc}")

        report = ScanReport()
        for node in iter_topdown(tree.root_node):
            if node.type == "for_statement":
                iterations, rationale = self._classify_for(node)
                report.add("For Loop", rationale, classify(iterations))
            elif node.type == "while_statement":
                report.add(
                    "While Loop",
                    "While loop with potentially n iterations",
                    classify("n"),
                )
            elif node.type in _FUNCTION_DECLARATIONS:
                self._analyze_function(node, report)
        return report

    @staticmethod
    def _classify_for(node: Node) -> Tuple[str, str]:
        update = unwrap_parens(node.child_by_field_name("increment"))
        if update is not None:
            op = operator_of(update)
            if update.type == "update_expression" and op == "++":
                return "n", "Linear loop: i++"
            if update.type == "augmented_assignment_expression" and op in ("*=", "/="):
                return "log n", f"Logarithmic loop: i {op} constant"
        return "n", "Standard for loop"

    @staticmethod
    def _analyze_function(node: Node, report: ScanReport) -> None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return
        name = node_text(name_node)

        calls = 0
        reduction: Number = 1
        extra_work = ExtraWork.CONSTANT
        for sub in iter_topdown(node):
            if sub.type == "call_expression" and is_identifier(
                sub.child_by_field_name("function"), name
            ):
                calls += 1
                factor = _division_literal(sub)
                if factor is not None:
                    reduction = factor
            elif is_binary(sub):
                extra_work = ExtraWork.LINEAR

        if calls == 0:
            return

        params = RecurrenceParameters(calls, reduction, extra_work)
        report.add(
            "Recursive Function",
            f"Recursive function with {calls} calls, n/{reduction} reduction, "
            f"{extra_work.value} extra work",
            solve(params),
        )
        report.space_complexity = classify(f"log_{reduction} n")
