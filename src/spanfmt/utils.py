"""Random utilities used by the formatter."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Sequence
from typing import NoReturn, Protocol, TypeVar

from .ast import ArgPar, Located, Node, NodeKind, TypeArg, TypeArgument, ValArg
from .errors import ContractViolation, NotImplementedYet
from .spans import RealSpan, Span, shift_span


logger = logging.getLogger(__name__)

T = TypeVar("T")

SHIFT_COLUMNS = 100
INDENT_UNIT = "  "


class Outputable(Protocol):
    def ppr(self) -> str: ...


def show_outputable(obj: Outputable) -> str:
    """Render something for diagnostics and debug output."""
    return obj.ppr()


def is_module(x: object) -> bool:
    """Return True if the given element of the tree is the whole module."""
    return isinstance(x, Node) and x.kind is NodeKind.MODULE


def not_implemented(construct: str) -> NoReturn:
    """Placeholder for things that are not yet implemented."""
    raise NotImplementedYet(construct)


def un_src_span(span: Span) -> RealSpan | None:
    if isinstance(span, RealSpan):
        return span
    return None


def get_start_line(node: Located[object]) -> int | None:
    """Return the line the node starts on, or None if its span is not real.

    Nodes without a line just do not take part in line-based grouping.
    """
    rs = un_src_span(node.span)
    return rs.start_line if rs is not None else None


def _require_real(node: Located[object]) -> RealSpan:
    rs = un_src_span(node.span)
    if rs is None:
        raise ContractViolation("expected a node with a real span", span=node.span)
    return rs


def get_real_start_line(node: Located[object]) -> int:
    return _require_real(node).start_line


def get_real_end_line(node: Located[object]) -> int:
    return _require_real(node).end_line


def shift_to_the_right(node: Located[T], amount: int = SHIFT_COLUMNS) -> Located[T]:
    """Shift the given located value to the right, keeping the payload."""
    return dataclasses.replace(node, span=shift_span(node.span, amount))


def separated_by_blank(loc: Callable[[T], Span], a: Sequence[T], b: Sequence[T]) -> bool:
    """Do two declaration groups have a blank line between them?"""
    if not a or not b:
        raise ContractViolation("separated_by_blank() requires two non-empty groups")
    end_a = un_src_span(loc(a[-1]))
    start_b = un_src_span(loc(b[0]))
    if end_a is None or start_b is None:
        logger.debug("no real span between groups, assuming no blank line")
        return False
    return start_b.start_line - end_a.end_line >= 2


def with_indent(txt: str) -> str:
    """Indent with 2 spaces for readability."""
    return INDENT_UNIT + txt


def type_arg_to_type(arg: TypeArgument) -> Located[Node]:
    if isinstance(arg, ValArg):
        return arg.term
    if isinstance(arg, TypeArg):
        return arg.type
    if isinstance(arg, ArgPar):
        not_implemented("ArgPar")
    raise TypeError(f"not a type argument: {type(arg)!r}")
